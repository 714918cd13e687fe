#########################################################################################
##
##                              STABLE INDEX DEQUE
##                          (utils/stableindexdeque.py)
##
##         Double ended queue whose element indices are not shifted when
##         elements are removed from the front. Cursors into the queue stay
##                         valid while the queue is pruned.
##
#########################################################################################

# IMPORTS ===============================================================================

from collections import deque


# CLASS =================================================================================

class StableIndexDeque:
    """Deque wrapper with absolute indexing.

    Every appended element gets the next absolute index, popping from
    the front increments the index of the front element instead of
    shifting the others.

    Example
    -------

    .. code-block:: python

        q = StableIndexDeque([1, 2, 3])
        q.popleft()

        q[1] #2
        q[2] #3

    Parameters
    ----------
    items : iterable
        initial elements, indexed from zero

    Attributes
    ----------
    offset : int
        absolute index of the front element
    """

    def __init__(self, items=()):
        self._deque = deque(items)
        self.offset = 0


    def __len__(self):
        return len(self._deque)


    def __bool__(self):
        return bool(self._deque)


    def __iter__(self):
        return iter(self._deque)


    def __repr__(self):
        return f"StableIndexDeque(offset={self.offset}, items={list(self._deque)})"


    def __getitem__(self, index):
        if index < 0:
            index += self.end
        if not self.offset <= index < self.end:
            raise IndexError(f"index {index} out of range [{self.offset}, {self.end})")
        return self._deque[index - self.offset]


    def __setitem__(self, index, value):
        if index < 0:
            index += self.end
        if not self.offset <= index < self.end:
            raise IndexError(f"index {index} out of range [{self.offset}, {self.end})")
        self._deque[index - self.offset] = value


    @property
    def end(self):
        """absolute index one past the last element"""
        return self.offset + len(self._deque)


    def get(self, index, default=None):
        """Element at absolute 'index' or 'default' if it is
        not (or no longer) stored.
        """
        if self.offset <= index < self.end:
            return self._deque[index - self.offset]
        return default


    def append(self, value):
        self._deque.append(value)


    def insert(self, index, value):
        """Insert before the absolute 'index', the indices
        of all following elements shift by one.
        """
        if not self.offset <= index <= self.end:
            raise IndexError(f"index {index} out of range [{self.offset}, {self.end}]")
        self._deque.insert(index - self.offset, value)


    def popleft(self):
        value = self._deque.popleft()
        self.offset += 1
        return value


    def items(self, start=None):
        """Iterate '(index, element)' pairs, optionally
        starting from the absolute index 'start'.
        """
        start = self.offset if start is None else max(start, self.offset)
        for index in range(start, self.end):
            yield index, self._deque[index - self.offset]
