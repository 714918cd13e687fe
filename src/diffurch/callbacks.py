#########################################################################################
##
##                                 CALLBACKS
##                               (callbacks.py)
##
##         functions of the state that run at the start, after every step,
##         at located events or at the end of the integration, with filters
##                   that throttle them and sinks for their output
##
#########################################################################################

# IMPORTS ===============================================================================

import math


# CLASS =================================================================================

class Callback:
    """Function of the state with filters and output sinks.

    The function is only called when all filters pass (evaluated in order,
    stopping at the first that fails). Its return value, unless 'None', is
    forwarded to every sink and stored as 'last'. Filters and sinks are
    added by chaining.

    Example
    -------
    Record the time and solution after every tenth step into a list:

    .. code-block:: python

        out = []
        C = Callback(lambda s: (s.t, s.y.copy())).every(10).to_list(out)

    Parameters
    ----------
    func : callable, None
        callback function 'func(state) -> value'

    Attributes
    ----------
    filters : list[callable]
        predicates 'pred(state) -> bool'
    sinks : list[callable]
        consumers of the callback output
    subdivision : int, None
        number of sub-intervals of the step to evaluate the callback on
    last : object
        most recent output
    """

    def __init__(self, func=None):
        self.func = func
        self.filters = []
        self.sinks = []
        self.subdivision = None
        self.last = None


    def __repr__(self):
        return f"Callback({self.func})"


    @classmethod
    def create(cls, value):
        """Normalize a callback specification, plain callables
        are wrapped without filters and sinks.
        """
        if isinstance(value, Callback):
            return value
        if callable(value):
            return cls(value)
        raise TypeError(f"callback must be callable, got {type(value).__name__}")


    def __call__(self, state):

        #interior points of the step from the dense output
        if self.subdivision is not None and state.t > state.t_prev:
            t_prev, h = state.t_prev, state.t - state.t_prev
            for i in range(1, self.subdivision):
                self._fire(state.at(t_prev + h * i / self.subdivision))

        self._fire(state)


    def _fire(self, state):
        if all(f(state) for f in self.filters):
            value = None if self.func is None else self.func(state)
            if value is not None:
                self.last = value
                for sink in self.sinks:
                    sink(value)


    # sinks -----------------------------------------------------------------------------

    def to(self, sink):
        """Forward the output to the callable 'sink'"""
        self.sinks.append(sink)
        return self


    def to_list(self, values):
        """Append the output to the list 'values'"""
        return self.to(values.append)


    def to_std(self):
        """Print the output to stdout"""
        return self.to(print)


    # filters ---------------------------------------------------------------------------

    def filter(self, pred):
        """Only run when 'pred(state)' is true"""
        self.filters.append(pred)
        return self


    def every(self, n):
        """Only run on the first and then every 'n'-th call"""
        if n < 1:
            raise ValueError(f"'n' must be positive, got {n}")

        counter = n - 1

        def _every(state):
            nonlocal counter
            counter += 1
            if counter >= n:
                counter -= n
            return counter == 0

        return self.filter(_every)


    def separated_by(self, delta):
        """Only run when at least 'delta' time passed since the last run"""

        last = -math.inf

        def _separated_by(state):
            nonlocal last
            if state.t >= last + delta:
                last = state.t
                return True
            return False

        return self.filter(_separated_by)


    def in_range(self, t_start=None, t_stop=None):
        """Only run for times in '[t_start, t_stop)', open ends for 'None'"""

        def _in_range(state):
            return (t_start is None or state.t >= t_start) and (t_stop is None or state.t < t_stop)

        return self.filter(_in_range)


    def once(self):
        """Only run on the first call"""
        return self.take(1)


    def take(self, n):
        """Only run on the first 'n' calls"""

        counter = 0

        def _take(state):
            nonlocal counter
            counter += 1
            return counter <= n

        return self.filter(_take)


    def times(self, start=0, stop=None):
        """Only run on the calls with (zero based) count in '[start, stop)'"""

        counter = 0

        def _times(state):
            nonlocal counter
            ret = counter >= start and (stop is None or counter < stop)
            counter += 1
            return ret

        return self.filter(_times)


    # subdivision -----------------------------------------------------------------------

    def subdivide(self, n):
        """Additionally run at 'n-1' equidistant interior points of
        every step, evaluated from the dense output.
        """
        if n < 1:
            raise ValueError(f"'n' must be positive, got {n}")
        self.subdivision = n
        return self
