#########################################################################################
##
##                           HISTORY OF COMMITTED STEPS
##                                  (history.py)
##
##         time ordered buffer of committed steps with their stage derivatives,
##           used to evaluate the solution (and delayed arguments) at past
##                         times through dense output
##
#########################################################################################

# IMPORTS ===============================================================================

import numpy as np

from collections import deque
from bisect import bisect_left

from .errors import HistoryEvicted, HistoryNotYetComputed


# CLASS =================================================================================

class History:
    """Rolling buffer of committed steps.

    Every entry '(t_i, y_i, k_i)' holds the solution at the end of a step
    together with the stage derivatives 'k_i' of that step. The interval
    '(t_{i-1}, t_i]' is reconstructed by the dense output of the table,
    starting from 'y_{i-1}'. The first entry is the seed of the buffer and
    carries no stage derivatives.

    Entry times are strictly increasing. A jump of the solution at the last
    time is represented by rebasing the value of the last entry, queries
    exactly at the jump time then return the left limit.

    Parameters
    ----------
    table : RungeKuttaTable
        table that provides the dense output
    t : float
        time of the seed entry
    y : array[float]
        value of the seed entry

    Attributes
    ----------
    times : deque[float]
        entry times
    values : deque[array[float]]
        solution values at the entry times
    stages : deque[array[float]]
        stage derivatives of the steps ending at the entry times
    """

    def __init__(self, table, t, y):

        self.table = table

        #seed entry
        self.times = deque([t])
        self.values = deque([np.array(y, dtype=float)])
        self.stages = deque([None])


    def __len__(self):
        return len(self.times)


    @property
    def t_first(self):
        return self.times[0]


    @property
    def t_last(self):
        return self.times[-1]


    def append(self, t, y, k):
        """Commit a step ending at time 't'.

        Parameters
        ----------
        t : float
            end time of the step, must exceed the last entry time
        y : array[float]
            solution at the end of the step
        k : array[float]
            stage derivatives of the step
        """
        if t <= self.times[-1]:
            raise ValueError(
                f"history times must be strictly increasing, got t={t} "
                f"after t={self.times[-1]}"
                )
        self.times.append(t)
        self.values.append(y)
        self.stages.append(k)


    def rebase(self, t, y):
        """Replace the value of the most recent entry at time 't',
        the following step starts from the new value.
        """
        if t != self.times[-1]:
            raise ValueError(
                f"can only rebase the last history entry at t={self.times[-1]}, got t={t}"
                )
        self.values[-1] = np.array(y, dtype=float)


    def prune(self, t_tail):
        """Drop entries that are not needed to evaluate
        the history at times 't >= t_tail'.
        """
        while len(self.times) > 1 and self.times[1] < t_tail:
            self.times.popleft()
            self.values.popleft()
            self.stages.popleft()


    def eval(self, t, order=0):
        """Evaluate the committed solution or its derivative
        at time 't' via dense output.

        Parameters
        ----------
        t : float
            evaluation time
        order : int
            derivative order

        Returns
        -------
        y : array[float]
            interpolated value or derivative
        """

        #first entry with time >= t
        i = bisect_left(self.times, t)

        if i == len(self.times):
            raise HistoryNotYetComputed(t, self.times[-1])

        if i == 0:
            if t < self.times[0]:
                raise HistoryEvicted(t, self.times[0])

            #exactly at the oldest entry, use the right side interval
            if order == 0:
                return self.values[0].copy()
            if len(self.times) == 1:
                raise HistoryNotYetComputed(t, self.times[-1])
            i = 1

        t_0, t_1 = self.times[i-1], self.times[i]
        h = t_1 - t_0
        theta = (t - t_0) / h

        return self.table.interpolate(self.values[i-1], self.stages[i], h, theta, order)
