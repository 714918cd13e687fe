#########################################################################################
##
##                              PERIODIC LOCATOR
##                             (events/periodic.py)
##
#########################################################################################

# IMPORTS ===============================================================================

import math

from ._locator import Locator


# LOCATOR ===============================================================================

class Periodic(Locator):
    """Fires at the times 'offset + i*period' for integer 'i'. The times
    are computed analytically, no event function is evaluated.

    Parameters
    ----------
    period : float
        time between two events
    offset : float
        time of one of the events
    """

    def __init__(self, period, offset=0.0):

        if period <= 0:
            raise ValueError(f"'period' must be positive, got {period}")

        self.period = period
        self.offset = offset


    def __repr__(self):
        return f"Periodic(period={self.period}, offset={self.offset})"


    def detect(self, state):
        n_prev = math.floor((state.t_prev - self.offset) / self.period)
        n_curr = math.floor((state.t - self.offset) / self.period)
        return n_prev < n_curr


    def locate(self, state):
        if self.detect(state):
            return state.t_prev - (state.t_prev - self.offset) % self.period + self.period
        return None
