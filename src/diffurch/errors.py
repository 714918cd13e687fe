#########################################################################################
##
##                                ERROR DEFINITIONS
##                                   (errors.py)
##
##          conditions raised when a run is ill-specified, they are never
##                       caught inside the integrator itself
##
#########################################################################################


# BASE ==================================================================================

class DiffurchError(Exception):
    """Base class for all errors raised by the integrator"""
    pass


# HISTORY ===============================================================================

class HistoryError(DiffurchError):
    """A query of the solution history could not be served"""
    pass


class HistoryEvicted(HistoryError):
    """The requested time precedes the oldest retained history
    entry. The declared maximum delay of the equation is too small.

    Parameters
    ----------
    t : float
        requested time
    t_first : float
        oldest time still available
    """

    def __init__(self, t, t_first):
        self.t = t
        self.t_first = t_first
        super().__init__(
            f"history at t={t} was already evicted, oldest available "
            f"time is t={t_first} (declared 'max_delay' is too small)"
            )


class HistoryNotYetComputed(HistoryError):
    """The requested time lies ahead of the most recently
    computed point, the right hand side references the future.

    Parameters
    ----------
    t : float
        requested time
    t_last : float
        most recent time available
    """

    def __init__(self, t, t_last):
        self.t = t
        self.t_last = t_last
        super().__init__(
            f"history at t={t} is not yet computed, most recent "
            f"available time is t={t_last}"
            )


# INITIAL CONDITION =====================================================================

class InvalidInitialCondition(DiffurchError):
    """The initial condition cannot provide what was requested,
    for example a derivative of a value-only function.
    """
    pass
