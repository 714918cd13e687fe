#########################################################################################
##
##                               EVENT LOCATORS
##                             (events/_locator.py)
##
##         pair of a detection and a location policy closing over an event
##                             function of the state
##
#########################################################################################

# IMPORTS ===============================================================================

from .detection import Sign, Switch
from .location import Bisection, BisectionBool


# BASE CLASS ============================================================================

class Locator:
    """Base class for event locators.

    After every trial step the scheduler calls 'locate', which returns
    the time of the event inside '(t_prev, t]' or 'None' if there is no
    event in the step.
    """

    def detect(self, state):
        raise NotImplementedError


    def locate(self, state):
        raise NotImplementedError


# LOCATOR ===============================================================================

class Loc(Locator):
    """Event locator for a user defined event function.

    The event function receives a state (the live 'State' at the end of
    the step, its previous point, or a view at an intermediate time) and
    returns a float or, for boolean detection policies, a bool.

    Example
    -------
    Locate the bounce of a falling ball at the ground:

    .. code-block:: python

        L = Loc(lambda s: s.y[0], Falling(), Bisection())

    Parameters
    ----------
    func : callable
        event function 'func(state) -> float | bool'
    detection : Detection
        detection policy, default is any sign change
    location : Location
        location policy, default is bisection
    """

    def __init__(self, func, detection=None, location=None):

        self.func = func
        self.detection = Sign() if detection is None else detection
        self.location = Bisection() if location is None else location

        if self.detection.boolean and self.location.scalar:
            raise ValueError(
                f"location '{self.location}' needs a scalar event function, "
                f"but detection '{self.detection}' is boolean"
                )


    def __repr__(self):
        return f"Loc({self.func}, {self.detection}, {self.location})"


    def eval_curr(self, state):
        return self.func(state)


    def eval_prev(self, state):
        return self.func(state.prev)


    def eval_at(self, state, t):
        return self.func(state.at(t))


    def detect(self, state):
        return self.detection.detect(self, state)


    def locate(self, state):
        if self.detect(state):
            return self.location.locate(self, state)
        return None


# HELPERS ===============================================================================

def loc_sign(func):
    """Locator for any sign change of 'func', located by bisection"""
    return Loc(func, Sign(), Bisection())


def loc_bool(func):
    """Locator for any flip of the boolean 'func', located by bisection"""
    return Loc(func, Switch(), BisectionBool())
