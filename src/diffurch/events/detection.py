#########################################################################################
##
##                              EVENT DETECTION POLICIES
##                              (events/detection.py)
##
##         decide from the values of the event function at the endpoints of a
##                step whether an event happened inside of the step
##
#########################################################################################


# BASE ==================================================================================

class Detection:
    """Base class for detection policies.

    A policy receives the locator and the state after a trial step and
    evaluates the event function of the locator at the step endpoints as
    needed. Policies for boolean event functions set 'boolean'.
    """

    boolean = False

    def __repr__(self):
        return f"{self.__class__.__name__}()"


    def detect(self, loc, state):
        raise NotImplementedError


# SCALAR FUNCTIONS ======================================================================

class Sign(Detection):
    """Any sign change of the event function"""

    def detect(self, loc, state):
        f_curr = loc.eval_curr(state)
        f_prev = loc.eval_prev(state)
        return (f_curr >= 0 and f_prev < 0) or (f_curr <= 0 and f_prev > 0)


class Rising(Detection):
    """Sign change from negative to non-negative"""

    def detect(self, loc, state):
        return loc.eval_curr(state) >= 0 and loc.eval_prev(state) < 0


class Falling(Detection):
    """Sign change from positive to non-positive"""

    def detect(self, loc, state):
        return loc.eval_curr(state) <= 0 and loc.eval_prev(state) > 0


class WhilePositive(Detection):
    """Fires after every step that ends with a non-negative value"""

    def detect(self, loc, state):
        return loc.eval_curr(state) >= 0


class WhileNegative(Detection):
    """Fires after every step that ends with a non-positive value"""

    def detect(self, loc, state):
        return loc.eval_curr(state) <= 0


# BOOLEAN FUNCTIONS =====================================================================

class Switch(Detection):
    """Any flip of a boolean event function"""

    boolean = True

    def detect(self, loc, state):
        return loc.eval_curr(state) != loc.eval_prev(state)


class SwitchTrue(Detection):
    """Flip from false to true"""

    boolean = True

    def detect(self, loc, state):
        return bool(loc.eval_curr(state)) and not loc.eval_prev(state)


class SwitchFalse(Detection):
    """Flip from true to false"""

    boolean = True

    def detect(self, loc, state):
        return not loc.eval_curr(state) and bool(loc.eval_prev(state))


class WhileTrue(Detection):
    """Fires after every step that ends with a true value"""

    boolean = True

    def detect(self, loc, state):
        return bool(loc.eval_curr(state))


class WhileFalse(Detection):
    """Fires after every step that ends with a false value"""

    boolean = True

    def detect(self, loc, state):
        return not loc.eval_curr(state)
