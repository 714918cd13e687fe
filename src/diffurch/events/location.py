#########################################################################################
##
##                              EVENT LOCATION POLICIES
##                               (events/location.py)
##
##         find the time of an already detected event inside of the step,
##          either at a fixed position or by root finding on the dense
##                                   output
##
#########################################################################################

# IMPORTS ===============================================================================

from .._constants import LOC_ITERATIONS, LOC_EPSILON


# BASE ==================================================================================

class Location:
    """Base class for location policies. Only called after the detection
    policy of the locator fired. Policies that need a scalar event function
    set 'scalar'.
    """

    scalar = False

    def __repr__(self):
        return f"{self.__class__.__name__}()"


    def locate(self, loc, state):
        raise NotImplementedError


# FIXED POSITION ========================================================================

class StepBegin(Location):
    """Event at the start of the step"""

    def locate(self, loc, state):
        return state.t_prev


class StepEnd(Location):
    """Event at the end of the step"""

    def locate(self, loc, state):
        return state.t


class StepMiddle(Location):
    """Event in the middle of the step"""

    def locate(self, loc, state):
        return 0.5 * (state.t_prev + state.t)


# ROOT FINDING ==========================================================================

class Lerp(Location):
    """Zero of the linear interpolation of the event function
    between the step endpoints. No additional evaluations.
    """

    scalar = True

    def locate(self, loc, state):
        f_curr = loc.eval_curr(state)
        f_prev = loc.eval_prev(state)
        return (f_curr * state.t_prev - f_prev * state.t) / (f_curr - f_prev)


class Bisection(Location):
    """Bisection on the event function evaluated on the dense output.

    The bracket is oriented such that its left end has a negative function
    value. After a fixed budget of iterations (the number of mantissa bits),
    the later of the two bracket ends is returned, so the event time is
    never before the actual crossing.

    Parameters
    ----------
    iterations : int
        number of bisection iterations
    """

    scalar = True

    def __init__(self, iterations=LOC_ITERATIONS):
        self.iterations = iterations


    def locate(self, loc, state):

        l, r = state.t_prev, state.t

        #left end of the bracket on the negative side
        f_curr = loc.eval_curr(state)
        if f_curr < 0 or (f_curr == 0 and loc.eval_prev(state) > 0):
            l, r = r, l

        for _ in range(self.iterations):
            m = 0.5 * (l + r)
            if loc.eval_at(state, m) < 0:
                l = m
            else:
                r = m

        return max(l, r)


class BisectionBool(Location):
    """Bisection for boolean event functions, the left end of the
    bracket is on the false side.

    Parameters
    ----------
    iterations : int
        number of bisection iterations
    """

    def __init__(self, iterations=LOC_ITERATIONS):
        self.iterations = iterations


    def locate(self, loc, state):

        l, r = state.t_prev, state.t

        #left end of the bracket on the false side
        if loc.eval_prev(state):
            l, r = r, l

        for _ in range(self.iterations):
            m = 0.5 * (l + r)
            if loc.eval_at(state, m):
                r = m
            else:
                l = m

        return max(l, r)


class RegulaFalsi(Location):
    """Regula falsi (false position) on the event function evaluated
    on the dense output, stops early once the function value at the
    secant root is below the tolerance.

    Parameters
    ----------
    iterations : int
        max number of iterations
    tolerance : float
        early exit tolerance for the function value
    """

    scalar = True

    def __init__(self, iterations=LOC_ITERATIONS, tolerance=LOC_EPSILON):
        self.iterations = iterations
        self.tolerance = tolerance


    def locate(self, loc, state):

        l, r = state.t_prev, state.t
        f_l, f_r = loc.eval_prev(state), loc.eval_curr(state)

        #left end of the bracket on the negative side
        if f_r < 0:
            l, r, f_l, f_r = r, l, f_r, f_l

        m = r
        for _ in range(self.iterations):

            #degenerate bracket
            if f_r == f_l:
                break

            m = (f_r * l - f_l * r) / (f_r - f_l)
            f_m = loc.eval_at(state, m)

            if f_m < 0:
                l, f_l = m, f_m
            else:
                r, f_r = m, f_m

            if abs(f_m) < self.tolerance:
                break

        return m
