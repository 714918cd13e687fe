#########################################################################################
##
##                               INITIAL CONDITIONS
##                                  (initial.py)
##
##         value of the solution at the initial time and, for delay equations,
##                     the initial function on the past interval
##
#########################################################################################

# IMPORTS ===============================================================================

import numpy as np

from .errors import InvalidInitialCondition


# BASE CLASS ============================================================================

class InitialCondition:
    """Base class for initial conditions. Evaluated by the state for
    all times at or before the initial time.
    """

    def __call__(self, t, order=0):
        return self.eval(t, order)


    @classmethod
    def create(cls, value):
        """Normalize user input into an initial condition.

        - an 'InitialCondition' passes through
        - a pair of callables is a function with its derivative
        - a single callable is a function
        - anything else is a constant point

        Parameters
        ----------
        value : InitialCondition, callable, tuple[callable, callable], array_like
            initial condition specification

        Returns
        -------
        initial : InitialCondition
            normalized initial condition
        """
        if isinstance(value, InitialCondition):
            return value
        if isinstance(value, tuple) and len(value) == 2 and all(map(callable, value)):
            return FunctionWithDerivative(*value)
        if callable(value):
            return Function(value)
        return Point(value)


    def eval(self, t, order=0):
        """Evaluate the initial condition or one of its derivatives.

        Parameters
        ----------
        t : float
            evaluation time
        order : int
            derivative order

        Returns
        -------
        y : array[float]
            value of the initial condition (or derivative)
        """
        raise NotImplementedError


# VARIANTS ==============================================================================

class Point(InitialCondition):
    """Constant initial value. For delay equations this is the constant
    initial function, all its derivatives vanish.

    Parameters
    ----------
    value : float, array_like
        initial value
    """

    def __init__(self, value):
        self.value = np.atleast_1d(np.asarray(value, dtype=float))


    def __repr__(self):
        return f"Point({self.value})"


    def eval(self, t, order=0):
        if order == 0:
            return self.value.copy()
        return np.zeros_like(self.value)


class Function(InitialCondition):
    """Initial function 't -> y' for delay equations. Has no
    derivative, so it is not sufficient for neutral equations.

    Parameters
    ----------
    func : callable
        initial function of time
    """

    def __init__(self, func):
        self.func = func


    def eval(self, t, order=0):
        if order == 0:
            return np.atleast_1d(np.asarray(self.func(t), dtype=float))
        raise InvalidInitialCondition(
            f"derivative of order {order} requested from a value-only initial "
            f"function at t={t}, use 'FunctionWithDerivative' or 'Point' instead"
            )


class FunctionWithDerivative(InitialCondition):
    """Initial function together with its derivative, required for
    neutral delay equations.

    Parameters
    ----------
    func : callable
        initial function of time
    dfunc : callable
        derivative of the initial function
    """

    def __init__(self, func, dfunc):
        self.func = func
        self.dfunc = dfunc


    def eval(self, t, order=0):
        if order == 0:
            return np.atleast_1d(np.asarray(self.func(t), dtype=float))
        if order == 1:
            return np.atleast_1d(np.asarray(self.dfunc(t), dtype=float))
        raise InvalidInitialCondition(
            f"derivative of order {order} requested from an initial function "
            "that only provides its first derivative"
            )
