#########################################################################################
##
##                           DIFFERENTIAL EQUATION
##                                (equation.py)
##
##         right hand side together with the declared delays, which define
##              how discontinuities of the solution propagate
##
#########################################################################################

# IMPORTS ===============================================================================

import numpy as np

from .events.propagation import Propagator


# HELPERS ===============================================================================

def _deviation(delay):
    """Deviation argument 'alpha(state)' and the constant lag (or 'None')
    of a delay given as a lag or as a callable deviation argument.
    """
    if callable(delay):
        return delay, None
    tau = float(delay)
    if tau < 0:
        raise ValueError(f"delays must be non-negative, got {delay}")
    return (lambda state: state.t - tau), tau


# CLASS =================================================================================

class Equation:
    """Differential equation 'dy/dt = rhs(state)'.

    The right hand side receives a state view with the attributes 't' and
    'y' and the method 'eval(t, order)' for delayed values ('order=0') or
    delayed derivatives ('order=1').

    Delays are declared so that the discontinuities of the solution can be
    tracked. A delay is either a constant lag 'tau' (deviation argument
    't - tau') or a callable deviation argument 'alpha(state) -> float'.

    Example
    -------
    Linear delay equation 'y'(t) = -y(t - 1)':

    .. code-block:: python

        E = Equation(lambda s: -s.eval(s.t - 1), delays=[1])

    Pantograph type neutral equation with deviation argument 't/2':

    .. code-block:: python

        E = Equation(
            lambda s: s.eval(s.t/2, 1),
            neutral_delays=[lambda s: s.t/2]
            )

    Parameters
    ----------
    rhs : callable
        right hand side 'rhs(state) -> array_like'
    delays : iterable[float | callable]
        retarded delays, the right hand side uses delayed values
    neutral_delays : iterable[float | callable]
        neutral delays, the right hand side uses delayed derivatives
    max_delay : float, None
        longest lookback of the right hand side, defaults to the largest
        constant lag, or 'inf' if any delay is given as a callable

    Attributes
    ----------
    deviations : list[tuple[callable, int]]
        deviation arguments with the smoothing order of their propagation
    """

    def __init__(self, rhs, delays=(), neutral_delays=(), max_delay=None):

        if not callable(rhs):
            raise TypeError(f"'rhs' must be callable, got {type(rhs).__name__}")

        self.rhs = rhs

        #deviation arguments with smoothing orders
        self.deviations = []
        lags = []
        for delays_, smoothing in ((delays, 1), (neutral_delays, 0)):
            for delay in delays_:
                alpha, tau = _deviation(delay)
                self.deviations.append((alpha, smoothing))
                lags.append(np.inf if tau is None else tau)

        #history has to cover the longest lookback
        if max_delay is None:
            max_delay = max(lags, default=0.0)
        elif max_delay < 0:
            raise ValueError(f"'max_delay' must be non-negative, got {max_delay}")

        self.max_delay = max_delay


    def __call__(self, state):
        return self.rhs(state)


    def __len__(self):
        return len(self.deviations)


    def propagators(self):
        """One discontinuity propagator per declared delay"""
        return [Propagator(alpha, smoothing) for alpha, smoothing in self.deviations]
