#########################################################################################
##
##                           STEP SIZE CONTROLLERS
##                               (stepsize.py)
##
##         constant step size and error controlled adaptive step size based
##            on the embedded error estimate of the Runge-Kutta table
##
#########################################################################################

# IMPORTS ===============================================================================

import numpy as np

from ._constants import (
    SIM_TIMESTEP,
    SIM_TIMESTEP_MIN,
    SIM_TIMESTEP_MAX,
    SOL_TOLERANCE_LTE_ABS,
    SOL_TOLERANCE_LTE_REL,
    SOL_BETA,
    SOL_SCALE_MIN,
    SOL_SCALE_MAX
    )


# BASE CLASS ============================================================================

class Stepsize:
    """Interface of step size controllers.

    The driver asks for the next step size with 'get' and reports the
    embedded error estimate of every trial step to 'update', which decides
    whether the step is accepted and adjusts the next step size.
    """

    adaptive = False

    def __init__(self, dt=SIM_TIMESTEP):
        if dt <= 0:
            raise ValueError(f"step size must be positive, got {dt}")
        self.dt = dt


    def __repr__(self):
        return f"{self.__class__.__name__}(dt={self.dt})"


    def get(self):
        return self.dt


    def set(self, dt):
        self.dt = dt


    def update(self, err, y):
        """Accept or reject a trial step

        Parameters
        ----------
        err : array[float]
            embedded error estimate of the step
        y : array[float]
            solution at the end of the step

        Returns
        -------
        success : bool
            step is accepted
        """
        raise NotImplementedError


# CONTROLLERS ===========================================================================

class ConstantStepsize(Stepsize):
    """Fixed step size, every step is accepted"""

    def update(self, err, y):
        return True


class AdaptiveStepsize(Stepsize):
    """Step size control from the embedded error estimate.

    The error is scaled by the mixed tolerance and measured in the max norm

    .. math::

        \\epsilon = \\max_i \\frac{|e_i|}{a_{tol} + r_{tol} |y_i|}

    the step is accepted for :math:`\\epsilon \\leq 1` and the step size is
    rescaled by

    .. math::

        \\beta \\, \\epsilon^{-1/(q+1)}

    with the embedded order 'q', clipped to the allowed range. A step at the
    minimum step size is always accepted.

    Parameters
    ----------
    dt : float
        initial step size
    order : int
        order of the embedded method of the table
    dt_min : float
        lower bound of the step size
    dt_max : float
        upper bound of the step size
    tolerance_lte_abs : float
        absolute tolerance of the local truncation error
    tolerance_lte_rel : float
        relative tolerance of the local truncation error
    beta : float
        safety factor
    scale_min : float
        lower bound of the rescale factor
    scale_max : float
        upper bound of the rescale factor

    Attributes
    ----------
    error_norm : float
        scaled error norm of the last trial step
    forced : bool
        last step was accepted only because it hit 'dt_min'
    """

    adaptive = True

    def __init__(
        self,
        dt=SIM_TIMESTEP,
        order=4,
        dt_min=SIM_TIMESTEP_MIN,
        dt_max=SIM_TIMESTEP_MAX,
        tolerance_lte_abs=SOL_TOLERANCE_LTE_ABS,
        tolerance_lte_rel=SOL_TOLERANCE_LTE_REL,
        beta=SOL_BETA,
        scale_min=SOL_SCALE_MIN,
        scale_max=SOL_SCALE_MAX
        ):
        super().__init__(dt)

        if order < 1:
            raise ValueError(
                f"adaptive step size needs an embedded method, got order {order}"
                )
        if not 0 < dt_min <= dt_max:
            raise ValueError(f"invalid step size bounds [{dt_min}, {dt_max}]")

        self.order = order
        self.dt_min = dt_min
        self.dt_max = dt_max

        #error control parameters
        self.tolerance_lte_abs = tolerance_lte_abs
        self.tolerance_lte_rel = tolerance_lte_rel
        self.beta = beta
        self.scale_min = scale_min
        self.scale_max = scale_max

        self.error_norm = 0.0
        self.forced = False

        self.dt = float(np.clip(dt, dt_min, dt_max))


    def update(self, err, y):

        #error norm scaled by the mixed tolerance
        scale = self.tolerance_lte_abs + self.tolerance_lte_rel * np.abs(y)
        self.error_norm = np.max(np.abs(err) / scale) if len(err) else 0.0

        success = bool(self.error_norm <= 1.0)

        #steps at the lower bound cannot be refined anymore
        self.forced = not success and self.dt <= self.dt_min
        success = success or self.forced

        #rescale for the next step
        if self.error_norm > 0.0:
            factor = self.beta / self.error_norm ** (1 / (self.order + 1))
        else:
            factor = self.scale_max
        factor = np.clip(factor, self.scale_min, self.scale_max)

        self.dt = float(np.clip(self.dt * factor, self.dt_min, self.dt_max))

        return success
