########################################################################################
##
##                   THREE STAGE EXPLICIT RUNGE-KUTTA TABLES OF ORDER 3
##                                  (tables/rk3.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._tableau import RungeKuttaTable


# BASE TABLE ===========================================================================

class _RK3(RungeKuttaTable):
    """Two parameter family of three stage 3rd order methods, parametrized
    by the time fractions of the second and third stage.

    The coupling coefficients and weights follow from the order conditions

    .. math::

        a_{21} &= \\alpha \\\\
        a_{31} &= \\frac{\\beta}{\\alpha}
                  \\frac{\\beta - 3\\alpha(1 - \\alpha)}{3\\alpha - 2} \\\\
        a_{32} &= \\frac{\\beta}{\\alpha} \\frac{\\alpha - \\beta}{3\\alpha - 2}

    The embedded 2nd order method uses the first two stages only, the dense
    output interpolates linearly.

    Parameters
    ----------
    alpha : float
        time fraction of the second stage
    beta : float
        time fraction of the third stage
    """

    def __init__(self, alpha, beta):
        super().__init__()

        #free parameters of the family
        self.alpha = alpha
        self.beta = beta

        #number of stages in RK scheme
        self.s = 3

        #order of scheme, embedded method and interpolant
        self.n = 3
        self.m = 2
        self.order_interpolant = 1

        #intermediate evaluation times
        self.eval_stages = [0.0, alpha, beta]

        #butcher table
        a, b = alpha, beta
        self.BT = {
            1: [a],
            2: [b/a * (b - 3*a*(1 - a))/(3*a - 2), b/a * (a - b)/(3*a - 2)]
            }

        #final update weights
        self.b = [
            1 - (3*a + 3*b - 2)/(6*a*b),
            (3*b - 2)/(6*a*(b - a)),
            (2 - 3*a)/(6*b*(b - a))
            ]

        #embedded two stage method
        self.b2 = [1 - 1/(2*a), 1/(2*a), 0.0]

        #linear interpolant
        self.BI = [[0.0, w] for w in self.b]

        self._build()


# TABLES ===============================================================================

class KUTTA3(_RK3):
    """Kutta's third order method.

    Characteristics
    ---------------
    * Order: 3 (propagating) / 2 (embedded)
    * Stages: 3
    * Interpolant order: 1

    References
    ----------
    .. [1] Kutta, W. (1901). "Beitrag zur näherungsweisen Integration totaler
           Differentialgleichungen". Zeitschrift für Mathematik und Physik,
           46, 435-453.
    """

    def __init__(self):
        super().__init__(alpha=1/2, beta=1.0)


class HEUN3(_RK3):
    """Heun's third order method.

    Characteristics
    ---------------
    * Order: 3 (propagating) / 2 (embedded)
    * Stages: 3
    * Interpolant order: 1
    """

    def __init__(self):
        super().__init__(alpha=1/3, beta=2/3)


class RALSTON3(_RK3):
    """Ralston's third order method with minimal truncation error bound.

    Characteristics
    ---------------
    * Order: 3 (propagating) / 2 (embedded)
    * Stages: 3
    * Interpolant order: 1

    References
    ----------
    .. [1] Ralston, A. (1962). "Runge-Kutta methods with minimum error
           bounds". Mathematics of Computation, 16(80), 431-437.
           :doi:`10.1090/S0025-5718-1962-0150954-0`
    """

    def __init__(self):
        super().__init__(alpha=1/2, beta=3/4)


class WRAY3(_RK3):
    """Van der Houwen's / Wray's third order method, can be implemented
    with two registers (low storage).

    Characteristics
    ---------------
    * Order: 3 (propagating) / 2 (embedded)
    * Stages: 3
    * Interpolant order: 1
    """

    def __init__(self):
        super().__init__(alpha=8/15, beta=2/3)


class SSPRK3(_RK3):
    """Strong stability preserving Runge-Kutta method of order 3
    (Shu-Osher), a convex combination of forward Euler steps.

    Characteristics
    ---------------
    * Order: 3 (propagating) / 2 (embedded)
    * Stages: 3
    * Interpolant order: 1
    * SSP coefficient: 1

    References
    ----------
    .. [1] Shu, C.-W., & Osher, S. (1988). "Efficient implementation of
           essentially non-oscillatory shock-capturing schemes". Journal of
           Computational Physics, 77(2), 439-471.
           :doi:`10.1016/0021-9991(88)90177-5`
    """

    def __init__(self):
        super().__init__(alpha=1.0, beta=1/2)
