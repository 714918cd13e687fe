########################################################################################
##
##                    TWO STAGE EXPLICIT RUNGE-KUTTA TABLES OF ORDER 2
##                                  (tables/rk2.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._tableau import RungeKuttaTable


# BASE TABLE ===========================================================================

class _RK2(RungeKuttaTable):
    """One parameter family of two stage 2nd order methods with an
    embedded Euler step for error estimation.

    .. math::

        k_1 &= f(t_n, y_n) \\\\
        k_2 &= f(t_n + \\alpha h, y_n + \\alpha h k_1) \\\\
        y_{n+1} &= y_n + h \\left( (1 - \\tfrac{1}{2\\alpha}) k_1
                   + \\tfrac{1}{2\\alpha} k_2 \\right)

    The dense output interpolates linearly between the step endpoints.

    Parameters
    ----------
    alpha : float
        time fraction of the second stage
    """

    def __init__(self, alpha):
        super().__init__()

        #free parameter of the family
        self.alpha = alpha

        #number of stages in RK scheme
        self.s = 2

        #order of scheme, embedded method and interpolant
        self.n = 2
        self.m = 1
        self.order_interpolant = 1

        #intermediate evaluation times
        self.eval_stages = [0.0, alpha]

        #butcher table
        self.BT = {1: [alpha]}

        #final update weights and embedded euler weights
        self.b = [1 - 1/(2*alpha), 1/(2*alpha)]
        self.b2 = [1.0, 0.0]

        #linear interpolant
        self.BI = [[0.0, w] for w in self.b]

        self._build()


# TABLES ===============================================================================

class MIDPOINT(_RK2):
    """Explicit midpoint method, second stage at the middle of the step.

    Characteristics
    ---------------
    * Order: 2 (propagating) / 1 (embedded)
    * Stages: 2
    * Interpolant order: 1
    """

    def __init__(self):
        super().__init__(alpha=1/2)


class HEUN2(_RK2):
    """Heun's method (explicit trapezoidal rule), second stage at the
    end of the step.

    Characteristics
    ---------------
    * Order: 2 (propagating) / 1 (embedded)
    * Stages: 2
    * Interpolant order: 1

    References
    ----------
    .. [1] Heun, K. (1900). "Neue Methoden zur approximativen Integration
           der Differentialgleichungen einer unabhängigen Veränderlichen".
           Zeitschrift für Mathematik und Physik, 45, 23-38.
    """

    def __init__(self):
        super().__init__(alpha=1.0)


class RALSTON2(_RK2):
    """Ralston's method, the member of the family with minimal
    truncation error bound.

    Characteristics
    ---------------
    * Order: 2 (propagating) / 1 (embedded)
    * Stages: 2
    * Interpolant order: 1

    References
    ----------
    .. [1] Ralston, A. (1962). "Runge-Kutta methods with minimum error
           bounds". Mathematics of Computation, 16(80), 431-437.
           :doi:`10.1090/S0025-5718-1962-0150954-0`
    """

    def __init__(self):
        super().__init__(alpha=2/3)
