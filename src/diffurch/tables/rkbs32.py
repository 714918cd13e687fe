########################################################################################
##
##                   BOGACKI-SHAMPINE EXPLICIT RUNGE-KUTTA TABLE
##                                 (tables/rkbs32.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._tableau import RungeKuttaTable


# TABLES ===============================================================================

class RKBS32(RungeKuttaTable):
    """Bogacki-Shampine 3(2) pair. Four stages, 3rd order with embedded
    2nd order error estimate and the FSAL property.

    The last stage is evaluated at the new point, so the effective cost is
    three right hand side evaluations per step. Since the endpoint
    derivatives are both available, the dense output is the cubic Hermite
    interpolant.

    Characteristics
    ---------------
    * Order: 3 (propagating) / 2 (embedded)
    * Stages: 4 (FSAL)
    * Interpolant order: 3

    Note
    ----
    Efficient at loose tolerances. This is the method behind MATLAB's
    ``ode23``.

    References
    ----------
    .. [1] Bogacki, P., & Shampine, L. F. (1989). "A 3(2) pair of Runge-Kutta
           formulas". Applied Mathematics Letters, 2(4), 321-325.
           :doi:`10.1016/0893-9659(89)90079-7`

    """

    def __init__(self):
        super().__init__()

        #number of stages in RK scheme
        self.s = 4

        #order of scheme, embedded method and interpolant
        self.n = 3
        self.m = 2
        self.order_interpolant = 3

        #intermediate evaluation times
        self.eval_stages = [0.0, 1/2, 3/4, 1.0]

        #butcher table
        self.BT = {
            1: [1/2],
            2: [0.0, 3/4],
            3: [2/9, 1/3, 4/9]
            }

        #final update and embedded weights
        self.b = [2/9, 1/3, 4/9, 0.0]
        self.b2 = [7/24, 1/4, 1/3, 1/8]

        #cubic hermite interpolant
        self.BI = [
            [0.0, 1.0, -4/3,  5/9],
            [0.0, 0.0,  1.0, -2/3],
            [0.0, 0.0,  4/3, -8/9],
            [0.0, 0.0, -1.0,  1.0]
            ]

        self._build()
