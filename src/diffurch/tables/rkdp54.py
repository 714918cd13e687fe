########################################################################################
##
##                    DORMAND-PRINCE EXPLICIT RUNGE-KUTTA TABLE
##                                 (tables/rkdp54.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._tableau import RungeKuttaTable


# TABLES ===============================================================================

class RKDP54(RungeKuttaTable):
    """Dormand-Prince 5(4) pair (DOPRI5). Seven stages, 5th order with
    embedded 4th order error estimate and the FSAL property.

    The dense output is Shampine's 4th order continuous extension, the
    same one used by MATLAB's ``ode45``.

    Characteristics
    ---------------
    * Order: 5 (propagating) / 4 (embedded)
    * Stages: 7 (FSAL)
    * Interpolant order: 4

    Note
    ----
    Recommended default for non-stiff problems, with or without delays.

    References
    ----------
    .. [1] Dormand, J. R., & Prince, P. J. (1980). "A family of embedded
           Runge-Kutta formulae". Journal of Computational and Applied
           Mathematics, 6(1), 19-26.
           :doi:`10.1016/0771-050X(80)90013-3`
    .. [2] Shampine, L. F. (1986). "Some practical Runge-Kutta formulas".
           Mathematics of Computation, 46(173), 135-150.
           :doi:`10.1090/S0025-5718-1986-0815836-3`

    """

    def __init__(self):
        super().__init__()

        #number of stages in RK scheme
        self.s = 7

        #order of scheme, embedded method and interpolant
        self.n = 5
        self.m = 4
        self.order_interpolant = 4

        #intermediate evaluation times
        self.eval_stages = [0.0, 1/5, 3/10, 4/5, 8/9, 1.0, 1.0]

        #butcher table
        self.BT = {
            1: [       1/5],
            2: [      3/40,        9/40],
            3: [     44/45,      -56/15,       32/9],
            4: [19372/6561, -25360/2187, 64448/6561, -212/729],
            5: [ 9017/3168,     -355/33, 46732/5247,   49/176, -5103/18656],
            6: [    35/384,         0.0,   500/1113,  125/192,  -2187/6784, 11/84]
            }

        #final update and embedded weights
        self.b = [35/384, 0.0, 500/1113, 125/192, -2187/6784, 11/84, 0.0]
        self.b2 = [5179/57600, 0.0, 7571/16695, 393/640, -92097/339200, 187/2100, 1/40]

        #quartic interpolant
        self.BI = [
            [0.0, 1.0,     -183/64,     37/12,      -145/128],
            [0.0],
            [0.0, 0.0,   1500/371, -1000/159,      1000/371],
            [0.0, 0.0,    -125/32,    125/12,       -375/64],
            [0.0, 0.0,  9477/3392,  -729/106,   25515/6784],
            [0.0, 0.0,      -11/7,      11/3,        -55/28],
            [0.0, 0.0,        3/2,      -4.0,           5/2]
            ]

        self._build()
