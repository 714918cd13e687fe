########################################################################################
##
##                       CLASSICAL EXPLICIT RUNGE-KUTTA TABLES
##                                  (tables/rk4.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._tableau import RungeKuttaTable


# TABLES ===============================================================================

class RK4(RungeKuttaTable):
    """Classical four-stage, 4th order explicit Runge-Kutta method.

    .. math::

        k_1 &= f(t_n,\\; y_n) \\\\
        k_2 &= f\\!\\left(t_n + \\tfrac{h}{2},\\; y_n + \\tfrac{h}{2}\\,k_1\\right) \\\\
        k_3 &= f\\!\\left(t_n + \\tfrac{h}{2},\\; y_n + \\tfrac{h}{2}\\,k_2\\right) \\\\
        k_4 &= f(t_n + h,\\; y_n + h\\,k_3) \\\\
        y_{n+1} &= y_n + \\tfrac{h}{6}(k_1 + 2k_2 + 2k_3 + k_4)

    The embedded method is the explicit midpoint rule (second stage only),
    the dense output is the cubic continuous extension.

    Characteristics
    ---------------
    * Order: 4 (propagating) / 2 (embedded)
    * Stages: 4
    * Interpolant order: 3

    Note
    ----
    The standard fixed-step table. For problems with delays it is the
    natural choice when the step size is known a priori, since the cubic
    interpolant keeps the order of the scheme close to 4 for the delayed
    arguments.

    References
    ----------
    .. [1] Kutta, W. (1901). "Beitrag zur näherungsweisen Integration totaler
           Differentialgleichungen". Zeitschrift für Mathematik und Physik,
           46, 435-453.
    .. [2] Hairer, E., Nørsett, S. P., & Wanner, G. (1993). "Solving Ordinary
           Differential Equations I: Nonstiff Problems". Springer Series in
           Computational Mathematics, Vol. 8.
           :doi:`10.1007/978-3-540-78862-1`

    """

    def __init__(self):
        super().__init__()

        #number of stages in RK scheme
        self.s = 4

        #order of scheme, embedded method and interpolant
        self.n = 4
        self.m = 2
        self.order_interpolant = 3

        #intermediate evaluation times
        self.eval_stages = [0.0, 0.5, 0.5, 1.0]

        #butcher table
        self.BT = {
            1: [1/2],
            2: [0.0, 1/2],
            3: [0.0, 0.0, 1.0]
            }

        #final update and embedded (midpoint) weights
        self.b = [1/6, 1/3, 1/3, 1/6]
        self.b2 = [0.0, 1.0, 0.0, 0.0]

        #cubic interpolant
        self.BI = [
            [0.0, 1.0, -3/2,  2/3],
            [0.0, 0.0,  1.0, -2/3],
            [0.0, 0.0,  1.0, -2/3],
            [0.0, 0.0, -1/2,  2/3]
            ]

        self._build()


class RK43(RungeKuttaTable):
    """Zonneveld 4(3) pair. The classical 4th order method with a fifth
    stage at 'c=3/4' that provides an embedded 3rd order error estimate.

    Characteristics
    ---------------
    * Order: 4 (propagating) / 3 (embedded)
    * Stages: 5
    * Interpolant order: 3

    References
    ----------
    .. [1] Zonneveld, J. A. (1964). "Automatic numerical integration".
           Mathematical Centre Tracts 8, Mathematisch Centrum, Amsterdam.
    .. [2] Hairer, E., Nørsett, S. P., & Wanner, G. (1993). "Solving Ordinary
           Differential Equations I: Nonstiff Problems". Springer Series in
           Computational Mathematics, Vol. 8.
           :doi:`10.1007/978-3-540-78862-1`

    """

    def __init__(self):
        super().__init__()

        #number of stages in RK scheme
        self.s = 5

        #order of scheme, embedded method and interpolant
        self.n = 4
        self.m = 3
        self.order_interpolant = 3

        #intermediate evaluation times
        self.eval_stages = [0.0, 0.5, 0.5, 1.0, 0.75]

        #butcher table
        self.BT = {
            1: [ 1/2],
            2: [ 0.0,  1/2],
            3: [ 0.0,  0.0,   1.0],
            4: [5/32, 7/32, 13/32, -1/32]
            }

        #final update and embedded weights
        self.b = [1/6, 1/3, 1/3, 1/6, 0.0]
        self.b2 = [-1/2, 7/3, 7/3, 13/6, -16/3]

        #cubic interpolant, the error stage does not contribute
        self.BI = [
            [0.0, 1.0, -3/2,  2/3],
            [0.0, 0.0,  1.0, -2/3],
            [0.0, 0.0,  1.0, -2/3],
            [0.0, 0.0, -1/2,  2/3],
            [0.0]
            ]

        self._build()
