########################################################################################
##
##                          EXPLICIT EULER RUNGE-KUTTA TABLE
##                                 (tables/euler.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._tableau import RungeKuttaTable


# TABLES ===============================================================================

class EULER(RungeKuttaTable):
    """Explicit forward Euler method. First-order, single-stage.

    .. math::

        y_{n+1} = y_n + h \\, f(t_n, y_n)

    The dense output is the linear interpolation between the step
    endpoints.

    Characteristics
    ---------------
    * Order: 1
    * Stages: 1
    * Interpolant order: 1
    * No embedded error estimate

    Note
    ----
    The cheapest table per step but also the least accurate. Mostly useful
    for testing the event and delay machinery, where the exact placement of
    steps matters more than accuracy.

    References
    ----------
    .. [1] Hairer, E., Nørsett, S. P., & Wanner, G. (1993). "Solving Ordinary
           Differential Equations I: Nonstiff Problems". Springer Series in
           Computational Mathematics, Vol. 8.
           :doi:`10.1007/978-3-540-78862-1`

    """

    def __init__(self):
        super().__init__()

        #number of stages in RK scheme
        self.s = 1

        #order of scheme, interpolant and no embedded method
        self.n = 1
        self.m = 0
        self.order_interpolant = 1

        #intermediate evaluation times
        self.eval_stages = [0.0]

        #butcher table is empty for a single stage
        self.BT = {}

        #final update and embedded weights
        self.b = [1.0]
        self.b2 = [0.0]

        #interpolant basis in powers of theta
        self.BI = [[0.0, 1.0]]

        self._build()
