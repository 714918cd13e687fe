########################################################################################
##
##                                  TESTS FOR
##                          'tables/*.py' (Runge-Kutta tables)
##
########################################################################################

# IMPORTS ==============================================================================

import unittest
import numpy as np

from diffurch.tables import (
    RungeKuttaTable,
    EULER,
    MIDPOINT,
    HEUN2,
    RALSTON2,
    KUTTA3,
    HEUN3,
    RALSTON3,
    WRAY3,
    SSPRK3,
    RK4,
    RK43,
    RKBS32,
    RKDP54,
    RKTP64
    )
from diffurch.tables._tableau import _trees, _tree_density
from diffurch._constants import TAB_TOLERANCE, TAB_TOLERANCE_ORDER


# TABLES ===============================================================================

TABLES = [
    EULER,
    MIDPOINT,
    HEUN2,
    RALSTON2,
    KUTTA3,
    HEUN3,
    RALSTON3,
    WRAY3,
    SSPRK3,
    RK4,
    RK43,
    RKBS32,
    RKDP54,
    RKTP64
    ]

#tables with a hermite type interpolant, 'bi'(0)' is the first unit vector
TABLES_HERMITE = [RK4, RK43, RKBS32, RKDP54, RKTP64]


# TESTS ================================================================================

class TestRootedTrees(unittest.TestCase):
    """
    Test the enumeration of rooted trees for the order conditions
    """

    def test_counts(self):

        #number of rooted trees per order (OEIS A000081)
        for order, count in zip(range(1, 8), [1, 1, 2, 4, 9, 20, 48]):
            with self.subTest(order=order):
                self.assertEqual(len(_trees(order)), count)


    def test_density(self):

        #single node
        self.assertEqual(_tree_density(()), 1)

        #chain of three nodes
        self.assertEqual(_tree_density(((),),), 2)
        self.assertEqual(_tree_density((((),),)), 6)

        #root with two leaves
        self.assertEqual(_tree_density(((), ())), 3)


class TestRungeKuttaTable(unittest.TestCase):
    """
    Test the implementation of the 'RungeKuttaTable' base class and the tables
    """

    def test_init(self):

        for Table in TABLES:
            with self.subTest(Table=Table.__name__):

                T = Table()

                self.assertTrue(isinstance(T, RungeKuttaTable))

                #shapes
                self.assertEqual(T.a.shape, (T.s, T.s))
                self.assertEqual(len(T.b), T.s)
                self.assertEqual(len(T.b2), T.s)
                self.assertEqual(len(T.c), T.s)
                self.assertEqual(len(T.bi), T.s)

                #strictly lower triangular
                self.assertTrue(np.all(np.triu(T.a) == 0.0))

                #orders
                self.assertGreaterEqual(T.n, 1)
                self.assertLess(T.m, T.n)
                self.assertGreaterEqual(T.order_interpolant, 1)
                self.assertLessEqual(T.order_interpolant, T.n)


    def test_str(self):

        self.assertEqual(str(RKDP54()), "RKDP54")
        self.assertEqual(str(EULER()), "EULER")


    def test_continuity(self):

        for Table in TABLES:
            with self.subTest(Table=Table.__name__):
                self.assertLess(Table().continuity_error(), TAB_TOLERANCE)


    def test_consistency(self):

        for Table in TABLES:
            with self.subTest(Table=Table.__name__):
                self.assertLess(Table().consistency_error(), TAB_TOLERANCE)


    def test_order_conditions(self):

        for Table in TABLES:
            with self.subTest(Table=Table.__name__):
                self.assertLess(Table().order_conditions_error(), TAB_TOLERANCE_ORDER)


    def test_order_conditions_violated(self):

        #classical RK4 does not have order 5
        T = RK4()
        T.n = 5
        self.assertGreater(T.order_conditions_error(), 1e-3)

        #midpoint rule does not have order 3
        T = MIDPOINT()
        T.n = 3
        self.assertGreater(T.order_conditions_error(), 1e-3)


    def test_fsal(self):

        self.assertFalse(EULER().fsal)
        self.assertFalse(RK4().fsal)
        self.assertFalse(RK43().fsal)
        self.assertTrue(RKBS32().fsal)
        self.assertTrue(RKDP54().fsal)


    def test_interpolate_endpoints(self):

        k = np.linspace(-1.0, 1.0, 14).reshape(7, 2)
        y_0 = np.array([1.0, -2.0])
        h = 0.3

        for Table in TABLES:
            with self.subTest(Table=Table.__name__):

                T = Table()
                k_T = k[:T.s]

                #start of the step
                np.testing.assert_allclose(T.interpolate(y_0, k_T, h, 0.0), y_0, atol=1e-15)

                #end of the step matches the final update
                np.testing.assert_allclose(
                    T.interpolate(y_0, k_T, h, 1.0),
                    T.update(y_0, k_T, h),
                    atol=1e-14
                    )


    def test_interpolate_derivative(self):

        k = np.linspace(-1.0, 1.0, 14).reshape(7, 2)
        y_0 = np.array([1.0, -2.0])
        h = 0.3

        for Table in TABLES_HERMITE:
            with self.subTest(Table=Table.__name__):

                T = Table()
                k_T = k[:T.s]

                #derivative at the start of the step is the first stage
                np.testing.assert_allclose(
                    T.interpolate(y_0, k_T, h, 0.0, order=1),
                    k_T[0],
                    atol=1e-13
                    )


    def test_interpolate_polynomial(self):

        #dense output of 'y' = 3t^2' is exact for tables with cubic interpolant
        for Table in [RK4, RKBS32, RKDP54, RKTP64]:
            with self.subTest(Table=Table.__name__):

                T = Table()
                h, t_0 = 0.5, 1.0
                k = np.array([[3 * (t_0 + c * h)**2] for c in T.c])
                y_0 = np.array([t_0**3])

                for theta in [0.1, 0.5, 0.9]:
                    t = t_0 + theta * h
                    np.testing.assert_allclose(T.interpolate(y_0, k, h, theta), [t**3], rtol=1e-12)
                    np.testing.assert_allclose(T.interpolate(y_0, k, h, theta, 1), [3 * t**2], rtol=1e-12)


    def test_error(self):

        #no error for constant derivatives
        for Table in [RK4, RKBS32, RKDP54]:
            with self.subTest(Table=Table.__name__):
                T = Table()
                k = np.ones((T.s, 3))
                np.testing.assert_allclose(T.error(k, 0.1), np.zeros(3), atol=1e-15)


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
