########################################################################################
##
##                                  TESTS FOR
##                                'equation.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest
import numpy as np

from types import SimpleNamespace

from diffurch.equation import Equation
from diffurch.events import Propagator


# TESTS ================================================================================

class TestEquation(unittest.TestCase):
    """
    Test the implementation of the 'Equation' class
    """

    def test_init(self):

        E = Equation(lambda s: -s.y)

        self.assertEqual(len(E), 0)
        self.assertEqual(E.max_delay, 0.0)
        self.assertEqual(E.propagators(), [])


    def test_init_errors(self):

        with self.assertRaises(TypeError):
            Equation(1.0)

        with self.assertRaises(ValueError):
            Equation(lambda s: s.y, delays=[-1.0])

        with self.assertRaises(ValueError):
            Equation(lambda s: s.y, delays=[1.0], max_delay=-1.0)


    def test_call(self):

        E = Equation(lambda s: 2 * s.y)
        s = SimpleNamespace(t=0.0, y=np.array([1.0, 2.0]))

        np.testing.assert_array_equal(E(s), [2.0, 4.0])


    def test_delays(self):

        E = Equation(lambda s: s.y, delays=[1.0, 2.5], neutral_delays=[0.5])

        self.assertEqual(len(E), 3)
        self.assertEqual(E.max_delay, 2.5)

        #smoothing orders, retarded first
        self.assertEqual([smoothing for _, smoothing in E.deviations], [1, 1, 0])

        #deviation arguments 't - tau'
        s = SimpleNamespace(t=3.0)
        self.assertEqual([alpha(s) for alpha, _ in E.deviations], [2.0, 0.5, 2.5])


    def test_variable_delays(self):

        E = Equation(lambda s: s.y, neutral_delays=[lambda s: s.t / 2])

        #unknown lookback keeps the full history
        self.assertEqual(E.max_delay, np.inf)

        #unless declared
        E = Equation(lambda s: s.y, delays=[lambda s: s.t / 2, 1.0], max_delay=10.0)
        self.assertEqual(E.max_delay, 10.0)


    def test_propagators(self):

        E = Equation(lambda s: s.y, delays=[1.0], neutral_delays=[0.5])
        P = E.propagators()

        self.assertEqual(len(P), 2)
        for p, smoothing in zip(P, [1, 0]):
            self.assertTrue(isinstance(p, Propagator))
            self.assertEqual(p.smoothing, smoothing)

        #new instances on every call
        self.assertIsNot(E.propagators()[0], P[0])


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
