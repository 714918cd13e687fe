########################################################################################
##
##                                  TESTS FOR
##                             'events/periodic.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest

from types import SimpleNamespace

from diffurch.events import Locator, Periodic


# HELPERS ==============================================================================

def step(t_prev, t):
    return SimpleNamespace(t_prev=t_prev, t=t)


# TESTS ================================================================================

class TestPeriodic(unittest.TestCase):
    """
    Test the implementation of the 'Periodic' event locator
    """

    def test_init(self):

        P = Periodic(1.0)

        self.assertTrue(isinstance(P, Locator))
        self.assertEqual(P.period, 1.0)
        self.assertEqual(P.offset, 0.0)


    def test_init_errors(self):

        for period in [0.0, -1.0]:
            with self.subTest(period=period):
                with self.assertRaises(ValueError):
                    Periodic(period)


    def test_detect(self):

        P = Periodic(1.0)

        self.assertTrue(P.detect(step(0.5, 1.5)))
        self.assertTrue(P.detect(step(0.5, 1.0)))
        self.assertFalse(P.detect(step(0.2, 0.8)))

        #event at the start of the step was handled in the step before
        self.assertFalse(P.detect(step(1.0, 1.5)))


    def test_locate(self):

        P = Periodic(1.0)

        self.assertEqual(P.locate(step(0.5, 1.5)), 1.0)
        self.assertEqual(P.locate(step(0.5, 1.0)), 1.0)
        self.assertEqual(P.locate(step(-1.5, -0.5)), -1.0)
        self.assertIsNone(P.locate(step(0.2, 0.8)))

        #only the first event of a long step
        self.assertEqual(P.locate(step(0.5, 3.5)), 1.0)


    def test_offset(self):

        P = Periodic(0.5, offset=0.25)

        self.assertAlmostEqual(P.locate(step(0.3, 0.8)), 0.75)
        self.assertAlmostEqual(P.locate(step(0.0, 0.3)), 0.25)
        self.assertIsNone(P.locate(step(0.3, 0.7)))


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
