########################################################################################
##
##                                  TESTS FOR
##                             'events/_locator.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest

from diffurch.events import (
    Locator,
    Loc,
    loc_sign,
    loc_bool,
    Sign,
    Falling,
    Switch,
    SwitchTrue,
    Bisection,
    BisectionBool,
    Lerp,
    StepEnd
    )
from diffurch.state import State
from diffurch.tables import RK4


# TESTS ================================================================================

class TestLoc(unittest.TestCase):
    """
    Test the implementation of the 'Loc' event locator
    """

    def setUp(self):

        #'y(t) = 1 - t'
        self.S = State(0.0, 1.0, RK4(), lambda s: [-1.0])


    def test_init(self):

        L = Loc(lambda s: s.y[0])

        self.assertTrue(isinstance(L, Locator))
        self.assertTrue(isinstance(L.detection, Sign))
        self.assertTrue(isinstance(L.location, Bisection))


    def test_init_errors(self):

        #boolean detection needs a boolean location
        with self.assertRaises(ValueError):
            Loc(lambda s: s.y[0] > 0, Switch())

        with self.assertRaises(ValueError):
            Loc(lambda s: s.y[0] > 0, Switch(), Lerp())

        #fixed positions work with any detection
        L = Loc(lambda s: s.y[0] > 0, SwitchTrue(), StepEnd())
        self.assertTrue(isinstance(L.location, StepEnd))


    def test_base(self):

        with self.assertRaises(NotImplementedError):
            Locator().detect(self.S)

        with self.assertRaises(NotImplementedError):
            Locator().locate(self.S)


    def test_eval(self):

        L = Loc(lambda s: s.y[0])
        self.S.make_step(0.5)

        self.assertAlmostEqual(L.eval_curr(self.S), 0.5)
        self.assertAlmostEqual(L.eval_prev(self.S), 1.0)
        self.assertAlmostEqual(L.eval_at(self.S, 0.25), 0.75)


    def test_locate(self):

        L = Loc(lambda s: s.y[0] - 0.25, Falling())

        #no event in the first step
        self.S.make_step(0.5)
        self.assertFalse(L.detect(self.S))
        self.assertIsNone(L.locate(self.S))
        self.S.push_current()

        #event in the second step
        self.S.make_step(0.5)
        self.assertTrue(L.detect(self.S))
        self.assertAlmostEqual(L.locate(self.S), 0.75)


    def test_locate_time(self):

        #event functions can depend on time
        L = Loc(lambda s: s.t - 0.3)

        self.S.make_step(0.5)
        t = L.locate(self.S)

        self.assertGreaterEqual(t, 0.3)
        self.assertLessEqual(t - 0.3, 2**-52)


    def test_loc_sign(self):

        L = loc_sign(lambda s: s.y[0] - 0.5)

        self.assertTrue(isinstance(L.detection, Sign))
        self.assertTrue(isinstance(L.location, Bisection))

        self.S.make_step(1.0)
        self.assertAlmostEqual(L.locate(self.S), 0.5)


    def test_loc_bool(self):

        L = loc_bool(lambda s: s.y[0] < 0.5)

        self.assertTrue(isinstance(L.detection, Switch))
        self.assertTrue(isinstance(L.location, BisectionBool))

        self.S.make_step(1.0)
        self.assertAlmostEqual(L.locate(self.S), 0.5)


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
