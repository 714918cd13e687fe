########################################################################################
##
##                                  TESTS FOR
##                           'events/propagation.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest

from diffurch.events import Loc, Propagator, Bisection
from diffurch.state import State
from diffurch.tables import EULER, RK4


# TESTS ================================================================================

class TestPropagator(unittest.TestCase):
    """
    Test the implementation of the 'Propagator' class
    """

    def test_init(self):

        P = Propagator(lambda s: s.t - 1.0)

        self.assertTrue(isinstance(P, Loc))
        self.assertTrue(isinstance(P.location, Bisection))
        self.assertEqual(P.smoothing, 1)
        self.assertEqual(P.cursor, 0)
        self.assertIsNone(P.propagated_order)


    def test_constant_delay(self):

        S = State(0.0, 1.0, EULER(), lambda s: [0.0], discontinuities=[(0.0, 0)])
        P = Propagator(lambda s: s.t - 1.0, smoothing=0)

        #'alpha' stays behind the discontinuity
        S.make_step(0.75)
        self.assertFalse(P.detect(S))
        S.push_current(P.cursor)

        #'alpha' passes the discontinuity at 't=1'
        S.make_step(0.75)
        self.assertTrue(P.detect(S))
        self.assertEqual(P.propagated_t, 0.0)
        self.assertEqual(P.propagated_order, 0)

        t = P.locate(S)
        self.assertAlmostEqual(t, 1.0, places=14)

        #land on the event and propagate
        S.undo_step()
        S.make_step_to(t)
        S.push_current(P.cursor)
        P.callback(S)

        self.assertEqual(list(S.disco)[-1], (t, 0))

        #cursor moves on to the new discontinuity
        S.make_step(0.75)
        self.assertFalse(P.detect(S))
        self.assertEqual(P.cursor, 1)


    def test_smoothing(self):

        S = State(0.0, 1.0, RK4(), lambda s: [0.0])
        S.make_step(1.0)

        P = Propagator(lambda s: s.t - 1.0, smoothing=1)

        #order increases by the smoothing
        P.propagated_order = 1
        P.callback(S)
        self.assertEqual(list(S.disco), [(1.0, 2)])

        #discontinuities beyond the order of the dense output are not tracked
        P.propagated_order = 2
        P.callback(S)
        self.assertEqual(list(S.disco), [(1.0, 2)])


    def test_decreasing_alpha(self):

        S = State(1.0, 1.0, RK4(), lambda s: [0.0], discontinuities=[(0.5, 0)])
        P = Propagator(lambda s: 2.0 - s.t, smoothing=0)

        #'alpha' falls from 1 to 0 and passes 0.5 at 't=1.5'
        S.make_step(1.0)
        self.assertTrue(P.detect(S))
        self.assertEqual(P.propagated_t, 0.5)

        t = P.locate(S)
        self.assertGreaterEqual(t, 1.5)
        self.assertAlmostEqual(t, 1.5, places=14)


    def test_multiple_crossings(self):

        S = State(0.0, 1.0, RK4(), lambda s: [0.0], discontinuities=[(0.2, 0), (0.4, 1), (0.6, 2)])
        P = Propagator(lambda s: s.t - 1.0)

        #earliest crossing within the step
        S.make_step(1.0)
        S.make_step(1.0)
        self.assertTrue(P.detect(S))
        self.assertEqual((P.propagated_t, P.propagated_order), (0.2, 0))
        self.assertAlmostEqual(P.locate(S), 1.2, places=14)


    def test_cursor_resync(self):

        S = State(0.0, 1.0, RK4(), lambda s: [0.0], discontinuities=[(0.0, 0), (5.0, 0)])
        P = Propagator(lambda s: s.t - 1.0)

        #entries dropped from the front of the queue
        S.disco.popleft()
        S.make_step(0.5)

        self.assertFalse(P.detect(S))
        self.assertEqual(P.cursor, 1)


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
