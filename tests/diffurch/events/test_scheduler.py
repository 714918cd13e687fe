########################################################################################
##
##                                  TESTS FOR
##                             'events/scheduler.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest

from diffurch.events import EventScheduler, Loc, Periodic, Propagator, Rising
from diffurch.state import State
from diffurch.tables import RK4


# TESTS ================================================================================

class TestEventScheduler(unittest.TestCase):
    """
    Test the implementation of the 'EventScheduler' class
    """

    def setUp(self):

        #'y(t) = t'
        self.S = State(0.0, 0.0, RK4(), lambda s: [1.0])
        self.S.make_step(1.0)


    def test_init(self):

        E = EventScheduler()

        self.assertEqual(len(E), 0)
        self.assertIsNone(E.locate(self.S))
        self.assertIsNone(E.unresolved())


    def test_add(self):

        E = EventScheduler()
        L, C = Loc(lambda s: s.y[0] - 0.5), print

        E.add(L, C)

        self.assertEqual(len(E), 1)
        self.assertEqual(list(E), [(L, C)])


    def test_earliest(self):

        L_1 = Loc(lambda s: s.y[0] - 0.7, Rising())
        L_2 = Loc(lambda s: s.y[0] - 0.3, Rising())

        #independent of the registration order
        for entries in [[L_1, L_2], [L_2, L_1]]:
            with self.subTest(order=entries):

                E = EventScheduler()
                for L in entries:
                    E.add(L, None)

                t, L, _ = E.locate(self.S)

                self.assertIs(L, L_2)
                self.assertAlmostEqual(t, 0.3, places=14)


    def test_tie(self):

        L_1 = Loc(lambda s: s.y[0] - 0.5)
        L_2 = Loc(lambda s: s.y[0] - 0.5)

        E = EventScheduler()
        E.add(L_1, "first")
        E.add(L_2, "second")

        #first registered wins
        _, L, callback = E.locate(self.S)
        self.assertIs(L, L_1)
        self.assertEqual(callback, "first")


    def test_no_event(self):

        E = EventScheduler()
        E.add(Loc(lambda s: s.y[0] - 2.0), None)
        E.add(Periodic(5.0, offset=2.0), None)

        self.assertIsNone(E.locate(self.S))


    def test_mixed(self):

        E = EventScheduler()
        E.add(Loc(lambda s: s.y[0] - 0.7), None)
        E.add(Periodic(0.25), None)

        t, L, _ = E.locate(self.S)

        self.assertTrue(isinstance(L, Periodic))
        self.assertEqual(t, 0.25)


    def test_unresolved(self):

        P_1 = Propagator(lambda s: s.t - 1.0)
        P_2 = Propagator(lambda s: s.t - 2.0)
        P_1.cursor, P_2.cursor = 3, 1

        E = EventScheduler()
        E.add(Loc(lambda s: s.y[0]), None)
        self.assertIsNone(E.unresolved())

        E.add(P_1, P_1.callback)
        E.add(P_2, P_2.callback)
        self.assertEqual(E.unresolved(), 1)


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
