#########################################################################################
##
##                         DISCONTINUITY PROPAGATION
##                           (events/propagation.py)
##
##         locator that detects when the deviation argument of a delay
##         crosses a known discontinuity of the solution and registers the
##              induced (smoothed) discontinuity at the crossing time
##
#########################################################################################

# IMPORTS ===============================================================================

from ._locator import Loc
from .location import Bisection


# LOCATOR ===============================================================================

class Propagator(Loc):
    """Tracks the discontinuities of the solution through one delayed
    argument of the right hand side.

    If the solution has a discontinuity of derivative order 'k' at 't_0'
    and the right hand side evaluates the solution at the deviation
    argument 'alpha(t)', the solution has a discontinuity of order
    'k + smoothing' at every 't' with 'alpha(t) = t_0'. Retarded delays
    smooth by one order, neutral delays (delayed derivatives) by zero.

    The propagator keeps a cursor into the discontinuity queue of the state.
    After each step it moves the cursor past all entries that 'alpha' has
    already passed and checks whether 'alpha' crossed the next one within
    the step. The crossing is located by bisection on 'alpha - t_0'.

    Parameters
    ----------
    alpha : callable
        deviation argument 'alpha(state) -> float'
    smoothing : int
        orders of smoothness gained per propagation

    Attributes
    ----------
    cursor : int
        absolute index into the discontinuity queue of the state
    propagated_t : float
        time of the discontinuity that was crossed in the last detection
    propagated_order : int
        its derivative order
    """

    def __init__(self, alpha, smoothing=1):
        super().__init__(self._crossing, location=Bisection())

        self.alpha = alpha
        self.smoothing = smoothing

        self.cursor = 0
        self.propagated_t = float("nan")
        self.propagated_order = None


    def __repr__(self):
        return f"Propagator(alpha={self.alpha}, smoothing={self.smoothing})"


    def _crossing(self, state):
        return self.alpha(state) - self.propagated_t


    def detect(self, state):

        disco = state.disco

        alpha_prev = self.alpha(state.prev)
        alpha_curr = self.alpha(state)

        #evicted entries are gone
        self.cursor = max(self.cursor, disco.offset)

        if alpha_prev < alpha_curr:

            #first entry ahead of the deviation argument
            while self.cursor < disco.end and disco[self.cursor][0] <= alpha_prev:
                self.cursor += 1
            while self.cursor > disco.offset and disco[self.cursor-1][0] > alpha_prev:
                self.cursor -= 1

            if self.cursor < disco.end and disco[self.cursor][0] <= alpha_curr:
                self.propagated_t, self.propagated_order = disco[self.cursor]
                return True

        elif alpha_prev > alpha_curr:

            #first entry not behind the deviation argument
            while self.cursor < disco.end and disco[self.cursor][0] < alpha_prev:
                self.cursor += 1
            while self.cursor > disco.offset and disco[self.cursor-1][0] >= alpha_prev:
                self.cursor -= 1

            if self.cursor > disco.offset and disco[self.cursor-1][0] >= alpha_curr:
                self.propagated_t, self.propagated_order = disco[self.cursor-1]
                return True

        return False


    def callback(self, state):
        """Register the induced discontinuity at the event time,
        as long as it is within the order of the dense output.
        """
        order = self.propagated_order + self.smoothing
        if order < state.table.order_interpolant:
            state.push_discontinuity(state.t, order)
