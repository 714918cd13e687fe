#########################################################################################
##
##                          STATE OF THE INTEGRATION
##                                  (state.py)
##
##         holds the current and previous point of the solution, the stage
##         cache of the step in progress, the committed history and the
##          queue of known discontinuities. Implements the stepping and
##                     the evaluation of the solution at any time
##
#########################################################################################

# IMPORTS ===============================================================================

import numpy as np

from .history import History
from .initial import InitialCondition
from .errors import HistoryNotYetComputed
from .utils.stableindexdeque import StableIndexDeque


# VIEW ==================================================================================

class StateView:
    """Read-only view of the solution at a single point in time.

    This is what the right hand side receives for every stage and what
    the locators evaluate their functions on inside of a step. It mirrors
    the public interface of 'State', so user functions can be written once
    for both.

    Parameters
    ----------
    state : State
        the state that owns the history
    t : float
        time of the point
    y : array[float]
        value of the solution at 't'
    dy : array[float], None
        derivative at 't', taken from the dense output when not provided
    """

    __slots__ = ("state", "t", "y", "_dy")

    def __init__(self, state, t, y, dy=None):
        self.state = state
        self.t = t
        self.y = y
        self._dy = dy


    def __repr__(self):
        return f"StateView(t={self.t}, y={self.y})"


    @property
    def dy(self):
        if self._dy is None:
            self._dy = self.state.eval(self.t, 1)
        return self._dy


    def eval(self, t, order=0):
        """Evaluate the solution (or a derivative) at time 't'"""
        return self.state.eval(t, order)


# STATE =================================================================================

class State:
    """Aggregate of everything that changes during the integration.

    The state is advanced by 'make_step' from the previous point
    '(t_prev, y_prev)' to the current point '(t, y)'. Until the step is
    committed by 'push_current' it can be undone and retried with another
    step size. Event callbacks receive the state and may modify 'y' in
    place, followed by 'make_zero_step' which restarts the stepping from
    the modified value.

    Parameters
    ----------
    t_init : float
        initial time
    initial : InitialCondition, callable, tuple[callable, callable], array_like
        initial condition, normalized by 'InitialCondition.create'
    table : RungeKuttaTable
        instance of the Runge-Kutta table
    rhs : callable
        right hand side 'rhs(state) -> dy'
    max_delay : float
        longest lookback of the right hand side, 'inf' keeps the full history
    discontinuities : iterable[tuple[float, int]]
        known discontinuities '(t, order)' of the solution

    Attributes
    ----------
    t, t_prev : float
        current and previous time
    y, y_prev : array[float]
        current and previous value
    k : array[float]
        stage derivatives of the live step, shape (s, N)
    h : float
        size of the live step
    history : History
        committed steps
    disco : StableIndexDeque
        discontinuity queue of '(t, order)' pairs with increasing times
    evaluations : int
        number of right hand side evaluations
    """

    def __init__(
        self,
        t_init,
        initial,
        table,
        rhs,
        max_delay=0.0,
        discontinuities=()
        ):

        if max_delay < 0:
            raise ValueError(f"'max_delay' must be non-negative, got {max_delay}")

        self.table = table
        self.rhs = rhs
        self.initial = InitialCondition.create(initial)
        self.max_delay = max_delay

        #initial point
        y = self.initial.eval(t_init)

        self.t_init = t_init
        self.t = self.t_prev = t_init
        self.y = y
        self.y_prev = y.copy()
        self._dy = self._dy_prev = None

        #live step
        self.h = 0.0
        self.k = np.zeros((table.s, len(y)))
        self._k_prev = self.k

        #committed steps and known discontinuities
        self.history = History(table, t_init, y)
        self.disco = StableIndexDeque()
        for t, order in sorted(discontinuities):
            self.push_discontinuity(t, order)

        self.evaluations = 0


    def __len__(self):
        return len(self.y)


    def __repr__(self):
        return f"State(t={self.t}, y={self.y})"


    # right hand side -------------------------------------------------------------------

    def _rhs(self, t, y):
        """Evaluate the right hand side at the point '(t, y)'"""
        self.evaluations += 1
        return np.atleast_1d(np.asarray(self.rhs(StateView(self, t, y)), dtype=float))


    @property
    def dy(self):
        """derivative at the current point, evaluated on demand"""
        if self._dy is None:
            self._dy = self._rhs(self.t, self.y)
        return self._dy


    @property
    def dy_prev(self):
        """derivative at the previous point, evaluated on demand"""
        if self._dy_prev is None:
            self._dy_prev = self._rhs(self.t_prev, self.y_prev)
        return self._dy_prev


    # views -----------------------------------------------------------------------------

    @property
    def prev(self):
        """view of the previous point"""
        return StateView(self, self.t_prev, self.y_prev, self._dy_prev)


    def at(self, t):
        """view of the solution at time 't'"""
        return StateView(self, t, self.eval(t))


    # stepping --------------------------------------------------------------------------

    def make_step(self, h):
        """Explicit Runge-Kutta step of size 'h' from the current point.

        The current point becomes the previous one. The first stage reuses
        the known derivative at the previous point, all following stages
        evaluate the right hand side on intermediate views. For FSAL tables
        the last stage is the derivative at the new point.

        While the stages are computed, 't' is the time of the running stage
        and 'k' is filled stage by stage, so a right hand side whose delay is
        shorter than the step reads the running step up to that time. Stages
        that are not computed yet still hold the derivatives of the previous
        step.

        Parameters
        ----------
        h : float
            step size
        """

        table = self.table

        #current point becomes the start of the step
        self.t_prev = self.t
        self.y_prev = self.y
        self._dy_prev = self._dy
        self._dy = None
        self._k_prev = self.k

        self.h = h
        self.k = self._k_prev.copy()

        #first stage from the known derivative
        self.k[0] = self.dy_prev

        for i in range(1, table.s):
            t_i = self.t_prev + table.c[i] * h
            y_i = self.y_prev + h * (table.a[i, :i] @ self.k[:i])
            self.t = t_i
            self.k[i] = self._rhs(t_i, y_i)

        #new point
        self.t = self.t_prev + h
        self.y = table.update(self.y_prev, self.k, h)

        if table.fsal:
            self._dy = self.k[-1]


    def make_step_to(self, t):
        """Step from the current point to exactly the time 't'"""
        self.make_step(t - self.t)
        self.t = t


    def undo_step(self):
        """Discard the live step and return to the previous point"""
        self.t = self.t_prev
        self.y = self.y_prev
        self._dy = self._dy_prev
        self.h = 0.0
        self.k = self._k_prev


    def make_zero_step(self):
        """Restart the stepping at the current point.

        Used after the current value was modified by an event callback. The
        stage cache and the derivatives are discarded and the most recent
        history entry is rebased on the modified value.
        """
        self.t_prev = self.t
        self.y_prev = self.y.copy()
        self._dy = self._dy_prev = None
        self.h = 0.0
        self.k = np.zeros_like(self.k)
        self.history.rebase(self.t, self.y)


    def push_current(self, unresolved=None):
        """Commit the live step into the history and prune what
        is no longer needed.

        Parameters
        ----------
        unresolved : int, None
            index of the oldest discontinuity that is still tracked by
            a propagator, 'None' if no discontinuity is tracked
        """

        self.history.append(self.t, self.y.copy(), self.k.copy())

        #oldest time that can still be requested
        t_tail = self.t_prev - self.max_delay

        #resolved discontinuities behind the tail
        if unresolved is None:
            unresolved = self.disco.end
        while self.disco and self.disco.offset < unresolved and self.disco[self.disco.offset][0] < t_tail:
            self.disco.popleft()

        #keep the history back to the oldest retained discontinuity
        if self.disco:
            t_tail = min(t_tail, self.disco[self.disco.offset][0])

        self.history.prune(t_tail)


    def terminate(self):
        """Request the end of the integration"""
        self.t = np.inf


    def error(self):
        """Embedded error estimate of the live step"""
        return self.table.error(self.k, self.h)


    # discontinuities -------------------------------------------------------------------

    def push_discontinuity(self, t, order=0):
        """Register a discontinuity in the derivative of order
        'order' at time 't'.

        The queue stays sorted by time, equal times are merged
        keeping the lower order.
        """

        #insertion point from the back, usually the end
        index = self.disco.end
        while index > self.disco.offset and self.disco[index-1][0] > t:
            index -= 1

        if index > self.disco.offset and self.disco[index-1][0] == t:
            t_known, order_known = self.disco[index-1]
            self.disco[index-1] = (t_known, min(order, order_known))
        else:
            self.disco.insert(index, (t, order))


    # evaluation ------------------------------------------------------------------------

    def eval(self, t, order=0):
        """Evaluate the solution or one of its derivatives at time 't'.

        Times up to the initial time are served by the initial condition,
        times within the live step by its stage cache and older times by
        the history.

        Parameters
        ----------
        t : float
            evaluation time
        order : int
            derivative order

        Returns
        -------
        y : array[float]
            value (or derivative) of the solution
        """

        if t <= self.t_init:
            return self.initial.eval(t, order)

        if t == self.t_prev and order == 0:
            return self.y_prev.copy()

        #live step, up to the running stage while it is computed
        if self.t_prev < t <= self.t:
            theta = (t - self.t_prev) / self.h
            return self.table.interpolate(self.y_prev, self.k, self.h, theta, order)

        if t > self.t:
            raise HistoryNotYetComputed(t, self.t)

        return self.history.eval(t, order)
