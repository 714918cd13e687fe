#########################################################################################
##
##                          SOLVER (DRIVER LOOP)
##                               (solver.py)
##
##         runs the integration: trial steps, step size control, event
##         location with truncation of the step, commit into the history,
##                       callbacks and discontinuity tracking
##
#########################################################################################

# IMPORTS ===============================================================================

import time
import logging

import numpy as np

from ._constants import (
    SIM_TIMESTEP,
    SIM_TIMESTEP_MIN,
    SIM_TIMESTEP_MAX,
    SIM_T_START,
    SIM_T_END,
    SOL_TOLERANCE_LTE_ABS,
    SOL_TOLERANCE_LTE_REL,
    LOG_ENABLE,
    LOG_NAME,
    LOG_FORMAT
    )

from .state import State
from .equation import Equation
from .callbacks import Callback
from .stepsize import ConstantStepsize, AdaptiveStepsize
from .events.scheduler import EventScheduler
from .tables.rkdp54 import RKDP54


# CLASS =================================================================================

class Solver:
    """Integrator for ordinary, delay and neutral delay differential
    equations with event location.

    Every iteration of the driver loop makes a trial step, lets the step
    size controller accept or reject it, and asks the event scheduler for
    the earliest event inside the step. If there is one, the step is redone
    to land exactly on the event time. The step is then committed into the
    history, the step callbacks run, and finally the callback of the event.
    If an event callback changes the solution, the stepping restarts from
    the new value and a discontinuity is registered at the event time.

    The discontinuities of the solution are propagated through the delays
    of the equation. Every delay contributes a propagator to the scheduler,
    so the steps also land on the times where the delayed arguments pass
    a known discontinuity.

    Example
    -------
    Bouncing ball with gravity, recording the bounce times:

    .. code-block:: python

        from diffurch import Solver, Equation, Loc
        from diffurch.events import Falling

        E = Equation(lambda s: [s.y[1], -9.81])
        S = Solver(E, initial=[1.0, 0.0], interval=(0, 10), log=False)

        bounces = []

        def bounce(state):
            state.y[1] = -0.9 * state.y[1]
            bounces.append(state.t)

        S.on_loc(Loc(lambda s: s.y[0], Falling()), bounce)
        S.run()

    Parameters
    ----------
    equation : Equation, callable
        the differential equation, a callable is used as the right hand
        side of an equation without delays
    initial : InitialCondition, callable, tuple[callable, callable], array_like
        initial condition
    interval : tuple[float, float]
        integration interval '(t_start, t_end)'
    Table : class
        Runge-Kutta table class
    dt : float
        (initial) step size
    adaptive : bool
        use error controlled adaptive step size
    dt_min : float
        lower bound of the adaptive step size
    dt_max : float
        upper bound of the adaptive step size
    tolerance_lte_abs : float
        absolute tolerance of the local truncation error
    tolerance_lte_rel : float
        relative tolerance of the local truncation error
    stepsize : Stepsize, None
        step size controller, overrides 'dt' and 'adaptive'
    discontinuities : iterable[tuple[float, int]]
        known discontinuities '(t, order)' of the solution, for example
        '(t_start, 0)' when the initial function does not match the
        initial value
    log : bool
        flag to enable logging

    Attributes
    ----------
    table : RungeKuttaTable
        instance of the Runge-Kutta table
    controller : Stepsize
        step size controller
    state : State, None
        state of the last run
    """

    def __init__(
        self,
        equation,
        initial=0.0,
        interval=(SIM_T_START, SIM_T_END),
        Table=RKDP54,
        dt=SIM_TIMESTEP,
        adaptive=False,
        dt_min=SIM_TIMESTEP_MIN,
        dt_max=SIM_TIMESTEP_MAX,
        tolerance_lte_abs=SOL_TOLERANCE_LTE_ABS,
        tolerance_lte_rel=SOL_TOLERANCE_LTE_REL,
        stepsize=None,
        discontinuities=(),
        log=LOG_ENABLE
        ):

        #equation and initial condition
        self.equation = equation if isinstance(equation, Equation) else Equation(equation)
        self.initial = initial

        #integration interval
        self.t_start, self.t_end = interval
        if self.t_end < self.t_start:
            raise ValueError(f"invalid integration interval {interval}")

        #runge-kutta table
        self.Table = Table
        self.table = Table()

        #step size control
        if stepsize is not None:
            self.controller = stepsize
        elif adaptive:
            self.controller = AdaptiveStepsize(
                dt=dt,
                order=self.table.m,
                dt_min=dt_min,
                dt_max=dt_max,
                tolerance_lte_abs=tolerance_lte_abs,
                tolerance_lte_rel=tolerance_lte_rel
                )
        else:
            self.controller = ConstantStepsize(dt)

        self.discontinuities = list(discontinuities)

        #registered callbacks
        self.start_callbacks = []
        self.step_callbacks = []
        self.stop_callbacks = []
        self.loc_callbacks = []

        self.state = None

        #logging
        self.log = log
        self._initialize_logger()


    def __str__(self):
        return (
            f"Solver({self.table}, interval=({self.t_start}, {self.t_end}), "
            f"controller={self.controller})"
            )


    # logger methods --------------------------------------------------------------------

    def _initialize_logger(self):
        """Setup the package logger with a stream handler"""
        self.logger = logging.getLogger(LOG_NAME)
        if self.log and not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.DEBUG)


    def _logger_info(self, message):
        if self.log:
            self.logger.info(message)


    def _logger_debug(self, message):
        if self.log:
            self.logger.debug(message)


    def _logger_warning(self, message):
        if self.log:
            self.logger.warning(message)


    # registration ----------------------------------------------------------------------

    def on_start(self, callback):
        """Run 'callback(state)' once before the first step"""
        self.start_callbacks.append(Callback.create(callback))
        return self


    def on_step(self, callback):
        """Run 'callback(state)' at the start and after every committed step"""
        self.step_callbacks.append(Callback.create(callback))
        return self


    def on_stop(self, callback):
        """Run 'callback(state)' once after the integration"""
        self.stop_callbacks.append(Callback.create(callback))
        return self


    def on_loc(self, locator, callback):
        """Run 'callback(state)' at every event located by 'locator',
        the callback may modify the state.
        """
        self.loc_callbacks.append((locator, Callback.create(callback)))
        return self


    # run -------------------------------------------------------------------------------

    def _scheduler(self):
        """Event scheduler with the user locators first, then
        the discontinuity propagators of the equation.
        """
        scheduler = EventScheduler()
        for locator, callback in self.loc_callbacks:
            scheduler.add(locator, callback)
        for propagator in self.equation.propagators():
            scheduler.add(propagator, propagator.callback)
        return scheduler


    def run(self):
        """Integrate over the interval.

        Returns
        -------
        stats : dict
            number of committed steps, rejected trial steps, events,
            right hand side evaluations and the runtime in milliseconds
        """

        stats = {"steps": 0, "rejected": 0, "events": 0, "evaluations": 0, "runtime_ms": 0.0}

        self._logger_info(
            f"RUN (interval: [{self.t_start}, {self.t_end}], table: {self.table}, "
            f"controller: {self.controller})"
            )

        starting_time = time.perf_counter()

        state = self.state = State(
            self.t_start,
            self.initial,
            self.table,
            self.equation.rhs,
            max_delay=self.equation.max_delay,
            discontinuities=self.discontinuities
            )

        scheduler = self._scheduler()
        controller = self.controller
        t_end = self.t_end

        for callback in self.start_callbacks:
            callback(state)
        for callback in self.step_callbacks:
            callback(state)

        while state.t < t_end:

            #trial step, the last one ends exactly at the interval end
            h = controller.get()
            if state.t + h >= t_end:
                state.make_step_to(t_end)
            else:
                state.make_step(h)

            #error control
            if controller.adaptive:
                if not controller.update(state.error(), state.y):
                    state.undo_step()
                    stats["rejected"] += 1
                    continue
                if controller.forced:
                    self._logger_warning(
                        f"step at t={state.t} accepted with error norm "
                        f"{controller.error_norm:.2e} at minimum step size"
                        )

            #earliest event in the step, redo the step to land on it,
            #events at the start of the step fire after the full step,
            #the controller keeps the step size proposed for the full trial step
            event = scheduler.locate(state)
            if event is not None and state.t_prev < event[0] < state.t:
                state.undo_step()
                state.make_step_to(event[0])

            #commit
            if state.t > state.t_prev:
                state.push_current(scheduler.unresolved())
                stats["steps"] += 1
                for callback in self.step_callbacks:
                    callback(state)

            if event is None:
                continue

            #event callback may modify the state
            t_event, locator, callback = event
            stats["events"] += 1
            self._logger_debug(f"EVENT at t={t_event} ({locator})")

            y_before = state.y.copy()
            callback(state)

            if state.t >= t_end:
                break

            changed = not np.array_equal(state.y, y_before)
            state.make_zero_step()
            if changed:
                state.push_discontinuity(state.t, 0)

        for callback in self.stop_callbacks:
            callback(state)

        stats["evaluations"] = state.evaluations
        stats["runtime_ms"] = 1e3 * (time.perf_counter() - starting_time)

        self._logger_info(
            "FINISHED (steps: {steps}, rejected: {rejected}, events: {events}, "
            "evaluations: {evaluations}, runtime: {runtime_ms:.2f}ms)".format(**stats)
            )

        return stats
