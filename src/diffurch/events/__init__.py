from ._locator import Locator, Loc, loc_sign, loc_bool
from .detection import (
    Sign,
    Rising,
    Falling,
    WhilePositive,
    WhileNegative,
    Switch,
    SwitchTrue,
    SwitchFalse,
    WhileTrue,
    WhileFalse
    )
from .location import (
    StepBegin,
    StepEnd,
    StepMiddle,
    Lerp,
    Bisection,
    BisectionBool,
    RegulaFalsi
    )
from .periodic import Periodic
from .propagation import Propagator
from .scheduler import EventScheduler
