from .solver import Solver
from .equation import Equation
from .state import State, StateView
from .history import History
from .callbacks import Callback
from .stepsize import Stepsize, ConstantStepsize, AdaptiveStepsize
from .initial import InitialCondition, Point, Function, FunctionWithDerivative
from .events import Loc, Periodic, Propagator, loc_sign, loc_bool
from .errors import (
    DiffurchError,
    HistoryError,
    HistoryEvicted,
    HistoryNotYetComputed,
    InvalidInitialCondition
    )
