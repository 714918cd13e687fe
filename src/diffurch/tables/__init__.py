from ._tableau import RungeKuttaTable
from .euler import EULER
from .rk2 import MIDPOINT, HEUN2, RALSTON2
from .rk3 import KUTTA3, HEUN3, RALSTON3, WRAY3, SSPRK3
from .rk4 import RK4, RK43
from .rkbs32 import RKBS32
from .rkdp54 import RKDP54
from .rktp64 import RKTP64
