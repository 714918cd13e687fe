#########################################################################################
##
##                                 GLOBAL CONSTANTS
##                                 (_constants.py)
##
##              default values for the solver, the step size controllers
##                            and the event locators
##
#########################################################################################

# IMPORTS ===============================================================================

import numpy as np


# SOLVER DEFAULTS =======================================================================

SIM_TIMESTEP = 0.05                  # default integration timestep
SIM_TIMESTEP_MIN = 1e-12             # min timestep for adaptive stepping
SIM_TIMESTEP_MAX = 1e2               # max timestep for adaptive stepping
SIM_T_START = 0.0                    # default start of integration interval
SIM_T_END = 1.0                      # default end of integration interval

LOG_ENABLE = True                    # logging is enabled by default
LOG_NAME = "diffurch"                # name of the package logger
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


# STEPSIZE CONTROLLER DEFAULTS ==========================================================

SOL_TOLERANCE_LTE_ABS = 1e-8         # absolute tolerance for local truncation error
SOL_TOLERANCE_LTE_REL = 1e-5         # relative tolerance for local truncation error
SOL_BETA = 0.9                       # safety factor for error control
SOL_SCALE_MIN = 0.1                  # min allowed timestep rescale
SOL_SCALE_MAX = 10.0                 # max allowed timestep rescale


# EVENT LOCATION ========================================================================

LOC_ITERATIONS = np.finfo(float).nmant + 1   # bisection budget (53 for double)
LOC_EPSILON = np.finfo(float).eps            # early exit for regula falsi


# TABLE VALIDATION ======================================================================

TAB_TOLERANCE = 1e-14                # continuity and consistency tolerance
TAB_TOLERANCE_ORDER = 1e-12          # order condition residual tolerance
