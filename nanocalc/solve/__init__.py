from .sweep import Sweep
from .results import ResultGrid, build_result_grid
from .simulate import simulate, RegimeWarning
