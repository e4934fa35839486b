from .base.init import LogLevel
from .base.init import initialize
from .base.init import is_initialized
from .base.init import log, log_error, log_warning, log_info, log_verbose, set_log_level

from .base.errors import FactorizationError
from .base.errors import check_coprime

from .config import PlannerConfig
from .config import DEFAULT_DFT_THRESHOLD

from .math_utils import extended_euclidean_algorithm
from .math_utils import prime_factors, prime_powers, split_coprime
from .math_utils import is_prime, is_power_of_two

from .array_utils import transpose

from .algorithm import FFTAlgorithm
from .algorithm import DFTAlgorithm
from .algorithm import Radix2Algorithm
from .algorithm import MixedRadixAlgorithm
from .algorithm import GoodThomasAlgorithm

from .planner import FFTPlanner

from .functions import fft, ifft
from .functions import make_fft_plan, get_cache_info, cache_clear

__version__ = "0.1.0"
