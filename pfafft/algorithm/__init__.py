from .base import FFTAlgorithm, get_angle_factor
from .dft import DFTAlgorithm
from .radix2 import Radix2Algorithm
from .mixed_radix import MixedRadixAlgorithm
from .good_thomas import GoodThomasAlgorithm, ruritanian_map, crt_map
