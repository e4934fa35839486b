from .algorithm import FFTAlgorithm, DFTAlgorithm, Radix2Algorithm, MixedRadixAlgorithm, GoodThomasAlgorithm
from .base.init import log_info, log_verbose
from .config import PlannerConfig
from .math_utils import is_power_of_two, is_prime, prime_factors, prime_powers, split_coprime

class FFTPlanner:
    """
    Builds an FFTAlgorithm tree for any length.

    Lengths are handled in this order:
        powers of two                                   -> Radix2Algorithm
        primes and lengths up to `config.dft_threshold` -> DFTAlgorithm
        several distinct prime factors                  -> GoodThomasAlgorithm on a coprime split
        prime powers                                    -> MixedRadixAlgorithm(p, N / p)

    Every call to `plan_fft` builds a fresh tree, so the returned algorithm owns all of
    its sub-transforms and scratch buffers.
    """

    def __init__(self, inverse: bool = False, config: PlannerConfig = None):
        if config is None:
            config = PlannerConfig()

        self.inverse = inverse
        self.config = config

    def plan_fft(self, length: int) -> FFTAlgorithm:
        if length < 1:
            raise ValueError(f"FFT length must be at least 1, got {length}")

        algorithm = self._plan(length)

        log_info(f"Planned {'inverse' if self.inverse else 'forward'} FFT of length {length}:\n{algorithm.describe()}")

        return algorithm

    def _plan(self, length: int) -> FFTAlgorithm:
        if is_power_of_two(length):
            log_verbose(f"Length {length}: radix-2")
            return Radix2Algorithm(length, inverse=self.inverse)

        if length <= self.config.dft_threshold or is_prime(length):
            log_verbose(f"Length {length}: naive DFT")
            return DFTAlgorithm(length, inverse=self.inverse)

        if len(prime_powers(length)) >= 2 and self.config.use_good_thomas:
            width, height = split_coprime(length)
            log_verbose(f"Length {length}: Good-Thomas {width}x{height}")

            return GoodThomasAlgorithm(width, self._plan(width), height, self._plan(height))

        width = prime_factors(length)[0]
        height = length // width

        assert width > 1 and height > 1, f"Length {length} cannot be split for mixed radix"

        log_verbose(f"Length {length}: mixed radix {width}x{height}")

        return MixedRadixAlgorithm(width, self._plan(width), height, self._plan(height))
