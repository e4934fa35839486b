import numpy as np

from .base import FFTAlgorithm, get_angle_factor

class DFTAlgorithm(FFTAlgorithm):
    """
    Naive O(N^2) discrete Fourier transform. Used for small and prime lengths,
    and as the reference the faster algorithms are tested against.
    """

    def __init__(self, length: int, inverse: bool = False):
        assert length >= 1, "DFT length must be at least 1"

        self._length = length
        self._inverse = inverse

        # reduce j*k mod N before scaling so large products keep full precision
        exponents = np.outer(np.arange(length), np.arange(length)) % length
        self._matrix = np.exp(1j * get_angle_factor(inverse) * exponents / length)

    def process(self, signal: np.ndarray, spectrum: np.ndarray):
        spectrum[:] = self._matrix @ signal

    def __len__(self) -> int:
        return self._length

    def is_inverse(self) -> bool:
        return self._inverse
