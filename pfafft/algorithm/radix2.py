import numpy as np

from .base import FFTAlgorithm, get_angle_factor

def bit_reverse_indices(length: int) -> np.ndarray:
    bits = length.bit_length() - 1
    indices = np.arange(length)
    result = np.zeros(length, dtype=np.int64)

    for _ in range(bits):
        result = (result << 1) | (indices & 1)
        indices >>= 1

    return result

class Radix2Algorithm(FFTAlgorithm):
    """
    Iterative decimation-in-time Cooley-Tukey FFT for power of two lengths.
    The butterflies of each stage are applied to all blocks at once.
    """

    def __init__(self, length: int, inverse: bool = False):
        assert length >= 1 and (length & (length - 1)) == 0, f"Radix-2 length must be a power of two, got {length}"

        self._length = length
        self._inverse = inverse

        self._bit_reverse = bit_reverse_indices(length)
        self._twiddles = np.exp(1j * get_angle_factor(inverse) * np.arange(length // 2) / length)

    def process(self, signal: np.ndarray, spectrum: np.ndarray):
        np.take(signal, self._bit_reverse, out=spectrum, mode="clip")

        block_size = 2

        while block_size <= self._length:
            half = block_size // 2

            # twiddle k of this stage is exp(angle * k / block_size)
            twiddles = self._twiddles[::self._length // block_size]

            blocks = spectrum.reshape(-1, block_size)

            evens = blocks[:, :half].copy()
            odds = blocks[:, half:] * twiddles

            blocks[:, :half] = evens + odds
            blocks[:, half:] = evens - odds

            block_size *= 2

    def __len__(self) -> int:
        return self._length

    def is_inverse(self) -> bool:
        return self._inverse
