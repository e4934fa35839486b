import numpy as np

from .base import FFTAlgorithm, get_angle_factor
from ..array_utils import transpose
from ..base.errors import raise_factorization_error

class MixedRadixAlgorithm(FFTAlgorithm):
    """
    Cooley-Tukey decomposition of a length N = width * height transform into
    `height` transforms of size `width` and `width` transforms of size `height`,
    joined by a twiddle factor multiplication. Unlike the Good-Thomas algorithm the
    two sizes do not have to be coprime.
    """

    def __init__(self, width: int, width_size_fft: FFTAlgorithm, height: int, height_size_fft: FFTAlgorithm):
        if len(width_size_fft) != width or len(height_size_fft) != height:
            raise_factorization_error(
                f"Invalid sub-transforms for Mixed Radix Algorithm: lengths ({len(width_size_fft)},{len(height_size_fft)}) do not match sizes ({width},{height})"
            )

        if width_size_fft.is_inverse() != height_size_fft.is_inverse():
            raise_factorization_error(f"Sub-transforms of sizes ({width},{height}) run in different directions")

        self.width = width
        self.height = height

        self._width_size_fft = width_size_fft
        self._height_size_fft = height_size_fft

        length = width * height

        # twiddles[y * width + x] = exp(angle * x * y / N)
        exponents = np.outer(np.arange(height), np.arange(width)) % length
        self._twiddles = np.exp(1j * get_angle_factor(self.is_inverse()) * exponents / length).ravel()

        self._scratch = np.zeros(length, dtype=np.complex128)

    def process(self, signal: np.ndarray, spectrum: np.ndarray):
        # gather every height-th element into rows of size width
        transpose(self.height, self.width, signal, self._scratch)

        for row_in, row_out in zip(self._scratch.reshape(self.height, self.width), spectrum.reshape(self.height, self.width)):
            self._width_size_fft.process(row_in, row_out)

        spectrum *= self._twiddles

        transpose(self.width, self.height, spectrum, self._scratch)

        for row_in, row_out in zip(self._scratch.reshape(self.width, self.height), spectrum.reshape(self.width, self.height)):
            self._height_size_fft.process(row_in, row_out)

        # bin x + width * y is at row x, column y
        transpose(self.height, self.width, spectrum, self._scratch)
        spectrum[:] = self._scratch

    def __len__(self) -> int:
        return self.width * self.height

    def is_inverse(self) -> bool:
        return self._width_size_fft.is_inverse()

    def describe(self, indent: int = 0) -> str:
        return "\n".join([
            super().describe(indent) + f" width={self.width} height={self.height}",
            self._width_size_fft.describe(indent + 4),
            self._height_size_fft.describe(indent + 4),
        ])
