import numpy as np

from .base import FFTAlgorithm
from ..array_utils import transpose
from ..base.errors import check_coprime, raise_factorization_error
from ..base.init import log_verbose

def ruritanian_map(width: int, height: int) -> np.ndarray:
    """
    Input permutation of the Good-Thomas algorithm: position i of the permuted
    buffer holds signal[(x * height + y * width) % N] with x = i % width, y = i // width.
    """
    length = width * height
    indices = np.arange(length, dtype=np.int64)

    x = indices % width
    y = indices // width

    return (x * height + y * width) % length

def crt_map(width: int, width_inverse: int, height: int, height_inverse: int) -> np.ndarray:
    """
    Output permutation of the Good-Thomas algorithm: element i of the (transposed)
    result belongs in bin (x * height * height_inverse + y * width * width_inverse) % N
    with y = i % height, x = i // height.

    `width_inverse` is the inverse of width mod height, `height_inverse` the inverse of height mod width.
    """
    length = width * height
    indices = np.arange(length, dtype=np.int64)

    y = indices % height
    x = indices // height

    # reduce the per-axis terms first so the products stay within int64 for large N
    x_term = (x * ((height * height_inverse) % length)) % length
    y_term = (y * ((width * width_inverse) % length)) % length

    return (x_term + y_term) % length

class GoodThomasAlgorithm(FFTAlgorithm):
    """
    Good-Thomas (prime-factor) FFT of length N = width * height for coprime width and height.

    The algorithm needs no twiddle factors. Reordering the input with the Ruritanian
    mapping turns the transform into a 2D transform of a (height x width) matrix: `height`
    transforms of size `width`, a transpose, then `width` transforms of size `height`.
    The CRT mapping then scatters the result back into natural frequency order.

    Both permutations are computed once here, and the scratch buffer is allocated once,
    so `process` does no allocation beyond what the sub-transforms do.

    Args:
        n1 (`int`): The width.
        n1_fft (`FFTAlgorithm`): A transform of length n1. Owned by this instance afterwards.
        n2 (`int`): The height, coprime with n1.
        n2_fft (`FFTAlgorithm`): A transform of length n2. Owned by this instance afterwards.

    Raises:
        FactorizationError: If n1 and n2 are not coprime, or the sub-transforms do not
            match the sizes or each other's direction.
    """

    def __init__(self, n1: int, n1_fft: FFTAlgorithm, n2: int, n2_fft: FFTAlgorithm):
        # n1 * n1_inverse + n2 * n2_inverse == 1
        n1_inverse, n2_inverse = check_coprime(n1, n2)

        if len(n1_fft) != n1 or len(n2_fft) != n2:
            raise_factorization_error(
                f"Invalid sub-transforms for Good-Thomas Algorithm: lengths ({len(n1_fft)},{len(n2_fft)}) do not match sizes ({n1},{n2})"
            )

        if n1_fft.is_inverse() != n2_fft.is_inverse():
            raise_factorization_error(f"Sub-transforms of sizes ({n1},{n2}) run in different directions")

        if n1_inverse < 0:
            n1_inverse += n2
        if n2_inverse < 0:
            n2_inverse += n1

        log_verbose(f"Good-Thomas {n1}x{n2}: inverse of {n1} mod {n2} is {n1_inverse}, inverse of {n2} mod {n1} is {n2_inverse}")

        self.width = n1
        self.height = n2

        self._width_size_fft = n1_fft
        self._height_size_fft = n2_fft

        self.input_map = ruritanian_map(n1, n2)
        self.output_map = crt_map(n1, n1_inverse, n2, n2_inverse)

        self.input_map.flags.writeable = False
        self.output_map.flags.writeable = False

        self._scratch = np.zeros(n1 * n2, dtype=np.complex128)

    def _copy_from_input(self, signal: np.ndarray, spectrum: np.ndarray):
        # the map is in range by construction, "clip" skips numpy's bounds checking
        np.take(signal, self.input_map, out=spectrum, mode="clip")

    def _copy_transposed_scratch_to_output(self, spectrum: np.ndarray):
        spectrum[self.output_map] = self._scratch

    def process(self, signal: np.ndarray, spectrum: np.ndarray):
        self._copy_from_input(signal, spectrum)

        # 'height' FFTs of size 'width' from the spectrum into scratch
        for row_in, row_out in zip(spectrum.reshape(self.height, self.width), self._scratch.reshape(self.height, self.width)):
            self._width_size_fft.process(row_in, row_out)

        transpose(self.width, self.height, self._scratch, spectrum)

        # 'width' FFTs of size 'height' from the spectrum back into scratch
        for row_in, row_out in zip(spectrum.reshape(self.width, self.height), self._scratch.reshape(self.width, self.height)):
            self._height_size_fft.process(row_in, row_out)

        self._copy_transposed_scratch_to_output(spectrum)

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
