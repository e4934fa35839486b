import abc

import numpy as np

def get_angle_factor(inverse: bool) -> float:
    return 2 * np.pi * (1 if inverse else -1)

class FFTAlgorithm(abc.ABC):
    """
    A transform of a fixed length L. `process` computes the (unnormalized) discrete
    Fourier transform of a length-L signal into a length-L spectrum and has no other
    observable side effects, so an instance can be run any number of times against
    different buffers.

    Forward transforms use exp(-2*pi*i*j*k/L), inverse transforms use exp(+2*pi*i*j*k/L).
    No algorithm scales its output.

    Instances may own scratch memory, so a single instance must only be driven by one
    caller at a time.
    """

    @abc.abstractmethod
    def process(self, signal: np.ndarray, spectrum: np.ndarray):
        """
        Run the transform on `signal`, placing the result in `spectrum`.

        Args:
            signal (`np.ndarray`): Contiguous 1D complex array of length `len(self)`. Not modified.
            spectrum (`np.ndarray`): Contiguous 1D complex array of length `len(self)`. Fully overwritten.
                Must not overlap `signal`.

        Lengths are not checked here, passing buffers of the wrong length is undefined.
        """
        pass

    @abc.abstractmethod
    def __len__(self) -> int:
        pass

    @abc.abstractmethod
    def is_inverse(self) -> bool:
        pass

    def transform(self, signal: np.ndarray) -> np.ndarray:
        """
        Allocating version of `process`: returns the transform of `signal` as a new array.
        """
        signal = np.ascontiguousarray(signal, dtype=np.complex128)

        assert signal.shape == (len(self),), f"Signal of shape {signal.shape} does not match transform length {len(self)}"

        spectrum = np.empty_like(signal)
        self.process(signal, spectrum)

        return spectrum

    def describe(self, indent: int = 0) -> str:
        direction = "inverse" if self.is_inverse() else "forward"
        return " " * indent + f"{type(self).__name__}(len={len(self)}, {direction})"

    def __repr__(self) -> str:
        return self.describe()
