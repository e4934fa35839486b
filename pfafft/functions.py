import threading

import numpy as np

from functools import lru_cache

from .algorithm import FFTAlgorithm
from .config import PlannerConfig
from .planner import FFTPlanner

@lru_cache(maxsize=None)
def _make_thread_fft_plan(length: int, inverse: bool, thread_id: int) -> FFTAlgorithm:
    return FFTPlanner(inverse=inverse, config=PlannerConfig.from_env()).plan_fft(length)

def make_fft_plan(length: int, inverse: bool = False) -> FFTAlgorithm:
    """
    Return a cached FFT plan for `length`. Plans are cached per thread since
    an algorithm instance owns scratch memory and must not be shared between threads.
    """
    return _make_thread_fft_plan(length, inverse, threading.get_ident())

def get_cache_info():
    return _make_thread_fft_plan.cache_info()

def cache_clear():
    _make_thread_fft_plan.cache_clear()

def fft(signal: np.ndarray, axis: int = -1, inverse: bool = False, normalize_inverse: bool = True) -> np.ndarray:
    """
    Compute the 1D FFT of `signal` along `axis`, returning a new complex128 array.

    Args:
        signal (`np.ndarray`): Input data, any shape. Converted to complex128.
        axis (`int`): The axis to transform.
        inverse (`bool`): Run the inverse transform.
        normalize_inverse (`bool`): Scale the inverse transform by 1/N.
    """
    data = np.moveaxis(np.asarray(signal, dtype=np.complex128), axis, -1)

    length = data.shape[-1]
    assert length >= 1, "Cannot transform an empty axis"

    plan = make_fft_plan(length, inverse)

    batches = np.ascontiguousarray(data.reshape(-1, length))
    result = np.empty_like(batches)

    for batch_in, batch_out in zip(batches, result):
        plan.process(batch_in, batch_out)

    if inverse and normalize_inverse:
        result /= length

    return np.moveaxis(result.reshape(data.shape), -1, axis)

def ifft(signal: np.ndarray, axis: int = -1, normalize: bool = True) -> np.ndarray:
    return fft(signal, axis=axis, inverse=True, normalize_inverse=normalize)
