from typing import Tuple

from .init import log_error
from ..math_utils import extended_euclidean_algorithm

class FactorizationError(ValueError):
    """
    Raised when an FFT algorithm is built from sizes or sub-transforms that cannot
    form a valid decomposition. This points at a planning mistake upstream, it is
    not meant to be caught and retried.
    """

def raise_factorization_error(message: str):
    """
    Log `message` as an error and raise it as a FactorizationError.
    """
    log_error(message)
    raise FactorizationError(message)

def check_coprime(n1: int, n2: int) -> Tuple[int, int]:
    """
    Check that `n1` and `n2` are coprime and return the Bezout coefficients
    (x, y) with n1 * x + n2 * y == 1.

    Raises:
        FactorizationError: If either size is below 1 or the sizes share a factor.
    """

    if n1 < 1 or n2 < 1:
        raise_factorization_error(f"Invalid sizes ({n1},{n2}): sizes must be at least 1")

    gcd, n1_coefficient, n2_coefficient = extended_euclidean_algorithm(n1, n2)

    if gcd != 1:
        raise_factorization_error(f"Invalid input n1 and n2 to Good-Thomas Algorithm: ({n1},{n2}): Inputs must be coprime")

    return n1_coefficient, n2_coefficient
