from typing import List, Tuple

import numpy as np

def extended_euclidean_algorithm(a: int, b: int) -> Tuple[int, int, int]:
    """
    Computes the greatest common divisor of `a` and `b` along with the Bezout
    coefficients `x` and `y` such that a * x + b * y == gcd.

    For positive inputs the coefficients satisfy |x| <= b / gcd and |y| <= a / gcd,
    so a negative coefficient can be brought into range by adding the modulus once.

    Args:
        a (`int`): The first integer.
        b (`int`): The second integer.

    Returns:
        `Tuple[int, int, int]`: (gcd, x, y)
    """

    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1

    while r != 0:
        quotient = old_r // r

        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t

    return old_r, old_s, old_t

def prime_factors(n) -> List[int]:
    assert n > 0, 'Number must be greater than 0'

    factors = []

    # Handle the factor 2 separately
    while n % 2 == 0:
        factors.append(2)
        n //= 2

    # Now handle odd factors
    factor = 3
    while factor * factor <= n:
        while n % factor == 0:
            factors.append(factor)
            n //= factor
        factor += 2

    # If at the end, n is greater than 1, it is a prime number itself
    if n > 1:
        factors.append(n)

    return factors

def prime_powers(n: int) -> List[int]:
    """
    Groups the prime factors of `n` into prime powers, e.g. 360 -> [8, 9, 5].
    The returned values are pairwise coprime and multiply to `n`.
    """
    powers: List[int] = []
    last_prime = None

    for prime in prime_factors(n):
        if prime == last_prime:
            powers[-1] *= prime
            continue

        powers.append(prime)
        last_prime = prime

    return powers

def is_prime(n: int) -> bool:
    return n > 1 and prime_factors(n) == [n]

def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0

def split_coprime(n: int) -> Tuple[int, int]:
    """
    Splits `n` into two coprime factors (n1, n2) with n1 * n2 == n, as close to
    sqrt(n) as a greedy assignment of its prime powers allows.

    `n` must have at least two distinct prime factors.
    """
    powers = sorted(prime_powers(n), reverse=True)

    assert len(powers) >= 2, f"{n} has a single distinct prime factor and cannot be split into coprime parts"

    groups = [[], []]

    for power in powers:
        smaller = 0 if np.prod(groups[0], dtype=np.int64) <= np.prod(groups[1], dtype=np.int64) else 1
        groups[smaller].append(power)

    n1 = int(np.prod(groups[0], dtype=np.int64))
    n2 = int(np.prod(groups[1], dtype=np.int64))

    return max(n1, n2), min(n1, n2)
