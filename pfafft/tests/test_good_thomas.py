import pfafft as pf
import numpy as np
import pytest
import random

COPRIME_PAIRS = [(1, 1), (1, 7), (2, 3), (3, 2), (3, 4), (4, 3), (4, 5), (5, 7), (7, 9), (8, 15), (11, 13), (16, 9)]

def naive_dft(signal: np.ndarray, inverse: bool = False) -> np.ndarray:
    n = len(signal)
    sign = 1 if inverse else -1
    exponents = np.outer(np.arange(n), np.arange(n))

    return np.exp(sign * 2j * np.pi * exponents / n) @ signal

def random_signal(length: int) -> np.ndarray:
    return np.random.rand(length) + 1j * np.random.rand(length)

def make_good_thomas(width: int, height: int, inverse: bool = False) -> pf.GoodThomasAlgorithm:
    return pf.GoodThomasAlgorithm(
        width, pf.DFTAlgorithm(width, inverse=inverse),
        height, pf.DFTAlgorithm(height, inverse=inverse)
    )

def run(algorithm: pf.FFTAlgorithm, signal: np.ndarray) -> np.ndarray:
    spectrum = np.zeros(len(algorithm), dtype=np.complex128)
    algorithm.process(signal, spectrum)
    return spectrum

def test_matches_naive_dft():
    for width, height in COPRIME_PAIRS:
        algorithm = make_good_thomas(width, height)

        for _ in range(3):
            signal = random_signal(width * height)

            assert np.allclose(run(algorithm, signal), naive_dft(signal))
            assert np.allclose(run(algorithm, signal), np.fft.fft(signal))

def test_maps_are_permutations():
    for width, height in COPRIME_PAIRS:
        algorithm = make_good_thomas(width, height)
        length = width * height

        assert len(algorithm.input_map) == length
        assert len(algorithm.output_map) == length

        assert np.array_equal(np.sort(algorithm.input_map), np.arange(length))
        assert np.array_equal(np.sort(algorithm.output_map), np.arange(length))

def test_input_map_3x4():
    algorithm = make_good_thomas(3, 4)

    for i in range(12):
        assert algorithm.input_map[i] == ((i % 3) * 4 + (i // 3) * 3) % 12

def test_output_map_3x4():
    # inverse of 3 mod 4 is 3, inverse of 4 mod 3 is 1
    assert (3 * 3) % 4 == 1
    assert (4 * 1) % 3 == 1

    algorithm = make_good_thomas(3, 4)

    for i in range(12):
        y = i % 4
        x = i // 4
        assert algorithm.output_map[i] == (x * 4 * 1 + y * 3 * 3) % 12

def test_maps_are_read_only():
    algorithm = make_good_thomas(3, 4)

    with pytest.raises(ValueError):
        algorithm.input_map[0] = 1

    with pytest.raises(ValueError):
        algorithm.output_map[0] = 1

def test_linearity():
    for width, height in [(3, 4), (5, 7), (8, 9)]:
        algorithm = make_good_thomas(width, height)

        x = random_signal(width * height)
        y = random_signal(width * height)
        a = 2.5 - 1.0j
        b = -0.75 + 3.0j

        assert np.allclose(run(algorithm, a * x + b * y), a * run(algorithm, x) + b * run(algorithm, y))

def test_non_coprime_sizes_rejected():
    with pytest.raises(pf.FactorizationError):
        make_good_thomas(4, 6)

    with pytest.raises(pf.FactorizationError, match=r"\(6,9\)"):
        make_good_thomas(6, 9)

def test_factorization_error_is_value_error():
    with pytest.raises(ValueError):
        make_good_thomas(2, 2)

def test_mismatched_sub_transforms_rejected():
    with pytest.raises(pf.FactorizationError):
        pf.GoodThomasAlgorithm(3, pf.DFTAlgorithm(4), 4, pf.DFTAlgorithm(3))

    with pytest.raises(pf.FactorizationError):
        pf.GoodThomasAlgorithm(3, pf.DFTAlgorithm(3), 4, pf.DFTAlgorithm(4, inverse=True))

def test_impulse():
    for width, height in COPRIME_PAIRS:
        length = width * height
        signal = np.zeros(length, dtype=np.complex128)
        signal[0] = 1

        assert np.allclose(run(make_good_thomas(width, height), signal), np.ones(length))

def test_zeros():
    for width, height in COPRIME_PAIRS:
        length = width * height
        spectrum = np.full(length, 7 + 7j)

        make_good_thomas(width, height).process(np.zeros(length, dtype=np.complex128), spectrum)

        assert np.array_equal(spectrum, np.zeros(length))

def test_round_trip():
    for width, height in [(3, 4), (5, 7), (4, 9), (7, 16)]:
        forward = make_good_thomas(width, height)
        inverse = make_good_thomas(width, height, inverse=True)

        assert not forward.is_inverse()
        assert inverse.is_inverse()

        signal = random_signal(width * height)
        reconstructed = run(inverse, run(forward, signal)) / (width * height)

        assert np.allclose(reconstructed, signal)

def test_inverse_matches_naive():
    algorithm = make_good_thomas(5, 7, inverse=True)
    signal = random_signal(35)

    assert np.allclose(run(algorithm, signal), naive_dft(signal, inverse=True))

def test_repeated_process_reuses_scratch():
    algorithm = make_good_thomas(5, 7)
    scratch = algorithm._scratch

    for _ in range(5):
        signal = random_signal(35)
        assert np.allclose(run(algorithm, signal), np.fft.fft(signal))

    assert algorithm._scratch is scratch

def test_signal_not_modified():
    algorithm = make_good_thomas(4, 5)
    signal = random_signal(20)
    original = signal.copy()

    run(algorithm, signal)

    assert np.array_equal(signal, original)

def test_nested_good_thomas():
    # 3 * 4 * 5: a Good-Thomas 12 x 5 whose width is itself a Good-Thomas 3 x 4
    inner = make_good_thomas(3, 4)
    algorithm = pf.GoodThomasAlgorithm(12, inner, 5, pf.DFTAlgorithm(5))

    signal = random_signal(60)

    assert np.allclose(run(algorithm, signal), np.fft.fft(signal))

def test_fast_sub_transforms():
    algorithm = pf.GoodThomasAlgorithm(16, pf.Radix2Algorithm(16), 9, pf.MixedRadixAlgorithm(3, pf.DFTAlgorithm(3), 3, pf.DFTAlgorithm(3)))

    signal = random_signal(144)

    assert np.allclose(run(algorithm, signal), np.fft.fft(signal))

def test_random_coprime_pairs():
    primes = [2, 3, 5, 7, 11, 13]

    for _ in range(10):
        p, q = random.sample(primes, 2)
        width = p ** random.choice([1, 2])
        height = q ** random.choice([1, 2])

        algorithm = make_good_thomas(width, height)
        signal = random_signal(width * height)

        assert np.allclose(run(algorithm, signal), np.fft.fft(signal))

def test_describe():
    description = make_good_thomas(3, 4).describe()

    assert description.splitlines()[0] == "GoodThomasAlgorithm(len=12, forward) width=3 height=4"
    assert "    DFTAlgorithm(len=3, forward)" in description
    assert "    DFTAlgorithm(len=4, forward)" in description
