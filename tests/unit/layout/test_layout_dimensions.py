import math

import pytest

from byteraster.codec.stages.layout.dimensions import U32_MAX, _ceil_sqrt, solve_dimensions


def _formula(n: int, d: int):
    w = math.ceil(math.sqrt(n))
    width = w + (d - w % d)
    return width, width // d - 1


@pytest.mark.parametrize("d", [3, 4])
def test_dimensions_properties_sweep(d: int):
    for n in range(0, 4000):
        width, height = solve_dimensions(n, d)
        assert width % d == 0, (n, d)
        assert height == width // d - 1, (n, d)
        assert width * height * d >= n, (n, d)


@pytest.mark.parametrize("d", [3, 4])
def test_dimensions_match_formula_whenever_it_fits(d: int):
    for n in range(0, 4000):
        fw, fh = _formula(n, d)
        if fw * fh * d >= n:
            assert solve_dimensions(n, d) == (fw, fh), (n, d)


def test_dimensions_concrete_fourteen_bytes():
    assert solve_dimensions(14, 4) == (8, 1)


def test_dimensions_full_divisor_added_on_exact_multiple():
    # w = 4 -> 4 % 4 == 0 still adds 4
    assert solve_dimensions(16, 4) == (8, 1)
    # w = 3 -> 3 % 3 == 0 still adds 3
    assert solve_dimensions(9, 3) == (6, 1)


def test_dimensions_grow_when_formula_underallocates():
    # formula gives 8x1x4 = 32 < 49
    assert _formula(49, 4) == (8, 1)
    assert solve_dimensions(49, 4) == (12, 2)


def test_dimensions_empty_buffer():
    assert solve_dimensions(0, 4) == (4, 0)
    assert solve_dimensions(0, 3) == (3, 0)


def test_dimensions_rejects_length_beyond_u32():
    with pytest.raises(OverflowError):
        solve_dimensions(U32_MAX + 1, 4)


def test_dimensions_rejects_capacity_beyond_u32():
    # w = 65536 -> 65540 x 16384 x 4 bytes overflows u32
    with pytest.raises(OverflowError):
        solve_dimensions(U32_MAX, 4)


def test_dimensions_rejects_bad_arguments():
    with pytest.raises(ValueError):
        solve_dimensions(-1, 4)
    with pytest.raises(ValueError):
        solve_dimensions(10, 0)
    with pytest.raises(TypeError):
        solve_dimensions(10.0, 4)


@pytest.mark.parametrize(
    "n", [0, 1, 2, 3, 4, 15, 16, 17, 65535 ** 2, 65535 ** 2 + 1, 2 ** 31, U32_MAX]
)
def test_integer_sqrt_matches_float_ceil(n: int):
    assert _ceil_sqrt(n) == math.ceil(math.sqrt(n))
