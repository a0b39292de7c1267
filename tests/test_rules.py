"""Tests of expansion of Lebedev-Laikov rules."""

import itertools
from typing import Any, Sequence
import unittest.mock

import numpy as np
import pytest
import scipy.special

from pyleb import (
    DEGREES, ORBIT_SIZES, ORDERS, RULES, exceptions, expand_generators, expand_orbit, generate_rule,
    generate_rule_by_order, get_degree, get_order
)


# define parameters for every supported rule
ORDER_PARAMS = [pytest.param(o, id=f"{o} points") for o in ORDERS]


def compute_monomial_mean(exponents: Sequence[int]) -> float:
    """Compute the mean of x**i * y**j * z**k over the unit sphere, which is zero unless all exponents are even."""
    if any(e % 2 for e in exponents):
        return 0.0
    alphas = (np.array(exponents) + 1) / 2
    log_integral = np.log(2) + scipy.special.gammaln(alphas).sum() - scipy.special.gammaln(alphas.sum())
    return np.exp(log_integral) / (4 * np.pi)


def test_supported_orders() -> None:
    """Test that exactly the published rule sizes are supported."""
    assert ORDERS == (
        6, 14, 26, 38, 50, 74, 86, 110, 146, 170, 194, 230, 266, 302, 350, 434, 590, 770, 974, 1202, 1454, 1730, 2030,
        2354, 2702, 3074, 3470, 3890, 4334, 4802, 5294, 5810
    )
    assert set(DEGREES) == set(RULES)
    degrees = [DEGREES[o] for o in ORDERS]
    assert degrees == sorted(degrees) and degrees[0] == 3 and degrees[-1] == 131


@pytest.mark.parametrize('order', ORDER_PARAMS)
def test_rule(order: int) -> None:
    """Test that a rule has the advertised number of distinct points on the unit sphere and that its weights sum to one
    or, when scaled by the surface area, to 4 pi.
    """
    assert sum(ORBIT_SIZES[g[0]] for g in RULES[order]) == order
    points = generate_rule(order)
    assert points.shape == (order, 4)
    nodes, weights = points[:, :3], points[:, 3]
    np.testing.assert_allclose((nodes**2).sum(axis=1), 1, rtol=0, atol=1e-10)
    np.testing.assert_allclose(weights.sum(), 1, rtol=0, atol=1e-12)
    np.testing.assert_allclose((4 * np.pi * weights).sum(), 4 * np.pi, rtol=0, atol=1e-10)
    assert np.unique(nodes, axis=0).shape[0] == order


@pytest.mark.parametrize('order', ORDER_PARAMS)
def test_low_degree_monomials(order: int) -> None:
    """Test that every monomial up to the degree of a rule (capped to keep the number of monomials manageable) is
    integrated exactly.
    """
    points = generate_rule(order)
    nodes, weights = points[:, :3], points[:, 3]
    degree = min(get_degree(order), 21)
    for exponents in itertools.product(range(degree + 1), repeat=3):
        if sum(exponents) <= degree:
            approximated = weights @ (nodes**np.array(exponents)).prod(axis=1)
            expected = compute_monomial_mean(exponents)
            np.testing.assert_allclose(approximated, expected, rtol=0, atol=1e-12, err_msg=f"{exponents}")


@pytest.mark.parametrize('order', ORDER_PARAMS)
def test_highest_degree_monomials(order: int) -> None:
    """Test that even monomials of the highest degree of a rule are integrated exactly."""
    points = generate_rule(order)
    nodes, weights = points[:, :3], points[:, 3]
    top = get_degree(order) - 1
    for exponents in [(top, 0, 0), (0, 0, top), (top - 2, 2, 0), (2, top - 4, 2), (top // 2 - 1, top // 2 + 1, 0)]:
        if all(e >= 0 and e % 2 == 0 for e in exponents):
            approximated = weights @ (nodes**np.array(exponents)).prod(axis=1)
            expected = compute_monomial_mean(exponents)
            np.testing.assert_allclose(approximated, expected, rtol=1e-10, atol=1e-14, err_msg=f"{exponents}")


def test_smallest_rule() -> None:
    """Test that the 6-point rule consists of the signed axes with equal weights."""
    v = 0.1666666666666667
    expected = np.array([
        [1, 0, 0, v], [-1, 0, 0, v], [0, 1, 0, v], [0, -1, 0, v], [0, 0, 1, v], [0, 0, -1, v]
    ])
    np.testing.assert_array_equal(generate_rule(6), expected)


def test_26_point_rule() -> None:
    """Test that the 26-point rule is built from exactly one orbit of axes, face diagonals, and body diagonals."""
    with unittest.mock.patch('pyleb.rules.expand_orbit', wraps=expand_orbit) as mocked:
        points = expand_generators(RULES[26])
    assert [c[0][0] for c in mocked.call_args_list] == [1, 2, 3]
    np.testing.assert_array_equal(points, generate_rule(26))
    np.testing.assert_allclose((4 * np.pi * points[:, 3]).sum(), 4 * np.pi, rtol=0, atol=1e-12)

    # check the structure of each orbit
    magnitudes = np.abs(points[:, :3])
    np.testing.assert_array_equal(np.sort(magnitudes[:6], axis=1), np.tile([0, 0, 1], (6, 1)))
    np.testing.assert_array_equal(np.sort(magnitudes[6:18], axis=1), np.tile([0, *[np.sqrt(0.5)] * 2], (12, 1)))
    np.testing.assert_array_equal(magnitudes[18:], np.full((8, 3), np.sqrt(1.0 / 3.0)))
    np.testing.assert_array_equal(points[:6, 3], 0.4761904761904762e-1)
    np.testing.assert_array_equal(points[6:18, 3], 0.3809523809523810e-1)
    np.testing.assert_array_equal(points[18:, 3], 0.3214285714285714e-1)


def test_reproducibility() -> None:
    """Test that derived coordinates are computed exactly as in the published routines."""
    a = 0.4597008433809831
    np.testing.assert_array_equal(generate_rule(38)[14], [a, np.sqrt(1.0 - a * a), 0, 0.2857142857142857e-1])
    a = 0.3015113445777636
    np.testing.assert_array_equal(generate_rule(50)[26], [a, a, np.sqrt(1.0 - 2.0 * a * a), 0.2017333553791887e-1])


def test_negative_weights() -> None:
    """Test that negative weights in the published generators are preserved."""
    points = generate_rule(74)
    np.testing.assert_array_equal(points[18:26, 3], -0.2958603896103896e-1)


def test_copies() -> None:
    """Test that modifying a generated rule does not affect subsequently generated rules."""
    points = generate_rule(50)
    points[:] = 0
    np.testing.assert_array_equal(generate_rule(50)[0], [1, 0, 0, 0.1269841269841270e-1])


def test_dispatch() -> None:
    """Test that rules can also be generated by order with the dispatching name and with NumPy integers."""
    np.testing.assert_array_equal(generate_rule_by_order(110), generate_rule(110))
    np.testing.assert_array_equal(generate_rule(np.int64(14)), generate_rule(14))


def test_empty_generators() -> None:
    """Test that expanding no generators gives no points."""
    assert expand_generators([]).shape == (0, 4)


@pytest.mark.parametrize('order', [
    pytest.param(7, id="seven"),
    pytest.param(0, id="zero"),
    pytest.param(-6, id="negative"),
    pytest.param(5811, id="too large"),
    pytest.param(6.0, id="float"),
    pytest.param(True, id="bool"),
    pytest.param('6', id="string"),
    pytest.param(None, id="None"),
])
def test_unsupported_order(order: Any) -> None:
    """Test that unsupported orders are rejected with a message that lists the supported ones."""
    for function in [generate_rule, generate_rule_by_order, get_degree]:
        with pytest.raises(exceptions.UnsupportedOrderError) as info:
            function(order)
        assert isinstance(info.value, ValueError)
        assert f"Requested order: {order!r}." in str(info.value)
        assert "5810" in str(info.value)


@pytest.mark.parametrize(['degree', 'order'], [
    pytest.param(1, 6, id="1"),
    pytest.param(3, 6, id="3"),
    pytest.param(4, 14, id="4"),
    pytest.param(17, 110, id="17"),
    pytest.param(32, 434, id="32"),
    pytest.param(np.int64(41), 590, id="NumPy integer"),
    pytest.param(131, 5810, id="131"),
])
def test_get_order(degree: int, order: int) -> None:
    """Test selection of the smallest rule with a degree."""
    assert get_order(degree) == order
    assert get_degree(order) >= degree


@pytest.mark.parametrize('degree', [
    pytest.param(0, id="zero"),
    pytest.param(-3, id="negative"),
    pytest.param(132, id="too large"),
    pytest.param(3.0, id="float"),
    pytest.param(False, id="bool"),
])
def test_unsupported_degree(degree: Any) -> None:
    """Test that unsupported degrees are rejected."""
    with pytest.raises(exceptions.UnsupportedDegreeError) as info:
        get_order(degree)
    assert isinstance(info.value, ValueError)
    assert "131" in str(info.value)
