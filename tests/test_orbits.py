"""Tests of expansion of generators into orbits under octahedral symmetry."""

import itertools
from typing import Any

import numpy as np
import pytest

from pyleb import ORBIT_SIZES, exceptions, expand_orbit, options


@pytest.mark.parametrize(['symmetry_class', 'a', 'b', 'size'], [
    pytest.param(1, 0.0, 0.0, 6, id="axes"),
    pytest.param(2, 0.0, 0.0, 12, id="face diagonals"),
    pytest.param(3, 0.0, 0.0, 8, id="body diagonals"),
    pytest.param(4, 0.3015113445777636, 0.0, 24, id="two equal coordinates"),
    pytest.param(5, 0.4597008433809831, 0.0, 24, id="one zero coordinate"),
    pytest.param(6, 0.1785405905140366, 0.5, 48, id="general"),
])
def test_orbit(symmetry_class: int, a: float, b: float, size: int) -> None:
    """Test that an orbit consists of the expected number of distinct points on the unit sphere that share the same
    weight, and that it is closed under every axis permutation and sign flip.
    """
    points = expand_orbit(symmetry_class, a, b, 0.25)
    assert points.shape == (size, 4)
    assert ORBIT_SIZES[symmetry_class] == size
    np.testing.assert_array_equal(points[:, 3], 0.25)
    nodes = points[:, :3]
    np.testing.assert_allclose((nodes**2).sum(axis=1), 1, rtol=0, atol=1e-14)
    assert np.unique(nodes, axis=0).shape[0] == size

    # all operations in the group should map the orbit onto itself
    original = {tuple(n) for n in nodes}
    for permutation in itertools.permutations(range(3)):
        for signs in itertools.product([1.0, -1.0], repeat=3):
            assert {tuple(n) for n in nodes[:, permutation] * signs} == original


@pytest.mark.parametrize(['a', 'b'], [
    pytest.param(0.0, 0.0, id="zeros"),
    pytest.param(0.7, 0.3, id="ignored coordinates"),
])
def test_axes(a: float, b: float) -> None:
    """Test that the axis orbit ignores generating coordinates."""
    v = 0.1666666666666667
    expected = np.array([
        [1, 0, 0, v], [-1, 0, 0, v], [0, 1, 0, v], [0, -1, 0, v], [0, 0, 1, v], [0, 0, -1, v]
    ])
    np.testing.assert_array_equal(expand_orbit(1, a, b, v), expected)


def test_point_order() -> None:
    """Test that points are ordered as in the published tables: within each axis pattern, the sign of the first
    nonzero coordinate alternates fastest.
    """
    h = np.sqrt(0.5)
    points = expand_orbit(2, weight=1.0)[:, :3]
    np.testing.assert_array_equal(points[[0, 1, 2, 4, 11]], [[0, h, h], [0, -h, h], [0, h, -h], [h, 0, h], [-h, -h, 0]])

    a = 0.4597008433809831
    b = np.sqrt(1.0 - a * a)
    points = expand_orbit(5, a, weight=1.0)[:, :3]
    np.testing.assert_array_equal(points[[0, 1, 4, 8, 12, 16, 23]], [
        [a, b, 0], [-a, b, 0], [b, a, 0], [a, 0, b], [b, 0, a], [0, a, b], [0, -b, -a]
    ])

    a = 0.1785405905140366
    b = 0.5
    c = np.sqrt(1.0 - a * a - b * b)
    points = expand_orbit(6, a, b, 1.0)[:, :3]
    np.testing.assert_array_equal(points[[0, 3, 4, 8, 16, 24, 32, 40, 47]], [
        [a, b, c], [-a, -b, c], [a, b, -c], [a, c, b], [b, a, c], [b, c, a], [c, a, b], [c, b, a], [-c, -b, -a]
    ])


def test_negative_weight() -> None:
    """Test that negative weights are preserved."""
    points = expand_orbit(3, weight=-0.2958603896103896e-1)
    np.testing.assert_array_equal(points[:, 3], -0.2958603896103896e-1)


@pytest.mark.parametrize('symmetry_class', [
    pytest.param(0, id="zero"),
    pytest.param(7, id="seven"),
    pytest.param(-1, id="negative"),
    pytest.param(2.0, id="float"),
    pytest.param(True, id="bool"),
    pytest.param('1', id="string"),
    pytest.param(None, id="None"),
])
def test_invalid_symmetry_class(symmetry_class: Any) -> None:
    """Test that symmetry classes outside of the six orbit types are rejected."""
    with pytest.raises(exceptions.InvalidSymmetryClassError) as info:
        expand_orbit(symmetry_class, 0.5, 0.5, 1.0)
    assert isinstance(info.value, ValueError)
    assert repr(symmetry_class) in str(info.value)


@pytest.mark.parametrize(['symmetry_class', 'a', 'b'], [
    pytest.param(4, 0.8, 0.0, id="two equal coordinates"),
    pytest.param(5, 1.5, 0.0, id="one zero coordinate"),
    pytest.param(6, 0.8, 0.8, id="general"),
])
def test_negative_radicand(symmetry_class: int, a: float, b: float) -> None:
    """Test that generators off of the unit sphere are rejected."""
    with pytest.raises(exceptions.NegativeRadicandError):
        expand_orbit(symmetry_class, a, b, 1.0)


def test_rounded_radicand(monkeypatch: Any) -> None:
    """Test that radicands that are negative only because of rounding error are treated as zero unless the tolerance
    is turned off.
    """
    a = np.nextafter(1.0, 2.0)
    points = expand_orbit(5, a, 0.0, 1.0)
    np.testing.assert_array_equal(points[0], [a, 0, 0, 1])
    monkeypatch.setattr(options, 'radicand_tol', 0.0)
    with pytest.raises(exceptions.NegativeRadicandError):
        expand_orbit(5, a, 0.0, 1.0)
