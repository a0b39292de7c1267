"""Tests of quadrature configurations and construction of grids."""

from typing import Any, List, Optional

import numpy as np
import pytest

from pyleb import Quadrature, build_grid, data_to_dict, exceptions, generate_rule, options


@pytest.mark.parametrize(['specification', 'size', 'order', 'degree'], [
    pytest.param('points', 6, 6, 3, id="smallest rule by points"),
    pytest.param('points', 302, 302, 29, id="medium rule by points"),
    pytest.param('points', 5810, 5810, 131, id="largest rule by points"),
    pytest.param('degree', 1, 6, 3, id="smallest rule by degree"),
    pytest.param('degree', 30, 350, 31, id="medium rule by degree"),
    pytest.param('degree', 36, 590, 41, id="rule with a gap in degrees"),
    pytest.param('degree', 131, 5810, 131, id="largest rule by degree"),
])
def test_selection_and_formatting(specification: str, size: int, order: int, degree: int) -> None:
    """Test that configurations select the expected rule, can be formatted, and build its nodes and weights."""
    quadrature = Quadrature(specification, size)
    assert quadrature.order == order
    assert quadrature.degree == degree
    assert f"{order}-point" in str(quadrature)
    assert repr(quadrature) == str(quadrature)
    nodes, weights = quadrature._build()
    points = generate_rule(order)
    np.testing.assert_array_equal(nodes, points[:, :3])
    np.testing.assert_array_equal(weights, points[:, 3])


@pytest.mark.parametrize('scale', [
    pytest.param(1, id="integer"),
    pytest.param(4 * np.pi, id="surface area"),
    pytest.param(0.5, id="half"),
])
def test_scale(scale: float) -> None:
    """Test that weights are scaled to sum to the configured value."""
    quadrature = Quadrature('points', 194, {'scale': scale})
    assert quadrature.scale == scale
    _, weights = quadrature._build()
    np.testing.assert_allclose(weights.sum(), scale, rtol=1e-14, atol=0)
    np.testing.assert_allclose(weights, scale * generate_rule(194)[:, 3], rtol=0, atol=0)


@pytest.mark.parametrize(['specification', 'size', 'specification_options', 'error'], [
    pytest.param('lebedev', 6, None, ValueError, id="unknown specification"),
    pytest.param('points', 0, None, ValueError, id="zero size"),
    pytest.param('points', -6, None, ValueError, id="negative size"),
    pytest.param('points', 6.0, None, ValueError, id="float size"),
    pytest.param('degree', True, None, ValueError, id="bool size"),
    pytest.param('points', 6, 'scale', ValueError, id="options that are not a dict"),
    pytest.param('points', 6, {'seed': 0}, ValueError, id="unknown option"),
    pytest.param('points', 6, {'scale': 0}, ValueError, id="zero scale"),
    pytest.param('points', 6, {'scale': -1.0}, ValueError, id="negative scale"),
    pytest.param('points', 6, {'scale': np.inf}, ValueError, id="infinite scale"),
    pytest.param('points', 6, {'scale': '1'}, ValueError, id="string scale"),
    pytest.param('points', 7, None, exceptions.UnsupportedOrderError, id="unsupported order"),
    pytest.param('degree', 132, None, exceptions.UnsupportedDegreeError, id="unsupported degree"),
])
def test_invalid_configurations(
        specification: str, size: Any, specification_options: Optional[Any], error: type) -> None:
    """Test that invalid configurations are rejected when initialized."""
    with pytest.raises(error):
        Quadrature(specification, size, specification_options)


def test_build_grid() -> None:
    """Test that grids have the expected fields and that spherical coordinates agree with Cartesian ones."""
    grid = build_grid(Quadrature('degree', 41, {'scale': 4 * np.pi}))
    assert grid.weights.shape == (590, 1)
    assert grid.nodes.shape == (590, 3)
    assert grid.angles.shape == (590, 2)
    assert grid.weights.dtype == options.dtype
    np.testing.assert_allclose(grid.weights.sum(), 4 * np.pi, rtol=0, atol=1e-10)

    # reconstruct the Cartesian coordinates
    theta, phi = grid.angles.T.astype(np.float64)
    reconstructed = np.c_[np.sin(theta) * np.cos(phi), np.sin(theta) * np.sin(phi), np.cos(theta)]
    np.testing.assert_allclose(reconstructed, grid.nodes.astype(np.float64), rtol=0, atol=1e-12)
    assert (theta >= 0).all() and (theta <= np.pi).all()
    assert (phi > -np.pi).all() and (phi <= np.pi).all()


def test_build_grid_output(messages: List[str]) -> None:
    """Test that building a grid outputs status updates."""
    build_grid(Quadrature('points', 26))
    assert len(messages) == 2
    assert messages[0] == "Building the 26-point grid ..."
    assert messages[1].startswith("Built the 26-point grid after ")


def test_build_grid_weights_warning(monkeypatch: Any) -> None:
    """Test that weights that do not sum to the configured scale give rise to a warning."""
    monkeypatch.setattr(options, 'weights_tol', -1.0)
    with pytest.warns(UserWarning, match="options.weights_tol"):
        build_grid(Quadrature('points', 14))


def test_build_grid_type() -> None:
    """Test that only configurations can be built."""
    with pytest.raises(TypeError):
        build_grid(generate_rule(6))


def test_data_to_dict() -> None:
    """Test that grids can be converted into dictionaries of one-dimensional arrays."""
    data = data_to_dict(build_grid(Quadrature('points', 38)))
    assert set(data) == {'weights', 'nodes0', 'nodes1', 'nodes2', 'angles0', 'angles1'}
    assert all(v.shape == (38,) for v in data.values())
    points = generate_rule(38)
    for index in range(3):
        np.testing.assert_allclose(data[f'nodes{index}'], points[:, index], rtol=0, atol=0)
    with pytest.raises(TypeError):
        data_to_dict({'weights': points[:, 3]})
