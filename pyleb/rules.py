"""Expansion of Lebedev-Laikov rules from their generators."""

import functools
from typing import Any, Iterable

import numpy as np

from . import exceptions
from .orbits import expand_orbit
from .tables import DEGREES, ORDERS, RULES, Generator
from .utilities.basics import Array


def expand_generators(generators: Iterable[Generator]) -> Array:
    """Expand a sequence of generators into the concatenation of their orbits.

    Parameters
    ----------
    generators : `iterable of tuple`
        Generators of the form ``(symmetry_class, a, b, weight)``, each of which is passed to
        :func:`~pyleb.orbits.expand_orbit`.

    Returns
    -------
    `ndarray`
        Points of all orbits in the order of the generators. Each row is :math:`(x, y, z, w)`.

    """
    orbits = [expand_orbit(*g) for g in generators]
    if not orbits:
        return np.zeros((0, 4))
    return np.concatenate(orbits)


def generate_rule(order: int) -> Array:
    """Generate the nodes and weights of a Lebedev-Laikov rule.

    Parameters
    ----------
    order : `int`
        Number of points in the rule. This must be one of the supported orders in :data:`ORDERS`.

    Returns
    -------
    `ndarray`
        The ``order`` points of the rule. Each row is :math:`(x, y, z, w)` where :math:`(x, y, z)` lies on the unit
        sphere and weights :math:`w` sum to one. The array is a copy that can be freely modified.

    """
    validate_order(order)
    return expand_rule(int(order)).copy()


def generate_rule_by_order(order: int) -> Array:
    """Generate the nodes and weights of the rule with ``order`` points, which is the same as :func:`generate_rule`."""
    return generate_rule(order)


@functools.lru_cache()
def expand_rule(order: int) -> Array:
    """Expand the generators of a supported rule, freezing the expanded points so that they can be cached."""
    points = expand_generators(RULES[order])
    points.flags.writeable = False
    return points


def validate_order(order: Any) -> None:
    """Raise an error if an order is not one of the supported rule sizes."""
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)) or order not in RULES:
        raise exceptions.UnsupportedOrderError(order)


def get_degree(order: int) -> int:
    """Get the algebraic degree of precision of a rule, which is the highest degree of polynomial that it integrates
    exactly over the unit sphere.

    Parameters
    ----------
    order : `int`
        Number of points in the rule.

    Returns
    -------
    `int`
        The degree of the rule.

    """
    validate_order(order)
    return DEGREES[int(order)]


def get_order(degree: int) -> int:
    """Get the number of points in the smallest rule that integrates polynomials of a degree exactly.

    Parameters
    ----------
    degree : `int`
        Required algebraic degree of precision, from ``1`` up to the degree of the largest rule, ``131``.

    Returns
    -------
    `int`
        The number of points in the smallest rule with at least the required degree.

    """
    if isinstance(degree, bool) or not isinstance(degree, (int, np.integer)) or degree < 1:
        raise exceptions.UnsupportedDegreeError(degree)
    for order in ORDERS:
        if DEGREES[order] >= degree:
            return order
    raise exceptions.UnsupportedDegreeError(degree)
