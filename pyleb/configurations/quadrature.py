"""Configuration of Lebedev-Laikov quadrature over the unit sphere."""

from typing import Optional, Tuple

import numpy as np

from ..rules import generate_rule, get_degree, get_order, validate_order
from ..utilities.basics import Array, Options, StringRepresentation, format_options


class Quadrature(StringRepresentation):
    r"""Configuration for building nodes and weights for integration over the unit sphere.

    Lebedev-Laikov rules have octahedral symmetry and integrate all polynomials in :math:`x`, :math:`y`, and :math:`z`
    up to some algebraic degree exactly. Rules are available with 6 points (degree 3) up to 5,810 points (degree 131).
    For more information, see Lebedev and Laikov (1999).

    Parameters
    ----------
    specification : `str`
        How to choose the rule. One of the following:

            - ``'points'`` - Use the rule with ``size`` points, which must be one of the supported orders:
              6, 14, 26, 38, 50, 74, 86, 110, 146, 170, 194, 230, 266, 302, 350, 434, 590, 770, 974, 1202, 1454, 1730,
              2030, 2354, 2702, 3074, 3470, 3890, 4334, 4802, 5294, or 5810.

            - ``'degree'`` - Use the smallest rule that integrates polynomials of degree ``size`` exactly.

    size : `int`
        The number of points if ``specification`` is ``'points'`` and the algebraic degree otherwise.
    specification_options : `dict, optional`
        Options for the rule. The following option is supported:

            - **scale** : (`float`) - Value that weights sum to. By default, weights sum to ``1``, so the weighted sum
              of function values approximates the mean of the function over the sphere. To approximate the surface
              integral instead, use ``4 * numpy.pi``.

    """

    _specification: str
    _size: int
    _order: int
    _description: str
    _specification_options: Options

    def __init__(self, specification: str, size: int, specification_options: Optional[Options] = None) -> None:
        """Validate the specification and identify the rule."""
        specifications = {
            'points': (select_order, f"with {size} points"),
            'degree': (get_order, f"of degree at least {size}"),
        }

        # validate the configuration
        if specification not in specifications:
            raise ValueError(f"specification must be one of {list(specifications.keys())}.")
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError("size must be a positive integer.")
        if specification_options is not None and not isinstance(specification_options, dict):
            raise ValueError("specification_options must be None or a dict.")

        # initialize class attributes
        selector, self._description = specifications[specification]
        self._specification = specification
        self._size = size
        self._order = selector(size)

        # set default options before updating and validating them
        self._specification_options: Options = {'scale': 1.0}
        self._specification_options.update(specification_options or {})
        unknown = sorted(set(self._specification_options) - {'scale'})
        if unknown:
            raise ValueError(f"The specification options {unknown} are not supported.")
        scale = self._specification_options['scale']
        if isinstance(scale, bool) or not isinstance(scale, (int, float)) or not np.isfinite(scale) or scale <= 0:
            raise ValueError("The specification option scale must be a positive float.")
        self._specification_options['scale'] = float(scale)

    def __str__(self) -> str:
        """Format the configuration as a string."""
        return (
            f"Configured to construct nodes and weights {self._description} according to the {self.order}-point "
            f"Lebedev-Laikov rule of degree {self.degree} with options {format_options(self._specification_options)}."
        )

    @property
    def order(self) -> int:
        """Number of points in the rule."""
        return self._order

    @property
    def degree(self) -> int:
        """Algebraic degree of precision of the rule."""
        return get_degree(self._order)

    @property
    def scale(self) -> float:
        """Value that weights sum to."""
        return self._specification_options['scale']

    def _build(self) -> Tuple[Array, Array]:
        """Build nodes and weights."""
        points = generate_rule(self._order)
        return points[:, :3], self.scale * points[:, 3]


def select_order(size: int) -> int:
    """Select the rule with a number of points."""
    validate_order(size)
    return size
