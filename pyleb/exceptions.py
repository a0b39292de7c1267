"""Lebedev-Laikov specific exceptions."""

from typing import Any

from .tables import DEGREES, ORDERS
from .utilities.basics import Error


class InvalidSymmetryClassError(Error, ValueError):
    """Encountered a generator with a symmetry class that is not one of the six octahedral orbit types.

    Only classes ``1`` through ``6`` are defined. This indicates malformed generator data rather than a condition that
    can be recovered from.

    """

    _symmetry_class: Any

    def __init__(self, symmetry_class: Any) -> None:
        """Store the invalid class."""
        super().__init__()
        self._symmetry_class = symmetry_class

    def __str__(self) -> str:
        """Supplement the error with the class."""
        return f"{super().__str__()} Symmetry class: {self._symmetry_class!r}."


class NegativeRadicandError(Error, ValueError):
    """Encountered a negative radicand when deriving the dependent coordinate of an orbit.

    The generator does not lie on the unit sphere. Radicands that are negative only up to ``options.radicand_tol`` are
    treated as zero.

    """

    _symmetry_class: int
    _radicand: float

    def __init__(self, symmetry_class: int, radicand: float) -> None:
        """Store the class and the radicand."""
        super().__init__()
        self._symmetry_class = symmetry_class
        self._radicand = radicand

    def __str__(self) -> str:
        """Supplement the error with the class and the radicand."""
        return f"{super().__str__()} Symmetry class: {self._symmetry_class}. Radicand: {self._radicand!r}."


class UnsupportedOrderError(Error, ValueError):
    """The requested number of points is not one of the supported Lebedev-Laikov grid sizes."""

    _order: Any

    def __init__(self, order: Any) -> None:
        """Store the requested order."""
        super().__init__()
        self._order = order

    def __str__(self) -> str:
        """Supplement the error with the requested and supported orders."""
        supported = ", ".join(str(o) for o in ORDERS)
        return f"{super().__str__()} Requested order: {self._order!r}. Supported orders: {supported}."


class UnsupportedDegreeError(Error, ValueError):
    """No Lebedev-Laikov rule integrates polynomials of the requested algebraic degree exactly."""

    _degree: Any

    def __init__(self, degree: Any) -> None:
        """Store the requested degree."""
        super().__init__()
        self._degree = degree

    def __str__(self) -> str:
        """Supplement the error with the requested degree and the supported range."""
        maximum = max(DEGREES.values())
        return f"{super().__str__()} Requested degree: {self._degree!r}. Degrees must be integers from 1 to {maximum}."
