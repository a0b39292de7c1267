r"""Expansion of generators into orbits under octahedral symmetry.

A generator specifies one point on the unit sphere in a reduced domain along with a weight. Its orbit under the full
octahedral group :math:`O_h` (all axis permutations and sign flips) consists of 6 to 48 distinct points, depending on
how many coordinates are zero or repeated:

    ======  ====================  ================================  ======
    Class   Pattern               Derived value                     Points
    ======  ====================  ================================  ======
    ``1``   :math:`(1, 0, 0)`     :math:`a = 1`                     6
    ``2``   :math:`(0, a, a)`     :math:`a = \sqrt{1 / 2}`          12
    ``3``   :math:`(a, a, a)`     :math:`a = \sqrt{1 / 3}`          8
    ``4``   :math:`(a, a, b)`     :math:`b = \sqrt{1 - 2a^2}`       24
    ``5``   :math:`(a, b, 0)`     :math:`b = \sqrt{1 - a^2}`        24
    ``6``   :math:`(a, b, c)`     :math:`c = \sqrt{1 - a^2 - b^2}`  48
    ======  ====================  ================================  ======

"""

import itertools
from typing import Dict, Tuple

import numpy as np

from . import exceptions, options
from .utilities.basics import Array


# axis patterns of each class, which index into the magnitudes (0, a, b, c)
PATTERNS: Dict[int, Tuple[Tuple[int, int, int], ...]] = {
    1: ((1, 0, 0), (0, 1, 0), (0, 0, 1)),
    2: ((0, 1, 1), (1, 0, 1), (1, 1, 0)),
    3: ((1, 1, 1),),
    4: ((1, 1, 2), (1, 2, 1), (2, 1, 1)),
    5: ((1, 2, 0), (2, 1, 0), (1, 0, 2), (2, 0, 1), (0, 1, 2), (0, 2, 1)),
    6: ((1, 2, 3), (1, 3, 2), (2, 1, 3), (2, 3, 1), (3, 1, 2), (3, 2, 1)),
}


def build_template(patterns: Tuple[Tuple[int, int, int], ...]) -> Tuple[Array, Array]:
    """Build the magnitude indices and signs of every point in an orbit. Within each axis pattern, the sign of the
    first nonzero coordinate alternates fastest.
    """
    indices = []
    signs = []
    for pattern in patterns:
        nonzero = [i for i, p in enumerate(pattern) if p != 0]
        for flips in itertools.product([1.0, -1.0], repeat=len(nonzero)):
            point_signs = np.ones(3)
            point_signs[nonzero] = flips[::-1]
            indices.append(pattern)
            signs.append(point_signs)
    return np.array(indices, np.int64), np.array(signs)


TEMPLATES: Dict[int, Tuple[Array, Array]] = {k: build_template(p) for k, p in PATTERNS.items()}
ORBIT_SIZES: Dict[int, int] = {k: s.shape[0] for k, (_, s) in TEMPLATES.items()}


def expand_orbit(symmetry_class: int, a: float = 0.0, b: float = 0.0, weight: float = 1.0) -> Array:
    r"""Expand a generator into all points that are equivalent under octahedral symmetry.

    Parameters
    ----------
    symmetry_class : `int`
        Which of the six orbit types to generate, from ``1`` to ``6``.
    a : `float, optional`
        First generating coordinate. It is only used by classes ``4``, ``5``, and ``6``. Class ``1`` fixes it to ``1``,
        class ``2`` to :math:`\sqrt{1 / 2}`, and class ``3`` to :math:`\sqrt{1 / 3}`.
    b : `float, optional`
        Second generating coordinate. It is only used by class ``6``. Classes ``4`` and ``5`` derive it from ``a``.
    weight : `float, optional`
        Weight assigned to every point in the orbit. Negative weights are valid.

    Returns
    -------
    `ndarray`
        Points in the orbit. Each row is :math:`(x, y, z, w)` where :math:`(x, y, z)` lies on the unit sphere and
        :math:`w` is ``weight``.

    """
    if isinstance(symmetry_class, bool) or not isinstance(symmetry_class, (int, np.integer)):
        raise exceptions.InvalidSymmetryClassError(symmetry_class)
    if symmetry_class not in TEMPLATES:
        raise exceptions.InvalidSymmetryClassError(symmetry_class)
    symmetry_class = int(symmetry_class)

    # derive the magnitudes of the coordinates
    a = float(a)
    b = float(b)
    c = 0.0
    if symmetry_class == 1:
        a = 1.0
    elif symmetry_class == 2:
        a = np.sqrt(0.5)
    elif symmetry_class == 3:
        a = np.sqrt(1.0 / 3.0)
    elif symmetry_class == 4:
        b = compute_root(symmetry_class, 1.0 - 2.0 * a * a)
    elif symmetry_class == 5:
        b = compute_root(symmetry_class, 1.0 - a * a)
    else:
        c = compute_root(symmetry_class, 1.0 - a * a - b * b)

    # fill the orbit
    indices, signs = TEMPLATES[symmetry_class]
    points = np.empty((signs.shape[0], 4))
    points[:, :3] = signs * np.array([0.0, a, b, c])[indices]
    points[:, 3] = weight
    return points


def compute_root(symmetry_class: int, radicand: float) -> float:
    """Compute the dependent coordinate of an orbit, treating negative rounding error as zero."""
    if radicand < 0:
        if radicand < -options.radicand_tol:
            raise exceptions.NegativeRadicandError(symmetry_class, radicand)
        return 0.0
    return float(np.sqrt(radicand))
