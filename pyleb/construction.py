"""Data construction."""

import time
from typing import Dict

import numpy as np

from . import options
from .configurations.quadrature import Quadrature
from .utilities.basics import Array, RecArray, format_number, format_seconds, output, structure_matrices, warn


def build_grid(quadrature: Quadrature) -> RecArray:
    r"""Build nodes and weights for integration over the unit sphere.

    Parameters
    ----------
    quadrature : `Quadrature`
        :class:`Quadrature` configuration for which rule to build and how to scale its weights.

    Returns
    -------
    `recarray`
        Nodes and weights for integration over the unit sphere. Each of the rows corresponds to a point. Fields:

            - **weights** : (`numeric`) - Integration weights, :math:`w`, which sum to the configured scale.

            - **nodes** : (`numeric`) - Cartesian coordinates :math:`(x, y, z)` of points on the unit sphere.

            - **angles** : (`numeric`) - Spherical coordinates :math:`(\theta, \phi)` of the same points, in radians.
              The polar angle :math:`\theta = \arccos z` is in :math:`[0, \pi]` and the azimuthal angle
              :math:`\phi = \operatorname{atan2}(y, x)` is in :math:`(-\pi, \pi]`.

    """
    if not isinstance(quadrature, Quadrature):
        raise TypeError("quadrature must be a Quadrature instance.")

    # build the nodes and weights
    output(f"Building the {quadrature.order}-point grid ...")
    start_time = time.time()
    nodes, weights = quadrature._build()
    angles = np.c_[np.arccos(np.clip(nodes[:, 2], -1, 1)), np.arctan2(nodes[:, 1], nodes[:, 0])]

    # check that weights sum to the scale
    total = weights.sum()
    if np.abs(total - quadrature.scale) > options.weights_tol:
        warn(
            f"Weights sum to {format_number(total)} instead of {format_number(quadrature.scale)}, which differs by "
            f"more than options.weights_tol."
        )

    output(f"Built the {quadrature.order}-point grid after {format_seconds(time.time() - start_time)}.")
    return structure_matrices({
        'weights': (weights, options.dtype),
        'nodes': (nodes, options.dtype),
        'angles': (angles, options.dtype)
    })


def data_to_dict(data: RecArray, ignore_empty: bool = True) -> Dict[str, Array]:
    r"""Convert a NumPy record array into a dictionary.

    Grids built by :func:`build_grid` are structured as NumPy record arrays, which can be cumbersome to work with when
    working with data types that can't represent matrices, such as the :class:`pandas.DataFrame`.

    This function converts record arrays into dictionaries that map field names to one-dimensional arrays. Matrices in
    the original record array (e.g., ``nodes``) are split into as many fields as there are columns (e.g., ``nodes0``,
    ``nodes1``, and ``nodes2``).

    Parameters
    ----------
    data : `recarray`
        Record array created by :func:`build_grid`.
    ignore_empty : `bool, optional`
        Whether to ignore matrices with zero size. By default, these are ignored.

    Returns
    -------
    `dict`
        The data re-structured as a dictionary.

    """
    if not isinstance(data, np.recarray):
        raise TypeError("data must be a NumPy record array.")

    mapping: Dict[str, Array] = {}
    for key in data.dtype.names:
        if len(data[key].shape) > 2:
            raise ValueError("Arrays with more than two dimensions are not supported.")
        if ignore_empty and data[key].size == 0:
            continue
        if len(data[key].shape) == 1 or data[key].shape[1] == 1 or data[key].size == 0:
            mapping[key] = data[key].flatten()
            continue
        for index in range(data[key].shape[1]):
            new_key = f'{key}{index}'
            if new_key in data.dtype.names:
                raise KeyError(f"'{key}' cannot be split into columns because '{new_key}' is already a field.")
            mapping[new_key] = data[key][:, index].flatten()

    return mapping
