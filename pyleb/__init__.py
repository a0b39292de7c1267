"""Public-facing objects."""

from . import exceptions, options
from .configurations.quadrature import Quadrature
from .construction import build_grid, data_to_dict
from .orbits import ORBIT_SIZES, expand_orbit
from .rules import expand_generators, generate_rule, generate_rule_by_order, get_degree, get_order
from .tables import DEGREES, ORDERS, RULES
from .version import __version__

__all__ = [
    'exceptions', 'options', 'Quadrature', 'build_grid', 'data_to_dict', 'ORBIT_SIZES', 'expand_orbit',
    'expand_generators', 'generate_rule', 'generate_rule_by_order', 'get_degree', 'get_order', 'DEGREES', 'ORDERS',
    'RULES', '__version__'
]
