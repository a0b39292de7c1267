"""Configuration classes."""

from .quadrature import Quadrature
