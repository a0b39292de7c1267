"""General functionality."""

from .basics import (
    output, warn, format_seconds, format_number, format_options, structure_matrices, StringRepresentation, Error
)
