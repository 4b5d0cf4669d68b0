"""Configuration for comat.

Main components:
- TransformOptions: validated, immutable transformer options
- UnterminatedPolicy: handling of tokens left open at end of input
- Default option values
"""

from comat.config.defaults import DEFAULT_TRANSFORM_OPTIONS, TEMPLATE_CACHE_SIZE
from comat.config.models import TransformOptions, UnterminatedPolicy

__all__ = [
    "DEFAULT_TRANSFORM_OPTIONS",
    "TEMPLATE_CACHE_SIZE",
    "TransformOptions",
    "UnterminatedPolicy",
]
