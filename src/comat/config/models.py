"""Option models for the template transformer.

Options are immutable so that they can be part of the compiled-template
cache key.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from comat.config.defaults import DEFAULT_TRANSFORM_OPTIONS


class UnterminatedPolicy(str, Enum):
    """What to do with a "{" token that is still open at end of input."""

    error = "error"
    passthrough = "passthrough"


class TransformOptions(BaseModel):
    """Behavior switches for the color template transformer.

    Attributes:
        unterminated: Raise (default) or pass through an unclosed token.
        correct_underline: Map "underline" to ESC[4m instead of ESC[24m.
        cache: Memoize compiled templates.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    unterminated: UnterminatedPolicy = UnterminatedPolicy(
        DEFAULT_TRANSFORM_OPTIONS["unterminated"]
    )
    correct_underline: bool = bool(DEFAULT_TRANSFORM_OPTIONS["correct_underline"])
    cache: bool = bool(DEFAULT_TRANSFORM_OPTIONS["cache"])

    @classmethod
    def default(cls) -> "TransformOptions":
        """Create options populated from DEFAULT_TRANSFORM_OPTIONS."""
        return cls.model_validate(DEFAULT_TRANSFORM_OPTIONS)
