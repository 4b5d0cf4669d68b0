"""Tests for transformer option models in comat.config.models."""

import pytest
from pydantic import ValidationError

from comat.config.defaults import DEFAULT_TRANSFORM_OPTIONS
from comat.config.models import TransformOptions, UnterminatedPolicy


class TestUnterminatedPolicy:
    """Tests for UnterminatedPolicy enum."""

    @pytest.mark.parametrize("value", ["error", "passthrough"])
    def test_valid_values(self, value: str) -> None:
        """Test that all expected policy values are accepted."""
        assert UnterminatedPolicy(value).value == value

    def test_invalid_value(self) -> None:
        """Test that an unknown policy is rejected."""
        with pytest.raises(ValueError):
            UnterminatedPolicy("ignore")


class TestTransformOptions:
    """Tests for TransformOptions model."""

    def test_defaults(self) -> None:
        """Test default field values."""
        options = TransformOptions()
        assert options.unterminated == UnterminatedPolicy.error
        assert options.correct_underline is False
        assert options.cache is True

    def test_default_matches_defaults_table(self) -> None:
        """Test default() reads DEFAULT_TRANSFORM_OPTIONS."""
        options = TransformOptions.default()
        assert options.unterminated.value == DEFAULT_TRANSFORM_OPTIONS["unterminated"]
        assert options == TransformOptions()

    def test_string_policy_is_coerced(self) -> None:
        """Test policies can be given as strings."""
        options = TransformOptions(unterminated="passthrough")
        assert options.unterminated is UnterminatedPolicy.passthrough

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown options are rejected."""
        with pytest.raises(ValidationError):
            TransformOptions(colour=True)  # type: ignore[call-arg]

    def test_invalid_policy_rejected(self) -> None:
        """Test an invalid policy string is rejected."""
        with pytest.raises(ValidationError):
            TransformOptions(unterminated="sometimes")

    def test_frozen_and_hashable(self) -> None:
        """Test options are immutable and usable as cache keys."""
        options = TransformOptions()
        with pytest.raises(ValidationError):
            options.cache = False  # type: ignore[misc]
        assert hash(options) == hash(TransformOptions())
