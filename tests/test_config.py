"""Tests for resolver options and schema validation."""

import pytest
from jsonschema import ValidationError

from asset_resolver import InvalidOptionsError, ResolverOptions
from asset_resolver.core.validator import (
    validate_metadata,
    validate_metadata_with_error_details,
    validate_options,
)


class TestResolverOptions:
    """Test building immutable options."""

    def test_defaults_to_png(self) -> None:
        """Test that png is the only default extension."""
        options = ResolverOptions.from_dict({"project_roots": ["/proj"]})

        assert options.roots == ("/proj",)
        assert options.asset_exts == ("png",)

    def test_normalizes_extensions(self) -> None:
        """Test that extensions are lowercased, undotted and deduplicated."""
        options = ResolverOptions.create(["/a", "/b"], [".PNG", "jpg", "png"])

        assert options.asset_exts == ("png", "jpg")

    def test_keeps_root_order(self) -> None:
        """Test that root precedence is preserved."""
        options = ResolverOptions.create(["/z", "/a", "/m"])

        assert options.roots == ("/z", "/a", "/m")

    def test_is_frozen(self) -> None:
        """Test that options can't be modified after construction."""
        options = ResolverOptions.create(["/proj"])

        with pytest.raises(AttributeError):
            options.roots = ("/other",)  # type: ignore[misc]

    def test_requires_roots(self) -> None:
        """Test that project_roots is mandatory and non-empty."""
        with pytest.raises(InvalidOptionsError, match="project_roots"):
            ResolverOptions.from_dict({})

        with pytest.raises(InvalidOptionsError):
            ResolverOptions.create([])

    def test_rejects_unknown_options(self) -> None:
        """Test that misspelled options are reported."""
        with pytest.raises(InvalidOptionsError):
            ResolverOptions.from_dict({"project_roots": ["/proj"], "assetExts": ["png"]})

    def test_rejects_bad_extensions(self) -> None:
        """Test that extensions must be simple tokens."""
        with pytest.raises(InvalidOptionsError):
            ResolverOptions.create(["/proj"], ["png", "a/b"])

        with pytest.raises(InvalidOptionsError):
            ResolverOptions.create(["/proj"], [])

    def test_invalid_options_is_value_error(self) -> None:
        """Test that option errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_options({"project_roots": "not-a-list"})


class TestValidateMetadata:
    """Test validating asset descriptors."""

    VALID = {
        "name": "icon",
        "type": "png",
        "scales": [1, 2],
        "hash": "0123456789abcdef0123456789abcdef",
    }

    def test_valid_descriptor(self) -> None:
        """Test that a well-formed descriptor passes."""
        validate_metadata(self.VALID)  # type: ignore[arg-type]
        assert validate_metadata_with_error_details(self.VALID) == (True, None)  # type: ignore[arg-type]

    def test_rejects_bad_hash(self) -> None:
        """Test that the hash must be a 32-char hex digest."""
        with pytest.raises(ValidationError):
            validate_metadata({**self.VALID, "hash": "xyz"})  # type: ignore[arg-type]

    def test_error_details_name_the_field(self) -> None:
        """Test that error details point at the offending field."""
        is_valid, error_msg = validate_metadata_with_error_details(
            {**self.VALID, "scales": []}  # type: ignore[arg-type]
        )

        assert not is_valid
        assert error_msg is not None
        assert "scales" in error_msg
