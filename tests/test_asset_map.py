"""Tests for asset map construction and variant selection."""

import itertools
import logging
import posixpath

import pytest

from asset_resolver import build_asset_map, select_variant
from asset_resolver.core.types import AssetRecord


def _build(filenames: list[str], exts: tuple[str, ...] = ("png",)):
    return build_asset_map("/proj/img", filenames, exts, posixpath.join)


class TestAssetRecord:
    """Test ordered insertion into records."""

    def test_insert_keeps_scales_ascending(self) -> None:
        """Test that out-of-order inserts produce ascending parallel views."""
        record = AssetRecord()
        record.insert(3, "c")
        record.insert(1, "a")
        record.insert(2, "b")

        assert record.scales == [1, 2, 3]
        assert record.files == ["a", "b", "c"]
        assert len(record) == 3

    def test_equal_scales_keep_insertion_order(self) -> None:
        """Test that the first-seen file sorts first on a tie."""
        record = AssetRecord()
        record.insert(2, "first")
        record.insert(1, "low")
        record.insert(2, "second")

        assert record.files == ["low", "first", "second"]


class TestBuildAssetMap:
    """Test grouping directory listings into records."""

    @pytest.mark.parametrize(
        "order",
        list(itertools.permutations(["icon.png", "icon@2x.png", "icon@3x.png"])),
    )
    def test_listing_order_does_not_matter(self, order: tuple[str, ...]) -> None:
        """Test that any listing order yields the same ascending record."""
        record = _build(list(order))["icon.png"]

        assert record.scales == [1, 2, 3]
        assert record.files == [
            "/proj/img/icon.png",
            "/proj/img/icon@2x.png",
            "/proj/img/icon@3x.png",
        ]

    def test_groups_by_asset_name(self) -> None:
        """Test that different names get separate records."""
        asset_map = _build(["logo@2x.png", "icon.png", "logo.png"])

        assert set(asset_map) == {"icon.png", "logo.png"}
        assert asset_map["logo.png"].scales == [1, 2]
        assert asset_map["icon.png"].files == ["/proj/img/icon.png"]

    def test_ignores_unrecognized_extensions(self) -> None:
        """Test that only configured extensions are grouped."""
        asset_map = _build(["icon.png", "icon@2x.jpg", "notes.txt", "Makefile"])

        assert list(asset_map) == ["icon.png"]

    def test_multiple_extensions_stay_separate(self) -> None:
        """Test that icon.png and icon.jpg are different assets."""
        asset_map = _build(["icon.png", "icon@2x.jpg"], exts=("png", "jpg"))

        assert asset_map["icon.png"].scales == [1]
        assert asset_map["icon.jpg"].scales == [2]

    def test_skips_unparseable_names(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that bad entries are skipped with a warning instead of failing."""
        with caplog.at_level(logging.WARNING, logger="asset_resolver.resolver"):
            asset_map = _build(["images", "fonts", ".DS_Store", "Makefile", "icon@x.png", "icon.png"])

        assert asset_map["icon.png"].scales == [1]
        assert "icon@x.png" in caplog.text
        assert len(caplog.records) == 1
        for entry in ("images", "fonts", ".DS_Store", "Makefile"):
            assert f"Skipping {entry} " not in caplog.text

    def test_at_sign_names_are_grouped(self) -> None:
        """Test that names like mail@inbox.png are ordinary assets."""
        asset_map = _build(["mail@inbox.png", "mail@inbox@2x.png"])

        assert asset_map["mail@inbox.png"].scales == [1, 2]

    def test_no_inherited_keys(self) -> None:
        """Test that names shadowing dict attributes are ordinary entries."""
        asset_map = _build(["constructor.png", "__proto__.png"])

        assert set(asset_map) == {"constructor.png", "__proto__.png"}
        assert "toString.png" not in asset_map


class TestSelectVariant:
    """Test density selection (round up, else highest)."""

    @pytest.fixture
    def record(self) -> AssetRecord:
        record = AssetRecord()
        for scale in (1, 2, 3):
            record.insert(scale, f"icon@{scale}x.png")
        return record

    def test_exact_match(self, record: AssetRecord) -> None:
        """Test that an available density is served as is."""
        assert select_variant(record, 2) == "icon@2x.png"

    def test_rounds_up(self, record: AssetRecord) -> None:
        """Test that the next higher density is preferred."""
        assert select_variant(record, 2.5) == "icon@3x.png"
        assert select_variant(record, 0.5) == "icon@1x.png"

    def test_falls_back_to_highest(self, record: AssetRecord) -> None:
        """Test that requests above every density get the highest one."""
        assert select_variant(record, 5) == "icon@3x.png"

    def test_single_variant(self) -> None:
        """Test that a lone variant serves every request."""
        record = AssetRecord()
        record.insert(2, "only.png")

        assert select_variant(record, 1) == "only.png"
        assert select_variant(record, 4) == "only.png"
