"""Tests for index schema validation."""

from pathlib import Path

import pytest
from jsonschema import ValidationError

from game_asset_catalog.core.validator import (
    load_schema,
    validate_index,
    validate_index_with_error_details,
)
from game_asset_catalog.indexer import build_index


def _document(**metadata_overrides):
    metadata = {
        "generatedAt": "2024-01-01T00:00:00.000Z",
        "root": "public/assets/demo",
        "totalAssets": 1,
        "glTFAssetCount": 1,
        "categories": {"glTF": 1},
    }
    metadata.update(metadata_overrides)
    return {
        "metadata": metadata,
        "assets": [
            {
                "name": "ship.glb",
                "path": "public/assets/demo/ship.glb",
                "relativePath": "ship.glb",
                "category": "glTF",
                "extension": ".glb",
                "focusGlTF": True,
            }
        ],
    }


class TestSchema:
    """Test the bundled schema."""

    def test_schema_loads(self) -> None:
        schema = load_schema()

        assert schema["title"] == "Asset Index"
        assert set(schema["required"]) == {"metadata", "assets"}

    def test_valid_document(self) -> None:
        validate_index(_document())

    def test_packs_require_pack_counts(self) -> None:
        with pytest.raises(ValidationError):
            validate_index(_document(packs=["ships"]))

    def test_unknown_category_rejected(self) -> None:
        document = _document()
        document["assets"][0]["category"] = "Texture"

        with pytest.raises(ValidationError):
            validate_index(document)


class TestErrorDetails:
    """Test user-facing validation messages."""

    def test_valid_returns_none(self, characters_root: Path) -> None:
        assert validate_index_with_error_details(build_index(characters_root).to_dict()) == (
            True,
            None,
        )

    def test_error_path_included(self) -> None:
        document = _document()
        document["assets"][0]["focusGlTF"] = "yes"

        is_valid, message = validate_index_with_error_details(document)

        assert not is_valid
        assert "assets -> 0 -> focusGlTF" in message
        assert "(asset 'ship.glb')" in message

    def test_every_problem_listed(self) -> None:
        """All violations are reported, not just the first one."""
        document = _document(totalAssets=-1)
        document["assets"][0]["category"] = "Texture"

        is_valid, message = validate_index_with_error_details(document)

        assert not is_valid
        lines = message.splitlines()
        assert lines[0] == "2 problems in index document:"
        assert lines[1].startswith("  assets -> 0 -> category:")
        assert lines[2].startswith("  metadata -> totalAssets:")

    def test_metadata_problem_has_no_asset_label(self) -> None:
        is_valid, message = validate_index_with_error_details(_document(totalAssets="one"))

        assert not is_valid
        assert message.splitlines()[0] == "1 problem in index document:"
        assert "metadata -> totalAssets" in message
        assert "(asset" not in message

    def test_missing_schema_reported(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setattr(
            "game_asset_catalog.core.validator.SCHEMA_PATH", tmp_path / "missing.json"
        )

        is_valid, message = validate_index_with_error_details(_document())

        assert not is_valid
        assert message.startswith("Schema error:")
