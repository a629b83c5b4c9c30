"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest

from game_asset_catalog.cli import build_parser, main
from game_asset_catalog.compositor import PIL_AVAILABLE

from .conftest import touch


class TestIndexCommand:
    """Tests for `game-asset-catalog index`."""

    def test_writes_assets_json(self, characters_root: Path, capsys) -> None:
        main(["index", str(characters_root), "--display-root", "public/assets/characters"])

        document = json.loads((characters_root / "assets.json").read_text(encoding="utf-8"))
        assert document["metadata"]["totalAssets"] == 3
        assert document["assets"][0]["path"] == "public/assets/characters/texture.png"
        err = capsys.readouterr().err
        assert "Total assets: 3" in err
        assert "glTF/GLB models: 2" in err

    def test_stdout_output(self, characters_root: Path, capsys) -> None:
        main(["index", str(characters_root), "--stdout"])

        out = capsys.readouterr().out
        assert json.loads(out)["metadata"]["packs"] == [
            "characters/humans",
            "characters/monsters",
        ]
        assert not (characters_root / "assets.json").exists()

    def test_custom_output(self, characters_root: Path, tmp_path: Path) -> None:
        output = tmp_path / "build" / "index.json"

        main(["index", str(characters_root), "--output", str(output)])

        assert json.loads(output.read_text(encoding="utf-8"))["metadata"]["totalAssets"] == 3

    def test_reports_skipped_files(self, tmp_path: Path, capsys) -> None:
        touch(tmp_path / "model.glb")
        touch(tmp_path / "notes.md")

        main(["index", str(tmp_path), "--stdout"])

        assert "Skipped (unindexed extensions): 1" in capsys.readouterr().err

    def test_missing_root_exits_nonzero(self, tmp_path: Path, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["index", str(tmp_path / "missing")])

        assert exc_info.value.code == 1
        assert "does not exist" in capsys.readouterr().err

    def test_file_root_exits_nonzero(self, tmp_path: Path, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["index", str(touch(tmp_path / "model.glb"))])

        assert exc_info.value.code == 1
        assert "is not a directory" in capsys.readouterr().err


class TestPacksCommand:
    """Tests for `game-asset-catalog packs`."""

    def test_lists_packs_sorted(self, characters_root: Path, capsys) -> None:
        main(["packs", str(characters_root)])

        captured = capsys.readouterr()
        assert captured.out.splitlines() == [
            "characters/humans\tPreview.jpg",
            "characters/monsters\tpreview.png",
        ]
        assert "Found 2 packs" in captured.err

    def test_json_listing(self, characters_root: Path, capsys) -> None:
        main(["packs", str(characters_root), "--json"])

        listing = json.loads(capsys.readouterr().out)
        assert [entry["name"] for entry in listing] == ["characters/humans", "characters/monsters"]
        assert listing[0]["preview"].endswith("Preview.jpg")


class TestCombinePreviewsCommand:
    """Tests for `game-asset-catalog combine-previews`."""

    def test_missing_source_exits_nonzero(self, tmp_path: Path, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["combine-previews", str(tmp_path / "missing"), str(tmp_path / "out.jpg")])

        assert exc_info.value.code != 0
        assert "Source directory does not exist" in capsys.readouterr().err

    def test_no_previews_exits_cleanly(self, tmp_path: Path, capsys) -> None:
        touch(tmp_path / "assets" / "model.glb")
        output = tmp_path / "out.jpg"

        main(["combine-previews", str(tmp_path / "assets"), str(output)])

        assert not output.exists()
        assert "No subdirectories with preview images found." in capsys.readouterr().err

    def test_single_pack_copies_preview(self, tmp_path: Path) -> None:
        preview = touch(tmp_path / "assets" / "pack" / "Preview.jpg", b"preview")
        output = tmp_path / "docs" / "combined.jpg"

        main(["combine-previews", str(tmp_path / "assets"), str(output)])

        assert output.read_bytes() == preview.read_bytes()

    @pytest.mark.skipif(not PIL_AVAILABLE, reason="Pillow not installed")
    def test_read_only_output_suffix_writes_jpeg(self, tmp_path: Path) -> None:
        from PIL import Image

        for name, color in (("knights", (255, 0, 0)), ("castles", (0, 0, 255))):
            preview = tmp_path / "assets" / name / "Preview.png"
            preview.parent.mkdir(parents=True)
            Image.new("RGB", (32, 18), color).save(preview)
        output = tmp_path / "out.psd"

        main(["combine-previews", str(tmp_path / "assets"), str(output)])

        with Image.open(output) as image:
            assert image.format == "JPEG"


def test_command_required() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
