"""Shared fixtures for catalog tests."""

from pathlib import Path

import pytest


def touch(path: Path, content: bytes = b"") -> Path:
    """Create a file (and its parents) with the given content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


@pytest.fixture
def characters_root(tmp_path: Path) -> Path:
    """Asset root with two packs and one loose root-level texture.

    characters/humans/{Preview.jpg, model1.gltf}
    characters/monsters/{preview.png, model2.glb}
    texture.png
    """
    root = tmp_path / "assets"
    touch(root / "characters" / "humans" / "Preview.jpg", b"jpg")
    touch(root / "characters" / "humans" / "model1.gltf", b"{}")
    touch(root / "characters" / "monsters" / "preview.png", b"png")
    touch(root / "characters" / "monsters" / "model2.glb", b"glb")
    touch(root / "texture.png", b"png")
    return root
