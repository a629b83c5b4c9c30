"""Pack detection and directory traversal.

A pack is any non-hidden directory below the asset root that directly
contains one of the recognized preview images. Packs are found
independently of each other: a pack nested inside another pack is still
reported as its own pack.
"""

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .core.constants import HIDDEN_PREFIX, PREVIEW_FILENAMES
from .core.errors import AssetRootNotADirectory, AssetRootNotFound


@dataclass(frozen=True)
class PackDirectory:
    """A directory recognized as a self-contained asset pack.

    Attributes:
        name: Path relative to the asset root, using forward slashes
        path: Absolute path to the pack directory
        preview_path: Absolute path to the pack's preview image
    """

    name: str
    path: Path
    preview_path: Path


def validate_root(root: Path) -> Path:
    """Resolve an asset root and make sure it is a directory.

    Args:
        root: Asset root, absolute or relative

    Returns:
        The resolved absolute path

    Raises:
        AssetRootNotFound: If the path does not exist
        AssetRootNotADirectory: If the path is not a directory
    """
    resolved = Path(root).resolve()

    if not resolved.exists():
        raise AssetRootNotFound(resolved)

    if not resolved.is_dir():
        raise AssetRootNotADirectory(resolved)

    return resolved


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def to_posix_relative(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` with forward slashes."""
    return path.relative_to(root).as_posix()


def find_preview(directory: Path, names: Iterable[str] = PREVIEW_FILENAMES) -> Path | None:
    """Find the preview image directly inside a directory.

    Args:
        directory: Directory to check
        names: Candidate filenames, checked in order

    Returns:
        Path of the first candidate that exists as a file, or None
    """
    for name in names:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def list_subdirectories(directory: Path) -> list[Path]:
    """Return the non-hidden child directories in enumeration order.

    Symlinked directories are not followed. Listing errors such as
    PermissionError propagate to the caller.
    """
    with os.scandir(directory) as entries:
        children = [
            Path(entry.path)
            for entry in entries
            if entry.is_dir(follow_symlinks=False) and not is_hidden(entry.name)
        ]
    return children


def _walk_packs(directory: Path, root: Path, packs: list[PackDirectory]) -> None:
    if directory != root:
        preview = find_preview(directory)
        if preview is not None:
            packs.append(
                PackDirectory(
                    name=to_posix_relative(directory, root),
                    path=directory,
                    preview_path=preview,
                )
            )

    # Packs may themselves contain further packs
    for child in list_subdirectories(directory):
        _walk_packs(child, root, packs)


def detect_packs(root: Path) -> list[PackDirectory]:
    """Find every pack directory below an asset root.

    The traversal is pre-order and depth-first: a pack is always listed
    before any pack nested inside it, and siblings follow directory
    enumeration order (unsorted). Hidden directories are skipped together
    with everything below them.

    Args:
        root: Asset root to scan

    Returns:
        Packs in traversal order

    Raises:
        AssetRootNotFound: If root does not exist
        AssetRootNotADirectory: If root is not a directory
    """
    root_resolved = validate_root(root)
    packs: list[PackDirectory] = []
    _walk_packs(root_resolved, root_resolved, packs)
    return packs


def sorted_packs(packs: Iterable[PackDirectory]) -> list[PackDirectory]:
    """Return packs ordered by name, for deterministic listings."""
    return sorted(packs, key=lambda pack: pack.name)


def find_owning_pack(file_path: Path, packs: Iterable[PackDirectory]) -> PackDirectory | None:
    """Find the pack a file belongs to.

    The first pack, in the order given, whose directory is a strict
    ancestor of ``file_path`` wins. With packs in detector order that is
    the outermost pack when packs are nested.

    Args:
        file_path: Absolute path of the file
        packs: Candidate packs, in detector order

    Returns:
        The owning pack, or None when the file sits outside every pack
    """
    for pack in packs:
        if file_path != pack.path and file_path.is_relative_to(pack.path):
            return pack
    return None
