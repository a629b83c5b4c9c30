"""Asset index construction.

Walks an asset root, classifies every file by extension, tags each file
with the pack that contains it and aggregates the counts written to
``assets.json``.
"""

import json
import os
import warnings
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from .core.classifier import Category, classify, is_indexed
from .core.constants import INDEX_FILENAME, ROOT_PACK_LABEL
from .core.errors import NoQualifyingAssets
from .core.types import IndexDocument, IndexedAsset, IndexMetadata
from .scanner import (
    PackDirectory,
    detect_packs,
    find_owning_pack,
    is_hidden,
    to_posix_relative,
    validate_root,
)


@dataclass(frozen=True)
class Asset:
    """One classified file under the asset root."""

    name: str
    relative_path: str
    category: Category
    extension: str
    is_primary_3d: bool
    pack: str | None = None

    def sort_key(self) -> tuple[bool, str, str, str]:
        # Unpacked assets first, then by pack, then by file name
        return (self.pack is not None, self.pack or "", self.name, self.relative_path)

    def to_dict(self, display_root: str | None = None) -> IndexedAsset:
        entry: IndexedAsset = {
            "name": self.name,
            "path": f"{display_root}/{self.relative_path}" if display_root else self.relative_path,
            "relativePath": self.relative_path,
            "category": self.category.value,
            "extension": self.extension,
            "focusGlTF": self.is_primary_3d,
        }
        if self.pack is not None:
            entry["pack"] = self.pack
        return entry


@dataclass(frozen=True)
class AssetIndex:
    """Immutable result of one scan of an asset root.

    Attributes:
        generated_at: ISO-8601 UTC timestamp of the scan
        root: Root string written to the document
        assets: Assets in index order
        display_root: Prefix used for each asset's display path
        skipped: Files left out because their extension is not indexed
    """

    generated_at: str
    root: str
    assets: tuple[Asset, ...]
    display_root: str | None = None
    skipped: int = 0
    categories: dict[str, int] = field(init=False)
    pack_counts: dict[str, int] = field(init=False)

    def __post_init__(self) -> None:
        categories = Counter(asset.category.value for asset in self.assets)
        per_pack = Counter(asset.pack or ROOT_PACK_LABEL for asset in self.assets)

        pack_counts = {name: per_pack[name] for name in self.packs}
        if ROOT_PACK_LABEL in per_pack:
            pack_counts[ROOT_PACK_LABEL] = per_pack[ROOT_PACK_LABEL]

        object.__setattr__(self, "categories", dict(categories))
        object.__setattr__(self, "pack_counts", pack_counts)

    @property
    def total_assets(self) -> int:
        return len(self.assets)

    @property
    def gltf_asset_count(self) -> int:
        return sum(1 for asset in self.assets if asset.is_primary_3d)

    @property
    def packs(self) -> list[str]:
        """Names of the packs that own at least one asset, sorted."""
        return sorted({asset.pack for asset in self.assets if asset.pack is not None})

    @property
    def has_packs(self) -> bool:
        return any(asset.pack is not None for asset in self.assets)

    def to_dict(self) -> IndexDocument:
        """Build the ``assets.json`` document.

        ``packs`` and ``packCounts`` are only included when at least one
        asset belongs to a pack.
        """
        metadata: IndexMetadata = {
            "generatedAt": self.generated_at,
            "root": self.root,
            "totalAssets": self.total_assets,
            "glTFAssetCount": self.gltf_asset_count,
            "categories": dict(self.categories),
        }
        if self.has_packs:
            metadata["packs"] = self.packs
            metadata["packCounts"] = dict(self.pack_counts)

        return {
            "metadata": metadata,
            "assets": [asset.to_dict(self.display_root) for asset in self.assets],
        }


def _raise_walk_error(error: OSError) -> None:
    raise error


def iter_asset_files(root: Path, exclude_names: Iterable[str] = (INDEX_FILENAME,)) -> list[Path]:
    """List every file below ``root`` that the indexer should look at.

    Hidden directories are pruned. Files named in ``exclude_names`` are
    dropped. Directory listing errors propagate.
    """
    excluded = set(exclude_names)
    files: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames[:] = [name for name in dirnames if not is_hidden(name)]
        for filename in filenames:
            if filename in excluded:
                continue
            files.append(Path(dirpath) / filename)

    return files


def build_index(
    root: Path,
    *,
    display_root: str | None = None,
    packs: Sequence[PackDirectory] | None = None,
    include_other: bool = False,
    exclude_names: Iterable[str] = (INDEX_FILENAME,),
) -> AssetIndex:
    """Scan an asset root and build its index.

    Args:
        root: Asset root directory
        display_root: Prefix for each asset's ``path`` and the document's
            ``root``; defaults to the absolute root path
        packs: Packs in detector order; detected when omitted
        include_other: Also index ``.json``/``.txt`` files
        exclude_names: File names never indexed (the index output itself)

    Returns:
        The immutable index

    Raises:
        AssetRootNotFound: If root does not exist
        AssetRootNotADirectory: If root is not a directory
    """
    root_resolved = validate_root(root)
    if packs is None:
        packs = detect_packs(root_resolved)

    # A pack's own preview is its thumbnail, not an asset
    preview_files = {pack.preview_path for pack in packs}

    assets: list[Asset] = []
    skipped = 0

    for file_path in iter_asset_files(root_resolved, exclude_names):
        if file_path in preview_files:
            continue

        extension = file_path.suffix.lower()
        classification = classify(extension)
        if not is_indexed(classification, include_other):
            skipped += 1
            continue

        owner = find_owning_pack(file_path, packs)
        assets.append(
            Asset(
                name=file_path.name,
                relative_path=to_posix_relative(file_path, root_resolved),
                category=classification.category,
                extension=extension,
                is_primary_3d=classification.is_primary_3d,
                pack=owner.name if owner else None,
            )
        )

    assets.sort(key=Asset.sort_key)

    if not assets:
        warnings.warn(
            f"No indexable assets found in {root_resolved} ({skipped} files skipped)",
            NoQualifyingAssets,
            stacklevel=2,
        )

    return AssetIndex(
        generated_at=_timestamp(),
        root=display_root if display_root is not None else str(root_resolved),
        assets=tuple(assets),
        display_root=display_root,
        skipped=skipped,
    )


def _timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def write_index(index: AssetIndex, output_path: Path) -> Path:
    """Write an index as pretty-printed JSON.

    Args:
        index: Index to serialize
        output_path: Destination file; parent directories are created

    Returns:
        The path written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        json.dump(index.to_dict(), f, indent=2)
        f.write("\n")

    return output_path
