"""Type definitions for the persisted asset index.

This module defines TypedDict classes that mirror the JSON schema structure
defined in schemas/asset_index.schema.json.
"""

from typing import NotRequired, TypedDict


class IndexedAsset(TypedDict):
    """Individual asset entry in ``assets.json``."""

    name: str  # Basename of the file
    path: str  # Display path (display root + relative path)
    relativePath: str  # Path relative to the asset root, forward slashes
    category: str  # glTF, 3D, PNG, Audio or Other
    extension: str  # Lower-case extension with leading dot
    focusGlTF: bool  # True for .gltf/.glb
    pack: NotRequired[str]  # Owning pack name, when any


class IndexMetadata(TypedDict):
    """Aggregate counts for an asset index."""

    generatedAt: str  # ISO-8601 timestamp
    root: str
    totalAssets: int
    glTFAssetCount: int
    categories: dict[str, int]
    packs: NotRequired[list[str]]  # Only present when some asset has a pack
    packCounts: NotRequired[dict[str, int]]


class IndexDocument(TypedDict):
    """Complete ``assets.json`` document."""

    metadata: IndexMetadata
    assets: list[IndexedAsset]
