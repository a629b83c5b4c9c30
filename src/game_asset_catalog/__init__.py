"""Game Asset Catalog.

This package indexes a directory of downloaded 3D asset packs into an
``assets.json`` catalogue and combines the packs' preview images into a
single grid image.
"""

# Core library interface
from .pipeline import CatalogPipeline
from .scanner import PackDirectory, detect_packs, find_preview, sorted_packs
from .indexer import Asset, AssetIndex, build_index, write_index
from .compositor import (
    PIL_AVAILABLE,
    GridConfig,
    GridLayout,
    calculate_grid,
    check_imaging_backend,
    combine_previews,
    preview_entries,
)

# Core utilities
from .core import Category, classify, validate_index, validate_index_with_error_details
from .core import (
    AssetRootNotADirectory,
    AssetRootNotFound,
    CatalogError,
    ImageDecodeFailure,
    ImagingBackendUnavailable,
    NoPreviewsFound,
    NoQualifyingAssets,
)

# CLI interface
from .cli import main

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "CatalogPipeline",
    "PackDirectory",
    "detect_packs",
    "find_preview",
    "sorted_packs",
    "Asset",
    "AssetIndex",
    "build_index",
    "write_index",
    "PIL_AVAILABLE",
    "GridConfig",
    "GridLayout",
    "calculate_grid",
    "check_imaging_backend",
    "combine_previews",
    "preview_entries",
    # Core utilities
    "Category",
    "classify",
    "validate_index",
    "validate_index_with_error_details",
    # Errors
    "AssetRootNotADirectory",
    "AssetRootNotFound",
    "CatalogError",
    "ImageDecodeFailure",
    "ImagingBackendUnavailable",
    "NoPreviewsFound",
    "NoQualifyingAssets",
    # CLI
    "main",
]
