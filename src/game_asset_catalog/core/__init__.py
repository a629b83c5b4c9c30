"""Core utilities shared by the scanner, indexer and compositor.

This package contains the extension classifier, constants, the exception
taxonomy, index document types and schema validation.
"""

from .classifier import Category, Classification, classify, is_indexed
from .errors import (
    AssetRootNotADirectory,
    AssetRootNotFound,
    CatalogError,
    CatalogWarning,
    ImageDecodeFailure,
    ImagingBackendUnavailable,
    NoPreviewsFound,
    NoQualifyingAssets,
)
from .types import IndexDocument, IndexedAsset, IndexMetadata
from .validator import validate_index, validate_index_with_error_details

__all__ = [
    "Category",
    "Classification",
    "classify",
    "is_indexed",
    "AssetRootNotADirectory",
    "AssetRootNotFound",
    "CatalogError",
    "CatalogWarning",
    "ImageDecodeFailure",
    "ImagingBackendUnavailable",
    "NoPreviewsFound",
    "NoQualifyingAssets",
    "IndexDocument",
    "IndexedAsset",
    "IndexMetadata",
    "validate_index",
    "validate_index_with_error_details",
]
