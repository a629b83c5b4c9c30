"""Exceptions and warnings raised by the catalog library.

Fatal problems with the asset root derive from ``CatalogError``. Conditions
that leave the caller with an empty result but are not errors are emitted as
``CatalogWarning`` subclasses through the :mod:`warnings` module.
"""

from pathlib import Path


class CatalogError(Exception):
    """Base class for catalog errors."""


class AssetRootNotFound(CatalogError, FileNotFoundError):
    """The asset root does not exist."""

    def __init__(self, path: Path, message: str | None = None):
        self.path = path
        super().__init__(message or f"Asset root does not exist: {path}")


class AssetRootNotADirectory(AssetRootNotFound, NotADirectoryError):
    """The asset root exists but is not a directory."""

    def __init__(self, path: Path):
        super().__init__(path, f"Asset root is not a directory: {path}")


class ImageDecodeFailure(CatalogError):
    """A single preview image could not be opened or resized."""

    def __init__(self, name: str, path: Path, reason: str):
        self.name = name
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to process {name} ({path}): {reason}")


class ImagingBackendUnavailable(CatalogError):
    """Pillow is not importable in this environment."""


class CatalogWarning(UserWarning):
    """Base class for non-fatal catalog conditions."""


class NoQualifyingAssets(CatalogWarning):
    """A scan finished without finding any indexable file."""


class NoPreviewsFound(CatalogWarning):
    """The compositor was given nothing to combine."""
