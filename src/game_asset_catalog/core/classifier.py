"""Extension classification for indexed asset files.

The table here is the single source of truth for which files make it into
an asset index and under which category label.
"""

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """Category labels as written to ``assets.json``."""

    GLTF = "glTF"
    MODEL_3D = "3D"
    # Every raster image extension is labelled PNG to keep the index format
    # compatible with existing consumers.
    IMAGE = "PNG"
    AUDIO = "Audio"
    OTHER = "Other"


@dataclass(frozen=True)
class Classification:
    """Result of classifying one file extension."""

    category: Category
    is_primary_3d: bool = False
    recognized: bool = True


EXTENSION_TABLE: dict[str, Classification] = {
    ".gltf": Classification(Category.GLTF, is_primary_3d=True),
    ".glb": Classification(Category.GLTF, is_primary_3d=True),
    ".obj": Classification(Category.MODEL_3D),
    ".fbx": Classification(Category.MODEL_3D),
    ".png": Classification(Category.IMAGE),
    ".jpg": Classification(Category.IMAGE),
    ".jpeg": Classification(Category.IMAGE),
    ".webp": Classification(Category.IMAGE),
    ".gif": Classification(Category.IMAGE),
    ".mp3": Classification(Category.AUDIO),
    ".wav": Classification(Category.AUDIO),
    ".ogg": Classification(Category.AUDIO),
    ".json": Classification(Category.OTHER),
    ".txt": Classification(Category.OTHER),
}

UNRECOGNIZED = Classification(Category.OTHER, recognized=False)


def normalize_extension(extension: str) -> str:
    """Lower-case an extension and make sure it has a leading dot."""
    extension = extension.lower()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


def classify(extension: str) -> Classification:
    """Classify a file extension.

    Args:
        extension: Extension with or without the leading dot, any case

    Returns:
        The table entry for the extension, or ``UNRECOGNIZED``
    """
    return EXTENSION_TABLE.get(normalize_extension(extension), UNRECOGNIZED)


def is_indexed(classification: Classification, include_other: bool = False) -> bool:
    """Decide whether a classified file belongs in the index.

    ``Other`` files (``.json``/``.txt``) are left out unless ``include_other``
    is set. Unrecognized extensions are never indexed.
    """
    if not classification.recognized:
        return False
    if classification.category is Category.OTHER:
        return include_other
    return True
