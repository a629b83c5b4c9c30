"""Fixed names shared by the pack detector, indexer and CLI."""

# Checked in this order; the first file that exists wins.
PREVIEW_FILENAMES: tuple[str, ...] = (
    "Preview.jpg",
    "Preview.png",
    "preview.jpg",
    "preview.png",
    "Preview.jpeg",
    "preview.jpeg",
    "Content.jpg",
    "Content.png",
    "content.jpg",
    "content.png",
    "Content.jpeg",
    "content.jpeg",
)

# Name of the persisted index; skipped when re-scanning a root
INDEX_FILENAME = "assets.json"

# Key used in packCounts for assets that belong to no pack
ROOT_PACK_LABEL = "(root)"

HIDDEN_PREFIX = "."
