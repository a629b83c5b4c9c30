"""Preview grid compositing.

Combines the preview images of several packs into one near-square grid
image. Cell placement follows input order, so a preview that fails to
decode leaves a background-colored gap at its own position.
"""

import math
import shutil
import sys
import warnings
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .core.errors import ImageDecodeFailure, ImagingBackendUnavailable, NoPreviewsFound
from .scanner import PackDirectory

# Optional: Pillow does the decoding and resizing
try:
    from PIL import Image, ImageOps

    PIL_AVAILABLE = True
except ImportError:
    PIL_AVAILABLE = False
    Image = None  # type: ignore[assignment]
    ImageOps = None  # type: ignore[assignment]


PreviewEntry = tuple[str, Path]


@dataclass(frozen=True)
class GridConfig:
    """Fixed geometry and encoding settings for a preview grid.

    The default cell is 960x540 (16:9, half of 1080p), which suits most
    asset pack previews.
    """

    cell_width: int = 960
    cell_height: int = 540
    padding: int = 15
    background: tuple[int, int, int] = (30, 30, 30)
    jpeg_quality: int = 90

    @property
    def cell_size(self) -> tuple[int, int]:
        return (self.cell_width, self.cell_height)


DEFAULT_GRID_CONFIG = GridConfig()


@dataclass(frozen=True)
class GridLayout:
    """Column and row counts for a number of previews."""

    count: int
    cols: int
    rows: int

    def canvas_size(self, config: GridConfig = DEFAULT_GRID_CONFIG) -> tuple[int, int]:
        width = self.cols * config.cell_width + (self.cols + 1) * config.padding
        height = self.rows * config.cell_height + (self.rows + 1) * config.padding
        return (width, height)

    def cell_origin(self, index: int, config: GridConfig = DEFAULT_GRID_CONFIG) -> tuple[int, int]:
        """Top-left corner of cell ``index``, filled row by row."""
        col = index % self.cols
        row = index // self.cols
        x = config.padding + col * (config.cell_width + config.padding)
        y = config.padding + row * (config.cell_height + config.padding)
        return (x, y)


def calculate_grid(count: int) -> GridLayout:
    """Pick a near-square grid for ``count`` previews.

    Raises:
        ValueError: If count is not positive
    """
    if count < 1:
        raise ValueError(f"Grid needs at least one cell, got {count}")
    cols = math.ceil(math.sqrt(count))
    rows = math.ceil(count / cols)
    return GridLayout(count=count, cols=cols, rows=rows)


@dataclass(frozen=True)
class ImagingBackendStatus:
    available: bool
    reason: str | None = None


def check_imaging_backend() -> ImagingBackendStatus:
    """Report whether Pillow can be used for compositing."""
    if PIL_AVAILABLE:
        return ImagingBackendStatus(available=True)
    return ImagingBackendStatus(
        available=False,
        reason="Pillow is not installed. Install it with: pip install Pillow",
    )


def require_imaging_backend() -> None:
    """Raise if Pillow is missing, for callers that treat it as fatal.

    Raises:
        ImagingBackendUnavailable: If Pillow cannot be imported
    """
    status = check_imaging_backend()
    if not status.available:
        raise ImagingBackendUnavailable(status.reason)


def preview_entries(packs: Iterable[PackDirectory]) -> list[PreviewEntry]:
    """Turn detected packs into (name, preview path) pairs, keeping order."""
    return [(pack.name, pack.preview_path) for pack in packs]


def _as_entry(item: PreviewEntry | PackDirectory) -> PreviewEntry:
    if isinstance(item, PackDirectory):
        return (item.name, item.preview_path)
    name, path = item
    return (name, Path(path))


def load_tile(name: str, path: Path, config: GridConfig = DEFAULT_GRID_CONFIG) -> "Image.Image":
    """Decode a preview and contain-fit it into one grid cell.

    The image keeps its aspect ratio, is centered in the cell and the
    remainder is filled with the background color. Transparent areas are
    flattened onto the background.

    Raises:
        ImageDecodeFailure: If the file cannot be opened, decoded or resized
    """
    try:
        with Image.open(path) as source:
            fitted = ImageOps.contain(
                source.convert("RGBA"), config.cell_size, Image.Resampling.LANCZOS
            )
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageDecodeFailure(name, Path(path), str(e)) from e

    tile = Image.new("RGB", config.cell_size, config.background)
    offset = (
        (config.cell_width - fitted.width) // 2,
        (config.cell_height - fitted.height) // 2,
    )
    tile.paste(fitted, offset, mask=fitted)
    return tile


def render_grid(
    previews: Sequence[PreviewEntry],
    config: GridConfig = DEFAULT_GRID_CONFIG,
) -> tuple["Image.Image | None", list[ImageDecodeFailure]]:
    """Compose previews into a grid canvas in memory.

    Args:
        previews: (name, path) pairs; index i lands in cell i
        config: Grid geometry

    Returns:
        Tuple of (canvas, failures). canvas is None when no preview could
        be decoded.

    Raises:
        ImagingBackendUnavailable: If Pillow is missing
    """
    require_imaging_backend()

    layout = calculate_grid(len(previews))
    canvas = Image.new("RGB", layout.canvas_size(config), config.background)
    failures: list[ImageDecodeFailure] = []

    for i, (name, path) in enumerate(previews):
        try:
            tile = load_tile(name, path, config)
        except ImageDecodeFailure as e:
            failures.append(e)
            print(f"  Failed to process {name}: {e.reason}", file=sys.stderr)
            continue

        canvas.paste(tile, layout.cell_origin(i, config))
        print(f"  [{i + 1}/{len(previews)}] {name}", file=sys.stderr)

    if len(failures) == len(previews):
        return None, failures
    return canvas, failures


def _save_options(output_path: Path, config: GridConfig) -> dict[str, object]:
    # Unknown or read-only suffixes (.psd) fall back to JPEG
    image_format = Image.registered_extensions().get(output_path.suffix.lower())
    if image_format not in Image.SAVE:
        image_format = "JPEG"
    options: dict[str, object] = {"format": image_format}
    if image_format == "JPEG":
        options["quality"] = config.jpeg_quality
    return options


def combine_previews(
    previews: Iterable[PreviewEntry | PackDirectory],
    output_path: Path,
    config: GridConfig = DEFAULT_GRID_CONFIG,
) -> Path | None:
    """Combine pack previews into a single grid image.

    - No previews: nothing is written.
    - One preview: the file is copied unchanged.
    - Two or more: each preview is contain-fitted into a fixed-size cell of
      a near-square grid and the canvas is saved (JPEG unless the output
      suffix names another format).

    Previews that fail to decode are reported on stderr and leave an empty
    cell. Missing Pillow turns grid composition into a no-op.

    Args:
        previews: (name, path) pairs or PackDirectory objects, in grid order
        output_path: Destination image; parent directories are created
        config: Grid geometry

    Returns:
        output_path when a file was written, otherwise None
    """
    entries = [_as_entry(item) for item in previews]
    output_path = Path(output_path)

    if not entries:
        warnings.warn("No preview images found.", NoPreviewsFound, stacklevel=2)
        return None

    if len(entries) == 1:
        name, path = entries[0]
        output_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(path, output_path)
        print(f"Copied single preview: {name}", file=sys.stderr)
        return output_path

    status = check_imaging_backend()
    if not status.available:
        print(f"Error: Cannot combine previews: {status.reason}", file=sys.stderr)
        return None

    layout = calculate_grid(len(entries))
    width, height = layout.canvas_size(config)
    print(
        f"Creating {layout.cols}x{layout.rows} grid ({width}x{height}px) "
        f"for {len(entries)} previews...",
        file=sys.stderr,
    )

    canvas, failures = render_grid(entries, config)
    if canvas is None:
        print("Error: None of the preview images could be processed.", file=sys.stderr)
        return None

    output_path.parent.mkdir(parents=True, exist_ok=True)
    canvas.save(output_path, **_save_options(output_path, config))

    if failures:
        print(
            f"Combined {len(entries) - len(failures)} of {len(entries)} previews "
            f"({len(failures)} failed)",
            file=sys.stderr,
        )
    print(f"\nCombined preview saved to: {output_path}", file=sys.stderr)
    return output_path
