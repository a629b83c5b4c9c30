"""Catalog pipeline for a single asset root.

This module provides the main interface for cataloguing an asset root.
Pack detection runs once per pipeline and its result feeds both the
indexer and the preview compositor.
"""

from pathlib import Path

from .compositor import DEFAULT_GRID_CONFIG, GridConfig, combine_previews, preview_entries
from .core.constants import INDEX_FILENAME
from .core.validator import validate_index
from .indexer import AssetIndex, build_index, write_index
from .scanner import PackDirectory, detect_packs, find_preview, validate_root


class CatalogPipeline:
    """Main interface for indexing and previewing an asset root.

    Example:
        >>> pipeline = CatalogPipeline(Path('public/assets/medieval'),
        ...                            display_root='public/assets/medieval')
        >>> index = pipeline.build_index()
        >>> pipeline.write_index()
        >>> pipeline.combine_previews(Path('docs/combined-preview.jpg'))
    """

    def __init__(
        self,
        root: Path,
        display_root: str | None = None,
        grid_config: GridConfig = DEFAULT_GRID_CONFIG,
    ):
        """Initialize the pipeline.

        Args:
            root: Asset root directory
            display_root: Prefix used for display paths in the index
            grid_config: Geometry for the combined preview

        Raises:
            AssetRootNotFound: If root doesn't exist
            AssetRootNotADirectory: If root isn't a directory
        """
        self.root = validate_root(root)
        self.display_root = display_root
        self.grid_config = grid_config
        self._packs: list[PackDirectory] | None = None

    def packs(self) -> list[PackDirectory]:
        """Packs under the root, in detector order. Detected once."""
        if self._packs is None:
            self._packs = detect_packs(self.root)
        return self._packs

    def root_preview(self) -> Path | None:
        """The root directory's own preview image, if it has one."""
        return find_preview(self.root)

    def build_index(
        self,
        include_other: bool = False,
        exclude_names: tuple[str, ...] = (INDEX_FILENAME,),
    ) -> AssetIndex:
        return build_index(
            self.root,
            display_root=self.display_root,
            packs=self.packs(),
            include_other=include_other,
            exclude_names=exclude_names,
        )

    def write_index(
        self,
        output_path: Path | None = None,
        include_other: bool = False,
    ) -> tuple[AssetIndex, Path]:
        """Build, validate and write the index.

        Args:
            output_path: Destination; defaults to assets.json in the root
            include_other: Also index .json/.txt files

        Returns:
            Tuple of (index, path written)

        Raises:
            jsonschema.ValidationError: If the document fails validation
        """
        path = Path(output_path) if output_path is not None else self.root / INDEX_FILENAME

        # Never index a previous copy of the output file
        index = self.build_index(
            include_other=include_other,
            exclude_names=(INDEX_FILENAME, path.name),
        )
        validate_index(index.to_dict())

        return index, write_index(index, path)

    def combine_previews(self, output_path: Path) -> Path | None:
        """Write the combined preview grid for every detected pack."""
        return combine_previews(preview_entries(self.packs()), output_path, self.grid_config)
