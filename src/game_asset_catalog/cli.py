"""Command-line interface for the asset catalog.

This module provides the ``game-asset-catalog`` entry point with commands
to write ``assets.json``, list detected packs and combine pack previews.
"""

import argparse
import json
import sys
from pathlib import Path

from .compositor import combine_previews, preview_entries
from .core.constants import INDEX_FILENAME
from .core.errors import CatalogError
from .core.validator import validate_index_with_error_details
from .indexer import write_index
from .pipeline import CatalogPipeline
from .scanner import sorted_packs


def check_directory(path: Path, label: str = "Path") -> None:
    """Exit with status 1 unless ``path`` is an existing directory."""
    if not path.exists():
        print(f"Error: {label} does not exist: {path}", file=sys.stderr)
        sys.exit(1)

    if not path.is_dir():
        print(f"Error: {label} is not a directory: {path}", file=sys.stderr)
        sys.exit(1)


def run_index(args: argparse.Namespace) -> None:
    root = Path(args.root)
    check_directory(root, "Assets directory")

    try:
        pipeline = CatalogPipeline(root, display_root=args.display_root)
        print(f"Scanning assets in: {pipeline.root}", file=sys.stderr)

        output_path = Path(args.output) if args.output else pipeline.root / INDEX_FILENAME
        index = pipeline.build_index(
            include_other=args.include_other,
            exclude_names=(INDEX_FILENAME, output_path.name),
        )
        document = index.to_dict()

        is_valid, error_msg = validate_index_with_error_details(document)
        if not is_valid:
            print("Error: Index validation failed:", file=sys.stderr)
            print(error_msg, file=sys.stderr)
            sys.exit(1)

        if args.stdout:
            json.dump(document, sys.stdout, indent=2)
            print()
        else:
            write_index(index, output_path)
            print(f"\nGenerated: {output_path}", file=sys.stderr)

    except (CatalogError, OSError) as e:
        print(f"Error: Failed to generate index: {e}", file=sys.stderr)
        sys.exit(1)

    print("\nSummary:", file=sys.stderr)
    print(f"  Total assets: {index.total_assets}", file=sys.stderr)
    print(f"  glTF/GLB models: {index.gltf_asset_count}", file=sys.stderr)
    print(f"  Categories: {json.dumps(index.categories)}", file=sys.stderr)
    if index.has_packs:
        print(f"  Packs: {len(index.packs)}", file=sys.stderr)
    if index.skipped:
        print(f"  Skipped (unindexed extensions): {index.skipped}", file=sys.stderr)


def run_packs(args: argparse.Namespace) -> None:
    root = Path(args.root)
    check_directory(root, "Assets directory")

    try:
        pipeline = CatalogPipeline(root)
        packs = sorted_packs(pipeline.packs())
    except (CatalogError, OSError) as e:
        print(f"Error: Failed to detect packs: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        listing = [
            {"name": pack.name, "path": str(pack.path), "preview": str(pack.preview_path)}
            for pack in packs
        ]
        json.dump(listing, sys.stdout, indent=2)
        print()
        return

    for pack in packs:
        print(f"{pack.name}\t{pack.preview_path.name}")
    print(f"Found {len(packs)} packs", file=sys.stderr)

    root_preview = pipeline.root_preview()
    if root_preview is not None:
        print(f"Root preview: {root_preview.name}", file=sys.stderr)


def run_combine_previews(args: argparse.Namespace) -> None:
    source_dir = Path(args.source)
    check_directory(source_dir, "Source directory")

    try:
        pipeline = CatalogPipeline(source_dir)
        previews = preview_entries(pipeline.packs())

        if not previews:
            print("No subdirectories with preview images found.", file=sys.stderr)
            print("Looking for: Preview.jpg, Preview.png, preview.jpg, preview.png", file=sys.stderr)
            return

        print(f"Found {len(previews)} preview images:\n", file=sys.stderr)
        result = combine_previews(previews, Path(args.output), pipeline.grid_config)
    except (CatalogError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if result is None:
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="game-asset-catalog",
        description="Index downloaded 3D asset packs and combine their previews",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write public/assets/medieval/assets.json
  game-asset-catalog index public/assets/medieval --display-root public/assets/medieval

  # Print the index instead of writing it
  game-asset-catalog index ./assets --stdout > assets.json

  # Combine every pack preview into one image
  game-asset-catalog combine-previews ./assets docs/combined-preview.jpg
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    index_parser = subparsers.add_parser("index", help="Generate assets.json for an asset root")
    index_parser.add_argument("root", help="Asset root directory to scan")
    index_parser.add_argument(
        "--output", help=f"Where to write the index (default: ROOT/{INDEX_FILENAME})"
    )
    index_parser.add_argument(
        "--display-root",
        help='Prefix for asset display paths (e.g., "public/assets/medieval")',
    )
    index_parser.add_argument(
        "--include-other", action="store_true", help="Also index .json and .txt files"
    )
    index_parser.add_argument(
        "--stdout", action="store_true", help="Print the index to stdout instead of writing it"
    )
    index_parser.set_defaults(func=run_index)

    packs_parser = subparsers.add_parser("packs", help="List the packs found under an asset root")
    packs_parser.add_argument("root", help="Asset root directory to scan")
    packs_parser.add_argument("--json", action="store_true", help="Print the listing as JSON")
    packs_parser.set_defaults(func=run_packs)

    combine_parser = subparsers.add_parser(
        "combine-previews",
        help="Combine pack preview images into a single grid image",
    )
    combine_parser.add_argument("source", help="Directory containing the asset packs")
    combine_parser.add_argument("output", help="Path of the combined image")
    combine_parser.set_defaults(func=run_combine_previews)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the catalog CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
