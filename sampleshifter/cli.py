"""Command-line interface: scan, preview and apply sample organisation."""

from __future__ import annotations

import argparse
import json
import os
import shutil
from typing import Iterable, Sequence

from .categorizer import (
    CategorizedFile,
    Categorizer,
    categorized_file_from_dict,
    categorizer_from_file,
)
from .config import ConfigError
from .scanner import SampleFile, scan_directory
from .stats import display_detailed_file_list, display_stats


class _CommandError(RuntimeError):
    """A failure that ends a command with a message and exit status 1."""


def _require_directory(path: str) -> None:
    if not os.path.exists(path):
        raise _CommandError(f"Error: Directory '{path}' does not exist")


def _scan(path: str) -> list[SampleFile]:
    try:
        return scan_directory(path)
    except OSError as exc:
        raise _CommandError(f"Error scanning directory: {exc}") from exc


def _load_categorizer(config_path: str | None) -> Categorizer:
    try:
        return categorizer_from_file(config_path)
    except ConfigError as exc:
        raise _CommandError(f"Error loading configuration: {exc}") from exc


def _load_preview(filename: str) -> list[CategorizedFile]:
    try:
        with open(filename, encoding="utf-8") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise _CommandError(f"Error reading preview file: {exc}") from exc
    try:
        data = json.loads(text)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError("preview file must contain a list")
        return [categorized_file_from_dict(entry) for entry in data]
    except ValueError as exc:
        raise _CommandError(f"Error parsing preview file: {exc}") from exc


def clean_directory(target_dir: str) -> None:
    """Delete target_dir and its contents after the user types 'yes'.

    Does nothing when the directory does not exist; raises RuntimeError when
    the user declines or the removal fails.
    """
    if not os.path.lexists(target_dir):
        return

    print("\n⚠️  WARNING: This will delete all contents in:")
    print(f"   {target_dir}\n")
    print("Are you sure you want to continue? Type 'yes' to confirm: ", end="", flush=True)
    try:
        response = input()
    except EOFError:
        response = ""
    words = response.split()
    answer = words[0] if words else ""
    if answer.lower() != "yes":
        raise _CommandError("cleaning cancelled by user")

    print(f"\nCleaning target directory: {target_dir}")
    try:
        if os.path.isdir(target_dir) and not os.path.islink(target_dir):
            shutil.rmtree(target_dir)
        else:
            os.remove(target_dir)
    except OSError as exc:
        raise _CommandError(f"failed to clean directory: {exc}") from exc
    print("Target directory cleaned successfully.")


def copy_file(src: str, dst: str) -> None:
    """Copy src to dst, creating the parent directories of dst."""
    parent = os.path.dirname(dst)
    if parent:
        try:
            os.makedirs(parent, exist_ok=True)
        except OSError as exc:
            raise OSError(f"failed to create directory: {exc}") from exc
    try:
        shutil.copyfile(src, dst)
    except OSError as exc:
        raise OSError(f"failed to copy file: {exc}") from exc


def save_preview(categorized: Iterable[CategorizedFile], filename: str) -> None:
    """Write categorization results to a JSON preview file, reporting problems."""
    text = json.dumps([item.to_dict() for item in categorized], indent=2, ensure_ascii=False)

    directory = os.path.dirname(filename)
    if directory and directory != ".":
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as exc:
            print(f"Error creating directory for preview file: {exc}")
            return

    try:
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        print(f"Error saving preview file: {exc}")
        return

    print(f"Preview saved to: {filename}")
    print("Use this file with the 'apply' command to execute the categorization.")


def _run_scan(args: argparse.Namespace) -> None:
    source = args.directory
    _require_directory(source)
    print(f"Scanning directory: {source}\n")
    samples = _scan(source)
    print(f"Found {len(samples)} audio sample file(s):\n")
    for sample in samples:
        print(f"  - {sample.original_path}")


def _run_preview(args: argparse.Namespace) -> None:
    source = args.directory
    _require_directory(source)
    if not args.target:
        raise _CommandError("Error: --target flag is required")

    print(f"Scanning: {source}")
    print(f"Target: {args.target}\n")

    samples = _scan(source)
    if not samples:
        print("No audio sample files found.")
        return

    categorizer = _load_categorizer(args.config)
    categorized = categorizer.categorize_batch(samples, args.target, args.normalize)

    print(f"Preview: Found {len(categorized)} file(s) to categorize\n")
    display_detailed_file_list(categorized)
    display_stats(categorized)

    if args.output:
        save_preview(categorized, args.output)


def _run_apply(args: argparse.Namespace) -> None:
    if not args.target:
        raise _CommandError("Error: --target flag is required")

    if args.preview_file:
        categorized = _load_preview(args.preview_file)
        print(f"Loaded preview from: {args.preview_file}")
    else:
        if len(args.source) != 1:
            raise _CommandError(
                "Error: source directory required when not using --preview-file"
            )
        source = args.source[0]
        _require_directory(source)
        print(f"Scanning: {source}")
        samples = _scan(source)
        categorizer = _load_categorizer(args.config)
        categorized = categorizer.categorize_batch(samples, args.target, args.normalize)

    if not categorized:
        print("No files to process.")
        return

    if args.clean and not args.dry_run:
        try:
            clean_directory(args.target)
        except _CommandError as exc:
            raise _CommandError(f"Error: {exc}") from exc
    elif args.clean:
        print(f"\n[DRY RUN] Would clean target directory: {args.target}")

    if args.dry_run:
        print("\n=== DRY RUN MODE - No files will be copied ===")

    print(f"\nProcessing {len(categorized)} file(s)...\n")

    successes = 0
    errors = 0
    for item in categorized:
        print(f"Copying: {item.sample.original_path}\n  -> {item.target_path}")
        if args.dry_run:
            print("  (skipped - dry run)")
            successes += 1
            continue
        try:
            copy_file(item.sample.original_path, item.target_path)
        except OSError as exc:
            print(f"  ERROR: {exc}")
            errors += 1
        else:
            print("  ✓ Success")
            successes += 1

    print("\n=== Summary ===")
    print(f"Total files: {len(categorized)}")
    print(f"Successful: {successes}")
    if errors:
        print(f"Errors: {errors}")
    if args.dry_run:
        print("\nThis was a dry run. Use without --dry-run to actually copy files.")

    print()
    display_stats(categorized)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sample-shifter",
        description=(
            "Scan audio sample files, categorize them by name and organize them "
            "into folders. Nothing is changed until 'apply' is run."
        ),
    )
    commands = parser.add_subparsers(dest="command", metavar="command")

    scan = commands.add_parser(
        "scan", help="Scan a directory for audio sample files",
        description="Scan a directory recursively to find all audio sample files.",
    )
    scan.add_argument("directory")
    scan.set_defaults(handler=_run_scan)

    config_help = "Path to category configuration JSON file (optional, uses default if not provided)"
    normalize_help = "Normalize filenames (lowercase, spaces and underscores to dashes)"
    target_help = "Target directory for organized samples (required)"

    preview = commands.add_parser(
        "preview", help="Preview how files will be categorized and organized",
        description="Show where each file would be copied, without making changes.",
    )
    preview.add_argument("directory")
    preview.add_argument("-t", "--target", default="", help=target_help)
    preview.add_argument(
        "-o", "--output", default="",
        help="Save preview to JSON file for later use with apply command",
    )
    preview.add_argument("--normalize", action="store_true", help=normalize_help)
    preview.add_argument("-c", "--config", default="", help=config_help)
    preview.set_defaults(handler=_run_preview)

    apply = commands.add_parser(
        "apply", help="Apply categorization and copy files to target directory",
        description=(
            "Copy audio files to their categorized folders in the target directory, "
            "scanning a source directory or using a saved preview file."
        ),
    )
    apply.add_argument("source", nargs="*")
    apply.add_argument("-t", "--target", default="", help=target_help)
    apply.add_argument(
        "-p", "--preview-file", dest="preview_file", default="",
        help="Use a previously saved preview file",
    )
    apply.add_argument(
        "--dry-run", dest="dry_run", action="store_true",
        help="Preview what would be done without actually copying files",
    )
    apply.add_argument("--normalize", action="store_true", help=normalize_help)
    apply.add_argument(
        "--clean", action="store_true",
        help="Clean target directory before copying files (requires confirmation)",
    )
    apply.add_argument("-c", "--config", default="", help=config_help)
    apply.set_defaults(handler=_run_apply)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    try:
        args.handler(args)
    except _CommandError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())