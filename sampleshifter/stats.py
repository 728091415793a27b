"""Text summaries of categorization results."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from .categorizer import CategorizedFile

_NO_SUBCATEGORY = "(no subcategory)"
_RULE = "-" * 50


def _label(value: object) -> str:
    return str(value.value) if isinstance(value, Enum) else str(value)


def _ranked(groups: dict[str, list[CategorizedFile]]) -> list[tuple[str, int]]:
    """Order group names by size, largest first; ties keep first-seen order."""
    return sorted(
        ((name, len(files)) for name, files in groups.items()),
        key=lambda item: -item[1],
    )


def _group_by_category(
    categorized: Iterable[CategorizedFile],
) -> dict[str, list[CategorizedFile]]:
    groups: dict[str, list[CategorizedFile]] = {}
    for item in categorized:
        groups.setdefault(_label(item.category), []).append(item)
    return groups


def format_stats(categorized: Iterable[CategorizedFile]) -> str:
    """Return the category and subcategory statistics table, or '' when empty."""
    files = list(categorized)
    if not files:
        return ""

    groups = _group_by_category(files)
    total = len(files)
    ranked = _ranked(groups)

    lines = [
        "=== CATEGORIZATION STATISTICS ===",
        "",
        f"{'Category':<20} {'Count':>10} {'Percentage':>10}",
        _RULE,
    ]
    for category, count in ranked:
        lines.append(f"{category:<20} {count:>10d} {count * 100.0 / total:>9.1f}%")
    lines += ["", "=== SUBCATEGORY BREAKDOWN ===", ""]

    for category, count in ranked:
        subgroups: dict[str, list[CategorizedFile]] = {}
        for item in groups[category]:
            subgroups.setdefault(item.subcategory or _NO_SUBCATEGORY, []).append(item)
        lines.append(f"{category} ({count} files)")
        lines.append(f"  {'Subcategory':<30} {'Count':>10} {'% of Cat':>10}")
        lines.append("  " + _RULE)
        for name, sub_count in _ranked(subgroups):
            lines.append(
                f"  {name:<30} {sub_count:>10d} {sub_count * 100.0 / count:>9.1f}%"
            )
        lines.append("")

    return "\n".join(lines) + "\n"


def display_stats(categorized: Iterable[CategorizedFile]) -> None:
    """Print the statistics table."""
    print(format_stats(categorized), end="")


def format_detailed_file_list(categorized: Iterable[CategorizedFile]) -> str:
    """Return every file grouped by category with its target path, or '' when empty."""
    files = list(categorized)
    if not files:
        return ""

    groups = _group_by_category(files)
    lines = ["=== DETAILED FILE LIST ===", ""]
    for category, count in _ranked(groups):
        lines.append(f"Category: {category} ({count} files)")
        for item in groups[category]:
            lines.append(f"  {item.sample.original_path}")
            lines.append(f"    -> {item.target_path}")
        lines.append("")
    return "\n".join(lines) + "\n"


def display_detailed_file_list(categorized: Iterable[CategorizedFile]) -> None:
    """Print the detailed file list."""
    print(format_detailed_file_list(categorized), end="")