"""Assignment of audio samples to category and subcategory folders."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from .config import CategoryConfig, CategoryDefinition, default_config, load_config
from .scanner import SampleFile

UNCATEGORIZED = "uncategorized"

_DASH_RUN = re.compile(r"-+")


class Category(str, Enum):
    """Names of the built-in categories."""

    DRUM = "drums"
    BASS = "bass"
    SYNTH = "synth"
    VOCAL = "vocals"
    FX = "fx"
    PERCUSSION = "percussion"
    MELODIC = "melodic"
    LOOP = "loops"
    ONE_SHOT = "oneshots"
    AMBIANCE = "ambiance"
    TRANSITION = "transition"
    FOLEY = "foley"
    UNCATEGORIZED = "uncategorized"


@dataclass(frozen=True)
class CategorizedFile:
    """A sample together with the category, subcategory and path chosen for it."""

    sample: SampleFile
    category: str
    subcategory: str
    target_path: str

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form used by preview files."""
        return {
            "Sample": {
                "OriginalPath": self.sample.original_path,
                "FileName": self.sample.file_name,
                "Extension": self.sample.extension,
            },
            "Category": self.category,
            "Subcategory": self.subcategory,
            "TargetPath": self.target_path,
        }


def _text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def categorized_file_from_dict(data: Any) -> CategorizedFile:
    """Build a CategorizedFile from its decoded JSON form."""
    if not isinstance(data, dict):
        raise ValueError("categorized file entry must be an object")
    raw_sample = data.get("Sample")
    if raw_sample is None:
        raw_sample = {}
    if not isinstance(raw_sample, dict):
        raise ValueError("field 'Sample' must be an object")
    sample = SampleFile(
        original_path=_text(raw_sample, "OriginalPath"),
        file_name=_text(raw_sample, "FileName"),
        extension=_text(raw_sample, "Extension"),
    )
    return CategorizedFile(
        sample=sample,
        category=_text(data, "Category"),
        subcategory=_text(data, "Subcategory"),
        target_path=_text(data, "TargetPath"),
    )


def _path_extension(path: str) -> str:
    """Return the suffix of the final path element from its last dot, or ''."""
    separators = {os.sep, "/"}
    if os.altsep:
        separators.add(os.altsep)
    for pos in range(len(path) - 1, -1, -1):
        char = path[pos]
        if char in separators:
            return ""
        if char == ".":
            return path[pos:]
    return ""


def normalize_file_name(file_name: str) -> str:
    """Lowercase a file name, turn spaces and underscores into single dashes.

    Leading and trailing dashes are removed and the extension is kept as is.
    """
    ext = _path_extension(file_name)
    stem = file_name[: len(file_name) - len(ext)] if ext else file_name
    normalized = stem.lower().replace(" ", "-").replace("_", "-")
    normalized = _DASH_RUN.sub("-", normalized).strip("-")
    return normalized + ext


def _matches(keyword: str, file_name: str, name_without_ext: str) -> bool:
    keyword = keyword.lower()
    return keyword in file_name or keyword in name_without_ext


class Categorizer:
    """Classifies samples by the keywords of a category configuration."""

    def __init__(self, config: CategoryConfig) -> None:
        self.config = config

    def _find(self, name: str) -> CategoryDefinition | None:
        return next((cat for cat in self.config.categories if cat.name == name), None)

    def _determine_category(self, file_name: str, name_without_ext: str) -> str:
        for cat in sorted(self.config.categories, key=lambda c: c.priority):
            if any(_matches(word, file_name, name_without_ext) for word in cat.keywords):
                return cat.name
        return UNCATEGORIZED

    def _determine_subcategory(
        self, category: str, file_name: str, name_without_ext: str
    ) -> str:
        definition = self._find(category)
        if definition is None or not definition.subcategories:
            return ""
        best_match = ""
        best_length = 0
        for subfolder, words in definition.subcategories.items():
            for word in words:
                length = len(word.encode("utf-8"))
                if length > best_length and _matches(word, file_name, name_without_ext):
                    best_length = length
                    best_match = subfolder
        return best_match

    def categorize(
        self, sample: SampleFile, target_dir: str, normalize: bool = False
    ) -> CategorizedFile:
        """Choose a category, subcategory and target path for one sample."""
        file_name = sample.file_name.lower()
        name_without_ext = sample.file_name.removesuffix(sample.extension).lower()

        category = self._determine_category(file_name, name_without_ext)
        subcategory = self._determine_subcategory(category, file_name, name_without_ext)

        if not subcategory and category != UNCATEGORIZED:
            definition = self._find(category)
            if definition is not None and definition.subcategories:
                subcategory = UNCATEGORIZED

        target_name = normalize_file_name(sample.file_name) if normalize else sample.file_name
        parts = [category, subcategory, target_name] if subcategory else [category, target_name]
        target_path = os.path.normpath(os.path.join(target_dir, *parts))

        return CategorizedFile(
            sample=sample,
            category=category,
            subcategory=subcategory,
            target_path=target_path,
        )

    def categorize_batch(
        self, samples: Iterable[SampleFile], target_dir: str, normalize: bool = False
    ) -> list[CategorizedFile]:
        """Categorize every sample, keeping their order."""
        return [self.categorize(sample, target_dir, normalize) for sample in samples]


def categorizer_from_file(config_path: str | os.PathLike[str] | None) -> Categorizer:
    """Create a Categorizer from a config file, or the defaults when no path is given."""
    return Categorizer(load_config(config_path))


def categorize(sample: SampleFile, target_dir: str, normalize: bool = False) -> CategorizedFile:
    """Categorize one sample with the built-in configuration."""
    return Categorizer(default_config()).categorize(sample, target_dir, normalize)


def categorize_batch(
    samples: Iterable[SampleFile], target_dir: str, normalize: bool = False
) -> list[CategorizedFile]:
    """Categorize several samples with the built-in configuration."""
    return Categorizer(default_config()).categorize_batch(samples, target_dir, normalize)