"""Discovery of audio sample files on disk."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from typing import Iterator

AUDIO_EXTENSIONS: tuple[str, ...] = (
    ".wav",
    ".mp3",
    ".flac",
    ".aif",
    ".aiff",
    ".ogg",
    ".m4a",
    ".wma",
    ".aac",
)


@dataclass(frozen=True)
class SampleFile:
    """An audio sample found while scanning."""

    original_path: str
    file_name: str
    extension: str


def _extension(path: str) -> str:
    """Return the suffix of the last path element, starting at its last dot."""
    base = os.path.basename(path)
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def _walk_files(root: str) -> Iterator[str]:
    """Yield every non-directory path under root, in lexical order.

    Symbolic links are not followed. A missing root raises FileNotFoundError.
    """
    info = os.lstat(root)
    if not stat.S_ISDIR(info.st_mode):
        yield root
        return
    for name in sorted(os.listdir(root)):
        yield from _walk_files(os.path.join(root, name))


def scan_directory(directory: str | os.PathLike[str]) -> list[SampleFile]:
    """Recursively collect the audio files below a directory."""
    samples = []
    for path in _walk_files(os.fspath(directory)):
        ext = _extension(path).lower()
        if ext in AUDIO_EXTENSIONS:
            samples.append(
                SampleFile(
                    original_path=path,
                    file_name=os.path.basename(path),
                    extension=ext,
                )
            )
    return samples