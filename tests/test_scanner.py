import os

import pytest

from sampleshifter.scanner import SampleFile, scan_directory


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")


def test_scan_directory_finds_audio_files(tmp_path):
    for name in ["kick.wav", "snare.mp3", "bass.flac", "readme.txt", "image.jpg", "synth.aif"]:
        _touch(tmp_path / name)
    _touch(tmp_path / "subdir" / "vocal.ogg")

    samples = scan_directory(tmp_path)

    assert len(samples) == 5
    for sample in samples:
        assert sample.original_path
        assert sample.file_name
        assert sample.extension
    names = {s.file_name for s in samples}
    assert names == {"kick.wav", "snare.mp3", "bass.flac", "synth.aif", "vocal.ogg"}


def test_scan_empty_directory(tmp_path):
    assert scan_directory(tmp_path) == []


def test_scan_nonexistent_directory():
    with pytest.raises(FileNotFoundError):
        scan_directory("/path/that/does/not/exist")


@pytest.mark.parametrize("ext", [".wav", ".mp3", ".flac", ".aif", ".aiff"])
def test_common_audio_extensions_are_recognised(tmp_path, ext):
    _touch(tmp_path / f"sample{ext}")

    samples = scan_directory(tmp_path)

    assert [(s.file_name, s.extension) for s in samples] == [(f"sample{ext}", ext)]


def test_results_are_in_lexical_order(tmp_path):
    _touch(tmp_path / "b.wav")
    _touch(tmp_path / "a" / "z.wav")
    _touch(tmp_path / "c.wav")

    samples = scan_directory(tmp_path)

    assert [s.original_path for s in samples] == [
        os.path.join(str(tmp_path), "a", "z.wav"),
        os.path.join(str(tmp_path), "b.wav"),
        os.path.join(str(tmp_path), "c.wav"),
    ]


def test_extension_is_lowercased_and_file_name_kept(tmp_path):
    _touch(tmp_path / "Kick_01.WAV")

    samples = scan_directory(tmp_path)

    assert samples == [
        SampleFile(
            original_path=os.path.join(str(tmp_path), "Kick_01.WAV"),
            file_name="Kick_01.WAV",
            extension=".wav",
        )
    ]


def test_dotfile_with_audio_suffix_is_found(tmp_path):
    _touch(tmp_path / ".wav")

    samples = scan_directory(tmp_path)

    assert [s.extension for s in samples] == [".wav"]


def test_scanning_a_single_file(tmp_path):
    target = tmp_path / "clap.flac"
    _touch(target)

    samples = scan_directory(target)

    assert samples == [SampleFile(str(target), "clap.flac", ".flac")]