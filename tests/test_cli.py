import json
import os

import pytest

from sampleshifter.categorizer import categorize_batch, categorized_file_from_dict
from sampleshifter.cli import clean_directory, copy_file, main, save_preview
from sampleshifter.scanner import scan_directory


@pytest.fixture
def source(tmp_path):
    src = tmp_path / "src"
    (src / "sub").mkdir(parents=True)
    (src / "kick.wav").write_bytes(b"kick-data")
    (src / "sub" / "bass_sub.wav").write_bytes(b"bass-data")
    (src / "readme.txt").write_text("not audio")
    return str(src)


def test_scan_lists_audio_files(source, capsys):
    assert main(["scan", source]) == 0
    out = capsys.readouterr().out
    for sample in scan_directory(source):
        assert f"  - {sample.original_path}" in out
    assert "readme.txt" not in out


def test_scan_missing_directory(tmp_path, capsys):
    missing = str(tmp_path / "nope")
    assert main(["scan", missing]) == 1
    assert f"Error: Directory '{missing}' does not exist" in capsys.readouterr().out


def test_scan_requires_argument():
    with pytest.raises(SystemExit):
        main(["scan"])


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_preview_requires_target(source, capsys):
    assert main(["preview", source]) == 1
    assert "Error: --target flag is required" in capsys.readouterr().out


def test_preview_saves_loadable_file(source, tmp_path, capsys):
    target = str(tmp_path / "out")
    output = tmp_path / "nested" / "preview.json"
    assert main(["preview", source, "-t", target, "-o", str(output)]) == 0
    assert not os.path.exists(target)
    loaded = [categorized_file_from_dict(d) for d in json.loads(output.read_text())]
    assert loaded == categorize_batch(scan_directory(source), target)
    assert f"Preview saved to: {output}" in capsys.readouterr().out


def test_preview_bad_config(source, tmp_path, capsys):
    config = tmp_path / "config.json"
    config.write_text("{}")
    assert main(["preview", source, "-t", str(tmp_path / "t"), "-c", str(config)]) == 1
    out = capsys.readouterr().out
    assert "Error loading configuration" in out
    assert "configuration must contain at least one category" in out


def test_apply_copies_files(source, tmp_path):
    target = str(tmp_path / "target")
    assert main(["apply", source, "--target", target]) == 0
    expected = categorize_batch(scan_directory(source), target)
    for item in expected:
        with open(item.target_path, "rb") as copied, open(item.sample.original_path, "rb") as orig:
            assert copied.read() == orig.read()


def test_apply_dry_run_copies_nothing(source, tmp_path, capsys):
    target = tmp_path / "target"
    assert main(["apply", source, "-t", str(target), "--dry-run"]) == 0
    assert not target.exists()
    assert "(skipped - dry run)" in capsys.readouterr().out


def test_apply_normalize(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "My Kick__01.wav").write_bytes(b"x")
    target = str(tmp_path / "target")
    assert main(["apply", str(src), "-t", target, "--normalize"]) == 0
    (item,) = categorize_batch(scan_directory(str(src)), target, True)
    assert os.path.isfile(item.target_path)
    assert os.path.basename(item.target_path) == "my-kick-01.wav"


def test_apply_requires_target(source, capsys):
    assert main(["apply", source]) == 1
    assert "Error: --target flag is required" in capsys.readouterr().out


def test_apply_requires_source_without_preview(tmp_path, capsys):
    assert main(["apply", "-t", str(tmp_path / "t")]) == 1
    assert "source directory required" in capsys.readouterr().out


def test_apply_from_preview_file(source, tmp_path):
    target = str(tmp_path / "target")
    preview = str(tmp_path / "preview.json")
    assert main(["preview", source, "-t", target, "-o", preview]) == 0
    assert main(["apply", "-t", target, "-p", preview]) == 0
    for item in categorize_batch(scan_directory(source), target):
        assert os.path.isfile(item.target_path)


def test_apply_unreadable_preview(tmp_path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text("invalid json{")
    assert main(["apply", "-t", str(tmp_path / "t"), "-p", str(bad)]) == 1
    assert "Error parsing preview file" in capsys.readouterr().out


def test_apply_clean_confirmed(source, tmp_path, monkeypatch):
    target = tmp_path / "target"
    target.mkdir()
    stale = target / "stale.wav"
    stale.write_bytes(b"old")
    monkeypatch.setattr("builtins.input", lambda *a: "yes")
    assert main(["apply", source, "-t", str(target), "--clean"]) == 0
    assert not stale.exists()
    assert any(target.rglob("kick.wav"))


def test_apply_clean_declined(source, tmp_path, monkeypatch, capsys):
    target = tmp_path / "target"
    target.mkdir()
    stale = target / "stale.wav"
    stale.write_bytes(b"old")
    monkeypatch.setattr("builtins.input", lambda *a: "no")
    assert main(["apply", source, "-t", str(target), "--clean"]) == 1
    assert stale.exists()
    assert "Error: cleaning cancelled by user" in capsys.readouterr().out


def test_clean_directory_missing_is_silent(tmp_path, capsys):
    missing = tmp_path / "missing"
    clean_directory(str(missing))
    assert not missing.exists()
    assert capsys.readouterr().out == ""


def test_clean_directory_cancel_raises(tmp_path, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda *a: "  No ")
    with pytest.raises(RuntimeError, match="cleaning cancelled by user"):
        clean_directory(str(tmp_path))
    assert tmp_path.exists()


def test_clean_directory_accepts_uppercase_yes(tmp_path, monkeypatch):
    victim = tmp_path / "victim"
    (victim / "inner").mkdir(parents=True)
    monkeypatch.setattr("builtins.input", lambda *a: " YES ")
    clean_directory(str(victim))
    assert not victim.exists()


def test_copy_file_creates_parents(tmp_path):
    src = tmp_path / "a.wav"
    src.write_bytes(b"payload")
    dst = tmp_path / "x" / "y" / "a.wav"
    copy_file(str(src), str(dst))
    assert dst.read_bytes() == b"payload"


def test_copy_file_missing_source(tmp_path):
    with pytest.raises(OSError, match="failed to copy file"):
        copy_file(str(tmp_path / "none.wav"), str(tmp_path / "out" / "none.wav"))


def test_save_preview_round_trip(source, tmp_path):
    categorized = categorize_batch(scan_directory(source), str(tmp_path / "t"))
    out = tmp_path / "deep" / "p.json"
    save_preview(categorized, str(out))
    data = json.loads(out.read_text(encoding="utf-8"))
    assert [categorized_file_from_dict(d) for d in data] == categorized
    assert set(data[0]) == {"Sample", "Category", "Subcategory", "TargetPath"}