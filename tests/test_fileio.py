import os
import stat
from pathlib import Path

import pytest

from easyconf.errors import ConfigNotFoundError, ConfigWriteError
from easyconf.fileio import read_text, write_text


def test_write_and_read(tmp_path: Path):
    path = tmp_path / "sub" / "file.txt"
    write_text(path, "one\ntwo\n")
    assert read_text(path) == "one\ntwo\n"
    assert not (tmp_path / "sub" / "file.txt.tmp").exists()


def test_overwrite(tmp_path: Path):
    path = tmp_path / "file.txt"
    write_text(path, "a\n")
    write_text(path, "b\n")
    assert read_text(path) == "b\n"


def test_read_missing(tmp_path: Path):
    with pytest.raises(ConfigNotFoundError):
        read_text(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        read_text(tmp_path)


def test_failed_write_keeps_original(tmp_path: Path, monkeypatch):
    path = tmp_path / "keep.txt"
    path.write_text("original", encoding="utf-8")

    def boom(self, target):
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "replace", boom)
    with pytest.raises(ConfigWriteError):
        write_text(path, "new")
    assert path.read_text(encoding="utf-8") == "original"
    assert not (tmp_path / "keep.txt.tmp").exists()


def test_unwritable_target(tmp_path: Path, monkeypatch):
    path = tmp_path / "locked.json"
    path.write_text("{}", encoding="utf-8")
    real_access = os.access

    def access(target, mode, *args, **kwargs):
        if Path(target) == path and mode == os.W_OK:
            return False
        return real_access(target, mode, *args, **kwargs)

    monkeypatch.setattr(os, "access", access)
    with pytest.raises(ConfigWriteError, match="not writable"):
        write_text(path, '{"a": 1}')
    assert path.read_text(encoding="utf-8") == "{}"
    assert not (tmp_path / "locked.json.tmp").exists()


def test_new_file_skips_access_check(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(os, "access", lambda *args, **kwargs: False)
    path = tmp_path / "new.json"
    write_text(path, "{}")
    assert read_text(path) == "{}"


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_mode_preserved(tmp_path: Path):
    path = tmp_path / "secret.yaml"
    path.write_text("a: 1\n", encoding="utf-8")
    path.chmod(0o600)
    write_text(path, "a: 2\n")
    assert stat.S_IMODE(path.stat().st_mode) == 0o600
    assert read_text(path) == "a: 2\n"
