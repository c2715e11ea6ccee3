from pathlib import Path

import pytest

from easyconf.backends.toml_backend import TomlBackend
from easyconf.errors import ConfigDecodeError, ConfigWriteError


def test_toml_backend_roundtrip(tmp_path: Path):
    tree = {"title": "demo", "server": {"port": 8080, "hosts": ["a", "b"]}}
    path = tmp_path / "t.toml"
    TomlBackend().save(path, tree)
    loaded = TomlBackend().load(path)
    assert loaded == tree
    assert type(loaded["server"]) is dict


def test_invalid_toml(tmp_path: Path):
    path = tmp_path / "bad.toml"
    path.write_text("key = = 1\n", encoding="utf-8")
    with pytest.raises(ConfigDecodeError):
        TomlBackend().load(path)


def test_unserializable_value_leaves_file(tmp_path: Path):
    path = tmp_path / "keep.toml"
    path.write_text('a = 1\n', encoding="utf-8")
    with pytest.raises(ConfigWriteError):
        TomlBackend().save(path, {"a": object()})
    assert path.read_text(encoding="utf-8") == "a = 1\n"
