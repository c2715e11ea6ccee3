import json
import subprocess
import sys

import pytest
import yaml

from easyconf import cli


@pytest.fixture
def settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {"hello": "world", "users": [{"name": "Lisa"}], "off": False, "none": None, "port": 8080}
        ),
        encoding="utf-8",
    )
    return path


def test_cli_get(settings, capsys):
    assert cli.main(["get", str(settings), "users.0.name"]) == 0
    assert capsys.readouterr().out.strip() == "Lisa"


def test_cli_get_fallback(settings, capsys):
    assert cli.main(["get", str(settings), "goodbye", "hello"]) == 0
    assert capsys.readouterr().out.strip() == "world"


def test_cli_get_container_and_json(settings, capsys):
    assert cli.main(["get", str(settings), "users"]) == 0
    assert json.loads(capsys.readouterr().out) == [{"name": "Lisa"}]
    assert cli.main(["get", str(settings), "off", "--json"]) == 0
    assert capsys.readouterr().out.strip() == "false"


def test_cli_get_missing(settings, capsys):
    assert cli.main(["get", str(settings), "missing"]) == 1
    assert cli.main(["get", str(settings), "missing", "--default", "dflt"]) == 0
    assert capsys.readouterr().out.strip() == "dflt"
    assert cli.main(["get", str(settings), "missing", "--required"]) == 2
    assert "missing" in capsys.readouterr().err


def test_cli_has(settings):
    assert cli.main(["has", str(settings), "hello"]) == 0
    assert cli.main(["has", str(settings), "users.0"]) == 1


def test_cli_set(settings):
    assert cli.main(["set", str(settings), "color", "blue"]) == 0
    assert cli.main(["set", str(settings), "size", "[1, 2]", "--json"]) == 0
    data = json.loads(settings.read_text(encoding="utf-8"))
    assert data["color"] == "blue"
    assert data["size"] == [1, 2]
    assert data["hello"] == "world"


def test_cli_set_bad_json(settings):
    assert cli.main(["set", str(settings), "size", "[1,", "--json"]) == 2


def test_cli_show_yaml(settings, capsys):
    assert cli.main(["show", str(settings), "--as", "yaml"]) == 0
    assert yaml.safe_load(capsys.readouterr().out)["hello"] == "world"


def test_cli_unknown_format(tmp_path, capsys):
    path = tmp_path / "settings.ini"
    path.write_text("[a]\nb = 1\n", encoding="utf-8")
    assert cli.main(["get", str(path), "a"]) == 2
    assert "settings.ini" in capsys.readouterr().err


def test_cli_backends(capsys):
    assert cli.main(["backends"]) == 0
    out = capsys.readouterr().out
    assert "yaml\t.yaml .yml" in out
    assert ".jsn" in out


def test_module_entry_point_help():
    proc = subprocess.run([sys.executable, "-m", "easyconf", "--help"], capture_output=True, text=True)
    assert proc.returncode == 0
    assert "usage: easyconf" in proc.stdout


def test_cli_scalars_print_as_json(settings, capsys):
    assert cli.main(["get", str(settings), "off"]) == 0
    assert capsys.readouterr().out.strip() == "false"
    assert cli.main(["get", str(settings), "none"]) == 0
    assert capsys.readouterr().out.strip() == "null"
    assert cli.main(["get", str(settings), "port"]) == 0
    assert capsys.readouterr().out.strip() == "8080"
    assert cli.main(["get", str(settings), "hello", "--json"]) == 0
    assert capsys.readouterr().out.strip() == '"world"'
