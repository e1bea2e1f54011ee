"""
Test cases for the jsonpress command line.
"""

import os

import pytest

from jsonpress import cli
from jsonpress.cli import EXIT_ERROR, EXIT_OK, EXIT_UNFORMATTED, main, write_atomic


@pytest.fixture
def json_file(tmp_path):
    def _write(content):
        path = tmp_path / "doc.json"
        path.write_text(content, encoding="utf-8")
        return path
    return _write


def test_formats_file_in_place(json_file):
    path = json_file('{"a": [1, 2]}')
    assert main([str(path)]) == EXIT_OK
    assert path.read_text(encoding="utf-8") == '{\n    "a": [\n        1,\n        2\n    ]\n}'


def test_option_flags(json_file):
    path = json_file('{"a": [1]}')
    assert main(["-t", "-c", str(path)]) == EXIT_OK
    assert path.read_text(encoding="utf-8") == '{\n\t"a": [\n\t\t1,\n\t],\n}'


def test_spaces_flag(json_file):
    path = json_file("[true]")
    assert main(["--spaces", "2", str(path)]) == EXIT_OK
    assert path.read_text(encoding="utf-8") == "[\n  true\n]"


def test_invalid_spaces_is_usage_error(json_file, capsys):
    path = json_file("[]")
    with pytest.raises(SystemExit) as exc_info:
        main(["-s", "0", str(path)])
    assert exc_info.value.code == 2
    assert "spaces must be positive" in capsys.readouterr().err


def test_parse_error_leaves_file_untouched(json_file, capsys):
    original = '{"a": 1'
    path = json_file(original)
    assert main([str(path)]) == EXIT_ERROR
    assert path.read_text(encoding="utf-8") == original
    assert "close object" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.json")]) == EXIT_ERROR
    assert "cannot read" in capsys.readouterr().err


def test_check_mode(json_file, capsys):
    path = json_file("[1,2]")
    assert main(["--check", str(path)]) == EXIT_UNFORMATTED
    assert path.read_text(encoding="utf-8") == "[1,2]"
    assert "is not formatted" in capsys.readouterr().err

    path.write_text("[\n    1,\n    2\n]", encoding="utf-8")
    assert main(["--check", str(path)]) == EXIT_OK


def test_already_formatted_file_is_stable(json_file):
    path = json_file('{\n    "k": null\n}')
    assert main([str(path)]) == EXIT_OK
    assert path.read_text(encoding="utf-8") == '{\n    "k": null\n}'


def test_failed_write_keeps_original(json_file, monkeypatch, capsys):
    original = "[1,2]"
    path = json_file(original)

    def failing_replace(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(cli.os, "replace", failing_replace)
    assert main([str(path)]) == EXIT_ERROR
    assert path.read_text(encoding="utf-8") == original
    assert "cannot write" in capsys.readouterr().err
    assert sorted(p.name for p in path.parent.iterdir()) == ["doc.json"]


def test_write_atomic_preserves_mode(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text("[]", encoding="utf-8")
    os.chmod(path, 0o644)

    write_atomic(path, "[\n]")
    assert path.read_text(encoding="utf-8") == "[\n]"
    assert os.stat(path).st_mode & 0o777 == 0o644
    assert sorted(p.name for p in tmp_path.iterdir()) == ["doc.json"]


def test_deeply_nested_file(json_file):
    path = json_file("[" * 1200 + "]" * 1200)
    assert main(["-s", "1", str(path)]) == EXIT_OK
    assert path.read_text(encoding="utf-8").count("\n") == 2399
