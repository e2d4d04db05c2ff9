"""Test the flyout command line."""

import io
import json
import logging
import sys
from pathlib import Path

import pytest

from flyout._cli import LOG_FORMAT, main


@pytest.fixture(autouse=True)
def log_config(monkeypatch):
    """Record logging.basicConfig() calls made by main() instead of touching the root logger."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


def write_document(tmp_path: Path, document) -> Path:
    path = tmp_path / "menu.json"
    path.write_text(json.dumps(document))
    return path


class TestRender:
    """Test rendering menu documents."""

    def test_render_file(self, tmp_path: Path, capsys):
        path = write_document(tmp_path, {
            "field": "sort",
            "name": "Select Criteria",
            "content": ["Category", "Status"],
            "options": {"select": "onSort"},
        })

        main([str(path)])

        out = capsys.readouterr().out
        assert 'id="sort-selector"' in out
        assert '<a href="#" value="Status">Status</a>' in out
        assert "onSort(vid);" in out

    def test_nested_content(self, tmp_path: Path, capsys):
        path = write_document(tmp_path, {
            "field": "fruit",
            "name": "Fruit",
            "content": [["Fruits", "fruits", [["Apple", "a"], ["Banana", "b"]]]],
        })

        main([str(path), "--items-only"])

        out = capsys.readouterr().out
        assert out.startswith('<ul><li><a href="#" value="fruits">Fruits</a><ul>')
        assert "<script" not in out

    def test_read_stdin(self, monkeypatch, capsys):
        document = {"field": "sort", "name": "Sort", "content": ["a"]}
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(document)))

        main(["-"])

        assert 'id="sort-selector"' in capsys.readouterr().out


class TestErrors:
    """Test error reporting and exit status."""

    def test_invalid_json(self, tmp_path: Path, capsys):
        path = tmp_path / "menu.json"
        path.write_text("{not json")

        with pytest.raises(SystemExit) as excinfo:
            main([str(path)])

        assert excinfo.value.code == 1
        assert "is not valid JSON" in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "missing.json")])

        assert excinfo.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_invalid_select(self, tmp_path: Path, capsys):
        path = write_document(tmp_path, {
            "field": "sort",
            "name": "Sort",
            "content": ["a"],
            "options": {"select": "alert(1)"},
        })

        with pytest.raises(SystemExit) as excinfo:
            main([str(path)])

        assert excinfo.value.code == 1
        assert "is not a valid menu document" in capsys.readouterr().err

    def test_plain_string_content(self, tmp_path: Path, capsys):
        path = write_document(tmp_path, {"field": "sort", "name": "Sort", "content": "Category"})

        with pytest.raises(SystemExit) as excinfo:
            main([str(path)])

        assert excinfo.value.code == 1
        assert "Menu content must be" in capsys.readouterr().err

    def test_file_not_utf8(self, tmp_path: Path, capsys):
        path = tmp_path / "menu.json"
        path.write_bytes(b'{"field": "sort", "name": "\xff", "content": []}')

        with pytest.raises(SystemExit) as excinfo:
            main([str(path)])

        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error:")
        assert "is not UTF-8 text" in err


class TestLogging:
    """Test logging setup."""

    def test_default_level(self, tmp_path: Path, log_config, capsys):
        main([str(write_document(tmp_path, {"field": "f", "name": "F", "content": []}))])
        assert len(log_config) == 1
        assert log_config[0]["format"] == LOG_FORMAT
        assert log_config[0]["level"] == logging.WARNING

    def test_log_level_option(self, tmp_path: Path, log_config, capsys):
        path = write_document(tmp_path, {"field": "f", "name": "F", "content": []})
        main([str(path), "--log-level", "debug"])
        assert log_config[0]["level"] == logging.DEBUG

    def test_logs_to_stderr(self, tmp_path: Path, log_config, capsys):
        """Log records must not mix with the markup on stdout."""
        main([str(write_document(tmp_path, {"field": "f", "name": "F", "content": []}))])
        assert log_config[0]["stream"] is sys.stderr
