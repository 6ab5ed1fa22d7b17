"""CLI command tests for Contact Analyzer."""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from contact_analyzer.cli import main


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def write_xlsx(tmp_path, make_xlsx):
    """Write rows to an .xlsx file and return its path."""

    def _write(rows, name="contacts.xlsx") -> str:
        path = tmp_path / name
        path.write_bytes(make_xlsx(rows))
        return str(path)

    return _write


class TestCheckCommand:
    """Tests for the 'check' command."""

    def test_all_valid(self, runner, write_xlsx):
        path = write_xlsx([
            ["1001", "Ana Pérez", "ana@gmail.com", "9611234567"],
            ["1002", "Luis Gómez", "luis@yahoo.com", "962-123-4567"],
        ])

        result = runner.invoke(main, ["check", path])

        assert result.exit_code == 0
        assert "Ana Pérez" in result.output
        assert "2 contacts, 0 with errors" in result.output

    def test_invalid_contacts_reported(self, runner, write_xlsx):
        path = write_xlsx([
            ["1001", "Ana Pérez", "ana@gmail.com", "9611234567"],
            ["10a", "J0hn", "john@unknown.org", "5512345678"],
        ])

        result = runner.invoke(main, ["check", path])

        assert result.exit_code == 1
        assert "INVALID_FORMAT" in result.output
        assert "INVALID_AREA_CODE" in result.output
        assert "2 contacts, 1 with errors" in result.output

    def test_only_invalid(self, runner, write_xlsx):
        path = write_xlsx([
            ["1001", "Ana Pérez", "ana@gmail.com", "9611234567"],
            ["", "Eva", "eva@gmail.com", "9611234567"],
        ])

        result = runner.invoke(main, ["check", path, "--only-invalid"])

        assert result.exit_code == 1
        assert "Ana Pérez" not in result.output
        assert "Eva" in result.output
        assert "REQUIRED" in result.output

    def test_max_rows(self, runner, write_xlsx):
        rows = [[str(n), "Ana", "ana@gmail.com", "9611234567"] for n in range(1, 6)]
        path = write_xlsx(rows)

        result = runner.invoke(main, ["check", path, "--max-rows", "2"])

        assert result.exit_code == 0
        assert "2 contacts, 0 with errors" in result.output

    def test_unreadable_file(self, runner, tmp_path):
        path = tmp_path / "broken.xlsx"
        path.write_bytes(b"not a workbook")

        result = runner.invoke(main, ["check", str(path)])

        assert result.exit_code == 1
        assert "Could not open" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["check", str(tmp_path / "nope.xlsx")])
        assert result.exit_code == 2


class TestServeCommand:
    """Tests for the 'serve' command."""

    def test_serve_runs_app(self, runner):
        app = MagicMock()
        with patch("contact_analyzer.app.create_app", return_value=app):
            result = runner.invoke(main, ["serve", "--port", "9000"])

        assert result.exit_code == 0
        assert "9000" in result.output
        app.run.assert_called_once_with(host="0.0.0.0", port=9000, threaded=True)


def test_help_lists_commands(runner):
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "check" in result.output
    assert "serve" in result.output
