"""
Tests pour le module CLI.
"""

import json
from unittest.mock import MagicMock, patch

from epub_preview.cli import cli_process_path, print_records_json, print_records_summary
from epub_preview.core.models import MetadataRecord
from epub_preview.main import run_cli

RECORD = MetadataRecord(
    title="Test Book", author="Test Author", language="en", preview_text="Once upon a time"
)


class TestCliProcessPath:
    """Tests pour cli_process_path."""

    @patch("epub_preview.cli.PreviewService")
    def test_cli_process_path_basic(self, mock_service_class):
        mock_service = MagicMock()
        mock_service_class.return_value = mock_service
        mock_service.process_path.return_value = [("/fake/book.epub", RECORD)]

        result = cli_process_path("/fake/book.epub")

        assert result == [("/fake/book.epub", RECORD)]
        mock_service_class.assert_called_once_with(detect_language=False)
        mock_service.process_path.assert_called_once_with("/fake/book.epub")

    @patch("epub_preview.cli.PreviewService")
    def test_cli_process_path_with_language_detection(self, mock_service_class):
        mock_service_class.return_value.process_path.return_value = []

        cli_process_path("/fake/folder", detect_language=True)

        mock_service_class.assert_called_once_with(detect_language=True)


class TestPrintRecords:
    """Tests pour l'affichage des résultats."""

    def test_print_empty_list(self, capsys):
        print_records_summary([])

        captured = capsys.readouterr()
        assert "Fichiers traités: 0" in captured.out

    def test_print_with_record_and_failure(self, capsys):
        print_records_summary([("/fake/a.epub", RECORD), ("/fake/b.epub", None)])

        captured = capsys.readouterr()
        assert "Fichiers traités: 2" in captured.out
        assert "Échecs: 1" in captured.out
        assert "Titre: Test Book" in captured.out
        assert "Aperçu: Once upon a time" in captured.out
        assert "/fake/b.epub" in captured.out

    def test_long_preview_is_shortened(self, capsys):
        record = MetadataRecord(title="T", author="A", language="en", preview_text="x" * 1000)
        print_records_summary([("/fake/a.epub", record)])

        captured = capsys.readouterr()
        assert "x" * 200 + "..." in captured.out
        assert "x" * 201 not in captured.out

    def test_print_json(self, capsys):
        print_records_json([("/fake/a.epub", RECORD), ("/fake/b.epub", None)])

        payload = json.loads(capsys.readouterr().out)
        assert payload[0]["record"]["previewText"] == "Once upon a time"
        assert payload[0]["record"]["author"] == "Test Author"
        assert payload[1] == {"path": "/fake/b.epub", "record": None}


class TestRunCli:
    """Tests pour run_cli."""

    def test_usage_without_arguments(self, capsys):
        assert run_cli([]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_unknown_flag(self, capsys, sample_epub):
        assert run_cli([sample_epub, "--autosave"]) == 1

    def test_invalid_path(self, capsys, tmp_path):
        assert run_cli([str(tmp_path / "missing.epub")]) == 1
        assert "Error" in capsys.readouterr().out

    def test_single_epub_json(self, capsys, sample_epub):
        assert run_cli([sample_epub, "--json"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload[0]["path"] == sample_epub
        assert payload[0]["record"]["title"] == "Test Book"

    def test_unreadable_single_file_fails(self, tmp_path):
        broken = tmp_path / "broken.epub"
        broken.write_text("not a zip")

        assert run_cli([str(broken)]) == 1

    def test_folder_summary(self, capsys, tmp_path, sample_epub):
        assert run_cli([str(tmp_path)]) == 0
        assert "Titre: Test Book" in capsys.readouterr().out
