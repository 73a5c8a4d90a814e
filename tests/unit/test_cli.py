import json
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from phishlens import __version__
from phishlens.logging.logger import Log
from phishlens.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def example_provider(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CLIENT_PROVIDER", "example")
    monkeypatch.setenv("DOWNLOAD_DIR", str(tmp_path / "downloads"))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


@pytest.fixture(autouse=True)
def restore_log_stream() -> Generator[None, None, None]:
    yield
    # the runner closes its captured streams after each invoke
    Log.configure("INFO", stream=sys.stderr)


class TestAnalyzeCommand:
    def test_json_output(self) -> None:
        result = runner.invoke(app, ["analyze", "https://example.com", "--format", "json"])
        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert report["badge"] == "Safe"
        assert report["url"] == "https://example.com"
        assert len(report["sections"]) == 9

    def test_rich_output(self) -> None:
        result = runner.invoke(app, ["analyze", "https://example.com"])
        assert result.exit_code == 0
        assert "Safe" in result.stdout
        assert "URL Structure" in result.stdout

    def test_blank_url_exits_without_dispatch(self) -> None:
        result = runner.invoke(app, ["analyze", "  "])
        assert result.exit_code == 2

    def test_unknown_format(self) -> None:
        result = runner.invoke(app, ["analyze", "https://example.com", "-f", "xml"])
        assert result.exit_code == 2

    def test_service_failure_exits_one(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLIENT_PROVIDER", "http")
        monkeypatch.setenv("SERVICE_BASE_URL", "http://127.0.0.1:9")
        monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "2")
        result = runner.invoke(app, ["analyze", "https://example.com"])
        assert result.exit_code == 1


class TestBulkCommand:
    def test_writes_results_file(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "urls.csv"
        csv_path.write_bytes(b"url\nhttps://example.com\n")
        out_dir = tmp_path / "out"
        result = runner.invoke(app, ["bulk", str(csv_path), "--output-dir", str(out_dir)])
        assert result.exit_code == 0
        assert (out_dir / "url_analysis_results.csv").exists()
        assert "url_analysis_results.csv" in result.stdout

    def test_missing_file_rejected(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["bulk", str(tmp_path / "absent.csv")])
        assert result.exit_code != 0


class TestInfoCommands:
    def test_features_lists_catalog(self) -> None:
        result = runner.invoke(app, ["features"])
        assert result.exit_code == 0
        assert "Domain in Copyright" in result.stdout

    def test_csv_format(self) -> None:
        result = runner.invoke(app, ["csv-format"])
        assert result.exit_code == 0
        assert "CSV Format Requirements" in result.stdout

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_invalid_configuration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "soon")
        result = runner.invoke(app, ["features"])
        assert result.exit_code == 2
