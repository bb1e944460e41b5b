"""
Tests for the scan_entity command-line script.

The pipeline is mocked; the tests check argument handling, output and exit codes.
"""

import json
from unittest.mock import MagicMock, patch

from entity_scanner.models import ScanFailure


def _report(payload: dict):
    result = MagicMock()
    result.to_dict.return_value = payload
    return result


def test_scan_urls_preserves_order():
    """Results come back in input order."""
    from scripts.scan_entity import scan_urls

    pipeline = MagicMock()
    pipeline.run.side_effect = lambda url: _report({"companyName": url})

    results = scan_urls(pipeline, ["https://a.com", "https://b.com"])

    assert [r["companyName"] for r in results] == ["https://a.com", "https://b.com"]


@patch("scripts.scan_entity.setup_logging")
@patch("scripts.scan_entity.ScanPipeline")
def test_main_prints_json_and_succeeds(mock_pipeline_cls, mock_setup_logging, capsys):
    """Successful scan prints the payload and exits 0."""
    from scripts.scan_entity import main

    mock_pipeline_cls.return_value.run.return_value = _report(
        {"companyName": "Acme", "status": "ACCURATE"}
    )

    exit_code = main(["https://acme.com", "--indent", "0"])

    assert exit_code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["status"] == "ACCURATE"


@patch("scripts.scan_entity.setup_logging")
@patch("scripts.scan_entity.ScanPipeline")
def test_main_exit_code_on_scan_error(mock_pipeline_cls, mock_setup_logging, capsys):
    """Any failed scan gives exit code 1."""
    from scripts.scan_entity import main

    mock_pipeline_cls.return_value.run.return_value = ScanFailure(
        url="ftp://x.com", error="Invalid URL format. Must start with http:// or https://",
        stage="validate",
    )

    exit_code = main(["ftp://x.com"])

    assert exit_code == 1
    assert "error" in json.loads(capsys.readouterr().out)


@patch("scripts.scan_entity.setup_logging")
@patch("scripts.scan_entity.ScanPipeline")
def test_main_missing_key_is_fatal(mock_pipeline_cls, mock_setup_logging):
    """Missing credential aborts before any scan."""
    from scripts.scan_entity import main

    mock_pipeline_cls.side_effect = ValueError("OPENAI_API_KEY not set")

    assert main(["https://acme.com"]) == 2


def test_console_script_target_exists():
    """The scan-entity entry point resolves to the checked-out script."""
    from entity_scanner.cli.commands import script_path

    assert script_path("scan_entity").is_file()
