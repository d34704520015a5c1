"""Tests for the 'audit' CLI command."""

import json
import logging

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


@pytest.fixture
def write_artifacts(tmp_path):
    """Write an artifacts payload to a temp file and return its path."""
    def _write(final_url, anchors):
        path = tmp_path / "artifacts.json"
        path.write_text(
            json.dumps({"URL": {"finalUrl": final_url}, "AnchorElements": anchors}),
            encoding="utf-8",
        )
        return path
    return _write


def test_audit_pass(write_artifacts):
    path = write_artifacts(
        "https://a.com/",
        [{"href": "https://b.com/", "target": "_blank", "rel": "noopener"}],
    )
    result = runner.invoke(app, ["audit", str(path)])
    assert result.exit_code == 0
    assert "PASS" in result.stdout


def test_audit_fail_lists_anchors(write_artifacts):
    path = write_artifacts(
        "https://a.com/",
        [
            {"href": "https://b.com/x", "target": "_blank", "rel": "nofollow"},
            {"target": "_blank", "outerHTML": "<a target=_blank>"},
        ],
    )
    result = runner.invoke(app, ["audit", str(path)])
    assert result.exit_code == 1
    assert "FAIL" in result.stdout
    assert "https://b.com/x | _blank | nofollow" in result.stdout
    assert "Unknown" in result.stdout
    assert "<a target=_blank>" in result.stdout


def test_audit_json_output(write_artifacts):
    path = write_artifacts(
        "https://a.com/",
        [{"href": "https://b.com/x", "target": "_blank"}],
    )
    result = runner.invoke(app, ["audit", str(path), "--json"])
    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["score"] == 0
    assert data["details"]["items"][0]["href"] == "https://b.com/x"


def test_audit_invalid_page_url(write_artifacts):
    path = write_artifacts("not a url", [])
    result = runner.invoke(app, ["audit", str(path)])
    assert result.exit_code == 2


def test_audit_missing_file(tmp_path):
    result = runner.invoke(app, ["audit", str(tmp_path / "missing.json")])
    assert result.exit_code == 2


def test_describe():
    result = runner.invoke(app, ["describe"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["id"] == "external-anchors-use-rel-noopener"


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    saved = root.level
    yield root
    root.setLevel(saved)


def test_invalid_log_level_option(write_artifacts):
    path = write_artifacts("https://a.com/", [])
    result = runner.invoke(app, ["--log-level", "verbose", "audit", str(path)])
    assert result.exit_code == 2


def test_invalid_log_level_setting(write_artifacts, monkeypatch):
    monkeypatch.setattr("auditor.config.settings.log_level", "bogus")
    path = write_artifacts("https://a.com/", [])
    result = runner.invoke(app, ["audit", str(path)])
    assert result.exit_code == 2


def test_log_level_option_applies(write_artifacts, restore_root_level):
    restore_root_level.setLevel(logging.WARNING)
    path = write_artifacts("https://a.com/", [])
    result = runner.invoke(app, ["--log-level", "DEBUG", "audit", str(path)])
    assert result.exit_code == 0
    assert restore_root_level.level == logging.DEBUG
