"""Tests for artifact payload loading and validation."""

from __future__ import annotations

import json

import pytest

from auditor.artifacts import ArtifactError, Artifacts, load_artifacts
from auditor.audits.models import AnchorRecord


_PAYLOAD = {
    "URL": {"requestedUrl": "http://a.com", "finalUrl": "https://a.com/"},
    "AnchorElements": [
        {
            "href": "https://b.com/",
            "target": "_blank",
            "rel": "",
            "outerHTML": '<a href="https://b.com/" target="_blank">',
            "text": "ignored",
        },
        {"target": "_blank", "rel": None},
    ],
}


class TestArtifactsModel:
    def test_parses_host_key_names(self) -> None:
        artifacts = Artifacts.model_validate(_PAYLOAD)
        assert artifacts.page.final_url == "https://a.com/"
        assert artifacts.anchors[0] == AnchorRecord(
            href="https://b.com/",
            target="_blank",
            rel="",
            outer_html='<a href="https://b.com/" target="_blank">',
        )

    def test_missing_attributes_become_none(self) -> None:
        artifacts = Artifacts.model_validate(_PAYLOAD)
        assert artifacts.anchors[1] == AnchorRecord(href=None, target="_blank", rel=None)

    def test_anchor_list_defaults_to_empty(self) -> None:
        artifacts = Artifacts.model_validate({"URL": {"finalUrl": "https://a.com/"}})
        assert artifacts.anchors == []


class TestLoadArtifacts:
    def test_loads_file(self, tmp_path) -> None:
        path = tmp_path / "artifacts.json"
        path.write_text(json.dumps(_PAYLOAD), encoding="utf-8")
        artifacts = load_artifacts(path)
        assert len(artifacts.anchors) == 2

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ArtifactError, match="not found"):
            load_artifacts(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ArtifactError, match="Cannot read"):
            load_artifacts(path)

    def test_missing_url_artifact(self, tmp_path) -> None:
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"AnchorElements": []}), encoding="utf-8")
        with pytest.raises(ArtifactError, match="Invalid artifacts"):
            load_artifacts(path)
