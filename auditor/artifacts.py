"""Artifact payload models.

The gathering phase emits artifacts as JSON keyed the way the browser side
names them (``URL.finalUrl``, ``AnchorElements[].outerHTML``).  These
pydantic models validate that payload and hand the audits plain
dataclasses.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from auditor.audits.models import AnchorRecord, PageContext


class ArtifactError(Exception):
    """Raised when an artifacts file cannot be read or validated."""


class UrlArtifact(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    final_url: str = Field(alias="finalUrl")


class AnchorElement(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    href: Optional[str] = None
    target: Optional[str] = None
    rel: Optional[str] = None
    outer_html: Optional[str] = Field(default=None, alias="outerHTML")

    def to_record(self) -> AnchorRecord:
        return AnchorRecord(
            href=self.href,
            target=self.target,
            rel=self.rel,
            outer_html=self.outer_html,
        )


class Artifacts(BaseModel):
    """The subset of gathered artifacts the anchor audit requires."""

    model_config = ConfigDict(populate_by_name=True)

    url: UrlArtifact = Field(alias="URL")
    anchor_elements: List[AnchorElement] = Field(
        default_factory=list, alias="AnchorElements"
    )

    @property
    def page(self) -> PageContext:
        return PageContext(final_url=self.url.final_url)

    @property
    def anchors(self) -> List[AnchorRecord]:
        return [element.to_record() for element in self.anchor_elements]


def load_artifacts(path: str | Path) -> Artifacts:
    """Read and validate an artifacts JSON file.

    Raises:
        ArtifactError: If the file is missing, is not JSON, or does not
            match the expected shape.
    """
    file_path = Path(path)
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ArtifactError(f"Artifacts file not found: {file_path}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise ArtifactError(f"Cannot read artifacts from {file_path}: {exc}") from exc

    try:
        return Artifacts.model_validate(raw)
    except ValidationError as exc:
        raise ArtifactError(f"Invalid artifacts in {file_path}: {exc}") from exc
