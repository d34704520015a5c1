"""Dataclass models for the audit pipeline.

These are plain Python objects.  The artifact loader and the HTTP layer
convert to and from these types; the audits themselves only see them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class AnchorRecord:
    """One ``<a>`` element as collected from the audited page.

    ``None`` means the attribute was absent.
    """

    href: Optional[str] = None
    target: Optional[str] = None
    rel: Optional[str] = None
    outer_html: Optional[str] = None


@dataclass(frozen=True)
class PageContext:
    """The audited page, after redirects."""

    final_url: str


@dataclass(frozen=True)
class AnchorSummary:
    """A failing anchor, with every field defaulted to a printable string."""

    href: str
    target: str
    rel: str
    outer_html: str

    @classmethod
    def from_record(cls, anchor: AnchorRecord) -> AnchorSummary:
        return cls(
            href=anchor.href or "Unknown",
            target=anchor.target or "",
            rel=anchor.rel or "",
            outer_html=anchor.outer_html or "",
        )

    def to_dict(self) -> dict[str, str]:
        """Serialise with the camelCase key the report layer expects."""
        return {
            "href": self.href,
            "target": self.target,
            "rel": self.rel,
            "outerHTML": self.outer_html,
        }


@dataclass
class ClassificationResult:
    failing_anchors: List[AnchorSummary] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failing_anchors


@dataclass(frozen=True)
class TableHeading:
    key: str
    item_type: str
    text: str

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "itemType": self.item_type, "text": self.text}


@dataclass
class TableDetails:
    """Tabular details handed to the report renderer."""

    headings: List[TableHeading]
    items: List[AnchorSummary]
    type: str = "table"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "headings": [h.to_dict() for h in self.headings],
            "items": [item.to_dict() for item in self.items],
        }


@dataclass
class AuditProduct:
    """What a single audit run produces."""

    score: int
    details: TableDetails
    warnings: List[str] = field(default_factory=list)

    @property
    def extended_info(self) -> dict[str, Any]:
        return {"value": [item.to_dict() for item in self.details.items]}

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "extendedInfo": self.extended_info,
            "details": self.details.to_dict(),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class AuditMeta:
    """Static descriptor identifying an audit to the host framework."""

    id: str
    title: str
    failure_title: str
    description: str
    required_artifacts: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "failureTitle": self.failure_title,
            "description": self.description,
            "requiredArtifacts": list(self.required_artifacts),
        }
