"""Audits package: rule checks over gathered page artifacts."""

from auditor.audits.external_anchors import META, audit, classify_anchors
from auditor.audits.models import AnchorRecord, AnchorSummary, ClassificationResult
from auditor.audits.urls import InvalidUrlError

__all__ = [
    "META",
    "audit",
    "classify_anchors",
    "AnchorRecord",
    "AnchorSummary",
    "ClassificationResult",
    "InvalidUrlError",
]
