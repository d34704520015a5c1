"""Audit: cross-origin ``target=_blank`` links must use ``rel=noopener``.

A page opened with ``target="_blank"`` can reach back through
``window.opener`` and navigate the original tab (tab-napping) unless the
link carries ``rel="noopener"`` or ``rel="noreferrer"``.

Pipeline
--------
The classifier is a stable filter chain; each stage only narrows the
candidate list:

    A  target is ``_blank`` and rel has neither token
    B  destination host differs from the page host (unknown counts as different)
    C  destination is empty, unknown, or an ``http(s)`` URL
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Protocol, Sequence, Tuple

from auditor.audits import strings
from auditor.audits.models import (
    AnchorRecord,
    AnchorSummary,
    AuditMeta,
    AuditProduct,
    ClassificationResult,
    PageContext,
    TableDetails,
    TableHeading,
)
from auditor.audits.urls import InvalidUrlError, url_host

logger = logging.getLogger(__name__)

_SAFE_REL_TOKENS = ("noopener", "noreferrer")

META = AuditMeta(
    id="external-anchors-use-rel-noopener",
    title=strings.TITLE,
    failure_title=strings.FAILURE_TITLE,
    description=strings.DESCRIPTION,
    required_artifacts=("URL", "AnchorElements"),
)

HEADINGS: Tuple[TableHeading, ...] = (
    TableHeading(key="href", item_type="url", text=strings.COLUMN_URL),
    TableHeading(key="target", item_type="text", text=strings.COLUMN_TARGET),
    TableHeading(key="rel", item_type="text", text=strings.COLUMN_REL),
)


class AnchorArtifacts(Protocol):
    """The artifacts this audit needs from the gathering phase."""

    @property
    def page(self) -> PageContext: ...

    @property
    def anchors(self) -> Sequence[AnchorRecord]: ...


# ---------------------------------------------------------------------------
# Filter stages
# ---------------------------------------------------------------------------

def _opens_unprotected_tab(anchor: AnchorRecord) -> bool:
    rel = anchor.rel or ""
    return anchor.target == "_blank" and not any(
        token in rel for token in _SAFE_REL_TOKENS
    )


def _has_http_destination(anchor: AnchorRecord) -> bool:
    return not anchor.href or anchor.href.lower().startswith("http")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def classify_anchors(page_url: str, anchors: Iterable[AnchorRecord]) -> ClassificationResult:
    """Return the anchors on *page_url* that open other origins unprotected.

    Anchors whose ``href`` cannot be parsed are kept as failing and each
    adds one warning quoting the anchor's HTML, since their destination is
    unknown.

    Raises:
        InvalidUrlError: If *page_url* itself is not an absolute URL.
    """
    page_host = url_host(page_url)
    result = ClassificationResult()

    for anchor in anchors:
        if not _opens_unprotected_tab(anchor):
            continue

        try:
            if url_host(anchor.href) == page_host:
                continue
        except InvalidUrlError:
            logger.debug("Unparsable href %r on %s", anchor.href, page_url)
            result.warnings.append(
                strings.unknown_destination_warning(anchor.outer_html or "")
            )
        else:
            if not _has_http_destination(anchor):
                continue

        result.failing_anchors.append(AnchorSummary.from_record(anchor))

    return result


def make_table_details(items: List[AnchorSummary]) -> TableDetails:
    return TableDetails(headings=list(HEADINGS), items=items)


def audit(artifacts: AnchorArtifacts) -> AuditProduct:
    """Run the audit over *artifacts* and build the report product."""
    result = classify_anchors(artifacts.page.final_url, artifacts.anchors)
    logger.info(
        "%s: %d failing anchor(s), %d warning(s) on %s",
        META.id,
        len(result.failing_anchors),
        len(result.warnings),
        artifacts.page.final_url,
    )
    return AuditProduct(
        score=int(result.passed),
        details=make_table_details(result.failing_anchors),
        warnings=result.warnings,
    )
