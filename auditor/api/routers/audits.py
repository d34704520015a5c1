"""Audit endpoints.

Routes
------
GET  /audits/external-anchors/meta   - audit descriptor
POST /audits/external-anchors        - run the audit over posted artifacts
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from auditor.artifacts import Artifacts
from auditor.audits import META, InvalidUrlError, audit
from auditor.config import settings

router = APIRouter()


@router.get("/external-anchors/meta")
def external_anchors_meta() -> dict[str, Any]:
    """Return the audit's id, titles, description and required artifacts."""
    return META.to_dict()


@router.post("/external-anchors")
def run_external_anchors(artifacts: Artifacts) -> dict[str, Any]:
    """Audit the posted ``URL`` and ``AnchorElements`` artifacts.

    The body uses the gathering phase's key names, e.g.
    ``{"URL": {"finalUrl": "https://a.com/"}, "AnchorElements": [...]}``.
    """
    if len(artifacts.anchor_elements) > settings.max_anchors:
        raise HTTPException(
            status_code=413,
            detail=(
                f"Too many anchors ({len(artifacts.anchor_elements)}); "
                f"the limit is {settings.max_anchors}."
            ),
        )

    try:
        product = audit(artifacts)
    except InvalidUrlError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return product.to_dict()
