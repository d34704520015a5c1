"""English user-facing strings for the external-anchors audit."""

from __future__ import annotations

TITLE = "Links to cross-origin destinations are safe"
FAILURE_TITLE = "Links to cross-origin destinations are unsafe"
DESCRIPTION = (
    'Add `rel="noopener"` or `rel="noreferrer"` to any external links to improve '
    "performance and prevent security vulnerabilities. "
    "[Learn more](https://developers.google.com/web/tools/lighthouse/audits/noopener)."
)

# {anchor_html} is the anchor's outerHTML snippet.
WARNING_UNKNOWN_DESTINATION = (
    "Unable to determine the destination for anchor ({anchor_html}). "
    "If not used as a hyperlink, consider removing target=_blank."
)

COLUMN_URL = "URL"
COLUMN_TARGET = "Target"
COLUMN_REL = "Rel"


def unknown_destination_warning(anchor_html: str) -> str:
    return WARNING_UNKNOWN_DESTINATION.format(anchor_html=anchor_html)
