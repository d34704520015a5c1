"""Plain-text rendering of audit products for the terminal."""

from __future__ import annotations

from auditor.audits.models import AuditMeta, AuditProduct


def render_product(meta: AuditMeta, product: AuditProduct) -> str:
    """Return a human-readable summary of *product*."""
    lines = []
    if product.score:
        lines.append(f"✅ PASS  {meta.title}")
    else:
        lines.append(f"❌ FAIL  {meta.failure_title}")
        headings = " | ".join(h.text for h in product.details.headings)
        lines.append(f"   {headings}")
        for item in product.details.items:
            lines.append(f" - {item.href} | {item.target or '-'} | {item.rel or '-'}")

    for warning in product.warnings:
        lines.append(f"⚠️  {warning}")

    return "\n".join(lines)
