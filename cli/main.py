"""Anchor Audit CLI - entry-point for running audits over gathered artifacts.

Usage:
    python cli/main.py --help
    python cli/main.py audit artifacts.json [--json]

Exit codes:
    0  audit passed
    1  audit failed (unsafe anchors found)
    2  invalid input
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from auditor.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from auditor.artifacts import ArtifactError, load_artifacts
from auditor.audits import META, InvalidUrlError, audit
from auditor.config import configure_logging

from cli.rendering import render_product

app = typer.Typer(
    name="anchor-audit",
    help="Check gathered page artifacts for unsafe cross-origin links.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (DEBUG/INFO/WARNING/ERROR)."
    ),
) -> None:
    """Configure logging before any command runs."""
    try:
        configure_logging(log_level)
    except ValueError as e:
        typer.echo(f"❌ Configuration error: {e}", err=True)
        raise typer.Exit(code=2)


@app.command("audit")
def audit_cmd(
    path: Path = typer.Argument(..., help="Artifacts JSON file (URL + AnchorElements)."),
    as_json: bool = typer.Option(False, "--json", help="Print the audit product as JSON."),
) -> None:
    """Run the external-anchors audit over an artifacts file."""
    try:
        artifacts = load_artifacts(path)
        product = audit(artifacts)
    except (ArtifactError, InvalidUrlError) as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(code=2)

    if as_json:
        typer.echo(json.dumps(product.to_dict(), indent=2))
    else:
        typer.echo(render_product(META, product))

    raise typer.Exit(code=0 if product.score else 1)


@app.command("describe")
def describe() -> None:
    """Print the audit descriptor."""
    typer.echo(json.dumps(META.to_dict(), indent=2))


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Host to bind."),
    port: int = typer.Option(8000, help="Port to bind."),
) -> None:
    """Serve the audit HTTP API with uvicorn."""
    import uvicorn

    typer.echo(f"[serve] Anchor Audit API on http://{host}:{port}")
    uvicorn.run("auditor.api.app:app", host=host, port=port)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
