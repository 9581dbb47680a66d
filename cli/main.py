"""Streamtape refresher CLI.

Usage:
    python cli/main.py --help

Commands:
    serve   → start the web page with the "Start Refreshing" button
    run     → one refresh pass in the terminal
    links   → show which links a pass would request
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from refresher.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
from typing import Optional

import typer

from refresher.config import settings
from refresher.refresh import load_links, run_refresh

app = typer.Typer(
    name="refresher",
    help="Keep Streamtape videos alive by visiting every link in links.txt.",
    no_args_is_help=True,
)


def _links_path(links: Optional[Path]) -> Path:
    return links if links is not None else settings.links_file


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Interface to bind (default: HOST or 0.0.0.0)."),
    port: Optional[int] = typer.Option(None, help="Port to bind (default: PORT or 8000)."),
    links: Optional[Path] = typer.Option(None, "--links", help="Links file (default: LINKS_FILE or ./links.txt)."),
) -> None:
    """Serve the refresh page until interrupted."""
    from refresher.api.app import create_app
    from refresher.server import RefreshServer

    server = RefreshServer(app=create_app(links_path=links), host=host, port=port)
    typer.echo(f"[serve] Links file: {_links_path(links)}")
    server.run()


@app.command("run")
def run(
    links: Optional[Path] = typer.Option(None, "--links", help="Links file (default: LINKS_FILE or ./links.txt)."),
) -> None:
    """Run one refresh pass and print the log."""
    result = asyncio.run(run_refresh(_links_path(links)))
    typer.echo("")
    typer.echo(result.log)


@app.command("links")
def list_links(
    links: Optional[Path] = typer.Option(None, "--links", help="Links file (default: LINKS_FILE or ./links.txt)."),
) -> None:
    """Print the valid links, in the order they would be refreshed."""
    found = load_links(_links_path(links))
    if not found:
        typer.echo("[links] No valid links found.")
        return
    for link in found:
        typer.echo(f"  {link}")
    typer.echo(f"[links] {len(found)} link(s).")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
