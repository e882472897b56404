# LinkMap — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.markup import escape

from .config import Settings
from .errors import LinkmapError
from .logging_config import configure_logging
from .run import build_sitemaps

app = typer.Typer(add_completion=False)
logger = logging.getLogger(__name__)


@app.command()
def build(
	file_path: Optional[str] = typer.Option(None, "--file-path", help="Seed list file, relative to the home directory"),
	max_depth: Optional[int] = typer.Option(None, "--max-depth", min=0, help="Maximum number of link levels to traverse"),
):
	"""Crawl every seed in the seed list and write <host>/<host>.xml sitemaps."""
	try:
		cfg = Settings()
	except ValidationError as e:
		print(f"[bold red]Invalid settings:[/bold red] {escape(str(e))}")
		raise typer.Exit(code=1)
	overrides = {}
	if file_path is not None:
		overrides["file_path"] = file_path
	if max_depth is not None:
		overrides["max_depth"] = max_depth
	if overrides:
		cfg = cfg.model_copy(update=overrides)
	configure_logging(level=cfg.log_level, log_dir=cfg.log_dir)
	try:
		written = build_sitemaps(cfg)
	except LinkmapError as e:
		logger.error("%s", e)
		raise typer.Exit(code=1)
	for path in written:
		print(f"[bold]Done:[/bold] {path}")


def main():
	app()


if __name__ == "__main__":
	main()
