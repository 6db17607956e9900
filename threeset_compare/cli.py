from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .comparator import get_comparator
from .dedupe import deduplicate_titles, rank_titles

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


def _read_titles(path: Path) -> List[str]:
	try:
		text = path.read_text(encoding="utf-8")
	except OSError as e:
		raise typer.BadParameter(f"cannot read {path}: {e}") from e
	return [line.strip() for line in text.splitlines() if line.strip()]


@app.command()
def version() -> None:
	"""Show version."""
	console.print(f"ThreeSet Compare v{__version__}")


@app.command()
def compare(
	text_a: str = typer.Argument(..., help="First title"),
	text_b: str = typer.Argument(..., help="Second title"),
	as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
	"""Print the similarity score of two titles."""
	score = get_comparator().similarity(text_a, text_b)
	if as_json:
		console.print_json(data={"text_a": text_a, "text_b": text_b, "score": score})
	else:
		console.print(f"{score:.4f}")


@app.command()
def dedupe(
	file: Path = typer.Argument(..., help="Text file with one title per line"),
	threshold: Optional[float] = typer.Option(None, "--threshold", min=0.0, max=1.0, help="Score at which two titles are duplicates"),
	out: Optional[Path] = typer.Option(None, "--out", help="Path to write the kept titles"),
) -> None:
	"""Drop near-duplicate titles, keeping the first occurrence."""
	titles = _read_titles(file)
	kept = deduplicate_titles(titles, threshold=threshold)
	for t in kept:
		console.print(t, markup=False)
	console.print(f"\nKept {len(kept)} of {len(titles)} titles", style="dim")
	if out:
		out.write_text("\n".join(kept) + "\n", encoding="utf-8")
		console.print(f"Saved titles to {out}")


@app.command()
def rank(
	query: str = typer.Argument(..., help="Title to match against"),
	file: Path = typer.Argument(..., help="Text file with one title per line"),
	top_k: Optional[int] = typer.Option(None, "--top-k", min=1, help="Number of titles to show"),
) -> None:
	"""Rank titles by similarity to a query."""
	results = rank_titles(query, _read_titles(file), top_k=top_k)
	table = Table("Score", "Line", "Title")
	for r in results:
		table.add_row(f"{r.score:.4f}", str(r.index + 1), r.title)
	console.print(table)


@app.command()
def serve(host: str = "0.0.0.0", port: int = 8000, reload: bool = False) -> None:
	"""Start the API server."""
	import uvicorn

	uvicorn.run("threeset_compare.api:app", host=host, port=port, reload=reload, factory=False)


if __name__ == "__main__":
	app()
