# urlcanon — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import List, Optional

import typer
from rich import print
from rich.console import Console
from rich.markup import escape as escape_markup

from .config import Settings
from .core.canonical import canonicalize, canonicalize_full_escape
from .core.components import get_hostname, get_hostname_keep_www, get_registered_domain
from .core.normalize import normalize
from .core.query import iter_key_value_pairs
from .core.resolve import make_absolute
from .logging_config import configure_logging
from .utils.io import append_jsonl, read_lines

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

logger = logging.getLogger(__name__)


def _setup(log_level: Optional[str]) -> Settings:
	cfg = Settings()
	configure_logging(level=log_level or cfg.log_level, log_dir=cfg.log_dir, library_level=cfg.library_log_level)
	return cfg


def _emit(results, label: str) -> None:
	"""Print each (input, output) pair; exit 1 if any output is None."""
	failed = 0
	for src, out in results:
		if out is None:
			failed += 1
			err_console.print(f"[red]Cannot {label}:[/red] {escape_markup(src)}")
		else:
			console.print(out, markup=False)
	if failed:
		raise typer.Exit(code=1)


@app.command("canonicalize")
def canonicalize_cmd(
	urls: List[str] = typer.Argument(..., help="URL(s) to canonicalize"),
	full_escape: bool = typer.Option(False, "--full-escape", help="Escape reserved characters too"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Print the Safe Browsing canonical form of each URL."""
	_setup(log_level)
	fn = canonicalize_full_escape if full_escape else canonicalize
	_emit(((u, fn(u)) for u in urls), "canonicalize")


@app.command("normalize")
def normalize_cmd(
	urls: List[str] = typer.Argument(..., help="URL(s) to normalize"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Print the normalized (unescaped) form of each URL."""
	_setup(log_level)
	_emit(((u, normalize(u)) for u in urls), "normalize")


@app.command("absolute")
def absolute_cmd(
	parent: str = typer.Argument(..., help="Absolute parent URL"),
	url: str = typer.Argument(..., help="Absolute or relative URL"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Resolve URL against PARENT."""
	_setup(log_level)
	_emit([(url, make_absolute(parent, url))], "resolve")


@app.command("hostname")
def hostname_cmd(
	urls: List[str] = typer.Argument(..., help="URL(s)"),
	keep_www: bool = typer.Option(False, "--keep-www", help="Keep a leading 'www.'"),
	registered: bool = typer.Option(False, "--registered", help="Print the registered domain (eTLD+1)"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Print the hostname of each URL."""
	_setup(log_level)
	if registered:
		fn = get_registered_domain
	else:
		fn = get_hostname_keep_www if keep_www else get_hostname
	_emit(((u, fn(u)) for u in urls), "extract hostname from")


@app.command("query")
def query_cmd(
	text: str = typer.Argument(..., help="key=value text, e.g. a query string"),
	separators: Optional[str] = typer.Option(None, help="Pair separators (overrides env)"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Split TEXT into key/value pairs, one per line."""
	cfg = _setup(log_level)
	for key, value in iter_key_value_pairs(text, separators or cfg.query_separators):
		console.print(key if value is None else f"{key}={value}", markup=False)


@app.command("batch")
def batch_cmd(
	input_path: str = typer.Argument(..., help="File with one URL per line"),
	output_path: str = typer.Argument(..., help="JSONL file to append results to"),
	full_escape: bool = typer.Option(False, "--full-escape", help="Escape reserved characters too"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Canonicalize every URL of INPUT_PATH into OUTPUT_PATH (JSONL)."""
	_setup(log_level)
	fn = canonicalize_full_escape if full_escape else canonicalize
	total = failed = 0
	for line in read_lines(input_path):
		total += 1
		canonical = fn(line)
		if canonical is None:
			failed += 1
			logger.warning("Cannot canonicalize %r", line)
		append_jsonl(output_path, {"url": line, "canonical": canonical, "hostname": get_hostname(line)})
	print({"urls": total, "failed": failed, "output": output_path})


@app.command("print-config")
def print_config():
	"""Print effective configuration from environment."""
	cfg = Settings()
	print(cfg.model_dump())


def main():
	app()


if __name__ == "__main__":
	main()
