"""arrkit CLI — JSON in, core helpers, JSON out.

Invariants:
    - The shell owns IO, settings and logging; core functions receive explicit arguments
    - FILE "-" reads stdin; JSON arrays become position-keyed maps
    - Exit codes: 0 ok, 1 compare found a difference, 2 invalid input

Design Decisions:
    - typer over argparse: typed options, CliRunner for tests
    - Settings supply defaults only when an option is omitted on the command line
"""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Any, Optional

import typer

from arrkit.config import get_settings
from arrkit.core.compare import deep_equal
from arrkit.core.errors import ArrkitError
from arrkit.core.fingerprint import structural_hash
from arrkit.core.ordered_map import as_mapping
from arrkit.core.segment import partition, split_at
from arrkit.core.top_k import top_k_max, top_k_min
from arrkit.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(help="Top-K selection, structural fingerprints and deep compare over JSON.")

EXIT_DIFFERENT = 1
EXIT_INVALID = 2


@app.callback()
def init() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)


# ─── IO helpers ──────────────────────────────────────────────────

def _load(source: str) -> Any:
    try:
        text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
        return json.loads(text)
    except (OSError, json.JSONDecodeError) as exc:
        _fail(f"cannot read JSON from {source}: {exc}", "INVALID_INPUT")


def _load_map(source: str) -> Any:
    data = _load(source)
    mapping = as_mapping(data)
    if mapping is None:
        _fail(f"{source}: expected a JSON object or array", "INVALID_INPUT")
    return mapping


def _emit(data: Any) -> None:
    typer.echo(json.dumps(data, ensure_ascii=False))


def _fail(message: str, code: str) -> None:
    logger.error(message, extra={"error_code": code})
    typer.echo(f"error: {message}", err=True)
    raise typer.Exit(EXIT_INVALID)


def _run(command: str, fn, *args, **kwargs) -> Any:
    try:
        return fn(*args, **kwargs)
    except ArrkitError as exc:
        logger.debug("command failed", extra={"command": command})
        _fail(exc.message, exc.code)
    except TypeError as exc:  # incomparable values, unhashable labels
        logger.debug("command failed", extra={"command": command})
        _fail(f"{command}: unsupported values in input: {exc}", "INVALID_INPUT")


# ─── Commands ────────────────────────────────────────────────────

@app.command("fingerprint")
def fingerprint_cmd(
    source: Annotated[str, typer.Argument(help="JSON file, or - for stdin")],
    ordered: Annotated[bool, typer.Option("--ordered", help="Key order matters")] = False,
    algorithm: Annotated[Optional[str], typer.Option(help="hashlib algorithm name")] = None,
) -> None:
    settings = get_settings()
    orderless = settings.hash_orderless and not ordered
    data = _load_map(source)
    digest = _run(
        "fingerprint", structural_hash, data, orderless,
        algorithm=algorithm if algorithm is not None else settings.hash_algorithm,
    )
    typer.echo(digest)


@app.command("top")
def top_cmd(
    source: Annotated[str, typer.Argument(help="JSON file, or - for stdin")],
    count: Annotated[Optional[int], typer.Option("--count", "-k", help="How many to keep")] = None,
    largest: Annotated[bool, typer.Option("--max", help="Keep the largest values")] = False,
) -> None:
    settings = get_settings()
    data = _load_map(source)
    select = top_k_max if largest else top_k_min
    if count is None:
        count = settings.top_k_default_count
    result = _run("top", select, data, count)
    _emit(result)


@app.command("compare")
def compare_cmd(
    left: Annotated[str, typer.Argument(help="First JSON file")],
    right: Annotated[str, typer.Argument(help="Second JSON file")],
    loose: Annotated[bool, typer.Option("--loose", help="Coerce numeric strings")] = False,
) -> None:
    strict = get_settings().compare_strict and not loose
    equal = deep_equal(_load_map(left), _load_map(right), strict)
    typer.echo("equal" if equal else "different")
    if not equal:
        raise typer.Exit(EXIT_DIFFERENT)


@app.command("split")
def split_cmd(
    source: Annotated[str, typer.Argument(help="JSON file, or - for stdin")],
    first: Annotated[Optional[int], typer.Option(help="Size of the first part")] = None,
    last: Annotated[Optional[int], typer.Option(help="Size of the second part")] = None,
    key: Annotated[Optional[str], typer.Option(help="Key that starts the second part")] = None,
) -> None:
    data = _load_map(source)
    conditions: dict[str, Any] = {}
    if first is not None:
        conditions["first"] = first
    if last is not None:
        conditions["last"] = last
    if key is not None:
        conditions["key"] = _coerce_key(data, key)
    head, tail = _run("split", split_at, data, **conditions)
    _emit([head, tail])


@app.command("partition")
def partition_cmd(
    source: Annotated[str, typer.Argument(help="JSON file, or - for stdin")],
    field: Annotated[str, typer.Option(help="Row field to group by")],
) -> None:
    data = _load_map(source)
    groups = _run("partition", partition, data, field)
    _emit({str(label): rows for label, rows in groups.items()})


def _coerce_key(data: Any, key: str) -> Any:
    """JSON arrays are keyed by int position; match the CLI string to that."""
    if key not in data and key.lstrip("-").isdigit() and int(key) in data:
        return int(key)
    return key


def main() -> None:
    app()


if __name__ == "__main__":
    main()
