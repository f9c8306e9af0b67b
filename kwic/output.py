"""Rendering and writing of a finished KWIC index."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from rich.table import Table

from kwic.engine import ContextRecord
from kwic.errors import KwicIOError

logger = logging.getLogger(__name__)


def render_text(records: list[ContextRecord]) -> str:
    """One `keyword: context` line per record, newline-terminated."""
    return "".join(f"{r.keyword}: {r.context}\n" for r in records)


def render_json(records: list[ContextRecord]) -> str:
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False, indent=2) + "\n"


def render_table(records: list[ContextRecord], title: str | None = None) -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Keyword", style="cyan")
    table.add_column("Context")
    table.add_column("Line", style="dim", justify="right")

    for i, r in enumerate(records, 1):
        table.add_row(str(i), r.keyword, r.context, str(r.line_no + 1))
    return table


RENDERERS = {"text": render_text, "json": render_json}


def write_output(rendered: str, output_path: str | Path) -> None:
    path = Path(output_path)
    try:
        path.write_text(rendered, encoding="utf-8")
    except OSError as e:
        raise KwicIOError(str(path), e) from e
    logger.debug("Wrote %d bytes to %s", len(rendered.encode("utf-8")), path)
