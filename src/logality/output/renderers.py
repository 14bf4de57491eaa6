"""
Record renderers.

Turn a finished log record into the text that is written to the sink.

Renderers:
    CompactRenderer: One JSON object per line, the wire format log
        collectors parse. Values JSON cannot encode fall back to ``repr()``
        through structlog's JSON renderer instead of failing the call.
    PrettyRenderer: Multi-line, optionally coloured rendering built with
        rich for local development. A header line carries the level,
        severity, timestamp, source file and message; the remaining fields
        follow as indented JSON. No field of the compact form is dropped.

Example:
    >>> CompactRenderer().render({"level": "info", "severity": 6})
    '{"level":"info","severity":6}\\n'
"""

import io
from typing import Any, Dict

import structlog
from rich.console import Console
from rich.json import JSON
from rich.text import Text

_HEADER_FIELDS = ("level", "severity", "dt", "message")

LEVEL_STYLES: Dict[str, str] = {
    "emergency": "bold white on red",
    "alert": "bold red",
    "critical": "bold red",
    "error": "red",
    "warn": "yellow",
    "notice": "cyan",
    "info": "green",
    "debug": "blue",
}


class CompactRenderer:
    """Single-line JSON, terminated by exactly one newline."""

    def __init__(self) -> None:
        self._json = structlog.processors.JSONRenderer(
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def render(self, record: Dict[str, Any]) -> str:
        return self._json(None, "", record) + "\n"


class PrettyRenderer:
    """Human-oriented rendering of a record using rich."""

    def __init__(self, colors: bool = True, width: int = 120) -> None:
        self.colors = colors
        self.width = width

    def _header(self, record: Dict[str, Any]) -> Text:
        level = str(record.get("level", ""))
        source = record.get("context", {}).get("source", {})
        file_name = source.get("file_name", "") if isinstance(source, dict) else ""

        header = Text()
        header.append(str(record.get("dt", "")), style="dim")
        header.append(" ")
        header.append(level.upper(), style=LEVEL_STYLES.get(level, ""))
        header.append(f" {record.get('severity', '')} ")
        header.append(str(file_name), style="cyan")
        header.append(" - ")
        header.append(str(record.get("message", "")), style="bold")
        return header

    def render(self, record: Dict[str, Any]) -> str:
        buffer = io.StringIO()
        console = Console(
            file=buffer,
            width=self.width,
            force_terminal=self.colors,
            no_color=not self.colors,
            highlight=False,
            legacy_windows=False,
        )

        console.print(self._header(record), soft_wrap=True)
        body = {
            key: value for key, value in record.items() if key not in _HEADER_FIELDS
        }
        console.print(
            JSON.from_data(body, indent=2, default=repr, ensure_ascii=False),
            soft_wrap=True,
        )
        return buffer.getvalue()
