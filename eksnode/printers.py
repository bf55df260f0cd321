"""Output printers that render objects as JSON, YAML or a text table."""

from __future__ import annotations

import abc
import dataclasses
import datetime
import enum
import io
import json
from collections.abc import Mapping
from typing import Any, Callable, TextIO

import yaml

_TAB_WIDTH = 8
_CELL_PADDING = 1


def _format_time(value: datetime.date) -> str:
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def _plain(obj: Any) -> Any:
    """Convert an object into JSON-compatible builtins."""
    if obj is None or isinstance(obj, (str, bool, int, float)):
        return obj
    if isinstance(obj, enum.Enum):
        return _plain(obj.value)
    if isinstance(obj, (datetime.datetime, datetime.date)):
        return _format_time(obj)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _plain(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return _plain(to_dict())
    if isinstance(obj, Mapping):
        return {str(key): _plain(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_plain(item) for item in obj]
    if isinstance(obj, (set, frozenset)):
        return [_plain(item) for item in sorted(obj, key=repr)]
    raise TypeError(f"cannot serialise object of type {type(obj).__name__}")


class OutputPrinter(abc.ABC):
    """Common interface of all output printers."""

    @abc.abstractmethod
    def print_obj(self, obj: Any, writer: TextIO) -> None:
        """Write ``obj`` to ``writer``."""

    def print_obj_with_kind(self, kind: str, obj: Any, writer: TextIO) -> None:
        """Write ``obj`` to ``writer``; ``kind`` names what is printed."""
        self.print_obj(obj, writer)

    def log_obj(self, log: Callable[..., Any], msg_fmt: str, obj: Any) -> None:
        """Render ``obj`` and pass it to ``log`` as the argument of ``msg_fmt``."""
        buffer = io.StringIO()
        self.print_obj(obj, buffer)
        log(msg_fmt, buffer.getvalue())


class JSONPrinter(OutputPrinter):
    """Prints objects as JSON indented by four spaces."""

    def print_obj(self, obj: Any, writer: TextIO) -> None:
        writer.write(json.dumps(_plain(obj), indent=4, ensure_ascii=False))


class YAMLPrinter(OutputPrinter):
    """Prints objects as YAML with sorted keys."""

    def print_obj(self, obj: Any, writer: TextIO) -> None:
        writer.write(
            yaml.safe_dump(
                _plain(obj),
                default_flow_style=False,
                sort_keys=True,
                allow_unicode=True,
            )
        )


class TablePrinter(OutputPrinter):
    """Prints a sequence of objects as a tab-aligned table."""

    def __init__(self) -> None:
        self._columns: list[tuple[str, Callable[[Any], Any]]] = []

    def add_column(self, name: str, getter: Callable[[Any], Any]) -> None:
        """Add a column whose cells are ``getter(item)``."""
        self._columns.append((name, getter))

    def print_obj(self, obj: Any, writer: TextIO) -> None:
        self.print_obj_with_kind("objects", obj, writer)

    def print_obj_with_kind(self, kind: str, obj: Any, writer: TextIO) -> None:
        if not isinstance(obj, (list, tuple)):
            raise TypeError(
                f"table printer expects a slice but the kind was {type(obj).__name__}"
            )
        if not obj:
            writer.write(f"No {kind.lower()} found\n")
            return
        rows = [[name for name, _ in self._columns]]
        rows.extend(
            ["" if (value := getter(item)) is None else str(value) for _, getter in self._columns]
            for item in obj
        )
        writer.write(self._render(rows))

    @staticmethod
    def _render(rows: list[list[str]]) -> str:
        if not rows or not rows[0]:
            return "\n" * len(rows)
        widths = [
            max(len(row[col]) for row in rows) + _CELL_PADDING
            for col in range(len(rows[0]) - 1)
        ]
        widths = [-(-w // _TAB_WIDTH) * _TAB_WIDTH for w in widths]
        lines = []
        for row in rows:
            parts = []
            for cell, width in zip(row, widths):
                tabs = -(-(width - len(cell)) // _TAB_WIDTH)
                parts.append(cell + "\t" * tabs)
            parts.append(row[-1])
            lines.append("".join(parts) + "\n")
        return "".join(lines)


def new_printer(printer_type: str) -> OutputPrinter:
    """Return a printer for ``"yaml"``, ``"json"`` or ``"table"``."""
    printers: dict[str, type[OutputPrinter]] = {
        "yaml": YAMLPrinter,
        "json": JSONPrinter,
        "table": TablePrinter,
    }
    try:
        return printers[printer_type]()
    except KeyError:
        raise ValueError(f"unknown output printer type: {printer_type}") from None