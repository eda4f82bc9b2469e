"""Display sinks: where the converted date ends up.

A sink has one method per displayed field.  The desktop window hands its
labels to a ``LabelSink``; the command-line mode and the tests use a
``DictSink``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class DisplaySink(Protocol):
    def set_day(self, day: int) -> None: ...

    def set_month(self, name: str) -> None: ...

    def set_year(self, year: int) -> None: ...


class LabelSink:
    """Writes into text widgets (anything with ``configure(text=...)``).

    Widgets are keyed by ``"day"``, ``"month"``, ``"year"`` and ``"line"``.
    A missing widget is not an error: the write is skipped.
    """

    __slots__ = ("_widgets",)

    def __init__(self, widgets: Mapping[str, Any]) -> None:
        self._widgets = dict(widgets)

    def _write(self, key: str, value: object) -> None:
        widget = self._widgets.get(key)
        if widget is None:
            logger.debug("No widget for %r, skipping", key)
            return
        widget.configure(text=str(value))

    def set_day(self, day: int) -> None:
        self._write("day", day)

    def set_month(self, name: str) -> None:
        self._write("month", name)

    def set_year(self, year: int) -> None:
        self._write("year", year)

    def set_line(self, text: str) -> None:
        self._write("line", text)


class DictSink:
    """Collects the written fields in ``values``."""

    def __init__(self) -> None:
        self.values: dict[str, object] = {}

    def set_day(self, day: int) -> None:
        self.values["day"] = day

    def set_month(self, name: str) -> None:
        self.values["month"] = name

    def set_year(self, year: int) -> None:
        self.values["year"] = year

    def set_line(self, text: str) -> None:
        self.values["line"] = text
