"""Glue between the clock, the calendar math and a display sink."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from display import DisplaySink
from hijri_logic import HijriDate, fixed_to_hijri, gregorian_to_fixed
from month_names import HIJRI_MONTHS, gregorian_month_name, weekday_name
from settings import DisplayConfig

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


def convert_to_hijri(greg: date, correction: int = 0) -> HijriDate:
    """Convert a Gregorian date, shifted by ``correction`` days, to Hijri."""
    fixed = gregorian_to_fixed(greg.year, greg.month, greg.day, correction)
    return fixed_to_hijri(fixed)


def convert_today_to_hijri(config: DisplayConfig, clock: Clock = date.today) -> HijriDate:
    today = clock()
    hijri = convert_to_hijri(today, config.correction)
    logger.debug("%s (correction %+d) -> %d-%02d-%02d AH",
                 today.isoformat(), config.correction, hijri.year, hijri.month, hijri.day)
    return hijri


def _joiner(separator: str) -> str:
    # A bare separator such as "-" gets a space on each side
    if separator and separator == separator.strip():
        return f" {separator} "
    return separator


def display_line(greg: date, hijri: HijriDate, config: DisplayConfig) -> str:
    """Compose ``[weekday] <sep> <hijri date> [<sep> <gregorian date>]``."""
    parts: list[str] = []
    if config.show_week_day:
        parts.append(weekday_name(greg.weekday(), config.week_day_lang))
    parts.append(hijri.format(HIJRI_MONTHS, config.hijri_lang))
    if config.show_greg_date:
        month = gregorian_month_name(greg.month, config.greg_lang)
        parts.append(f"{greg.day} {month} {greg.year}")
    return _joiner(config.separator).join(parts)


def write_fields(hijri: HijriDate, config: DisplayConfig, sink: DisplaySink) -> None:
    sink.set_day(hijri.day)
    sink.set_month(hijri.month_name(config.hijri_lang))
    sink.set_year(hijri.year)


def render(config: DisplayConfig, sink: DisplaySink, clock: Clock = date.today) -> HijriDate:
    """Convert today's date and write it into ``sink``.

    Sinks that also accept a composed line (``set_line``) get the weekday and
    Gregorian date as configured.
    """
    today = clock()
    hijri = convert_today_to_hijri(config, lambda: today)
    write_fields(hijri, config, sink)
    set_line = getattr(sink, "set_line", None)
    if set_line is not None:
        set_line(display_line(today, hijri, config))
    return hijri
