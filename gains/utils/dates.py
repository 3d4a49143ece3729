"""Shared date formatting rules for workout and log timestamps.

Two rules cover every screen: a date+time rule for workout entries and a
date-only rule for daily logs. Both are frozen values built once at import
and handed out by accessor, so every caller shares the same instance::

    from gains.utils.dates import date_time_rule, date_only_rule

    date_time_rule().format(workout.started_at)  # 'Oct 19, 2026, 3:30 PM'
    date_only_rule().format(log.day)             # 'Oct 19, 2026'

Rendering goes through Babel's CLDR data, so verbosity names follow CLDR
(``short``, ``medium``, ``long``, ``full``) and the output uses the locale's
own separators, month names and 12/24-hour convention.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Literal

from babel.dates import format_date, format_time, get_datetime_format

from gains.settings import resolve_locale

Verbosity = Literal["short", "medium", "long", "full"]


def _combine(pattern: str, date_text: str, time_text: str) -> str:
    """Fill a CLDR date-time pattern such as ``"{1}, {0}"`` or ``"{1} 'at' {0}"``.

    ``{1}`` is the date and ``{0}`` the time. Single quotes delimit literal
    text and ``''`` is an escaped apostrophe, quoted or not.
    """
    out = []
    quoted = False
    i = 0
    while i < len(pattern):
        if pattern.startswith("''", i):
            out.append("'")
            i += 2
        elif pattern[i] == "'":
            quoted = not quoted
            i += 1
        elif not quoted and pattern.startswith("{0}", i):
            out.append(time_text)
            i += 3
        elif not quoted and pattern.startswith("{1}", i):
            out.append(date_text)
            i += 3
        else:
            out.append(pattern[i])
            i += 1
    return "".join(out)


@dataclass(frozen=True)
class DateRule:
    """Which date and time verbosity to render, and in which locale.

    ``time_style=None`` renders the calendar date only. ``locale=None``
    resolves the locale default each time :meth:`format` runs.
    """

    date_style: Verbosity = "medium"
    time_style: Verbosity | None = None
    locale: str | None = None

    @property
    def includes_time(self) -> bool:
        return self.time_style is not None

    def format(self, value: datetime | date) -> str:
        """Render *value*. A plain ``date`` given to a time rule renders at midnight."""
        locale = resolve_locale(self.locale)
        if self.time_style is None:
            return format_date(value, format=self.date_style, locale=locale)

        if not isinstance(value, datetime):
            value = datetime.combine(value, time.min)

        return _combine(
            get_datetime_format(self.date_style, locale=locale),
            format_date(value, format=self.date_style, locale=locale),
            format_time(value, format=self.time_style, locale=locale),
        )

    def with_locale(self, locale: str | None) -> DateRule:
        """Return a copy pinned to *locale*; the shared rules stay untouched."""
        return dataclasses.replace(self, locale=locale)


DATE_TIME = DateRule(date_style="medium", time_style="short")
DATE_ONLY = DateRule(date_style="medium")


def date_time_rule() -> DateRule:
    """Medium date plus short time of day. Always the same instance."""
    return DATE_TIME


def date_only_rule() -> DateRule:
    """Medium date, no time of day. Always the same instance."""
    return DATE_ONLY
