from __future__ import annotations

import logging
import re
from calendar import monthrange
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional, Union

from .eras import SORTED_ERAS, Era, Jidai
from .settings import settings

logger = logging.getLogger("nihonify.calendar")

# Fullwidth digits sit 65,248 code points above their ASCII counterparts.
FULLWIDTH_OFFSET = 65248
SECONDS_PER_DAY = 86_400
DAYS_PER_ERA_YEAR = 365

NENKOU_TEMPLATE = "{name}{year}年{month}月{day}日"

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

FULLWIDTH_DIGIT_PATTERN = str.maketrans({
    "０": "0",
    "１": "1",
    "２": "2",
    "３": "3",
    "４": "4",
    "５": "5",
    "６": "6",
    "７": "7",
    "８": "8",
    "９": "9",
})

KANJI_DIGIT_VALUES = {
    "〇": 0,
    "零": 0,
    "一": 1,
    "二": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
}
KANJI_SMALL_UNITS = {
    "十": 10,
    "百": 100,
    "千": 1000,
}

NUMERAL_CLASS = "0-9０-９〇零一二三四五六七八九十百千元"

DateLike = Union[date, datetime]


class InvalidDateError(ValueError):
    """Raised when a date string cannot be turned into a calendar date."""


def _build_era_regex() -> re.Pattern[str]:
    # Longest names first so that 天平感宝 wins over 天平.
    names = sorted({era.kanji for era in SORTED_ERAS if era.kanji}, key=len, reverse=True)
    alternatives = "|".join(re.escape(name) for name in names)
    return re.compile(
        rf"(?P<era>{alternatives})(?P<year>[{NUMERAL_CLASS}]+)年"
        rf"(?:(?P<month>[{NUMERAL_CLASS}]+)月)?(?:(?P<day>[{NUMERAL_CLASS}]+)日)?"
    )


ERA_REGEX = _build_era_regex()


def to_fullwidth(num: int) -> str:
    """Render ``num`` in decimal using fullwidth digits (``12`` -> ``"１２"``)."""
    if num < 0:
        raise ValueError("only non-negative integers can be rendered")
    return "".join(chr(ord(ch) + FULLWIDTH_OFFSET) for ch in str(num))


def resolve(unix_epoch: int) -> Optional[Era]:
    """Return the era whose span contains ``unix_epoch``.

    A linear scan is used: the table holds a few hundred entries and is
    walked in order, so the first bounded era whose end lies after the
    timestamp is the match. Reaching the open-ended current era means the
    timestamp belongs to it.
    """
    if unix_epoch < SORTED_ERAS[0].started_at:
        logger.debug("Timestamp %s precedes the earliest era", unix_epoch)
        return None

    for era in SORTED_ERAS:
        if era.started_at > unix_epoch:
            continue
        if era.ended_at is None:
            return era
        if unix_epoch < era.ended_at:
            return era

    logger.debug("No era covers timestamp %s", unix_epoch)
    return None


def to_unix_epoch(value: DateLike) -> int:
    """Convert a date or datetime to Unix seconds.

    Plain dates are anchored to midnight UTC and naive datetimes are taken
    to be in UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    anchored = datetime.combine(value, time(0, 0), tzinfo=timezone.utc)
    return int(anchored.timestamp())


def from_datetime(value: DateLike) -> Optional[Era]:
    return resolve(to_unix_epoch(value))


def _utc_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def era_year(era: Era, unix_epoch: int) -> int:
    """Approximate era-relative year using a fixed 365-day year."""
    elapsed_days = (unix_epoch - era.started_at) // SECONDS_PER_DAY
    return 1 + elapsed_days // DAYS_PER_ERA_YEAR


def render_nenkou(value: DateLike) -> Optional[str]:
    """Format ``value`` as a nenkou string such as ``令和３年１１月１２日``.

    Returns ``None`` when no era covers the date or when the matching era
    has no native name.
    """
    unix_epoch = to_unix_epoch(value)
    era = resolve(unix_epoch)
    if era is None or era.kanji is None:
        return None

    calendar_date = _utc_date(value)
    return NENKOU_TEMPLATE.format(
        name=era.kanji,
        year=to_fullwidth(era_year(era, unix_epoch)),
        month=to_fullwidth(calendar_date.month),
        day=to_fullwidth(calendar_date.day),
    )


def _parse_anchor(anchor: str) -> time:
    try:
        return time.fromisoformat(anchor)
    except ValueError as exc:
        raise InvalidDateError(f"Invalid anchor time: {anchor!r}") from exc


def parse_date(value: str, anchor: Optional[str] = None) -> datetime:
    """Parse ``YYYY-MM-DD`` into a UTC datetime at the configured anchor time."""
    cleaned = value.strip()
    if not DATE_PATTERN.match(cleaned):
        raise InvalidDateError(f"Expected a YYYY-MM-DD date, got {value!r}")
    try:
        parsed = date.fromisoformat(cleaned)
    except ValueError as exc:
        raise InvalidDateError(f"Not a valid calendar date: {value!r}") from exc

    anchor_time = _parse_anchor(anchor or settings.date_anchor_time)
    return datetime.combine(parsed, anchor_time, tzinfo=timezone.utc)


def era_by_name(name: str) -> Optional[Era]:
    """Look an era up by kanji or romaji. Later eras win on shared romaji."""
    needle = name.strip()
    if not needle:
        return None
    lowered = needle.lower()
    for era in reversed(SORTED_ERAS):
        if era.kanji == needle or era.romaji == lowered:
            return era
    return None


def eras_in(jidai: Jidai) -> List[Era]:
    return [era for era in SORTED_ERAS if era.jidai is jidai]


def _convert_kanji_numeral_to_int(text: str) -> Optional[int]:
    cleaned = text.strip()
    if not cleaned:
        return None
    cleaned = cleaned.translate(FULLWIDTH_DIGIT_PATTERN)
    if all(ch in KANJI_DIGIT_VALUES for ch in cleaned):
        digits = "".join(str(KANJI_DIGIT_VALUES[ch]) for ch in cleaned)
        return int(digits)

    section = 0
    current_digit = None

    for ch in cleaned:
        if ch in KANJI_DIGIT_VALUES:
            current_digit = KANJI_DIGIT_VALUES[ch]
            continue
        if ch.isdigit():
            current_digit = int(ch)
            continue
        if ch in KANJI_SMALL_UNITS:
            multiplier = KANJI_SMALL_UNITS[ch]
            value = current_digit if current_digit is not None else 1
            section += value * multiplier
            current_digit = None
            continue
        return None

    if current_digit is not None:
        section += current_digit

    return section if section != 0 else None


def _normalise_number(text: Optional[str], default: int) -> int:
    if text is None or text == "":
        return default
    if text == "元":
        return 1
    candidate = text.translate(FULLWIDTH_DIGIT_PATTERN)
    if candidate.isdigit():
        return int(candidate)
    kanji_value = _convert_kanji_numeral_to_int(text)
    if kanji_value is not None:
        return kanji_value
    return default


def normalise_era_notation(text: str) -> Optional[str]:
    """Convert the first era notation found in ``text`` to an ISO date string.

    ``"令和３年１１月１２日"`` becomes ``"2021-11-12"``. Missing month or day
    default to 1; out-of-range values are clamped to the calendar.
    """
    match = ERA_REGEX.search(text)
    if not match:
        return None

    era = era_by_name(match.group("era"))
    if era is None:  # pragma: no cover - the regex only knows table names
        return None

    year_num = _normalise_number(match.group("year"), 1)
    month_num = _normalise_number(match.group("month"), 1)
    day_num = _normalise_number(match.group("day"), 1)

    start_year = (UNIX_EPOCH + timedelta(seconds=era.started_at)).year
    gregorian_year = start_year + max(year_num, 1) - 1

    # Safeguards for invalid calendar dates
    month_num = min(max(month_num, 1), 12)
    try:
        last_day = monthrange(gregorian_year, month_num)[1]
        day_num = min(max(day_num, 1), last_day)
        return date(gregorian_year, month_num, day_num).isoformat()
    except ValueError:
        return None
