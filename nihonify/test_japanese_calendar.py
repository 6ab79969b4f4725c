from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from .eras import SORTED_ERAS, Jidai
from .japanese_calendar import (
    FULLWIDTH_OFFSET,
    InvalidDateError,
    era_by_name,
    eras_in,
    from_datetime,
    normalise_era_notation,
    parse_date,
    render_nenkou,
    resolve,
    to_fullwidth,
    to_unix_epoch,
)

FIRST_START = SORTED_ERAS[0].started_at


def test_resolve_various_eras() -> None:
    assert resolve(-1556668810).romaji == "taishou"
    assert resolve(-23123213123).romaji == "katei"


def test_resolve_first_era_boundary() -> None:
    assert resolve(FIRST_START - 1) is None
    assert resolve(FIRST_START).romaji == "taika"
    assert resolve(FIRST_START + 1).romaji == "taika"


def test_resolve_last_era_boundary() -> None:
    assert resolve(1636346788).romaji == "reiwa"
    # Far future dates fall back to the open-ended era.
    assert resolve(7636346788).romaji == "reiwa"


def test_resolve_era_start_is_inclusive() -> None:
    reiwa = era_by_name("reiwa")
    assert resolve(reiwa.started_at) is reiwa
    assert resolve(reiwa.started_at - 1).romaji == "heisei"


def test_resolve_every_span() -> None:
    for era in SORTED_ERAS:
        assert resolve(era.started_at) is era
        if era.ended_at is not None:
            assert resolve(era.ended_at - 1) is era
            midpoint = (era.started_at + era.ended_at) // 2
            assert resolve(midpoint) is era


def test_resolve_is_repeatable() -> None:
    assert resolve(1636346788) is resolve(1636346788)


def test_resolve_gap_returns_unnamed_record() -> None:
    era = resolve(-41000000000)
    assert era is not None
    assert era.kanji is None


def test_to_fullwidth() -> None:
    assert to_fullwidth(0) == "０"
    assert to_fullwidth(3) == "３"
    assert to_fullwidth(2021) == "２０２１"


def test_to_fullwidth_shifts_each_digit() -> None:
    for number in (7, 10, 365, 98765):
        rendered = to_fullwidth(number)
        assert len(rendered) == len(str(number))
        assert all(ord(out) - ord(src) == FULLWIDTH_OFFSET for out, src in zip(rendered, str(number)))


def test_to_fullwidth_rejects_negative() -> None:
    with pytest.raises(ValueError):
        to_fullwidth(-1)


def test_render_nenkou() -> None:
    november = datetime(2021, 11, 12, 22, 10, 57, tzinfo=timezone.utc)
    assert render_nenkou(november) == "令和３年１１月１２日"
    assert render_nenkou(date(2019, 6, 13)) == "令和１年６月１３日"


def test_render_nenkou_around_era_change() -> None:
    assert render_nenkou(date(2019, 5, 1)) == "令和１年５月１日"
    assert render_nenkou(date(2019, 4, 30)) == "平成３１年４月３０日"
    assert render_nenkou(date(1926, 12, 25)) == "昭和１年１２月２５日"


def test_render_nenkou_without_era() -> None:
    assert render_nenkou(date(600, 1, 1)) is None
    # 670 lies between Hakuchi and Shuchou, when no era name was used.
    assert render_nenkou(date(670, 1, 1)) is None


def test_render_nenkou_naive_datetime_is_utc() -> None:
    naive = datetime(2021, 11, 12, 22, 10, 57)
    assert render_nenkou(naive) == render_nenkou(naive.replace(tzinfo=timezone.utc))


def test_render_nenkou_uses_utc_calendar_date() -> None:
    jst = timezone(timedelta(hours=9))
    # 2021-11-13 07:00 JST is still the 12th in UTC.
    assert render_nenkou(datetime(2021, 11, 13, 7, 0, tzinfo=jst)) == "令和３年１１月１２日"


def test_to_unix_epoch_anchors_dates_at_midnight_utc() -> None:
    assert to_unix_epoch(date(1970, 1, 2)) == 86400
    assert to_unix_epoch(date(645, 7, 20)) == FIRST_START


def test_from_datetime() -> None:
    assert from_datetime(date(1920, 9, 2)).romaji == "taishou"
    assert from_datetime(datetime(1237, 4, 3, tzinfo=timezone.utc)).romaji == "katei"


def test_parse_date_defaults_to_midnight_utc() -> None:
    parsed = parse_date("2019-06-13")
    assert parsed == datetime(2019, 6, 13, tzinfo=timezone.utc)


def test_parse_date_with_anchor() -> None:
    parsed = parse_date("2021-11-12", anchor="22:10:57")
    assert parsed == datetime(2021, 11, 12, 22, 10, 57, tzinfo=timezone.utc)
    assert render_nenkou(parsed) == "令和３年１１月１２日"


@pytest.mark.parametrize("value", ["2019/06/13", "2019-6-13", "2019-13-01", "2019-02-30", "", "yesterday"])
def test_parse_date_rejects_invalid_input(value: str) -> None:
    with pytest.raises(InvalidDateError):
        parse_date(value)


def test_parse_date_rejects_invalid_anchor() -> None:
    with pytest.raises(InvalidDateError):
        parse_date("2019-06-13", anchor="25:00")


def test_era_by_name() -> None:
    assert era_by_name("令和").romaji == "reiwa"
    assert era_by_name("Reiwa").kanji == "令和"
    # 正和 (1312) and 昭和 share a romanisation; the later era wins.
    assert era_by_name("shouwa").kanji == "昭和"
    assert era_by_name("unknown") is None
    assert era_by_name("  ") is None


def test_eras_in() -> None:
    edo = eras_in(Jidai.EDO)
    assert edo[0].kanji == "元和"
    assert edo[-1].kanji == "慶応"
    assert all(era.jidai is Jidai.EDO for era in edo)


def test_normalise_era_notation_fullwidth() -> None:
    assert normalise_era_notation("令和３年１１月１２日") == "2021-11-12"


def test_normalise_era_notation_gannen_and_kanji_numerals() -> None:
    assert normalise_era_notation("平成元年1月8日に改元された") == "1989-01-08"
    assert normalise_era_notation("昭和六十四年一月七日") == "1989-01-07"


def test_normalise_era_notation_defaults_and_clamping() -> None:
    assert normalise_era_notation("大正10年") == "1921-01-01"
    assert normalise_era_notation("令和5年2月30日") == "2023-02-28"
    assert normalise_era_notation("令和5年13月1日") == "2023-12-01"


def test_normalise_era_notation_prefers_longest_name() -> None:
    assert normalise_era_notation("天平感宝元年") == "0749-01-01"


def test_normalise_era_notation_without_match() -> None:
    assert normalise_era_notation("2021年11月12日") is None
    assert normalise_era_notation("") is None
