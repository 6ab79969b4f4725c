from __future__ import annotations

import pytest

from .cli import main


def test_convert_date_prints_nenkou(capsys) -> None:
    assert main(["convert-date", "--date", "2021-11-12"]) == 0
    assert capsys.readouterr().out == "令和３年１１月１２日\n"


def test_convert_date_with_anchor(capsys) -> None:
    assert main(["convert-date", "--date", "2019-06-13", "--anchor", "22:10:57"]) == 0
    assert capsys.readouterr().out == "令和１年６月１３日\n"


def test_convert_date_rejects_malformed_date(capsys) -> None:
    assert main(["convert-date", "--date", "12/11/2021"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "YYYY-MM-DD" in captured.err


def test_convert_date_outside_era_range(capsys) -> None:
    assert main(["convert-date", "--date", "0600-01-01"]) == 1
    assert "outside the supported era range" in capsys.readouterr().err


def test_convert_date_requires_date_flag() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["convert-date"])
    assert excinfo.value.code == 2


def test_resolve_command(capsys) -> None:
    assert main(["resolve", "--timestamp", "-1556668810"]) == 0
    assert capsys.readouterr().out == "大正\ttaishou\tmodern\n"


def test_resolve_command_before_first_era(capsys) -> None:
    assert main(["resolve", "--timestamp", "-41795654401"]) == 1
    assert "no era covers" in capsys.readouterr().err


def test_parse_command(capsys) -> None:
    assert main(["parse", "令和３年１１月１２日"]) == 0
    assert capsys.readouterr().out == "2021-11-12\n"


def test_detect_command(capsys) -> None:
    assert main(["detect", "日本語の文です。"]) == 0
    assert capsys.readouterr().out == "true\n"
    assert main(["detect", "Hello"]) == 1
    assert capsys.readouterr().out == "false\n"
