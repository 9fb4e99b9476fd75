"""Tests for the interactive console menu."""

import builtins

import pytest

from metro_router import cli
from metro_router.cli import INVALID, MetroMenu

from .helpers import BOTANICAL, DWARKA, NOIDA, RAJIV, VAISHALI


def _reader(answers):
    remaining = iter(answers)

    def read(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


def _run(service, answers):
    output = []
    MetroMenu(service, read=_reader(answers), write=output.append).run()
    return "\n".join(output)


def test_distance_by_name(service):
    out = _run(service, ["3", "3", NOIDA, BOTANICAL, "7"])
    assert f"SHORTEST DISTANCE FROM {NOIDA} TO {BOTANICAL} IS 8KM" in out


def test_time_by_code(service):
    out = _run(service, ["4", "2", "rc", "ND", "7"])
    assert f"SHORTEST TIME FROM ({RAJIV}) TO (New Delhi~YO) IS 3 MINUTES" in out


def test_distance_by_serial(service):
    out = _run(service, ["3", "1", "1", "2", "7"])
    assert "IS 8KM" in out


@pytest.mark.parametrize(
    "answers",
    [
        ["3", "3", NOIDA, "Atlantis~Z", "7"],
        ["3", "1", "0", "2", "7"],
        ["3", "1", "x", "2", "7"],
        ["3", "2", "ZZ", "RC", "7"],
        ["5", "9", "7"],
    ],
)
def test_invalid_station_entry(service, answers):
    out = _run(service, answers)
    assert INVALID in out


def test_path_by_distance(service):
    out = _run(service, ["5", "3", VAISHALI, DWARKA, "7"])
    assert "DISTANCE : 36 KM" in out
    assert "NUMBER OF INTERCHANGES : 0" in out
    assert f"{DWARKA}   ==>    END" in out


def test_path_by_time(service):
    out = _run(service, ["6", "3", RAJIV, "New Delhi~YO", "7"])
    assert "TIME : 3 MINUTES" in out


def test_list_and_map(service):
    out = _run(service, ["1", "2", "7"])
    assert f"1. {NOIDA}" in out
    assert f"{NOIDA} =>" in out


def test_unknown_menu_option(service):
    out = _run(service, ["42", "7"])
    assert "The options you can choose are from 1 to 7. " in out


def test_end_of_input_exits(service):
    out = _run(service, ["3", "3"])
    assert "WELCOME TO THE METRO APP" in out


def test_main_uses_default_container(monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", _reader(["1", "7"]))
    cli.main()

    out = capsys.readouterr().out
    assert f"1. {NOIDA}" in out
