from metro_router.domain.models import Station
from metro_router.graph.codes import code_index, station_code, station_codes

from .helpers import NOIDA, RAJIV, SAKET


def test_codes_use_word_initials_and_leading_digits():
    assert station_code(Station.parse(NOIDA)) == "NS62"
    assert station_code(Station.parse(RAJIV)) == "RC"
    assert station_code(Station.parse("Huda City Center~Y")) == "HCC"


def test_short_codes_are_padded_with_second_letter():
    assert station_code(Station.parse(SAKET)) == "SA"
    assert station_code(Station.parse("AIIMS~Y")) == "AI"


def test_codes_ignore_the_line_suffix():
    assert station_code(Station.parse("Sector 9~B")) == "S9"


def test_station_codes_are_numbered_in_order(metro):
    rows = station_codes(metro.stations())

    assert rows[0] == (1, NOIDA, "NS62")
    assert [serial for serial, _, _ in rows] == list(range(1, 21))


def test_reference_codes_are_unique(metro):
    rows = station_codes(metro.stations())
    assert len(code_index(rows)) == len(rows)


def test_code_index_keeps_first_station_on_clash():
    rows = [(1, "Saket~Y", "SA"), (2, "Sarai~V", "SA")]
    assert code_index(rows) == {"SA": "Saket~Y"}
