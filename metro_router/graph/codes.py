"""Short station codes for keyboard entry."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from ..domain.models import Station

CodeRow = Tuple[int, str, str]


def station_code(station: Station) -> str:
    """Build the short code for one station.

    Each word of the label contributes its leading digits followed by
    its first non-digit character ('Noida Sector 62' -> 'NS62'). Codes
    shorter than two characters get the label's second character
    appended ('Saket' -> 'SA').
    """
    code = ""
    for word in station.label.split():
        digits = len(word) - len(word.lstrip("0123456789"))
        code += word[:digits]
        if digits < len(word):
            code += word[digits]
    if len(code) < 2 and len(station.label) > 1:
        code += station.label[1]
    return code.upper()


def station_codes(stations: Iterable[Station]) -> List[CodeRow]:
    """Return ``(serial, name, code)`` rows, serials starting at 1."""
    return [
        (serial, station.name, station_code(station))
        for serial, station in enumerate(stations, start=1)
    ]


def code_index(rows: Iterable[CodeRow]) -> Dict[str, str]:
    """Map each code to its station name; the first station wins a clash."""
    index: Dict[str, str] = {}
    for _, name, code in rows:
        index.setdefault(code, name)
    return index
