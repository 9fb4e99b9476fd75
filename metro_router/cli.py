"""Interactive console menu for the metro router.

Stations can be picked by serial number, by short code or by exact
name. All routing goes through MetroRouterService; this module only
reads choices and prints results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from .container import get_container
from .domain.errors import MetroRouterError, NoRouteFoundError, StationNotFoundError
from .domain.models import CostMode
from .graph.codes import CodeRow, code_index, station_codes
from .logging_config import configure_logging
from .services import MetroRouterService

RULE = "*" * 71
INVALID = "THE INPUTS ARE INVALID"

MENU = """\t\t\t\t~~LIST OF ACTIONS~~

1. LIST ALL THE STATIONS IN THE MAP
2. SHOW THE METRO MAP
3. GET SHORTEST DISTANCE FROM A 'SOURCE' STATION TO 'DESTINATION' STATION
4. GET SHORTEST TIME TO REACH FROM A 'SOURCE' STATION TO 'DESTINATION' STATION
5. GET SHORTEST PATH (DISTANCE WISE) TO REACH FROM A 'SOURCE' STATION TO 'DESTINATION' STATION
6. GET SHORTEST PATH (TIME WISE) TO REACH FROM A 'SOURCE' STATION TO 'DESTINATION' STATION
7. EXIT THE MENU
"""


@dataclass
class MetroMenu:
    """Menu loop over a routing service.

    Attributes:
        service: Routing service answering the queries
        read: Prompt-and-read function (``input`` by default)
        write: Output function (``print`` by default)
    """

    service: MetroRouterService
    read: Callable[[str], str] = input
    write: Callable[[str], None] = print
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def run(self) -> None:
        actions: Dict[str, Callable[[], None]] = {
            "1": self.list_stations,
            "2": self.show_map,
            "3": lambda: self.show_cost(CostMode.DISTANCE),
            "4": lambda: self.show_cost(CostMode.TIME),
            "5": lambda: self.show_plan(CostMode.DISTANCE),
            "6": lambda: self.show_plan(CostMode.TIME),
        }
        self.write("\n\t\t\t****WELCOME TO THE METRO APP*****")
        while True:
            self.write(MENU)
            try:
                choice = self.read(
                    "ENTER YOUR CHOICE FROM THE ABOVE LIST (1 to 7) : "
                ).strip()
            except EOFError:
                break
            if choice == "7":
                break
            action = actions.get(choice)
            if action is None:
                self.write("Please enter a valid option! ")
                self.write("The options you can choose are from 1 to 7. ")
                continue
            try:
                action()
            except EOFError:
                break

    def list_stations(self) -> None:
        self.write(RULE)
        for serial, name in enumerate(self.service.graph.vertices(), start=1):
            self.write(f"{serial}. {name}")
        self.write(RULE)

    def show_map(self) -> None:
        self.write("\t Delhi Metro Map")
        self.write("\t------------------")
        self.write(self.service.graph.describe())
        self.write("\t------------------")

    def _code_rows(self) -> List[CodeRow]:
        return station_codes(self.service.graph.stations())

    def _resolve(self, method: str, raw: str, rows: List[CodeRow]) -> Optional[str]:
        raw = raw.strip()
        if method == "1":
            if not raw.isdigit():
                return None
            serial = int(raw)
            return rows[serial - 1][1] if 1 <= serial <= len(rows) else None
        if method == "2":
            return code_index(rows).get(raw.upper())
        return raw

    def ask_stations(self) -> Optional[Tuple[str, str]]:
        """Prompt for source and destination; None if the entry is invalid."""
        rows = self._code_rows()
        self.write("List of stations along with their codes:\n")
        for serial, name, code in rows:
            self.write(f"{serial}. {name:<28}{code}")
        self.write(
            "\n1. TO ENTER SERIAL NO. OF STATIONS"
            "\n2. TO ENTER CODE OF STATIONS"
            "\n3. TO ENTER NAME OF STATIONS"
        )
        method = self.read("ENTER YOUR CHOICE: ").strip()
        if method not in {"1", "2", "3"}:
            self.write("Invalid choice")
            return None

        source = self._resolve(method, self.read("ENTER THE SOURCE STATION: "), rows)
        destination = self._resolve(
            method, self.read("ENTER THE DESTINATION STATION: "), rows
        )
        if source is None or destination is None:
            return None
        return source, destination

    def show_cost(self, mode: CostMode) -> None:
        stations = self.ask_stations()
        if stations is None:
            self.write(INVALID)
            return
        source, destination = stations
        try:
            value = self.service.cost(source, destination, mode)
        except (StationNotFoundError, NoRouteFoundError) as e:
            self._logger.debug("Rejected query", extra={"error": str(e)})
            self.write(INVALID)
            return

        if mode is CostMode.TIME:
            self.write(
                f"SHORTEST TIME FROM ({source}) TO ({destination}) IS {value} MINUTES\n"
            )
        else:
            self.write(
                f"SHORTEST DISTANCE FROM {source} TO {destination} IS {value}KM\n"
            )

    def show_plan(self, mode: CostMode) -> None:
        stations = self.ask_stations()
        if stations is None:
            self.write(INVALID)
            return
        plan, error = self.service.plan_safe(*stations, mode=mode)
        if plan is None:
            self._logger.debug("Rejected query", extra={"error": error})
            self.write(INVALID)
            return
        self.write(self.service.format_plan(plan))


def main() -> None:
    """Console entry point."""
    configure_logging()
    try:
        service = get_container().resolve(MetroRouterService)
        MetroMenu(service, read=input, write=print).run()
    except MetroRouterError as e:
        logging.getLogger(__name__).error("Metro router failed", extra={"error": str(e)})
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
