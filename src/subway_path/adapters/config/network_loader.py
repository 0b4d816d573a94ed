"""Network loader: stations and lines from the TOML network file."""

import logging
from typing import Any

from subway_path.adapters.config.app_config import AppConfig
from subway_path.domain.models.line import Line
from subway_path.domain.models.network import Network
from subway_path.domain.models.section import Section
from subway_path.domain.models.station import Station

logger = logging.getLogger(__name__)


class NetworkLoader:
    """Loads the transit network from app config."""

    @staticmethod
    def load(config: AppConfig) -> Network:
        """Load the network described by the configured TOML file."""
        network = NetworkLoader.parse(config.load_network_data())
        logger.info(
            f"Loaded network with {len(network.stations)} station(s) "
            f"and {len(network.lines)} line(s) from {config.network_file}"
        )
        return network

    @staticmethod
    def parse(data: dict[str, Any]) -> Network:
        """Build a network from parsed TOML data.

        Expects ``[[stations]]`` tables with ``id`` and ``name`` and ``[[lines]]``
        tables with ``name``, optional ``color`` and ``surcharge``, and a
        ``sections`` list of ``{up, down, distance}`` tables.
        """
        stations_data = data.get("stations", [])
        if not isinstance(stations_data, list):
            raise ValueError("TOML network 'stations' must be a list")
        lines_data = data.get("lines", [])
        if not isinstance(lines_data, list):
            raise ValueError("TOML network 'lines' must be a list")

        stations: dict[str, Station] = {}
        for station_data in stations_data:
            station_id = str(_require(station_data, "id", "station"))
            if station_id in stations:
                raise ValueError(f"Duplicate station id: {station_id}")
            stations[station_id] = Station(
                id=station_id, name=str(station_data.get("name", station_id))
            )

        lines = tuple(_parse_line(line_data, stations) for line_data in lines_data)
        return Network(stations=stations, lines=lines)


def _parse_line(line_data: dict[str, Any], stations: dict[str, Station]) -> Line:
    name = str(_require(line_data, "name", "line"))
    sections_data = line_data.get("sections", [])
    if not isinstance(sections_data, list):
        raise ValueError(f"Sections of line '{name}' must be a list")

    sections = []
    for section_data in sections_data:
        what = f"section of line '{name}'"
        up_id = str(_require(section_data, "up", what))
        down_id = str(_require(section_data, "down", what))
        for station_id in (up_id, down_id):
            if station_id not in stations:
                raise ValueError(f"Line '{name}' references unknown station: {station_id}")
        sections.append(
            Section(
                up_station=stations[up_id],
                down_station=stations[down_id],
                distance=int(_require(section_data, "distance", what)),
            )
        )

    return Line(
        name=name,
        sections=tuple(sections),
        surcharge=int(line_data.get("surcharge", 0)),
        color=str(line_data.get("color", "")),
    )


def _require(table: Any, key: str, what: str) -> Any:
    if not isinstance(table, dict) or key not in table:
        raise ValueError(f"Missing '{key}' in {what}")
    return table[key]
