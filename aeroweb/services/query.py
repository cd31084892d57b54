"""Request assembly: validates endpoint options and renders query parameters.

Every ``assemble_*`` function is pure: it either returns the ordered
endpoint parameters or raises ``InvalidOptionsError`` before any request
is made. ``build_query`` prefixes them with the key and endpoint code.
"""

from __future__ import annotations

from urllib.parse import quote

from aeroweb.config import MAX_LOCATIONS
from aeroweb.contracts.advisories import TcaOptions, TcagOptions, VaaOptions, VagOptions
from aeroweb.contracts.aerodrome import MaaOptions, OpmetOptions, PredecOptions
from aeroweb.contracts.enums import Altitude, CardType, DataType, Destination, Zone
from aeroweb.contracts.flight_plan import FlightPlanOptions
from aeroweb.contracts.maps import MapsOptions
from aeroweb.contracts.sigmet import SigmetOptions
from aeroweb.errors import InvalidOptionsError
from aeroweb.services.codec import encode, encode_list

DEFAULT_DESTINATION = Destination.GRAND_SUD_OUEST_FRANCE
DEFAULT_CARD_TYPE = CardType.AERO_WINTEM
DEFAULT_ALTITUDE = Altitude.FL100
DEFAULT_ZONE = Zone.FRANCE

LOCATIONS_KEY = "LIEUID"


def _check_count(label: str, count: int, maximum: int | None = None) -> None:
    if maximum is None:
        if count < 1:
            raise InvalidOptionsError(f"{label} must contain at least 1 element")
    elif not 1 <= count <= maximum:
        raise InvalidOptionsError(
            f"{label} must be between 1 and {maximum} (got {count})"
        )


def assemble_flight_plan(options: FlightPlanOptions) -> dict[str, str]:
    return {"DESTINATION": encode(options.destination or DEFAULT_DESTINATION)}


def assemble_maps(options: MapsOptions) -> dict[str, str]:
    if options.complete_base:
        return {"BASE_COMPLETE": "oui"}
    return {
        "BASE_COMPLETE": "non",
        "VUE_CARTE": encode(options.card_type or DEFAULT_CARD_TYPE),
        "ALTITUDE": encode(options.altitude or DEFAULT_ALTITUDE),
        "ZONE": encode(options.zone or DEFAULT_ZONE),
    }


def assemble_maa(options: MaaOptions) -> dict[str, str]:
    _check_count("airports", len(options.airports), MAX_LOCATIONS)
    return {LOCATIONS_KEY: encode_list(options.airports)}


def assemble_opmet(options: OpmetOptions) -> dict[str, str]:
    _check_count("airports", len(options.airports), MAX_LOCATIONS)
    return {LOCATIONS_KEY: encode_list(options.airports)}


def assemble_predec(options: PredecOptions) -> dict[str, str]:
    _check_count("airports", len(options.airports))
    return {LOCATIONS_KEY: encode_list(options.airports)}


def assemble_sigmet(options: SigmetOptions) -> dict[str, str]:
    """Airports first, then FIRs, both in input order, under one key."""
    _check_count(
        "airports and firs combined",
        len(options.airports) + len(options.firs),
        MAX_LOCATIONS,
    )
    return {LOCATIONS_KEY: encode_list([*options.airports, *options.firs])}


def assemble_space_weather() -> dict[str, str]:
    return {}


def assemble_centers(options: TcaOptions | TcagOptions | VaaOptions | VagOptions) -> dict[str, str]:
    """Shared by the cyclone and volcanic ash products (text and graphics)."""
    _check_count("centers", len(options.centers))
    return {LOCATIONS_KEY: encode_list(options.centers)}


def build_query(api_key: str, data_type: DataType, params: dict[str, str]) -> str:
    """Render ``ID=<key>&TYPE_DONNEES=<code>&...`` as an ASCII query string.

    The list separator stays literal; everything else outside the URL-safe
    set is percent-encoded (``GRAND SUD OUEST FRANCE`` -> ``GRAND%20SUD...``).
    """
    pairs = {"ID": api_key, "TYPE_DONNEES": encode(data_type), **params}
    return "&".join(f"{key}={quote(value, safe='|')}" for key, value in pairs.items())
