"""Aeroweb data contracts: Pydantic v2 models and parameter domains.

Request side
------------
- Parameter domains (``str`` enums whose value is the wire string):
  ``Airport``, ``Fir``, ``Zone``, ``Altitude``, ``CardType``,
  ``Destination`` and the producing-centre sets.
- One ``*Options`` model per endpoint, validated by
  ``aeroweb.services.query`` before any request is sent.

Response side
-------------
One record per endpoint family, mapped from the provider XML by
``aeroweb.services.schemas``. Records are immutable and carry no sentinel
strings.
"""

from aeroweb.contracts.enums import (
    Altitude,
    CardType,
    DataType,
    Destination,
    PredecAirport,
    TcaCenter,
    TcagCenter,
    VaaCenter,
    VagCenter,
    Zone,
)
from aeroweb.contracts.airport import Airport
from aeroweb.contracts.fir import Fir
from aeroweb.contracts.common import AerowebModel
from aeroweb.contracts.reports import (
    Center,
    Message,
    StationReport,
    StationReports,
    WeatherMap,
)
from aeroweb.contracts.flight_plan import FlightPlan, FlightPlanMessage, FlightPlanOptions
from aeroweb.contracts.maps import MapZone, Maps, MapsOptions
from aeroweb.contracts.aerodrome import (
    Maa,
    MaaOptions,
    Opmet,
    OpmetOptions,
    OpmetReport,
    Predec,
    PredecOptions,
)
from aeroweb.contracts.sigmet import Sigmet, SigmetOptions, SigmetReport
from aeroweb.contracts.space_weather import SpaceWeather, SpaceWeatherReport
from aeroweb.contracts.advisories import (
    Tca,
    TcaOptions,
    Tcag,
    TcagOptions,
    Vaa,
    VaaOptions,
    Vag,
    VagOptions,
)

__all__ = [
    # Parameter domains
    "Airport",
    "Altitude",
    "CardType",
    "DataType",
    "Destination",
    "Fir",
    "PredecAirport",
    "TcaCenter",
    "TcagCenter",
    "VaaCenter",
    "VagCenter",
    "Zone",
    # Common
    "AerowebModel",
    "Center",
    "Message",
    "StationReport",
    "StationReports",
    "WeatherMap",
    # Endpoints
    "FlightPlan",
    "FlightPlanMessage",
    "FlightPlanOptions",
    "MapZone",
    "Maps",
    "MapsOptions",
    "Maa",
    "MaaOptions",
    "Opmet",
    "OpmetOptions",
    "OpmetReport",
    "Predec",
    "PredecOptions",
    "Sigmet",
    "SigmetOptions",
    "SigmetReport",
    "SpaceWeather",
    "SpaceWeatherReport",
    "Tca",
    "TcaOptions",
    "Tcag",
    "TcagOptions",
    "Vaa",
    "VaaOptions",
    "Vag",
    "VagOptions",
]
