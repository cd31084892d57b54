"""Aerodrome products: warnings (MAA), OPMET bulletins, take-off forecasts (PREDEC)."""

from pydantic import Field

from aeroweb.contracts.airport import Airport
from aeroweb.contracts.common import AerowebModel
from aeroweb.contracts.enums import PredecAirport
from aeroweb.contracts.reports import StationReport, StationReports


class MaaOptions(AerowebModel):
    """1 to 50 airports. Only French aerodromes emit MAA."""

    airports: list[Airport] = Field(default_factory=list)


class Maa(AerowebModel):
    """Aerodrome warnings of the last 48 hours."""

    reports: list[StationReports] = Field(default_factory=list)


class OpmetOptions(AerowebModel):
    """1 to 50 airports."""

    airports: list[Airport] = Field(default_factory=list)


class OpmetReport(AerowebModel):
    oaci: str = Field(..., description="e.g. LFBO, LFBA")
    name: str = Field(..., description="e.g. TOULOUSE BLAGNAC")
    metar: str | None = None
    taf: str | None = None
    speci: str | None = None
    sigmet: str | None = None
    gamet: str | None = None
    airmet: str | None = None


class Opmet(AerowebModel):
    reports: list[OpmetReport] = Field(default_factory=list)


class PredecOptions(AerowebModel):
    """At least one airport emitting PREDEC."""

    airports: list[PredecAirport] = Field(default_factory=list)


class Predec(AerowebModel):
    """Take-off forecasts (PREvision DECollage)."""

    reports: list[StationReport] = Field(default_factory=list)
