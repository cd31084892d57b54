"""SIGMET / AIRMET / GAMET contracts."""

from pydantic import Field

from aeroweb.contracts.airport import Airport
from aeroweb.contracts.common import AerowebModel
from aeroweb.contracts.fir import Fir


class SigmetOptions(AerowebModel):
    """Airports and FIRs, 1 to 50 locations combined.

    SIGMETs are always delivered alongside METAR/TAF requests as well.
    """

    airports: list[Airport] = Field(default_factory=list)
    firs: list[Fir] = Field(default_factory=list)


class SigmetReport(AerowebModel):
    oaci: str = Field(..., description="e.g. LFMM, EBBU")
    name: str = Field(..., description="e.g. MARSEILLE, BRUSSELS; may be empty")
    sigmet: str | None = None
    gamet: str | None = None
    airmet: str | None = None


class Sigmet(AerowebModel):
    reports: list[SigmetReport] = Field(default_factory=list)
