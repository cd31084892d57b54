"""Space weather advisory contracts.

Advisories on phenomena expected to affect HF radio, satellite
communications and GNSS, or to create a radiation hazard for aircraft
occupants.
"""

from pydantic import Field

from aeroweb.contracts.common import AerowebModel


class SpaceWeatherReport(AerowebModel):
    oaci: str = Field(..., description="e.g. KWNP, EFKL")
    name: str = Field(..., description="e.g. NOAA/SWPC, PECASUS")
    text: str | None = Field(default=None, description="SWX ADVISORY ...")


class SpaceWeather(AerowebModel):
    reports: list[SpaceWeatherReport] = Field(default_factory=list)
