"""Pre-established flight plan (dossier) contracts."""

from pydantic import Field

from aeroweb.contracts.common import AerowebModel
from aeroweb.contracts.enums import Destination
from aeroweb.contracts.reports import Center, WeatherMap


class FlightPlanOptions(AerowebModel):
    """Defaults to ``Destination.GRAND_SUD_OUEST_FRANCE`` when omitted."""

    destination: Destination | None = None


class FlightPlanMessage(AerowebModel):
    """An OPMET bulletin bundled in a dossier."""

    category: str = Field(..., description="e.g. METAR, TAFL")
    oaci: str = Field(..., description="e.g. LFTW, LFKS")
    name: str = Field(..., description="e.g. NIMES GARONS, SOLENZARA")
    text: str | None = None


class FlightPlan(AerowebModel):
    """A complete weather dossier for one destination."""

    name: str = Field(..., description="e.g. SUD EST FRANCE")
    link: str | None = Field(default=None, description="PDF version of the dossier")
    messages: list[FlightPlanMessage] = Field(default_factory=list)
    maps: list[WeatherMap] = Field(default_factory=list)
    vags: list[Center] = Field(default_factory=list)
    tcags: list[Center] = Field(default_factory=list)
