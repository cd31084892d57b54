"""Sub-records shared by several Aeroweb products."""

from pydantic import Field

from aeroweb.contracts.common import AerowebModel


class WeatherMap(AerowebModel):
    """A TEMSI or WINTEM chart."""

    category: str = Field(..., description="e.g. WINTEM, TEMSI")
    level: str = Field(..., description="e.g. FL20-100, FL50")
    zone: str = Field(..., description="e.g. FRANCE, EUROC")
    run_date: str = Field(..., description="e.g. 24 04 2024 12:00")
    due_date: str = Field(..., description="e.g. 24 04 2024 00:00 or 20240715150000")
    due_hour: str = Field(..., description="e.g. 06 UTC")
    link: str | None = None


class Center(AerowebModel):
    """Graphic advisory (VAG/TCAG) issued by a producing centre."""

    oaci: str = Field(..., description="e.g. FMEE, RJTD")
    name: str = Field(..., description="e.g. LA REUNION, TOKYO")
    reception_date: str | None = Field(default=None, description="e.g. 20240620210000")
    link: str | None = None


class Message(AerowebModel):
    """A dated bulletin (MAA, PREDEC, TCA, VAA)."""

    category: str = Field(..., description="e.g. MAA, TCA")
    reception_date: str | None = Field(default=None, description="e.g. 20240620210000")
    text: str | None = None


class StationReport(AerowebModel):
    """A station or centre carrying at most one message."""

    oaci: str
    name: str
    message: Message | None = None


class StationReports(AerowebModel):
    """A station or centre carrying any number of messages."""

    oaci: str
    name: str
    messages: list[Message] = Field(default_factory=list)
