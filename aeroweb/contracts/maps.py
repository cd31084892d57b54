"""TEMSI / WINTEM chart listing contracts."""

from pydantic import Field

from aeroweb.contracts.common import AerowebModel
from aeroweb.contracts.enums import Altitude, CardType, Zone
from aeroweb.contracts.reports import WeatherMap


class MapsOptions(AerowebModel):
    """Chart selection.

    With ``complete_base`` set, the whole chart base is requested and the
    other selectors are ignored. Otherwise omitted selectors fall back to
    ``CardType.AERO_WINTEM``, ``Altitude.FL100`` and ``Zone.FRANCE``.
    ``altitude`` is ignored by the provider for TEMSI charts.
    """

    complete_base: bool = False
    card_type: CardType | None = None
    altitude: Altitude | None = None
    zone: Zone | None = None


class MapZone(AerowebModel):
    id: str = Field(..., description="e.g. FRANCE, EUROC")
    name: str
    maps: list[WeatherMap] = Field(default_factory=list)


class Maps(AerowebModel):
    zones: list[MapZone] = Field(default_factory=list)
