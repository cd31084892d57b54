"""Météo-France Aeroweb data server client.

Usage:
    from aeroweb.contracts import Airport, OpmetOptions
    from aeroweb.services.aeroweb_client import AerowebClient

    async with AerowebClient(api_key="...") as client:
        opmet = await client.get_opmet(OpmetOptions(airports=[Airport.LFBO]))
"""

from __future__ import annotations

import logging

import httpx

from aeroweb.config import AEROWEB_API_KEY, BASE_URL, INVALID_KEY_MARKER, REQUEST_TIMEOUT
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
from aeroweb.contracts.aerodrome import Maa, MaaOptions, Opmet, OpmetOptions, Predec, PredecOptions
from aeroweb.contracts.enums import DataType
from aeroweb.contracts.flight_plan import FlightPlan, FlightPlanOptions
from aeroweb.contracts.maps import Maps, MapsOptions
from aeroweb.contracts.sigmet import Sigmet, SigmetOptions
from aeroweb.contracts.space_weather import SpaceWeather
from aeroweb.errors import FetchError, InvalidApiKeyError
from aeroweb.services import query, schemas

logger = logging.getLogger(__name__)


class AerowebClient:
    """Async client for the Aeroweb endpoints.

    Options are validated before any request is sent. Each call returns one
    complete record or raises one ``AerowebError``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        base_url: str = BASE_URL,
    ):
        self._api_key = api_key if api_key is not None else AEROWEB_API_KEY
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=REQUEST_TIMEOUT)
        self._base_url = base_url

    async def __aenter__(self) -> AerowebClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    def url_for(self, data_type: DataType, params: dict[str, str]) -> str:
        """Full request URL for an endpoint code and assembled parameters."""
        return f"{self._base_url}?{query.build_query(self._api_key, data_type, params)}"

    async def get_flight_plan(self, options: FlightPlanOptions | None = None) -> FlightPlan:
        """Pre-established flight plan (dossier) for a destination.

        Definition file: https://aviation.meteo.fr/FR/aviation/XSD/dossier.xsd
        """
        params = query.assemble_flight_plan(options or FlightPlanOptions())
        return schemas.parse_flight_plan(await self._fetch(DataType.FLIGHT_PLAN, params))

    async def get_maps(self, options: MapsOptions | None = None) -> Maps:
        """TEMSI and WINTEM charts."""
        params = query.assemble_maps(options or MapsOptions())
        return schemas.parse_maps(await self._fetch(DataType.MAPS, params))

    async def get_maa(self, options: MaaOptions) -> Maa:
        """Aerodrome warnings (Messages d'Avertissement d'Aérodrome) of the last 48 hours.

        Only French airports (metropolitan and overseas) emit MAA.
        Definition file: https://aviation.meteo.fr/FR/aviation/XSD/maa.xsd
        """
        params = query.assemble_maa(options)
        return schemas.parse_maa(await self._fetch(DataType.MAA, params))

    async def get_opmet(self, options: OpmetOptions) -> Opmet:
        """METAR, SPECI, TAF, SIGMET, GAMET and AIRMET for up to 50 airports."""
        params = query.assemble_opmet(options)
        return schemas.parse_opmet(await self._fetch(DataType.OPMET, params))

    async def get_predec(self, options: PredecOptions) -> Predec:
        """Take-off forecasts.

        Definition file: https://aviation.meteo.fr/FR/aviation/XSD/predec.xsd
        """
        params = query.assemble_predec(options)
        return schemas.parse_predec(await self._fetch(DataType.PREDEC, params))

    async def get_sigmet(self, options: SigmetOptions) -> Sigmet:
        """SIGMET, AIRMET and GAMET for airports and FIRs (50 combined at most).

        Definition file: https://aviation.meteo.fr/FR/aviation/XSD/sigmet.xsd
        """
        params = query.assemble_sigmet(options)
        return schemas.parse_sigmet(await self._fetch(DataType.SIGMET, params))

    async def get_space_weather(self) -> SpaceWeather:
        """Space weather advisories from every producing centre."""
        params = query.assemble_space_weather()
        return schemas.parse_space_weather(await self._fetch(DataType.SPACE_WEATHER, params))

    async def get_tca(self, options: TcaOptions) -> Tca:
        """Tropical cyclone advisories.

        Definition file: https://aviation.meteo.fr/FR/aviation/XSD/tca.xsd
        """
        params = query.assemble_centers(options)
        return schemas.parse_tca(await self._fetch(DataType.TCA, params))

    async def get_tcag(self, options: TcagOptions) -> Tcag:
        """Tropical cyclone advisory graphics.

        Definition file: https://aviation.meteo.fr/FR/aviation/XSD/tcag.xsd
        """
        params = query.assemble_centers(options)
        return schemas.parse_tcag(await self._fetch(DataType.TCAG, params))

    async def get_vaa(self, options: VaaOptions) -> Vaa:
        """Volcanic ash advisories.

        Definition file: https://aviation.meteo.fr/FR/aviation/XSD/vaa.xsd
        """
        params = query.assemble_centers(options)
        return schemas.parse_vaa(await self._fetch(DataType.VAA, params))

    async def get_vag(self, options: VagOptions) -> Vag:
        """Volcanic ash advisory graphics.

        Definition file: https://aviation.meteo.fr/FR/aviation/XSD/vag.xsd
        """
        params = query.assemble_centers(options)
        return schemas.parse_vag(await self._fetch(DataType.VAG, params))

    async def _fetch(self, data_type: DataType, params: dict[str, str]) -> str:
        """GET one endpoint and return the body, rejecting refused credentials."""
        logger.debug("Fetching %s (params: %s)", data_type.value, ", ".join(params) or "none")
        try:
            resp = await self._client.get(self.url_for(data_type, params))
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise FetchError(f"{data_type.value} request failed: {exc}") from exc

        body = resp.text
        if INVALID_KEY_MARKER in body:
            raise InvalidApiKeyError()
        return body
