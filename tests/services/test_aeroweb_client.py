"""Tests for the Aeroweb client with mocked HTTP responses."""

from __future__ import annotations

import httpx
import pytest

from aeroweb.contracts import (
    Airport,
    Altitude,
    CardType,
    DataType,
    Destination,
    Fir,
    FlightPlanOptions,
    MaaOptions,
    MapsOptions,
    OpmetOptions,
    PredecAirport,
    PredecOptions,
    SigmetOptions,
    TcaCenter,
    TcagCenter,
    TcaOptions,
    TcagOptions,
    VaaCenter,
    VaaOptions,
    VagCenter,
    VagOptions,
    Zone,
)
from aeroweb.errors import DeserializeError, FetchError, InvalidApiKeyError, InvalidOptionsError
from aeroweb.services.aeroweb_client import AerowebClient

BASE_URL = "https://aviation.meteo.fr/FR/aviation/serveur_donnees.jsp"

REJECTED_KEY = '<?xml version="1.0" encoding="UTF-8"?><groupe><code>NOK</code></groupe>'


class Recorder:
    """MockTransport handler that replays one body and keeps the requests."""

    def __init__(self, body: str, status_code: int = 200):
        self.body = body
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def params(self) -> httpx.QueryParams:
        return self.requests[-1].url.params


def client_for(handler) -> tuple[AerowebClient, httpx.AsyncClient]:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AerowebClient(api_key="secret", http_client=http), http


class TestRequests:
    async def test_sigmet_locations(self, load_fixture):
        recorder = Recorder(load_fixture("sigmet.xml"))
        client, http = client_for(recorder)
        async with http:
            sigmet = await client.get_sigmet(
                SigmetOptions(airports=[Airport.LFBO], firs=[Fir.LFMM, Fir.EBBU])
            )
        assert len(sigmet.reports) == 4
        assert recorder.params["ID"] == "secret"
        assert recorder.params["TYPE_DONNEES"] == "SIGMET2"
        assert recorder.params["LIEUID"] == "LFBO|LFMM|EBBU"
        assert str(recorder.requests[-1].url).startswith(BASE_URL)

    async def test_flight_plan_default_destination(self, load_fixture):
        recorder = Recorder(load_fixture("flight_plan.xml"))
        client, http = client_for(recorder)
        async with http:
            plan = await client.get_flight_plan()
        assert plan.name == "GRAND SUD OUEST FRANCE"
        assert recorder.params["TYPE_DONNEES"] == "DOSSIER"
        assert recorder.params["DESTINATION"] == "GRAND SUD OUEST FRANCE"

    async def test_flight_plan_destination(self, load_fixture):
        recorder = Recorder(load_fixture("flight_plan.xml"))
        client, http = client_for(recorder)
        async with http:
            await client.get_flight_plan(FlightPlanOptions(destination=Destination.SUD_EST_FRANCE))
        assert recorder.params["DESTINATION"] == "SUD EST FRANCE"

    async def test_maps_defaults(self, load_fixture):
        recorder = Recorder(load_fixture("maps.xml"))
        client, http = client_for(recorder)
        async with http:
            maps = await client.get_maps()
        assert len(maps.zones) == 3
        assert recorder.params["TYPE_DONNEES"] == "CARTES"
        assert recorder.params["BASE_COMPLETE"] == "non"
        assert recorder.params["VUE_CARTE"] == "AERO_WINTEM"
        assert recorder.params["ALTITUDE"] == "100"
        assert recorder.params["ZONE"] == "AERO_FRANCE"

    async def test_maps_selection(self, load_fixture):
        recorder = Recorder(load_fixture("maps.xml"))
        client, http = client_for(recorder)
        async with http:
            await client.get_maps(
                MapsOptions(card_type=CardType.AERO_TEMSI, altitude=Altitude.FL050, zone=Zone.EUROC)
            )
        assert recorder.params["VUE_CARTE"] == "AERO_TEMSI"
        assert recorder.params["ALTITUDE"] == "050"
        assert recorder.params["ZONE"] == "AERO_EUROC"

    async def test_maps_complete_base(self, load_fixture):
        recorder = Recorder(load_fixture("maps.xml"))
        client, http = client_for(recorder)
        async with http:
            await client.get_maps(MapsOptions(complete_base=True, zone=Zone.EUROC))
        assert recorder.params["BASE_COMPLETE"] == "oui"
        assert "ZONE" not in recorder.params

    async def test_space_weather_has_no_parameters(self, load_fixture):
        recorder = Recorder(load_fixture("space_weather.xml"))
        client, http = client_for(recorder)
        async with http:
            space_weather = await client.get_space_weather()
        assert len(space_weather.reports) == 7
        assert set(recorder.params.keys()) == {"ID", "TYPE_DONNEES"}
        assert recorder.params["TYPE_DONNEES"] == "SW"


class TestEndpoints:
    async def test_maa(self, load_fixture):
        recorder = Recorder(load_fixture("maa.xml"))
        client, http = client_for(recorder)
        async with http:
            maa = await client.get_maa(MaaOptions(airports=[Airport.LFLY, Airport.LFPG]))
        assert maa.reports[0].oaci == "LFLY"
        assert recorder.params["TYPE_DONNEES"] == "MAA"
        assert recorder.params["LIEUID"] == "LFLY|LFPG"

    async def test_opmet(self, load_fixture):
        recorder = Recorder(load_fixture("opmet.xml"))
        client, http = client_for(recorder)
        async with http:
            opmet = await client.get_opmet(OpmetOptions(airports=[Airport.LFBO, Airport.LFBA]))
        assert opmet.reports[1].name == "AGEN LA GARENNE"
        assert recorder.params["TYPE_DONNEES"] == "OPMET2"

    async def test_predec(self, load_fixture):
        recorder = Recorder(load_fixture("predec.xml"))
        client, http = client_for(recorder)
        async with http:
            predec = await client.get_predec(PredecOptions(airports=[PredecAirport.LFPO, PredecAirport.SOCA]))
        assert predec.reports[0].message is not None
        assert recorder.params["LIEUID"] == "LFPO|SOCA"

    async def test_tca(self, load_fixture):
        recorder = Recorder(load_fixture("tca.xml"))
        client, http = client_for(recorder)
        async with http:
            tca = await client.get_tca(TcaOptions(centers=list(TcaCenter)))
        assert len(tca.reports) == 7
        assert recorder.params["TYPE_DONNEES"] == "TCA"
        assert recorder.params["LIEUID"] == "FMEE|KNHC|RJTD|PHFO|VIDP|NFFN|ADRM"

    async def test_tcag(self, load_fixture):
        recorder = Recorder(load_fixture("tcag.xml"))
        client, http = client_for(recorder)
        async with http:
            tcag = await client.get_tcag(TcagOptions(centers=[TcagCenter.FMEE, TcagCenter.RJTD]))
        assert len(tcag.reports) == 2
        assert recorder.params["TYPE_DONNEES"] == "TCAG"

    async def test_vaa(self, load_fixture):
        recorder = Recorder(load_fixture("vaa.xml"))
        client, http = client_for(recorder)
        async with http:
            vaa = await client.get_vaa(VaaOptions(centers=[VaaCenter.CWAO, VaaCenter.ADRM]))
        assert len(vaa.reports[1].messages) == 5
        assert recorder.params["TYPE_DONNEES"] == "VAA"

    async def test_vag(self, load_fixture):
        recorder = Recorder(load_fixture("vag.xml"))
        client, http = client_for(recorder)
        async with http:
            vag = await client.get_vag(VagOptions(centers=[VagCenter.LFPW, VagCenter.EGRR, VagCenter.RJTD]))
        assert vag.reports[2].link == "https://aviation.meteo.fr/FR/aviation/affiche_vagtcag.php"
        assert recorder.params["TYPE_DONNEES"] == "VAG"


class TestErrors:
    async def test_invalid_options_sent_nothing(self):
        recorder = Recorder("<groupe/>")
        client, http = client_for(recorder)
        async with http:
            with pytest.raises(InvalidOptionsError):
                await client.get_opmet(OpmetOptions())
            with pytest.raises(InvalidOptionsError):
                await client.get_vaa(VaaOptions())
        assert recorder.requests == []

    async def test_rejected_key(self):
        client, http = client_for(Recorder(REJECTED_KEY))
        async with http:
            with pytest.raises(InvalidApiKeyError):
                await client.get_space_weather()

    async def test_rejected_key_wins_over_valid_body(self, load_fixture):
        body = load_fixture("vag.xml").replace("</groupe>", "<code>NOK</code></groupe>")
        client, http = client_for(Recorder(body))
        async with http:
            with pytest.raises(InvalidApiKeyError):
                await client.get_vag(VagOptions(centers=[VagCenter.LFPW]))

    async def test_http_error_status(self):
        client, http = client_for(Recorder("Internal error", status_code=500))
        async with http:
            with pytest.raises(FetchError) as excinfo:
                await client.get_space_weather()
        assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)

    async def test_network_error(self):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        client, http = client_for(refuse)
        async with http:
            with pytest.raises(FetchError, match="SW request failed"):
                await client.get_space_weather()

    async def test_unexpected_body(self):
        client, http = client_for(Recorder("<html><body>Maintenance</body></html>"))
        async with http:
            with pytest.raises(DeserializeError):
                await client.get_space_weather()

    async def test_wrong_product_body(self, load_fixture):
        client, http = client_for(Recorder(load_fixture("maps.xml")))
        async with http:
            with pytest.raises(DeserializeError):
                await client.get_flight_plan()


class TestClient:
    def test_url_for(self):
        client = AerowebClient(api_key="secret", http_client=httpx.AsyncClient())
        url = client.url_for(DataType.OPMET, {"LIEUID": "LFBO|LFBA"})
        assert url == f"{BASE_URL}?ID=secret&TYPE_DONNEES=OPMET2&LIEUID=LFBO|LFBA"

    def test_custom_base_url(self):
        client = AerowebClient(api_key="k", http_client=httpx.AsyncClient(), base_url="http://localhost/data")
        assert client.url_for(DataType.SPACE_WEATHER, {}) == "http://localhost/data?ID=k&TYPE_DONNEES=SW"

    def test_key_from_environment(self, monkeypatch):
        monkeypatch.setattr("aeroweb.services.aeroweb_client.AEROWEB_API_KEY", "from-env")
        client = AerowebClient(http_client=httpx.AsyncClient())
        assert client.url_for(DataType.VAG, {}).endswith("ID=from-env&TYPE_DONNEES=VAG")

    async def test_owned_client_closed(self):
        async with AerowebClient(api_key="secret") as client:
            http = client._client
        assert http.is_closed

    async def test_borrowed_client_left_open(self):
        async with httpx.AsyncClient() as http:
            async with AerowebClient(api_key="secret", http_client=http):
                pass
            assert not http.is_closed
