"""Tests for request assembly and query rendering."""

from itertools import islice

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
    TcaOptions,
    TcagCenter,
    TcagOptions,
    VaaCenter,
    VaaOptions,
    VagCenter,
    VagOptions,
    Zone,
)
from aeroweb.errors import InvalidOptionsError
from aeroweb.services import query


def _airports(n: int) -> list[Airport]:
    return list(islice(Airport, n))


def _firs(n: int) -> list[Fir]:
    return list(islice(Fir, n))


class TestFlightPlan:
    def test_default_destination(self):
        assert query.assemble_flight_plan(FlightPlanOptions()) == {
            "DESTINATION": "GRAND SUD OUEST FRANCE"
        }

    def test_explicit_destination(self):
        opts = FlightPlanOptions(destination=Destination.CORSE_VFR)
        assert query.assemble_flight_plan(opts) == {"DESTINATION": "CORSE-VFR"}


class TestMaps:
    def test_complete_base_ignores_selectors(self):
        opts = MapsOptions(complete_base=True, zone=Zone.EUROC)
        assert query.assemble_maps(opts) == {"BASE_COMPLETE": "oui"}

    def test_defaults(self):
        assert query.assemble_maps(MapsOptions()) == {
            "BASE_COMPLETE": "non",
            "VUE_CARTE": "AERO_WINTEM",
            "ALTITUDE": "100",
            "ZONE": "AERO_FRANCE",
        }

    def test_explicit_selectors(self):
        opts = MapsOptions(card_type=CardType.AERO_TEMSI, altitude=Altitude.FL050, zone=Zone.NAT_SECOUR)
        params = query.assemble_maps(opts)
        assert params["VUE_CARTE"] == "AERO_TEMSI"
        assert params["ALTITUDE"] == "050"
        assert params["ZONE"] == "AERO_NATsecour"

    def test_partial_selectors_fall_back_individually(self):
        params = query.assemble_maps(MapsOptions(zone=Zone.EUROC))
        assert params["VUE_CARTE"] == "AERO_WINTEM"
        assert params["ALTITUDE"] == "100"
        assert params["ZONE"] == "AERO_EUROC"


@pytest.mark.parametrize(
    "assemble, options_cls",
    [(query.assemble_maa, MaaOptions), (query.assemble_opmet, OpmetOptions)],
    ids=["maa", "opmet"],
)
class TestAirportListBounds:
    def test_lower_bound(self, assemble, options_cls):
        assert assemble(options_cls(airports=[Airport.LFBO])) == {"LIEUID": "LFBO"}

    def test_upper_bound(self, assemble, options_cls):
        params = assemble(options_cls(airports=_airports(50)))
        assert len(params["LIEUID"].split("|")) == 50

    def test_empty_rejected(self, assemble, options_cls):
        with pytest.raises(InvalidOptionsError, match="between 1 and 50"):
            assemble(options_cls(airports=[]))

    def test_over_limit_rejected(self, assemble, options_cls):
        with pytest.raises(InvalidOptionsError, match="between 1 and 50"):
            assemble(options_cls(airports=_airports(51)))

    def test_order_preserved(self, assemble, options_cls):
        opts = options_cls(airports=[Airport.LFPG, Airport.LFBO])
        assert assemble(opts) == {"LIEUID": "LFPG|LFBO"}


class TestSigmet:
    def test_airports_before_firs(self):
        opts = SigmetOptions(firs=[Fir.LFMM, Fir.EBBU], airports=[Airport.LFBO])
        assert query.assemble_sigmet(opts) == {"LIEUID": "LFBO|LFMM|EBBU"}

    def test_firs_only(self):
        assert query.assemble_sigmet(SigmetOptions(firs=[Fir.LFMM])) == {"LIEUID": "LFMM"}

    def test_airports_only(self):
        assert query.assemble_sigmet(SigmetOptions(airports=[Airport.LFBZ])) == {"LIEUID": "LFBZ"}

    def test_combined_upper_bound(self):
        opts = SigmetOptions(airports=_airports(30), firs=_firs(20))
        assert len(query.assemble_sigmet(opts)["LIEUID"].split("|")) == 50

    def test_combined_over_limit_rejected(self):
        # Each list is within bounds on its own; the sum is not
        opts = SigmetOptions(airports=_airports(30), firs=_firs(21))
        with pytest.raises(InvalidOptionsError, match="combined"):
            query.assemble_sigmet(opts)

    def test_nothing_rejected(self):
        with pytest.raises(InvalidOptionsError):
            query.assemble_sigmet(SigmetOptions())


class TestAtLeastOne:
    def test_predec(self):
        opts = PredecOptions(airports=[PredecAirport.LFPO, PredecAirport.SOCA])
        assert query.assemble_predec(opts) == {"LIEUID": "LFPO|SOCA"}
        with pytest.raises(InvalidOptionsError, match="at least 1"):
            query.assemble_predec(PredecOptions())

    def test_predec_accepts_every_emitter(self):
        opts = PredecOptions(airports=list(PredecAirport))
        assert len(query.assemble_predec(opts)["LIEUID"].split("|")) == len(PredecAirport)

    @pytest.mark.parametrize(
        "options_cls, centers",
        [
            (TcaOptions, [TcaCenter.FMEE, TcaCenter.KNHC]),
            (TcagOptions, [TcagCenter.RJTD]),
            (VaaOptions, [VaaCenter.LFPW, VaaCenter.NZKL]),
            (VagOptions, [VagCenter.EGRR]),
        ],
    )
    def test_centers(self, options_cls, centers):
        params = query.assemble_centers(options_cls(centers=centers))
        assert params == {"LIEUID": "|".join(c.value for c in centers)}
        with pytest.raises(InvalidOptionsError, match="centers"):
            query.assemble_centers(options_cls())


class TestSpaceWeather:
    def test_no_params(self):
        assert query.assemble_space_weather() == {}


class TestBuildQuery:
    def test_key_and_code_first(self):
        q = query.build_query("secret", DataType.SIGMET, {"LIEUID": "LFBO|LFMM"})
        assert q == "ID=secret&TYPE_DONNEES=SIGMET2&LIEUID=LFBO|LFMM"

    def test_spaces_percent_encoded(self):
        q = query.build_query("k", DataType.FLIGHT_PLAN, {"DESTINATION": "GRAND SUD OUEST FRANCE"})
        assert q == "ID=k&TYPE_DONNEES=DOSSIER&DESTINATION=GRAND%20SUD%20OUEST%20FRANCE"
        assert q.isascii()

    def test_no_endpoint_params(self):
        assert query.build_query("k", DataType.SPACE_WEATHER, {}) == "ID=k&TYPE_DONNEES=SW"

    def test_reproducible(self):
        opts = SigmetOptions(airports=[Airport.LFBO], firs=[Fir.EBBU])
        first = query.build_query("k", DataType.SIGMET, query.assemble_sigmet(opts))
        second = query.build_query("k", DataType.SIGMET, query.assemble_sigmet(opts))
        assert first == second
