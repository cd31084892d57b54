"""Tests for the parameter domains: every member has one distinct wire string."""

import pytest

from aeroweb.contracts.airport import Airport
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
from aeroweb.contracts.fir import Fir

ALL_DOMAINS = [
    Airport,
    Altitude,
    CardType,
    DataType,
    Destination,
    Fir,
    PredecAirport,
    TcaCenter,
    TcagCenter,
    VaaCenter,
    VagCenter,
    Zone,
]


@pytest.mark.parametrize("domain", ALL_DOMAINS, ids=lambda d: d.__name__)
class TestDomainTables:
    def test_every_member_has_a_wire_string(self, domain):
        assert all(isinstance(m.value, str) and m.value for m in domain)

    def test_wire_strings_are_distinct(self, domain):
        values = [m.value for m in domain]
        assert len(values) == len(set(values))


class TestIcaoDomains:
    @pytest.mark.parametrize("domain", [Airport, Fir, PredecAirport, TcaCenter, TcagCenter, VaaCenter, VagCenter])
    def test_wire_string_is_the_icao_code(self, domain):
        for member in domain:
            assert member.value == member.name
            assert len(member.value) == 4

    def test_known_codes(self):
        assert Airport("LFBO") is Airport.LFBO
        assert Fir("EBBU") is Fir.EBBU
        assert len(Airport) > 400
        assert len(Fir) > 250

    def test_unknown_code_rejected(self):
        with pytest.raises(ValueError):
            Airport("ZZZZ")
        with pytest.raises(ValueError):
            Fir("lfmm")


class TestSoftDomains:
    def test_zone_codes_are_prefixed(self):
        assert Zone.FRANCE.value == "AERO_FRANCE"
        assert all(z.value.startswith("AERO_") for z in Zone)

    def test_zone_quirks_kept_verbatim(self):
        assert Zone.TAHITI_EASTER_ISLAND_CHILI.value == "AERO_TAHITI- EASTER_ISLAND-CHILI"
        assert Zone.NAT_SECOUR.value == "AERO_NATsecour"

    def test_altitude_historical_spelling(self):
        assert Altitude.LF410 is Altitude.FL410
        assert Altitude.FL410.value == "410"
        assert len(Altitude) == 18

    def test_destination_with_punctuation(self):
        assert Destination.SUD_OUEST_FRANCE_VFR_11_ET_12.value == "SUD OUEST FRANCE (ZONES VFR 11 ET 12)"
        assert Destination("ETATS-UNIS (EST) ET CANADA") is Destination.ETATS_UNIS_EST_ET_CANADA

    def test_endpoint_codes(self):
        assert DataType.OPMET.value == "OPMET2"
        assert DataType.SIGMET.value == "SIGMET2"
        assert DataType.FLIGHT_PLAN.value == "DOSSIER"
        assert len(DataType) == 11
