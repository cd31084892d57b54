"""Tests for the parameter codec."""

from aeroweb.contracts.airport import Airport
from aeroweb.contracts.enums import Altitude, CardType, Destination, Zone
from aeroweb.contracts.fir import Fir
from aeroweb.services.codec import LIST_SEPARATOR, encode, encode_list


class TestEncode:
    def test_icao_identity(self):
        assert encode(Airport.LFBO) == "LFBO"
        assert encode(Fir.EBBU) == "EBBU"

    def test_soft_domains(self):
        assert encode(Zone.FRANCE) == "AERO_FRANCE"
        assert encode(CardType.AERO_TEMSI) == "AERO_TEMSI"
        assert encode(Altitude.FL020) == "020"
        assert encode(Destination.GRAND_SUD_OUEST_FRANCE) == "GRAND SUD OUEST FRANCE"

    def test_alias_encodes_like_canonical_member(self):
        assert encode(Altitude.LF410) == encode(Altitude.FL410) == "410"


class TestEncodeList:
    def test_order_preserved(self):
        assert encode_list([Airport.LFPG, Airport.LFBO, Airport.LFBA]) == "LFPG|LFBO|LFBA"

    def test_single_element_has_no_separator(self):
        assert encode_list([Fir.LFMM]) == "LFMM"
        assert LIST_SEPARATOR not in encode_list([Fir.LFMM])

    def test_mixed_domains(self):
        assert encode_list([Airport.LFBO, Fir.LFMM, Fir.EBBU]) == "LFBO|LFMM|EBBU"

    def test_empty(self):
        assert encode_list([]) == ""
