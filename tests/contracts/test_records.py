"""Tests for option and record models."""

import pytest
from pydantic import ValidationError

from aeroweb.contracts import (
    Airport,
    Center,
    Fir,
    FlightPlanOptions,
    MaaOptions,
    MapsOptions,
    Message,
    SigmetOptions,
    StationReport,
    StationReports,
    TcaCenter,
    TcaOptions,
    Zone,
)


class TestOptions:
    def test_enum_members_accepted(self):
        opts = MaaOptions(airports=[Airport.LFBO, Airport.LFPG])
        assert opts.airports == [Airport.LFBO, Airport.LFPG]

    def test_wire_strings_coerced_to_members(self):
        opts = SigmetOptions(airports=["LFBO"], firs=["EBBU"])
        assert opts.airports == [Airport.LFBO]
        assert opts.firs == [Fir.EBBU]

    def test_unknown_airport_rejected_at_construction(self):
        with pytest.raises(ValidationError):
            MaaOptions(airports=["XXXX"])

    def test_centre_outside_product_rejected(self):
        # LFPW produces volcanic ash advisories, not cyclone ones
        with pytest.raises(ValidationError):
            TcaOptions(centers=["LFPW"])
        assert TcaOptions(centers=["ADRM"]).centers == [TcaCenter.ADRM]

    def test_defaults_are_unset(self):
        assert FlightPlanOptions().destination is None
        maps = MapsOptions()
        assert maps.complete_base is False
        assert maps.card_type is None
        assert maps.altitude is None
        assert maps.zone is None

    def test_zone_by_wire_string(self):
        assert MapsOptions(zone="AERO_EUROC").zone == Zone.EUROC

    def test_options_are_immutable(self):
        opts = MaaOptions(airports=[Airport.LFBO])
        with pytest.raises(ValidationError):
            opts.airports = []


class TestRecords:
    def test_value_equality(self):
        a = Message(category="MAA", reception_date="20240715124000", text="TS OBS")
        b = Message(category="MAA", reception_date="20240715124000", text="TS OBS")
        assert a == b

    def test_optional_leaves_default_to_none(self):
        center = Center(oaci="FMEE", name="LA REUNION")
        assert center.reception_date is None
        assert center.link is None

    def test_report_shapes(self):
        single = StationReport(oaci="SOCA", name="CAYENNE FELIX EBOUE")
        assert single.message is None
        multiple = StationReports(oaci="LFBO", name="TOULOUSE BLAGNAC")
        assert multiple.messages == []

    def test_to_dict(self):
        opts = MapsOptions(zone=Zone.EUROC)
        data = opts.to_dict()
        assert data["zone"] == "AERO_EUROC"
        assert data["card_type"] is None
