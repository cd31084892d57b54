"""Tropical cyclone and volcanic ash advisories, text and graphics."""

from pydantic import Field

from aeroweb.contracts.common import AerowebModel
from aeroweb.contracts.enums import TcaCenter, TcagCenter, VaaCenter, VagCenter
from aeroweb.contracts.reports import Center, StationReport, StationReports


class TcaOptions(AerowebModel):
    centers: list[TcaCenter] = Field(default_factory=list)


class Tca(AerowebModel):
    reports: list[StationReport] = Field(default_factory=list)


class TcagOptions(AerowebModel):
    centers: list[TcagCenter] = Field(default_factory=list)


class Tcag(AerowebModel):
    reports: list[Center] = Field(default_factory=list)


class VaaOptions(AerowebModel):
    centers: list[VaaCenter] = Field(default_factory=list)


class Vaa(AerowebModel):
    reports: list[StationReports] = Field(default_factory=list)


class VagOptions(AerowebModel):
    centers: list[VagCenter] = Field(default_factory=list)


class Vag(AerowebModel):
    reports: list[Center] = Field(default_factory=list)
