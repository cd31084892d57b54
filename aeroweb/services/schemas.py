"""Per-endpoint mapping tables from provider XML to Aeroweb records.

Source names are the provider's (mostly French) ones; each leaf states
its normalization rule explicitly. XSD definitions live under
https://aviation.meteo.fr/FR/aviation/XSD/.
"""

from __future__ import annotations

from aeroweb.contracts.advisories import Tca, Tcag, Vaa, Vag
from aeroweb.contracts.aerodrome import Maa, Opmet, OpmetReport, Predec
from aeroweb.contracts.flight_plan import FlightPlan, FlightPlanMessage
from aeroweb.contracts.maps import MapZone, Maps
from aeroweb.contracts.reports import Center, Message, StationReport, StationReports, WeatherMap
from aeroweb.contracts.sigmet import Sigmet, SigmetReport
from aeroweb.contracts.space_weather import SpaceWeather, SpaceWeatherReport
from aeroweb.services.schema import (
    Document,
    Rule,
    Schema,
    attr,
    element,
    many,
    optional,
    own_text,
    parse_document,
)

# Root element of every list-shaped response
GROUP_ROOT = "groupe"

# ============ Shared sub-records ============

WEATHER_MAP = Schema(
    WeatherMap,
    leaves=(
        element("category", "typecarte", "type"),
        element("level", "niveau"),
        element("zone", "zone_carte", "zone"),
        element("run_date", "date_run"),
        element("due_date", "date_echeance"),
        element("due_hour", "echeance"),
        element("link", "lien", rule=Rule.LINK),
    ),
)

CENTER = Schema(
    Center,
    leaves=(
        attr("oaci", "oaci"),
        attr("name", "nom"),
        attr("reception_date", "date_reception", Rule.TEXT),
        element("link", "lien", "link", rule=Rule.LINK, required=False),
    ),
)

MESSAGE = Schema(
    Message,
    leaves=(
        attr("category", "type"),
        attr("reception_date", "date_reception", Rule.TEXT),
        element("text", "texte", "text", rule=Rule.TEXT, required=False),
    ),
)

STATION_REPORT = Schema(
    StationReport,
    leaves=(attr("oaci", "oaci"), attr("name", "nom")),
    groups=(optional("message", "message", MESSAGE),),
)

STATION_REPORTS = Schema(
    StationReports,
    leaves=(attr("oaci", "oaci"), attr("name", "nom")),
    groups=(many("messages", "message", MESSAGE),),
)

# ============ Endpoints ============

FLIGHT_PLAN = Document(
    "dossier",
    Schema(
        FlightPlan,
        leaves=(
            attr("name", "id"),
            attr("link", "lienPDF", Rule.LINK),
        ),
        groups=(
            many(
                "messages",
                "message",
                Schema(
                    FlightPlanMessage,
                    leaves=(
                        attr("category", "type"),
                        attr("oaci", "oaci"),
                        attr("name", "nom"),
                        element("text", "texte", rule=Rule.TEXT, required=False),
                    ),
                ),
            ),
            many("maps", "carte", WEATHER_MAP),
            many("vags", "VAG", CENTER),
            many("tcags", "TCAG", CENTER),
        ),
    ),
)

MAPS = Document(
    GROUP_ROOT,
    Schema(
        Maps,
        groups=(
            many(
                "zones",
                "bloc_zone",
                Schema(
                    MapZone,
                    leaves=(attr("id", "idz"), attr("name", "nom")),
                    groups=(many("maps", "carte", WEATHER_MAP),),
                ),
            ),
        ),
    ),
)

MAA = Document(GROUP_ROOT, Schema(Maa, groups=(many("reports", "messages", STATION_REPORTS),)))

OPMET = Document(
    GROUP_ROOT,
    Schema(
        Opmet,
        groups=(
            many(
                "reports",
                "opmet",
                Schema(
                    OpmetReport,
                    leaves=(
                        attr("oaci", "oaci"),
                        attr("name", "nom"),
                        element("metar", "METAR", rule=Rule.TEXT),
                        element("taf", "TAF", rule=Rule.TEXT),
                        element("speci", "SPECI", rule=Rule.TEXT),
                        element("sigmet", "SIGMET", rule=Rule.TEXT),
                        element("gamet", "GAMET", rule=Rule.TEXT),
                        element("airmet", "AIRMET", rule=Rule.TEXT),
                    ),
                ),
            ),
        ),
    ),
)

PREDEC = Document(GROUP_ROOT, Schema(Predec, groups=(many("reports", "messages", STATION_REPORT),)))

SIGMET = Document(
    GROUP_ROOT,
    Schema(
        Sigmet,
        groups=(
            many(
                "reports",
                "FIR",
                Schema(
                    SigmetReport,
                    leaves=(
                        attr("oaci", "oaci"),
                        attr("name", "nom"),
                        element("sigmet", "SIGMET", rule=Rule.TEXT),
                        element("gamet", "GAMET", rule=Rule.TEXT),
                        element("airmet", "AIRMET", rule=Rule.TEXT),
                    ),
                ),
            ),
        ),
    ),
)

SPACE_WEATHER = Document(
    GROUP_ROOT,
    Schema(
        SpaceWeather,
        groups=(
            many(
                "reports",
                "SPACEWEATHER",
                Schema(
                    SpaceWeatherReport,
                    leaves=(
                        attr("oaci", "ID"),
                        attr("name", "NAME"),
                        own_text("text", Rule.TEXT),
                    ),
                ),
            ),
        ),
    ),
)

TCA = Document(GROUP_ROOT, Schema(Tca, groups=(many("reports", "messages", STATION_REPORT),)))
TCAG = Document(GROUP_ROOT, Schema(Tcag, groups=(many("reports", "TCAG", CENTER),)))
VAA = Document(GROUP_ROOT, Schema(Vaa, groups=(many("reports", "messages", STATION_REPORTS),)))
VAG = Document(GROUP_ROOT, Schema(Vag, groups=(many("reports", "VAG", CENTER),)))


# ============ Parsers ============

def parse_flight_plan(xml: str) -> FlightPlan:
    return parse_document(xml, FLIGHT_PLAN)


def parse_maps(xml: str) -> Maps:
    return parse_document(xml, MAPS)


def parse_maa(xml: str) -> Maa:
    return parse_document(xml, MAA)


def parse_opmet(xml: str) -> Opmet:
    return parse_document(xml, OPMET)


def parse_predec(xml: str) -> Predec:
    return parse_document(xml, PREDEC)


def parse_sigmet(xml: str) -> Sigmet:
    return parse_document(xml, SIGMET)


def parse_space_weather(xml: str) -> SpaceWeather:
    return parse_document(xml, SPACE_WEATHER)


def parse_tca(xml: str) -> Tca:
    return parse_document(xml, TCA)


def parse_tcag(xml: str) -> Tcag:
    return parse_document(xml, TCAG)


def parse_vaa(xml: str) -> Vaa:
    return parse_document(xml, VAA)


def parse_vag(xml: str) -> Vag:
    return parse_document(xml, VAG)
