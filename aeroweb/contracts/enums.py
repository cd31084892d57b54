"""Closed parameter domains of the Aeroweb API.

Each member's value is the exact string the provider expects on the wire.
Some values carry upstream quirks (inner spaces, mixed case) and must be
kept verbatim.
"""

from enum import Enum


class DataType(str, Enum):
    """``TYPE_DONNEES`` code of each endpoint family."""
    FLIGHT_PLAN = "DOSSIER"
    MAPS = "CARTES"
    MAA = "MAA"
    OPMET = "OPMET2"
    PREDEC = "PREDEC"
    SIGMET = "SIGMET2"
    SPACE_WEATHER = "SW"
    TCA = "TCA"
    TCAG = "TCAG"
    VAA = "VAA"
    VAG = "VAG"


class CardType(str, Enum):
    """Kind of chart requested from the maps endpoint."""
    AERO_WINTEM = "AERO_WINTEM"
    AERO_TEMSI = "AERO_TEMSI"


class Altitude(str, Enum):
    """Flight level of a WINTEM chart (hundreds of feet)."""
    FL020 = "020"
    FL050 = "050"
    FL080 = "080"
    FL100 = "100"
    FL140 = "140"
    FL180 = "180"
    FL210 = "210"
    FL240 = "240"
    FL270 = "270"
    FL300 = "300"
    FL320 = "320"
    FL340 = "340"
    FL360 = "360"
    FL390 = "390"
    FL410 = "410"
    LF410 = "410"  # Historical spelling, alias of FL410
    FL450 = "450"
    FL480 = "480"
    FL530 = "530"


class Zone(str, Enum):
    """Geographic coverage of a chart."""
    FRANCE = "AERO_FRANCE"
    EUROC = "AERO_EUROC"
    EUR = "AERO_EUR"
    ANTILLES = "AERO_ANTILLES"
    ANTIL_GUY = "AERO_ANTIL_GUY"
    DIRAG_ATL = "AERO_DIRAG_ATL"
    ATLANTIQUE = "AERO_ATLANTIQUE"
    GUYANE = "AERO_GUYANE"
    MASCAREIG = "AERO_MASCAREIG"
    DIRNC_AUSTRALIE = "AERO_DIRNC-AUSTRALIE"
    JAPON = "AERO_JAPON"
    MAGENTA = "AERO_MAGENTA"
    NANDI_WALLIS = "AERO_NANDI_WALLIS"
    NORFOLK = "AERO_NORFOLK"
    NOUVELLE_ZELANDE = "AERO_NOUVELLE_ZELANDE"
    SAIPAN = "AERO_SAIPAN"
    TAHITI = "AERO_TAHITI"
    WALLIS = "AERO_WALLIS"
    PAC_EST = "AERO_PAC_EST"
    PAC_OUEST = "AERO_PAC_OUEST"
    POLYNESIE = "AERO_POLYNESIE"
    TAHITI_HAWAI_JAPON = "AERO_TAHITI-HAWAI-JAPON"
    TAHITI_EASTER_ISLAND_CHILI = "AERO_TAHITI- EASTER_ISLAND-CHILI"
    AUSTRALIE = "AERO_AUSTRALIE"
    EURASIA = "AERO_EURASIA"
    ASIA_SOUTH = "AERO_ASIA_SOUTH"
    MEA = "AERO_MEA"
    EURAFI = "AERO_EURAFI"
    EURSAM_B = "AERO_EURSAM_B"
    EURSAM_B1 = "AERO_EURSAM_B1"
    INDOC = "AERO_INDOC"
    MID = "AERO_MID"
    AMERIQUES = "AERO_AMERIQUES"
    NORTH_ATL = "AERO_NORTH_ATL"
    NAT = "AERO_NAT"
    NAT_SECOUR = "AERO_NATsecour"
    NORTH_PAC = "AERO_NORTH_PAC"
    PACIF = "AERO_PACIF"
    PACIFIC = "AERO_PACIFIC"
    SIO = "AERO_SIO"
    SOUTH_POL = "AERO_SOUTH_POL"


class Destination(str, Enum):
    """Pre-established flight plan (dossier) destinations."""
    # Light aviation
    ALPES = "ALPES"
    ANTILLES = "ANTILLES"
    BENELUX = "BENELUX"
    BRETAGNE = "BRETAGNE"
    CORSE_VFR = "CORSE-VFR"
    DEBARQUEMENT = "DEBARQUEMENT"
    DIRNC_DOMAINE_LOCAL_MAGENTA = "DIRNC-DOMAINE LOCAL MAGENTA"
    DIRNC_DOMAINE_LOCAL_WALLIS = "DIRNC-DOMAINE LOCAL-WALLIS"
    ESPAGNE_VFR = "ESPAGNE VFR"
    FRANCE_BASSES_COUCHES = "FRANCE BASSES COUCHES"
    GRAND_SUD_OUEST_FRANCE = "GRAND SUD OUEST FRANCE"
    GRAND_TOULOUSE = "GRAND TOULOUSE"
    GUYANE = "GUYANE"
    ILE_DE_FRANCE_BOURGOGNE = "ILE DE FRANCE-BOURGOGNE"
    ILE_DE_FRANCE_CENTRE_ET_PAYS_DE_LOIRE = "ILE DE FRANCE-CENTRE ET PAYS DE LOIRE"
    ILE_DE_FRANCE_CHAMPAGNE_ARDENNES = "ILE DE FRANCE-CHAMPAGNE-ARDENNES"
    ILE_DE_FRANCE_GRAND_PARIS = "ILE DE FRANCE-GRAND PARIS"
    ILE_DE_FRANCE_NORMANDIE_ET_NORD = "ILE DE FRANCE-NORMANDIE ET NORD"
    MASSIF_CENTRAL = "MASSIF CENTRAL"
    MISTRAL = "MISTRAL"
    NORD_EST_FRANCE = "NORD EST FRANCE"
    OCCITANIE = "OCCITANIE"
    PARIS_AGEN = "PARIS-AGEN"
    REUNION_MASCAREIGNES = "REUNION-MASCAREIGNES"
    SUD_EST_FRANCE = "SUD EST FRANCE"
    SUD_OUEST_FRANCE_VFR_11_ET_12 = "SUD OUEST FRANCE (ZONES VFR 11 ET 12)"
    SUISSE = "SUISSE"
    TROYES_EUROPE = "TROYES-EUROPE"
    TROYES_FRANCE = "TROYES-FRANCE"
    TROYES_REGION = "TROYES-REGION"

    # Europe
    ANGLETERRE = "ANGLETERRE"
    ATHENES = "ATHENES"
    BALEARES = "BALEARES"
    BELGIQUE = "BELGIQUE"
    CANARIES = "CANARIES"
    CORSE = "CORSE"
    ESPAGNE = "ESPAGNE"
    EUROPE_DU_NORD = "EUROPE DU NORD"
    EUROPE_DU_SUD = "EUROPE DU SUD"
    FRANCE_METROPOLITAINE = "FRANCE METROPOLITAINE"
    ITALIE = "ITALIE"
    POLOGNE = "POLOGNE"
    PORTUGAL = "PORTUGAL"

    # Africa - Indian Ocean
    AFRIQUE_DU_NORD = "AFRIQUE DU NORD"
    AFRIQUE_OCCIDENTALE = "AFRIQUE OCCIDENTALE"
    DJERBA = "DJERBA"
    MONASTIR = "MONASTIR"
    OCEAN_INDIEN = "OCEAN INDIEN"
    REUNION_AFRIQUE = "REUNION-AFRIQUE"
    REUNION_AFRIQUE_DU_SUD = "REUNION-AFRIQUE DU SUD"
    REUNION_ASIE_AUSTRALIE = "REUNION-ASIE-AUSTRALIE"
    REUNION_EUROPE = "REUNION-EUROPE"
    REUNION_INDES = "REUNION-INDES"

    # Americas
    ANTIL_GUY = "ANTIL-GUY"
    ANTIL_GUY_VERS_AMERIQUE_NORD_ET_CENTRALE = "ANTIL-GUY VERS AMERIQUE NORD ET CENTRALE"
    ANTIL_GUY_VERS_AMERIQUE_SUD = "ANTIL-GUY VERS AMERIQUE SUD"
    ANTIL_GUY_VERS_EUROPE = "ANTIL-GUY VERS EUROPE"
    BRESIL = "BRESIL"
    ETATS_UNIS_EST_ET_CANADA = "ETATS-UNIS (EST) ET CANADA"
    ETATS_UNIS_OUEST = "ETATS-UNIS (OUEST)"
    FLORIDE_ET_MEXIQUE = "FLORIDE ET MEXIQUE"
    ST_PIERRE_MIQUELON_EST_USA = "ST-PIERRE-MIQUELON EST USA"
    ST_PIERRE_MIQUELON_TRANSAL = "ST-PIERRE-MIQUELON TRANSAL"

    # Asia
    BEYROUTH = "BEYROUTH"
    CHINE = "CHINE"
    DAMAS = "DAMAS"
    JAPON = "JAPON"
    MOYEN_ORIENT = "MOYEN ORIENT"
    NAIROBI = "NAIROBI"
    RAMSTEIN_INCIRLIK_ISLAMABAD = "RAMSTEIN-INCIRLIK-ISLAMABAD"
    TADJIKISTAN = "TADJIKISTAN"

    # Oceania
    DIRNC_TONTOUTA_AUSTRALIE = "DIRNC-TONTOUTA-AUSTRALIE"
    DIRNC_TONTOUTA_JAPON = "DIRNC-TONTOUTA-JAPON"
    DIRNC_TONTOUTA_NANDI_WALLIS = "DIRNC-TONTOUTA-NANDI-WALLIS"
    DIRNC_TONTOUTA_NORFOLK = "DIRNC-TONTOUTA-NORFOLK"
    DIRNC_TONTOUTA_NOUVELLE_ZELANDE = "DIRNC-TONTOUTA-NOUVELLE ZELANDE"
    DIRNC_TONTOUTA_SAIPAN = "DIRNC-TONTOUTA-SAIPAN"
    DIRNC_TONTOUTA_TAHITI = "DIRNC-TONTOUTA-TAHITI"
    TAHITI_AUCKLAND = "TAHITI-AUCKLAND"
    TAHITI_HONOLULU = "TAHITI-HONOLULU"
    TAHITI_ILE_DE_PAQUES = "TAHITI-ILE DE PAQUES"
    TAHITI_JAPON = "TAHITI-JAPON"
    TAHITI_LOS_ANGELES = "TAHITI-LOS ANGELES"
    TAHITI_NEW_YORK = "TAHITI-NEW-YORK"
    TAHITI_NOUMEA = "TAHITI-NOUMEA"
    TAHITI_POLYNESIE_FRANCAISE = "TAHITI-POLYNESIE FRANCAISE"
    TAHITI_SYDNEY = "TAHITI-SYDNEY"


class PredecAirport(str, Enum):
    """Airports emitting PREDEC (take-off forecasts)."""
    LFPG = "LFPG"  # Paris Charles de Gaulle
    LFPO = "LFPO"  # Paris Orly
    SOCA = "SOCA"  # Cayenne
    TFFF = "TFFF"  # Fort de France
    TFFR = "TFFR"  # Pointe à Pitre
    FMEE = "FMEE"  # Saint Denis
    NWWW = "NWWW"  # Nouméa
    NTAA = "NTAA"  # Tahiti


class TcaCenter(str, Enum):
    """Tropical cyclone advisory centres (text messages)."""
    FMEE = "FMEE"  # La Réunion
    KNHC = "KNHC"  # Miami
    RJTD = "RJTD"  # Tokyo
    PHFO = "PHFO"  # Honolulu
    VIDP = "VIDP"  # New Delhi
    NFFN = "NFFN"  # Nadi
    ADRM = "ADRM"  # Darwin


class TcagCenter(str, Enum):
    """Tropical cyclone advisory centres (graphics)."""
    FMEE = "FMEE"  # La Réunion
    RJTD = "RJTD"  # Tokyo


class VaaCenter(str, Enum):
    """Volcanic ash advisory centres (text messages)."""
    PAWU = "PAWU"  # Anchorage
    ADRM = "ADRM"  # Darwin
    EGRR = "EGRR"  # London
    CWAO = "CWAO"  # Montreal
    RJTD = "RJTD"  # Tokyo
    LFPW = "LFPW"  # Toulouse
    KNES = "KNES"  # Washington
    SABM = "SABM"  # Buenos Aires
    NZKL = "NZKL"  # Wellington


class VagCenter(str, Enum):
    """Volcanic ash advisory centres (graphics)."""
    PAWU = "PAWU"  # Anchorage
    ADRM = "ADRM"  # Darwin
    EGRR = "EGRR"  # London
    CWAO = "CWAO"  # Montreal
    RJTD = "RJTD"  # Tokyo
    LFPW = "LFPW"  # Toulouse
    KNES = "KNES"  # Washington
