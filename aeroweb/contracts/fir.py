"""Flight Information Regions of the world by ICAO location indicator.

Source: https://en.wikipedia.org/wiki/Flight_information_region
The wire string of each member is its own ICAO code.
"""

from enum import Enum


class Fir(str, Enum):
    AGGG = "AGGG"  # Honiara ACC, Solomon Islands
    ANAU = "ANAU"  # Nauru ACC, Nauru
    AYPM = "AYPM"  # Port Moresby ACC, Papua New Guinea
    BGGL = "BGGL"  # Nuuk ACC, Greenland (Denmark)
    BIRD = "BIRD"  # Reykjavík ACC, Iceland
    CZEG = "CZEG"  # Edmonton ACC, Canada
    CZQM = "CZQM"  # Moncton Southern ACC, Canada
    CZQX = "CZQX"  # Gander Domestic ACC, Canada
    CZUL = "CZUL"  # Montreal ACC, Canada
    CZVR = "CZVR"  # Vancouver ACC, Canada
    CZWG = "CZWG"  # Winnipeg ACC, Canada
    CZYZ = "CZYZ"  # Toronto ACC, Canada
    DAAA = "DAAA"  # Alger ACC, Algeria
    DGAC = "DGAC"  # Accra ACC, Ghana
    DIII = "DIII"  # Abidjan ACC, Ivory Coast
    DNKK = "DNKK"  # Kano ACC, Nigeria
    DRRR = "DRRR"  # Niamey ACC, Niger
    DTTC = "DTTC"  # Tunis ACC, Tunisia
    EZZZ = "EZZZ"  # EUROCONTROL, Belgium
    EBBU = "EBBU"  # Brussels ACC, Belgium/Luxembourg
    EDGG = "EDGG"  # Langen ACC, Germany
    EDMM = "EDMM"  # Munich ACC, Germany
    EDWW = "EDWW"  # Bremen ACC, Germany
    EETT = "EETT"  # Tallinn ACC, Estonia
    EFIN = "EFIN"  # Helsinki ACC, Finland
    EGGX = "EGGX"  # Shanwick Oceanic OCA, United Kingdom
    EGPX = "EGPX"  # Scottish ACC, United Kingdom
    EGQQ = "EGQQ"  # Scottish ACC (Mil), United Kingdom
    EGTT = "EGTT"  # London ACC, United Kingdom
    EHAA = "EHAA"  # Amsterdam ACC, Netherlands
    EISN = "EISN"  # Shannon ACC, Ireland
    EKDK = "EKDK"  # Copenhagen ACC, Denmark
    ENOB = "ENOB"  # Bodo Oceanic OCA, Norway
    ENOR = "ENOR"  # Polaris ACC, Norway
    EPWW = "EPWW"  # Warszawa ACC, Poland
    ESAA = "ESAA"  # Sweden ACC, Sweden
    ESMM = "ESMM"  # Malmo ACC, Sweden
    ESOS = "ESOS"  # Stockholm ACC, Sweden
    EVRR = "EVRR"  # Riga ACC, Latvia
    EYVL = "EYVL"  # Vilnius ACC, Lithuania
    FABL = "FABL"  # Bloemfontein ACC, South Africa
    FACA = "FACA"  # Cape Town ACC, South Africa
    FACT = "FACT"  # Cape Town ACC, South Africa
    FADN = "FADN"  # Durban ACC, South Africa
    FAJO = "FAJO"  # Johannesburg Oceanic ACC, South Africa
    FAJX = "FAJX"  # Johannesburg ACC, South Africa
    FAPX = "FAPX"  # Port Elizabeth ACC, South Africa
    FBGR = "FBGR"  # Gaborone ACC, Botswana
    FCCC = "FCCC"  # Brazzaville ACC, Congo, Republic of the
    FIMM = "FIMM"  # Mauritius ACC, Mauritius
    FKKK = "FKKK"  # Douala ACC, Cameroon
    FLFI = "FLFI"  # Lusaka ACC, Zambia
    FMCX = "FMCX"  # Comoros ACC, Comoros
    FMMM = "FMMM"  # Antananarivo ACC, Madagascar
    FNAN = "FNAN"  # Luanda ACC, Angola
    FOOO = "FOOO"  # Libreville ACC, Gabon
    FQBE = "FQBE"  # Beira ACC, Mozambique
    FSSS = "FSSS"  # Seychelles ACC, Seychelles
    FTTT = "FTTT"  # N'Djamena ACC, Chad
    FVHF = "FVHF"  # Harare ACC, Zimbabwe
    FWLL = "FWLL"  # Lilongwe ACC, Malawi
    FYWF = "FYWF"  # Windhoek ACC, Namibia
    FZZA = "FZZA"  # Kinshasa ACC, Congo, Democratic Republic of the
    GCCC = "GCCC"  # Canarias ACC, Canary Islands (Spain)
    GLRB = "GLRB"  # Roberts ACC, Liberia
    GMAC = "GMAC"  # Agadir ACC, Morocco
    GMMM = "GMMM"  # Casablanca ACC, Morocco
    GOOO = "GOOO"  # Dakar Oceanic ACC, Senegal
    GVSC = "GVSC"  # Sal Oceanic ACC, Cape Verde
    HAAA = "HAAA"  # Addis Ababa ACC, Ethiopia
    HBBA = "HBBA"  # Bujumbura ACC, Burundi
    HCSM = "HCSM"  # Mogadishu ACC, Somalia
    HECC = "HECC"  # Cairo ACC, Egypt
    HHAA = "HHAA"  # Asmara ACC, Eritrea
    HKNA = "HKNA"  # Nairobi ACC, Kenya
    HLLL = "HLLL"  # Tripoli ACC, Libya
    HRYR = "HRYR"  # Kigali ACC, Rwanda
    HSSS = "HSSS"  # Khartoum ACC, Sudan
    HTDC = "HTDC"  # Dar Es Salaam ACC, Tanzania
    HUEC = "HUEC"  # Entebbe ACC, Uganda
    KZAB = "KZAB"  # Albuquerque ARTCC, United States
    KZAK = "KZAK"  # Oakland Oceanic ARTCC, United States
    KZAU = "KZAU"  # Chicago ARTCC, United States
    KZBW = "KZBW"  # Boston ARTCC, United States
    KZDC = "KZDC"  # Washington ARTCC, United States
    KZDV = "KZDV"  # Denver ARTCC, United States
    KZFW = "KZFW"  # Ft Worth ARTCC, United States
    KZHU = "KZHU"  # Houston ARTCC, United States
    KZID = "KZID"  # Indianapolis ARTCC, United States
    KZJX = "KZJX"  # Jacksonville ARTCC, United States
    KZKC = "KZKC"  # Kansas City ARTCC, United States
    KZLA = "KZLA"  # Los Angeles ARTCC, United States
    KZLC = "KZLC"  # Salt Lake ARTCC, United States
    KZMA = "KZMA"  # Miami ARTCC, United States
    KZME = "KZME"  # Memphis ARTCC, United States
    KZMP = "KZMP"  # Minneapolis ARTCC, United States
    KZNY = "KZNY"  # New York ARTCC, United States
    KZOA = "KZOA"  # Oakland ARTCC, United States
    KZOB = "KZOB"  # Cleveland ARTCC, United States
    KZSE = "KZSE"  # Seattle ARTCC, United States
    KZTL = "KZTL"  # Atlanta ARTCC, United States
    KZWY = "KZWY"  # New York Oceanic ARTCC, United States
    LAAA = "LAAA"  # Tirana ACC, Albania
    LBSR = "LBSR"  # Sofia ACC, Bulgaria
    LBWR = "LBWR"  # Varna ACC, Bulgaria
    LCCC = "LCCC"  # Nicosia ACC, Cyprus
    LDZO = "LDZO"  # Zagreb ACC, Croatia
    LECB = "LECB"  # Barcelona ACC, Spain
    LECM = "LECM"  # Madrid ACC, Spain
    LECS = "LECS"  # Sevilla ACC, Spain
    LFBB = "LFBB"  # Bordeaux ACC, France
    LFEE = "LFEE"  # Reims ACC, France
    LFFF = "LFFF"  # Paris ACC, France
    LFMM = "LFMM"  # Marseille ACC, France
    LFRR = "LFRR"  # Brest ACC, France
    LGGG = "LGGG"  # Athens ACC, Greece
    LHCC = "LHCC"  # Budapest ACC, Hungary
    LIBB = "LIBB"  # Brindisi ACC, Italy
    LIMM = "LIMM"  # Milano ACC, Italy
    LIRR = "LIRR"  # Roma ACC, Italy
    LJLA = "LJLA"  # Ljubljana ACC, Slovenia
    LKAA = "LKAA"  # Praha ACC, Czech Republic
    LLLL = "LLLL"  # Tel-Aviv ACC, Israel
    LMMM = "LMMM"  # Malta ACC, Malta
    LOVV = "LOVV"  # Wien ACC, Austria
    LPPC = "LPPC"  # Lisboa ACC, Portugal
    LPPO = "LPPO"  # Santa Maria Oceanic ACC, Azores (Portugal)
    LQSB = "LQSB"  # Sarajevo ACC, Bosnia and Herzegovina
    LRBB = "LRBB"  # Bucuresti ACC, Romania
    LSAG = "LSAG"  # Geneve ACC, Switzerland
    LSAS = "LSAS"  # Switzerland ACC, Switzerland
    LSAZ = "LSAZ"  # Zurich ACC, Switzerland
    LTAA = "LTAA"  # Ankara ACC, Turkey
    LTBB = "LTBB"  # Istanbul ACC, Turkey
    LUUU = "LUUU"  # Chisinau ACC, Moldova
    LWSS = "LWSS"  # Skopje ACC, North Macedonia
    LYBA = "LYBA"  # Beograd ACC, Serbia
    LZBB = "LZBB"  # Bratislava ACC, Slovakia
    MDCS = "MDCS"  # Santo Domingo ACC, Dominican Republic
    MHTG = "MHTG"  # Central American ACC, Honduras
    MKJK = "MKJK"  # Kingston ACC, Jamaica
    MMFO = "MMFO"  # Mazatlan Oceanic ACC, Mexico
    MMFR = "MMFR"  # Mexico ACC, Mexico
    MPZL = "MPZL"  # Panama ACC, Panama
    MTEG = "MTEG"  # Port-Au-Prince ACC, Haiti
    MUFH = "MUFH"  # Habana ACC, Cuba
    MYNA = "MYNA"  # Nassau ACC, Bahamas
    NFFF = "NFFF"  # Nadi ACC, Fiji
    NTTT = "NTTT"  # Tahiti ACC, French Polynesia (France)
    NWWX = "NWWX"  # Noumea ACC, New Caledonia (France)
    NZZC = "NZZC"  # New Zealand ACC, New Zealand
    NZZO = "NZZO"  # Auckland Oceanic ACC, New Zealand
    OAKX = "OAKX"  # Kabul ACC, Afghanistan
    OBBB = "OBBB"  # Bahrain ACC, Bahrain
    OEJD = "OEJD"  # Jeddah ACC, Saudi Arabia
    OIIX = "OIIX"  # Tehran ACC, Iran
    OJAC = "OJAC"  # Amman ACC, Jordan
    OKKK = "OKKK"  # Kuwait ACC, Kuwait
    OLBB = "OLBB"  # Beirut ACC, Lebanon
    OMAE = "OMAE"  # Emirates ACC, United Arab Emirates
    OOMM = "OOMM"  # Muscat ACC, Oman
    OPKR = "OPKR"  # Karachi ACC, Pakistan
    OPLR = "OPLR"  # Lahore ACC, Pakistan
    ORBB = "ORBB"  # Baghdad ACC, Iraq
    ORMM = "ORMM"  # ORMM FIR, Iraq
    OSTT = "OSTT"  # Damascus ACC, Syria
    OYSC = "OYSC"  # Sanaa ACC, Yemen
    PAZA = "PAZA"  # Anchorage ARTCC, United States
    PAZN = "PAZN"  # Anchorage Oceanic ACC, United States
    PHZH = "PHZH"  # Honolulu ACC, United States
    RCAA = "RCAA"  # Taipei ACC, Taiwan
    RJJJ = "RJJJ"  # Fukuoka ACC, Japan
    RKRR = "RKRR"  # Incheon ACC, South Korea
    RPHI = "RPHI"  # Manila ACC, Philippines
    SACF = "SACF"  # Cordoba ACC, Argentina
    SAEF = "SAEF"  # Ezeiza ACC, Argentina
    SAMF = "SAMF"  # Mendoza ACC, Argentina
    SARR = "SARR"  # Resistencia ACC, Argentina
    SAVF = "SAVF"  # Comodoro Rivadavia ACC, Argentina
    SBAO = "SBAO"  # Atlantico ACC, Brazil
    SBAZ = "SBAZ"  # Amazonica ACC, Brazil
    SBBS = "SBBS"  # Brasilia ACC, Brazil
    SBCW = "SBCW"  # Curitiba ACC, Brazil
    SBRE = "SBRE"  # Recife ACC, Brazil
    SCCZ = "SCCZ"  # Punta Arenas ACC, Chile
    SCEZ = "SCEZ"  # Santiago ACC, Chile
    SCFZ = "SCFZ"  # Antofagasta ACC, Chile
    SCIZ = "SCIZ"  # Easter Island ACC, Easter Island (Chile)
    SCTZ = "SCTZ"  # Puerto Montt ACC, Chile
    SEFG = "SEFG"  # Guayaquil ACC, Ecuador
    SGFA = "SGFA"  # Asuncion ACC, Paraguay
    SKEC = "SKEC"  # Barranquilla ACC, Colombia
    SKED = "SKED"  # Bogota ACC, Colombia
    SLLF = "SLLF"  # La Paz ACC, Bolivia
    SMPM = "SMPM"  # Paramaribo ACC, Suriname
    SOOO = "SOOO"  # Rochambeau ACC, French Guiana (France)
    SPIM = "SPIM"  # Lima ACC, Peru
    SUEO = "SUEO"  # Montevideo ACC, Uruguay
    SVZM = "SVZM"  # Maiquetia ACC, Venezuela
    SYGC = "SYGC"  # Georgetown ACC, Guyana
    TJZS = "TJZS"  # San Juan ACC, Puerto Rico (United States)
    TNCF = "TNCF"  # Curacao ACC, Curaçao (Netherlands)
    TTZP = "TTZP"  # Piarco ACC, Trinidad and Tobago
    UAAX = "UAAX"  # Almaty ACC, Kazakhstan
    UACX = "UACX"  # Astana ACC, Kazakhstan
    UAFX = "UAFX"  # Bishkek ACC, Kyrgyzstan
    UASS = "UASS"  # Semipalatinsk ACC, Kazakhstan
    UDDD = "UDDD"  # Yerevan ACC, Armenia
    UEMH = "UEMH"  # Tyoply Klyuch ACC, Russia
    UENN = "UENN"  # Nyurba ACC, Russia
    UESS = "UESS"  # Chersky ACC, Russia
    UESU = "UESU"  # Zyryanka ACC, Russia
    UEVV = "UEVV"  # Gigansk ACC, Russia
    UGEE = "UGEE"  # Yerevan/Zvartnots ACC, Russia
    UGGG = "UGGG"  # Tbilisi ACC, Georgia
    UHBI = "UHBI"  # Magdagachi ACC, Russia
    UHHH = "UHHH"  # Khabarovsk/Novy, Russia
    UHMI = "UHMI"  # Mys Shmidta ACC, Russia
    UHMM = "UHMM"  # Magadan Oceanic, Russia
    UHMP = "UHMP"  # Pevek ACC, Russia
    UHNN = "UHNN"  # Nikolayevsk-na-Amure ACC, Russia
    UHPT = "UHPT"  # Tilichiki ACC, Russia
    UHPU = "UHPU"  # Ust-Khairyozovo ACC, Russia
    UHSH = "UHSH"  # Okha ACC, Russia
    UIKB = "UIKB"  # Bodaybo ACC, Russia
    UIKK = "UIKK"  # Kirensk ACC, Russia
    UKBV = "UKBV"  # Kyiv ACC, Ukraine
    UKDV = "UKDV"  # Dnipro ACC, Ukraine
    UKFV = "UKFV"  # Dnipro ACC, Odesa ACC[7], Ukraine
    UKLV = "UKLV"  # Lviv ACC, Ukraine
    UKOV = "UKOV"  # Odesa ACC, Ukraine
    ULLL = "ULLL"  # Sankt Peterburg ACC, Russia
    ULOL = "ULOL"  # Velikiye Luki ACC, Russia
    UMKD = "UMKD"  # Kazan ACC, Russia
    UMMV = "UMMV"  # Minsk ACC, Belarus
    UNLL = "UNLL"  # Kolpashevo ACC, Russia
    UOTT = "UOTT"  # Turukhansk ACC, Russia
    URRV = "URRV"  # Rostov-Na-Donu ACC, Russia
    USDK = "USDK"  # Mys Kamenny ACC, Russia
    USHB = "USHB"  # Beryozovo ACC, Russia
    USHH = "USHH"  # Khanty-Mansiysk ACC, Russia
    UTAA = "UTAA"  # Ashgabat ACC, Turkmenistan
    UTAK = "UTAK"  # Turkmenbashi ACC, Turkmenistan
    UTAV = "UTAV"  # Turkmenabat ACC, Turkmenistan
    UTNR = "UTNR"  # Nukus ACC, Uzbekistan
    UTSD = "UTSD"  # Samarkand ACC, Uzbekistan
    UTTR = "UTTR"  # Tashkent ACC, Uzbekistan
    UUWV = "UUWV"  # Moscow ACC, Russia
    UUYW = "UUYW"  # Vorkuta ACC, Russia
    UUYY = "UUYY"  # Syktyvkar ACC, Russia
    UWOO = "UWOO"  # Orenburg/Tsentralny ACC, Russia
    VABF = "VABF"  # Mumbai ACC, India
    VCCF = "VCCF"  # Colombo ACC, Sri Lanka
    VDPF = "VDPF"  # Phnom Penh ACC, Cambodia
    VECF = "VECF"  # Kolkata ACC, India
    VGFR = "VGFR"  # Dhaka ACC, Bangladesh
    VHHK = "VHHK"  # Hong Kong ACC, Hong Kong ( China)
    VIDF = "VIDF"  # Delhi ACC, India
    VLIV = "VLIV"  # Vientiane ACC, Laos
    VLVT = "VLVT"  # Vientiane ACC, Laos
    VNSM = "VNSM"  # Kathmandu ACC, Nepal
    VOMF = "VOMF"  # Chennai ACC, India
    VRMF = "VRMF"  # Male ACC, Maldives
    VTBB = "VTBB"  # Bangkok ACC, Thailand
    VVHM = "VVHM"  # Ho Chi Minh ACC, Vietnam
    VVHN = "VVHN"  # Hanoi ACC, Vietnam
    VYMD = "VYMD"  # , Myanmar
    VYYF = "VYYF"  # Yangon ACC, Myanmar
    WAAF = "WAAF"  # Ujung Pandang, Indonesia
    WAAZ = "WAAZ"  # Ujung Pandang ACC, Indonesia
    WABZ = "WABZ"  # Biak Sector, Indonesia
    WADZ = "WADZ"  # Bali Sector, Indonesia
    WAJZ = "WAJZ"  # , Indonesia
    WAKZ = "WAKZ"  # Merauke Sector, Indonesia
    WALZ = "WALZ"  # Balikpapan Sector, Indonesia
    WAMZ = "WAMZ"  # Manado Sector, Indonesia
    WAOZ = "WAOZ"  # Banjarmasin Sector, Indonesia
    WAPZ = "WAPZ"  # Ambon Sector, Indonesia
    WATZ = "WATZ"  # Kupang Sector, Indonesia
    WBFC = "WBFC"  # Kota Kinabalu ACC, Brunei/Malaysia
    WIIF = "WIIF"  # Jakarta, Indonesia
    WIIZ = "WIIZ"  # Jakarta ACC, Indonesia
    WIMZ = "WIMZ"  # Medan Sector, Indonesia
    WIOZ = "WIOZ"  # Pontianak Sector, Indonesia
    WIPZ = "WIPZ"  # Palembang Sector, Indonesia
    WMFC = "WMFC"  # Kuala Lumpur ACC, Malaysia
    WSJC = "WSJC"  # Singapore ACC, Singapore
    YBBB = "YBBB"  # Brisbane ACC, Australia
    YMMM = "YMMM"  # Melbourne ACC, Australia
    ZBPE = "ZBPE"  # Beijing ACC, China
    ZGZU = "ZGZU"  # Guangzhou ACC, China
    ZHWH = "ZHWH"  # Wuhan ACC, China
    ZJSA = "ZJSA"  # Sanya ACC, China
    ZKKP = "ZKKP"  # Pyongyang ACC, North Korea
    ZLHW = "ZLHW"  # Lanzhou ACC, China
    ZMUB = "ZMUB"  # Ulan Bator ACC, Mongolia
    ZPKM = "ZPKM"  # Kunming ACC, China
    ZSHA = "ZSHA"  # Shanghai ACC, China
    ZWUQ = "ZWUQ"  # Urumqi ACC, China
    ZYSH = "ZYSH"  # Shenyang ACC, China
