"""Geographic lookup tables.

Italian province ``code`` values are the numeric codes of the provincial
revenue offices used as digits 8-10 of an Italian VAT number.
"""

from __future__ import annotations

from typing import Any, Dict, List

__all__ = [
    "ARMED_FORCES",
    "COUNTIES",
    "COUNTRIES",
    "COUNTRY_REGIONS",
    "PROVINCES",
    "STREET_SUFFIXES",
    "TERRITORIES",
    "TIMEZONES",
    "US_STATES_AND_DC",
]


def _pairs(text: str) -> List[Dict[str, str]]:
    rows = []
    for line in text.strip().splitlines():
        name, abbreviation = line.rsplit("|", 1)
        rows.append({"name": name.strip(), "abbreviation": abbreviation.strip()})
    return rows


COUNTRIES = _pairs(
    """
Afghanistan|AF
Albania|AL
Algeria|DZ
Andorra|AD
Angola|AO
Argentina|AR
Armenia|AM
Australia|AU
Austria|AT
Azerbaijan|AZ
Bahamas|BS
Bahrain|BH
Bangladesh|BD
Barbados|BB
Belarus|BY
Belgium|BE
Belize|BZ
Benin|BJ
Bhutan|BT
Bolivia|BO
Bosnia and Herzegovina|BA
Botswana|BW
Brazil|BR
Brunei|BN
Bulgaria|BG
Burkina Faso|BF
Burundi|BI
Cambodia|KH
Cameroon|CM
Canada|CA
Chad|TD
Chile|CL
China|CN
Colombia|CO
Costa Rica|CR
Croatia|HR
Cuba|CU
Cyprus|CY
Czech Republic|CZ
Denmark|DK
Dominican Republic|DO
Ecuador|EC
Egypt|EG
El Salvador|SV
Estonia|EE
Ethiopia|ET
Fiji|FJ
Finland|FI
France|FR
Gabon|GA
Georgia|GE
Germany|DE
Ghana|GH
Greece|GR
Guatemala|GT
Haiti|HT
Honduras|HN
Hungary|HU
Iceland|IS
India|IN
Indonesia|ID
Iran|IR
Iraq|IQ
Ireland|IE
Israel|IL
Italy|IT
Jamaica|JM
Japan|JP
Jordan|JO
Kazakhstan|KZ
Kenya|KE
Kuwait|KW
Latvia|LV
Lebanon|LB
Libya|LY
Liechtenstein|LI
Lithuania|LT
Luxembourg|LU
Madagascar|MG
Malaysia|MY
Malta|MT
Mexico|MX
Moldova|MD
Monaco|MC
Mongolia|MN
Morocco|MA
Mozambique|MZ
Namibia|NA
Nepal|NP
Netherlands|NL
New Zealand|NZ
Nicaragua|NI
Nigeria|NG
Norway|NO
Oman|OM
Pakistan|PK
Panama|PA
Paraguay|PY
Peru|PE
Philippines|PH
Poland|PL
Portugal|PT
Qatar|QA
Romania|RO
Russia|RU
Rwanda|RW
Saudi Arabia|SA
Senegal|SN
Serbia|RS
Singapore|SG
Slovakia|SK
Slovenia|SI
Somalia|SO
South Africa|ZA
South Korea|KR
Spain|ES
Sri Lanka|LK
Sudan|SD
Sweden|SE
Switzerland|CH
Syria|SY
Taiwan|TW
Tanzania|TZ
Thailand|TH
Tunisia|TN
Turkey|TR
Uganda|UG
Ukraine|UA
United Arab Emirates|AE
United Kingdom|GB
United States|US
Uruguay|UY
Uzbekistan|UZ
Venezuela|VE
Vietnam|VN
Yemen|YE
Zambia|ZM
Zimbabwe|ZW
"""
)

US_STATES_AND_DC = _pairs(
    """
Alabama|AL
Alaska|AK
Arizona|AZ
Arkansas|AR
California|CA
Colorado|CO
Connecticut|CT
Delaware|DE
District of Columbia|DC
Florida|FL
Georgia|GA
Hawaii|HI
Idaho|ID
Illinois|IL
Indiana|IN
Iowa|IA
Kansas|KS
Kentucky|KY
Louisiana|LA
Maine|ME
Maryland|MD
Massachusetts|MA
Michigan|MI
Minnesota|MN
Mississippi|MS
Missouri|MO
Montana|MT
Nebraska|NE
Nevada|NV
New Hampshire|NH
New Jersey|NJ
New Mexico|NM
New York|NY
North Carolina|NC
North Dakota|ND
Ohio|OH
Oklahoma|OK
Oregon|OR
Pennsylvania|PA
Rhode Island|RI
South Carolina|SC
South Dakota|SD
Tennessee|TN
Texas|TX
Utah|UT
Vermont|VT
Virginia|VA
Washington|WA
West Virginia|WV
Wisconsin|WI
Wyoming|WY
"""
)

TERRITORIES = _pairs(
    """
American Samoa|AS
Federated States of Micronesia|FM
Guam|GU
Marshall Islands|MH
Northern Mariana Islands|MP
Puerto Rico|PR
Virgin Islands, U.S.|VI
"""
)

ARMED_FORCES = _pairs(
    """
Armed Forces Europe|AE
Armed Forces Pacific|AP
Armed Forces the Americas|AA
"""
)

COUNTRY_REGIONS: Dict[str, List[Dict[str, str]]] = {
    "it": _pairs(
        """
Valle d'Aosta|VDA
Piemonte|PIE
Lombardia|LOM
Veneto|VEN
Trentino Alto Adige|TAA
Friuli Venezia Giulia|FVG
Liguria|LIG
Emilia Romagna|EMR
Toscana|TOS
Umbria|UMB
Marche|MAR
Abruzzo|ABR
Lazio|LAZ
Campania|CAM
Puglia|PUG
Basilicata|BAS
Molise|MOL
Calabria|CAL
Sicilia|SIC
Sardegna|SAR
"""
    )
}


def _italian_provinces() -> List[Dict[str, Any]]:
    rows = []
    for line in _IT_PROVINCES.strip().splitlines():
        name, abbreviation, code = line.split("|")
        rows.append({"name": name, "abbreviation": abbreviation, "code": int(code)})
    return rows


_IT_PROVINCES = """
Agrigento|AG|84
Alessandria|AL|6
Ancona|AN|42
Aosta|AO|7
L'Aquila|AQ|66
Arezzo|AR|51
Ascoli-Piceno|AP|44
Asti|AT|5
Avellino|AV|64
Bari|BA|72
Barletta-Andria-Trani|BT|110
Belluno|BL|25
Benevento|BN|62
Bergamo|BG|16
Biella|BI|96
Bologna|BO|37
Bolzano|BZ|21
Brescia|BS|17
Brindisi|BR|74
Cagliari|CA|92
Caltanissetta|CL|85
Campobasso|CB|70
Caserta|CE|61
Catania|CT|87
Catanzaro|CZ|79
Chieti|CH|69
Como|CO|13
Cosenza|CS|78
Cremona|CR|19
Crotone|KR|101
Cuneo|CN|4
Enna|EN|86
Fermo|FM|109
Ferrara|FE|38
Firenze|FI|48
Foggia|FG|71
Forli-Cesena|FC|40
Frosinone|FR|60
Genova|GE|10
Gorizia|GO|31
Grosseto|GR|53
Imperia|IM|8
Isernia|IS|94
La-Spezia|SP|11
Latina|LT|59
Lecce|LE|75
Lecco|LC|97
Livorno|LI|49
Lodi|LO|98
Lucca|LU|46
Macerata|MC|43
Mantova|MN|20
Massa-Carrara|MS|45
Matera|MT|77
Messina|ME|83
Milano|MI|15
Modena|MO|36
Monza-Brianza|MB|108
Napoli|NA|63
Novara|NO|3
Nuoro|NU|91
Oristano|OR|95
Padova|PD|28
Palermo|PA|82
Parma|PR|34
Pavia|PV|18
Perugia|PG|54
Pesaro-Urbino|PU|41
Pescara|PE|68
Piacenza|PC|33
Pisa|PI|50
Pistoia|PT|47
Pordenone|PN|93
Potenza|PZ|76
Prato|PO|100
Ragusa|RG|88
Ravenna|RA|39
Reggio-Calabria|RC|80
Reggio-Emilia|RE|35
Rieti|RI|57
Rimini|RN|99
Roma|RM|58
Rovigo|RO|29
Salerno|SA|65
Sassari|SS|90
Savona|SV|9
Siena|SI|52
Siracusa|SR|89
Sondrio|SO|14
Taranto|TA|73
Teramo|TE|67
Terni|TR|55
Torino|TO|1
Trapani|TP|81
Trento|TN|22
Treviso|TV|26
Trieste|TS|32
Udine|UD|30
Varese|VA|12
Venezia|VE|27
Verbania|VB|103
Vercelli|VC|2
Verona|VR|23
Vibo-Valentia|VV|102
Vicenza|VI|24
Viterbo|VT|56
"""

PROVINCES: Dict[str, List[Dict[str, Any]]] = {
    "ca": _pairs(
        """
Alberta|AB
British Columbia|BC
Manitoba|MB
New Brunswick|NB
Newfoundland and Labrador|NL
Nova Scotia|NS
Ontario|ON
Prince Edward Island|PE
Quebec|QC
Saskatchewan|SK
Northwest Territories|NT
Nunavut|NU
Yukon|YT
"""
    ),
    "it": _italian_provinces(),
}

COUNTIES: Dict[str, List[Dict[str, str]]] = {
    "uk": [
        {"name": name}
        for name in [
            "Bath and North East Somerset",
            "Bedford",
            "Berkshire",
            "Bristol",
            "Buckinghamshire",
            "Cambridgeshire",
            "Cheshire East",
            "Cornwall",
            "Cumbria",
            "Derbyshire",
            "Devon",
            "Dorset",
            "Durham",
            "East Sussex",
            "Essex",
            "Gloucestershire",
            "Greater London",
            "Greater Manchester",
            "Hampshire",
            "Herefordshire",
            "Hertfordshire",
            "Isle of Wight",
            "Kent",
            "Lancashire",
            "Leicestershire",
            "Lincolnshire",
            "Merseyside",
            "Norfolk",
            "North Yorkshire",
            "Northamptonshire",
            "Northumberland",
            "Nottinghamshire",
            "Oxfordshire",
            "Rutland",
            "Shropshire",
            "Somerset",
            "South Yorkshire",
            "Staffordshire",
            "Suffolk",
            "Surrey",
            "Tyne and Wear",
            "Warwickshire",
            "West Midlands",
            "West Sussex",
            "West Yorkshire",
            "Wiltshire",
            "Worcestershire",
            "Aberdeenshire",
            "Angus",
            "Argyll and Bute",
            "Fife",
            "Highland",
            "Perth and Kinross",
            "Cardiff",
            "Gwynedd",
            "Pembrokeshire",
            "Swansea",
            "Antrim",
            "Armagh",
            "Down",
            "Fermanagh",
            "Londonderry",
            "Tyrone",
        ]
    ]
}

STREET_SUFFIXES: Dict[str, List[Dict[str, str]]] = {
    "us": _pairs(
        """
Avenue|Ave
Boulevard|Blvd
Center|Ctr
Circle|Cir
Court|Ct
Drive|Dr
Extension|Ext
Glen|Gln
Grove|Grv
Heights|Hts
Highway|Hwy
Junction|Jct
Key|Key
Lane|Ln
Loop|Loop
Manor|Mnr
Mill|Mill
Park|Park
Parkway|Pkwy
Pass|Pass
Path|Path
Pike|Pike
Place|Pl
Plaza|Plz
Point|Pt
Ridge|Rdg
River|Riv
Road|Rd
Square|Sq
Street|St
Terrace|Ter
Trail|Trl
Turnpike|Tpke
View|Vw
Way|Way
"""
    ),
    "it": _pairs(
        """
Accesso|Acc.
Alzaia|Alz.
Arco|Arco
Archivolto|A.vo
Arena|Arena
Argine|Argine
Bacino|Bacino
Banchi|Banchi
Banchina|Ban.
Bastioni|Bas.
Belvedere|Belv.
Borgata|B.ta
Borgo|B.go
Calata|Cal.
Calle|Calle
Campiello|Cam.
Campo|Cam.
Canale|Can.
Carraia|Carr.
Cascina|Cascina
Case sparse|c.s.
Cavalcavia|Cv.
Circonvallazione|Cv.
Complanare|C.re
Contrada|C.da
Corso|C.so
Corte|C.te
Cortile|C.le
Diramazione|Dir.
Fondaco|F.co
Fondamenta|F.ta
Fondo|F.do
Frazione|Fr.
Isola|Is.
Largo|L.go
Litoranea|Lit.
Lungolago|L.go lago
Lungo Po|l.go Po
Molo|Molo
Mura|Mura
Passaggio privato|pass. priv.
Passeggiata|Pass.
Piazza|P.zza
Piazzale|P.le
Ponte|P.te
Portico|P.co
Rampa|Rampa
Regione|Reg.
Rione|R.ne
Rio|Rio
Ripa|Ripa
Riva|Riva
Rondo|Rondo
Rotonda|Rotonda
Sagrato|Sagr.
Salita|Sal.
Scalinata|Scal.
Scalone|Scal.
Slargo|Sl.
Sottoportico|Sott.
Strada|Str.
Stradale|Str.le
Strettoia|Strett.
Traversa|Trav.
Via|V.
Viale|V.le
Vicinale|Vic.le
Vicolo|Vic.
"""
    ),
}

TIMEZONES: List[Dict[str, Any]] = [
    {"name": "Dateline Standard Time", "abbr": "DST", "offset": -12, "isdst": False,
     "text": "(UTC-12:00) International Date Line West", "utc": ["Etc/GMT+12"]},
    {"name": "Hawaiian Standard Time", "abbr": "HST", "offset": -10, "isdst": False,
     "text": "(UTC-10:00) Hawaii", "utc": ["Pacific/Honolulu", "Pacific/Johnston"]},
    {"name": "Alaskan Standard Time", "abbr": "AKDT", "offset": -8, "isdst": True,
     "text": "(UTC-09:00) Alaska", "utc": ["America/Anchorage", "America/Juneau", "America/Nome"]},
    {"name": "Pacific Standard Time", "abbr": "PDT", "offset": -7, "isdst": True,
     "text": "(UTC-08:00) Pacific Time (US & Canada)",
     "utc": ["America/Los_Angeles", "America/Tijuana", "America/Vancouver", "PST8PDT"]},
    {"name": "US Mountain Standard Time", "abbr": "UMST", "offset": -7, "isdst": False,
     "text": "(UTC-07:00) Arizona", "utc": ["America/Phoenix", "America/Hermosillo"]},
    {"name": "Mountain Standard Time", "abbr": "MDT", "offset": -6, "isdst": True,
     "text": "(UTC-07:00) Mountain Time (US & Canada)",
     "utc": ["America/Boise", "America/Denver", "America/Edmonton", "MST7MDT"]},
    {"name": "Central Standard Time", "abbr": "CDT", "offset": -5, "isdst": True,
     "text": "(UTC-06:00) Central Time (US & Canada)",
     "utc": ["America/Chicago", "America/Winnipeg", "America/Matamoros", "CST6CDT"]},
    {"name": "Eastern Standard Time", "abbr": "EDT", "offset": -4, "isdst": True,
     "text": "(UTC-05:00) Eastern Time (US & Canada)",
     "utc": ["America/New_York", "America/Detroit", "America/Toronto", "EST5EDT"]},
    {"name": "Atlantic Standard Time", "abbr": "ADT", "offset": -3, "isdst": True,
     "text": "(UTC-04:00) Atlantic Time (Canada)",
     "utc": ["America/Halifax", "America/Glace_Bay", "Atlantic/Bermuda"]},
    {"name": "E. South America Standard Time", "abbr": "ESAST", "offset": -3, "isdst": False,
     "text": "(UTC-03:00) Brasilia", "utc": ["America/Sao_Paulo"]},
    {"name": "UTC", "abbr": "UTC", "offset": 0, "isdst": False,
     "text": "(UTC) Coordinated Universal Time", "utc": ["America/Danmarkshavn", "Etc/GMT"]},
    {"name": "GMT Standard Time", "abbr": "GMT", "offset": 0, "isdst": False,
     "text": "(UTC) Edinburgh, London", "utc": ["Europe/Isle_of_Man", "Europe/Guernsey",
                                                "Europe/Jersey", "Europe/London"]},
    {"name": "W. Europe Standard Time", "abbr": "WEDT", "offset": 2, "isdst": True,
     "text": "(UTC+01:00) Amsterdam, Berlin, Bern, Rome, Stockholm, Vienna",
     "utc": ["Europe/Amsterdam", "Europe/Berlin", "Europe/Rome", "Europe/Stockholm",
             "Europe/Vienna", "Europe/Zurich"]},
    {"name": "Romance Standard Time", "abbr": "RDT", "offset": 2, "isdst": True,
     "text": "(UTC+01:00) Brussels, Copenhagen, Madrid, Paris",
     "utc": ["Europe/Brussels", "Europe/Copenhagen", "Europe/Madrid", "Europe/Paris"]},
    {"name": "GTB Standard Time", "abbr": "GDT", "offset": 3, "isdst": True,
     "text": "(UTC+02:00) Athens, Bucharest", "utc": ["Asia/Nicosia", "Europe/Athens",
                                                     "Europe/Bucharest"]},
    {"name": "Israel Standard Time", "abbr": "JDT", "offset": 3, "isdst": True,
     "text": "(UTC+02:00) Jerusalem", "utc": ["Asia/Jerusalem"]},
    {"name": "Russian Standard Time", "abbr": "MSK", "offset": 3, "isdst": False,
     "text": "(UTC+03:00) Moscow, St. Petersburg, Volgograd",
     "utc": ["Europe/Kirov", "Europe/Moscow", "Europe/Simferopol", "Europe/Volgograd"]},
    {"name": "Arabian Standard Time", "abbr": "AST", "offset": 4, "isdst": False,
     "text": "(UTC+04:00) Abu Dhabi, Muscat", "utc": ["Asia/Dubai", "Asia/Muscat"]},
    {"name": "India Standard Time", "abbr": "IST", "offset": 5.5, "isdst": False,
     "text": "(UTC+05:30) Chennai, Kolkata, Mumbai, New Delhi", "utc": ["Asia/Kolkata"]},
    {"name": "China Standard Time", "abbr": "CST", "offset": 8, "isdst": False,
     "text": "(UTC+08:00) Beijing, Chongqing, Hong Kong, Urumqi",
     "utc": ["Asia/Hong_Kong", "Asia/Macau", "Asia/Shanghai"]},
    {"name": "Tokyo Standard Time", "abbr": "TST", "offset": 9, "isdst": False,
     "text": "(UTC+09:00) Osaka, Sapporo, Tokyo", "utc": ["Asia/Tokyo", "Pacific/Palau"]},
    {"name": "AUS Eastern Standard Time", "abbr": "AEST", "offset": 10, "isdst": False,
     "text": "(UTC+10:00) Canberra, Melbourne, Sydney",
     "utc": ["Australia/Melbourne", "Australia/Sydney"]},
    {"name": "New Zealand Standard Time", "abbr": "NZST", "offset": 12, "isdst": False,
     "text": "(UTC+12:00) Auckland, Wellington", "utc": ["Antarctica/McMurdo",
                                                         "Pacific/Auckland"]},
]
