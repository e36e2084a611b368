"""Random postal address parts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

CITY_PREFIXES = ("North", "East", "West", "South", "New", "Lake", "Port")

CITY_SUFFIXES = (
    "town", "ton", "land", "ville", "berg", "burgh", "borough", "bury", "view",
    "port", "mouth", "stad", "furt", "chester", "mouth", "fort", "haven", "side",
    "shire",
)

BUILDING_NUMBER_FORMATS = ("%####", "%###", "%##")

STREET_SUFFIXES = (
    "Alley", "Avenue",
    "Branch", "Bridge", "Brook", "Brooks", "Burg", "Burgs", "Bypass",
    "Camp", "Canyon", "Cape", "Causeway", "Center", "Centers", "Circle", "Circles",
    "Cliff", "Cliffs", "Club", "Common", "Corner", "Corners", "Course", "Court",
    "Courts", "Cove", "Coves", "Creek", "Crescent", "Crest", "Crossing", "Crossroad",
    "Curve",
    "Dale", "Dam", "Divide", "Drive", "Drive", "Drives",
    "Estate", "Estates", "Expressway", "Extension", "Extensions",
    "Fall", "Falls", "Ferry", "Field", "Fields", "Flat", "Flats", "Ford", "Fords",
    "Forest", "Forge", "Forges", "Fork", "Forks", "Fort", "Freeway",
    "Garden", "Gardens", "Gateway", "Glen", "Glens", "Green", "Greens", "Grove",
    "Groves",
    "Harbor", "Harbors", "Haven", "Heights", "Highway", "Hill", "Hills", "Hollow",
    "Inlet", "Inlet", "Island", "Island", "Islands", "Islands", "Isle", "Isle",
    "Junction", "Junctions",
    "Key", "Keys", "Knoll", "Knolls",
    "Lake", "Lakes", "Land", "Landing", "Lane", "Light", "Lights", "Loaf", "Lock",
    "Locks", "Locks", "Lodge", "Lodge", "Loop",
    "Mall", "Manor", "Manors", "Meadow", "Meadows", "Mews", "Mill", "Mills",
    "Mission", "Mission", "Motorway", "Mount", "Mountain", "Mountain", "Mountains",
    "Mountains",
    "Neck",
    "Orchard", "Oval", "Overpass",
    "Park", "Parks", "Parkway", "Parkways", "Pass", "Passage", "Path", "Pike",
    "Pine", "Pines", "Place", "Plain", "Plains", "Plains", "Plaza", "Plaza", "Point",
    "Points", "Port", "Port", "Ports", "Ports", "Prairie", "Prairie",
    "Radial", "Ramp", "Ranch", "Rapid", "Rapids", "Rest", "Ridge", "Ridges", "River",
    "Road", "Road", "Roads", "Roads", "Route", "Row", "Rue", "Run",
    "Shoal", "Shoals", "Shore", "Shores", "Skyway", "Spring", "Springs", "Springs",
    "Spur", "Spurs", "Square", "Square", "Squares", "Squares", "Station", "Station",
    "Stravenue", "Stravenue", "Stream", "Stream", "Street", "Street", "Streets",
    "Summit", "Summit",
    "Terrace", "Throughway", "Trace", "Track", "Trafficway", "Trail", "Trail",
    "Tunnel", "Tunnel", "Turnpike", "Turnpike",
    "Underpass", "Union", "Unions",
    "Valley", "Valleys", "Via", "Viaduct", "View", "Views", "Village", "Village",
    "Villages", "Ville", "Vista", "Vista",
    "Walk", "Walks", "Wall", "Way", "Ways", "Well", "Wells",
)

POST_CODE_FORMATS = ("#####", "#####-####")

STATES = (
    "Alabama", "Alaska", "Arizona", "Arkansas", "California", "Colorado",
    "Connecticut", "Delaware", "District of Columbia", "Florida", "Georgia",
    "Hawaii", "Idaho", "Illinois", "Indiana", "Iowa", "Kansas", "Kentucky",
    "Louisiana", "Maine", "Maryland", "Massachusetts", "Michigan", "Minnesota",
    "Mississippi", "Missouri", "Montana", "Nebraska", "Nevada", "New Hampshire",
    "New Jersey", "New Mexico", "New York", "North Carolina", "North Dakota", "Ohio",
    "Oklahoma", "Oregon", "Pennsylvania", "Rhode Island", "South Carolina",
    "South Dakota", "Tennessee", "Texas", "Utah", "Vermont", "Virginia",
    "Washington", "West Virginia", "Wisconsin", "Wyoming",
)

STATE_ABBREVIATIONS = (
    "AK", "AL", "AR", "AZ", "CA", "CO", "CT", "DC", "DE", "FL", "GA", "HI", "IA",
    "ID", "IL", "IN", "KS", "KY", "LA", "MA", "MD", "ME", "MI", "MN", "MO", "MS",
    "MT", "NC", "ND", "NE", "NH", "NJ", "NM", "NV", "NY", "OH", "OK", "OR", "PA",
    "RI", "SC", "SD", "TN", "TX", "UT", "VA", "VT", "WA", "WI", "WV", "WY",
)

COUNTRIES = (
    "Afghanistan", "Albania", "Algeria", "American Samoa", "Andorra", "Angola",
    "Anguilla", "Antarctica (the territory South of 60 deg S)",
    "Antigua and Barbuda", "Argentina", "Armenia", "Aruba", "Australia", "Austria",
    "Azerbaijan",
    "Bahamas", "Bahrain", "Bangladesh", "Barbados", "Belarus", "Belgium", "Belize",
    "Benin", "Bermuda", "Bhutan", "Bolivia", "Bosnia and Herzegovina", "Botswana",
    "Bouvet Island (Bouvetoya)", "Brazil",
    "British Indian Ocean Territory (Chagos Archipelago)", "British Virgin Islands",
    "Brunei Darussalam", "Bulgaria", "Burkina Faso", "Burundi",
    "Cambodia", "Cameroon", "Canada", "Cape Verde", "Cayman Islands",
    "Central African Republic", "Chad", "Chile", "China", "Christmas Island",
    "Cocos (Keeling) Islands", "Colombia", "Comoros", "Congo", "Cook Islands",
    "Costa Rica", 'Cote d"Ivoire', "Croatia", "Cuba", "Cyprus", "Czech Republic",
    "Denmark", "Djibouti", "Dominica", "Dominican Republic",
    "Ecuador", "Egypt", "El Salvador", "Equatorial Guinea", "Eritrea", "Estonia",
    "Ethiopia",
    "Faroe Islands", "Falkland Islands (Malvinas)", "Fiji", "Finland", "France",
    "French Guiana", "French Polynesia", "French Southern Territories",
    "Gabon", "Gambia", "Georgia", "Germany", "Ghana", "Gibraltar", "Greece",
    "Greenland", "Grenada", "Guadeloupe", "Guam", "Guatemala", "Guernsey", "Guinea",
    "Guinea-Bissau", "Guyana",
    "Haiti", "Heard Island and McDonald Islands", "Holy See (Vatican City State)",
    "Honduras", "Hong Kong", "Hungary",
    "Iceland", "India", "Indonesia", "Iran", "Iraq", "Ireland", "Isle of Man",
    "Israel", "Italy",
    "Jamaica", "Japan", "Jersey", "Jordan",
    "Kazakhstan", "Kenya", "Kiribati", "Korea", "Korea", "Kuwait", "Kyrgyz Republic",
    'Lao People"s Democratic Republic', "Latvia", "Lebanon", "Lesotho", "Liberia",
    "Libyan Arab Jamahiriya", "Liechtenstein", "Lithuania", "Luxembourg",
    "Macao", "Macedonia", "Madagascar", "Malawi", "Malaysia", "Maldives", "Mali",
    "Malta", "Marshall Islands", "Martinique", "Mauritania", "Mauritius", "Mayotte",
    "Mexico", "Micronesia", "Moldova", "Monaco", "Mongolia", "Montenegro",
    "Montserrat", "Morocco", "Mozambique", "Myanmar",
    "Namibia", "Nauru", "Nepal", "Netherlands Antilles", "Netherlands",
    "New Caledonia", "New Zealand", "Nicaragua", "Niger", "Nigeria", "Niue",
    "Norfolk Island", "Northern Mariana Islands", "Norway",
    "Oman",
    "Pakistan", "Palau", "Palestinian Territories", "Panama", "Papua New Guinea",
    "Paraguay", "Peru", "Philippines", "Pitcairn Islands", "Poland", "Portugal",
    "Puerto Rico",
    "Qatar",
    "Reunion", "Romania", "Russian Federation", "Rwanda",
    "Saint Barthelemy", "Saint Helena", "Saint Kitts and Nevis", "Saint Lucia",
    "Saint Martin", "Saint Pierre and Miquelon", "Saint Vincent and the Grenadines",
    "Samoa", "San Marino", "Sao Tome and Principe", "Saudi Arabia", "Senegal",
    "Serbia", "Seychelles", "Sierra Leone", "Singapore",
    "Slovakia (Slovak Republic)", "Slovenia", "Solomon Islands", "Somalia",
    "South Africa", "South Georgia and the South Sandwich Islands", "Spain",
    "Sri Lanka", "Sudan", "Suriname", "Svalbard & Jan Mayen Islands", "Swaziland",
    "Sweden", "Switzerland", "Syrian Arab Republic",
    "Taiwan", "Tajikistan", "Tanzania", "Thailand", "Timor-Leste", "Togo",
    "Tokelau", "Tonga", "Trinidad and Tobago", "Tunisia", "Turkey", "Turkmenistan",
    "Turks and Caicos Islands", "Tuvalu",
    "Uganda", "Ukraine", "United Arab Emirates", "United Kingdom",
    "United States of America", "United States Minor Outlying Islands",
    "United States Virgin Islands", "Uruguay", "Uzbekistan",
    "Vanuatu", "Venezuela", "Vietnam",
    "Wallis and Futuna", "Western Sahara",
    "Yemen",
    "Zambia", "Zimbabwe",
)

COUNTRY_ABBREVIATIONS = (
    "ABW", "AFG", "AGO", "AIA", "ALA", "ALB", "AND", "ARE", "ARG", "ARM", "ASM",
    "ATA", "ATF", "ATG", "AUS", "AUT", "AZE", "BDI", "BEL", "BEN", "BES", "BFA",
    "BGD", "BGR", "BHR", "BHS", "BIH", "BLM", "BLR", "BLZ", "BMU", "BOL", "BRA",
    "BRB", "BRN", "BTN", "BVT", "BWA", "CAF", "CAN", "CCK", "CHE", "CHL", "CHN",
    "CIV", "CMR", "COD", "COG", "COK", "COL", "COM", "CPV", "CRI", "CUB", "CUW",
    "CXR", "CYM", "CYP", "CZE", "DEU", "DJI", "DMA", "DNK", "DOM", "DZA", "ECU",
    "EGY", "ERI", "ESH", "ESP", "EST", "ETH", "FIN", "FJI", "FLK", "FRA", "FRO",
    "FSM", "GAB", "GBR", "GEO", "GGY", "GHA", "GIB", "GIN", "GLP", "GMB", "GNB",
    "GNQ", "GRC", "GRD", "GRL", "GTM", "GUF", "GUM", "GUY", "HKG", "HMD", "HND",
    "HRV", "HTI", "HUN", "IDN", "IMN", "IND", "IOT", "IRL", "IRN", "IRQ", "ISL",
    "ISR", "ITA", "JAM", "JEY", "JOR", "JPN", "KAZ", "KEN", "KGZ", "KHM", "KIR",
    "KNA", "KOR", "KWT", "LAO", "LBN", "LBR", "LBY", "LCA", "LIE", "LKA", "LSO",
    "LTU", "LUX", "LVA", "MAC", "MAF", "MAR", "MCO", "MDA", "MDG", "MDV", "MEX",
    "MHL", "MKD", "MLI", "MLT", "MMR", "MNE", "MNG", "MNP", "MOZ", "MRT", "MSR",
    "MTQ", "MUS", "MWI",
    "MYS", "MYT", "NAM", "NCL", "NER", "NFK", "NGA", "NIC", "NIU", "NLD", "NOR",
    "NPL", "NRU", "NZL", "OMN", "PAK", "PAN", "PCN", "PER", "PHL", "PLW", "PNG",
    "POL", "PRI", "PRK", "PRT", "PRY", "PSE", "PYF", "QAT", "REU", "ROU", "RUS",
    "RWA", "SAU", "SDN", "SEN", "SGP", "SGS", "SHN", "SJM", "SLB", "SLE", "SLV",
    "SMR", "SOM", "SPM", "SRB", "SSD", "STP", "SUR", "SVK", "SVN", "SWE", "SWZ",
    "SXM", "SYC", "SYR", "TCA", "TCD", "TGO", "THA", "TJK", "TKL", "TKM", "TLS",
    "TON", "TTO", "TUN", "TUR", "TUV", "TWN", "TZA", "UGA", "UKR", "UMI", "URY",
    "USA", "UZB", "VAT",
    "VCT", "VEN", "VGB", "VIR", "VNM", "VUT", "WLF", "WSM", "YEM", "ZAF", "ZMB",
    "ZWE",
)

COUNTRY_CODES = (
    "AD", "AE", "AF", "AG", "AI", "AL", "AM", "AO", "AQ", "AR", "AS", "AT", "AU",
    "AW", "AX", "AZ",
    "BA", "BB", "BD", "BE", "BF", "BG", "BH", "BI", "BJ", "BL", "BM", "BN", "BO",
    "BQ", "BR", "BS", "BT", "BV", "BW", "BY", "BZ",
    "CA", "CC", "CD", "CF", "CG", "CH", "CI", "CK", "CL", "CM", "CN", "CO", "CR",
    "CU", "CV", "CW", "CX", "CY", "CZ",
    "DE", "DJ", "DK", "DM", "DO", "DZ",
    "EC", "EE", "EG", "EH", "ER", "ES", "ET",
    "FI", "FJ", "FK", "FM", "FO", "FR",
    "GA", "GB", "GD", "GE", "GF", "GG", "GH", "GI", "GL", "GM", "GN", "GP", "GQ",
    "GR", "GS", "GT", "GU", "GW", "GY",
    "HK", "HM", "HN", "HR", "HT", "HU",
    "ID", "IE", "IL", "IM", "IN", "IO", "IQ", "IR", "IS", "IT",
    "JE", "JM", "JO", "JP",
    "KE", "KG", "KH", "KI", "KM", "KN", "KP", "KR", "KW", "KY", "KZ",
    "LA", "LB", "LC", "LI", "LK", "LR", "LS", "LT", "LU", "LV", "LY",
    "MA", "MC", "MD", "ME", "MF", "MG", "MH", "MK", "ML", "MM", "MN", "MO", "MP",
    "MQ", "MR", "MS", "MT", "MU", "MV", "MW", "MX", "MY", "MZ",
    "NA", "NC", "NE", "NF", "NG", "NI", "NL", "NO", "NP", "NR", "NU", "NZ",
    "OM",
    "PA", "PE", "PF", "PG", "PH", "PK", "PL", "PM", "PN", "PR", "PS", "PT", "PW",
    "PY",
    "QA",
    "RE", "RO", "RS", "RU", "RW",
    "SA", "SB", "SC", "SD", "SE", "SG", "SH", "SI", "SJ", "SK", "SL", "SM", "SN",
    "SO", "SR", "SS", "ST", "SV", "SX", "SY", "SZ",
    "TC", "TD", "TF", "TG", "TH", "TJ", "TK", "TL", "TM", "TN", "TO", "TR", "TT",
    "TV", "TW", "TZ",
    "UA", "UG", "UM", "US", "UY", "UZ",
    "VA", "VC", "VE", "VG", "VI", "VN", "VU",
    "WF", "WS",
    "YE", "YT",
    "ZA", "ZM", "ZW",
)

SECONDARY_ADDRESS_FORMATS = ("Apt. ###", "Suite ###")


class _Source(Protocol):
    def random_string_element(self, items: Sequence[str]) -> str: ...

    def numerify(self, text: str) -> str: ...

    def bothify(self, text: str) -> str: ...


class Address:
    """Produces random parts of postal addresses."""

    def __init__(self, faker: _Source) -> None:
        self.faker = faker

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.faker!r})"

    def city_prefix(self) -> str:
        """Return a city name prefix such as 'North'."""
        return self.faker.random_string_element(CITY_PREFIXES)

    def secondary_address(self) -> str:
        """Return an apartment or suite designation."""
        return self.faker.bothify(
            self.faker.random_string_element(SECONDARY_ADDRESS_FORMATS)
        )

    def state(self) -> str:
        """Return a US state name."""
        return self.faker.random_string_element(STATES)

    def state_abbr(self) -> str:
        """Return a US state abbreviation."""
        return self.faker.random_string_element(STATE_ABBREVIATIONS)

    def city_suffix(self) -> str:
        """Return a city name suffix such as 'ville'."""
        return self.faker.random_string_element(CITY_SUFFIXES)

    def street_suffix(self) -> str:
        """Return a street suffix such as 'Avenue'."""
        return self.faker.random_string_element(STREET_SUFFIXES)

    def building_number(self) -> str:
        """Return a building number; the leading '%' of the format is kept."""
        return self.faker.numerify(
            self.faker.random_string_element(BUILDING_NUMBER_FORMATS)
        )

    def post_code(self) -> str:
        """Return a five or nine digit postal code."""
        return self.faker.bothify(self.faker.random_string_element(POST_CODE_FORMATS))

    def country(self) -> str:
        """Return a country name."""
        return self.faker.random_string_element(COUNTRIES)

    def country_abbr(self) -> str:
        """Return a three-letter country abbreviation."""
        return self.faker.random_string_element(COUNTRY_ABBREVIATIONS)

    def country_code(self) -> str:
        """Return a two-letter country code."""
        return self.faker.random_string_element(COUNTRY_CODES)

    def latitude(self) -> float:
        """Return a latitude in [0, 100) with six decimals."""
        return float(self.faker.numerify("##.######"))

    def longitude(self) -> float:
        """Return a longitude in [0, 100) with six decimals."""
        return float(self.faker.numerify("##.######"))