"""State name -> two-letter code for the birth entity field."""

from types import MappingProxyType

UNSPECIFIED_REGION = "NE"

REGION_CODES = MappingProxyType(
    {
        "DISTRITO FEDERAL": "DF",
        "AGUASCALIENTES": "AS",
        "BAJA CALIFORNIA": "BC",
        "BAJA CALIFORNIA SUR": "BS",
        "CAMPECHE": "CC",
        "CHIAPAS": "CS",
        "CHIHUAHUA": "CH",
        "COAHUILA": "CA",
        "COLIMA": "CM",
        "DURANGO": "DO",
        "ESTADO DE MEXICO": "EM",
        "GUANAJUATO": "GO",
        "GUERRERO": "GR",
        "HIDALGO": "HO",
        "JALISCO": "JO",
        "MICHOACAN": "MC",
        "MORELOS": "MS",
        "NAYARIT": "NT",
        "NUEVO LEON": "NL",
        "OAXACA": "OX",
        "PUEBLA": "PA",
        "QUERETARO": "QO",
        "QUINTANA ROO": "QR",
        "SAN LUIS POTOSI": "SL",
        "SINALOA": "SA",
        "SONORA": "SO",
        "TABASCO": "TB",
        "TAMAULIPAS": "TM",
        "TLAXCALA": "TX",
        "VERACRUZ": "VZ",
        "YUCATAN": "YC",
        "ZACATECAS": "ZS",
    }
)


def region_code(name: str) -> str:
    """Case-insensitive exact match; unknown names map to 'NE' (no especificado)."""
    return REGION_CODES.get(name.upper(), UNSPECIFIED_REGION)
