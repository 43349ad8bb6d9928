"""Static satellite and constellation reference tables."""

from stellar.catalog.characteristics import (
    ERROR_CHARACTERISTICS,
    ORBITAL_PARAMETERS,
    ErrorCharacteristics,
    OrbitalParameters,
    get_error_characteristics,
    get_orbital_parameters,
)
from stellar.catalog.satellites import (
    CONSTELLATIONS,
    SATELLITES,
    Satellite,
    find_satellite,
    resolve_satellite,
    satellites_by_constellation,
)
from stellar.catalog.sources import DATA_SOURCES, data_sources_dict

__all__ = [
    "CONSTELLATIONS",
    "DATA_SOURCES",
    "ERROR_CHARACTERISTICS",
    "ORBITAL_PARAMETERS",
    "SATELLITES",
    "ErrorCharacteristics",
    "OrbitalParameters",
    "Satellite",
    "data_sources_dict",
    "find_satellite",
    "get_error_characteristics",
    "get_orbital_parameters",
    "resolve_satellite",
    "satellites_by_constellation",
]
