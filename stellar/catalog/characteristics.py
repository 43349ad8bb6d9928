"""Per-constellation broadcast error characteristics and orbital parameters.

Values follow IGS published statistics and Montenbruck et al. (2017),
"Broadcast versus precise ephemerides: a multi-GNSS perspective".
Clock quantities are nanoseconds, orbit quantities metres.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class ErrorCharacteristics:
    """Broadcast-vs-precise error statistics for one constellation."""

    broadcast_clock_rms: float
    broadcast_clock_max: float
    broadcast_orbit_radial: float
    broadcast_orbit_along: float
    broadcast_orbit_cross: float
    igs_rapid_clock: float | None = None
    igs_final_clock: float | None = None
    drift_rate: float | None = None
    phm_stability: float | None = None
    time_bias: float | None = None
    geo_clock_rms: float | None = None
    gso_clock_rms: float | None = None
    position_accuracy_m: float | None = None
    timing_accuracy_ns: float | None = None

    def signal_rms(self, signal: str) -> float:
        """Base RMS for a signal selector; anything unrecognised means clock."""

        if signal == "radial":
            return self.broadcast_orbit_radial
        if signal == "along":
            return self.broadcast_orbit_along
        if signal == "cross":
            return self.broadcast_orbit_cross
        return self.broadcast_clock_rms


ERROR_CHARACTERISTICS: Mapping[str, ErrorCharacteristics] = MappingProxyType(
    {
        "GPS": ErrorCharacteristics(
            broadcast_clock_rms=5.0,
            broadcast_clock_max=15.0,
            broadcast_orbit_radial=0.5,
            broadcast_orbit_along=2.5,
            broadcast_orbit_cross=1.0,
            igs_rapid_clock=0.075,
            igs_final_clock=0.050,
            drift_rate=1e-13,
        ),
        "Galileo": ErrorCharacteristics(
            broadcast_clock_rms=3.0,
            broadcast_clock_max=10.0,
            broadcast_orbit_radial=0.3,
            broadcast_orbit_along=1.5,
            broadcast_orbit_cross=0.5,
            phm_stability=1e-14,
        ),
        "GLONASS": ErrorCharacteristics(
            broadcast_clock_rms=10.0,
            broadcast_clock_max=30.0,
            broadcast_orbit_radial=1.0,
            broadcast_orbit_along=4.0,
            broadcast_orbit_cross=2.0,
            time_bias=32.2,
        ),
        "BeiDou": ErrorCharacteristics(
            broadcast_clock_rms=7.0,
            broadcast_clock_max=20.0,
            broadcast_orbit_radial=0.8,
            broadcast_orbit_along=3.0,
            broadcast_orbit_cross=1.5,
            geo_clock_rms=12.0,
        ),
        "NavIC": ErrorCharacteristics(
            broadcast_clock_rms=8.0,
            broadcast_clock_max=25.0,
            broadcast_orbit_radial=0.6,
            broadcast_orbit_along=2.0,
            broadcast_orbit_cross=1.2,
            geo_clock_rms=10.0,
            gso_clock_rms=9.0,
            position_accuracy_m=10.0,
            timing_accuracy_ns=50.0,
        ),
    }
)

DEFAULT_CONSTELLATION = "GPS"


def get_error_characteristics(constellation: str | None) -> ErrorCharacteristics:
    """Return the error record for a constellation; unknown names map to GPS."""

    return ERROR_CHARACTERISTICS.get(constellation, ERROR_CHARACTERISTICS[DEFAULT_CONSTELLATION])


@dataclass(frozen=True)
class OrbitalParameters:
    """Nominal orbit geometry (km, hours, degrees)."""

    semi_major_axis_km: float
    orbital_period_h: float
    inclination_deg: float
    altitude_km: float
    eccentricity: float = 0.0
    constellation_type: str | None = None


_GEO = OrbitalParameters(semi_major_axis_km=42164.0, orbital_period_h=24.0, inclination_deg=0.0, altitude_km=35786)

ORBITAL_PARAMETERS: Mapping[str, Mapping[str, OrbitalParameters]] = MappingProxyType(
    {
        "GPS": MappingProxyType(
            {
                "MEO": OrbitalParameters(26559.7, 11.967, 55.0, 20180, constellation_type="Walker 24/6/1"),
            }
        ),
        "Galileo": MappingProxyType(
            {
                "MEO": OrbitalParameters(29600.3, 14.08, 56.0, 23222, constellation_type="Walker 24/3/1"),
            }
        ),
        "GLONASS": MappingProxyType(
            {
                "MEO": OrbitalParameters(25508.0, 11.26, 64.8, 19130, constellation_type="Walker 24/3/1"),
            }
        ),
        "BeiDou": MappingProxyType(
            {
                "MEO": OrbitalParameters(27906.1, 12.87, 55.0, 21528),
                "GEO": _GEO,
            }
        ),
        "NavIC": MappingProxyType(
            {
                "GEO": _GEO,
                "GSO": OrbitalParameters(42164.0, 24.0, 29.0, 35786, constellation_type="figure-8 ground track"),
            }
        ),
    }
)


def get_orbital_parameters(constellation: str, orbit: str | None = None) -> OrbitalParameters:
    """Return nominal orbit geometry; the first orbit class is used when ``orbit`` is absent or unknown."""

    classes = ORBITAL_PARAMETERS.get(constellation, ORBITAL_PARAMETERS[DEFAULT_CONSTELLATION])
    if orbit is not None and orbit in classes:
        return classes[orbit]
    return next(iter(classes.values()))
