import pytest

from stellar.catalog import (
    CONSTELLATIONS,
    DATA_SOURCES,
    ERROR_CHARACTERISTICS,
    SATELLITES,
    find_satellite,
    get_error_characteristics,
    get_orbital_parameters,
    resolve_satellite,
    satellites_by_constellation,
)


def test_fleet_composition() -> None:
    assert len(SATELLITES) == 25
    counts = {name: len(satellites_by_constellation(name)) for name in CONSTELLATIONS}
    assert counts == {"GPS": 8, "Galileo": 5, "GLONASS": 3, "BeiDou": 3, "NavIC": 6}
    assert len({sat.id for sat in SATELLITES}) == len(SATELLITES)


def test_fleet_status_assignment_by_position() -> None:
    assert SATELLITES[2].id == "G06"
    assert SATELLITES[2].status == "warning"
    assert SATELLITES[5].id == "G14"
    assert SATELLITES[5].status == "flagged"
    others = [sat.status for idx, sat in enumerate(SATELLITES) if idx not in (2, 5)]
    assert set(others) == {"healthy"}


def test_signal_lists_follow_block_and_generation() -> None:
    assert "L1C" in find_satellite("G14").signal_types
    assert "L1C" not in find_satellite("G01").signal_types
    assert "L1" in find_satellite("N01").signal_types
    assert "L1" not in find_satellite("I02").signal_types
    assert find_satellite("C59").orbit == "GEO"
    assert find_satellite("I03").operational_status == "degraded"


def test_resolve_satellite_falls_back_to_first_entry() -> None:
    assert find_satellite("X99") is None
    assert resolve_satellite("X99") is SATELLITES[0]
    assert resolve_satellite(None) is SATELLITES[0]
    assert resolve_satellite("E07").constellation == "Galileo"


def test_unknown_constellation_returns_gps_characteristics() -> None:
    gps = get_error_characteristics("GPS")
    assert get_error_characteristics("QZSS") == gps
    assert get_error_characteristics(None) is gps
    assert gps.broadcast_clock_rms == 5.0


def test_signal_rms_selector() -> None:
    glonass = get_error_characteristics("GLONASS")
    assert glonass.signal_rms("clock") == 10.0
    assert glonass.signal_rms("radial") == 1.0
    assert glonass.signal_rms("along") == 4.0
    assert glonass.signal_rms("cross") == 2.0
    assert glonass.signal_rms("bogus") == 10.0


def test_reference_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        ERROR_CHARACTERISTICS["GPS"] = ERROR_CHARACTERISTICS["Galileo"]  # type: ignore[index]
    with pytest.raises(TypeError):
        DATA_SOURCES["last_updated"] = "never"  # type: ignore[index]


def test_orbital_parameters_by_orbit_class() -> None:
    assert get_orbital_parameters("GPS").semi_major_axis_km == pytest.approx(26559.7)
    assert get_orbital_parameters("BeiDou", "GEO").orbital_period_h == 24.0
    assert get_orbital_parameters("NavIC", "GSO").inclination_deg == 29.0
    assert get_orbital_parameters("BeiDou").inclination_deg == 55.0
    assert get_orbital_parameters("Unknown") == get_orbital_parameters("GPS")
