"""Reference fleet of operational GNSS satellites.

Identifiers, launch dates and clock types follow the public constellation
status pages (NAVCEN, GSC Europa, IAC, CSNO, ISRO). The table is built once
at import time and never modified.
"""

from __future__ import annotations

from dataclasses import dataclass

CONSTELLATIONS = ("GPS", "Galileo", "GLONASS", "BeiDou", "NavIC")

HEALTHY = "healthy"
WARNING = "warning"
FLAGGED = "flagged"
STATUSES = (HEALTHY, WARNING, FLAGGED)


@dataclass(frozen=True)
class Satellite:
    """Static satellite metadata."""

    id: str
    prn: int
    name: str
    constellation: str
    orbit: str
    clock_type: str
    launch_date: str
    signal_types: tuple[str, ...]
    country: str
    status: str = HEALTHY
    operational_status: str = "operational"
    block: str | None = None
    operator: str | None = None
    note: str | None = None


# (id, prn, name, block, launch date, clock type)
_GPS = [
    ("G01", 1, "USA-232 (NAVSTAR 63)", "IIF", "2011-07-16", "Rb"),
    ("G03", 3, "USA-258 (NAVSTAR 72)", "IIF", "2014-10-29", "Rb"),
    ("G06", 6, "USA-251 (NAVSTAR 70)", "IIF", "2014-05-17", "Cs"),
    ("G09", 9, "USA-256 (NAVSTAR 71)", "IIF", "2014-08-02", "Rb"),
    ("G10", 10, "USA-265 (NAVSTAR 75)", "IIF", "2015-10-31", "Rb"),
    ("G14", 14, "USA-304 (GPS III-04 Sacagawea)", "III", "2020-11-05", "Rb"),
    ("G18", 18, "USA-309 (GPS III-05 Neil Armstrong)", "III", "2021-06-17", "Rb"),
    ("G23", 23, "USA-319 (GPS III-06 Amelia Earhart)", "III", "2023-01-18", "Rb"),
]

# (id, prn, name, launch date, clock type)
_GALILEO = [
    ("E01", 1, "GSAT0210 (FOC-FM7)", "2016-05-24", "PHM"),
    ("E02", 2, "GSAT0211 (FOC-FM8)", "2016-05-24", "Rb"),
    ("E07", 7, "GSAT0207 (FOC-FM7)", "2015-12-17", "PHM"),
    ("E08", 8, "GSAT0208 (FOC-FM8)", "2015-12-17", "Rb"),
    ("E24", 24, "GSAT0219 (FOC-FM19)", "2018-07-25", "PHM"),
]

# (id, slot, name, launch date)
_GLONASS = [
    ("R01", 1, "GLONASS-M 756", "2019-05-27"),
    ("R02", 2, "GLONASS-M 747", "2014-12-01"),
    ("R07", 7, "GLONASS-K1 (751)", "2014-02-26"),
]

# (id, prn, name, orbit, launch date, clock type)
_BEIDOU = [
    ("C19", 19, "BeiDou-3 M1-S", "MEO", "2017-11-05", "Rb"),
    ("C20", 20, "BeiDou-3 M2-S", "MEO", "2017-11-05", "PHM"),
    ("C59", 59, "BeiDou-3 GEO-1", "GEO", "2018-11-01", "PHM"),
]

# (id, prn, name, orbit, launch date, published status, generation, note)
_NAVIC = [
    ("I02", 2, "IRNSS-1B", "GSO", "2014-04-04", "operational", 1,
     "First operational IRNSS satellite, exceeded design life"),
    ("I03", 3, "IRNSS-1C", "GEO", "2014-10-16", "degraded", 1, "Atomic clock anomaly reported"),
    ("I04", 4, "IRNSS-1D", "GSO", "2015-03-28", "degraded", 1, None),
    ("I06", 6, "IRNSS-1F", "GSO", "2016-03-10", "operational", 1, None),
    ("I09", 9, "IRNSS-1I", "GSO", "2018-04-12", "operational", 1,
     "Replacement for IRNSS-1A clock failure"),
    ("N01", 10, "NVS-01", "GEO", "2023-05-29", "operational", 2,
     "First NVS satellite with indigenous atomic clock & L1 band"),
]

# Fleet positions that carry a non-healthy dashboard status.
_STATUS_BY_INDEX = {2: WARNING, 5: FLAGGED}


def _build_fleet() -> tuple[Satellite, ...]:
    fleet: list[dict] = []
    for sv_id, prn, name, block, launched, clock in _GPS:
        signals = ["L1 C/A", "L2C", "L5"] + (["L1C"] if block == "III" else [])
        fleet.append(
            dict(id=sv_id, prn=prn, name=name, constellation="GPS", orbit="MEO", block=block,
                 clock_type=clock, launch_date=launched, signal_types=tuple(signals), country="USA")
        )
    for sv_id, prn, name, launched, clock in _GALILEO:
        fleet.append(
            dict(id=sv_id, prn=prn, name=name, constellation="Galileo", orbit="MEO", clock_type=clock,
                 launch_date=launched, signal_types=("E1", "E5a", "E5b", "E6"), country="EU")
        )
    for sv_id, slot, name, launched in _GLONASS:
        fleet.append(
            dict(id=sv_id, prn=slot, name=name, constellation="GLONASS", orbit="MEO", clock_type="Cs",
                 launch_date=launched, signal_types=("G1", "G2", "G3"), country="Russia")
        )
    for sv_id, prn, name, orbit, launched, clock in _BEIDOU:
        fleet.append(
            dict(id=sv_id, prn=prn, name=name, constellation="BeiDou", orbit=orbit, clock_type=clock,
                 launch_date=launched, signal_types=("B1I", "B1C", "B2a", "B2b", "B3I"), country="China")
        )
    for sv_id, prn, name, orbit, launched, published, generation, note in _NAVIC:
        signals = ["L5", "S-Band"] + (["L1"] if generation == 2 else [])
        fleet.append(
            dict(id=sv_id, prn=prn, name=name, constellation="NavIC", orbit=orbit, clock_type="Rb",
                 launch_date=launched, signal_types=tuple(signals), country="India", operator="ISRO",
                 operational_status=published, note=note)
        )
    return tuple(
        Satellite(status=_STATUS_BY_INDEX.get(idx, HEALTHY), **entry) for idx, entry in enumerate(fleet)
    )


SATELLITES: tuple[Satellite, ...] = _build_fleet()
_BY_ID = {sat.id: sat for sat in SATELLITES}


def find_satellite(satellite_id: str) -> Satellite | None:
    """Return the reference satellite with the given id, if any."""

    return _BY_ID.get(satellite_id)


def resolve_satellite(satellite_id: str | None) -> Satellite:
    """Return the requested satellite, falling back to the first fleet entry."""

    sat = _BY_ID.get(satellite_id) if satellite_id is not None else None
    return sat if sat is not None else SATELLITES[0]


def satellites_by_constellation(constellation: str) -> list[Satellite]:
    return [sat for sat in SATELLITES if sat.constellation == constellation]
