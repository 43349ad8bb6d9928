"""Citation metadata for the reference tables."""

from __future__ import annotations

from types import MappingProxyType

DATA_SOURCES = MappingProxyType(
    {
        "constellation_status": MappingProxyType(
            {
                "GPS": "https://www.navcen.uscg.gov/gps-constellation-status",
                "Galileo": "https://www.gsc-europa.eu/system-service-status/constellation-information",
                "GLONASS": "https://glonass-iac.ru/en/GLONASS/",
                "BeiDou": "http://www.csno-tarc.cn/en/system/constellation",
                "NavIC": "https://www.isro.gov.in/NavIC.html",
            }
        ),
        "technical_documents": MappingProxyType(
            {
                "NavIC_SIS_ICD": "https://www.isro.gov.in/IRNSS_SIS_ICD_SPS.pdf",
                "GPS_SPS": "https://www.gps.gov/technical/ps/",
                "Galileo_OS_SIS_ICD": (
                    "https://www.gsc-europa.eu/sites/default/files/sites/all/files/Galileo_OS_SIS_ICD_v2.1.pdf"
                ),
            }
        ),
        "precise_products": MappingProxyType(
            {
                "IGS": "https://igs.org/products/",
                "MGEX": "https://igs.org/mgex/",
                "CDDIS": "https://cddis.nasa.gov/Data_and_Derived_Products/GNSS/",
                "ISRO_SAC": "https://www.sac.gov.in/Vyom/navicpvt.jsp",
            }
        ),
        "research_references": (
            "Montenbruck, O., et al. (2017). \"Broadcast versus precise ephemerides: a multi-GNSS "
            "perspective.\" GPS Solutions, 21(1), 321-330.",
            "Hauschild, A., & Montenbruck, O. (2016). \"Real-time clock estimation for precise orbit "
            "determination of LEO-satellites.\" GPS Solutions, 20(3), 435-444.",
            "Steigenberger, P., & Montenbruck, O. (2017). \"Galileo status: orbits, clocks, and "
            "positioning.\" GPS Solutions, 21(2), 319-331.",
            "Desai, M.V., & Shah, S.N. (2019). \"NavIC/IRNSS Signal Quality Assessment and "
            "Performance.\" IETE Journal of Research.",
            "Zaminpardaz, S., & Teunissen, P.J.G. (2017). \"Analysis of Galileo IOV + FOC signals and "
            "E5 time-frequency characterization.\" GPS Solutions, 21(4), 1563-1580.",
        ),
        "last_updated": "2024-12-15",
        "disclaimer": (
            "Satellite status may change. For real-time status, consult official GNSS operator websites."
        ),
    }
)


def data_sources_dict() -> dict:
    """Plain-dict copy of ``DATA_SOURCES`` for JSON export."""

    out: dict = {}
    for key, value in DATA_SOURCES.items():
        if isinstance(value, MappingProxyType):
            out[key] = dict(value)
        elif isinstance(value, tuple):
            out[key] = list(value)
        else:
            out[key] = value
    return out
