"""
Catalog of reference ellipsoids.

Defining parameters follow the EPSG Geodetic Parameter Dataset. Each ellipsoid
is created through the factory matching the parameters its authority defines.
"""

from common.constants import GeodeticConstants
from common.units import Length
from reference.catalog import Catalog
from reference.ellipsoid import Ellipsoid

_from_b = Ellipsoid.from_semi_minor_axis
_from_rf = Ellipsoid.from_inverse_flattening
_sphere = Ellipsoid.from_sphere

AIRY_1830 = _from_b("EPSG::7001", "Airy 1830", 6377563.396, 6356256.909)
AIRY_MODIFIED_1849 = _from_b("EPSG::7002", "Airy Modified 1849", 6377340.189, 6356034.446)
AUSTRALIAN_NATIONAL_SPHEROID = _from_rf("EPSG::7003", "Australian National Spheroid", 6378160, 298.25)
AVERAGE_TERRESTRIAL_SYSTEM_1977 = _from_rf("EPSG::7041", "Average Terrestrial System 1977", 6378135, 298.257)
BESSEL_1841 = _from_rf("EPSG::7004", "Bessel 1841", 6377397.155, 299.1528128)
BESSEL_MODIFIED = _from_rf("EPSG::7005", "Bessel Modified", 6377492.018, 299.1528128)
BESSEL_NAMIBIA = _from_rf("EPSG::7046", "Bessel Namibia", 6377483.865, 299.1528128)
CGCS2000 = _from_rf("EPSG::1024", "CGCS2000", 6378137, 298.257222101)
CLARKE_1858 = _from_b(
    "EPSG::7007", "Clarke 1858",
    Length.from_clarkes_foot(20926348), Length.from_clarkes_foot(20855233)
)
CLARKE_1866 = _from_b("EPSG::7008", "Clarke 1866", 6378206.4, 6356583.8)
CLARKE_1866_AUTHALIC_SPHERE = _sphere("EPSG::7052", "Clarke 1866 Authalic Sphere", 6370997)
CLARKE_1866_MICHIGAN = _from_b(
    "EPSG::7009", "Clarke 1866 Michigan",
    Length.from_us_survey_foot(20926631.531), Length.from_us_survey_foot(20855688.674)
)
CLARKE_1880 = _from_b(
    "EPSG::7034", "Clarke 1880",
    Length.from_clarkes_foot(20926202), Length.from_clarkes_foot(20854895)
)
CLARKE_1880_ARC = _from_rf("EPSG::7013", "Clarke 1880 (Arc)", 6378249.145, 293.4663077)
CLARKE_1880_BENOIT = _from_b("EPSG::7010", "Clarke 1880 (Benoit)", 6378300.789, 6356566.435)
CLARKE_1880_IGN = _from_b("EPSG::7011", "Clarke 1880 (IGN)", 6378249.2, 6356515)
CLARKE_1880_RGS = _from_rf("EPSG::7012", "Clarke 1880 (RGS)", 6378249.145, 293.465)
DANISH_1876 = _from_rf("EPSG::7051", "Danish 1876", 6377019.27, 300)
EVEREST_1830_1937_ADJUSTMENT = _from_rf("EPSG::7015", "Everest 1830 (1937 Adjustment)", 6377276.345, 300.8017)
EVEREST_1830_1962_DEFINITION = _from_rf("EPSG::7044", "Everest 1830 (1962 Definition)", 6377301.243, 300.8017255)
EVEREST_1830_1967_DEFINITION = _from_rf(
    "EPSG::7016", "Everest 1830 (1967 Definition)", 6377298.556, 300.8017,
    aliases=("Everest 1967",)
)
EVEREST_1830_1975_DEFINITION = _from_rf("EPSG::7045", "Everest 1830 (1975 Definition)", 6377299.151, 300.8017255)
EVEREST_1830_MODIFIED = _from_rf("EPSG::7018", "Everest 1830 Modified", 6377304.063, 300.8017)
GRS_1967 = _from_rf("EPSG::7036", "GRS 1967", 6378160, 298.247167427)
GRS_1967_MODIFIED = _from_rf("EPSG::7050", "GRS 1967 Modified", 6378160, 298.25)
GRS_1980 = _from_rf(
    "EPSG::7019", "GRS 1980",
    GeodeticConstants.GRS80_SEMI_MAJOR_AXIS.value,
    GeodeticConstants.GRS80_INVERSE_FLATTENING.value,
    aliases=("International 1979",)
)
GRS_1980_AUTHALIC_SPHERE = _sphere("EPSG::7048", "GRS 1980 Authalic Sphere", 6371007)
HELMERT_1906 = _from_rf("EPSG::7020", "Helmert 1906", 6378200, 298.3)
HOUGH_1960 = _from_rf("EPSG::7053", "Hough 1960", 6378270, 297)
HUGHES_1980 = _from_b("EPSG::7058", "Hughes 1980", 6378273, 6356889.449)
IAG_1975 = _from_rf("EPSG::7049", "IAG 1975", 6378140, 298.257)
INDONESIAN_NATIONAL_SPHEROID = _from_rf("EPSG::7021", "Indonesian National Spheroid", 6378160, 298.247)
INTERNATIONAL_1924 = _from_rf("EPSG::7022", "International 1924", 6378388, 297, aliases=("Hayford 1909",))
INTERNATIONAL_1924_AUTHALIC_SPHERE = _sphere("EPSG::7057", "International 1924 Authalic Sphere", 6371228)
KRASSOWSKY_1940 = _from_rf("EPSG::7024", "Krassowsky 1940", 6378245, 298.3)
NWL_9D = _from_rf("EPSG::7025", "NWL 9D", 6378145, 298.25)
PLESSIS_1817 = _from_rf("EPSG::7027", "Plessis 1817", 6376523, 308.64)
PZ_90 = _from_rf("EPSG::7054", "PZ-90", 6378136, 298.257839303)
STRUVE_1860 = _from_rf("EPSG::7028", "Struve 1860", 6378298.3, 294.73)
WAR_OFFICE = _from_rf("EPSG::7029", "War Office", 6378300, 296)
WGS_1972 = _from_rf("EPSG::7043", "WGS 72", 6378135, 298.26)
WGS_1984 = _from_rf(
    "EPSG::7030", "WGS 84",
    GeodeticConstants.WGS84_SEMI_MAJOR_AXIS.value,
    GeodeticConstants.WGS84_INVERSE_FLATTENING.value,
    aliases=("WGS84", "WGS 1984")
)


def _build():
    return [
        AIRY_1830,
        AIRY_MODIFIED_1849,
        AUSTRALIAN_NATIONAL_SPHEROID,
        AVERAGE_TERRESTRIAL_SYSTEM_1977,
        BESSEL_1841,
        BESSEL_MODIFIED,
        BESSEL_NAMIBIA,
        CGCS2000,
        CLARKE_1858,
        CLARKE_1866,
        CLARKE_1866_AUTHALIC_SPHERE,
        CLARKE_1866_MICHIGAN,
        CLARKE_1880,
        CLARKE_1880_ARC,
        CLARKE_1880_BENOIT,
        CLARKE_1880_IGN,
        CLARKE_1880_RGS,
        DANISH_1876,
        EVEREST_1830_1937_ADJUSTMENT,
        EVEREST_1830_1962_DEFINITION,
        EVEREST_1830_1967_DEFINITION,
        EVEREST_1830_1975_DEFINITION,
        EVEREST_1830_MODIFIED,
        GRS_1967,
        GRS_1967_MODIFIED,
        GRS_1980,
        GRS_1980_AUTHALIC_SPHERE,
        HELMERT_1906,
        HOUGH_1960,
        HUGHES_1980,
        IAG_1975,
        INDONESIAN_NATIONAL_SPHEROID,
        INTERNATIONAL_1924,
        INTERNATIONAL_1924_AUTHALIC_SPHERE,
        KRASSOWSKY_1940,
        NWL_9D,
        PLESSIS_1817,
        PZ_90,
        STRUVE_1860,
        WAR_OFFICE,
        WGS_1972,
        WGS_1984,
    ]


ELLIPSOIDS = Catalog("ellipsoids", _build)
