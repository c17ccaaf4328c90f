"""
Static catalogs of reference data.

Prime meridians, areas of use, datums, coordinate systems and reference systems
taken from the EPSG Geodetic Parameter Dataset. Every named entry is a
module-level constant; each catalog lists its entries explicitly and is
populated on first access.

Projected reference systems depend on map projections and are catalogued in
`operations.factory`.
"""

from typing import List

from common.units import Angle
from reference import ellipsoids
from reference.area_of_use import AreaOfUse
from reference.catalog import Catalog
from reference.coordinate_system import (
    AxisDirection,
    CoordinateSystem,
    CoordinateSystemAxis,
    CoordinateSystemType,
)
from reference.crs import (
    CompoundCRS,
    GeocentricCRS,
    Geographic2DCRS,
    Geographic3DCRS,
    VerticalCRS,
)
from reference.datum import GeodeticDatum, VerticalDatum
from reference.meridian import PrimeMeridian

# =========================================================================
# Prime meridians
# =========================================================================

GREENWICH = PrimeMeridian("EPSG::8901", "Greenwich", Angle.from_degree(0))
LISBON = PrimeMeridian("EPSG::8902", "Lisbon", Angle.from_degree(-9, 7, 54.862))
PARIS = PrimeMeridian("EPSG::8903", "Paris", Angle.from_grad(2.5969213))
BOGOTA = PrimeMeridian("EPSG::8904", "Bogota", Angle.from_degree(-74, 4, 51.3))
MADRID = PrimeMeridian("EPSG::8905", "Madrid", Angle.from_degree(-3, 41, 14.55))
ROME = PrimeMeridian("EPSG::8906", "Rome", Angle.from_degree(12, 27, 8.4))
BERN = PrimeMeridian("EPSG::8907", "Bern", Angle.from_degree(7, 26, 22.5))
JAKARTA = PrimeMeridian("EPSG::8908", "Jakarta", Angle.from_degree(106, 48, 27.79))
FERRO = PrimeMeridian("EPSG::8909", "Ferro", Angle.from_degree(-17, 40))
BRUSSELS = PrimeMeridian("EPSG::8910", "Brussels", Angle.from_degree(4, 22, 4.71))
STOCKHOLM = PrimeMeridian("EPSG::8911", "Stockholm", Angle.from_degree(18, 3, 29.8))
ATHENS = PrimeMeridian("EPSG::8912", "Athens", Angle.from_degree(23, 42, 58.815))
OSLO = PrimeMeridian("EPSG::8913", "Oslo", Angle.from_degree(10, 43, 22.5))

MERIDIANS = Catalog("meridians", lambda: [
    GREENWICH, LISBON, PARIS, BOGOTA, MADRID, ROME, BERN,
    JAKARTA, FERRO, BRUSSELS, STOCKHOLM, ATHENS, OSLO,
])

# =========================================================================
# Areas of use (west, east, south, north in degrees)
# =========================================================================

_area = AreaOfUse.from_degrees

ALGERIA_NORTH_OF_32N = _area("EPSG::1365", "Algeria - north of 32°N", -2.95, 9.09, 31.99, 37.14)
ANTARCTICA_ADELIE_LAND = _area("EPSG::2817", "Antarctica - Adelie Land coastal area", 136.0, 142.0, -67.13, -65.61)
CZECHOSLOVAKIA = _area("EPSG::1306", "Europe - Czechoslovakia", 12.09, 22.56, 47.73, 51.06)
EUROPE_ETRS89 = _area("EPSG::1298", "Europe - ETRS89", -16.1, 39.65, 32.88, 84.17)
EUROPE_EVRF2000 = _area("EPSG::1299", "Europe - EVRF2000", -9.56, 31.59, 35.95, 71.21)
GERMANY_THURINGEN = _area("EPSG::2544", "Germany - Thuringen", 9.92, 12.56, 50.2, 51.64)
GREAT_BRITAIN = _area("EPSG::1264", "UK - Great Britain; Isle of Man", -8.82, 1.92, 49.79, 60.94)
GREECE_ONSHORE = _area("EPSG::3254", "Greece - onshore", 19.57, 28.3, 34.88, 41.75)
HUNGARY = _area("EPSG::1119", "Hungary", 16.11, 22.9, 45.74, 48.58)
JAMAICA_ONSHORE = _area("EPSG::3342", "Jamaica - onshore", -78.43, -76.17, 17.64, 18.58)
MALAYSIA_EAST = _area("EPSG::1362", "Malaysia - East Malaysia", 109.55, 119.33, 0.85, 7.67)
NETHERLANDS_ONSHORE = _area("EPSG::1275", "Netherlands - onshore", 3.2, 7.22, 50.75, 53.7)
NEW_ZEALAND_ONSHORE = _area("EPSG::3285", "New Zealand - onshore and nearshore", 165.87, 179.27, -47.65, -33.89)
NORTH_AMERICA_NAD27 = _area(
    "EPSG::1349", "North America - NAD27", 167.65, -47.74, 7.15, 83.17,
    remarks="Area crosses 180-degree meridian."
)
NORTH_AMERICA_NAD83 = _area(
    "EPSG::1350", "North America - NAD83", 167.65, -47.74, 14.92, 86.46,
    remarks="Area crosses 180-degree meridian."
)
TRINIDAD = _area("EPSG::1339", "Trinidad and Tobago - Trinidad", -62.09, -60.0, 9.83, 11.51)
TUNISIA = _area("EPSG::1236", "Tunisia", 7.49, 13.67, 30.23, 38.41)
USA_ALABAMA_SPCS_W = _area("EPSG::2155", "USA - Alabama - SPCS - W", -88.48, -86.3, 30.14, 35.02)
USA_CONUS_ONSHORE = _area("EPSG::1323", "USA - CONUS - onshore", -124.79, -66.91, 24.41, 49.38)
USA_TEXAS_SPCS27_SC = _area("EPSG::2256", "USA - Texas - SPCS27 - SC", -105.0, -93.76, 27.78, 30.67)
WORLD = AreaOfUse.WORLD
WORLD_NORTH_OF_60N = _area("EPSG::1996", "World - N hemisphere - north of 60°N", -180, 180, 60, 90)
WORLD_SOUTH_OF_60S = _area("EPSG::1997", "World - S hemisphere - south of 60°S", -180, 180, -90, -60)
WORLD_80S_TO_84N = _area("EPSG::3391", "World - between 80°S and 84°N", -180, 180, -80, 84)
WORLD_NORTH_0_TO_84N = _area("EPSG::1998", "World - N hemisphere - 0°N to 84°N", -180, 180, 0, 84)
WORLD_SOUTH_0_TO_80S = _area("EPSG::1999", "World - S hemisphere - 0°N to 80°S", -180, 180, -80, 0)


def world_zone(zone: int, north: bool = True) -> AreaOfUse:
    """Return the area of a 6° wide UTM zone.

    Parameters
    ----------
    zone : int
        Zone number in [1, 60]; zone 1 spans 180°W to 174°W.
    north : bool
        Northern (0°N to 84°N) or southern (80°S to 0°N) hemisphere.

    Raises
    ------
    ValueError
        If the zone number is out of range.
    """
    if not 1 <= zone <= 60:
        raise ValueError(f"The zone number {zone} is not in [1, 60].")
    west = -180 + 6 * (zone - 1)
    code = 1872 + (2 * zone - 1 if north else 2 * zone)
    hemisphere = "N" if north else "S"
    south, northern_bound = (0, 84) if north else (-80, 0)
    east_label = f"{abs(west + 6)}°{'E' if west + 6 >= 0 else 'W'}"
    west_label = f"{abs(west)}°{'E' if west >= 0 else 'W'}"
    return _area(
        f"EPSG::{code}",
        f"World - {hemisphere} hemisphere - {west_label} to {east_label}",
        west, west + 6, south, northern_bound
    )


def _build_areas() -> List[AreaOfUse]:
    areas = [
        ALGERIA_NORTH_OF_32N, ANTARCTICA_ADELIE_LAND, CZECHOSLOVAKIA, EUROPE_ETRS89,
        EUROPE_EVRF2000, GERMANY_THURINGEN, GREAT_BRITAIN, GREECE_ONSHORE, HUNGARY,
        JAMAICA_ONSHORE, MALAYSIA_EAST, NETHERLANDS_ONSHORE, NEW_ZEALAND_ONSHORE,
        NORTH_AMERICA_NAD27, NORTH_AMERICA_NAD83, TRINIDAD, TUNISIA, USA_ALABAMA_SPCS_W,
        USA_CONUS_ONSHORE, USA_TEXAS_SPCS27_SC, WORLD, WORLD_NORTH_OF_60N,
        WORLD_SOUTH_OF_60S, WORLD_80S_TO_84N, WORLD_NORTH_0_TO_84N, WORLD_SOUTH_0_TO_80S,
    ]
    for north in (True, False):
        areas.extend(world_zone(zone, north) for zone in range(1, 61))
    return areas


AREAS_OF_USE = Catalog("areas of use", _build_areas)

# =========================================================================
# Geodetic datums
# =========================================================================

AMERSFOORT = GeodeticDatum(
    "EPSG::6289", "Amersfoort", ellipsoids.BESSEL_1841, GREENWICH, NETHERLANDS_ONSHORE,
    anchor_point="Fundamental point: Amersfoort. Latitude: 52°09'22.178\"N, longitude: 5°23'15.478\"E.",
    scope="Geodetic survey, cadastre, topographic mapping, engineering survey."
)
CARTHAGE = GeodeticDatum(
    "EPSG::6223", "Carthage", ellipsoids.CLARKE_1880_IGN, GREENWICH, TUNISIA,
    anchor_point="Fundamental point: Carthage. Latitude: 36°51'06.50\"N, longitude: 10°19'20.72\"E.",
    realization_epoch="1925", scope="Topographic mapping."
)
ETRS89 = GeodeticDatum(
    "EPSG::6258", "European Terrestrial Reference System 1989", ellipsoids.GRS_1980, GREENWICH,
    EUROPE_ETRS89, aliases=("ETRS89", "European Terrestrial Reference Frame 1989"),
    anchor_point="Fixed to the stable part of the Eurasian continental plate and consistent with ITRS at the epoch 1989.0.",
    realization_epoch="1989", scope="Geodetic survey."
)
GGRS87 = GeodeticDatum(
    "EPSG::6121", "Greek Geodetic Reference System 1987", ellipsoids.GRS_1980, GREENWICH,
    GREECE_ONSHORE, aliases=("GGRS87",),
    anchor_point="Fundamental point: Dionysos. Latitude 38°04'33.8\"N, longitude 23°55'51.0\"E; geoid height 7.0 m.",
    realization_epoch="1987", scope="Topographic mapping."
)
HD1909 = GeodeticDatum(
    "EPSG::1024", "Hungarian Datum 1909", ellipsoids.BESSEL_1841, GREENWICH, HUNGARY,
    aliases=("HD1909",), remarks="Replaced earlier HD1863 adjustment. Replaced by HD72.",
    realization_epoch="1909", scope="Topographic mapping."
)
HD72 = GeodeticDatum(
    "EPSG::6237", "Hungarian Datum 1972", ellipsoids.GRS_1967, GREENWICH, HUNGARY,
    aliases=("HD72",), remarks="Replaced Hungarian Datum 1909.",
    anchor_point="Fundamental point: Szőlőhegy. Latitude: 47°17'32.6156\"N, longitude 19°36'09.9865\"E; geoid height 6.56m.",
    realization_epoch="1972", scope="Topographic mapping."
)
JAMAICA_1969 = GeodeticDatum(
    "EPSG::6242", "Jamaica 1969", ellipsoids.CLARKE_1866, GREENWICH, JAMAICA_ONSHORE,
    aliases=("JAD69",), anchor_point="Fundamental point: Fort Charles.",
    realization_epoch="1969", scope="Topographic mapping."
)
NAD27 = GeodeticDatum(
    "EPSG::6267", "North American Datum 1927", ellipsoids.CLARKE_1866, GREENWICH,
    NORTH_AMERICA_NAD27, aliases=("NAD27",),
    anchor_point="Fundamental point: Meade's Ranch. Latitude: 39°13'26.686\"N, longitude: 98°32'30.506\"W.",
    realization_epoch="1927", scope="Topographic mapping."
)
NAD83 = GeodeticDatum(
    "EPSG::6269", "North American Datum 1983", ellipsoids.GRS_1980, GREENWICH,
    NORTH_AMERICA_NAD83, aliases=("NAD83",), anchor_point="Origin at geocentre.",
    realization_epoch="1986", scope="Topographic mapping."
)
NZGD49 = GeodeticDatum(
    "EPSG::6272", "New Zealand Geodetic Datum 1949", ellipsoids.INTERNATIONAL_1924, GREENWICH,
    NEW_ZEALAND_ONSHORE, aliases=("NZGD49", "GD49"),
    anchor_point="Fundamental point: Papatahi. Latitude: 41°19'08.900\"S, longitude: 175°02'51.000\"E.",
    realization_epoch="1949", scope="Geodetic survey, cadastre, topographic mapping, engineering survey."
)
OSGB_1936 = GeodeticDatum(
    "EPSG::6277", "Ordnance Survey of Great Britain 1936", ellipsoids.AIRY_1830, GREENWICH,
    GREAT_BRITAIN, aliases=("OSGB 1936", "OSGB36"),
    anchor_point="Prior to 2002, fundamental point: Herstmonceux. Latitude: 50°51'55.271\"N, longitude: 0°20'45.882\"E.",
    realization_epoch="1936", scope="Topographic mapping."
)
PD83 = GeodeticDatum(
    "EPSG::6746", "Potsdam Datum/83", ellipsoids.BESSEL_1841, GREENWICH, GERMANY_THURINGEN,
    aliases=("PD/83",), anchor_point="Fundamental point: Rauenberg.",
    realization_epoch="1990", scope="Geodetic survey, cadastre, topographic mapping, engineering survey."
)
S_JTSK = GeodeticDatum(
    "EPSG::6156", "System of the Unified Trigonometrical Cadastral Network", ellipsoids.BESSEL_1841,
    GREENWICH, CZECHOSLOVAKIA, aliases=("S-JTSK",),
    anchor_point="Modification of Austrian MGI datum.", realization_epoch="1920",
    scope="Geodetic survey, cadastre, topographic mapping, engineering survey."
)
TIMBALAI_1948 = GeodeticDatum(
    "EPSG::6298", "Timbalai 1948", ellipsoids.EVEREST_1830_1967_DEFINITION, GREENWICH,
    MALAYSIA_EAST, anchor_point="Fundamental point: Station P85 at Timbalai.",
    realization_epoch="1948", scope="Topographic mapping."
)
TRINIDAD_1903 = GeodeticDatum(
    "EPSG::6302", "Trinidad 1903", ellipsoids.CLARKE_1858, GREENWICH, TRINIDAD,
    anchor_point="Station 00, Harbour Master's Flagstaff, Port of Spain.",
    realization_epoch="1903", scope="Topographic mapping."
)
VOIROL_1879_PARIS = GeodeticDatum(
    "EPSG::6821", "Voirol 1879 (Paris)", ellipsoids.CLARKE_1880_IGN, PARIS, ALGERIA_NORTH_OF_32N,
    remarks="Replaces Voirol 1875 (Paris).",
    anchor_point="Fundamental point: Voirol. Latitude: 40.835864 grads N, longitude: 0.788735 grads E (of Paris).",
    realization_epoch="1879", scope="Topographic mapping."
)
WGS84 = GeodeticDatum(
    "EPSG::6326", "World Geodetic System 1984", ellipsoids.WGS_1984, GREENWICH, WORLD,
    aliases=("WGS84", "WGS 84"),
    anchor_point="Defined through a consistent set of station coordinates.",
    realization_epoch="1984", scope="Satellite navigation."
)

GEODETIC_DATUMS = Catalog("geodetic datums", lambda: [
    AMERSFOORT, CARTHAGE, ETRS89, GGRS87, HD1909, HD72, JAMAICA_1969, NAD27, NAD83,
    NZGD49, OSGB_1936, PD83, S_JTSK, TIMBALAI_1948, TRINIDAD_1903, VOIROL_1879_PARIS, WGS84,
])

# =========================================================================
# Vertical datums
# =========================================================================

BALTIC_1980 = VerticalDatum("EPSG::5187", "Baltic 1980", HUNGARY, realization_epoch="1988")
EGM2008 = VerticalDatum(
    "EPSG::1027", "EGM2008 geoid", WORLD, aliases=("Earth Gravity Model 2008",),
    anchor_point="WGS 84 ellipsoid.", realization_epoch="2008"
)
EGM84 = VerticalDatum(
    "EPSG::5203", "EGM84 geoid", WORLD, aliases=("Earth Gravity Model 1984",),
    anchor_point="WGS 84 ellipsoid.", realization_epoch="1984"
)
EGM96 = VerticalDatum(
    "EPSG::5171", "EGM96 geoid", WORLD, aliases=("Earth Gravity Model 1996",),
    anchor_point="WGS 84 ellipsoid.", realization_epoch="1996"
)
EVRF2000 = VerticalDatum(
    "EPSG::5129", "European Vertical Reference Frame 2000", EUROPE_EVRF2000,
    aliases=("EVRF2000",), realization_epoch="2000",
    anchor_point="Height at Normaal Amsterdams Peil (NAP) is zero."
)
NAVD88 = VerticalDatum(
    "EPSG::5103", "North American Vertical Datum 1988", USA_CONUS_ONSHORE,
    aliases=("NAVD88",), realization_epoch="1991",
    anchor_point="Father's Point, Rimouski, Quebec."
)
ELLIPSOID = VerticalDatum(
    "EPSG::5002", "Ellipsoid", WORLD,
    remarks="Heights measured along the ellipsoid normal."
)

VERTICAL_DATUMS = Catalog("vertical datums", lambda: [
    BALTIC_1980, EGM2008, EGM84, EGM96, EVRF2000, NAVD88, ELLIPSOID,
])

# =========================================================================
# Coordinate system axes and coordinate systems
# =========================================================================

EASTING = CoordinateSystemAxis("EPSG::1", "Easting", AxisDirection.EAST, "metre", abbreviation="E")
NORTHING = CoordinateSystemAxis("EPSG::2", "Northing", AxisDirection.NORTH, "metre", abbreviation="N")
EASTING_US_FOOT = CoordinateSystemAxis("EPSG::1", "Easting", AxisDirection.EAST, "us_survey_foot", abbreviation="X")
NORTHING_US_FOOT = CoordinateSystemAxis("EPSG::2", "Northing", AxisDirection.NORTH, "us_survey_foot", abbreviation="Y")
WESTING = CoordinateSystemAxis("EPSG::40", "Westing", AxisDirection.WEST, "metre", abbreviation="Y")
SOUTHING = CoordinateSystemAxis("EPSG::41", "Southing", AxisDirection.SOUTH, "metre", abbreviation="X")
GEODETIC_LATITUDE = CoordinateSystemAxis(
    "EPSG::106", "Geodetic latitude", AxisDirection.NORTH, "degree", -90.0, 90.0, "Lat"
)
GEODETIC_LONGITUDE = CoordinateSystemAxis(
    "EPSG::107", "Geodetic longitude", AxisDirection.EAST, "degree", -180.0, 180.0, "Lon"
)
ELLIPSOIDAL_HEIGHT = CoordinateSystemAxis("EPSG::110", "Ellipsoidal height", AxisDirection.UP, "metre", abbreviation="h")
GRAVITY_RELATED_HEIGHT = CoordinateSystemAxis("EPSG::114", "Gravity-related height", AxisDirection.UP, "metre", abbreviation="H")
GRAVITY_RELATED_DEPTH = CoordinateSystemAxis("EPSG::113", "Gravity-related depth", AxisDirection.DOWN, "metre", abbreviation="D")
GEOCENTRIC_X = CoordinateSystemAxis("EPSG::115", "Geocentric X", AxisDirection.GEOCENTRIC_X, "metre", abbreviation="X")
GEOCENTRIC_Y = CoordinateSystemAxis("EPSG::116", "Geocentric Y", AxisDirection.GEOCENTRIC_Y, "metre", abbreviation="Y")
GEOCENTRIC_Z = CoordinateSystemAxis("EPSG::117", "Geocentric Z", AxisDirection.GEOCENTRIC_Z, "metre", abbreviation="Z")
BIN_GRID_I = CoordinateSystemAxis("EPSG::1033", "Bin grid I", AxisDirection.COLUMN_POSITIVE, "bin", abbreviation="I")
BIN_GRID_J = CoordinateSystemAxis("EPSG::1034", "Bin grid J", AxisDirection.ROW_POSITIVE, "bin", abbreviation="J")

CARTESIAN_EN_METRE = CoordinateSystem(
    "EPSG::4400", "Cartesian 2D CS. Axes: easting, northing (E,N). UoM: m.",
    CoordinateSystemType.CARTESIAN, [EASTING, NORTHING]
)
CARTESIAN_XY_US_FOOT = CoordinateSystem(
    "EPSG::4497", "Cartesian 2D CS. Axes: easting, northing (X,Y). UoM: ftUS.",
    CoordinateSystemType.CARTESIAN, [EASTING_US_FOOT, NORTHING_US_FOOT]
)
CARTESIAN_WESTING_SOUTHING = CoordinateSystem(
    "EPSG::6501", "Cartesian 2D CS. Axes: westing, southing (Y,X). UoM: m.",
    CoordinateSystemType.CARTESIAN, [WESTING, SOUTHING]
)
CARTESIAN_GEOCENTRIC = CoordinateSystem(
    "EPSG::6500", "Earth centred, earth fixed, righthanded 3D coordinate system. UoM: m.",
    CoordinateSystemType.CARTESIAN, [GEOCENTRIC_X, GEOCENTRIC_Y, GEOCENTRIC_Z]
)
ELLIPSOIDAL_LAT_LON = CoordinateSystem(
    "EPSG::6422", "Ellipsoidal 2D CS. Axes: latitude, longitude. UoM: degree.",
    CoordinateSystemType.ELLIPSOIDAL, [GEODETIC_LATITUDE, GEODETIC_LONGITUDE]
)
ELLIPSOIDAL_LAT_LON_HEIGHT = CoordinateSystem(
    "EPSG::6423", "Ellipsoidal 3D CS. Axes: latitude, longitude, ellipsoidal height. UoM: degree, m.",
    CoordinateSystemType.ELLIPSOIDAL, [GEODETIC_LATITUDE, GEODETIC_LONGITUDE, ELLIPSOIDAL_HEIGHT]
)
ELLIPSOIDAL_LON_LAT = CoordinateSystem(
    "EPSG::6424", "Ellipsoidal 2D CS. Axes: longitude, latitude. UoM: degree.",
    CoordinateSystemType.ELLIPSOIDAL, [GEODETIC_LONGITUDE, GEODETIC_LATITUDE]
)
VERTICAL_DEPTH = CoordinateSystem(
    "EPSG::6498", "Vertical CS. Axis: depth (D). UoM: m.",
    CoordinateSystemType.VERTICAL, [GRAVITY_RELATED_DEPTH]
)
VERTICAL_HEIGHT = CoordinateSystem(
    "EPSG::6499", "Vertical CS. Axis: height (H). UoM: m.",
    CoordinateSystemType.VERTICAL, [GRAVITY_RELATED_HEIGHT]
)
AFFINE_BIN_GRID = CoordinateSystem(
    "EPSG::1033", "Affine 2D CS. Axes: bin grid I, J. UoM: bin.",
    CoordinateSystemType.AFFINE, [BIN_GRID_I, BIN_GRID_J]
)

COORDINATE_SYSTEMS = Catalog("coordinate systems", lambda: [
    CARTESIAN_EN_METRE, CARTESIAN_XY_US_FOOT, CARTESIAN_WESTING_SOUTHING, CARTESIAN_GEOCENTRIC,
    ELLIPSOIDAL_LAT_LON, ELLIPSOIDAL_LAT_LON_HEIGHT, ELLIPSOIDAL_LON_LAT,
    VERTICAL_DEPTH, VERTICAL_HEIGHT, AFFINE_BIN_GRID,
])

# =========================================================================
# Geographic, geocentric, vertical and compound reference systems
# =========================================================================


def _geographic(identifier: str, name: str, datum: GeodeticDatum, **kwargs) -> Geographic2DCRS:
    return Geographic2DCRS(identifier, name, ELLIPSOIDAL_LAT_LON, datum, datum.area_of_use, **kwargs)


AMERSFOORT_GEOGRAPHIC = _geographic("EPSG::4289", "Amersfoort", AMERSFOORT)
ETRS89_GEOGRAPHIC = _geographic("EPSG::4258", "ETRS89", ETRS89)
GGRS87_GEOGRAPHIC = _geographic("EPSG::4121", "GGRS87", GGRS87)
HD72_GEOGRAPHIC = _geographic("EPSG::4237", "HD72", HD72, remarks="Replaced HD1909.")
JAD69_GEOGRAPHIC = _geographic("EPSG::4242", "JAD69", JAMAICA_1969)
NAD27_GEOGRAPHIC = _geographic("EPSG::4267", "NAD27", NAD27)
NAD83_GEOGRAPHIC = _geographic("EPSG::4269", "NAD83", NAD83)
OSGB36_GEOGRAPHIC = _geographic("EPSG::4277", "OSGB36", OSGB_1936, aliases=("OSGB 1936",))
S_JTSK_GEOGRAPHIC = _geographic("EPSG::4156", "S-JTSK", S_JTSK)
TIMBALAI_1948_GEOGRAPHIC = _geographic("EPSG::4298", "Timbalai 1948", TIMBALAI_1948)
TRINIDAD_1903_GEOGRAPHIC = _geographic("EPSG::4302", "Trinidad 1903", TRINIDAD_1903)
WGS84_GEOGRAPHIC = _geographic("EPSG::4326", "WGS 84", WGS84, aliases=("WGS84",))

ETRS89_GEOGRAPHIC_3D = Geographic3DCRS(
    "EPSG::4937", "ETRS89 (3D)", ELLIPSOIDAL_LAT_LON_HEIGHT, ETRS89, EUROPE_ETRS89
)
WGS84_GEOGRAPHIC_3D = Geographic3DCRS(
    "EPSG::4979", "WGS 84 (3D)", ELLIPSOIDAL_LAT_LON_HEIGHT, WGS84, WORLD
)

GEOGRAPHIC_CRS = Catalog("geographic reference systems", lambda: [
    AMERSFOORT_GEOGRAPHIC, ETRS89_GEOGRAPHIC, GGRS87_GEOGRAPHIC, HD72_GEOGRAPHIC,
    JAD69_GEOGRAPHIC, NAD27_GEOGRAPHIC, NAD83_GEOGRAPHIC, OSGB36_GEOGRAPHIC,
    S_JTSK_GEOGRAPHIC, TIMBALAI_1948_GEOGRAPHIC, TRINIDAD_1903_GEOGRAPHIC,
    WGS84_GEOGRAPHIC, ETRS89_GEOGRAPHIC_3D, WGS84_GEOGRAPHIC_3D,
])

ETRS89_GEOCENTRIC = GeocentricCRS("EPSG::4936", "ETRS89", CARTESIAN_GEOCENTRIC, ETRS89, EUROPE_ETRS89)
WGS84_GEOCENTRIC = GeocentricCRS("EPSG::4978", "WGS 84", CARTESIAN_GEOCENTRIC, WGS84, WORLD)

GEOCENTRIC_CRS = Catalog("geocentric reference systems", lambda: [
    ETRS89_GEOCENTRIC, WGS84_GEOCENTRIC,
])

EGM2008_HEIGHT = VerticalCRS("EPSG::3855", "EGM2008 height", VERTICAL_HEIGHT, EGM2008, WORLD)
EGM84_HEIGHT = VerticalCRS("EPSG::5798", "EGM84 height", VERTICAL_HEIGHT, EGM84, WORLD)
EGM96_HEIGHT = VerticalCRS("EPSG::5773", "EGM96 height", VERTICAL_HEIGHT, EGM96, WORLD)
EOMA_1980_HEIGHT = VerticalCRS("EPSG::5787", "EOMA 1980 height", VERTICAL_HEIGHT, BALTIC_1980, HUNGARY)
EVRF2000_HEIGHT = VerticalCRS("EPSG::5730", "EVRF2000 height", VERTICAL_HEIGHT, EVRF2000, EUROPE_EVRF2000)
NAVD88_HEIGHT = VerticalCRS("EPSG::5703", "NAVD88 height", VERTICAL_HEIGHT, NAVD88, USA_CONUS_ONSHORE)

VERTICAL_CRS = Catalog("vertical reference systems", lambda: [
    EGM2008_HEIGHT, EGM84_HEIGHT, EGM96_HEIGHT, EOMA_1980_HEIGHT, EVRF2000_HEIGHT, NAVD88_HEIGHT,
])

WGS84_EGM96_HEIGHT = CompoundCRS(
    "EPSG::9705", "WGS 84 + EGM96 height", [WGS84_GEOGRAPHIC, EGM96_HEIGHT], WORLD
)
ETRS89_EVRF2000_HEIGHT = CompoundCRS(
    "EPSG::7409", "ETRS89 + EVRF2000 height", [ETRS89_GEOGRAPHIC, EVRF2000_HEIGHT], EUROPE_EVRF2000
)

COMPOUND_CRS = Catalog("compound reference systems", lambda: [
    WGS84_EGM96_HEIGHT, ETRS89_EVRF2000_HEIGHT,
])
