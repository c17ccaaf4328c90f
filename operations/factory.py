"""
Projection Factory.

Named constructors for the projections of well known map grids, generic
construction from a method descriptor, and the catalogs of named projections
and projected reference systems.

Every named constructor builds a new, independent instance. Test points of
the IOGP guidance note reproduce on these definitions.

References
----------
- IOGP Publication 373-7-2, Geomatics Guidance Note 7, part 2.
"""

from typing import Mapping, Optional

from common.logging_config import get_logger
from common.units import Angle, Length
from operations import parameters as p
from operations.base import CoordinateProjection, OperationConfig
from operations.methods import METHODS, OperationMethod
from operations.projections import (
    PROJECTION_CLASSES,
    CassiniSoldnerProjection,
    HotineObliqueMercatorBProjection,
    KrovakProjection,
    LambertAzimuthalEqualAreaProjection,
    LambertConicConformal1SPProjection,
    LambertConicConformal2SPProjection,
    MercatorAProjection,
    ObliqueStereographicProjection,
    PolarStereographicAProjection,
    PolarStereographicBProjection,
    PolarStereographicCProjection,
    PseudoMercatorProjection,
    TransverseMercatorProjection,
)
from reference import catalogs, ellipsoids
from reference.area_of_use import AreaOfUse
from reference.catalog import Catalog
from reference.crs import ProjectedCRS
from reference.ellipsoid import Ellipsoid

logger = get_logger(__name__)


def _in_unit(ellipsoid: Ellipsoid, unit: str) -> Ellipsoid:
    """The same ellipsoid with its axes expressed in another unit."""
    return Ellipsoid.from_semi_minor_axis(
        ellipsoid.identifier, ellipsoid.name,
        ellipsoid.semi_major_axis.to(unit), ellipsoid.semi_minor_axis.to(unit),
        aliases=ellipsoid.aliases
    )


CLARKE_1866_US_SURVEY_FOOT = _in_unit(ellipsoids.CLARKE_1866, "us_survey_foot")


def _natural_origin(latitude: Angle, longitude: Angle, false_easting: Length, false_northing: Length,
                    scale: Optional[float] = None) -> dict:
    parameters = {
        p.LATITUDE_OF_NATURAL_ORIGIN: latitude,
        p.LONGITUDE_OF_NATURAL_ORIGIN: longitude,
        p.FALSE_EASTING: false_easting,
        p.FALSE_NORTHING: false_northing,
    }
    if scale is not None:
        parameters[p.SCALE_FACTOR_AT_NATURAL_ORIGIN] = scale
    return parameters


# =========================================================================
# Named projections
# =========================================================================


def world_mercator() -> MercatorAProjection:
    """World Mercator on WGS 84 (EPSG conversion 19883)."""
    return MercatorAProjection(
        "EPSG::19883", "World Mercator",
        _natural_origin(Angle.from_degree(0), Angle.from_degree(0), Length.from_metre(0), Length.from_metre(0), 1.0),
        ellipsoids.WGS_1984, catalogs.WORLD_80S_TO_84N
    )


def popular_visualisation_pseudo_mercator() -> PseudoMercatorProjection:
    """Web map projection of the WGS 84 ellipsoid treated as a sphere."""
    return PseudoMercatorProjection(
        "EPSG::3856", "Popular Visualisation Pseudo-Mercator",
        _natural_origin(Angle.from_degree(0), Angle.from_degree(0), Length.from_metre(0), Length.from_metre(0)),
        ellipsoids.WGS_1984, AreaOfUse.WORLD
    )


def british_national_grid() -> TransverseMercatorProjection:
    """British National Grid on Airy 1830 (EPSG conversion 19916)."""
    return TransverseMercatorProjection(
        "EPSG::19916", "British National Grid",
        _natural_origin(
            Angle.from_degree(49), Angle.from_degree(-2),
            Length.from_metre(400000), Length.from_metre(-100000), 0.9996012717
        ),
        ellipsoids.AIRY_1830, catalogs.GREAT_BRITAIN
    )


def hungarian_eov() -> HotineObliqueMercatorBProjection:
    """Hungarian national grid, EOV (EPSG conversion 19931)."""
    return HotineObliqueMercatorBProjection(
        "EPSG::19931", "Egyseges Orszagos Vetuleti",
        {
            p.LATITUDE_OF_PROJECTION_CENTRE: Angle.from_degree(47, 8, 39.8174),
            p.LONGITUDE_OF_PROJECTION_CENTRE: Angle.from_degree(19, 2, 54.8584),
            p.AZIMUTH_OF_INITIAL_LINE: Angle.from_degree(90),
            p.ANGLE_FROM_RECTIFIED_TO_SKEW_GRID: Angle.from_degree(90),
            p.SCALE_FACTOR_ON_INITIAL_LINE: 0.99993,
            p.EASTING_AT_PROJECTION_CENTRE: Length.from_metre(650000),
            p.NORTHING_AT_PROJECTION_CENTRE: Length.from_metre(200000),
        },
        ellipsoids.GRS_1967, catalogs.HUNGARY, aliases=("EOV",)
    )


def borneo_rso() -> HotineObliqueMercatorBProjection:
    """Rectified Skew Orthomorphic Borneo Grid (metre)."""
    return HotineObliqueMercatorBProjection(
        "EPSG::19894", "Borneo RSO",
        {
            p.LATITUDE_OF_PROJECTION_CENTRE: Angle.from_degree(4),
            p.LONGITUDE_OF_PROJECTION_CENTRE: Angle.from_degree(115),
            p.AZIMUTH_OF_INITIAL_LINE: Angle.from_degree(53, 18, 56.9537),
            p.ANGLE_FROM_RECTIFIED_TO_SKEW_GRID: Angle.from_degree(53, 7, 48.3685),
            p.SCALE_FACTOR_ON_INITIAL_LINE: 0.99984,
            p.EASTING_AT_PROJECTION_CENTRE: Length.from_metre(590476.87),
            p.NORTHING_AT_PROJECTION_CENTRE: Length.from_metre(442857.65),
        },
        ellipsoids.EVEREST_1830_1967_DEFINITION, catalogs.MALAYSIA_EAST
    )


def rd_new() -> ObliqueStereographicProjection:
    """Dutch national grid, RD New (EPSG conversion 19914)."""
    return ObliqueStereographicProjection(
        "EPSG::19914", "RD New",
        _natural_origin(
            Angle.from_degree(52, 9, 22.178), Angle.from_degree(5, 23, 15.5),
            Length.from_metre(155000), Length.from_metre(463000), 0.9999079
        ),
        ellipsoids.BESSEL_1841, catalogs.NETHERLANDS_ONSHORE
    )


def texas_cs27_south_central() -> LambertConicConformal2SPProjection:
    """Texas CS27 South Central zone, in US survey feet (EPSG conversion 14204)."""
    return LambertConicConformal2SPProjection(
        "EPSG::14204", "Texas CS27 South Central zone",
        {
            p.LATITUDE_OF_FALSE_ORIGIN: Angle.from_degree(27, 50),
            p.LONGITUDE_OF_FALSE_ORIGIN: Angle.from_degree(-99),
            p.LATITUDE_OF_1ST_STANDARD_PARALLEL: Angle.from_degree(28, 23),
            p.LATITUDE_OF_2ND_STANDARD_PARALLEL: Angle.from_degree(30, 17),
            p.EASTING_AT_FALSE_ORIGIN: Length.from_us_survey_foot(2000000),
            p.NORTHING_AT_FALSE_ORIGIN: Length.from_us_survey_foot(0),
        },
        CLARKE_1866_US_SURVEY_FOOT, catalogs.USA_TEXAS_SPCS27_SC
    )


def jamaica_national_grid() -> LambertConicConformal1SPProjection:
    """Jamaica National Grid (EPSG conversion 19910)."""
    return LambertConicConformal1SPProjection(
        "EPSG::19910", "Jamaica National Grid",
        _natural_origin(
            Angle.from_degree(18), Angle.from_degree(-77),
            Length.from_metre(250000), Length.from_metre(150000), 1.0
        ),
        ellipsoids.CLARKE_1866, catalogs.JAMAICA_ONSHORE
    )


def trinidad_grid() -> CassiniSoldnerProjection:
    """Trinidad Grid, in Clarke's feet (EPSG conversion 19925).

    The grid is defined in Clarke's links; 1 link is 0.66 Clarke's feet.
    """
    return CassiniSoldnerProjection(
        "EPSG::19925", "Trinidad Grid",
        _natural_origin(
            Angle.from_degree(10, 26, 30), Angle.from_degree(-61, 20),
            Length.from_clarkes_foot(283800), Length.from_clarkes_foot(214500)
        ),
        ellipsoids.CLARKE_1858, catalogs.TRINIDAD
    )


def europe_equal_area() -> LambertAzimuthalEqualAreaProjection:
    """Europe Equal Area 2001, the ETRS89 LAEA grid (EPSG conversion 19986)."""
    return LambertAzimuthalEqualAreaProjection(
        "EPSG::19986", "Europe Equal Area 2001",
        _natural_origin(
            Angle.from_degree(52), Angle.from_degree(10),
            Length.from_metre(4321000), Length.from_metre(3210000)
        ),
        ellipsoids.GRS_1980, catalogs.EUROPE_ETRS89, aliases=("LAEA Europe",)
    )


def _universal_polar_stereographic(north: bool) -> PolarStereographicAProjection:
    hemisphere = "North" if north else "South"
    return PolarStereographicAProjection(
        "EPSG::16061" if north else "EPSG::16161", f"Universal Polar Stereographic {hemisphere}",
        _natural_origin(
            Angle.from_degree(90 if north else -90), Angle.from_degree(0),
            Length.from_metre(2000000), Length.from_metre(2000000), 0.994
        ),
        ellipsoids.WGS_1984, catalogs.WORLD_NORTH_OF_60N if north else catalogs.WORLD_SOUTH_OF_60S,
        aliases=(f"UPS {hemisphere}",)
    )


def ups_north() -> PolarStereographicAProjection:
    """Universal Polar Stereographic North (EPSG conversion 16061)."""
    return _universal_polar_stereographic(True)


def ups_south() -> PolarStereographicAProjection:
    """Universal Polar Stereographic South (EPSG conversion 16161)."""
    return _universal_polar_stereographic(False)


def australian_antarctic_polar_stereographic() -> PolarStereographicBProjection:
    """Australian Antarctic Polar Stereographic (EPSG conversion 19992)."""
    return PolarStereographicBProjection(
        "EPSG::19992", "Australian Antarctic Polar Stereographic",
        {
            p.LATITUDE_OF_STANDARD_PARALLEL: Angle.from_degree(-71),
            p.LONGITUDE_OF_ORIGIN: Angle.from_degree(70),
            p.FALSE_EASTING: Length.from_metre(6000000),
            p.FALSE_NORTHING: Length.from_metre(6000000),
        },
        ellipsoids.WGS_1984, catalogs.WORLD_SOUTH_OF_60S
    )


def terre_adelie_polar_stereographic() -> PolarStereographicCProjection:
    """Petrels 1972 / Terre Adelie Polar Stereographic (EPSG conversion 19983)."""
    return PolarStereographicCProjection(
        "EPSG::19983", "Terre Adelie Polar Stereographic",
        {
            p.LATITUDE_OF_STANDARD_PARALLEL: Angle.from_degree(-67),
            p.LONGITUDE_OF_ORIGIN: Angle.from_degree(140),
            p.EASTING_AT_FALSE_ORIGIN: Length.from_metre(300000),
            p.NORTHING_AT_FALSE_ORIGIN: Length.from_metre(200000),
        },
        ellipsoids.INTERNATIONAL_1924, catalogs.ANTARCTICA_ADELIE_LAND
    )


def krovak_sjtsk() -> KrovakProjection:
    """Krovak grid of S-JTSK, longitudes referred to Greenwich.

    The longitude of origin, 42°30' east of Ferro, is 24°50' east of Greenwich.
    """
    return KrovakProjection(
        "EPSG::19952", "Krovak",
        {
            p.LATITUDE_OF_PROJECTION_CENTRE: Angle.from_degree(49, 30),
            p.LONGITUDE_OF_ORIGIN: Angle.from_degree(24, 50),
            p.COLATITUDE_OF_CONE_AXIS: Angle.from_degree(30, 17, 17.30311),
            p.LATITUDE_OF_PSEUDO_STANDARD_PARALLEL: Angle.from_degree(78, 30),
            p.SCALE_FACTOR_ON_PSEUDO_STANDARD_PARALLEL: 0.9999,
            p.FALSE_EASTING: Length.from_metre(0),
            p.FALSE_NORTHING: Length.from_metre(0),
        },
        ellipsoids.BESSEL_1841, catalogs.CZECHOSLOVAKIA
    )


def utm_zone(zone: int, north: bool = True, ellipsoid: Ellipsoid = ellipsoids.WGS_1984) -> TransverseMercatorProjection:
    """Return the Universal Transverse Mercator projection of a zone.

    Parameters
    ----------
    zone : int
        Zone number in [1, 60]; the central meridian is 6·zone - 183 degrees.
    north : bool
        Northern hemisphere (false northing 0) or southern (10 000 km).
    ellipsoid : Ellipsoid
        Ellipsoid of the datum; false origin values are converted to its unit.

    Raises
    ------
    ValueError
        If the zone number is not in [1, 60].

    Examples
    --------
    >>> from common.types import GeographicCoordinate
    >>> round(utm_zone(31).forward(GeographicCoordinate.from_degrees(0, 3)).x, 3)
    500000.0
    """
    area = catalogs.world_zone(zone, north)
    unit = ellipsoid.unit
    hemisphere = "N" if north else "S"
    return TransverseMercatorProjection(
        f"EPSG::{16000 + zone if north else 16100 + zone}", f"UTM zone {zone}{hemisphere}",
        _natural_origin(
            Angle.from_degree(0), Angle.from_degree(6 * zone - 183),
            Length.from_metre(500000).to(unit),
            Length.from_metre(0 if north else 10000000).to(unit), 0.9996
        ),
        ellipsoid, area
    )


# =========================================================================
# Construction from a method
# =========================================================================


def from_method(
    method: OperationMethod,
    identifier: str,
    name: str,
    parameters: Mapping,
    ellipsoid: Ellipsoid,
    area_of_use: Optional[AreaOfUse] = None,
    config: Optional[OperationConfig] = None,
    **kwargs
) -> CoordinateProjection:
    """Build a projection implementing a method.

    Raises
    ------
    NotImplementedError
        If no projection implements the method.
    """
    try:
        projection_class = PROJECTION_CLASSES[method.identifier]
    except KeyError:
        raise NotImplementedError(f"No projection implements the method '{method.name}'.") from None
    logger.debug(f"Building {projection_class.__name__} '{name}'")
    return projection_class(identifier, name, parameters, ellipsoid, area_of_use, config, **kwargs)


def from_method_identifier(method_identifier: str, *args, **kwargs) -> CoordinateProjection:
    """Build a projection from the identifier of its method, e.g. ``EPSG::9807``.

    Raises
    ------
    KeyError
        If no method has the identifier.
    """
    return from_method(METHODS[method_identifier], *args, **kwargs)


def from_method_name(method_name: str, *args, **kwargs) -> CoordinateProjection:
    """Build a projection from the name of its method.

    An exact, case-insensitive name match is preferred; otherwise the name
    pattern must match exactly one method.

    Raises
    ------
    ValueError
        If the name matches no method or several.
    """
    candidates = METHODS.from_name(method_name)
    exact = [method for method in candidates if method.name.lower() == method_name.lower()]
    if len(exact) == 1:
        return from_method(exact[0], *args, **kwargs)
    if len(candidates) != 1:
        names = ", ".join(method.name for method in candidates) or "none"
        raise ValueError(f"The method name '{method_name}' is ambiguous or unknown (matches: {names}).")
    return from_method(candidates[0], *args, **kwargs)


# =========================================================================
# Catalogs
# =========================================================================

PROJECTIONS = Catalog("projections", lambda: [
    world_mercator(), popular_visualisation_pseudo_mercator(), british_national_grid(),
    hungarian_eov(), borneo_rso(), rd_new(), texas_cs27_south_central(), jamaica_national_grid(),
    trinidad_grid(), europe_equal_area(), ups_north(), ups_south(),
    australian_antarctic_polar_stereographic(), terre_adelie_polar_stereographic(), krovak_sjtsk(),
])


def _build_projected_crs():
    return [
        ProjectedCRS(
            "EPSG::3395", "WGS 84 / World Mercator", catalogs.WGS84_GEOGRAPHIC,
            catalogs.CARTESIAN_EN_METRE, world_mercator(), catalogs.WORLD_80S_TO_84N
        ),
        ProjectedCRS(
            "EPSG::27700", "OSGB36 / British National Grid", catalogs.OSGB36_GEOGRAPHIC,
            catalogs.CARTESIAN_EN_METRE, british_national_grid(), catalogs.GREAT_BRITAIN
        ),
        ProjectedCRS(
            "EPSG::23700", "HD72 / EOV", catalogs.HD72_GEOGRAPHIC,
            catalogs.CARTESIAN_EN_METRE, hungarian_eov(), catalogs.HUNGARY
        ),
        ProjectedCRS(
            "EPSG::28992", "Amersfoort / RD New", catalogs.AMERSFOORT_GEOGRAPHIC,
            catalogs.CARTESIAN_EN_METRE, rd_new(), catalogs.NETHERLANDS_ONSHORE
        ),
        ProjectedCRS(
            "EPSG::32039", "NAD27 / Texas South Central", catalogs.NAD27_GEOGRAPHIC,
            catalogs.CARTESIAN_XY_US_FOOT, texas_cs27_south_central(), catalogs.USA_TEXAS_SPCS27_SC
        ),
        ProjectedCRS(
            "EPSG::24200", "JAD69 / Jamaica National Grid", catalogs.JAD69_GEOGRAPHIC,
            catalogs.CARTESIAN_EN_METRE, jamaica_national_grid(), catalogs.JAMAICA_ONSHORE
        ),
        ProjectedCRS(
            "EPSG::29873", "Timbalai 1948 / RSO Borneo (m)", catalogs.TIMBALAI_1948_GEOGRAPHIC,
            catalogs.CARTESIAN_EN_METRE, borneo_rso(), catalogs.MALAYSIA_EAST
        ),
        ProjectedCRS(
            "EPSG::3035", "ETRS89-extended / LAEA Europe", catalogs.ETRS89_GEOGRAPHIC,
            catalogs.CARTESIAN_EN_METRE, europe_equal_area(), catalogs.EUROPE_ETRS89
        ),
        ProjectedCRS(
            "EPSG::5041", "WGS 84 / UPS North (E,N)", catalogs.WGS84_GEOGRAPHIC,
            catalogs.CARTESIAN_EN_METRE, ups_north(), catalogs.WORLD_NORTH_OF_60N
        ),
        ProjectedCRS(
            "EPSG::5042", "WGS 84 / UPS South (E,N)", catalogs.WGS84_GEOGRAPHIC,
            catalogs.CARTESIAN_EN_METRE, ups_south(), catalogs.WORLD_SOUTH_OF_60S
        ),
        ProjectedCRS(
            "EPSG::3032", "WGS 84 / Australian Antarctic Polar Stereographic", catalogs.WGS84_GEOGRAPHIC,
            catalogs.CARTESIAN_EN_METRE, australian_antarctic_polar_stereographic(), catalogs.WORLD_SOUTH_OF_60S
        ),
        ProjectedCRS(
            "EPSG::5513", "S-JTSK / Krovak", catalogs.S_JTSK_GEOGRAPHIC,
            catalogs.CARTESIAN_WESTING_SOUTHING, krovak_sjtsk(), catalogs.CZECHOSLOVAKIA
        ),
    ] + [
        ProjectedCRS(
            f"EPSG::{32600 + zone}", f"WGS 84 / UTM zone {zone}N", catalogs.WGS84_GEOGRAPHIC,
            catalogs.CARTESIAN_EN_METRE, utm_zone(zone), catalogs.world_zone(zone)
        )
        for zone in range(1, 61)
    ]


PROJECTED_CRS = Catalog("projected reference systems", _build_projected_crs)
