"""
Map projection implementations.

Each class binds one operation method to its forward and reverse formulas;
`PROJECTION_CLASSES` maps method identifiers to the implementing class.
"""

from operations.projections.american_polyconic import AmericanPolyconicProjection
from operations.projections.azimuthal import (
    GnomonicProjection,
    ModifiedAzimuthalEquidistantProjection,
    VerticalPerspectiveOrthographicProjection,
    VerticalPerspectiveProjection,
)
from operations.projections.bonne import BonneProjection, BonneSouthOrientatedProjection
from operations.projections.cassini_soldner import (
    CassiniSoldnerProjection,
    HyperbolicCassiniSoldnerProjection,
)
from operations.projections.cylindrical import (
    EquidistantCylindricalProjection,
    EquidistantCylindricalSphericalProjection,
    SinusoidalProjection,
)
from operations.projections.equal_area import (
    AlbersEqualAreaProjection,
    LambertAzimuthalEqualAreaProjection,
    LambertAzimuthalEqualAreaSphericalProjection,
    LambertCylindricalEqualAreaProjection,
    LambertCylindricalEqualAreaSphericalProjection,
)
from operations.projections.guam import GuamProjection
from operations.projections.hotine_oblique_mercator import (
    HotineObliqueMercatorAProjection,
    HotineObliqueMercatorBProjection,
)
from operations.projections.krovak import (
    KrovakModifiedNorthOrientatedProjection,
    KrovakModifiedProjection,
    KrovakNorthOrientatedProjection,
    KrovakProjection,
)
from operations.projections.laborde import LabordeObliqueMercatorProjection
from operations.projections.lambert_conic_conformal import (
    LambertConicConformal1SPProjection,
    LambertConicConformal2SPBelgiumProjection,
    LambertConicConformal2SPProjection,
    LambertConicConformalWestOrientatedProjection,
    LambertConicNearConformalProjection,
)
from operations.projections.mercator import (
    MercatorAProjection,
    MercatorBProjection,
    MercatorSphericalProjection,
    PseudoMercatorProjection,
)
from operations.projections.stereographic import (
    ObliqueStereographicProjection,
    PolarStereographicAProjection,
    PolarStereographicBProjection,
    PolarStereographicCProjection,
)
from operations.projections.transverse_mercator import (
    TransverseMercatorProjection,
    TransverseMercatorSouthOrientatedProjection,
    TransverseMercatorZonedProjection,
)

PROJECTION_CLASSES = {
    cls.METHOD.identifier: cls
    for cls in (
        AlbersEqualAreaProjection,
        AmericanPolyconicProjection,
        BonneProjection,
        BonneSouthOrientatedProjection,
        CassiniSoldnerProjection,
        EquidistantCylindricalProjection,
        EquidistantCylindricalSphericalProjection,
        GnomonicProjection,
        GuamProjection,
        HotineObliqueMercatorAProjection,
        HotineObliqueMercatorBProjection,
        HyperbolicCassiniSoldnerProjection,
        KrovakModifiedNorthOrientatedProjection,
        KrovakModifiedProjection,
        KrovakNorthOrientatedProjection,
        KrovakProjection,
        LabordeObliqueMercatorProjection,
        LambertAzimuthalEqualAreaProjection,
        LambertAzimuthalEqualAreaSphericalProjection,
        LambertConicConformal1SPProjection,
        LambertConicConformal2SPBelgiumProjection,
        LambertConicConformal2SPProjection,
        LambertConicConformalWestOrientatedProjection,
        LambertConicNearConformalProjection,
        LambertCylindricalEqualAreaProjection,
        LambertCylindricalEqualAreaSphericalProjection,
        MercatorAProjection,
        MercatorBProjection,
        MercatorSphericalProjection,
        ModifiedAzimuthalEquidistantProjection,
        ObliqueStereographicProjection,
        PolarStereographicAProjection,
        PolarStereographicBProjection,
        PolarStereographicCProjection,
        PseudoMercatorProjection,
        SinusoidalProjection,
        TransverseMercatorProjection,
        TransverseMercatorSouthOrientatedProjection,
        TransverseMercatorZonedProjection,
        VerticalPerspectiveOrthographicProjection,
        VerticalPerspectiveProjection,
    )
}

__all__ = [
    "PROJECTION_CLASSES",
    "AlbersEqualAreaProjection",
    "AmericanPolyconicProjection",
    "BonneProjection",
    "BonneSouthOrientatedProjection",
    "CassiniSoldnerProjection",
    "EquidistantCylindricalProjection",
    "EquidistantCylindricalSphericalProjection",
    "GnomonicProjection",
    "GuamProjection",
    "HotineObliqueMercatorAProjection",
    "HotineObliqueMercatorBProjection",
    "HyperbolicCassiniSoldnerProjection",
    "KrovakModifiedNorthOrientatedProjection",
    "KrovakModifiedProjection",
    "KrovakNorthOrientatedProjection",
    "KrovakProjection",
    "LabordeObliqueMercatorProjection",
    "LambertAzimuthalEqualAreaProjection",
    "LambertAzimuthalEqualAreaSphericalProjection",
    "LambertConicConformal1SPProjection",
    "LambertConicConformal2SPBelgiumProjection",
    "LambertConicConformal2SPProjection",
    "LambertConicConformalWestOrientatedProjection",
    "LambertConicNearConformalProjection",
    "LambertCylindricalEqualAreaProjection",
    "LambertCylindricalEqualAreaSphericalProjection",
    "MercatorAProjection",
    "MercatorBProjection",
    "MercatorSphericalProjection",
    "ModifiedAzimuthalEquidistantProjection",
    "ObliqueStereographicProjection",
    "PolarStereographicAProjection",
    "PolarStereographicBProjection",
    "PolarStereographicCProjection",
    "PseudoMercatorProjection",
    "SinusoidalProjection",
    "TransverseMercatorProjection",
    "TransverseMercatorSouthOrientatedProjection",
    "TransverseMercatorZonedProjection",
    "VerticalPerspectiveOrthographicProjection",
    "VerticalPerspectiveProjection",
]
