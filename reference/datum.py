"""
Geodetic and Vertical Datums.

A datum anchors a coordinate system to the body it describes. Geodetic datums
carry the ellipsoid and the prime meridian; vertical datums describe the
surface heights are measured from.
"""

from enum import Enum
from typing import Optional, Sequence

from common.constants import GeodeticConstants
from reference.area_of_use import AreaOfUse
from reference.base import IdentifiedObject
from reference.ellipsoid import Ellipsoid
from reference.meridian import PrimeMeridian


class Datum(IdentifiedObject):
    """Base class of datums.

    Parameters
    ----------
    anchor_point : str, optional
        Description of the fundamental point or realization.
    realization_epoch : str, optional
        Epoch of realization.
    scope : str, optional
        Intended use.
    area_of_use : AreaOfUse, optional
        Validity region; the undefined area when omitted.
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        remarks: Optional[str] = None,
        aliases: Sequence[str] = (),
        anchor_point: Optional[str] = None,
        realization_epoch: Optional[str] = None,
        scope: Optional[str] = None,
        area_of_use: Optional[AreaOfUse] = None
    ):
        super().__init__(identifier, name, remarks, aliases)
        self._anchor_point = anchor_point
        self._realization_epoch = realization_epoch
        self._scope = scope
        self._area_of_use = area_of_use or AreaOfUse.UNDEFINED

    @property
    def anchor_point(self) -> Optional[str]:
        return self._anchor_point

    @property
    def realization_epoch(self) -> Optional[str]:
        return self._realization_epoch

    @property
    def scope(self) -> Optional[str]:
        return self._scope

    @property
    def area_of_use(self) -> AreaOfUse:
        return self._area_of_use


class GeodeticDatum(Datum):
    """A datum defining the position of an ellipsoid relative to the body."""

    def __init__(
        self,
        identifier: str,
        name: str,
        ellipsoid: Ellipsoid,
        prime_meridian: PrimeMeridian,
        area_of_use: Optional[AreaOfUse] = None,
        **kwargs
    ):
        if ellipsoid is None:
            raise ValueError("The ellipsoid of a geodetic datum is not specified.")
        if prime_meridian is None:
            raise ValueError("The prime meridian of a geodetic datum is not specified.")
        super().__init__(identifier, name, area_of_use=area_of_use, **kwargs)
        self._ellipsoid = ellipsoid
        self._prime_meridian = prime_meridian

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    @property
    def prime_meridian(self) -> PrimeMeridian:
        return self._prime_meridian


class VerticalDatumType(Enum):
    """Surface a vertical datum measures heights from."""
    ELLIPSOIDAL = "ellipsoidal"
    ORTHOMETRIC = "orthometric"


class VerticalDatum(Datum):
    """A datum for gravity-related or ellipsoidal heights.

    The type is derived from the datum code: EPSG codes in
    `GeodeticConstants.ELLIPSOIDAL_VERTICAL_DATUM_CODES` describe ellipsoidal
    heights, every other code orthometric heights.
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        area_of_use: Optional[AreaOfUse] = None,
        **kwargs
    ):
        super().__init__(identifier, name, area_of_use=area_of_use, **kwargs)
        if self.code is not None and self.code in GeodeticConstants.ELLIPSOIDAL_VERTICAL_DATUM_CODES:
            self._type = VerticalDatumType.ELLIPSOIDAL
        else:
            self._type = VerticalDatumType.ORTHOMETRIC

    @property
    def type(self) -> VerticalDatumType:
        return self._type
