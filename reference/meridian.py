"""Prime meridians."""

from typing import Optional, Sequence

from common.units import Angle
from reference.base import IdentifiedObject


class PrimeMeridian(IdentifiedObject):
    """A meridian from which longitudes are counted.

    Parameters
    ----------
    longitude : Angle
        Longitude of the meridian east of Greenwich.
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        longitude: Angle,
        remarks: Optional[str] = None,
        aliases: Sequence[str] = ()
    ):
        super().__init__(identifier, name, remarks, aliases)
        if not isinstance(longitude, Angle):
            raise TypeError("The longitude of a prime meridian must be an angle.")
        self._longitude = longitude

    @property
    def longitude(self) -> Angle:
        return self._longitude
