"""Distance units and their Earth-radius constants."""

from enum import Enum

from geoutils.exceptions import UnsupportedUnitError

_EARTH_RADIUS = {
    "km": 6371.0,
    "miles": 3959.0,
    "meters": 6371000.0,
}


class DistanceUnit(str, Enum):
    """Unit for great-circle distances."""

    KILOMETERS = "km"
    MILES = "miles"
    METERS = "meters"

    @property
    def radius(self) -> float:
        """Mean Earth radius expressed in this unit."""
        return _EARTH_RADIUS[self.value]

    @classmethod
    def parse(cls, value: "DistanceUnit | str") -> "DistanceUnit":
        """Resolve a unit from a member or its string value.

        Args:
            value: DistanceUnit member or one of "km", "miles", "meters"

        Returns:
            Matching DistanceUnit

        Raises:
            UnsupportedUnitError: If the value names no known unit
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedUnitError(value) from None
