"""Exception hierarchy for GeoUtils."""


class GeoUtilsError(Exception):
    """Base exception for all GeoUtils errors."""

    pass


class GeoValidationError(GeoUtilsError, ValueError):
    """Caller-supplied geometry failed validation."""

    pass


class MalformedInputError(GeoValidationError):
    """A point or bounding box is missing required fields."""

    def __init__(self, message: str, index: int | None = None) -> None:
        self.index = index
        super().__init__(message)


class OutOfRangeError(GeoValidationError):
    """A latitude or longitude value violates its numeric bound."""

    def __init__(
        self,
        field: str,
        value: float,
        lower: float,
        upper: float,
        index: int | None = None,
    ) -> None:
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper
        self.index = index
        message = f"Invalid {field}: {value:g}. Must be between {lower:g} and {upper:g}"
        if index is not None:
            message += f" (point at index {index})"
        super().__init__(message)


class InsufficientVerticesError(GeoValidationError):
    """Polygon has fewer vertices than the configured minimum."""

    def __init__(self, count: int, minimum: int) -> None:
        self.count = count
        self.minimum = minimum
        super().__init__(f"Polygon must have at least {minimum} points, got {count}")


class UnsupportedUnitError(GeoValidationError):
    """An unrecognized distance unit was requested."""

    def __init__(self, unit: object) -> None:
        self.unit = unit
        super().__init__(f"Invalid unit: {unit}. Use 'km', 'miles', or 'meters'")
