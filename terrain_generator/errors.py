# terrain_generator/errors.py

"""Exceptions raised by the terrain generation pipeline."""


class TerrainGenerationError(Exception):
    """Base class for all terrain generator errors."""


class InvalidParameterError(TerrainGenerationError, ValueError):
    """A generation parameter cannot be used, even after default substitution."""


class OutOfDomainError(TerrainGenerationError, ValueError):
    """A value lies outside every band of a terrain table."""

    def __init__(self, value, low, high):
        self.value = value
        self.low = low
        self.high = high
        super().__init__(
            f"Cannot identify a terrain type for value {value!r}: "
            f"valid values lie in [{low}, {high})."
        )
