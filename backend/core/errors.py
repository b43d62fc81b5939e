"""Failure taxonomy for the building hierarchy and its save format."""


class BuildingError(Exception):
    """Base class for every failure raised by the building core."""


class InvalidArgumentError(BuildingError, ValueError):
    """A numeric parameter is out of range (area, dimension, weight, ...)."""


# ---------------------------------------------------------------------------
# Structural conflicts
# ---------------------------------------------------------------------------


class StructuralConflictError(BuildingError):
    """Something with the same identity already exists in the container."""


class DuplicateFloorError(StructuralConflictError):
    """A floor with this number already exists in the building."""


class DuplicateRoomError(StructuralConflictError):
    """A room with this number already exists on the floor."""


class DuplicateSensorError(StructuralConflictError):
    """The room already has a sensor of this kind."""


# ---------------------------------------------------------------------------
# Support and space
# ---------------------------------------------------------------------------


class NoFloorBelowError(BuildingError):
    """There is no floor directly below to support the new floor."""


class FloorTooSmallError(BuildingError):
    """A floor cannot support (or be supported by) its neighbour, or its rooms no longer fit."""


class InsufficientSpaceError(BuildingError):
    """The room does not fit in the floor's remaining area."""


# ---------------------------------------------------------------------------
# Operations and persistence
# ---------------------------------------------------------------------------


class FireDrillError(BuildingError):
    """A fire drill was requested in a building without floors or rooms."""


class FileFormatError(BuildingError):
    """A save file could not be decoded. The whole file is rejected."""
