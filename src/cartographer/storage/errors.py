"""Construction-time storage errors.

These are raised, not returned: a store that cannot be assembled is a
programming or deployment error, not a runtime failure.
"""


class StoreConstructionError(RuntimeError):
    """A backend could not be set up."""


class UnknownStorageTypeError(ValueError):
    """The storage configuration names a backend that does not exist."""

    def __init__(self, storage_type: object) -> None:
        self.storage_type = storage_type
        super().__init__(f"Unknown storage type: {storage_type}")
