"""
Error taxonomy for the storage and domain layers.

Routers translate these into HTTP responses: storage failures become
500s, ``NotFoundError`` becomes a 404.
"""


class DealerTrackError(Exception):
    """Base class for all application errors."""


class StorageError(DealerTrackError):
    """A collection document could not be used."""

    def __init__(self, collection: str, message: str):
        self.collection = collection
        super().__init__(f"{collection}: {message}")


class StorageIOError(StorageError):
    """The collection document is missing, unreadable or unwritable."""


class StorageFormatError(StorageError):
    """The collection document does not hold a JSON array of objects."""


class UnknownCollectionError(KeyError):
    """The requested collection is not one the store manages."""


class NotFoundError(DealerTrackError):
    """No entity with the requested id exists."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")
