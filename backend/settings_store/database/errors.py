"""
Failures a storage backend reports in a distinguishable way.
"""


class StorageError(Exception):
    """Base class for backend-native failures."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class KeyNotFoundError(StorageError):
    """No document is stored under the key."""

    def __init__(self, key: str):
        super().__init__(key, f"The key '{key}' does not exist")


class KeyExistsError(StorageError):
    """A document is already stored under the key."""

    def __init__(self, key: str):
        super().__init__(key, f"The key '{key}' already exists")


class CasMismatchError(StorageError):
    """The stored cas differs from the one supplied with a replace."""

    def __init__(self, key: str):
        super().__init__(key, f"The cas supplied for key '{key}' is stale")
