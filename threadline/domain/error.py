"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class MalformedPayloadError(DomainError):
    """Raised when data read back from storage violates the comment schema.

    Storage imposes no schema, so this is the only guard against corrupted
    or adversarial records. Callers can rely on it being distinct from
    NotFoundError: one means "corrupt data", the other "missing data".
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StorageWriteError(DomainError):
    """Raised when the storage substrate fails to create, save or append."""

    pass


class IndexOutOfRangeError(DomainError):
    """Raised when a reply index is outside the current reply list."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Reply index {index} out of range for {length} replies")


class NoUserNameError(DomainError):
    """Raised when no display name is selected for the current user."""

    def __init__(self, message: str = "You need to select a username."):
        super().__init__(message)


class DisposedError(DomainError):
    """Raised when a handle is used or released after it was disposed."""

    pass
