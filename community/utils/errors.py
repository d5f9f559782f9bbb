"""
Service Errors

Exception taxonomy raised by the services. Controllers translate each kind
into an HTTP status through `status_code`.
"""


class ServiceError(Exception):
    """Base class for errors surfaced to the caller of a service operation."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """A referenced record (user, message) does not exist."""
    status_code = 404


class ConflictError(ServiceError):
    """A uniqueness rule (username, email) would be violated."""
    status_code = 409


class UnauthorizedError(ServiceError):
    """Credentials did not match any user."""
    status_code = 401


class ValidationError(ServiceError):
    """Malformed or missing input fields."""
    status_code = 400


class StorageError(ServiceError):
    """A collection could not be read or written."""
    status_code = 500
