"""Domain errors raised by the service layer.

Services never raise HTTP errors; `socialnet.error_handler` maps these
onto responses for the API layer.
"""


class DomainError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """Referenced entity is absent, or not owned by the caller."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Caller lacks rights over an entity that does exist."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class RejectedError(DomainError):
    """Well-formed request that violates a domain rule."""

    def __init__(self, message: str):
        super().__init__(message)
