"""Error taxonomy shared by the services and mapped to HTTP responses in main.py"""


class ServiceError(Exception):
    """Base class for errors surfaced to callers"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    status_code = 404

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found")
        self.entity = entity


class ConflictError(ServiceError):
    status_code = 409


class ValidationError(ServiceError):
    status_code = 400

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class AuthError(ServiceError):
    status_code = 401


class InternalError(ServiceError):
    """Store, cache or queue unavailable; details are logged, never returned"""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
