"""
Service-level error taxonomy.

Routes never build HTTP errors for business failures themselves; services
raise one of these and the handlers registered in ``main.py`` turn them into
JSON bodies with the matching status code.
"""


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = 400


class AuthError(ServiceError):
    status_code = 401


class ForbiddenError(ServiceError):
    status_code = 403


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    status_code = 400


class InternalError(ServiceError):
    status_code = 500
