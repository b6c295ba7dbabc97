"""
Error taxonomy shared by services and routers.

Every error is an ``HTTPException`` so services can raise them directly; the
handlers in ``app.main`` render all of them as ``{"error": message}``.
"""
from fastapi import HTTPException, status


class AppError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        super().__init__(
            status_code=self.status_code, detail=message or self.default_message
        )

    @property
    def message(self) -> str:
        return self.detail


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ReferenceNotFound(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Referenced entity does not exist"


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class AccountDisabled(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Account is deactivated"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ReferenceInUse(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Entity is referenced by existing records"


class InternalError(AppError):
    pass
