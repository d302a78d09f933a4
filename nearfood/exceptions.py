"""Error taxonomy shared by services and routes.

Each error carries the HTTP status it maps onto. Messages of 4xx errors
are returned to the caller verbatim; 5xx messages name the failed
operation and never include driver output.
"""

GENERIC_MESSAGE = "An unexpected error occurred. Please try again later."


class AppError(Exception):
    status = 500
    default_message = GENERIC_MESSAGE

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status = 400
    default_message = "Invalid request"


class AuthError(AppError):
    status = 401
    default_message = "Unauthorized"


class NotFoundError(AppError):
    status = 404
    default_message = "Not found"


class CapacityError(AppError):
    status = 400
    default_message = "Maximum quantity exceeded"


class DataAccessError(AppError):
    status = 500


class OrderItemsError(DataAccessError):
    default_message = "Failed to create order items"


class GenericError(AppError):
    status = 500


__all__ = [
    "GENERIC_MESSAGE",
    "AppError",
    "ValidationError",
    "AuthError",
    "NotFoundError",
    "CapacityError",
    "DataAccessError",
    "OrderItemsError",
    "GenericError",
]
