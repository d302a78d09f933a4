import logging
from flask import Blueprint
from werkzeug.exceptions import HTTPException
from nearfood.exceptions import (  # noqa: F401
    GENERIC_MESSAGE,
    AppError,
    AuthError,
    CapacityError,
    DataAccessError,
    GenericError,
    NotFoundError,
    OrderItemsError,
    ValidationError,
)
from nearfood.utils.responses import error

errors_bp = Blueprint("errors_bp", __name__)


@errors_bp.app_errorhandler(AppError)
def handle_app_error(e):
    if e.status >= 500:
        logging.error("%s: %s", type(e).__name__, e.message, exc_info=e.__cause__ or e)
    return error(e.message, status=e.status)


@errors_bp.app_errorhandler(HTTPException)
def handle_http_exception(e):
    msg = e.description or getattr(e, "name", "HTTP Error")
    return error(msg, status=e.code)


@errors_bp.app_errorhandler(Exception)
def handle_unexpected_exception(e):
    logging.exception("Unhandled exception")
    return error(GENERIC_MESSAGE, status=500)
