from functools import wraps
from flask import request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest
from .responses import validation_error_response, error


def validate_schema(schema):
    """Decorator to validate request JSON against a Pydantic schema."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                payload = request.get_json()
            except BadRequest:
                return error("Invalid JSON body", status=400)
            if not isinstance(payload, dict):
                return error("Invalid JSON body", status=400)
            try:
                obj = schema(**payload)
            except ValidationError as ve:
                return validation_error_response(ve.errors())
            request.validated_data = obj
            return fn(*args, **kwargs)
        return wrapper

    return decorator


def validate_query(schema):
    """Same as validate_schema, for query-string parameters."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            params = {k: v for k, v in request.args.items() if v != ""}
            try:
                obj = schema(**params)
            except ValidationError as ve:
                return validation_error_response(ve.errors())
            request.validated_query = obj
            return fn(*args, **kwargs)
        return wrapper

    return decorator
