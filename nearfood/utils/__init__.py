from .responses import ok, error, validation_error_response, internal_error_response
from .auth import auth_required, current_user_id
from .validation import validate_schema, validate_query
from .db import transactional, reading
from .retry import with_retry, is_network_error
from .jwt import (
    create_access_token,
    create_refresh_token,
    decode_token,
    TokenError,
)

__all__ = [
    'ok',
    'error',
    'validation_error_response',
    'internal_error_response',
    'auth_required',
    'current_user_id',
    'create_access_token',
    'create_refresh_token',
    'decode_token',
    'TokenError',
    'validate_schema',
    'validate_query',
    'transactional',
    'reading',
    'with_retry',
    'is_network_error',
]
