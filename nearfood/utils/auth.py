from functools import wraps
import logging
from flask import request, g
from .responses import error
from .jwt import decode_token, TokenError
from models import db
from models.user import User


def current_user_id():
    """Rate-limit key for per-user limits; falls back to the client IP."""
    return getattr(g, "user_id", None) or request.remote_addr or "anonymous"


def auth_required(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        # CORS preflights carry no credentials
        if request.method == "OPTIONS":
            return func(*args, **kwargs)
        auth = request.headers.get("Authorization", "")
        if not auth.startswith("Bearer "):
            return error("Unauthorized", status=401)
        token = auth.split(" ", 1)[1]
        try:
            payload = decode_token(token, expected_type="access")
        except TokenError as e:
            logging.info("Rejected access token: %s", e)
            return error("Unauthorized", status=401)

        user = db.session.get(User, payload["sub"])
        if not user:
            return error("Unauthorized", status=401)
        g.user_id = user.id
        request.user = user
        return func(*args, **kwargs)

    return wrapper
