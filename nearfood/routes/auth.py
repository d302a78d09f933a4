from flask import Blueprint, request, current_app
from flask_limiter.util import get_remote_address
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash
import logging
from extensions import limiter
from models import db
from models.user import User
from nearfood.version import API_PREFIX
from nearfood.schemas.auth import LoginRequest, SignupRequest, RefreshRequest
from nearfood.utils import (
    ok,
    error,
    internal_error_response,
    validate_schema,
    create_access_token,
    create_refresh_token,
    decode_token,
    TokenError,
)

auth_bp = Blueprint("auth", __name__, url_prefix=f"{API_PREFIX}/auth")

SIGNUP_FAILED = "Unable to create account. Please try again."
LOGIN_FAILED = "Invalid email or password"


def _session_payload(user):
    return {
        "user": user.to_dict(),
        "access_token": create_access_token(user.id, user.email),
        "refresh_token": create_refresh_token(user.id),
        "expires_in": current_app.config["ACCESS_TOKEN_LIFETIME_MIN"] * 60,
    }


@auth_bp.route("/signup", methods=["POST"])
@validate_schema(SignupRequest)
def signup():
    data = request.validated_data
    # Same response for taken emails so accounts cannot be enumerated
    if User.query.filter_by(email=data.email).first():
        return error(SIGNUP_FAILED, status=400)
    user = User(email=data.email, password_hash=generate_password_hash(data.password))
    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return error(SIGNUP_FAILED, status=400)
    except Exception:
        db.session.rollback()
        logging.exception("Signup error")
        return internal_error_response("An error occurred during signup")
    logging.info({"event": "signup", "user_id": user.id, "email": user.email})
    return ok(_session_payload(user), status=201)


@auth_bp.route("/login", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["LOGIN_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many login attempts. Please try again later.",
)
@validate_schema(LoginRequest)
def login():
    data = request.validated_data
    user = User.query.filter_by(email=data.email).first()
    if not user or not check_password_hash(user.password_hash, data.password):
        return error(LOGIN_FAILED, status=401)
    return ok(_session_payload(user))


@auth_bp.route("/refresh", methods=["POST"])
@validate_schema(RefreshRequest)
def refresh_tokens():
    try:
        payload = decode_token(request.validated_data.refresh_token, expected_type="refresh")
    except TokenError:
        return error("Unauthorized", status=401)
    user = db.session.get(User, payload.get("sub"))
    if not user:
        return error("Unauthorized", status=401)
    return ok(_session_payload(user))
