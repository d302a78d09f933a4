from flask import Blueprint, current_app
from extensions import limiter
from nearfood.version import API_PREFIX
from nearfood.services.seed import seed_catalog
from nearfood.utils import ok, auth_required, current_user_id

seed_bp = Blueprint("seed", __name__, url_prefix=API_PREFIX)


@seed_bp.before_request
@auth_required
def _require_user():
    return None


@seed_bp.route("/seed", methods=["GET"])
@limiter.limit(
    lambda: current_app.config["SEED_LIMIT_PER_USER"],
    key_func=current_user_id,
    error_message="Too many requests. Please try again later.",
)
def seed():
    """Load the demo restaurants and menus."""
    results = seed_catalog()
    return ok({"success": True, "message": "Seed completed", "results": results})
