import math
from flask import Blueprint, request
from models import db
from models.restaurant import Restaurant, MenuCategory, MenuItem
from nearfood.exceptions import NotFoundError
from nearfood.version import API_PREFIX
from nearfood.schemas.catalog import RestaurantListQuery, MenuQuery
from nearfood.utils import ok, validate_query, reading

restaurant_bp = Blueprint("restaurants", __name__, url_prefix=f"{API_PREFIX}/restaurants")


def _page(query, page, limit):
    total = query.order_by(None).count()
    rows = query.offset((page - 1) * limit).limit(limit).all()
    return rows, {
        "page": page,
        "limit": limit,
        "total": total,
        "total_pages": math.ceil(total / limit) if total else 0,
    }


@restaurant_bp.route("", methods=["GET"])
@validate_query(RestaurantListQuery)
def list_restaurants():
    """Open restaurants, best rated first.

    lat/lng are accepted for forward compatibility; results are not
    filtered by distance.
    """
    q = request.validated_query
    query = Restaurant.query.filter(Restaurant.is_open.is_(True)).order_by(
        Restaurant.rating.is_(None), Restaurant.rating.desc(), Restaurant.name
    )
    with reading("Failed to fetch restaurants"):
        rows, pagination = _page(query, q.page, q.limit)
    return ok({"data": [r.to_dict() for r in rows], "pagination": pagination})


@restaurant_bp.route("/<restaurant_id>/menu", methods=["GET"])
@validate_query(MenuQuery)
def restaurant_menu(restaurant_id):
    q = request.validated_query
    with reading("Failed to fetch menu"):
        restaurant = db.session.get(Restaurant, restaurant_id)
    if not restaurant:
        raise NotFoundError("Restaurant not found")
    query = (
        MenuItem.query.outerjoin(MenuCategory, MenuItem.category_id == MenuCategory.id)
        .filter(MenuItem.restaurant_id == restaurant_id, MenuItem.is_available.is_(True))
        .order_by(MenuCategory.display_order, MenuItem.name)
    )
    with reading("Failed to fetch menu"):
        rows, pagination = _page(query, q.page, q.limit)
    return ok({"data": [item.to_dict() for item in rows], "pagination": pagination})
