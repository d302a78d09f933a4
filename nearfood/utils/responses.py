from flask import jsonify

EMAIL_ERROR_PREFIX = "value is not a valid email address"


def ok(data=None, status=200):
    return jsonify(data if data is not None else {"success": True}), status


def error(message, status=400):
    return jsonify({"error": message}), status


def validation_error_response(errors):
    """Return the first pydantic issue; clients show it verbatim."""
    first = errors[0] if errors else {}
    message = first.get("msg", "Invalid request")
    if message.startswith(EMAIL_ERROR_PREFIX):
        message = "Invalid email address"
    # pydantic prefixes custom messages raised from validators
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return error(message, status=400)


def internal_error_response(message="An error occurred"):
    return error(message, status=500)
