import importlib
import json
import sys
import logging

import pytest


def load_app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    for module in ["main", "nearfood.config"]:
        if module in sys.modules:
            del sys.modules[module]
    entry = importlib.import_module("main")
    return entry.app


@pytest.fixture()
def test_client(monkeypatch):
    app = load_app(monkeypatch)
    app.config.update(TESTING=True)
    return app.test_client()


def test_request_id_header_and_propagation(test_client):
    resp = test_client.get("/__ok", headers={"X-Request-ID": "my-fixed-id-123"})
    assert resp.status_code == 200
    assert resp.headers.get("X-Request-ID") == "my-fixed-id-123"


def test_request_id_generated_when_missing(test_client):
    resp = test_client.get("/__ok")
    assert len(resp.headers.get("X-Request-ID")) == 32


def test_logs_include_request_id_attribute(monkeypatch, caplog):
    app = load_app(monkeypatch)
    app.config.update(TESTING=True)
    caplog.set_level("INFO")
    client = app.test_client()
    resp = client.get("/__log", headers={"X-Request-ID": "rid-abc"})
    assert resp.status_code == 200
    assert any(getattr(r, "request_id", "") == "rid-abc" for r in caplog.records)


def test_sensitive_fields_masked_in_info(monkeypatch, caplog):
    from nearfood.logging import MaskingFilter
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    app = load_app(monkeypatch)
    caplog.set_level("INFO")
    caplog.handler.addFilter(MaskingFilter())
    logger = logging.getLogger("mask_test")
    with app.app_context():
        logger.info({"email": "user@example.com", "refresh_token": "abc", "delivery_phone": "999", "order_id": "o1"})
    record = next(r for r in caplog.records if r.name == "mask_test")
    assert isinstance(record.msg, dict)
    assert record.msg["email"] == "[REDACTED]"
    assert record.msg["refresh_token"] == "[REDACTED]"
    assert record.msg["delivery_phone"] == "[REDACTED]"
    assert record.msg["order_id"] == "o1"


def test_sensitive_fields_visible_in_debug(monkeypatch, caplog):
    from nearfood.logging import MaskingFilter
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("APP_ENV", "development")
    caplog.set_level("DEBUG")
    caplog.handler.addFilter(MaskingFilter())
    logger = logging.getLogger("mask_test_debug")
    logger.debug({"password": "secret"})
    record = next(r for r in caplog.records if r.name == "mask_test_debug")
    assert isinstance(record.msg, dict)
    assert record.msg["password"] == "secret"


def test_json_formatter_emits_one_object_per_line():
    from nearfood.logging import JsonFormatter
    record = logging.LogRecord("nearfood", logging.INFO, __file__, 1, {"event": "signup", "user_id": "u1"}, None, None)
    record.request_id = "rid-1"
    line = JsonFormatter().format(record)
    data = json.loads(line)
    assert data["event"] == "signup"
    assert data["request_id"] == "rid-1"
    assert data["level"] == "INFO"


def test_nested_order_details_and_bearer_tokens_masked(caplog):
    from nearfood.logging import MaskingFilter
    caplog.set_level("INFO")
    caplog.handler.addFilter(MaskingFilter())
    logger = logging.getLogger("mask_nested")
    logger.info({"order_id": "o1", "delivery": {"delivery_phone": "9876543210", "delivery_name": "Asha"}})
    logger.warning("Rejected header %s", "Bearer eyJhbGciOi.payload.sig")
    nested, header = [r for r in caplog.records if r.name == "mask_nested"]
    assert nested.msg["delivery"] == {"delivery_phone": "[REDACTED]", "delivery_name": "Asha"}
    assert nested.msg["order_id"] == "o1"
    assert header.getMessage() == "Rejected header Bearer [REDACTED]"
