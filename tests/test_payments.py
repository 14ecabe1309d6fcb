import json
from types import SimpleNamespace

import pytest

from career_api import config
from career_api.services import payments


@pytest.fixture
def stripe_key(monkeypatch):
    monkeypatch.setattr(config, "STRIPE_SECRET_KEY", "sk_test_dummy")


def test_checkout_session_parameters(stripe_key, monkeypatch, form_data):
    captured = {}

    def fake_create(**kwargs):
        captured.update(kwargs)
        return SimpleNamespace(id="cs_test_abc")

    monkeypatch.setattr(payments.stripe.checkout.Session, "create", fake_create)

    assert payments.create_checkout_session(form_data) == "cs_test_abc"
    assert captured["mode"] == "payment"
    assert captured["success_url"] == config.SUCCESS_URL
    assert captured["cancel_url"] == config.CANCEL_URL
    assert captured["payment_method_types"] == config.PAYMENT_METHOD_TYPES

    item = captured["line_items"][0]
    assert item["quantity"] == 1
    assert item["price_data"]["unit_amount"] == config.PRICE_CENTS
    assert item["price_data"]["currency"] == config.CURRENCY
    assert json.loads(captured["metadata"]["formData"]) == form_data


def test_provider_failure_becomes_payment_error(stripe_key, monkeypatch, form_data):
    def fake_create(**kwargs):
        raise ValueError("Invalid API Key provided")

    monkeypatch.setattr(payments.stripe.checkout.Session, "create", fake_create)

    with pytest.raises(payments.PaymentError, match="Invalid API Key"):
        payments.create_checkout_session(form_data)


def test_missing_secret_key(monkeypatch, form_data):
    monkeypatch.setattr(config, "STRIPE_SECRET_KEY", "")
    with pytest.raises(payments.PaymentError):
        payments.create_checkout_session(form_data)


def test_unverified_webhook_must_be_json(monkeypatch):
    monkeypatch.setattr(config, "STRIPE_WEBHOOK_SECRET", "")
    assert payments.parse_webhook_event(b'{"type": "ping"}', "") == {"type": "ping"}
    with pytest.raises(payments.PaymentError):
        payments.parse_webhook_event(b"not json", "")
    for body in (b"[1, 2]", b"42", b'"checkout.session.completed"', b"null"):
        with pytest.raises(payments.PaymentError, match="not a JSON object"):
            payments.parse_webhook_event(body, "")
