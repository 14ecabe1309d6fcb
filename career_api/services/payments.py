import json
import logging
from typing import Any, Dict

import stripe

from career_api import config

logger = logging.getLogger(__name__)


class PaymentError(RuntimeError):
    """Creating or verifying a payment-provider object failed."""


def _configure() -> None:
    if not config.STRIPE_SECRET_KEY:
        raise PaymentError("Stripe is not configured (STRIPE_SECRET_KEY missing)")
    stripe.api_key = config.STRIPE_SECRET_KEY


def create_checkout_session(form_data: Dict[str, Any]) -> str:
    """Create a Stripe Checkout session for one analysis and return its id.

    The questionnaire is carried in the session metadata so the payment can
    be matched to the submitted answers on the Stripe side.
    """
    _configure()
    try:
        session = stripe.checkout.Session.create(
            mode="payment",
            payment_method_types=config.PAYMENT_METHOD_TYPES,
            line_items=[
                {
                    "price_data": {
                        "currency": config.CURRENCY,
                        "product_data": {
                            "name": config.PRODUCT_NAME,
                            "description": config.PRODUCT_DESCRIPTION,
                        },
                        "unit_amount": config.PRICE_CENTS,
                    },
                    "quantity": 1,
                }
            ],
            success_url=config.SUCCESS_URL,
            cancel_url=config.CANCEL_URL,
            metadata={"formData": json.dumps(form_data, ensure_ascii=False)},
        )
    except Exception as e:
        raise PaymentError(str(e)) from e

    logger.info("Checkout session created: %s", session.id)
    return session.id


def parse_webhook_event(payload: bytes, signature: str) -> Dict[str, Any]:
    if config.STRIPE_WEBHOOK_SECRET:
        try:
            event = stripe.Webhook.construct_event(
                payload=payload, sig_header=signature, secret=config.STRIPE_WEBHOOK_SECRET
            )
        except Exception as e:
            raise PaymentError(f"Invalid webhook signature: {e}") from e
        return event.to_dict() if hasattr(event, "to_dict") else dict(event)

    logger.warning("STRIPE_WEBHOOK_SECRET is not set; accepting webhook without verification.")
    try:
        event = json.loads(payload)
    except ValueError as e:
        raise PaymentError("Webhook body is not valid JSON") from e
    if not isinstance(event, dict):
        raise PaymentError("Webhook body is not a JSON object")
    return event
