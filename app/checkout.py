"""
Mock card checkout.

No payment provider is involved: an order is classified by comparing its
card number (and the second address line) against fixed test values.
"""
import logging
from typing import Any, Dict, Tuple

from pydantic import ValidationError

from .models import (
    CheckoutFailure,
    CheckoutInput,
    CheckoutOutcome,
    CheckoutReason,
    CheckoutSuccess,
)

logger = logging.getLogger(__name__)

INVALID_ADDRESS = "invalid"
VALID_CARD = "4242424242424242"
WITHOUT_FUNDS_CARD = "4111411141114111"
WITHOUT_AUTHORIZATION_CARD = "4000400040004000"

MESSAGES = {
    CheckoutReason.INVALID_ADDRESS: "The delivery address is invalid",
    CheckoutReason.CARD_WITHOUT_FUNDS: "The card has insufficient funds",
    CheckoutReason.CARD_WITHOUT_AUTHORIZATION: "The card is not authorized for this purchase",
    CheckoutReason.CARD_DATA_INCORRECT: "The card data is incorrect",
    CheckoutReason.METHOD_NOT_ALLOWED: "Method not allowed",
    CheckoutReason.SERVER_ERROR: "Internal server error",
}

STATUS_CODES = {
    CheckoutReason.INVALID_ADDRESS: 400,
    CheckoutReason.CARD_WITHOUT_FUNDS: 400,
    CheckoutReason.CARD_WITHOUT_AUTHORIZATION: 400,
    CheckoutReason.CARD_DATA_INCORRECT: 400,
    CheckoutReason.METHOD_NOT_ALLOWED: 405,
    CheckoutReason.SERVER_ERROR: 500,
}


def normalize_card_number(number: str) -> str:
    # Only plain spaces are stripped; tabs/newlines stay and fail to match.
    return number.replace(" ", "")


def classify(order: CheckoutInput) -> CheckoutOutcome:
    if order.customer.address.address2 == INVALID_ADDRESS:
        return CheckoutFailure(reason=CheckoutReason.INVALID_ADDRESS)

    number = normalize_card_number(order.card.number)
    if number == WITHOUT_FUNDS_CARD:
        return CheckoutFailure(reason=CheckoutReason.CARD_WITHOUT_FUNDS)
    if number == WITHOUT_AUTHORIZATION_CARD:
        return CheckoutFailure(reason=CheckoutReason.CARD_WITHOUT_AUTHORIZATION)
    if number == VALID_CARD:
        return CheckoutSuccess(data=order.echo())

    return CheckoutFailure(reason=CheckoutReason.CARD_DATA_INCORRECT)


def validate(order: Any, method: str = "POST") -> CheckoutOutcome:
    """
    Classify a checkout attempt. Never raises: every problem comes back as a
    CheckoutFailure.

    `order` may be a CheckoutInput or the raw decoded JSON body; a body that
    does not decode into an order counts as a server fault.
    """
    try:
        if str(method).upper() != "POST":
            return CheckoutFailure(reason=CheckoutReason.METHOD_NOT_ALLOWED)
        if not isinstance(order, CheckoutInput):
            order = CheckoutInput.from_body(order)
        outcome = classify(order)
    except ValidationError as exc:
        # the error text echoes input values, card number included
        logger.error("checkout body not decodable: %d invalid field(s)", exc.error_count())
        return CheckoutFailure(reason=CheckoutReason.SERVER_ERROR)
    except Exception:
        logger.exception("checkout classification failed")
        return CheckoutFailure(reason=CheckoutReason.SERVER_ERROR)

    if isinstance(outcome, CheckoutFailure):
        logger.info("checkout rejected: %s", outcome.reason.value)
    else:
        logger.info("checkout accepted")
    return outcome


def to_response(outcome: CheckoutOutcome) -> Tuple[int, Dict[str, Any]]:
    """Map an outcome to (HTTP status, JSON body)."""
    if isinstance(outcome, CheckoutSuccess):
        return 200, {"data": outcome.data}

    return STATUS_CODES[outcome.reason], {
        "error": outcome.reason.value,
        "message": MESSAGES[outcome.reason],
    }
