import copy
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, PrivateAttr

# Only card.number and address2 are read by the checkout; every other field
# is accepted as sent.


class Address(BaseModel):
    model_config = {"extra": "allow"}

    address1: Any = None
    address2: Any = None
    city: Any = None
    state: Any = None
    zipCode: Any = None


class Customer(BaseModel):
    model_config = {"extra": "allow"}

    name: Any = None
    lastname: Any = None
    email: Any = None
    address: Address


class Card(BaseModel):
    model_config = {"extra": "allow"}

    number: str = ""
    nameOnCard: Any = None
    expDate: Any = None
    cvc: Any = None


class CheckoutInput(BaseModel):
    """
    Decoded checkout body. `order` (the product summary shown on the
    confirmation page) and any unknown keys pass through untouched.
    """

    model_config = {"extra": "allow"}

    customer: Customer
    card: Card
    order: Any = None

    _body: Optional[Dict[str, Any]] = PrivateAttr(default=None)

    @classmethod
    def from_body(cls, body: Any) -> "CheckoutInput":
        order = cls.model_validate(body)
        order._body = copy.deepcopy(body)
        return order

    def echo(self) -> Dict[str, Any]:
        if self._body is not None:
            return copy.deepcopy(self._body)
        # built in code: only what was set, no filled-in defaults
        return self.model_dump(exclude_unset=True)


class CheckoutReason(str, Enum):
    INVALID_ADDRESS = "INVALID_ADDRESS"
    CARD_WITHOUT_FUNDS = "CARD_WITHOUT_FUNDS"
    CARD_WITHOUT_AUTHORIZATION = "CARD_WITHOUT_AUTHORIZATION"
    CARD_DATA_INCORRECT = "CARD_DATA_INCORRECT"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    SERVER_ERROR = "SERVER_ERROR"


class CheckoutSuccess(BaseModel):
    model_config = {"frozen": True}

    data: Dict[str, Any]


class CheckoutFailure(BaseModel):
    model_config = {"frozen": True}

    reason: CheckoutReason


CheckoutOutcome = Union[CheckoutSuccess, CheckoutFailure]


class ErrorResponse(BaseModel):
    error: str
    message: str
