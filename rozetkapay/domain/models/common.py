"""Contracts shared across gateway API areas"""

from enum import Enum
from typing import Optional

from rozetkapay.domain.models.base import Amount, Contract


class PaymentMode(str, Enum):
    """How the payer completes a payment"""

    DIRECT = "direct"
    HOSTED = "hosted"
    EXPRESS_CHECKOUT = "express_checkout"


class OperationStatus(str, Enum):
    """Lifecycle of a single gateway operation"""

    INIT = "init"
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class CheckoutLocale(str, Enum):
    UK = "UK"
    EN = "EN"
    ES = "ES"
    PL = "PL"
    FR = "FR"
    SK = "SK"
    DE = "DE"


class CheckoutColorMode(str, Enum):
    WHITE = "white"
    DARK = "dark"


class UserAction(Contract):
    """Follow-up the payer must perform, usually a 3DS redirect"""

    type: Optional[str] = None
    value: Optional[str] = None


class BrowserFingerprint(Contract):
    """Browser data forwarded for 3DS risk assessment"""

    browser_accept_header: Optional[str] = None
    browser_color_depth: Optional[int] = None
    browser_ip_address: Optional[str] = None
    browser_java_enabled: Optional[bool] = None
    browser_language: Optional[str] = None
    browser_screen_height: Optional[int] = None
    browser_screen_width: Optional[int] = None
    browser_time_zone: Optional[str] = None
    browser_time_zone_offset: Optional[int] = None
    browser_user_agent: Optional[str] = None


class Product(Contract):
    """Line item attached to an order"""

    name: Optional[str] = None
    price: Optional[Amount] = None
    quantity: Optional[int] = None
    sku: Optional[str] = None
    category: Optional[str] = None


class FeeDetails(Contract):
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    rate: Optional[Amount] = None


class ErrorDetails(Contract):
    """Error object embedded in gateway responses"""

    code: Optional[str] = None
    message: Optional[str] = None
    description: Optional[str] = None
    param: Optional[str] = None
    type: Optional[str] = None
    payment_id: Optional[str] = None
    error_id: Optional[str] = None
