"""PayParts (installment payments) contracts"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import model_validator

from rozetkapay.domain.models.base import Amount, Contract
from rozetkapay.domain.models.common import UserAction

MINOR_UNITS_PER_MAJOR = 100


# ---- Banks and limits ----


class PeriodInfo(Contract):
    """Fee charged for one installment duration"""

    period: Optional[int] = None  # months
    fee: Optional[Amount] = None


class BankLimits(Contract):
    """
    Order amount bounds in major currency units (UAH, not kopecks).

    An absent min_amount means the bank accepts the minimum amount required by
    order creation. An absent max_amount means there is no upper bound. Neither
    case is replaced by a number at parse time.
    """

    min_amount: Optional[Amount] = None
    max_amount: Optional[Amount] = None


class LimitsLegacy(Contract):
    """
    Older limits shape in minor currency units (100 = 1 UAH) with part bounds.

    Not interchangeable with BankLimits: same field names, different units.
    """

    min_amount: Optional[int] = None
    max_amount: Optional[int] = None
    min_parts: Optional[int] = None
    max_parts: Optional[int] = None

    @property
    def min_amount_major(self) -> Optional[Decimal]:
        if self.min_amount is None:
            return None
        return Decimal(self.min_amount) / MINOR_UNITS_PER_MAJOR

    @property
    def max_amount_major(self) -> Optional[Decimal]:
        if self.max_amount is None:
            return None
        return Decimal(self.max_amount) / MINOR_UNITS_PER_MAJOR


class BankInfo(Contract):
    """
    Installment offering of one bank.

    available_periods and periods are independent facts: a bank may list
    period counts without fee details, and the lists need not line up.
    """

    name: Optional[str] = None
    available_periods: Optional[List[int]] = None
    limits: Optional[BankLimits] = None
    periods: Optional[List[PeriodInfo]] = None


class BanksResponse(Contract):
    """Envelope returned by GET /api/payparts/v1/banks/info"""

    banks: Optional[List[BankInfo]] = None  # None means "no data", distinct from []
    status: Optional[str] = None
    message: Optional[str] = None
    total_count: Optional[int] = None


class BanksInfo(Contract):
    """Bare bank list returned by the legacy GET /api/payparts/v1/banks"""

    banks: Optional[List[BankInfo]] = None

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_array(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"banks": data}
        return data


# ---- Orders ----


class PayPartsCustomer(Contract):
    first_name: str
    last_name: str
    phone: str
    patronym: Optional[str] = None
    email: Optional[str] = None
    birth_date: Optional[date] = None


class PayPartsProduct(Contract):
    name: str
    price: Amount
    quantity: int = 1
    category: Optional[str] = None
    url: Optional[str] = None


class CreatePayPartsOrderRequest(Contract):
    """Body for POST /api/payparts/v1/order/create"""

    external_id: str
    amount: Amount
    currency: str
    parts_count: int
    description: Optional[str] = None
    bank: Optional[str] = None
    merchant_id: Optional[str] = None
    callback_url: Optional[str] = None
    success_url: Optional[str] = None
    failure_url: Optional[str] = None
    customer: Optional[PayPartsCustomer] = None
    products: Optional[List[PayPartsProduct]] = None
    metadata: Optional[Dict[str, Any]] = None


class ConfirmPayPartsRequest(Contract):
    external_id: str
    callback_url: Optional[str] = None
    payload: Optional[str] = None


class CancelPayPartsRequest(Contract):
    external_id: str
    callback_url: Optional[str] = None
    payload: Optional[str] = None


class RefundPayPartsOrderRequest(Contract):
    external_id: str
    amount: Optional[Amount] = None
    reason: Optional[str] = None
    external_refund_id: Optional[str] = None


class PayPartsRefundOperationRequest(Contract):
    """Body for retrying or cancelling a pending PayParts refund"""

    external_id: str


class PayPartsError(Contract):
    code: Optional[str] = None
    message: Optional[str] = None
    description: Optional[str] = None


class PayPartsOrderResponse(Contract):
    id: Optional[str] = None
    external_id: Optional[str] = None
    status: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    parts_count: Optional[int] = None
    bank: Optional[str] = None
    checkout_url: Optional[str] = None
    qr_code: Optional[str] = None
    created_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    customer: Optional[PayPartsCustomer] = None
    products: Optional[List[PayPartsProduct]] = None
    error: Optional[PayPartsError] = None


class PayPartsRefundResponse(Contract):
    refund_id: Optional[str] = None
    external_refund_id: Optional[str] = None
    status: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    reason: Optional[str] = None
    created_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None


# ---- Operations ----


class PayPartsOperationResponse(Contract):
    id: Optional[str] = None
    external_id: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    parts_count: Optional[int] = None
    bank: Optional[str] = None
    created_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None


class PayPartsOperationDetails(Contract):
    method: Optional[str] = None  # create | confirm | cancel | refund
    operation_id: Optional[str] = None
    transaction_id: Optional[str] = None
    billing_order_id: Optional[str] = None
    gateway_order_id: Optional[str] = None
    rrn: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    status: Optional[str] = None
    status_code: Optional[str] = None
    status_description: Optional[str] = None
    created_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    payload: Optional[str] = None
    auth_code: Optional[str] = None
    bank_name: Optional[str] = None


class PayPartsOperationResult(Contract):
    id: Optional[str] = None
    external_id: Optional[str] = None
    unified_external_id: Optional[str] = None
    is_success: Optional[bool] = None
    details: Optional[PayPartsOperationDetails] = None
    action_required: Optional[bool] = None
    action: Optional[UserAction] = None
    receipt_url: Optional[str] = None


class PayPartsOperationsResult(Contract):
    """Every operation recorded for one external order id"""

    external_id: Optional[str] = None
    unified_external_id: Optional[str] = None
    amount: Optional[Amount] = None
    amount_confirmed: Optional[Amount] = None
    amount_canceled: Optional[Amount] = None
    amount_refunded: Optional[Amount] = None
    currency: Optional[str] = None
    purchased: Optional[bool] = None
    purchase_details: Optional[PayPartsOperationDetails] = None
    confirmed: Optional[bool] = None
    confirmation_details: Optional[List[PayPartsOperationDetails]] = None
    refunded: Optional[bool] = None
    refund_details: Optional[List[PayPartsOperationDetails]] = None
    canceled: Optional[bool] = None
    cancellation_details: Optional[List[PayPartsOperationDetails]] = None
    receipt_url: Optional[str] = None
    created_at: Optional[datetime] = None
    action_required: Optional[bool] = None
    action: Optional[UserAction] = None


class PayPartsOperationsListRequest(Contract):
    """Query filters for GET /api/payparts/v1/operations"""

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    status: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class PayPartsOperationsListResponse(Contract):
    operations: Optional[List[PayPartsOperationResponse]] = None
    total: Optional[int] = None
    count: Optional[int] = None
    offset: Optional[int] = None


class PayPartsResendCallbackRequest(Contract):
    external_id: str
    callback_url: Optional[str] = None


class PayPartsResendCallbackResponse(Contract):
    status: Optional[str] = None
    message: Optional[str] = None
