"""Payout contracts: transfers from the merchant balance to cards or cash desks"""

from datetime import date, datetime
from typing import List, Optional

from rozetkapay.domain.models.base import Amount, Contract
from rozetkapay.domain.models.common import ErrorDetails


class CardData(Contract):
    number: Optional[str] = None
    token: Optional[str] = None
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    holder_name: Optional[str] = None


class CardRecipient(Contract):
    card: CardData
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class CashRecipient(Contract):
    first_name: str
    last_name: str
    phone: str
    patronym: Optional[str] = None
    document_number: Optional[str] = None


class PayoutRecipient(Contract):
    """Destination of a payout; payout_type selects which variant is used"""

    payout_type: str  # card | cash
    card: Optional[CardRecipient] = None
    cash: Optional[CashRecipient] = None


class CreatePayoutRequest(Contract):
    """Body for POST /api/payouts/v1/new"""

    amount: Amount
    currency: str
    external_id: str
    recipient: PayoutRecipient
    description: Optional[str] = None
    callback_url: Optional[str] = None


class PayoutOrder(Contract):
    external_id: str
    currency: str
    original_amount: Amount
    description: Optional[str] = None
    callback_url: Optional[str] = None


class PayoutPayer(Contract):
    entity_id: str


class RequestPayoutRequest(Contract):
    """Body for POST /api/payouts/v1/request-payout"""

    order: PayoutOrder
    recipient: PayoutRecipient
    payer: Optional[PayoutPayer] = None


class PayoutListRequest(Contract):
    """Query filters for GET /api/payouts/v1/list"""

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    status: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class ResendPayoutCallbackRequest(Contract):
    external_id: str


class CancelCashPayoutRequest(Contract):
    external_id: str
    reason: Optional[str] = None


class PayoutResponse(Contract):
    id: Optional[str] = None
    external_id: Optional[str] = None
    status: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    recipient: Optional[PayoutRecipient] = None
    created_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    error: Optional[ErrorDetails] = None


class PayoutListResponse(Contract):
    payouts: Optional[List[PayoutResponse]] = None
    count: Optional[int] = None
    offset: Optional[int] = None


class CurrencyBalance(Contract):
    currency: Optional[str] = None
    available: Optional[Amount] = None
    pending: Optional[Amount] = None
    reserved: Optional[Amount] = None


class BalanceResponse(Contract):
    balances: Optional[List[CurrencyBalance]] = None
    total_balance: Optional[Amount] = None
    base_currency: Optional[str] = None


class PayoutTransactionResult(Contract):
    """Outcome of request-payout and cancel-payout"""

    transaction_id: Optional[str] = None
    external_id: Optional[str] = None
    fc_id: Optional[str] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    original_amount: Optional[Amount] = None
    payer_amount: Optional[Amount] = None
    payer_outer_fee: Optional[Amount] = None
    payment_type: Optional[str] = None
    payout_type: Optional[str] = None
    status: Optional[str] = None
    status_code: Optional[str] = None
    status_code_description: Optional[str] = None


class PayoutCallbackResendResponse(Contract):
    status: Optional[str] = None
    message: Optional[str] = None
