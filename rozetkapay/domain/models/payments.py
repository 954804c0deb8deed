"""Payment contracts: one-off, recurrent and P2P payments"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from rozetkapay.domain.models.base import Amount, Contract
from rozetkapay.domain.models.common import (
    BrowserFingerprint,
    CheckoutColorMode,
    CheckoutLocale,
    PaymentMode,
    Product,
    UserAction,
)


# ---- Request side ----


class CardNumberMethod(Contract):
    number: str
    exp_month: int
    exp_year: int
    cvv: Optional[str] = None
    use_3ds_flow: Optional[bool] = None


class CardTokenMethod(Contract):
    token: str
    use_3ds_flow: Optional[bool] = None
    save_to_wallet: Optional[bool] = None


class CustomerPaymentMethod(Contract):
    """Payer's payment method for direct mode; set exactly one variant"""

    type: str  # cc | cc_token | apple_pay | google_pay | wallet
    cc: Optional[CardNumberMethod] = None
    cc_token: Optional[CardTokenMethod] = None
    apple_pay_token: Optional[str] = None
    google_pay_token: Optional[str] = None
    wallet_token: Optional[str] = None


class PaymentCustomer(Contract):
    """Payer details sent with a new payment"""

    email: Optional[str] = None
    external_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    patronym: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    ip_address: Optional[str] = None
    account_number: Optional[str] = None
    color_mode: Optional[CheckoutColorMode] = None
    locale: Optional[CheckoutLocale] = None
    payment_method: Optional[CustomerPaymentMethod] = None
    fingerprint: Optional[BrowserFingerprint] = None


class RecipientCardNumber(Contract):
    number: str
    exp_month: int
    exp_year: int


class RecipientCardToken(Contract):
    token: str
    cvv: Optional[str] = None


class RecipientPaymentMethod(Contract):
    type: str  # card_number | card_token | wallet
    card_number: Optional[RecipientCardNumber] = None
    card_token: Optional[RecipientCardToken] = None
    wallet_option_id: Optional[str] = None


class Recipient(Contract):
    """Receiving side of a P2P transfer"""

    payment_method: RecipientPaymentMethod
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None


class CreatePaymentRequest(Contract):
    """Body for POST /api/payments/v1/new"""

    amount: Amount
    currency: str
    external_id: str
    mode: PaymentMode = PaymentMode.HOSTED
    confirm: bool = True
    callback_url: Optional[str] = None
    result_url: Optional[str] = None
    description: Optional[str] = None
    payload: Optional[str] = None
    customer: Optional[PaymentCustomer] = None
    products: Optional[List[Product]] = None
    recipient: Optional[Recipient] = None
    init_recurrent_payment: Optional[bool] = None
    unified_external_id: Optional[str] = None


class CreateRecurrentPaymentRequest(Contract):
    amount: Amount
    currency: str
    external_id: str
    recurrent_id: str
    description: Optional[str] = None
    callback_url: Optional[str] = None
    customer: Optional[PaymentCustomer] = None
    metadata: Optional[Dict[str, Any]] = None


class ConfirmPaymentRequest(Contract):
    external_id: str
    amount: Optional[Amount] = None


class CancelPaymentRequest(Contract):
    external_id: str
    reason: Optional[str] = None


class RefundPaymentRequest(Contract):
    external_id: str
    amount: Optional[Amount] = None
    reason: Optional[str] = None
    external_refund_id: Optional[str] = None
    callback_url: Optional[str] = None


class RefundOperationRequest(Contract):
    """Body for retrying or cancelling a pending refund"""

    external_id: str


class P2PConfirmationRequest(Contract):
    external_id: str
    amount: Amount
    description: Optional[str] = None
    callback_url: Optional[str] = None


class PaymentListRequest(Contract):
    """Query filters for GET /api/payments/v1/list"""

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    status: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class CardLookupRequest(Contract):
    card_number: str


class ResendCallbackRequest(Contract):
    external_id: str
    callback_url: Optional[str] = None


# ---- Response side ----


class PaymentCustomerInfo(Contract):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    patronym: Optional[str] = None
    phone: Optional[str] = None
    ip: Optional[str] = None


class PaymentMethodInfo(Contract):
    type: Optional[str] = None
    title: Optional[str] = None
    payment_system: Optional[str] = None


class CardInfo(Contract):
    mask: Optional[str] = None
    bin: Optional[str] = None
    payment_system: Optional[str] = None
    type: Optional[str] = None
    bank_name: Optional[str] = None
    country: Optional[str] = None
    token: Optional[str] = None


class PaymentError(Contract):
    code: Optional[str] = None
    message: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None


class TransactionDetails(Contract):
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    status: Optional[str] = None
    status_code: Optional[str] = None
    status_description: Optional[str] = None
    transaction_id: Optional[str] = None
    operation_id: Optional[str] = None
    created_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    auth_code: Optional[str] = None
    rrn: Optional[str] = None


class PaymentResponse(Contract):
    id: Optional[str] = None
    external_id: Optional[str] = None
    unified_external_id: Optional[str] = None
    batch_external_id: Optional[str] = None
    status: Optional[str] = None
    status_code: Optional[str] = None
    status_description: Optional[str] = None
    amount: Optional[Amount] = None
    amount_canceled: Optional[Amount] = None
    amount_confirmed: Optional[Amount] = None
    amount_refunded: Optional[Amount] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    mode: Optional[str] = None
    confirm: Optional[bool] = None
    purchased: Optional[bool] = None
    canceled: Optional[bool] = None
    confirmed: Optional[bool] = None
    refunded: Optional[bool] = None
    action_required: Optional[bool] = None
    action: Optional[UserAction] = None
    checkout_url: Optional[str] = None
    qr_code_url: Optional[str] = None
    receipt_url: Optional[str] = None
    customer: Optional[PaymentCustomerInfo] = None
    payment_method: Optional[PaymentMethodInfo] = None
    card: Optional[CardInfo] = None
    auth_code: Optional[str] = None
    rrn: Optional[str] = None
    transaction_id: Optional[str] = None
    recurrent_id: Optional[str] = None
    recurrent_token: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    metadata: Optional[Dict[str, Any]] = None
    error: Optional[PaymentError] = None
    purchase_details: Optional[List[TransactionDetails]] = None
    confirmation_details: Optional[List[TransactionDetails]] = None
    cancellation_details: Optional[List[TransactionDetails]] = None
    refund_details: Optional[List[TransactionDetails]] = None


class PaymentOperationResult(Contract):
    id: Optional[str] = None
    external_id: Optional[str] = None
    unified_external_id: Optional[str] = None
    is_success: Optional[bool] = None
    details: Optional[TransactionDetails] = None
    action_required: Optional[bool] = None
    action: Optional[UserAction] = None
    receipt_url: Optional[str] = None
    payment_method: Optional[PaymentMethodInfo] = None


class PaymentListResponse(Contract):
    payments: Optional[List[PaymentResponse]] = None
    count: Optional[int] = None
    offset: Optional[int] = None


class PaymentReceiptResponse(Contract):
    receipt_url: Optional[str] = None
    receipt_pdf: Optional[str] = None
    receipt_html: Optional[str] = None


class CardLookupResponse(Contract):
    bin: Optional[str] = None
    payment_methods: Optional[List[str]] = None


class CallbackResendResponse(Contract):
    status: Optional[str] = None
    message: Optional[str] = None
