"""Batch payment contracts: several merchant orders paid in one checkout"""

from typing import List, Optional

from rozetkapay.domain.models.base import Amount, Contract
from rozetkapay.domain.models.common import PaymentMode, Product, UserAction
from rozetkapay.domain.models.payments import CustomerPaymentMethod, PaymentError, TransactionDetails


class BatchCustomer(Contract):
    email: Optional[str] = None
    external_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    ip_address: Optional[str] = None
    payment_method: Optional[CustomerPaymentMethod] = None


class BatchOrder(Contract):
    """One merchant order inside a batch; api_key selects the receiving merchant"""

    api_key: str
    amount: Amount
    external_id: str
    description: Optional[str] = None
    unified_external_id: Optional[str] = None
    products: Optional[List[Product]] = None


class CreateBatchPaymentRequest(Contract):
    """Body for POST /api/payments/batch/v1/new"""

    batch_external_id: str
    currency: str
    orders: List[BatchOrder]
    mode: PaymentMode = PaymentMode.HOSTED
    confirm: bool = True
    callback_url: Optional[str] = None
    result_url: Optional[str] = None
    payload: Optional[str] = None
    customer: Optional[BatchCustomer] = None


class BatchConfirmOrder(Contract):
    external_id: str
    amount: Optional[Amount] = None


class ConfirmBatchPaymentRequest(Contract):
    batch_external_id: str
    external_id: Optional[str] = None
    callback_url: Optional[str] = None
    payload: Optional[str] = None
    orders: Optional[List[BatchConfirmOrder]] = None


class CancelBatchPaymentRequest(Contract):
    external_id: str
    callback_url: Optional[str] = None
    payload: Optional[str] = None


class BatchDetails(Contract):
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    status: Optional[str] = None
    status_code: Optional[str] = None
    status_description: Optional[str] = None
    transaction_id: Optional[str] = None


class BatchOrderDetails(Contract):
    external_id: Optional[str] = None
    unified_external_id: Optional[str] = None
    amount: Optional[Amount] = None
    status: Optional[str] = None
    details: Optional[TransactionDetails] = None
    error: Optional[PaymentError] = None


class BatchPaymentMethod(Contract):
    type: Optional[str] = None
    mask: Optional[str] = None
    payment_system: Optional[str] = None


class BatchPaymentResponse(Contract):
    id: Optional[str] = None
    batch_external_id: Optional[str] = None
    action_required: Optional[bool] = None
    action: Optional[UserAction] = None
    batch_details: Optional[BatchDetails] = None
    payment_method: Optional[BatchPaymentMethod] = None
    order_details: Optional[List[BatchOrderDetails]] = None
    receipt_url: Optional[str] = None
