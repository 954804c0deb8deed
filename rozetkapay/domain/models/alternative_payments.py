"""Alternative payment contracts (imoje, LeaseLink and similar providers)"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from rozetkapay.domain.models.base import Amount, Contract
from rozetkapay.domain.models.common import ErrorDetails, UserAction


class AlternativePaymentCustomer(Contract):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    ip_address: Optional[str] = None


class CreateAlternativePaymentRequest(Contract):
    """Body for POST /api/alternative-payments/v1/create"""

    amount: Amount
    currency: str
    external_id: str
    provider: str  # imoje | leaselink
    description: Optional[str] = None
    callback_url: Optional[str] = None
    return_url: Optional[str] = None
    customer: Optional[AlternativePaymentCustomer] = None
    payment_method_data: Optional[Dict[str, Any]] = None


class RefundAlternativePaymentRequest(Contract):
    external_id: str
    amount: Optional[Amount] = None
    reason: Optional[str] = None
    callback_url: Optional[str] = None


class ResendAlternativePaymentCallbackRequest(Contract):
    external_id: str
    operation_id: Optional[str] = None


class AlternativePaymentOperationsRequest(Contract):
    """Query filters for GET /api/alternative-payments/v1/operations"""

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    status: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class AlternativePaymentResponse(Contract):
    id: Optional[str] = None
    external_id: Optional[str] = None
    status: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    payment_url: Optional[str] = None
    payment_method: Optional[str] = None
    created_at: Optional[datetime] = None
    error: Optional[ErrorDetails] = None


class AlternativePaymentOperationResponse(Contract):
    id: Optional[str] = None
    operation_id: Optional[str] = None
    external_id: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    status_code: Optional[str] = None
    status_description: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    provider: Optional[str] = None
    created_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None


class AlternativePaymentOperationResult(Contract):
    id: Optional[str] = None
    external_id: Optional[str] = None
    is_success: Optional[bool] = None
    action_required: Optional[bool] = None
    action: Optional[UserAction] = None
    details: Optional[AlternativePaymentOperationResponse] = None
    receipt_url: Optional[str] = None


class AlternativePaymentOperationsResponse(Contract):
    operations: Optional[List[AlternativePaymentOperationResponse]] = None
    total: Optional[int] = None
    count: Optional[int] = None
    offset: Optional[int] = None


class AlternativePaymentMethod(Contract):
    code: Optional[str] = None
    name: Optional[str] = None
    logo_url: Optional[str] = None
    is_active: Optional[bool] = None


class AlternativePaymentMethodsResponse(Contract):
    methods: Optional[List[AlternativePaymentMethod]] = None


class AlternativePaymentStatusResponse(Contract):
    id: Optional[str] = None
    status: Optional[str] = None
    status_details: Optional[str] = None


class AlternativePaymentCallbackResendResponse(Contract):
    status: Optional[str] = None
    message: Optional[str] = None
