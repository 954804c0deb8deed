"""Subscription and subscription plan contracts"""

from datetime import date, datetime
from typing import List, Optional

from rozetkapay.domain.models.base import Amount, Contract
from rozetkapay.domain.models.common import ErrorDetails
from rozetkapay.domain.models.payments import PaymentResponse


class SubscriptionCustomer(Contract):
    email: Optional[str] = None
    external_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None


class CreateSubscriptionPlanRequest(Contract):
    name: str
    amount: Amount
    currency: str
    frequency: str  # daily | weekly | monthly | yearly
    description: Optional[str] = None
    trial_days: Optional[int] = None


class UpdateSubscriptionPlanRequest(Contract):
    name: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[Amount] = None
    trial_days: Optional[int] = None


class CreateSubscriptionRequest(Contract):
    external_id: str
    amount: Amount
    currency: str
    frequency: str
    customer: SubscriptionCustomer
    plan_id: Optional[str] = None
    description: Optional[str] = None
    period_count: Optional[int] = None
    callback_url: Optional[str] = None
    start_date: Optional[date] = None


class UpdateSubscriptionRequest(Contract):
    amount: Optional[Amount] = None
    description: Optional[str] = None
    frequency: Optional[str] = None
    auto_renew: Optional[bool] = None
    callback_url: Optional[str] = None


class GiftSubscriptionRequest(Contract):
    """Body for POST /api/subscriptions/v1/subscriptions/gift"""

    external_id: str
    plan_id: str
    customer: SubscriptionCustomer
    gifted_periods: int
    price: Optional[Amount] = None
    auto_renew: Optional[bool] = None
    description: Optional[str] = None
    callback_url: Optional[str] = None
    result_url: Optional[str] = None
    recurrent_id: Optional[str] = None
    start_date: Optional[date] = None
    unified_external_id: Optional[str] = None


class CancelSubscriptionRequest(Contract):
    reason: Optional[str] = None
    immediate: Optional[bool] = None


class SubscriptionPlanResponse(Contract):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    frequency: Optional[str] = None
    trial_days: Optional[int] = None
    active: Optional[bool] = None
    created_at: Optional[datetime] = None


class SubscriptionPlansResponse(Contract):
    plans: Optional[List[SubscriptionPlanResponse]] = None
    total_count: Optional[int] = None


class SubscriptionResponse(Contract):
    id: Optional[str] = None
    external_id: Optional[str] = None
    plan_id: Optional[str] = None
    status: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    frequency: Optional[str] = None
    period_count: Optional[int] = None
    completed_payments: Optional[int] = None
    customer: Optional[SubscriptionCustomer] = None
    created_at: Optional[datetime] = None
    next_payment_date: Optional[datetime] = None
    error: Optional[ErrorDetails] = None


class Subscription(Contract):
    id: Optional[str] = None
    plan_id: Optional[str] = None
    status: Optional[str] = None
    auto_renew: Optional[bool] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    next_payment_date: Optional[datetime] = None


class SubscriptionPayment(Contract):
    id: Optional[str] = None
    external_id: Optional[str] = None
    status: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    checkout_url: Optional[str] = None
    created_at: Optional[datetime] = None


class CreateSubscriptionResponse(Contract):
    """First payment and the subscription it opened"""

    payment: Optional[SubscriptionPayment] = None
    subscription: Optional[Subscription] = None


class CustomerSubscriptionsResponse(Contract):
    customer_id: Optional[str] = None
    subscriptions: Optional[List[SubscriptionResponse]] = None
    total_count: Optional[int] = None


class SubscriptionPaymentsResponse(Contract):
    subscription_id: Optional[str] = None
    payments: Optional[List[PaymentResponse]] = None
    total_count: Optional[int] = None
