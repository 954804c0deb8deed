"""Merchant account contracts"""

from typing import List, Optional

from rozetkapay.domain.models.base import Amount, Contract


class PaymentMethodConfig(Contract):
    type: Optional[str] = None
    enabled: Optional[bool] = None
    commission_rate: Optional[Amount] = None


class NotificationSettings(Contract):
    webhook_url: Optional[str] = None
    email_notifications: Optional[bool] = None
    sms_notifications: Optional[bool] = None


class SecuritySettings(Contract):
    ip_whitelist: Optional[List[str]] = None
    require_3ds: Optional[bool] = None


class UpdateMerchantSettingsRequest(Contract):
    payment_methods: Optional[List[PaymentMethodConfig]] = None
    notifications: Optional[NotificationSettings] = None
    security: Optional[SecuritySettings] = None


class MerchantValidationResponse(Contract):
    """Credential check returned by /api/merchants/v1/me"""

    status: Optional[str] = None


class MerchantSettingsResponse(Contract):
    payment_methods: Optional[List[PaymentMethodConfig]] = None
    notifications: Optional[NotificationSettings] = None
    security: Optional[SecuritySettings] = None


class CommissionRate(Contract):
    payment_method: Optional[str] = None
    rate: Optional[Amount] = None
    fixed_fee: Optional[Amount] = None
    currency: Optional[str] = None


class CommissionRatesResponse(Contract):
    rates: Optional[List[CommissionRate]] = None
