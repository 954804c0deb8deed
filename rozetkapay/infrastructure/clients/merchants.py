"""Merchant account API client"""

from rozetkapay.domain.models.merchants import (
    CommissionRatesResponse,
    MerchantSettingsResponse,
    MerchantValidationResponse,
    UpdateMerchantSettingsRequest,
)
from rozetkapay.infrastructure.clients.base import BaseService


class MerchantService(BaseService):
    """Client for merchant identity and settings endpoints"""

    service_name = "merchants"

    async def get_info(self) -> MerchantValidationResponse:
        """Check that the configured credentials belong to an active merchant"""
        return await self._get("/api/merchants/v1/me", MerchantValidationResponse)

    async def get_settings(self) -> MerchantSettingsResponse:
        return await self._get("/api/merchant/v1/settings", MerchantSettingsResponse)

    async def update_settings(self, request: UpdateMerchantSettingsRequest) -> MerchantSettingsResponse:
        return await self._post("/api/merchant/v1/settings", MerchantSettingsResponse, request)

    async def get_commission_rates(self) -> CommissionRatesResponse:
        return await self._get("/api/merchant/v1/commission-rates", CommissionRatesResponse)
