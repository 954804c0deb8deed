"""Payouts API client"""

from typing import Optional

from rozetkapay.domain.models.payouts import (
    BalanceResponse,
    CancelCashPayoutRequest,
    CreatePayoutRequest,
    PayoutCallbackResendResponse,
    PayoutListRequest,
    PayoutListResponse,
    PayoutResponse,
    PayoutTransactionResult,
    RequestPayoutRequest,
    ResendPayoutCallbackRequest,
)
from rozetkapay.infrastructure.clients.base import BaseService


class PayoutService(BaseService):
    """Client for /api/payouts/v1"""

    service_name = "payouts"
    base_path = "/api/payouts/v1"

    async def create(self, request: CreatePayoutRequest) -> PayoutResponse:
        return await self._post(f"{self.base_path}/new", PayoutResponse, request)

    async def request_payout(self, request: RequestPayoutRequest) -> PayoutTransactionResult:
        return await self._post(f"{self.base_path}/request-payout", PayoutTransactionResult, request)

    async def get_info(self, external_id: str) -> PayoutResponse:
        return await self._get(f"{self.base_path}/info", PayoutResponse, {"external_id": external_id})

    async def get_list(self, request: Optional[PayoutListRequest] = None) -> PayoutListResponse:
        request = request or PayoutListRequest()
        return await self._get(f"{self.base_path}/list", PayoutListResponse, request.model_dump())

    async def get_balance(self) -> BalanceResponse:
        return await self._get(f"{self.base_path}/balance", BalanceResponse)

    async def get_account_balance(self, merchant_entity_id: str) -> BalanceResponse:
        return await self._get(
            f"{self.base_path}/account-balance",
            BalanceResponse,
            {"merchant_entity_id": merchant_entity_id},
        )

    async def resend_callback(self, request: ResendPayoutCallbackRequest) -> PayoutCallbackResendResponse:
        return await self._post(f"{self.base_path}/resend-callback", PayoutCallbackResendResponse, request)

    async def cancel_cash_payout(self, request: CancelCashPayoutRequest) -> PayoutTransactionResult:
        return await self._post(f"{self.base_path}/cancel-payout", PayoutTransactionResult, request)
