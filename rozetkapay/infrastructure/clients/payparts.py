"""PayParts (installments) API client"""

from typing import Optional

from rozetkapay.domain.models.payparts import (
    BanksInfo,
    BanksResponse,
    CancelPayPartsRequest,
    ConfirmPayPartsRequest,
    CreatePayPartsOrderRequest,
    PayPartsOperationResponse,
    PayPartsOperationResult,
    PayPartsOperationsListRequest,
    PayPartsOperationsListResponse,
    PayPartsOperationsResult,
    PayPartsOrderResponse,
    PayPartsRefundOperationRequest,
    PayPartsRefundResponse,
    PayPartsResendCallbackRequest,
    PayPartsResendCallbackResponse,
    RefundPayPartsOrderRequest,
)
from rozetkapay.infrastructure.clients.base import BaseService
from rozetkapay.utils.query import path_segment


class PayPartsService(BaseService):
    """Client for /api/payparts/v1"""

    service_name = "payparts"
    base_path = "/api/payparts/v1"

    async def get_banks(self) -> BanksResponse:
        """
        Banks offering installments, with limits in major currency units.

        An absent banks list in the answer stays None rather than [].
        """
        return await self._get(f"{self.base_path}/banks/info", BanksResponse)

    async def get_banks_info(self) -> BanksInfo:
        """Legacy bank list; accepts both a bare JSON array and a {"banks": [...]} object"""
        return await self._get(f"{self.base_path}/banks", BanksInfo)

    async def create_order(self, request: CreatePayPartsOrderRequest) -> PayPartsOrderResponse:
        return await self._post(f"{self.base_path}/order/create", PayPartsOrderResponse, request)

    async def confirm_order(self, request: ConfirmPayPartsRequest) -> PayPartsOrderResponse:
        return await self._post(f"{self.base_path}/order/confirm", PayPartsOrderResponse, request)

    async def cancel_order(self, request: CancelPayPartsRequest) -> PayPartsOrderResponse:
        return await self._post(f"{self.base_path}/order/cancel", PayPartsOrderResponse, request)

    async def refund_order(self, request: RefundPayPartsOrderRequest) -> PayPartsRefundResponse:
        return await self._post(f"{self.base_path}/refund", PayPartsRefundResponse, request)

    async def retry_refund(self, request: PayPartsRefundOperationRequest) -> PayPartsOperationResult:
        return await self._post(f"{self.base_path}/refund/retry", PayPartsOperationResult, request)

    async def cancel_refund(self, request: PayPartsRefundOperationRequest) -> PayPartsOperationResult:
        return await self._post(f"{self.base_path}/refund/cancel", PayPartsOperationResult, request)

    async def get_operation(self, operation_id: str) -> PayPartsOperationResponse:
        return await self._get(
            f"{self.base_path}/operation/{path_segment(operation_id)}",
            PayPartsOperationResponse,
        )

    async def get_operation_info(self, external_id: str, operation_id: str) -> PayPartsOperationResult:
        return await self._get(
            f"{self.base_path}/info/operation",
            PayPartsOperationResult,
            {"external_id": external_id, "operation_id": operation_id},
        )

    async def get_info(self, external_id: str) -> PayPartsOperationsResult:
        """Every operation recorded for one order"""
        return await self._get(f"{self.base_path}/info", PayPartsOperationsResult, {"external_id": external_id})

    async def get_operations(
        self, request: Optional[PayPartsOperationsListRequest] = None
    ) -> PayPartsOperationsListResponse:
        request = request or PayPartsOperationsListRequest()
        return await self._get(f"{self.base_path}/operations", PayPartsOperationsListResponse, request.model_dump())

    async def resend_callback(self, request: PayPartsResendCallbackRequest) -> PayPartsResendCallbackResponse:
        return await self._post(f"{self.base_path}/callback/resend", PayPartsResendCallbackResponse, request)
