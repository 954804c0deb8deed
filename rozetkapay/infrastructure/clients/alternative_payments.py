"""Alternative payments API client"""

from typing import Optional

from rozetkapay.domain.models.alternative_payments import (
    AlternativePaymentCallbackResendResponse,
    AlternativePaymentMethodsResponse,
    AlternativePaymentOperationResponse,
    AlternativePaymentOperationResult,
    AlternativePaymentOperationsRequest,
    AlternativePaymentOperationsResponse,
    AlternativePaymentResponse,
    AlternativePaymentStatusResponse,
    CreateAlternativePaymentRequest,
    RefundAlternativePaymentRequest,
    ResendAlternativePaymentCallbackRequest,
)
from rozetkapay.infrastructure.clients.base import BaseService
from rozetkapay.utils.query import path_segment


class AlternativePaymentService(BaseService):
    """Client for /api/alternative-payments/v1"""

    service_name = "alternative_payments"
    base_path = "/api/alternative-payments/v1"

    async def create(self, request: CreateAlternativePaymentRequest) -> AlternativePaymentResponse:
        return await self._post(f"{self.base_path}/create", AlternativePaymentResponse, request)

    async def create_operation(self, request: CreateAlternativePaymentRequest) -> AlternativePaymentOperationResult:
        """Same call as create, read as an operation result with a follow-up action"""
        return await self._post(f"{self.base_path}/create", AlternativePaymentOperationResult, request)

    async def refund(self, request: RefundAlternativePaymentRequest) -> AlternativePaymentResponse:
        return await self._post(f"{self.base_path}/refund", AlternativePaymentResponse, request)

    async def resend_callback(
        self, request: ResendAlternativePaymentCallbackRequest
    ) -> AlternativePaymentCallbackResendResponse:
        return await self._post(f"{self.base_path}/callback/resend", AlternativePaymentCallbackResendResponse, request)

    async def get_operation(self, operation_id: str) -> AlternativePaymentOperationResponse:
        return await self._get(
            f"{self.base_path}/operation/{path_segment(operation_id)}",
            AlternativePaymentOperationResponse,
        )

    async def get_operation_info(self, external_id: str, operation_id: str) -> AlternativePaymentOperationResult:
        return await self._get(
            f"{self.base_path}/info/operation",
            AlternativePaymentOperationResult,
            {"external_id": external_id, "operation_id": operation_id},
        )

    async def get_operations(
        self, request: Optional[AlternativePaymentOperationsRequest] = None
    ) -> AlternativePaymentOperationsResponse:
        request = request or AlternativePaymentOperationsRequest()
        return await self._get(
            f"{self.base_path}/operations",
            AlternativePaymentOperationsResponse,
            request.model_dump(),
        )

    async def get_info(self, external_id: str) -> AlternativePaymentResponse:
        return await self._get(f"{self.base_path}/info", AlternativePaymentResponse, {"external_id": external_id})

    async def get_methods(self) -> AlternativePaymentMethodsResponse:
        return await self._get(f"{self.base_path}/methods", AlternativePaymentMethodsResponse)

    async def get_status(self, payment_id: str) -> AlternativePaymentStatusResponse:
        return await self._get(f"{self.base_path}/{path_segment(payment_id)}/status", AlternativePaymentStatusResponse)
