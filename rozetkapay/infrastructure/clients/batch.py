"""Batch payments API client"""

from rozetkapay.domain.models.batch import (
    BatchPaymentResponse,
    CancelBatchPaymentRequest,
    ConfirmBatchPaymentRequest,
    CreateBatchPaymentRequest,
)
from rozetkapay.infrastructure.clients.base import BaseService


class BatchPaymentService(BaseService):
    """Client for /api/payments/batch/v1"""

    service_name = "batch_payments"
    base_path = "/api/payments/batch/v1"

    async def create(self, request: CreateBatchPaymentRequest) -> BatchPaymentResponse:
        return await self._post(f"{self.base_path}/new", BatchPaymentResponse, request)

    async def confirm(self, request: ConfirmBatchPaymentRequest) -> BatchPaymentResponse:
        return await self._post(f"{self.base_path}/confirm", BatchPaymentResponse, request)

    async def cancel(self, request: CancelBatchPaymentRequest) -> BatchPaymentResponse:
        return await self._post(f"{self.base_path}/cancel", BatchPaymentResponse, request)
