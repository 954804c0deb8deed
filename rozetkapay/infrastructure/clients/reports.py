"""Reports API client"""

from rozetkapay.domain.models.reports import (
    PaymentsReportRequest,
    PaymentsReportResponse,
    TransactionsReportRequest,
    TransactionsReportResponse,
)
from rozetkapay.infrastructure.clients.base import BaseService


class ReportService(BaseService):
    """Client for /api/reports/v1"""

    service_name = "reports"
    base_path = "/api/reports/v1"

    async def get_payments_report(self, request: PaymentsReportRequest) -> PaymentsReportResponse:
        return await self._post(f"{self.base_path}/payments", PaymentsReportResponse, request)

    async def get_transactions_report(self, request: TransactionsReportRequest) -> TransactionsReportResponse:
        return await self._post(f"{self.base_path}/transactions", TransactionsReportResponse, request)
