"""Financial monitoring API client"""

from rozetkapay.domain.models.finmon import P2PPaymentPreLimitsResponse
from rozetkapay.infrastructure.clients.base import BaseService


class FinMonService(BaseService):
    """Client for /api/finmon/v1"""

    service_name = "finmon"

    async def get_p2p_pre_limits(self, recipient_ipn: str) -> P2PPaymentPreLimitsResponse:
        """Remaining P2P limits for a recipient identified by tax number"""
        return await self._get(
            "/api/finmon/v1/p2p-payment/pre-limits",
            P2PPaymentPreLimitsResponse,
            {"recipient_ipn": recipient_ipn},
        )
