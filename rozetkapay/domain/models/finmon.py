"""Financial monitoring contracts"""

from typing import Optional

from rozetkapay.domain.models.base import Amount, Contract


class P2PPaymentPreLimitsResponse(Contract):
    """Remaining P2P allowance for one recipient tax number (IPN)"""

    recipient_ipn: Optional[str] = None
    amount_left: Optional[Amount] = None
    total_count_left: Optional[int] = None
    card_only_count_left: Optional[int] = None
