"""Customer wallet contracts"""

from datetime import datetime
from typing import List, Optional

from rozetkapay.domain.models.base import Amount, Contract
from rozetkapay.domain.models.common import ErrorDetails, UserAction


class WalletCardDetails(Contract):
    number: str
    exp_month: int
    exp_year: int
    cvv: Optional[str] = None
    holder_name: Optional[str] = None


class AddCardToWalletRequest(Contract):
    """Body for POST /api/customers/v1/wallet"""

    card: WalletCardDetails
    set_as_default: Optional[bool] = None
    verification_amount: Optional[Amount] = None


class SetDefaultCardRequest(Contract):
    card_id: str


class WalletCard(Contract):
    id: Optional[str] = None
    mask: Optional[str] = None
    payment_system: Optional[str] = None
    type: Optional[str] = None
    bank_name: Optional[str] = None
    is_default: Optional[bool] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None


class CustomerWalletResponse(Contract):
    customer_id: Optional[str] = None
    cards: Optional[List[WalletCard]] = None
    default_card_id: Optional[str] = None


class AddCardToWalletResponse(Contract):
    card: Optional[WalletCard] = None
    verification_required: Optional[bool] = None
    action: Optional[UserAction] = None
    error: Optional[ErrorDetails] = None


class DeleteCardFromWalletResponse(Contract):
    success: Optional[bool] = None
    message: Optional[str] = None


class WalletTransaction(Contract):
    id: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None


class WalletItemResponse(Contract):
    card: Optional[WalletCard] = None
    transactions: Optional[List[WalletTransaction]] = None


class CardConfirmationStatusResponse(Contract):
    option_id: Optional[str] = None
    status: Optional[str] = None
    confirmed: Optional[bool] = None
    action: Optional[UserAction] = None


class SetDefaultCardResponse(Contract):
    success: Optional[bool] = None
    default_card_id: Optional[str] = None


class CustomerCardsResponse(Contract):
    customer_id: Optional[str] = None
    cards: Optional[List[WalletCard]] = None
    total_count: Optional[int] = None
