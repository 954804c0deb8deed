"""Customer wallet API client"""

from rozetkapay.domain.models.customers import (
    AddCardToWalletRequest,
    AddCardToWalletResponse,
    CardConfirmationStatusResponse,
    CustomerCardsResponse,
    CustomerWalletResponse,
    DeleteCardFromWalletResponse,
    SetDefaultCardRequest,
    SetDefaultCardResponse,
    WalletItemResponse,
)
from rozetkapay.infrastructure.clients.base import BaseService
from rozetkapay.utils.query import path_segment


class CustomerService(BaseService):
    """
    Client for /api/customers/v1.

    Wallet calls identify the customer by the merchant's external id. Access to
    a customer's wallet may additionally need customer_auth in the configuration.
    """

    service_name = "customers"
    base_path = "/api/customers/v1"

    async def get_wallet(self, customer_id: str) -> CustomerWalletResponse:
        return await self._get(f"{self.base_path}/wallet", CustomerWalletResponse, {"external_id": customer_id})

    async def add_card(self, customer_id: str, request: AddCardToWalletRequest) -> AddCardToWalletResponse:
        return await self._post(
            f"{self.base_path}/wallet",
            AddCardToWalletResponse,
            request,
            params={"external_id": customer_id},
        )

    async def delete_card(self, customer_id: str, card_id: str) -> DeleteCardFromWalletResponse:
        return await self._delete(
            f"{self.base_path}/{path_segment(customer_id)}/cards/{path_segment(card_id)}",
            DeleteCardFromWalletResponse,
        )

    async def get_wallet_item(self, customer_id: str, card_id: str) -> WalletItemResponse:
        return await self._get(
            f"{self.base_path}/wallet/find",
            WalletItemResponse,
            {"external_id": customer_id, "option_id": card_id},
        )

    async def get_card_confirmation_status(self, customer_id: str, card_id: str) -> CardConfirmationStatusResponse:
        return await self._get(
            f"{self.base_path}/wallet/confirmation/status",
            CardConfirmationStatusResponse,
            {"external_id": customer_id, "option_id": card_id},
        )

    async def set_default_card(self, customer_id: str, request: SetDefaultCardRequest) -> SetDefaultCardResponse:
        return await self._post(
            f"{self.base_path}/wallet/settings/set",
            SetDefaultCardResponse,
            request,
            params={"external_id": customer_id},
        )

    async def get_cards(self, customer_id: str) -> CustomerCardsResponse:
        return await self._get(f"{self.base_path}/{path_segment(customer_id)}/cards", CustomerCardsResponse)
