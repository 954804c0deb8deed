"""Payments API client: one-off, recurrent and P2P payments"""

from decimal import Decimal
from typing import Optional

from rozetkapay.domain.models.common import PaymentMode
from rozetkapay.domain.models.payments import (
    CallbackResendResponse,
    CancelPaymentRequest,
    CardLookupRequest,
    CardLookupResponse,
    ConfirmPaymentRequest,
    CreatePaymentRequest,
    CreateRecurrentPaymentRequest,
    P2PConfirmationRequest,
    PaymentCustomer,
    PaymentListRequest,
    PaymentListResponse,
    PaymentOperationResult,
    PaymentReceiptResponse,
    PaymentResponse,
    Recipient,
    RecipientCardNumber,
    RecipientPaymentMethod,
    RefundOperationRequest,
    RefundPaymentRequest,
    ResendCallbackRequest,
)
from rozetkapay.infrastructure.clients.base import BaseService

P2P_DEFAULT_DESCRIPTION = "P2P Transfer"
P2P_DEFAULT_CUSTOMER_EMAIL = "customer@example.com"


class PaymentService(BaseService):
    """Client for /api/payments/v1"""

    service_name = "payments"
    base_path = "/api/payments/v1"

    async def create(self, request: CreatePaymentRequest) -> PaymentResponse:
        """Start a payment; hosted mode answers with a checkout URL in action.value"""
        return await self._post(f"{self.base_path}/new", PaymentResponse, request)

    async def create_recurrent(self, request: CreateRecurrentPaymentRequest) -> PaymentResponse:
        return await self._post(f"{self.base_path}/recurrent", PaymentResponse, request)

    async def confirm(self, request: ConfirmPaymentRequest) -> PaymentResponse:
        """Capture a two-step payment, fully or partially"""
        return await self._post(f"{self.base_path}/confirm", PaymentResponse, request)

    async def cancel(self, request: CancelPaymentRequest) -> PaymentResponse:
        return await self._post(f"{self.base_path}/cancel", PaymentResponse, request)

    async def refund(self, request: RefundPaymentRequest) -> PaymentResponse:
        return await self._post(f"{self.base_path}/refund", PaymentResponse, request)

    async def retry_refund(self, request: RefundOperationRequest) -> PaymentOperationResult:
        return await self._post(f"{self.base_path}/refund/retry", PaymentOperationResult, request)

    async def cancel_refund(self, request: RefundOperationRequest) -> PaymentOperationResult:
        return await self._post(f"{self.base_path}/refund/cancel", PaymentOperationResult, request)

    async def get_info(self, external_id: str) -> PaymentResponse:
        return await self._get(f"{self.base_path}/info", PaymentResponse, {"external_id": external_id})

    async def get_list(self, request: Optional[PaymentListRequest] = None) -> PaymentListResponse:
        request = request or PaymentListRequest()
        return await self._get(f"{self.base_path}/list", PaymentListResponse, request.model_dump())

    async def get_receipt(self, external_id: str) -> PaymentReceiptResponse:
        return await self._get(f"{self.base_path}/receipt", PaymentReceiptResponse, {"external_id": external_id})

    async def card_lookup(self, request: CardLookupRequest) -> CardLookupResponse:
        """Resolve the BIN and payment methods available for a card number"""
        return await self._post(f"{self.base_path}/lookup", CardLookupResponse, request)

    async def resend_callback(self, request: ResendCallbackRequest) -> CallbackResendResponse:
        return await self._post(f"{self.base_path}/callback/resend", CallbackResendResponse, request)

    async def create_p2p(self, request: CreatePaymentRequest) -> PaymentResponse:
        """
        Start a card-to-card transfer.

        Raises:
            ValueError: The request carries no recipient; nothing is sent
        """
        if request is None:
            raise ValueError("request is required")
        if request.recipient is None:
            raise ValueError("P2P payment requires recipient information")
        return await self._post(f"{self.base_path}/new", PaymentResponse, request)

    async def confirm_p2p(self, external_id: str, amount: Decimal) -> PaymentResponse:
        request = P2PConfirmationRequest(external_id=external_id, amount=amount)
        return await self._post(f"{self.base_path}/p2p/confirm", PaymentResponse, request)

    @staticmethod
    def build_p2p_request(
        amount: Decimal,
        currency: str,
        external_id: str,
        recipient_card_number: str,
        exp_month: int,
        exp_year: int,
        description: Optional[str] = None,
    ) -> CreatePaymentRequest:
        """Direct-mode payment request paying out to a recipient card number"""
        return CreatePaymentRequest(
            amount=amount,
            currency=currency,
            external_id=external_id,
            mode=PaymentMode.DIRECT,
            description=description or P2P_DEFAULT_DESCRIPTION,
            customer=PaymentCustomer(email=P2P_DEFAULT_CUSTOMER_EMAIL),
            recipient=Recipient(
                payment_method=RecipientPaymentMethod(
                    type="card_number",
                    card_number=RecipientCardNumber(
                        number=recipient_card_number,
                        exp_month=exp_month,
                        exp_year=exp_year,
                    ),
                ),
            ),
        )
