"""Client façade composing every gateway service over one transport"""

import logging
from typing import Optional

import httpx

from rozetkapay.config import RozetkaPayConfiguration
from rozetkapay.domain.exceptions import ConfigurationError
from rozetkapay.infrastructure.clients.alternative_payments import AlternativePaymentService
from rozetkapay.infrastructure.clients.batch import BatchPaymentService
from rozetkapay.infrastructure.clients.customers import CustomerService
from rozetkapay.infrastructure.clients.finmon import FinMonService
from rozetkapay.infrastructure.clients.merchants import MerchantService
from rozetkapay.infrastructure.clients.payments import PaymentService
from rozetkapay.infrastructure.clients.payouts import PayoutService
from rozetkapay.infrastructure.clients.payparts import PayPartsService
from rozetkapay.infrastructure.clients.reports import ReportService
from rozetkapay.infrastructure.clients.subscriptions import SubscriptionService


class RozetkaPayClient:
    """
    Entry point to the RozetkaPay API.

    Without an http_client the façade creates an httpx.AsyncClient with the
    configured timeout and closes it in aclose(). A caller-supplied client is
    borrowed and left open. Use after aclose() is not supported.

    Usage:
        async with RozetkaPayClient.create(base_url, login, password) as client:
            banks = await client.payparts.get_banks()
    """

    def __init__(
        self,
        configuration: RozetkaPayConfiguration,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        if configuration is None:
            raise ConfigurationError("configuration is required")

        self.configuration = configuration
        self._logger = logger or logging.getLogger(__name__)
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=configuration.timeout_seconds)
        self._closed = False

        services = (configuration, self._http_client, logger)
        self.payments = PaymentService(*services)
        self.batch_payments = BatchPaymentService(*services)
        self.payparts = PayPartsService(*services)
        self.payouts = PayoutService(*services)
        self.customers = CustomerService(*services)
        self.subscriptions = SubscriptionService(*services)
        self.reports = ReportService(*services)
        self.alternative_payments = AlternativePaymentService(*services)
        self.merchants = MerchantService(*services)
        self.finmon = FinMonService(*services)

        self._logger.debug(
            "RozetkaPay client ready",
            extra={"base_url": configuration.base_url, "owns_http_client": self._owns_http_client},
        )

    @classmethod
    def create(
        cls,
        base_url: str,
        login: str,
        password: str,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "RozetkaPayClient":
        """Build a client from bare credentials; invalid values raise ConfigurationError"""
        configuration = RozetkaPayConfiguration.from_values(base_url=base_url, login=login, password=password)
        return cls(configuration, http_client=http_client, logger=logger)

    @classmethod
    def from_env(
        cls,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "RozetkaPayClient":
        """Build a client from ROZETKAPAY_* environment variables or .env"""
        return cls(RozetkaPayConfiguration(), http_client=http_client, logger=logger)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def owns_http_client(self) -> bool:
        return self._owns_http_client

    async def aclose(self) -> None:
        """Release the owned transport; later calls do nothing"""
        if self._closed:
            return
        self._closed = True
        if self._owns_http_client:
            await self._http_client.aclose()
        self._logger.debug("RozetkaPay client closed", extra={"owns_http_client": self._owns_http_client})

    async def __aenter__(self) -> "RozetkaPayClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
