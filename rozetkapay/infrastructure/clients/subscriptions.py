"""Subscriptions API client"""

from typing import Optional

from rozetkapay.domain.models.subscriptions import (
    CancelSubscriptionRequest,
    CreateSubscriptionPlanRequest,
    CreateSubscriptionRequest,
    CreateSubscriptionResponse,
    CustomerSubscriptionsResponse,
    GiftSubscriptionRequest,
    SubscriptionPaymentsResponse,
    SubscriptionPlanResponse,
    SubscriptionPlansResponse,
    SubscriptionResponse,
    UpdateSubscriptionPlanRequest,
    UpdateSubscriptionRequest,
)
from rozetkapay.infrastructure.clients.base import BaseService
from rozetkapay.utils.query import path_segment


class SubscriptionService(BaseService):
    """Client for /api/subscriptions/v1 plans and subscriptions"""

    service_name = "subscriptions"
    plans_path = "/api/subscriptions/v1/plans"
    subscriptions_path = "/api/subscriptions/v1/subscriptions"

    # ---- Plans ----

    async def get_plans(self) -> SubscriptionPlansResponse:
        return await self._get(self.plans_path, SubscriptionPlansResponse)

    async def create_plan(self, request: CreateSubscriptionPlanRequest) -> SubscriptionPlanResponse:
        return await self._post(self.plans_path, SubscriptionPlanResponse, request)

    async def get_plan(self, plan_id: str) -> SubscriptionPlanResponse:
        return await self._get(f"{self.plans_path}/{path_segment(plan_id)}", SubscriptionPlanResponse)

    async def update_plan(self, plan_id: str, request: UpdateSubscriptionPlanRequest) -> SubscriptionPlanResponse:
        return await self._patch(f"{self.plans_path}/{path_segment(plan_id)}", SubscriptionPlanResponse, request)

    async def deactivate_plan(self, plan_id: str) -> None:
        await self._delete(f"{self.plans_path}/{path_segment(plan_id)}")

    # ---- Subscriptions ----

    async def create(self, request: CreateSubscriptionRequest) -> SubscriptionResponse:
        return await self._post(self.subscriptions_path, SubscriptionResponse, request)

    async def gift(self, request: GiftSubscriptionRequest) -> CreateSubscriptionResponse:
        return await self._post(f"{self.subscriptions_path}/gift", CreateSubscriptionResponse, request)

    async def get_customer_subscriptions(self, customer_id: str) -> CustomerSubscriptionsResponse:
        return await self._get(
            f"{self.subscriptions_path}/customer/{path_segment(customer_id)}",
            CustomerSubscriptionsResponse,
        )

    async def get(self, subscription_id: str) -> SubscriptionResponse:
        return await self._get(f"{self.subscriptions_path}/{path_segment(subscription_id)}", SubscriptionResponse)

    async def update(self, subscription_id: str, request: UpdateSubscriptionRequest) -> SubscriptionResponse:
        return await self._patch(
            f"{self.subscriptions_path}/{path_segment(subscription_id)}",
            SubscriptionResponse,
            request,
        )

    async def deactivate(self, subscription_id: str) -> None:
        await self._delete(f"{self.subscriptions_path}/{path_segment(subscription_id)}")

    async def get_payments(self, subscription_id: str) -> SubscriptionPaymentsResponse:
        return await self._get(
            f"{self.subscriptions_path}/{path_segment(subscription_id)}/payments",
            SubscriptionPaymentsResponse,
        )

    async def cancel(self, subscription_id: str, request: Optional[CancelSubscriptionRequest] = None) -> None:
        await self._post(
            f"{self.subscriptions_path}/{path_segment(subscription_id)}/cancel",
            None,
            request or CancelSubscriptionRequest(),
        )
