"""Integration tests for service operations: paths, verbs, query strings and bodies"""

import asyncio
from datetime import date
from decimal import Decimal

import pytest

from rozetkapay.client import RozetkaPayClient
from rozetkapay.domain.models.alternative_payments import (
    AlternativePaymentOperationsRequest,
    CreateAlternativePaymentRequest,
    RefundAlternativePaymentRequest,
    ResendAlternativePaymentCallbackRequest,
)
from rozetkapay.domain.models.batch import (
    BatchOrder,
    CancelBatchPaymentRequest,
    ConfirmBatchPaymentRequest,
    CreateBatchPaymentRequest,
)
from rozetkapay.domain.models.customers import AddCardToWalletRequest, SetDefaultCardRequest, WalletCardDetails
from rozetkapay.domain.models.merchants import NotificationSettings, UpdateMerchantSettingsRequest
from rozetkapay.domain.models.payments import (
    CancelPaymentRequest,
    CardLookupRequest,
    ConfirmPaymentRequest,
    CreatePaymentRequest,
    CreateRecurrentPaymentRequest,
    PaymentListRequest,
    RefundOperationRequest,
    RefundPaymentRequest,
    ResendCallbackRequest,
)
from rozetkapay.domain.models.payouts import (
    CancelCashPayoutRequest,
    CardData,
    CardRecipient,
    CreatePayoutRequest,
    PayoutListRequest,
    PayoutOrder,
    PayoutRecipient,
    RequestPayoutRequest,
    ResendPayoutCallbackRequest,
)
from rozetkapay.domain.models.payparts import (
    CancelPayPartsRequest,
    ConfirmPayPartsRequest,
    CreatePayPartsOrderRequest,
    PayPartsCustomer,
    PayPartsOperationsListRequest,
    PayPartsProduct,
    PayPartsRefundOperationRequest,
    PayPartsResendCallbackRequest,
    RefundPayPartsOrderRequest,
)
from rozetkapay.domain.models.reports import PaymentsReportRequest, TransactionsReportRequest
from rozetkapay.domain.models.subscriptions import (
    CancelSubscriptionRequest,
    CreateSubscriptionPlanRequest,
    CreateSubscriptionRequest,
    GiftSubscriptionRequest,
    SubscriptionCustomer,
    UpdateSubscriptionPlanRequest,
    UpdateSubscriptionRequest,
)
from rozetkapay.infrastructure.clients.payments import PaymentService

CUSTOMER = SubscriptionCustomer(email="buyer@example.com")
PAYOUT_RECIPIENT = PayoutRecipient(payout_type="card", card=CardRecipient(card=CardData(number="4111111111111111")))

OPERATIONS = [
    # Payments
    (lambda c: c.payments.create(CreatePaymentRequest(amount=10, currency="UAH", external_id="o1")), "POST", "/api/payments/v1/new"),
    (lambda c: c.payments.create_recurrent(CreateRecurrentPaymentRequest(amount=10, currency="UAH", external_id="o1", recurrent_id="r1")), "POST", "/api/payments/v1/recurrent"),
    (lambda c: c.payments.confirm(ConfirmPaymentRequest(external_id="o1")), "POST", "/api/payments/v1/confirm"),
    (lambda c: c.payments.cancel(CancelPaymentRequest(external_id="o1")), "POST", "/api/payments/v1/cancel"),
    (lambda c: c.payments.refund(RefundPaymentRequest(external_id="o1")), "POST", "/api/payments/v1/refund"),
    (lambda c: c.payments.retry_refund(RefundOperationRequest(external_id="o1")), "POST", "/api/payments/v1/refund/retry"),
    (lambda c: c.payments.cancel_refund(RefundOperationRequest(external_id="o1")), "POST", "/api/payments/v1/refund/cancel"),
    (lambda c: c.payments.get_info("o1"), "GET", "/api/payments/v1/info?external_id=o1"),
    (lambda c: c.payments.get_receipt("o1"), "GET", "/api/payments/v1/receipt?external_id=o1"),
    (lambda c: c.payments.card_lookup(CardLookupRequest(card_number="4111111111111111")), "POST", "/api/payments/v1/lookup"),
    (lambda c: c.payments.resend_callback(ResendCallbackRequest(external_id="o1")), "POST", "/api/payments/v1/callback/resend"),
    (lambda c: c.payments.confirm_p2p("o1", Decimal("10")), "POST", "/api/payments/v1/p2p/confirm"),
    # Batch payments
    (lambda c: c.batch_payments.create(CreateBatchPaymentRequest(batch_external_id="b1", currency="UAH", orders=[BatchOrder(api_key="k", amount=1, external_id="o1")])), "POST", "/api/payments/batch/v1/new"),
    (lambda c: c.batch_payments.confirm(ConfirmBatchPaymentRequest(batch_external_id="b1")), "POST", "/api/payments/batch/v1/confirm"),
    (lambda c: c.batch_payments.cancel(CancelBatchPaymentRequest(external_id="b1")), "POST", "/api/payments/batch/v1/cancel"),
    # PayParts
    (lambda c: c.payparts.get_banks_info(), "GET", "/api/payparts/v1/banks"),
    (lambda c: c.payparts.create_order(CreatePayPartsOrderRequest(external_id="o1", amount=3000, currency="UAH", parts_count=3)), "POST", "/api/payparts/v1/order/create"),
    (lambda c: c.payparts.confirm_order(ConfirmPayPartsRequest(external_id="o1")), "POST", "/api/payparts/v1/order/confirm"),
    (lambda c: c.payparts.cancel_order(CancelPayPartsRequest(external_id="o1")), "POST", "/api/payparts/v1/order/cancel"),
    (lambda c: c.payparts.refund_order(RefundPayPartsOrderRequest(external_id="o1")), "POST", "/api/payparts/v1/refund"),
    (lambda c: c.payparts.retry_refund(PayPartsRefundOperationRequest(external_id="o1")), "POST", "/api/payparts/v1/refund/retry"),
    (lambda c: c.payparts.cancel_refund(PayPartsRefundOperationRequest(external_id="o1")), "POST", "/api/payparts/v1/refund/cancel"),
    (lambda c: c.payparts.get_operation("op-1"), "GET", "/api/payparts/v1/operation/op-1"),
    (lambda c: c.payparts.get_operation_info("o1", "op-1"), "GET", "/api/payparts/v1/info/operation?external_id=o1&operation_id=op-1"),
    (lambda c: c.payparts.get_info("o1"), "GET", "/api/payparts/v1/info?external_id=o1"),
    (lambda c: c.payparts.get_operations(), "GET", "/api/payparts/v1/operations"),
    (lambda c: c.payparts.resend_callback(PayPartsResendCallbackRequest(external_id="o1")), "POST", "/api/payparts/v1/callback/resend"),
    # Payouts
    (lambda c: c.payouts.create(CreatePayoutRequest(amount=5, currency="UAH", external_id="p1", recipient=PAYOUT_RECIPIENT)), "POST", "/api/payouts/v1/new"),
    (lambda c: c.payouts.request_payout(RequestPayoutRequest(order=PayoutOrder(external_id="p1", currency="UAH", original_amount=5), recipient=PAYOUT_RECIPIENT)), "POST", "/api/payouts/v1/request-payout"),
    (lambda c: c.payouts.get_info("p1"), "GET", "/api/payouts/v1/info?external_id=p1"),
    (lambda c: c.payouts.get_list(PayoutListRequest(limit=10)), "GET", "/api/payouts/v1/list?limit=10"),
    (lambda c: c.payouts.get_balance(), "GET", "/api/payouts/v1/balance"),
    (lambda c: c.payouts.get_account_balance("m-1"), "GET", "/api/payouts/v1/account-balance?merchant_entity_id=m-1"),
    (lambda c: c.payouts.resend_callback(ResendPayoutCallbackRequest(external_id="p1")), "POST", "/api/payouts/v1/resend-callback"),
    (lambda c: c.payouts.cancel_cash_payout(CancelCashPayoutRequest(external_id="p1")), "POST", "/api/payouts/v1/cancel-payout"),
    # Customers
    (lambda c: c.customers.get_wallet("cust-1"), "GET", "/api/customers/v1/wallet?external_id=cust-1"),
    (lambda c: c.customers.add_card("cust-1", AddCardToWalletRequest(card=WalletCardDetails(number="4111111111111111", exp_month=12, exp_year=2030))), "POST", "/api/customers/v1/wallet?external_id=cust-1"),
    (lambda c: c.customers.delete_card("cust-1", "card-9"), "DELETE", "/api/customers/v1/cust-1/cards/card-9"),
    (lambda c: c.customers.get_wallet_item("cust-1", "card-9"), "GET", "/api/customers/v1/wallet/find?external_id=cust-1&option_id=card-9"),
    (lambda c: c.customers.get_card_confirmation_status("cust-1", "card-9"), "GET", "/api/customers/v1/wallet/confirmation/status?external_id=cust-1&option_id=card-9"),
    (lambda c: c.customers.set_default_card("cust-1", SetDefaultCardRequest(card_id="card-9")), "POST", "/api/customers/v1/wallet/settings/set?external_id=cust-1"),
    (lambda c: c.customers.get_cards("cust-1"), "GET", "/api/customers/v1/cust-1/cards"),
    # Subscriptions
    (lambda c: c.subscriptions.get_plans(), "GET", "/api/subscriptions/v1/plans"),
    (lambda c: c.subscriptions.create_plan(CreateSubscriptionPlanRequest(name="Pro", amount=99, currency="UAH", frequency="monthly")), "POST", "/api/subscriptions/v1/plans"),
    (lambda c: c.subscriptions.get_plan("plan-1"), "GET", "/api/subscriptions/v1/plans/plan-1"),
    (lambda c: c.subscriptions.update_plan("plan-1", UpdateSubscriptionPlanRequest(name="Pro+")), "PATCH", "/api/subscriptions/v1/plans/plan-1"),
    (lambda c: c.subscriptions.deactivate_plan("plan-1"), "DELETE", "/api/subscriptions/v1/plans/plan-1"),
    (lambda c: c.subscriptions.create(CreateSubscriptionRequest(external_id="s1", amount=99, currency="UAH", frequency="monthly", customer=CUSTOMER)), "POST", "/api/subscriptions/v1/subscriptions"),
    (lambda c: c.subscriptions.gift(GiftSubscriptionRequest(external_id="s1", plan_id="plan-1", customer=CUSTOMER, gifted_periods=2)), "POST", "/api/subscriptions/v1/subscriptions/gift"),
    (lambda c: c.subscriptions.get_customer_subscriptions("cust-1"), "GET", "/api/subscriptions/v1/subscriptions/customer/cust-1"),
    (lambda c: c.subscriptions.get("sub-1"), "GET", "/api/subscriptions/v1/subscriptions/sub-1"),
    (lambda c: c.subscriptions.update("sub-1", UpdateSubscriptionRequest(auto_renew=False)), "PATCH", "/api/subscriptions/v1/subscriptions/sub-1"),
    (lambda c: c.subscriptions.deactivate("sub-1"), "DELETE", "/api/subscriptions/v1/subscriptions/sub-1"),
    (lambda c: c.subscriptions.get_payments("sub-1"), "GET", "/api/subscriptions/v1/subscriptions/sub-1/payments"),
    (lambda c: c.subscriptions.cancel("sub-1", CancelSubscriptionRequest(immediate=True)), "POST", "/api/subscriptions/v1/subscriptions/sub-1/cancel"),
    # Reports
    (lambda c: c.reports.get_payments_report(PaymentsReportRequest(date_from=date(2024, 1, 1), date_to=date(2024, 1, 31))), "POST", "/api/reports/v1/payments"),
    (lambda c: c.reports.get_transactions_report(TransactionsReportRequest(date_from=date(2024, 1, 1), date_to=date(2024, 1, 31))), "POST", "/api/reports/v1/transactions"),
    # Alternative payments
    (lambda c: c.alternative_payments.create(CreateAlternativePaymentRequest(amount=10, currency="PLN", external_id="a1", provider="imoje")), "POST", "/api/alternative-payments/v1/create"),
    (lambda c: c.alternative_payments.create_operation(CreateAlternativePaymentRequest(amount=10, currency="PLN", external_id="a1", provider="leaselink")), "POST", "/api/alternative-payments/v1/create"),
    (lambda c: c.alternative_payments.refund(RefundAlternativePaymentRequest(external_id="a1")), "POST", "/api/alternative-payments/v1/refund"),
    (lambda c: c.alternative_payments.resend_callback(ResendAlternativePaymentCallbackRequest(external_id="a1")), "POST", "/api/alternative-payments/v1/callback/resend"),
    (lambda c: c.alternative_payments.get_operation("op-1"), "GET", "/api/alternative-payments/v1/operation/op-1"),
    (lambda c: c.alternative_payments.get_operation_info("a1", "op-1"), "GET", "/api/alternative-payments/v1/info/operation?external_id=a1&operation_id=op-1"),
    (lambda c: c.alternative_payments.get_operations(AlternativePaymentOperationsRequest(status="success")), "GET", "/api/alternative-payments/v1/operations?status=success"),
    (lambda c: c.alternative_payments.get_info("a1"), "GET", "/api/alternative-payments/v1/info?external_id=a1"),
    (lambda c: c.alternative_payments.get_methods(), "GET", "/api/alternative-payments/v1/methods"),
    (lambda c: c.alternative_payments.get_status("pay-1"), "GET", "/api/alternative-payments/v1/pay-1/status"),
    # Merchants
    (lambda c: c.merchants.get_info(), "GET", "/api/merchants/v1/me"),
    (lambda c: c.merchants.get_settings(), "GET", "/api/merchant/v1/settings"),
    (lambda c: c.merchants.update_settings(UpdateMerchantSettingsRequest(notifications=NotificationSettings(email_notifications=True))), "POST", "/api/merchant/v1/settings"),
    (lambda c: c.merchants.get_commission_rates(), "GET", "/api/merchant/v1/commission-rates"),
    # Financial monitoring
    (lambda c: c.finmon.get_p2p_pre_limits("1234567890"), "GET", "/api/finmon/v1/p2p-payment/pre-limits?recipient_ipn=1234567890"),
]


@pytest.mark.parametrize("operation,method,target", OPERATIONS)
async def test_operation_hits_documented_endpoint(client: RozetkaPayClient, transport, operation, method, target):
    transport.respond_with(200, {})

    await operation(client)

    assert len(transport.requests) == 1
    assert transport.last_request.method == method
    assert transport.last_request.url.raw_path.decode("ascii") == target


async def test_post_body_uses_wire_names(client: RozetkaPayClient, transport):
    transport.respond_with(200, {"id": "p-1", "action_required": True, "action": {"type": "url", "value": "https://pay"}})
    request = CreatePaymentRequest(
        amount=Decimal("150.25"),
        currency="UAH",
        external_id="order-1",
        callback_url="https://merchant.example/callback",
    )

    result = await client.payments.create(request)

    assert transport.last_body == {
        "amount": 150.25,
        "currency": "UAH",
        "external_id": "order-1",
        "mode": "hosted",
        "confirm": True,
        "callback_url": "https://merchant.example/callback",
    }
    assert result.action_required is True
    assert result.action.value == "https://pay"


async def test_payment_operations_return_full_payment(client: RozetkaPayClient, transport):
    transport.respond_with(200, {"id": "p1", "status": "init", "checkout_url": "https://pay", "amount": "10.00"})

    created = await client.payments.create(CreatePaymentRequest(amount=10, currency="UAH", external_id="o1"))
    refunded = await client.payments.refund(RefundPaymentRequest(external_id="o1"))

    for result in (created, refunded):
        assert result.id == "p1"
        assert result.status == "init"
        assert result.checkout_url == "https://pay"
        assert result.amount == Decimal("10.00")


async def test_payparts_confirm_and_cancel_return_order(client, transport):
    transport.respond_with(200, {"id": "pp1", "status": "success", "parts_count": 3, "amount": 3000})

    confirmed = await client.payparts.confirm_order(ConfirmPayPartsRequest(external_id="o1"))
    canceled = await client.payparts.cancel_order(CancelPayPartsRequest(external_id="o1"))

    for result in (confirmed, canceled):
        assert result.status == "success"
        assert result.parts_count == 3
        assert result.amount == Decimal("3000")


async def test_subscription_create_returns_subscription(client, transport):
    transport.respond_with(200, {"id": "sub-1", "plan_id": "plan-1", "status": "active", "amount": "99.00"})

    result = await client.subscriptions.create(
        CreateSubscriptionRequest(external_id="s1", amount=99, currency="UAH", frequency="monthly", customer=CUSTOMER)
    )

    assert result.status == "active"
    assert result.plan_id == "plan-1"
    assert result.amount == Decimal("99.00")


async def test_alternative_refund_returns_payment(client, transport):
    transport.respond_with(200, {"id": "a1", "status": "refunded", "amount": "5.50", "payment_method": "google_pay"})

    result = await client.alternative_payments.refund(RefundAlternativePaymentRequest(external_id="a1"))

    assert result.status == "refunded"
    assert result.amount == Decimal("5.50")
    assert result.payment_method == "google_pay"


async def test_order_body_parses_back_to_request(client, transport):
    transport.respond_with(200, {"id": "pp1"})
    request = CreatePayPartsOrderRequest(
        external_id="order-7",
        amount=Decimal("4599.99"),
        currency="UAH",
        parts_count=4,
        bank="BankA",
        customer=PayPartsCustomer(first_name="Olena", last_name="Koval", phone="+380501112233", birth_date=date(1990, 4, 12)),
        products=[
            PayPartsProduct(name="Phone", price=Decimal("4500.00"), quantity=1),
            PayPartsProduct(name="Case", price=Decimal("49.995"), quantity=2, category="accessories"),
        ],
    )

    await client.payparts.create_order(request)

    assert CreatePayPartsOrderRequest.model_validate(transport.last_body) == request


async def test_imprecise_amount_never_reaches_the_gateway(client, transport):
    request = CreatePaymentRequest(amount=Decimal("0.1000000000000000000001"), currency="UAH", external_id="o1")

    with pytest.raises(ValueError, match="precision"):
        await client.payments.create(request)

    assert transport.requests == []


async def test_get_sends_no_body(client, transport):
    transport.respond_with(200, {})

    await client.payments.get_info("o1")

    assert transport.last_request.content == b""


async def test_list_filters_become_query_params(client, transport):
    transport.respond_with(200, {"payments": [{"id": "p-1", "amount": "12.50"}], "count": 1})

    response = await client.payments.get_list(
        PaymentListRequest(date_from=date(2024, 2, 1), date_to=date(2024, 2, 29), status="success", limit=50)
    )

    params = transport.last_request.url.params
    assert params["date_from"] == "2024-02-01"
    assert params["date_to"] == "2024-02-29"
    assert params["status"] == "success"
    assert params["limit"] == "50"
    assert "offset" not in params
    assert response.payments[0].amount == Decimal("12.50")


async def test_payparts_operations_filters(client, transport):
    transport.respond_with(200, {"operations": [], "total": 0})

    response = await client.payparts.get_operations(PayPartsOperationsListRequest(date_from=date(2024, 5, 1), offset=20))

    assert transport.last_request.url.params["date_from"] == "2024-05-01"
    assert transport.last_request.url.params["offset"] == "20"
    assert response.operations == []


async def test_caller_values_are_escaped(client, transport):
    transport.respond_with(200, {})

    await client.customers.delete_card("cust/1", "card 9")
    assert transport.last_request.url.raw_path == b"/api/customers/v1/cust%2F1/cards/card%209"

    await client.payments.get_info("a&b=c")
    assert transport.last_request.url.params["external_id"] == "a&b=c"


async def test_legacy_banks_accepts_bare_array(client, transport):
    transport.respond_with(200, [{"name": "BankA", "available_periods": [3]}])

    response = await client.payparts.get_banks_info()

    assert response.banks[0].name == "BankA"
    assert response.banks[0].available_periods == [3]


async def test_legacy_banks_accepts_envelope(client, transport):
    transport.respond_with(200, {"banks": [{"name": "BankB"}]})

    response = await client.payparts.get_banks_info()

    assert response.banks[0].name == "BankB"


async def test_deactivate_and_cancel_return_none(client, transport):
    transport.respond_with(200, {"ignored": True})

    assert await client.subscriptions.deactivate_plan("plan-1") is None
    assert await client.subscriptions.deactivate("sub-1") is None
    assert await client.subscriptions.cancel("sub-1") is None
    assert transport.last_body == {}


async def test_p2p_without_recipient_fails_locally(client, transport):
    request = CreatePaymentRequest(amount=10, currency="UAH", external_id="o1")

    with pytest.raises(ValueError, match="recipient"):
        await client.payments.create_p2p(request)

    assert transport.requests == []


async def test_p2p_with_recipient_posts_new(client, transport):
    transport.respond_with(200, {"id": "p2p-1", "status": "pending"})
    request = PaymentService.build_p2p_request(
        amount=Decimal("250"),
        currency="UAH",
        external_id="p2p-1",
        recipient_card_number="5168745600000000",
        exp_month=11,
        exp_year=2029,
    )

    result = await client.payments.create_p2p(request)

    assert result.id == "p2p-1"
    assert result.status == "pending"
    assert transport.last_request.url.path == "/api/payments/v1/new"
    body = transport.last_body
    assert body["mode"] == "direct"
    assert body["description"] == "P2P Transfer"
    assert body["customer"] == {"email": "customer@example.com"}
    assert body["recipient"]["payment_method"] == {
        "type": "card_number",
        "card_number": {"number": "5168745600000000", "exp_month": 11, "exp_year": 2029},
    }


async def test_confirm_p2p_body(client, transport):
    transport.respond_with(200, {})

    await client.payments.confirm_p2p("p2p-1", Decimal("250.00"))

    assert transport.last_body == {"external_id": "p2p-1", "amount": 250.0}


async def test_concurrent_calls_share_one_client(client, transport):
    transport.respond_with(200, {"status": "ok"})

    results = await asyncio.gather(*(client.merchants.get_info() for _ in range(5)))

    assert [result.status for result in results] == ["ok"] * 5
    assert len(transport.requests) == 5
