"""Reporting contracts"""

from datetime import date, datetime
from typing import List, Optional

from rozetkapay.domain.models.base import Amount, Contract


class PaymentsReportRequest(Contract):
    """Body for POST /api/reports/v1/payments"""

    date_from: date
    date_to: date
    fields: Optional[List[str]] = None
    scope: Optional[str] = None
    register_type: Optional[str] = None


class TransactionsReportRequest(Contract):
    """Body for POST /api/reports/v1/transactions"""

    date_from: date
    date_to: date
    register_type: Optional[str] = None
    operation_types: Optional[List[str]] = None
    statuses: Optional[List[str]] = None


class PaymentsReportRow(Contract):
    payment_id: Optional[str] = None
    external_id: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    fee: Optional[Amount] = None
    status: Optional[str] = None
    payment_method: Optional[str] = None
    created_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None


class PaymentsReportResponse(Contract):
    rows: Optional[List[PaymentsReportRow]] = None
    total_count: Optional[int] = None
    total_amount: Optional[Amount] = None
    report_url: Optional[str] = None


class TransactionsReportRow(Contract):
    transaction_id: Optional[str] = None
    payment_id: Optional[str] = None
    external_id: Optional[str] = None
    operation_type: Optional[str] = None
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    fee: Optional[Amount] = None
    status: Optional[str] = None
    rrn: Optional[str] = None
    created_at: Optional[datetime] = None


class TransactionsReportResponse(Contract):
    rows: Optional[List[TransactionsReportRow]] = None
    total_count: Optional[int] = None
    report_url: Optional[str] = None
