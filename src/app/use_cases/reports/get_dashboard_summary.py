"""
Get Dashboard Summary Use Case

Aggregates sales, purchases and expenses of a period into the dashboard
figures: totals, profit, outstanding balances, a per-month breakdown and
expense totals by category.
"""
import calendar
from datetime import date
from decimal import Decimal
from typing import Dict, List
from libs.result import Result, Return
from src.app.repositories.transaction_document_repository import TransactionDocumentRepository
from src.app.repositories.expense_repository import ExpenseRepository
from src.app.use_cases.errors import validation_error
from src.domain.expense import UNCATEGORIZED
from src.domain.transaction_document import DocumentCollection
from .dtos import CategoryTotalDTO, DashboardSummaryDTO, MonthlyTotalsDTO

ZERO = Decimal("0")


class GetDashboardSummary:
    """
    Use case: Dashboard summary for a date range

    Documents are bucketed by issue date, expenses by expense date. Monthly
    buckets are keyed by calendar month only, so a range spanning years
    folds the same month together.
    """

    def __init__(
        self,
        document_repo: TransactionDocumentRepository,
        expense_repo: ExpenseRepository,
    ):
        self.document_repo = document_repo
        self.expense_repo = expense_repo

    async def execute(self, user_id: str, start_date: date, end_date: date) -> Result[DashboardSummaryDTO]:
        if start_date > end_date:
            return Return.err(
                validation_error("start_date must not be after end_date", field="start_date")
            )

        sales = await self.document_repo.get_in_period(
            user_id, DocumentCollection.SALES, start_date, end_date
        )
        purchases = await self.document_repo.get_in_period(
            user_id, DocumentCollection.PURCHASES, start_date, end_date
        )
        expenses = await self.expense_repo.get_in_period(user_id, start_date, end_date)

        sales_total = sum((doc.grand_total for doc in sales), ZERO)
        purchases_total = sum((doc.grand_total for doc in purchases), ZERO)
        expenses_total = sum((expense.amount for expense in expenses), ZERO)

        monthly: List[MonthlyTotalsDTO] = [
            MonthlyTotalsDTO(month=calendar.month_abbr[month]) for month in range(1, 13)
        ]
        for doc in sales:
            bucket = monthly[doc.issue_date.month - 1]
            bucket.sales += doc.grand_total
        for doc in purchases:
            bucket = monthly[doc.issue_date.month - 1]
            bucket.purchases += doc.grand_total
        for expense in expenses:
            bucket = monthly[expense.expense_date.month - 1]
            bucket.expenses += expense.amount

        categories: Dict[str, Decimal] = {}
        for expense in expenses:
            name = (expense.category or "").strip() or UNCATEGORIZED
            categories[name] = categories.get(name, ZERO) + expense.amount

        return Return.ok(
            DashboardSummaryDTO(
                start_date=start_date,
                end_date=end_date,
                sales_total=sales_total,
                purchases_total=purchases_total,
                expenses_total=expenses_total,
                profit=sales_total - (purchases_total + expenses_total),
                receivables=sum((doc.remaining_amount for doc in sales), ZERO),
                payables=sum((doc.remaining_amount for doc in purchases), ZERO),
                sales_count=len(sales),
                purchases_count=len(purchases),
                expenses_count=len(expenses),
                monthly=monthly,
                expense_categories=[
                    CategoryTotalDTO(name=name, value=value)
                    for name, value in sorted(categories.items(), key=lambda kv: kv[1], reverse=True)
                ],
            )
        )
