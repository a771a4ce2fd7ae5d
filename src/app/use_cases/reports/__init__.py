"""Report use cases"""
from .get_dashboard_summary import GetDashboardSummary
from .date_ranges import DateRangePreset, resolve_date_range
from .dtos import DashboardSummaryDTO, MonthlyTotalsDTO, CategoryTotalDTO

__all__ = [
    "GetDashboardSummary",
    "DateRangePreset",
    "resolve_date_range",
    "DashboardSummaryDTO",
    "MonthlyTotalsDTO",
    "CategoryTotalDTO",
]
