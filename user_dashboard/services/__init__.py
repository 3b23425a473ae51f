"""Service modules"""
from .aggregator import DashboardAggregator
from .report import format_dashboard_report, format_failure

__all__ = ["DashboardAggregator", "format_dashboard_report", "format_failure"]
