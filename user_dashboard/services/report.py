"""Human-readable rendering of dashboard results."""
from __future__ import annotations

from ..models import DashboardData

_RULE = "=" * 50


def format_dashboard_report(dashboard: DashboardData) -> str:
    """Render a loaded dashboard as a plain-text report."""
    profile = dashboard.profile
    lines = [
        _RULE,
        "🎯 User Dashboard",
        _RULE,
        "",
        f"👤 User: {profile.name} ({profile.email})",
        f"📝 Posts ({len(dashboard.posts)}):",
    ]
    lines.extend(f"   • {post.title}" for post in dashboard.posts)

    lines.append(f"🔔 Notifications ({len(dashboard.notifications)}):")
    for notification in dashboard.notifications:
        status = "📖" if notification.is_read else "🆕"
        lines.append(f"   {status} {notification.message}")

    metrics = dashboard.metrics
    lines.append(
        "📈 Metrics: "
        + ", ".join(f"{name}={value}" for name, value in metrics.items())
    )
    return "\n".join(lines)


def format_failure(error: Exception) -> str:
    return f"❌ Error loading dashboard: {error}"
