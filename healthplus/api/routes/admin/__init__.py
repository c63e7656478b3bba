"""
Admin API routes.

Includes:
- dashboard: statistics, all orders and appointments, order status updates
- catalog: product and doctor maintenance
"""

from . import catalog, dashboard

__all__ = ["catalog", "dashboard"]
