"""
Analytics Service

Back-office dashboard, analytics and finance figures. Every number is a
single pass over the in-memory order and product lists.

Author: FastDeal
Date: 2026-10-19
"""
from datetime import datetime, date, timedelta, timezone
from decimal import Decimal
from typing import Dict, List, Optional

from dateutil.relativedelta import relativedelta

from storefront.core.config import settings
from storefront.domain.order import Order, OrderStatus
from storefront.domain.product import Product

PERIOD_TODAY = "today"
PERIOD_WEEK = "week"
PERIOD_MONTH = "month"

PERIODS = [PERIOD_TODAY, PERIOD_WEEK, PERIOD_MONTH]


def _utc(moment: datetime) -> datetime:
    # Backend timestamps are UTC; naive values are taken as UTC too
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _revenue(orders: List[Order]) -> Decimal:
    return sum((order.total_amount for order in orders), Decimal("0"))


def _now(now: Optional[datetime]) -> datetime:
    return _utc(now) if now else datetime.now(timezone.utc)


def low_stock_count(products: List[Product]) -> int:
    return sum(1 for p in products if p.stock_quantity < settings.LOW_STOCK_THRESHOLD)


def dashboard_stats(orders: List[Order], products: List[Product]) -> Dict:
    """
    Dashboard cards plus the five most recent orders

    Orders are expected newest first, as the repository returns them.
    """
    return {
        "total_revenue": float(_revenue(orders)),
        "total_orders": len(orders),
        "total_products": len(products),
        "pending_orders": sum(1 for o in orders if o.status == OrderStatus.PENDING),
        "low_stock_products": low_stock_count(products),
        "recent_orders": [order.to_dict() for order in orders[:5]],
    }


def daily_stats(orders: List[Order], now: Optional[datetime] = None, days: int = 7) -> List[Dict]:
    """Orders and revenue per UTC calendar day, oldest day first, today included"""
    today = _now(now).date()
    by_day: Dict[date, List[Order]] = {}
    for order in orders:
        by_day.setdefault(_utc(order.created_at).date(), []).append(order)

    stats = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        day_orders = by_day.get(day, [])
        stats.append({
            "date": day.isoformat(),
            "label": f"{day.strftime('%b')} {day.day}",
            "orders": len(day_orders),
            "revenue": float(_revenue(day_orders)),
        })

    return stats


def monthly_stats(orders: List[Order], now: Optional[datetime] = None, months: int = 6) -> List[Dict]:
    """Orders and revenue per calendar month, oldest month first, current month included"""
    current = _now(now).date().replace(day=1)
    by_month: Dict[tuple, List[Order]] = {}
    for order in orders:
        created = _utc(order.created_at)
        by_month.setdefault((created.year, created.month), []).append(order)

    stats = []
    for offset in range(months - 1, -1, -1):
        month_start = current - relativedelta(months=offset)
        month_orders = by_month.get((month_start.year, month_start.month), [])
        stats.append({
            "year": month_start.year,
            "month": month_start.month,
            "label": month_start.strftime("%b"),
            "orders": len(month_orders),
            "revenue": float(_revenue(month_orders)),
        })

    return stats


def top_products(orders: List[Order], limit: int = 5) -> List[Dict]:
    """Best sellers by revenue, grouped by the product name frozen on each line"""
    sales: Dict[str, Dict] = {}
    for order in orders:
        for item in order.order_items:
            entry = sales.setdefault(item.product_name, {
                "name": item.product_name,
                "quantity": 0,
                "revenue": Decimal("0"),
            })
            entry["quantity"] += item.quantity
            entry["revenue"] += item.unit_price * item.quantity

    ranked = sorted(sales.values(), key=lambda entry: entry["revenue"], reverse=True)[:limit]
    return [{**entry, "revenue": float(entry["revenue"])} for entry in ranked]


def analytics_overview(orders: List[Order], products: List[Product], now: Optional[datetime] = None) -> Dict:
    return {
        "totals": {
            "total_orders": len(orders),
            "total_revenue": float(_revenue(orders)),
            "total_products": len(products),
            "low_stock_products": low_stock_count(products),
        },
        "daily": daily_stats(orders, now),
        "monthly": monthly_stats(orders, now),
        "top_products": top_products(orders),
    }


def orders_in_period(orders: List[Order], period: str, now: Optional[datetime] = None) -> List[Order]:
    """
    today: same UTC calendar day; week: the last 7 * 24 hours;
    month: same calendar month and year
    """
    current = _now(now)

    if period == PERIOD_TODAY:
        return [o for o in orders if _utc(o.created_at).date() == current.date()]

    if period == PERIOD_WEEK:
        week_ago = current - timedelta(days=7)
        return [o for o in orders if _utc(o.created_at) >= week_ago]

    if period == PERIOD_MONTH:
        return [
            o for o in orders
            if _utc(o.created_at).year == current.year and _utc(o.created_at).month == current.month
        ]

    raise ValueError(f"period must be one of {', '.join(PERIODS)}")


def finance_metrics(orders: List[Order], period: str = PERIOD_TODAY, now: Optional[datetime] = None) -> Dict:
    """
    Income and estimated profit for the period

    Income skips cancelled orders but the order count (and so the average)
    still includes them. Expenses are an estimate: ESTIMATED_EXPENSE_RATIO of income.
    """
    period_orders = orders_in_period(orders, period, now)

    income = _revenue([o for o in period_orders if not o.is_cancelled])
    order_count = len(period_orders)
    avg_order = income / order_count if order_count > 0 else Decimal("0")

    expenses = income * settings.ESTIMATED_EXPENSE_RATIO
    net_profit = income - expenses

    return {
        "period": period,
        "income": float(income),
        "order_count": order_count,
        "average_order_value": float(avg_order),
        "estimated_expenses": float(expenses),
        "net_profit": float(net_profit),
        "recent_orders": [order.to_dict() for order in orders[:10]],
    }
