"""Dashboard schemas for the admin overview screen."""

from pydantic import Field

from client.app.core.time import utc_now
from client.app.schemas.base import ApiModel, WireDatetime


class DashboardStats(ApiModel):
    total_users: int = Field(default=0, alias="totalUsers")
    total_students: int = Field(default=0, alias="totalStudents")
    active_users: int = Field(default=0, alias="activeUsers")
    total_revenue: int = Field(default=0, alias="totalRevenue")
    total_orders: int = Field(default=0, alias="totalOrders")
    total_products: int = Field(default=0, alias="totalProducts")
    user_growth_rate: float = Field(default=0.0, alias="userGrowthRate")
    revenue_growth_rate: float = Field(default=0.0, alias="revenueGrowthRate")
    order_growth_rate: float = Field(default=0.0, alias="orderGrowthRate")
    last_updated: WireDatetime = Field(default_factory=utc_now, alias="lastUpdated")


class RecentActivity(ApiModel):
    # type: user_action, system_event, order_update
    # status: info, success, warning, error
    id: str = ""
    title: str = ""
    description: str = ""
    type: str = "info"
    user_id: str = Field(default="", alias="userId")
    user_name: str = Field(default="", alias="userName")
    timestamp: WireDatetime = Field(default_factory=utc_now)
    status: str = "info"
