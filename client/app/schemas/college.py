"""College schemas returned by the colleges endpoints."""

from typing import Any, List, Optional

from pydantic import Field, model_validator

from client.app.schemas.base import ApiModel, QueryFilters, WireDatetime


class College(ApiModel):
    id: str
    name: str
    code: str
    address: str = ""
    phone: str = ""
    email: str
    website: str = ""
    logo_url: Optional[str] = None
    is_active: bool = True
    created_at: WireDatetime
    updated_at: WireDatetime

    @property
    def status_text(self) -> str:
        return "Active" if self.is_active else "Inactive"

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        return isinstance(other, College) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"College(id={self.id!r}, name={self.name!r}, code={self.code!r}, is_active={self.is_active})"


class CategoryCount(ApiModel):
    category: str
    count: int


_STATS_KEYS = {
    "total_students": "totalStudents",
    "total_admins": "totalAdmins",
    "total_books": "totalBooks",
    "total_users": "totalUsers",
}


class CollegeStats(ApiModel):
    """Per-college statistics.

    The API nests the counters under ``stats``; they are flattened here and
    nested again by :meth:`to_json`.
    """

    college: College
    total_students: int = 0
    total_admins: int = 0
    total_books: int = 0
    total_users: int = 0
    books_by_category: List[CategoryCount] = Field(default_factory=list, alias="booksByCategory")
    recent_users: List[Any] = Field(default_factory=list, alias="recentUsers")
    recent_books: List[Any] = Field(default_factory=list, alias="recentBooks")

    @model_validator(mode="before")
    @classmethod
    def _flatten_stats(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "stats" not in data:
            return data
        flattened = {key: value for key, value in data.items() if key != "stats"}
        stats = data.get("stats") or {}
        for field_name, wire_key in _STATS_KEYS.items():
            flattened[field_name] = stats.get(wire_key)
        return flattened

    def to_json(self) -> dict:
        return {
            "college": self.college.to_json(),
            "stats": {wire_key: getattr(self, field_name) for field_name, wire_key in _STATS_KEYS.items()},
            "booksByCategory": [entry.to_json() for entry in self.books_by_category],
            "recentUsers": list(self.recent_users),
            "recentBooks": list(self.recent_books),
        }


class CollegeFilters(QueryFilters):
    search: Optional[str] = None
    status: Optional[str] = None
