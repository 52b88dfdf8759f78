"""Student schemas. Students are users whose role is ``student``."""

from typing import Optional

from pydantic import Field

from client.app.schemas.base import ApiModel, QueryFilters, WireDatetime


class StudentCollege(ApiModel):
    """The college summary embedded in a student record."""

    id: str
    name: str
    code: str


class Student(ApiModel):
    id: str
    email: str
    full_name: str
    role: str
    college_id: Optional[str] = None
    student_id: Optional[str] = None
    mobile: Optional[str] = None
    profile_image_url: Optional[str] = None
    is_active: bool = True
    is_verified: bool = False
    created_at: WireDatetime
    updated_at: WireDatetime
    college: Optional[StudentCollege] = None
    year: Optional[str] = None

    @property
    def status_text(self) -> str:
        return "Active" if self.is_active else "Inactive"

    @property
    def verification_text(self) -> str:
        return "Verified" if self.is_verified else "Not Verified"

    def to_json(self) -> dict:
        data = super().to_json()
        if self.college is None:
            data.pop("college")
        return data

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        return isinstance(other, Student) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        college_name = self.college.name if self.college else None
        return f"Student(id={self.id!r}, full_name={self.full_name!r}, student_id={self.student_id!r}, college={college_name!r})"


class StudentFilters(QueryFilters):
    search: Optional[str] = None
    college_id: Optional[str] = Field(default=None, alias="collegeId")
    status: Optional[str] = None
