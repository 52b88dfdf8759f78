"""Students list controller.

Students are users with ``role="student"``. The controller owns the
in-memory page of students shown by the UI and keeps it in step with the API.
Errors from the API layer never escape: list loads record them in ``error``,
mutations return ``False``.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from client.app.controllers.observable import ObservableState
from client.app.core.exceptions import ApiNetworkError
from client.app.core.settings import get_settings
from client.app.schemas.student import Student, StudentFilters
from client.app.services.notifications import NotificationCenter

logger = logging.getLogger(__name__)

STUDENTS_MODULE = "students"
STUDENT_ROLE = "student"

NETWORK_ERROR_MESSAGE = "Network error. Please check your connection and try again."
NOT_FOUND_MESSAGE = "Students service not found. Please contact support."
SERVER_ERROR_MESSAGE = "Server error. Please try again later."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."

_NETWORK_ERRORS = (ApiNetworkError, httpx.TransportError, ConnectionError, TimeoutError)
# socket and timeout failures that reach us only as text, e.g. wrapped by another layer
_NETWORK_MARKERS = ("SocketException", "TimeoutException", "timed out")


def describe_error(error: BaseException) -> str:
    """Map an exception from the API layer to the message shown to the user."""
    text = str(error)
    if isinstance(error, _NETWORK_ERRORS) or any(marker in text for marker in _NETWORK_MARKERS):
        return NETWORK_ERROR_MESSAGE
    status_code = getattr(error, "status_code", None)
    if status_code == 404 or "404" in text:
        return NOT_FOUND_MESSAGE
    if status_code == 500 or "500" in text:
        return SERVER_ERROR_MESSAGE
    return UNEXPECTED_ERROR_MESSAGE


def _extract_list(payload: Any, key: str) -> List[Any]:
    items = payload.get(key, payload) if isinstance(payload, dict) else payload
    if not isinstance(items, list):
        raise TypeError(f"Expected a list of {key}, got {type(items).__name__}")
    return items


class StudentsController(ObservableState):
    ITEMS_PER_PAGE = get_settings().students_page_size

    def __init__(self, api_service, role_access_service, notifications: Optional[NotificationCenter] = None):
        super().__init__()
        self._api_service = api_service
        self._role_access_service = role_access_service
        self._notifications = notifications or NotificationCenter()

        self._students: List[Student] = []
        self._is_loading = False
        self._error = ""
        self._current_page = 1
        self._total_items = 0
        self._total_pages = 0
        self._filters = StudentFilters()
        logger.debug("StudentsController initialized")

    @property
    def students(self) -> List[Student]:
        return list(self._students)

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> str:
        return self._error

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_items(self) -> int:
        return self._total_items

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def filters(self) -> StudentFilters:
        return self._filters

    @property
    def has_students(self) -> bool:
        return bool(self._students)

    @property
    def has_error(self) -> bool:
        return bool(self._error)

    @property
    def role_access_service(self):
        return self._role_access_service

    @property
    def notifications(self) -> NotificationCenter:
        return self._notifications

    def _index_of(self, student_id: str) -> int:
        for index, student in enumerate(self._students):
            if student.id == student_id:
                return index
        return -1

    def _can_modify(self, action: str) -> bool:
        if self._role_access_service.can_modify(STUDENTS_MODULE):
            return True
        self._notifications.access_denied(action)
        return False

    async def load_students(self, refresh: bool = False) -> None:
        # a load already in flight wins; this call is dropped
        if self._is_loading:
            return

        if refresh:
            self._update(current_page=1, students=[], error="")

        try:
            self._update(is_loading=True, error="")
            response = await self._api_service.get_all_users(
                page=self._current_page,
                limit=self.ITEMS_PER_PAGE,
                role=STUDENT_ROLE,
                search=self._filters.search,
                college_id=self._filters.college_id,
                status=self._filters.status,
            )

            if response.success:
                payload = response.payload
                new_students = [Student.from_json(item) for item in _extract_list(payload, "users")]

                if refresh or self._current_page == 1:
                    students = new_students
                else:
                    students = self._students + new_students

                pagination = (payload.get("pagination") if isinstance(payload, dict) else None) or {}
                total_items = pagination.get("total")
                total_pages = pagination.get("totalPages")
                self._update(
                    students=students,
                    total_items=total_items if total_items is not None else len(new_students),
                    total_pages=total_pages if total_pages is not None else self._current_page,
                )
                logger.info("Loaded %d students (page %d)", len(new_students), self._current_page)
            else:
                self._update(error=response.message or "Failed to load students")
        except Exception as exc:
            logger.error("Error loading students: %s", exc)
            self._update(error=describe_error(exc))
        finally:
            self._update(is_loading=False)

    async def load_more_students(self) -> None:
        if self._is_loading or self._current_page >= self._total_pages:
            return
        self._update(current_page=self._current_page + 1)
        await self.load_students()

    async def refresh_students(self) -> None:
        await self.load_students(refresh=True)

    async def get_student(self, student_id: str) -> Optional[Student]:
        try:
            response = await self._api_service.get_user_by_id(student_id)
            if response.success:
                return Student.from_json(response.payload)
        except Exception as exc:
            logger.error("Error getting student: %s", exc)
        return None

    async def register_student(self, student_data: Dict[str, Any]) -> bool:
        if not self._can_modify("register students"):
            return False

        try:
            self._update(is_loading=True, error="")
            payload = {**student_data, "role": STUDENT_ROLE}
            response = await self._api_service.register_user(payload)

            if response.success:
                new_student = Student.from_json(response.payload["user"])
                self._update(students=[new_student] + self._students, total_items=self._total_items + 1)
                self._notifications.success(f'Student "{new_student.full_name}" registered successfully')
                return True

            self._update(error=response.message or "Failed to register student")
            return False
        except Exception as exc:
            logger.error("Error registering student: %s", exc)
            self._update(error=describe_error(exc))
            return False
        finally:
            self._update(is_loading=False)

    async def update_student(self, student_id: str, student_data: Dict[str, Any]) -> bool:
        if not self._can_modify("update students"):
            return False

        try:
            self._update(is_loading=True, error="")
            response = await self._api_service.update_user(student_id, student_data)

            if response.success:
                updated_student = Student.from_json(response.payload)
                index = self._index_of(student_id)
                if index != -1:
                    students = list(self._students)
                    students[index] = updated_student
                    self._update(students=students)
                self._notifications.success(f'Student "{updated_student.full_name}" updated successfully')
                return True

            self._update(error=response.message or "Failed to update student")
            return False
        except Exception as exc:
            logger.error("Error updating student: %s", exc)
            self._update(error=describe_error(exc))
            return False
        finally:
            self._update(is_loading=False)

    async def _set_active(self, student_id: str, is_active: bool) -> bool:
        verb = "activate" if is_active else "deactivate"
        if not self._can_modify(f"{verb} students"):
            return False

        try:
            if is_active:
                response = await self._api_service.activate_user(student_id)
            else:
                response = await self._api_service.deactivate_user(student_id)

            if not response.success:
                return False

            index = self._index_of(student_id)
            if index != -1:
                students = list(self._students)
                students[index] = students[index].copy_with(is_active=is_active)
                self._update(students=students)
            self._notifications.success(f"Student {verb}d successfully")
            return True
        except Exception as exc:
            logger.error("Error trying to %s student: %s", verb, exc)
            return False

    async def activate_student(self, student_id: str) -> bool:
        return await self._set_active(student_id, True)

    async def deactivate_student(self, student_id: str) -> bool:
        return await self._set_active(student_id, False)

    async def change_student_password(self, student_id: str, current_password: str, new_password: str) -> bool:
        try:
            response = await self._api_service.change_password(student_id, current_password, new_password)
            if response.success:
                self._notifications.success("Password changed successfully")
                return True
            return False
        except Exception as exc:
            logger.error("Error changing student password: %s", exc)
            return False

    async def get_student_books(self) -> List[Any]:
        try:
            response = await self._api_service.get_my_books()
            if response.success:
                return _extract_list(response.payload, "books")
        except Exception as exc:
            logger.error("Error getting student books: %s", exc)
        return []

    async def apply_filters(self, filters: StudentFilters) -> None:
        self._update(filters=filters)
        await self.load_students(refresh=True)

    async def search_students(self, query: str) -> None:
        self._update(filters=self._filters.copy_with(search=query))
        await self.load_students(refresh=True)

    async def filter_by_college(self, college_id: Optional[str]) -> None:
        self._update(filters=self._filters.copy_with(college_id=college_id))
        await self.load_students(refresh=True)

    async def clear_filters(self) -> None:
        self._update(filters=self._filters.clear())
        await self.load_students(refresh=True)

    def clear_error(self) -> None:
        self._update(error="")
