"""HTTP client for the Academix backend.

Every call returns an :class:`ApiResponse` for 2xx answers and raises
:class:`ApiError` otherwise. Connection failures and timeouts raise
:class:`ApiNetworkError`.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from client.app.core.exceptions import ApiError, ApiNetworkError
from client.app.core.settings import get_settings
from client.app.schemas.api import ApiResponse

logger = logging.getLogger(__name__)


async def _log_request(request: httpx.Request) -> None:
    logger.debug("API Request: %s %s", request.method, request.url)


async def _log_response(response: httpx.Response) -> None:
    logger.debug("API Response: %s - %s", response.status_code, response.request.url.path)


class ApiService:
    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.request_timeout_seconds,
            headers=headers,
            transport=transport,
            event_hooks={"request": [_log_request], "response": [_log_response]},
        )

    async def __aenter__(self) -> "ApiService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    def set_token(self, token: Optional[str]) -> None:
        if token:
            self._client.headers["Authorization"] = f"Bearer {token}"
        else:
            self._client.headers.pop("Authorization", None)

    async def _request(
        self,
        method: str,
        path: str | httpx.URL,
        fallback_message: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        query = {key: value for key, value in (params or {}).items() if value is not None}
        try:
            response = await self._client.request(method, path, params=query or None, json=json)
        except httpx.TimeoutException as exc:
            logger.error("API Error: request timed out - %s %s", method, path)
            raise ApiNetworkError(f"Request timed out: {fallback_message}") from exc
        except httpx.TransportError as exc:
            logger.error("API Error: connection failed - %s %s: %s", method, path, exc)
            raise ApiNetworkError(f"Connection failed: {fallback_message}") from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.is_success:
            message = fallback_message
            if isinstance(body, dict) and body.get("message"):
                message = body["message"]
            message = f"[{response.status_code}] {message}"
            logger.error("API Error: %s", message)
            raise ApiError(message, status_code=response.status_code)

        return ApiResponse(status_code=response.status_code, data=body)

    # Users

    async def get_all_users(
        self,
        page: int = 1,
        limit: int = 10,
        role: Optional[str] = None,
        search: Optional[str] = None,
        college_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> ApiResponse:
        params = {"page": page, "limit": limit, "role": role, "search": search, "collegeId": college_id, "status": status}
        return await self._request("GET", "users", "Failed to get users", params=params)

    async def get_user_by_id(self, user_id: str) -> ApiResponse:
        return await self._request("GET", f"users/{user_id}", "Failed to get user")

    async def register_user(self, user_data: Dict[str, Any]) -> ApiResponse:
        return await self._request("POST", "auth/register", "Failed to register user", json=user_data)

    async def update_user(self, user_id: str, update_data: Dict[str, Any]) -> ApiResponse:
        return await self._request("PUT", f"users/{user_id}", "Failed to update user", json=update_data)

    async def change_password(self, user_id: str, current_password: str, new_password: str) -> ApiResponse:
        payload = {"currentPassword": current_password, "newPassword": new_password}
        return await self._request("PUT", f"users/{user_id}/password", "Failed to change password", json=payload)

    async def activate_user(self, user_id: str) -> ApiResponse:
        return await self._request("PUT", f"users/{user_id}/activate", "Failed to activate user")

    async def deactivate_user(self, user_id: str) -> ApiResponse:
        return await self._request("PUT", f"users/{user_id}/deactivate", "Failed to deactivate user")

    # Books

    async def get_my_books(self) -> ApiResponse:
        return await self._request("GET", "books/my-books", "Failed to get student books")

    # Colleges

    async def get_all_colleges(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        status: Optional[str] = None,
    ) -> ApiResponse:
        params = {"page": page, "limit": limit, "search": search, "status": status}
        return await self._request("GET", "colleges", "Failed to get colleges", params=params)

    async def get_college_by_id(self, college_id: str) -> ApiResponse:
        return await self._request("GET", f"colleges/{college_id}", "Failed to get college")

    async def get_college_stats(self, college_id: str) -> ApiResponse:
        return await self._request("GET", f"colleges/{college_id}/stats", "Failed to get college statistics")

    # Dashboard

    async def get_dashboard_stats(self) -> ApiResponse:
        return await self._request("GET", "dashboard/stats", "Failed to get dashboard statistics")

    async def get_recent_activities(self, limit: int = 10) -> ApiResponse:
        return await self._request("GET", "dashboard/activities", "Failed to get recent activities", params={"limit": limit})

    async def health_check(self) -> ApiResponse:
        # /health lives at the server root, outside the /api prefix
        url = self._client.base_url.copy_with(path="/health")
        return await self._request("GET", url, "Health check failed")
