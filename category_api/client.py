"""
HTTP client for the Category API.

Usage:
    client = CategoryClient("http://localhost:3000/api", api_key="RAHASIA")
    created = client.create_category("Windows")
    client.get_category(created.id)
"""
from typing import Any, List, Optional

import requests

from category_api.schemas import CategoryResponse
from category_api.utils.exceptions import (
    CategoryAPIException,
    CategoryNotFoundError,
    UnauthorizedError,
    ValidationError
)

BASE_URL = "http://localhost:3000/api"


class CategoryAPIError(CategoryAPIException):
    """Raised for any envelope whose code is not handled more specifically."""
    def __init__(self, code: int, status: str, data: Any = None):
        self.code = code
        self.status = status
        self.data = data
        super().__init__(f"{code} {status}: {data}")


class CategoryClient:
    """Thin client that sends the API key and unwraps the response envelope."""

    def __init__(
        self,
        base_url: str = BASE_URL,
        api_key: str = "",
        session: Optional[Any] = None,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, payload: Optional[dict] = None) -> Any:
        response = self.session.request(
            method,
            f"{self.base_url}{path}",
            json=payload,
            headers={"X-API-KEY": self.api_key},
            timeout=self.timeout,
        )
        try:
            body = response.json()
        except ValueError:
            raise CategoryAPIError(response.status_code, "INVALID RESPONSE", response.text)

        code = body.get("code", response.status_code)
        data = body.get("data")
        if code == 200:
            return data
        if code == 404:
            raise CategoryNotFoundError(_id_from(path))
        if code == 400:
            raise ValidationError(message=str(data))
        if code == 401:
            raise UnauthorizedError()
        raise CategoryAPIError(code, body.get("status", ""), data)

    # --- Categories ---

    def create_category(self, name: str) -> CategoryResponse:
        """Create a new category."""
        return CategoryResponse(**self._request("POST", "/categories", {"name": name}))

    def update_category(self, category_id: int, name: str) -> CategoryResponse:
        """Rename a category."""
        return CategoryResponse(**self._request("PUT", f"/categories/{category_id}", {"name": name}))

    def get_category(self, category_id: int) -> CategoryResponse:
        """Get a category by ID."""
        return CategoryResponse(**self._request("GET", f"/categories/{category_id}"))

    def delete_category(self, category_id: int) -> None:
        """Delete a category."""
        self._request("DELETE", f"/categories/{category_id}")

    def list_categories(self) -> List[CategoryResponse]:
        """List all categories."""
        return [CategoryResponse(**item) for item in self._request("GET", "/categories")]


def _id_from(path: str) -> Any:
    last = path.rstrip("/").rsplit("/", 1)[-1]
    return int(last) if last.isdigit() else last
