"""Tests for CategoryClient against the in-process application."""
import pytest
from fastapi.testclient import TestClient

from category_api.client import CategoryAPIError, CategoryClient
from category_api.utils.exceptions import CategoryNotFoundError, UnauthorizedError, ValidationError
from tests.conftest import API_KEY


@pytest.fixture
def category_client(api_client: TestClient) -> CategoryClient:
    return CategoryClient("http://testserver/api", api_key=API_KEY, session=api_client)


class TestCategoryClient:
    """Tests for CategoryClient."""

    def test_crud_cycle(self, category_client: CategoryClient):
        created = category_client.create_category("Windows")
        assert created.name == "Windows"

        assert category_client.get_category(created.id) == created

        renamed = category_client.update_category(created.id, "Linux")
        assert renamed.id == created.id
        assert renamed.name == "Linux"

        assert category_client.list_categories() == [renamed]

        category_client.delete_category(created.id)
        assert category_client.list_categories() == []

    def test_not_found(self, category_client: CategoryClient):
        with pytest.raises(CategoryNotFoundError) as exc_info:
            category_client.get_category(404)

        assert exc_info.value.category_id == 404

    def test_validation_error(self, category_client: CategoryClient):
        with pytest.raises(ValidationError, match="name"):
            category_client.create_category("")

    def test_unauthorized(self, api_client: TestClient):
        client = CategoryClient("http://testserver/api", api_key="SALAH", session=api_client)

        with pytest.raises(UnauthorizedError):
            client.list_categories()

    def test_other_codes(self, api_client: TestClient):
        client = CategoryClient("http://testserver", api_key=API_KEY, session=api_client)

        with pytest.raises(CategoryAPIError) as exc_info:
            client._request("PATCH", "/api/categories")

        assert exc_info.value.code == 405
        assert exc_info.value.status == "METHOD NOT ALLOWED"
