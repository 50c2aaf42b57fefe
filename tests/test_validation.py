"""Tests for request validation rules and the response writer."""
import pytest
from pydantic import BaseModel

from category_api.schemas import CategoryCreateRequest, CategoryUpdateRequest
from category_api.services.validation import validate
from category_api.utils.exceptions import ValidationError
from category_api.utils.responses import status_text


class TestValidate:
    """Tests for validate()."""

    @pytest.mark.parametrize("dto", [CategoryCreateRequest, CategoryUpdateRequest])
    def test_valid_name(self, dto):
        validate(dto(name="Windows"))

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name(self, name):
        with pytest.raises(ValidationError) as exc_info:
            validate(CategoryCreateRequest(name=name))

        assert exc_info.value.errors == {"name": ["is required"]}
        assert str(exc_info.value) == "name: is required"

    def test_max_length(self):
        validate(CategoryUpdateRequest(name="x" * 200))

        with pytest.raises(ValidationError) as exc_info:
            validate(CategoryUpdateRequest(name="x" * 201))

        assert exc_info.value.errors == {"name": ["must be at most 200 characters"]}

    @pytest.mark.parametrize("name", ["\ud800", "ok\udfffok"])
    def test_unencodable_name(self, name):
        with pytest.raises(ValidationError) as exc_info:
            validate(CategoryCreateRequest(name=name))

        assert exc_info.value.errors == {"name": ["must be valid UTF-8 text"]}

    def test_non_ascii_name(self):
        validate(CategoryUpdateRequest(name="Kategori ✓ 日本語"))

    def test_unregistered_dto(self):
        class Unknown(BaseModel):
            name: str

        with pytest.raises(TypeError):
            validate(Unknown(name="x"))


@pytest.mark.parametrize("code,text", [
    (200, "OK"),
    (400, "BAD REQUEST"),
    (401, "UNAUTHORIZED"),
    (404, "NOT FOUND"),
    (405, "METHOD NOT ALLOWED"),
    (500, "INTERNAL SERVER ERROR"),
    (799, "UNKNOWN"),
])
def test_status_text(code, text):
    assert status_text(code) == text
