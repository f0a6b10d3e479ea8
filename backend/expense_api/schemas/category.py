# expense_api/schemas/category.py
from pydantic import Field, field_validator
from .common import CamelModel


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=150)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class CategoryOut(CamelModel):
    id: int
    name: str
