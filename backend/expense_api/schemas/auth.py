# expense_api/schemas/auth.py
from pydantic import EmailStr, Field
from .common import CamelModel


class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterResponse(CamelModel):
    message: str
    id: int


class TokenResponse(CamelModel):
    token: str
    type: str = "Bearer"
    id: int
    name: str
    email: str
