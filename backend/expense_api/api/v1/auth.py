# expense_api/api/v1/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from expense_api.db.session import get_db
from expense_api.schemas.auth import LoginRequest, RegisterRequest, RegisterResponse, TokenResponse
from expense_api.services import auth as auth_service

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    user_id = auth_service.register(db, name=payload.name, email=payload.email, password=payload.password)
    return RegisterResponse(message="User registered successfully", id=user_id)


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    result = auth_service.login(db, email=payload.email, password=payload.password)
    return TokenResponse(token=result.token, id=result.id, name=result.name, email=result.email)
