from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cornerstones.db.database import get_db
from cornerstones.schemas.auth import LoginRequest, ProfileCreate, ProfileOut, Token
from cornerstones.services.accounts import issue_token, register_profile
from cornerstones.services.security import RequestContext, get_request_context

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=ProfileOut, status_code=201)
def register(payload: ProfileCreate, db: Session = Depends(get_db)):
    return register_profile(db, payload)


@router.post("/login", response_model=Token)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    return Token(access_token=issue_token(db, payload.email, payload.password))


@router.get("/me", response_model=ProfileOut)
def me(ctx: RequestContext = Depends(get_request_context)):
    return ctx.profile
