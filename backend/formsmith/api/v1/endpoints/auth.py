from fastapi import APIRouter, HTTPException, Request, Response
from formsmith.core.security import (
    clear_session_cookie,
    is_authenticated,
    set_session_cookie,
    verify_credentials,
)
from formsmith.schemas.auth import AuthStatus, LoginRequest, LoginResponse
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest, response: Response):
    if not verify_credentials(credentials.username, credentials.password):
        logger.warning(f"Failed login attempt for user '{credentials.username}'")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    set_session_cookie(response)
    logger.info("Admin logged in")
    return LoginResponse()


@router.get("/check", response_model=AuthStatus)
async def check(request: Request):
    return AuthStatus(authenticated=is_authenticated(request))


@router.post("/logout")
async def logout(response: Response):
    clear_session_cookie(response)
    return {"success": True, "message": "Logged out"}
