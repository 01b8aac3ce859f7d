from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from ..deps import bearer_token, get_sessions, require_admin
from ..auth import SessionRegistry
from ..logging_config import get_logger
from ..schemas import LoginRequest, LoginResponse

router = APIRouter(prefix="/auth", tags=["auth"])
logger = get_logger(__name__)


@router.post("/login", response_model=LoginResponse)
def login(req: LoginRequest, request: Request, sessions: SessionRegistry = Depends(get_sessions)):
    email = req.email.strip()
    if not request.app.state.verifier.verify(email, req.password):
        logger.info("failed admin login for %s", email)
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return LoginResponse(token=sessions.create(email), email=email)


@router.post("/logout")
def logout(
    token: Optional[str] = Depends(bearer_token),
    sessions: SessionRegistry = Depends(get_sessions),
):
    return {"ok": bool(token) and sessions.revoke(token)}


@router.get("/me")
def me(actor: str = Depends(require_admin)):
    return {"email": actor}
