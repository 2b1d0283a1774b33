from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status

from authx import AuthX, AuthXConfig, TokenPayload
from core.config import settings

router = APIRouter(prefix="/auth", tags=["auth"])

_cookie_samesite = settings.JWT_COOKIE_SAMESITE.lower() if settings.JWT_COOKIE_SAMESITE else None
_cookie_domain = settings.JWT_COOKIE_DOMAIN or None

config = AuthXConfig(
    JWT_SECRET_KEY=settings.SECRET_KEY,
    JWT_ALGORITHM=settings.JWT_ALG,
    JWT_ACCESS_TOKEN_EXPIRES=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    JWT_TOKEN_LOCATION=["cookies"],
    JWT_ACCESS_COOKIE_NAME=settings.JWT_ACCESS_COOKIE_NAME,
    JWT_COOKIE_SAMESITE=_cookie_samesite or "lax",
    JWT_COOKIE_SECURE=settings.JWT_COOKIE_SECURE,
    JWT_COOKIE_DOMAIN=_cookie_domain,
    JWT_COOKIE_CSRF_PROTECT=settings.JWT_COOKIE_CSRF_PROTECT,
)

security = AuthX(config=config)


def get_current_user_id(payload: TokenPayload = Depends(security.access_token_required)) -> int:
    try:
        return int(payload.sub)
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid subject in token") from exc


@router.get("/me")
async def me(user_id: int = Depends(get_current_user_id)):
    return {"user_id": user_id}
