from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from core.database import get_db
from repositories.user_repo import UserRepository
from schemas.settings_user import UserProgressOut, UserSettingsIn, UserSettingsOut
from services.user_dictionary_service import UserDictionaryService
from .auth import get_current_user_id

router = APIRouter(prefix="/user", tags=["users"])


def _load_user(db: Session, user_id: int):
    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/settings", response_model=UserSettingsOut)
async def get_settings(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    user = _load_user(db, user_id)
    return UserSettingsOut(base_language=user.base_language, target_language=user.target_language)


@router.put("/settings", response_model=UserSettingsOut)
async def update_settings(
    data: UserSettingsIn,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    repo = UserRepository(db)
    user = _load_user(db, user_id)
    user = repo.update_languages(user, base_language=data.base_language, target_language=data.target_language)
    return UserSettingsOut(base_language=user.base_language, target_language=user.target_language)


@router.get("/progress", response_model=UserProgressOut)
async def get_progress(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    user = _load_user(db, user_id)
    return UserProgressOut(
        new_words_count=int(user.new_words_count or 0),
        dictionary_size=UserDictionaryService(db).count_for_user(user_id),
    )
