from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from models.dictionary import MainDictionary
from models.enums import LanguageCode, LearningStatus
from models.user_dictionary import UserDictionary


class UserDictionaryRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, *, user_id: int, main_dictionary_id: int) -> UserDictionary | None:
        stmt = select(UserDictionary).where(
            UserDictionary.user_id == user_id,
            UserDictionary.main_dictionary_id == main_dictionary_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def add(
        self,
        *,
        user_id: int,
        main_dictionary_id: int,
        base_language: LanguageCode,
        target_language: LanguageCode,
    ) -> UserDictionary:
        entity = UserDictionary(
            user_id=user_id,
            main_dictionary_id=main_dictionary_id,
            base_language=base_language,
            target_language=target_language,
            learning_status=LearningStatus.not_started,
            progress=0,
            review_count=0,
            time_word_was_started_to_learn=datetime.now(timezone.utc),
        )
        self.db.add(entity)
        self.db.flush()
        return entity

    def list_for_user(self, user_id: int, limit: int | None = None) -> list[UserDictionary]:
        stmt = (
            select(UserDictionary)
            .where(UserDictionary.user_id == user_id)
            .options(
                selectinload(UserDictionary.entry).selectinload(MainDictionary.word),
                selectinload(UserDictionary.entry).selectinload(MainDictionary.one_word_definition),
            )
            .order_by(UserDictionary.id.desc())
        )
        if limit:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars())

    def count_for_user(self, user_id: int) -> int:
        stmt = select(func.count(UserDictionary.id)).where(UserDictionary.user_id == user_id)
        return self.db.execute(stmt).scalar_one()
