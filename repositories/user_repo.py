from datetime import datetime, timezone

from sqlalchemy.orm import Session
from models.enums import LanguageCode
from models.user import User


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def _zero_or_value(self, value: int | None) -> int:
        return int(value or 0)

    def record_new_word(self, user: User) -> int:
        user.new_words_count = self._zero_or_value(user.new_words_count) + 1
        user.last_word_added_at = datetime.now(timezone.utc)
        self.db.add(user)
        self.db.flush()
        return user.new_words_count

    def update_languages(self, user: User, *, base_language: LanguageCode, target_language: LanguageCode) -> User:
        user.base_language = base_language
        user.target_language = target_language
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def create(
        self,
        *,
        email: str,
        username: str,
        base_language: LanguageCode = LanguageCode.ru,
        target_language: LanguageCode = LanguageCode.en,
    ) -> User:
        user = User(
            email=email,
            username=username,
            base_language=base_language,
            target_language=target_language,
            new_words_count=0,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
