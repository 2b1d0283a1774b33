import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import IngestionFailed
from models.dictionary import MainDictionary
from models.enums import LanguageCode
from models.user_dictionary import UserDictionary
from repositories.dictionary_repo import DictionaryRepository
from repositories.user_dictionary_repo import UserDictionaryRepository
from repositories.user_repo import UserRepository
from services.dictionary_writer import PersistedPair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinkResult:
    link: UserDictionary
    created: bool


class UserDictionaryService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = UserDictionaryRepository(db)
        self.user_repo = UserRepository(db)
        self.dictionary_repo = DictionaryRepository(db)

    def choose_entry(self, pair: PersistedPair, target_language: LanguageCode) -> MainDictionary:
        """Pick the entry keyed to the word in the learner's target language."""
        target_entry = self.dictionary_repo.get_entry(pair.target_entry_id)
        base_entry = self.dictionary_repo.get_entry(pair.base_entry_id)
        if target_entry is None or base_entry is None:
            raise IngestionFailed(f"Dictionary pair {pair.pair_key} is incomplete")
        for entry in (target_entry, base_entry):
            if entry.word.language_code == target_language:
                return entry
        logger.warning(
            "No entry of pair %s is keyed to %s, linking the target-language entry",
            pair.pair_key,
            target_language.value,
        )
        return target_entry

    def link(self, *, user_id: int, pair: PersistedPair, target_language: LanguageCode) -> LinkResult:
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise IngestionFailed(f"User {user_id} not found")

        entry = self.choose_entry(pair, target_language)
        existing = self.repo.get(user_id=user_id, main_dictionary_id=entry.id)
        if existing is not None:
            return LinkResult(link=existing, created=False)

        try:
            link = self.repo.add(
                user_id=user_id,
                main_dictionary_id=entry.id,
                base_language=entry.base_language,
                target_language=entry.target_language,
            )
            self.user_repo.record_new_word(user)
            self.db.commit()
        except IntegrityError:
            # same link created by a parallel request
            self.db.rollback()
            existing = self.repo.get(user_id=user_id, main_dictionary_id=entry.id)
            if existing is None:
                raise IngestionFailed(f"Could not link entry {entry.id} to user {user_id}")
            return LinkResult(link=existing, created=False)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise IngestionFailed(str(exc)) from exc

        self.db.refresh(link)
        logger.info("Linked user %s to entry %s", user_id, entry.id)
        return LinkResult(link=link, created=True)

    def list_for_user(self, user_id: int, limit: int | None = None) -> list[UserDictionary]:
        return self.repo.list_for_user(user_id, limit=limit)

    def count_for_user(self, user_id: int) -> int:
        return self.repo.count_for_user(user_id)
