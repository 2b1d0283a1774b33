import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.enums import LanguageCode
from models.word import Word

logger = logging.getLogger(__name__)


class WordRepository:
    def __init__(self, db: Session):
        self.db = db

    def find(self, *, text: str, language: LanguageCode) -> Word | None:
        stmt = select(Word).where(Word.word == text, Word.language_code == language)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_or_create(self, *, text: str, language: LanguageCode, phonetic: str | None = None) -> Word:
        """Return the word for (text, language), inserting it when missing.

        Runs inside the caller's transaction. The insert happens in a
        SAVEPOINT: if a concurrent ingestion inserted the same pair first,
        only the savepoint is rolled back and the winner's row is reused.
        Existing rows only ever gain a missing phonetic spelling.
        """
        entity = self.find(text=text, language=language)
        if entity is None:
            try:
                with self.db.begin_nested():
                    entity = Word(word=text, language_code=language, phonetic=phonetic)
                    self.db.add(entity)
            except IntegrityError:
                entity = self.find(text=text, language=language)
                if entity is None:
                    raise
                logger.info("Word %r (%s) was created concurrently, reusing id=%s", text, language.value, entity.id)
            else:
                return entity

        if phonetic and not entity.phonetic:
            entity.phonetic = phonetic
            self.db.flush()
        return entity
