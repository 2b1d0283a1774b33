import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.errors import IngestionFailed, StorageConflict
from models.dictionary import MainDictionary
from repositories.dictionary_repo import DictionaryRepository
from repositories.word_repo import WordRepository
from services.dictionary_allocator import DictionaryAllocation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersistedPair:
    pair_key: str
    target_entry_id: int
    base_entry_id: int
    target_word_id: int
    base_word_id: int


class DictionaryWriter:
    """Writes a dictionary allocation in a single transaction.

    Either both entries with all their words, definitions, examples and
    synonyms are committed, or the session is rolled back and nothing is.
    Rows go in dependency order: words, definitions, entries, then the
    examples and synonyms of each entry.
    """

    def __init__(self, db: Session):
        self.db = db
        self.word_repo = WordRepository(db)
        self.dictionary_repo = DictionaryRepository(db)

    def persist(self, allocation: DictionaryAllocation) -> PersistedPair:
        try:
            entries = self._write(allocation)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Constraint violation while writing pair %s: %s", allocation.pair_key, exc.orig)
            raise StorageConflict(str(exc.orig)) from exc
        except Exception as exc:
            self.db.rollback()
            logger.exception("Failed to write pair %s", allocation.pair_key)
            raise IngestionFailed(str(exc)) from exc

        target_entry, base_entry = entries
        logger.info(
            "Stored %r/%r as entries %s and %s",
            allocation.target_entry.word.text,
            allocation.base_entry.word.text,
            target_entry.id,
            base_entry.id,
        )
        return PersistedPair(
            pair_key=allocation.pair_key,
            target_entry_id=target_entry.id,
            base_entry_id=base_entry.id,
            target_word_id=target_entry.word_id,
            base_word_id=base_entry.word_id,
        )

    def _write(self, allocation: DictionaryAllocation) -> list[MainDictionary]:
        drafts = allocation.entries

        words = [
            self.word_repo.get_or_create(
                text=draft.word.text,
                language=draft.word.language,
                phonetic=draft.word.phonetic,
            )
            for draft in drafts
        ]
        definitions = [
            self.dictionary_repo.add_definition(text=draft.definition.text, language=draft.definition.language)
            for draft in drafts
        ]
        entries = [
            self.dictionary_repo.add_entry(
                pair_key=allocation.pair_key,
                word_id=word.id,
                one_word_definition_id=definition.id,
                base_language=draft.base_language,
                target_language=draft.target_language,
                description_base=draft.description_base,
                description_target=draft.description_target,
                part_of_speech=draft.part_of_speech,
                difficulty_level=draft.difficulty_level,
                source=draft.source,
            )
            for draft, word, definition in zip(drafts, words, definitions)
        ]
        for draft, entry in zip(drafts, entries):
            self.dictionary_repo.add_examples(
                dictionary_id=entry.id,
                examples=list(draft.examples),
                language=draft.content_language,
            )
            self.dictionary_repo.add_synonyms(
                dictionary_id=entry.id,
                synonyms=list(draft.synonyms),
                language=draft.content_language,
            )
        return entries
