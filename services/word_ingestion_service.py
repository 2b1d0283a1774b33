import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from core.errors import AnalysisRejected, IngestionFailed
from models.enums import LanguageCode
from repositories.dictionary_repo import DictionaryRepository
from repositories.user_repo import UserRepository
from services.analysis_client import WordAnalysisClient
from services.dictionary_allocator import allocate
from services.dictionary_writer import DictionaryWriter, PersistedPair
from services.user_dictionary_service import UserDictionaryService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngestionResult:
    target_entry_id: int
    base_entry_id: int
    user_dictionary_id: int
    created: bool


class WordIngestionService:
    """Adds a word to the shared dictionary and to the user's own list.

    Steps run strictly in order: look for an existing pair, otherwise
    analyse, allocate and write it; then link the user. Errors from any
    step propagate unchanged.
    """

    def __init__(self, db: Session, analysis_client: WordAnalysisClient):
        self.db = db
        self.analysis_client = analysis_client
        self.user_repo = UserRepository(db)
        self.dictionary_repo = DictionaryRepository(db)
        self.writer = DictionaryWriter(db)
        self.linker = UserDictionaryService(db)

    async def ingest(
        self,
        *,
        user_id: int,
        word: str,
        base_language: LanguageCode | None = None,
        target_language: LanguageCode | None = None,
    ) -> IngestionResult:
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise IngestionFailed(f"User {user_id} not found")

        base = base_language or user.base_language
        target = target_language or user.target_language
        text = (word or "").strip()
        if not text:
            raise AnalysisRejected("Word is empty")

        pair = self.find_existing_pair(text, base, target)
        created = pair is None
        if pair is None:
            analysis = await self.analysis_client.analyze(text, base, target)
            allocation = allocate(analysis)
            pair = self.writer.persist(allocation)
        else:
            logger.info("Reusing dictionary pair %s for %r", pair.pair_key, text)

        link = self.linker.link(user_id=user_id, pair=pair, target_language=user.target_language)
        return IngestionResult(
            target_entry_id=pair.target_entry_id,
            base_entry_id=pair.base_entry_id,
            user_dictionary_id=link.link.id,
            created=created,
        )

    def find_existing_pair(self, text: str, base: LanguageCode, target: LanguageCode) -> PersistedPair | None:
        # the word may be typed in either language of the pair
        entry = self.dictionary_repo.find_entry_for_word(
            text=text, word_language=target, base_language=base, target_language=target
        ) or self.dictionary_repo.find_entry_for_word(
            text=text, word_language=base, base_language=target, target_language=base
        )
        if entry is None:
            return None

        by_language = {item.word.language_code: item for item in self.dictionary_repo.get_pair(entry.pair_key)}
        target_entry = by_language.get(target)
        base_entry = by_language.get(base)
        if target_entry is None or base_entry is None:
            logger.warning("Dictionary pair %s is incomplete, analysing again", entry.pair_key)
            return None
        return PersistedPair(
            pair_key=entry.pair_key,
            target_entry_id=target_entry.id,
            base_entry_id=base_entry.id,
            target_word_id=target_entry.word_id,
            base_word_id=base_entry.word_id,
        )
