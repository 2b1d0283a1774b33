"""Maps one word analysis onto the rows of a mirrored dictionary pair.

Entry #1 is keyed to the target-language word and is the one shown to
learners; entry #2 is keyed to the base-language word. Descriptions are
mirrored between them. The part of speech is cross-assigned: entry #1
takes ``partOfSpeechInBaseLanguage`` and entry #2 takes
``partOfSpeechInTargetLanguage``.

Nothing in this module touches the database.
"""
import logging
import uuid
from dataclasses import dataclass, field

from core.errors import IncompleteAnalysis
from models.enums import DifficultyLevel, LanguageCode, PartOfSpeech, SourceType
from schemas.analysis import REQUIRED_LIST_FIELDS, WordAnalysis

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordDraft:
    text: str
    language: LanguageCode
    phonetic: str | None


@dataclass(frozen=True)
class DefinitionDraft:
    text: str
    language: LanguageCode


@dataclass(frozen=True)
class EntryDraft:
    word: WordDraft
    definition: DefinitionDraft
    base_language: LanguageCode
    target_language: LanguageCode
    description_base: str
    description_target: str
    part_of_speech: PartOfSpeech
    difficulty_level: DifficultyLevel
    source: SourceType
    examples: tuple[str, ...]
    synonyms: tuple[str, ...]

    @property
    def content_language(self) -> LanguageCode:
        # examples and synonyms are written in the language of the keyed word
        return self.word.language


@dataclass(frozen=True)
class DictionaryAllocation:
    target_entry: EntryDraft
    base_entry: EntryDraft
    pair_key: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def entries(self) -> tuple[EntryDraft, EntryDraft]:
        return self.target_entry, self.base_entry


def normalize_part_of_speech(value: str) -> PartOfSpeech:
    key = value.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return PartOfSpeech(key)
    except ValueError:
        logger.warning("Unknown part of speech %r, storing as undefined", value)
        return PartOfSpeech.undefined


def _check_complete(analysis: WordAnalysis) -> None:
    empty = [name for name in REQUIRED_LIST_FIELDS if not getattr(analysis, name)]
    if empty:
        raise IncompleteAnalysis(f"Analysis has empty lists: {', '.join(empty)}")
    missing = analysis.missing_fields()
    if missing:
        raise IncompleteAnalysis(f"Analysis is missing: {', '.join(missing)}")


def _clip(analysis: WordAnalysis, name: str) -> tuple[str, ...]:
    values = getattr(analysis, name)
    limit = REQUIRED_LIST_FIELDS[name]
    if len(values) > limit:
        logger.warning("Dropping %d extra items from %s", len(values) - limit, name)
    return tuple(values[:limit])


def allocate(analysis: WordAnalysis) -> DictionaryAllocation:
    _check_complete(analysis)

    base = analysis.base_language
    target = analysis.target_language
    source = SourceType.ai_generated

    target_word = WordDraft(
        text=analysis.word_in_target_language,
        language=target,
        phonetic=analysis.phonetic_spelling_in_target_language or None,
    )
    base_word = WordDraft(
        text=analysis.word_in_base_language,
        language=base,
        phonetic=analysis.phonetic_spelling_in_base_language or None,
    )

    target_entry = EntryDraft(
        word=target_word,
        definition=DefinitionDraft(analysis.one_word_definition_in_base_language, base),
        base_language=base,
        target_language=target,
        description_base=analysis.fill_word_description_in_base_language,
        description_target=analysis.fill_word_description_in_target_language,
        part_of_speech=normalize_part_of_speech(analysis.part_of_speech_in_base_language),
        difficulty_level=analysis.difficulty_level,
        source=source,
        examples=_clip(analysis, "examples_in_target_language"),
        synonyms=_clip(analysis, "synonyms_in_target_language"),
    )
    base_entry = EntryDraft(
        word=base_word,
        definition=DefinitionDraft(analysis.one_word_definition_in_target_language, target),
        base_language=target,
        target_language=base,
        description_base=analysis.fill_word_description_in_target_language,
        description_target=analysis.fill_word_description_in_base_language,
        part_of_speech=normalize_part_of_speech(analysis.part_of_speech_in_target_language),
        difficulty_level=analysis.difficulty_level,
        source=source,
        examples=_clip(analysis, "examples_in_base_language"),
        synonyms=_clip(analysis, "synonyms_in_base_language"),
    )
    return DictionaryAllocation(target_entry=target_entry, base_entry=base_entry)
