from datetime import datetime

from pydantic import BaseModel, ConfigDict, constr

from models.enums import DifficultyLevel, LanguageCode, LearningStatus, PartOfSpeech


class AddWordIn(BaseModel):
    word: constr(strip_whitespace=True, min_length=1, max_length=255)
    base_language: LanguageCode | None = None
    target_language: LanguageCode | None = None


class IngestionOut(BaseModel):
    target_entry_id: int
    base_entry_id: int
    user_dictionary_id: int
    created: bool


class DictionaryEntryOut(BaseModel):
    id: int
    word: str
    phonetic: str | None = None
    word_language: LanguageCode
    definition: str
    base_language: LanguageCode
    target_language: LanguageCode
    description_base: str | None = None
    description_target: str | None = None
    part_of_speech: PartOfSpeech
    difficulty_level: DifficultyLevel
    examples: list[str]
    synonyms: list[str]


class UserDictionaryItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    main_dictionary_id: int
    word: str
    translation: str
    category: PartOfSpeech
    difficulty: DifficultyLevel
    learning_status: LearningStatus
    progress: float
    review_count: int
    time_word_was_started_to_learn: datetime | None = None
