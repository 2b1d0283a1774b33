from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from models.enums import DifficultyLevel, LanguageCode

MAX_EXAMPLES = 3
MAX_SYNONYMS = 6

REQUIRED_TEXT_FIELDS = (
    "word_in_base_language",
    "word_in_target_language",
    "one_word_definition_in_base_language",
    "one_word_definition_in_target_language",
    "fill_word_description_in_base_language",
    "fill_word_description_in_target_language",
    "phonetic_spelling_in_base_language",
    "phonetic_spelling_in_target_language",
    "part_of_speech_in_base_language",
    "part_of_speech_in_target_language",
)

REQUIRED_LIST_FIELDS = {
    "examples_in_base_language": MAX_EXAMPLES,
    "examples_in_target_language": MAX_EXAMPLES,
    "synonyms_in_base_language": MAX_SYNONYMS,
    "synonyms_in_target_language": MAX_SYNONYMS,
}


class WordAnalysis(BaseModel):
    """Structured analysis of one word for a base/target language pair.

    Field names follow the provider's camelCase JSON; ``populate_by_name``
    lets tests and callers build it with the snake_case names as well.
    The provider has been seen to spell the description fields as both
    ``fillWordDescription*`` and ``fullWordDescription*``.
    """

    model_config = ConfigDict(populate_by_name=True)

    is_correct: bool = Field(alias="isCorrect")
    is_word: bool = Field(alias="isWord")
    base_language: LanguageCode = Field(alias="baseLanguage")
    target_language: LanguageCode = Field(alias="targetLanguage")
    word_in_base_language: str = Field("", alias="wordInBaseLanguage")
    word_in_target_language: str = Field("", alias="wordInTargetLanguage")
    one_word_definition_in_base_language: str = Field("", alias="oneWordDefinitionInBaseLanguage")
    one_word_definition_in_target_language: str = Field("", alias="oneWordDefinitionInTargetLanguage")
    fill_word_description_in_base_language: str = Field(
        "",
        validation_alias=AliasChoices(
            "fillWordDescriptionInBaseLanguage",
            "fullWordDescriptionInBaseLanguage",
            "fill_word_description_in_base_language",
        ),
        serialization_alias="fillWordDescriptionInBaseLanguage",
    )
    fill_word_description_in_target_language: str = Field(
        "",
        validation_alias=AliasChoices(
            "fillWordDescriptionInTargetLanguage",
            "fullWordDescriptionInTargetLanguage",
            "fill_word_description_in_target_language",
        ),
        serialization_alias="fillWordDescriptionInTargetLanguage",
    )
    examples_in_base_language: list[str] = Field(default_factory=list, alias="examplesInBaseLanguage")
    examples_in_target_language: list[str] = Field(default_factory=list, alias="examplesInTargetLanguage")
    synonyms_in_base_language: list[str] = Field(default_factory=list, alias="synonymsInBaseLanguage")
    synonyms_in_target_language: list[str] = Field(default_factory=list, alias="synonymsInTargetLanguage")
    phonetic_spelling_in_base_language: str = Field("", alias="phoneticSpellingInBaseLanguage")
    phonetic_spelling_in_target_language: str = Field("", alias="phoneticSpellingInTargetLanguage")
    part_of_speech_in_base_language: str = Field("", alias="partOfSpeechInBaseLanguage")
    part_of_speech_in_target_language: str = Field("", alias="partOfSpeechInTargetLanguage")
    difficulty_level: DifficultyLevel = Field(alias="difficultyLevel")
    source: str = Field("ai_generated")

    @field_validator(
        "word_in_base_language",
        "word_in_target_language",
        "one_word_definition_in_base_language",
        "one_word_definition_in_target_language",
        "fill_word_description_in_base_language",
        "fill_word_description_in_target_language",
        "phonetic_spelling_in_base_language",
        "phonetic_spelling_in_target_language",
        "part_of_speech_in_base_language",
        "part_of_speech_in_target_language",
        mode="before",
    )
    @classmethod
    def _strip_text(cls, value):
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator(
        "examples_in_base_language",
        "examples_in_target_language",
        "synonyms_in_base_language",
        "synonyms_in_target_language",
        mode="before",
    )
    @classmethod
    def _clean_list(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if isinstance(value, list):
            return [item.strip() for item in value if isinstance(item, str) and item.strip()]
        return value

    def missing_fields(self) -> list[str]:
        missing = [name for name in REQUIRED_TEXT_FIELDS if not getattr(self, name)]
        missing.extend(name for name in REQUIRED_LIST_FIELDS if not getattr(self, name))
        return missing
