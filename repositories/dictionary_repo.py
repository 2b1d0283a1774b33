from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from models.dictionary import MainDictionary
from models.enums import DifficultyLevel, LanguageCode, PartOfSpeech, SourceType
from models.example import DictionaryExample
from models.synonym import DictionarySynonym
from models.word import Word
from models.word_definition import OneWordDefinition


class DictionaryRepository:
    def __init__(self, db: Session):
        self.db = db

    def add_definition(self, *, text: str, language: LanguageCode) -> OneWordDefinition:
        entity = OneWordDefinition(definition=text, language_code=language)
        self.db.add(entity)
        self.db.flush()
        return entity

    def add_entry(
        self,
        *,
        pair_key: str,
        word_id: int,
        one_word_definition_id: int,
        base_language: LanguageCode,
        target_language: LanguageCode,
        description_base: str | None,
        description_target: str | None,
        part_of_speech: PartOfSpeech,
        difficulty_level: DifficultyLevel,
        source: SourceType,
    ) -> MainDictionary:
        entity = MainDictionary(
            pair_key=pair_key,
            word_id=word_id,
            one_word_definition_id=one_word_definition_id,
            base_language=base_language,
            target_language=target_language,
            description_base=description_base,
            description_target=description_target,
            part_of_speech=part_of_speech,
            difficulty_level=difficulty_level,
            source=source,
        )
        self.db.add(entity)
        self.db.flush()
        return entity

    def add_examples(self, *, dictionary_id: int, examples: list[str], language: LanguageCode) -> list[DictionaryExample]:
        rows = [
            DictionaryExample(dictionary_id=dictionary_id, example=text, language_code=language, position=index)
            for index, text in enumerate(examples)
        ]
        self.db.add_all(rows)
        self.db.flush()
        return rows

    def add_synonyms(self, *, dictionary_id: int, synonyms: list[str], language: LanguageCode) -> list[DictionarySynonym]:
        rows = [
            DictionarySynonym(dictionary_id=dictionary_id, synonym=text, language_code=language, position=index)
            for index, text in enumerate(synonyms)
        ]
        self.db.add_all(rows)
        self.db.flush()
        return rows

    def get_entry(self, entry_id: int) -> MainDictionary | None:
        stmt = (
            select(MainDictionary)
            .where(MainDictionary.id == entry_id)
            .options(
                selectinload(MainDictionary.word),
                selectinload(MainDictionary.one_word_definition),
                selectinload(MainDictionary.examples),
                selectinload(MainDictionary.synonyms),
            )
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_pair(self, pair_key: str) -> list[MainDictionary]:
        stmt = (
            select(MainDictionary)
            .where(MainDictionary.pair_key == pair_key)
            .options(selectinload(MainDictionary.word))
            .order_by(MainDictionary.id)
        )
        return list(self.db.execute(stmt).scalars())

    def find_entry_for_word(
        self,
        *,
        text: str,
        word_language: LanguageCode,
        base_language: LanguageCode,
        target_language: LanguageCode,
    ) -> MainDictionary | None:
        stmt = (
            select(MainDictionary)
            .join(Word, Word.id == MainDictionary.word_id)
            .where(
                func.lower(Word.word) == text.lower(),
                Word.language_code == word_language,
                MainDictionary.base_language == base_language,
                MainDictionary.target_language == target_language,
            )
            .order_by(MainDictionary.id.desc())
            .limit(1)
        )
        return self.db.execute(stmt).scalar_one_or_none()
