from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from core.database import Base
from models.enums import DifficultyLevel, LanguageCode, PartOfSpeech, SourceType


class MainDictionary(Base):
    """One language direction of an ingested word pair."""

    __tablename__ = "main_dictionary"

    id = Column(Integer, primary_key=True)
    pair_key = Column(String(36), nullable=False, index=True)
    word_id = Column(Integer, ForeignKey("words.id"), nullable=False, index=True)
    one_word_definition_id = Column(Integer, ForeignKey("one_word_definitions.id"), nullable=False)
    base_language = Column(Enum(LanguageCode, name="language_code", native_enum=False), nullable=False, index=True)
    target_language = Column(Enum(LanguageCode, name="language_code", native_enum=False), nullable=False, index=True)
    description_base = Column(String(2000), nullable=True)
    description_target = Column(String(2000), nullable=True)
    part_of_speech = Column(Enum(PartOfSpeech, name="part_of_speech", native_enum=False), nullable=False)
    difficulty_level = Column(Enum(DifficultyLevel, name="difficulty_level", native_enum=False), nullable=False)
    source = Column(Enum(SourceType, name="source_type", native_enum=False), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    word = relationship("Word")
    one_word_definition = relationship("OneWordDefinition")
    examples = relationship(
        "DictionaryExample",
        back_populates="dictionary",
        order_by="DictionaryExample.position",
        cascade="all, delete-orphan",
    )
    synonyms = relationship(
        "DictionarySynonym",
        back_populates="dictionary",
        order_by="DictionarySynonym.position",
        cascade="all, delete-orphan",
    )
