from sqlalchemy import Column, DateTime, Enum, Integer, String, UniqueConstraint, func
from core.database import Base
from models.enums import LanguageCode


class Word(Base):
    __tablename__ = "words"
    __table_args__ = (
        UniqueConstraint("word", "language_code", name="uq_words_word_language"),
    )

    id = Column(Integer, primary_key=True)
    word = Column(String(255), nullable=False, index=True)
    phonetic = Column(String(100), nullable=True)
    language_code = Column(Enum(LanguageCode, name="language_code", native_enum=False), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
