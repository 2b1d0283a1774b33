from sqlalchemy import Column, Integer, String, DateTime, Enum, func
from core.database import Base
from models.enums import LanguageCode


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    base_language = Column(Enum(LanguageCode, name="language_code", native_enum=False), nullable=False, default=LanguageCode.ru)
    target_language = Column(Enum(LanguageCode, name="language_code", native_enum=False), nullable=False, default=LanguageCode.en)
    new_words_count = Column(Integer, nullable=False, server_default="0", default=0)
    last_word_added_at = Column(DateTime(timezone=True), nullable=True)
