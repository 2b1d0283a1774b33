from sqlalchemy import Column, DateTime, Enum, Integer, Text, func
from core.database import Base
from models.enums import LanguageCode


class OneWordDefinition(Base):
    __tablename__ = "one_word_definitions"

    id = Column(Integer, primary_key=True)
    definition = Column(Text, nullable=False)
    language_code = Column(Enum(LanguageCode, name="language_code", native_enum=False), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
