from sqlalchemy import Column, Enum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from core.database import Base
from models.enums import LanguageCode


class DictionaryExample(Base):
    __tablename__ = "dictionary_examples"

    id = Column(Integer, primary_key=True)
    dictionary_id = Column(Integer, ForeignKey("main_dictionary.id", ondelete="CASCADE"), nullable=False, index=True)
    example = Column(Text, nullable=False)
    language_code = Column(Enum(LanguageCode, name="language_code", native_enum=False), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    dictionary = relationship("MainDictionary", back_populates="examples")
