from sqlalchemy import Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from core.database import Base
from models.enums import LanguageCode


class DictionarySynonym(Base):
    __tablename__ = "dictionary_synonyms"

    id = Column(Integer, primary_key=True)
    dictionary_id = Column(Integer, ForeignKey("main_dictionary.id", ondelete="CASCADE"), nullable=False, index=True)
    synonym = Column(String(255), nullable=False)
    language_code = Column(Enum(LanguageCode, name="language_code", native_enum=False), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    dictionary = relationship("MainDictionary", back_populates="synonyms")
