# Importing this module registers every table on Base.metadata.
from models.user import User
from models.word import Word
from models.word_definition import OneWordDefinition
from models.dictionary import MainDictionary
from models.example import DictionaryExample
from models.synonym import DictionarySynonym
from models.user_dictionary import UserDictionary

__all__ = [
    "User",
    "Word",
    "OneWordDefinition",
    "MainDictionary",
    "DictionaryExample",
    "DictionarySynonym",
    "UserDictionary",
]
