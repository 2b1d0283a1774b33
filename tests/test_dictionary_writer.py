import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from core.errors import IngestionFailed, StorageConflict
from models.dictionary import MainDictionary
from models.enums import LanguageCode, PartOfSpeech, SourceType
from models.example import DictionaryExample
from models.synonym import DictionarySynonym
from models.word import Word
from models.word_definition import OneWordDefinition
from repositories.dictionary_repo import DictionaryRepository
from repositories.word_repo import WordRepository
from services.dictionary_allocator import allocate
from services.dictionary_writer import DictionaryWriter


def test_persist_writes_full_pair(db, count, chair_analysis):
    pair = DictionaryWriter(db).persist(allocate(chair_analysis))

    assert count(MainDictionary) == 2
    assert count(Word) == 2
    assert count(OneWordDefinition) == 2
    assert count(DictionaryExample) == 4
    assert count(DictionarySynonym) == 6

    repo = DictionaryRepository(db)
    target_entry = repo.get_entry(pair.target_entry_id)
    base_entry = repo.get_entry(pair.base_entry_id)

    assert target_entry.word.word == "chair"
    assert target_entry.word.language_code == LanguageCode.en
    assert target_entry.one_word_definition.definition == "сиденье"
    assert target_entry.source == SourceType.ai_generated
    assert [item.example for item in target_entry.examples] == ["He sat on the chair.", "The chair is by the window."]
    assert [item.synonym for item in target_entry.synonyms] == ["seat", "stool", "armchair"]
    assert all(item.language_code == LanguageCode.en for item in target_entry.synonyms)

    assert base_entry.word.word == "стул"
    assert base_entry.one_word_definition.definition == "seat"
    assert base_entry.description_base == target_entry.description_target
    assert base_entry.description_target == target_entry.description_base
    assert target_entry.pair_key == base_entry.pair_key == pair.pair_key


def test_failure_between_entries_rolls_back_everything(db, count, chair_analysis, monkeypatch):
    original = DictionaryRepository.add_entry
    calls = []

    def failing_add_entry(self, **kwargs):
        calls.append(kwargs["word_id"])
        if len(calls) == 2:
            raise RuntimeError("connection lost")
        return original(self, **kwargs)

    monkeypatch.setattr(DictionaryRepository, "add_entry", failing_add_entry)

    with pytest.raises(IngestionFailed) as exc_info:
        DictionaryWriter(db).persist(allocate(chair_analysis))

    assert exc_info.value.retryable is False
    assert len(calls) == 2
    assert count(MainDictionary) == 0
    assert count(Word) == 0
    assert count(OneWordDefinition) == 0
    assert count(DictionaryExample) == 0


def test_constraint_violation_is_storage_conflict(db, count, chair_analysis, monkeypatch):
    def broken_add_synonyms(self, **kwargs):
        raise IntegrityError("INSERT INTO dictionary_synonyms", {}, Exception("constraint failed"))

    monkeypatch.setattr(DictionaryRepository, "add_synonyms", broken_add_synonyms)

    with pytest.raises(StorageConflict) as exc_info:
        DictionaryWriter(db).persist(allocate(chair_analysis))

    assert exc_info.value.retryable is True
    assert count(MainDictionary) == 0
    assert count(Word) == 0


def test_shared_word_is_reused(db, count, make_analysis):
    writer = DictionaryWriter(db)
    first = writer.persist(allocate(make_analysis()))
    second = writer.persist(
        allocate(
            make_analysis(
                wordInBaseLanguage="кресло",
                oneWordDefinitionInBaseLanguage="кресло",
                phoneticSpellingInBaseLanguage="kreslo",
            )
        )
    )

    assert count(Word) == 3
    assert count(MainDictionary) == 4
    assert first.target_word_id == second.target_word_id
    assert first.base_word_id != second.base_word_id


def test_existing_word_gains_missing_phonetic_only(db, chair_analysis):
    db.add(Word(word="chair", language_code=LanguageCode.en, phonetic=None))
    db.add(Word(word="стул", language_code=LanguageCode.ru, phonetic="stuːl"))
    db.commit()

    DictionaryWriter(db).persist(allocate(chair_analysis))

    words = {w.word: w for w in db.execute(select(Word)).scalars()}
    assert words["chair"].phonetic == "tʃeər"
    assert words["стул"].phonetic == "stuːl"


def test_concurrently_created_word_is_reused(db, count, chair_analysis, monkeypatch):
    existing = Word(word="chair", language_code=LanguageCode.en, phonetic="tʃeər")
    db.add(existing)
    db.commit()
    existing_id = existing.id

    original_find = WordRepository.find
    calls = []

    def stale_find(self, *, text, language):
        calls.append(text)
        # the first lookup misses the row another request just committed
        if len(calls) == 1:
            return None
        return original_find(self, text=text, language=language)

    monkeypatch.setattr(WordRepository, "find", stale_find)

    pair = DictionaryWriter(db).persist(allocate(chair_analysis))

    assert pair.target_word_id == existing_id
    assert count(Word) == 2
    assert count(MainDictionary) == 2


def test_entries_keep_allocated_part_of_speech(db, make_analysis):
    analysis = make_analysis(partOfSpeechInBaseLanguage="verb", partOfSpeechInTargetLanguage="noun")
    pair = DictionaryWriter(db).persist(allocate(analysis))

    target_entry = db.get(MainDictionary, pair.target_entry_id)
    base_entry = db.get(MainDictionary, pair.base_entry_id)
    assert target_entry.part_of_speech == PartOfSpeech.verb
    assert base_entry.part_of_speech == PartOfSpeech.noun
