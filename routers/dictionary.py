from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from core.database import get_db
from repositories.dictionary_repo import DictionaryRepository
from schemas.dictionary import AddWordIn, DictionaryEntryOut, IngestionOut, UserDictionaryItemOut
from services.analysis_client import WordAnalysisClient
from services.user_dictionary_service import UserDictionaryService
from services.word_ingestion_service import WordIngestionService
from .auth import get_current_user_id

router = APIRouter(prefix="/dictionary", tags=["Dictionary"])


def get_analysis_client(request: Request) -> WordAnalysisClient:
    return request.app.state.analysis_client


@router.post(
    "/words",
    response_model=IngestionOut,
    status_code=201,
)
async def add_word(
    data: AddWordIn,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    analysis_client: WordAnalysisClient = Depends(get_analysis_client),
):
    svc = WordIngestionService(db, analysis_client)
    result = await svc.ingest(
        user_id=user_id,
        word=data.word,
        base_language=data.base_language,
        target_language=data.target_language,
    )
    return IngestionOut(
        target_entry_id=result.target_entry_id,
        base_entry_id=result.base_entry_id,
        user_dictionary_id=result.user_dictionary_id,
        created=result.created,
    )


@router.get(
    "/entries/{entry_id}",
    response_model=DictionaryEntryOut,
    dependencies=[Depends(get_current_user_id)],
)
async def get_entry(
    entry_id: int,
    db: Session = Depends(get_db),
):
    entry = DictionaryRepository(db).get_entry(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Entry not found")
    return DictionaryEntryOut(
        id=entry.id,
        word=entry.word.word,
        phonetic=entry.word.phonetic,
        word_language=entry.word.language_code,
        definition=entry.one_word_definition.definition,
        base_language=entry.base_language,
        target_language=entry.target_language,
        description_base=entry.description_base,
        description_target=entry.description_target,
        part_of_speech=entry.part_of_speech,
        difficulty_level=entry.difficulty_level,
        examples=[item.example for item in entry.examples],
        synonyms=[item.synonym for item in entry.synonyms],
    )


@router.get(
    "/my",
    response_model=list[UserDictionaryItemOut],
)
async def my_dictionary(
    limit: int | None = Query(default=None, ge=1, le=500),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = UserDictionaryService(db)
    items = svc.list_for_user(user_id, limit=limit)
    return [
        UserDictionaryItemOut(
            id=item.id,
            main_dictionary_id=item.main_dictionary_id,
            word=item.entry.word.word,
            translation=item.entry.one_word_definition.definition,
            category=item.entry.part_of_speech,
            difficulty=item.entry.difficulty_level,
            learning_status=item.learning_status,
            progress=item.progress,
            review_count=item.review_count,
            time_word_was_started_to_learn=item.time_word_was_started_to_learn,
        )
        for item in items
    ]
