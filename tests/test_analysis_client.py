import json

import httpx
import pytest

from core.errors import AnalysisRejected, AnalysisUnavailable, IncompleteAnalysis
from models.enums import DifficultyLevel, LanguageCode
from services.analysis_client import WordAnalysisClient

pytestmark = pytest.mark.anyio


def completion(content) -> dict:
    if not isinstance(content, str):
        content = json.dumps(content, ensure_ascii=False)
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def make_client(handler) -> WordAnalysisClient:
    return WordAnalysisClient(
        api_key="sk-test",
        base_url="https://llm.test/v1",
        model="test-model",
        temperature=0.3,
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


async def test_analyze_returns_parsed_analysis(chair_payload):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=completion(chair_payload))

    client = make_client(handler)
    try:
        analysis = await client.analyze("  chair ", "ru", "en")
    finally:
        await client.aclose()

    assert analysis.word_in_target_language == "chair"
    assert analysis.word_in_base_language == "стул"
    assert analysis.difficulty_level == DifficultyLevel.A1
    assert analysis.base_language == LanguageCode.ru

    assert seen["url"] == "https://llm.test/v1/chat/completions"
    assert seen["auth"] == "Bearer sk-test"
    assert seen["body"]["model"] == "test-model"
    assert seen["body"]["response_format"] == {"type": "json_object"}
    assert '"chair"' in seen["body"]["messages"][1]["content"]


async def test_full_word_description_spelling_is_accepted(chair_payload):
    payload = dict(chair_payload)
    payload["fullWordDescriptionInBaseLanguage"] = payload.pop("fillWordDescriptionInBaseLanguage")
    payload["fullWordDescriptionInTargetLanguage"] = payload.pop("fillWordDescriptionInTargetLanguage")
    client = make_client(lambda request: httpx.Response(200, json=completion(payload)))
    try:
        analysis = await client.analyze("chair", "ru", "en")
    finally:
        await client.aclose()

    assert analysis.fill_word_description_in_target_language.startswith("A piece of furniture")


@pytest.mark.parametrize("flag", ["isCorrect", "isWord"])
async def test_invalid_word_is_rejected(chair_payload, flag):
    payload = dict(chair_payload, **{flag: False})
    client = make_client(lambda request: httpx.Response(200, json=completion(payload)))
    try:
        with pytest.raises(AnalysisRejected):
            await client.analyze("chiar", "ru", "en")
    finally:
        await client.aclose()


@pytest.mark.parametrize(
    "word, base, target",
    [("   ", "ru", "en"), ("chair", "xx", "en"), ("chair", "en", "en")],
)
async def test_bad_input_is_rejected_without_calling_provider(word, base, target):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500)

    client = make_client(handler)
    try:
        with pytest.raises(AnalysisRejected):
            await client.analyze(word, base, target)
    finally:
        await client.aclose()
    assert calls == []


async def test_provider_error_is_unavailable():
    client = make_client(lambda request: httpx.Response(500, json={"error": {"message": "overloaded"}}))
    try:
        with pytest.raises(AnalysisUnavailable) as exc_info:
            await client.analyze("chair", "ru", "en")
    finally:
        await client.aclose()
    assert exc_info.value.retryable is True


async def test_timeout_is_unavailable():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client = make_client(handler)
    try:
        with pytest.raises(AnalysisUnavailable):
            await client.analyze("chair", "ru", "en")
    finally:
        await client.aclose()


async def test_non_json_content_is_incomplete():
    client = make_client(lambda request: httpx.Response(200, json=completion("Sorry, I can't help with that.")))
    try:
        with pytest.raises(IncompleteAnalysis):
            await client.analyze("chair", "ru", "en")
    finally:
        await client.aclose()


async def test_unknown_difficulty_is_incomplete(chair_payload):
    payload = dict(chair_payload, difficultyLevel="expert")
    client = make_client(lambda request: httpx.Response(200, json=completion(payload)))
    try:
        with pytest.raises(IncompleteAnalysis):
            await client.analyze("chair", "ru", "en")
    finally:
        await client.aclose()


async def test_empty_examples_are_incomplete(chair_payload):
    payload = dict(chair_payload, examplesInBaseLanguage=[])
    client = make_client(lambda request: httpx.Response(200, json=completion(payload)))
    try:
        with pytest.raises(IncompleteAnalysis):
            await client.analyze("chair", "ru", "en")
    finally:
        await client.aclose()


async def test_long_lists_are_truncated(chair_payload):
    payload = dict(
        chair_payload,
        examplesInTargetLanguage=[f"Example {n}." for n in range(5)],
        synonymsInBaseLanguage=[f"синоним{n}" for n in range(9)],
    )
    client = make_client(lambda request: httpx.Response(200, json=completion(payload)))
    try:
        analysis = await client.analyze("chair", "ru", "en")
    finally:
        await client.aclose()

    assert analysis.examples_in_target_language == ["Example 0.", "Example 1.", "Example 2."]
    assert len(analysis.synonyms_in_base_language) == 6


async def test_language_enum_members_are_accepted(chair_payload):
    client = make_client(lambda request: httpx.Response(200, json=completion(chair_payload)))
    try:
        analysis = await client.analyze("chair", LanguageCode.ru, LanguageCode.en)
    finally:
        await client.aclose()

    assert (analysis.base_language, analysis.target_language) == (LanguageCode.ru, LanguageCode.en)
