import json
import logging

import httpx
from pydantic import ValidationError

from core.config import Settings
from core.errors import AnalysisRejected, AnalysisUnavailable, IncompleteAnalysis
from models.enums import LanguageCode
from schemas.analysis import REQUIRED_LIST_FIELDS, WordAnalysis

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a highly knowledgeable linguistics expert and translator."

PROMPT_TEMPLATE = """Analyze the following word: "{word}"
Base language: {base}
Target language: {target}

Please provide a detailed analysis following this exact format:
{{
  "isCorrect": boolean (is the word spelled correctly),
  "isWord": boolean (is it a valid word in either language),
  "baseLanguage": "{base}",
  "targetLanguage": "{target}",
  "wordInBaseLanguage": string (the word in base language),
  "wordInTargetLanguage": string (the word in target language),
  "oneWordDefinitionInBaseLanguage": string (1-3 word definition),
  "oneWordDefinitionInTargetLanguage": string (1-3 word definition),
  "fillWordDescriptionInBaseLanguage": string (1-3 sentences),
  "fillWordDescriptionInTargetLanguage": string (1-3 sentences),
  "examplesInBaseLanguage": string[] (1-3 example sentences),
  "examplesInTargetLanguage": string[] (1-3 example sentences),
  "synonymsInBaseLanguage": string[] (1-6 most appropriate synonyms),
  "synonymsInTargetLanguage": string[] (1-6 most appropriate synonyms),
  "phoneticSpellingInBaseLanguage": string,
  "phoneticSpellingInTargetLanguage": string,
  "partOfSpeechInBaseLanguage": string (must be one of: noun, verb, adjective, adverb, pronoun, preposition, conjunction, interjection),
  "partOfSpeechInTargetLanguage": string (must be one of: noun, verb, adjective, adverb, pronoun, preposition, conjunction, interjection),
  "difficultyLevel": string (must be one of: A1, A2, B1, B2, C1, C2),
  "source": "ai_generated"
}}

Ensure all text fields are properly escaped and the response is valid JSON."""


def _parse_language(value) -> LanguageCode:
    if isinstance(value, LanguageCode):
        return value
    try:
        return LanguageCode(str(value).strip().lower())
    except ValueError as exc:
        raise AnalysisRejected(f"Unsupported language: {value!r}") from exc


class WordAnalysisClient:
    """Asks a chat-completions model to analyse one word for a language pair.

    The client owns its ``httpx.AsyncClient``; construct it once at startup
    and call :meth:`aclose` on shutdown. Nothing here touches the database.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        base_url: str,
        model: str,
        temperature: float = 0.3,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.model = model
        self.temperature = temperature
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "WordAnalysisClient":
        return cls(
            api_key=settings.OPENAI_API_KEY,
            base_url=settings.OPENAI_BASE_URL,
            model=settings.ANALYSIS_MODEL,
            temperature=settings.ANALYSIS_TEMPERATURE,
            timeout=settings.ANALYSIS_TIMEOUT_SECONDS,
            **kwargs,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def analyze(self, word: str, base_language, target_language) -> WordAnalysis:
        normalized_word = (word or "").strip()
        if not normalized_word:
            raise AnalysisRejected("Word is empty")
        base = _parse_language(base_language)
        target = _parse_language(target_language)
        if base == target:
            raise AnalysisRejected("Base and target language must differ")

        raw = await self._request(normalized_word, base, target)
        analysis = self._parse(raw)

        if not analysis.is_correct or not analysis.is_word:
            logger.info("Analysis rejected %r for %s-%s", normalized_word, base.value, target.value)
            raise AnalysisRejected(f"{normalized_word!r} is not a valid word for {base.value}-{target.value}")
        if analysis.base_language != base or analysis.target_language != target:
            raise IncompleteAnalysis("Analysis returned a different language pair")

        missing = analysis.missing_fields()
        if missing:
            raise IncompleteAnalysis(f"Analysis is missing: {', '.join(missing)}")
        return self._truncate_lists(analysis)

    async def _request(self, word: str, base: LanguageCode, target: LanguageCode) -> str:
        payload = {
            "model": self.model,
            "temperature": self.temperature,
            "response_format": {"type": "json_object"},
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": PROMPT_TEMPLATE.format(word=word, base=base.value, target=target.value),
                },
            ],
        }
        try:
            r = await self._client.post("/chat/completions", json=payload)
            r.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("Analysis request timed out for %r", word)
            raise AnalysisUnavailable("Analysis provider timed out") from exc
        except httpx.HTTPError as exc:
            logger.warning("Analysis request failed for %r: %s", word, exc)
            raise AnalysisUnavailable("Analysis provider request failed") from exc

        try:
            data = r.json()
            return data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise AnalysisUnavailable("Unexpected analysis provider response") from exc

    def _parse(self, raw: str) -> WordAnalysis:
        try:
            return WordAnalysis.model_validate(json.loads(raw))
        except (TypeError, ValueError) as exc:
            # ValidationError is a ValueError
            detail = exc.errors()[0]["loc"] if isinstance(exc, ValidationError) else "invalid JSON"
            raise IncompleteAnalysis(f"Malformed analysis: {detail}") from exc

    def _truncate_lists(self, analysis: WordAnalysis) -> WordAnalysis:
        updates = {}
        for name, limit in REQUIRED_LIST_FIELDS.items():
            values = getattr(analysis, name)
            if len(values) > limit:
                logger.warning("Analysis returned %d items for %s, keeping %d", len(values), name, limit)
                updates[name] = values[:limit]
        return analysis.model_copy(update=updates) if updates else analysis
