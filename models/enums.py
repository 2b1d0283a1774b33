import enum


class LanguageCode(str, enum.Enum):
    en = "en"
    ru = "ru"
    da = "da"
    es = "es"
    fr = "fr"
    de = "de"
    it = "it"
    pt = "pt"
    zh = "zh"
    ja = "ja"
    ko = "ko"
    ar = "ar"


class DifficultyLevel(str, enum.Enum):
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"


class PartOfSpeech(str, enum.Enum):
    noun = "noun"
    verb = "verb"
    phrasal_verb = "phrasal_verb"
    adjective = "adjective"
    adverb = "adverb"
    pronoun = "pronoun"
    preposition = "preposition"
    conjunction = "conjunction"
    interjection = "interjection"
    numeral = "numeral"
    article = "article"
    exclamation = "exclamation"
    abbreviation = "abbreviation"
    suffix = "suffix"
    phrase = "phrase"
    sentence = "sentence"
    undefined = "undefined"


class SourceType(str, enum.Enum):
    ai_generated = "ai_generated"
    user = "user"
    admin = "admin"


class LearningStatus(str, enum.Enum):
    not_started = "notStarted"
    in_progress = "inProgress"
    learned = "learned"
    needs_review = "needsReview"
    difficult = "difficult"
