from pydantic import BaseModel, model_validator

from models.enums import LanguageCode


class UserSettingsIn(BaseModel):
    base_language: LanguageCode
    target_language: LanguageCode

    @model_validator(mode="after")
    def _languages_differ(self):
        if self.base_language == self.target_language:
            raise ValueError("Base and target language must differ")
        return self


class UserSettingsOut(BaseModel):
    base_language: LanguageCode
    target_language: LanguageCode


class UserProgressOut(BaseModel):
    new_words_count: int
    dictionary_size: int
