"""Localization schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

Language = Literal["en", "ar"]


class ListValueOut(BaseModel):
    """Dropdown option with a label in the requested language."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    list_key: str
    value_key: str
    value_en: str
    value_ar: str
    label: str = ""


class LanguageRequest(BaseModel):
    """PUT /v1/i18n/language request."""

    language: Language


class LanguageState(BaseModel):
    """Current language and text direction."""

    language: Language
    direction: Literal["ltr", "rtl"]
