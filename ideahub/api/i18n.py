"""Localization endpoints - translations, lists of values, language preference."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ideahub.config import settings
from ideahub.database import get_db
from ideahub.i18n.context import LANGUAGE_KEY, LanguageContext, group_translations
from ideahub.schemas.i18n import LanguageRequest, LanguageState, ListValueOut
from ideahub.storage.repositories import list_translations, list_values

router = APIRouter()

LANGUAGE_COOKIE_MAX_AGE = 365 * 24 * 3600


def get_language_context(request: Request) -> LanguageContext:
    """Language context backed by the caller's ``language`` cookie."""
    return LanguageContext(storage=dict(request.cookies), default=settings.default_language)


LanguageDep = Annotated[LanguageContext, Depends(get_language_context)]


@router.get("/i18n/language", response_model=LanguageState)
async def get_language(ctx: LanguageDep):
    """Current language and text direction."""
    return LanguageState(language=ctx.language, direction=ctx.direction)


@router.put("/i18n/language", response_model=LanguageState)
async def set_language(body: LanguageRequest, ctx: LanguageDep, response: Response):
    """Switch language; persisted in the ``language`` cookie."""
    ctx.set_language(body.language)
    response.set_cookie(LANGUAGE_KEY, ctx.language, max_age=LANGUAGE_COOKIE_MAX_AGE)
    return LanguageState(language=ctx.language, direction=ctx.direction)


@router.get("/i18n/translations")
async def get_translations(db: Annotated[AsyncSession, Depends(get_db)]):
    """All UI strings grouped by interface and key."""
    grouped = group_translations(await list_translations(db))
    return {
        interface: {key: {"en": t.english_text, "ar": t.arabic_text} for key, t in keys.items()}
        for interface, keys in grouped.items()
    }


@router.get("/i18n/lists/{list_key}", response_model=list[ListValueOut])
async def get_list_values(
    list_key: str,
    ctx: LanguageDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Active options of a list, labelled in the caller's language."""
    values = await list_values(db, list_key)
    return [
        ListValueOut.model_validate(v).model_copy(update={"label": ctx.pick(v.value_en, v.value_ar)})
        for v in values
    ]
