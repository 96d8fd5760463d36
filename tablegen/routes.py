# tablegen/routes.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from tablegen.config import settings
from tablegen.forms import DEFAULT_FORM, config_from_form
from tablegen.generator import generate
from tablegen.models import GeneratedMarkup, InvalidConfigError, TableConfig
from tablegen.renderer import EXPORT_MEDIA_TYPE, attachment_header
from tablegen.schemas import MarkupResponse, SettingsResponse, TableForm
from tablegen.settings_store import (
    JsonFileStore,
    KeyValueStore,
    clear_settings,
    load_settings,
    save_settings,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class TableTooLargeError(Exception):
    pass


def get_store() -> KeyValueStore:
    return JsonFileStore(settings.SETTINGS_PATH)


def _check_size(config: TableConfig) -> None:
    if config.rows > settings.MAX_ROWS or config.columns > settings.MAX_COLUMNS:
        raise TableTooLargeError(
            f"Table is limited to {settings.MAX_ROWS} rows and {settings.MAX_COLUMNS} columns"
        )


def _generate_from_form(form: TableForm) -> GeneratedMarkup:
    try:
        config = config_from_form(form.model_dump())
        _check_size(config)
        return generate(config)
    except InvalidConfigError as e:
        logger.info("Rejected table form rows=%r columns=%r", form.rows, form.columns)
        raise HTTPException(status_code=400, detail=str(e))
    except TableTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))


# ------------------------------
# Generation
# ------------------------------
@router.post("/generate", response_model=MarkupResponse)
def generate_table(form: TableForm, store: KeyValueStore = Depends(get_store)):
    """
    Generate the full LaTeX table and its preview from raw form values.
    Settings are saved before validation, so an invalid form is still remembered.
    """
    if settings.SAVE_ON_GENERATE:
        try:
            save_settings(store, form.model_dump())
        except OSError as e:
            logger.warning("Could not save table settings: %s", e)

    markup = _generate_from_form(form)
    return MarkupResponse(full=markup.full, preview=markup.preview)


@router.post("/export", response_class=PlainTextResponse)
def export_table(form: TableForm):
    markup = _generate_from_form(form)
    return PlainTextResponse(markup.full, media_type=EXPORT_MEDIA_TYPE, headers=attachment_header())


# ------------------------------
# Saved settings
# ------------------------------
@router.get("/settings", response_model=SettingsResponse)
def read_settings(store: KeyValueStore = Depends(get_store)):
    saved = load_settings(store)
    if saved is None:
        return SettingsResponse(saved=False, settings=TableForm(**DEFAULT_FORM))
    merged = {name: DEFAULT_FORM[name] if value is None else value for name, value in saved.items()}
    try:
        form = TableForm(**merged)
    except ValidationError as e:
        logger.warning("Saved table settings have invalid values, using defaults: %s", e)
        return SettingsResponse(saved=False, settings=TableForm(**DEFAULT_FORM))
    return SettingsResponse(saved=True, settings=form)


@router.put("/settings", response_model=SettingsResponse)
def write_settings(form: TableForm, store: KeyValueStore = Depends(get_store)):
    save_settings(store, form.model_dump())
    return SettingsResponse(saved=True, settings=form)


@router.delete("/settings", status_code=204)
def delete_settings(store: KeyValueStore = Depends(get_store)):
    clear_settings(store)
