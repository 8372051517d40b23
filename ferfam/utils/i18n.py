# module ferfam.utils.i18n
"""
Résolution de la langue et tables de traduction (locales/<lang>.json).
- Ordre: paramètre ?lang=, puis cookie "lang", puis langue par défaut (en).
- Une clé absente retombe sur l'anglais, puis sur la clé elle-même.
"""
import json
import logging
from functools import lru_cache
from typing import Callable, Dict, Optional

from fastapi import Request

from ferfam import config

logger = logging.getLogger(__name__)

def normalize_locale(value: Optional[str]) -> str:
    """Retourne une langue supportée (en/am), sinon la langue par défaut."""
    candidate = (value or "").strip().lower()
    if candidate in config.SUPPORTED_LOCALES:
        return candidate
    return config.DEFAULT_LOCALE

@lru_cache(maxsize=None)
def load_catalog(locale: str) -> Dict[str, str]:
    path = config.LOCALES_DIR / f"{locale}.json"
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.warning("i18n.catalog missing locale=%s path=%s", locale, path)
        return {}

def resolve_locale(request: Request) -> str:
    raw = request.query_params.get(config.LOCALE_COOKIE_NAME) or request.cookies.get(config.LOCALE_COOKIE_NAME)
    return normalize_locale(raw)

def translate(locale: str, key: str, **params) -> str:
    text = load_catalog(locale).get(key)
    if text is None and locale != config.DEFAULT_LOCALE:
        text = load_catalog(config.DEFAULT_LOCALE).get(key)
    if text is None:
        text = key
    if params:
        try:
            text = text.format(**params)
        except (KeyError, IndexError, ValueError):
            logger.warning("i18n.format failed key=%s locale=%s", key, locale)
    return text

def get_translator(locale: str) -> Callable[..., str]:
    def _t(key: str, **params) -> str:
        return translate(locale, key, **params)
    return _t
