# module ferfam.utils.templates
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ferfam.config import TEMPLATES_DIR
from ferfam.utils.i18n import resolve_locale, get_translator

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

def render(request: Request, name: str, context: Optional[Dict[str, Any]] = None, status_code: int = 200):
    """
    Rend un template avec le contexte commun des pages:
    - locale + traducteur t() résolus depuis la requête
    - current_path (lien actif de la navigation)
    """
    locale = resolve_locale(request)
    data: Dict[str, Any] = {
        "locale": locale,
        "t": get_translator(locale),
        "current_path": request.url.path,
    }
    data.update(context or {})
    return templates.TemplateResponse(request, name, data, status_code=status_code)
