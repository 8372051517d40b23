# module ferfam.utils.forms
import logging
from typing import Any, Dict, Optional

from fastapi import Request

logger = logging.getLogger(__name__)

async def read_body_params(request: Request) -> Dict[str, Any]:
    """
    Lit le corps de la requête en dict (formulaire urlencoded/multipart ou JSON).
    - Corps absent ou illisible: {}
    """
    ctype = (request.headers.get("content-type") or "").lower()
    try:
        if ctype.startswith("application/json"):
            body = await request.json()
            return body if isinstance(body, dict) else {}
        if ctype.startswith("application/x-www-form-urlencoded") or ctype.startswith("multipart/form-data"):
            form = await request.form()
            return {k: v for k, v in form.items()}
    except ValueError:
        logger.warning("forms.read_body invalid body path=%s ctype=%s", request.url.path, ctype)
    return {}

def pick(params: Dict[str, Any], request: Request, name: str) -> Optional[str]:
    """Valeur du corps si non vide, sinon celle du query string (comme body || query)."""
    value = params.get(name)
    if value is not None and str(value) != "":
        return str(value)
    return request.query_params.get(name)
