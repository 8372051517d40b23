import logging
import secrets
from typing import Optional

import bcrypt

from ferfam import config

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class LoginResult:
    def __init__(self, success: bool, error: Optional[str] = None):
        self.success = success
        self.error = error

    def __bool__(self) -> bool:
        return self.success

def _matches(provided: str, expected: str) -> bool:
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))

def _password_ok(password: str) -> bool:
    """
    Vérifie le mot de passe admin:
    - ADMIN_PASSWORD_HASH (bcrypt) prioritaire s'il est défini
    - sinon comparaison à temps constant avec ADMIN_PASSWORD
    """
    if config.ADMIN_PASSWORD_HASH:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), config.ADMIN_PASSWORD_HASH.encode("utf-8"))
        except ValueError:
            logger.error("admin.login ADMIN_PASSWORD_HASH is not a valid bcrypt hash")
            return False
    if config.ADMIN_PASSWORD:
        return _matches(password, config.ADMIN_PASSWORD)
    return False

def login(email: Optional[str], password: Optional[str]) -> LoginResult:
    """Connexion admin:
    - Compare email + mot de passe aux identifiants configurés (process-wide)
    - Aucun identifiant configuré ou champ vide => échec
    - Message générique en cas d'échec (pas de lockout ni de rate limit)
    """
    email = (email or "").strip()
    password = password or ""
    if not config.ADMIN_EMAIL or not email or not password:
        return LoginResult(False, error=INVALID_CREDENTIALS)
    email_ok = _matches(email.lower(), config.ADMIN_EMAIL.lower())
    password_ok = _password_ok(password)
    if email_ok and password_ok:
        logger.info("admin.login success")
        return LoginResult(True)
    logger.info("admin.login failed")
    return LoginResult(False, error=INVALID_CREDENTIALS)
