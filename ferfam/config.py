# ferfam.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

PUBLIC_DIR = BASE_DIR / "public"
TEMPLATES_DIR = BASE_DIR / "templates"
LOCALES_DIR = BASE_DIR / "locales"

"""
Configuration centrale du site.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Expose les chemins utiles (PUBLIC_DIR, TEMPLATES_DIR, LOCALES_DIR)
- Normalise les secrets (Stripe, Telebirr, identifiants admin)
- Paramètres de session, cookies, CORS/hosts et prix affichés
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _int_env(name: str, default: int) -> int:
    try:
        return int(_clean_env(os.getenv(name)) or default)
    except ValueError:
        return default

def _float_env(name: str, default: float) -> float:
    try:
        return float(_clean_env(os.getenv(name)) or default)
    except ValueError:
        return default

# Serveur
PORT = _int_env("PORT", 5000)

# Stripe: clé secrète (checkout hébergé)
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or "")

# Identifiants admin (secret opérateur, pas des données utilisateur)
ADMIN_EMAIL = _clean_env(os.getenv("ADMIN_EMAIL") or "")
ADMIN_PASSWORD = _clean_env(os.getenv("ADMIN_PASSWORD") or "")
# Alternative au mot de passe en clair: hash bcrypt
ADMIN_PASSWORD_HASH = _clean_env(os.getenv("ADMIN_PASSWORD_HASH") or "")

# Telebirr (fournisseur régional)
TELEBIRR_APP_ID = _clean_env(os.getenv("TELEBIRR_APP_ID") or "")
TELEBIRR_SHORT_CODE = _clean_env(os.getenv("TELEBIRR_SHORT_CODE") or "")
TELEBIRR_API_URL = _clean_env(os.getenv("TELEBIRR_API_URL") or "")
TELEBIRR_NOTIFY_URL = _clean_env(os.getenv("TELEBIRR_NOTIFY_URL") or "")
TELEBIRR_DEFAULT_AMOUNT = _float_env("TELEBIRR_DEFAULT_AMOUNT", 2635)
TELEBIRR_TIMEOUT_SECONDS = _float_env("TELEBIRR_TIMEOUT_SECONDS", 10)

# Sessions serveur (cookie opaque signé)
SESSION_SECRET_KEY = _clean_env(os.getenv("SESSION_SECRET_KEY") or "replace_me_with_a_long_random_secret")
SESSION_COOKIE_NAME = _clean_env(os.getenv("SESSION_COOKIE_NAME") or "ferfam_session")
SESSION_MAX_AGE = _int_env("SESSION_MAX_AGE", 60 * 60 * 24)
SESSION_BACKEND = _clean_env(os.getenv("SESSION_BACKEND") or "memory").lower()
SESSION_REDIS_URL = _clean_env(os.getenv("SESSION_REDIS_URL") or "redis://127.0.0.1:6379/1")

# Cookies / Sécurité
COOKIE_SECURE = (os.getenv("COOKIE_SECURE", "false").lower() == "true")

# CORS (dev)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h.strip()]

# Prix affichés (USD) et taux de conversion ETB
RENT_PRICE_USD = _int_env("RENT_PRICE_USD", 903)
BOOKING_PRICE_USD = _int_env("BOOKING_PRICE_USD", 17)
ETB_RATE = _float_env("ETB_RATE", 155)

# Libellé par défaut du payeur et devise du checkout
DEFAULT_PAYER = "Ferwoine Asg"
CHECKOUT_CURRENCY = "usd"

# Langues
SUPPORTED_LOCALES = ("en", "am")
DEFAULT_LOCALE = "en"
LOCALE_COOKIE_NAME = "lang"
