# module ferfam.sessions.models
from typing import Any, Dict, Optional


class Session:
    """
    Session navigateur côté serveur.
    - token: identifiant opaque porté par le cookie (None tant que rien n'est enregistré)
    - data: contenu sérialisable (dict JSON)
    - modified / destroyed: indicateurs lus par le middleware après la réponse
    """

    def __init__(self, token: Optional[str] = None, data: Optional[Dict[str, Any]] = None):
        self.token = token
        self.data: Dict[str, Any] = dict(data or {})
        self.modified = False
        self.destroyed = False

    @property
    def admin(self) -> bool:
        return self.data.get("admin") is True

    @admin.setter
    def admin(self, value: bool) -> None:
        self.data["admin"] = bool(value)
        self.modified = True

    @property
    def is_new(self) -> bool:
        return self.token is None

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def destroy(self) -> None:
        """Vide la session; le middleware supprime l'entrée du store et le cookie."""
        self.data.clear()
        self.destroyed = True
        self.modified = False

    def __repr__(self) -> str:
        return f"Session(token={'…' if self.token else None}, admin={self.admin})"
