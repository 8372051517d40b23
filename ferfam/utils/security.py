from fastapi import Depends, HTTPException

from ferfam.sessions import Session, get_session

ADMIN_LOGIN_PATH = "/admin/login"
ADMIN_DASHBOARD_PATH = "/admin/dashboard"

def require_admin(session: Session = Depends(get_session)) -> Session:
    """
    Garde admin: laisse passer si session.admin est vrai.
    Sinon lève 401; le handler d'exceptions redirige vers /admin/login sans exécuter la vue.
    """
    if not session.admin:
        raise HTTPException(status_code=401, detail="Admin login required")
    return session
