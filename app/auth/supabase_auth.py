# app/auth/supabase_auth.py

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from app.core.errors import AuthenticationError
from app.db.supabase_client import get_supabase_client

logger = logging.getLogger(__name__)

# Looks for an "Authorization: Bearer <token>" header. tokenUrl is required by
# FastAPI but sign-in happens against Supabase Auth directly.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token", auto_error=False)


def get_current_user_id(token: Optional[str] = Depends(oauth2_scheme)) -> str:
    """
    Verifies a Supabase access token and returns the user id.
    Raises AuthenticationError (401) if the token is missing or rejected.
    """
    if token is None:
        raise AuthenticationError("Not authenticated: Token is missing")

    client = get_supabase_client()
    try:
        response = client.auth.get_user(token)
    except Exception as e:
        logger.warning("Supabase token verification failed: %s", e)
        raise AuthenticationError() from e

    user = getattr(response, "user", None)
    if user is None or not user.id:
        logger.warning("Token verified, but no user was returned.")
        raise AuthenticationError()

    return str(user.id)
