# needahand/utils/auth.py
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from ..config import settings

# Tokens are minted by the identity provider; this service only reads them.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)

USER_ROLES = ("Customer", "Worker")

def get_current_user(token: str = Depends(oauth2_scheme)) -> dict:
    """Get the caller's id and role from the bearer token"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not token:
        raise credentials_exception
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm]
        )
        user_id: str = payload.get("sub")
        role: str = payload.get("role")
        if user_id is None or role not in USER_ROLES:
            raise credentials_exception
    except JWTError:
        raise credentials_exception

    return {"id": user_id, "role": role}

def require_customer(current_user: dict = Depends(get_current_user)) -> dict:
    if current_user["role"] != "Customer":
        raise HTTPException(status_code=403, detail="Only customers can access this endpoint")
    return current_user

def require_worker(current_user: dict = Depends(get_current_user)) -> dict:
    if current_user["role"] != "Worker":
        raise HTTPException(status_code=403, detail="Only workers can access this endpoint")
    return current_user

__all__ = [
    "oauth2_scheme",
    "get_current_user",
    "require_customer",
    "require_worker"
]
