"""FastAPI dependencies for authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from booklens.domain.common.value_objects import UserId
from booklens.exceptions import CredentialsException
from booklens.infrastructure.identity.auth.token_service import verify_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


async def get_current_user(token: Annotated[str, Depends(oauth2_scheme)]) -> UserId:
    """
    Resolve the caller from the bearer token.

    Users live with the external authentication service; a valid token is
    all this service needs to know who is calling.

    Raises:
        CredentialsException: If the token is invalid or expired
    """
    user_id = verify_access_token(token)
    if user_id is None or user_id <= 0:
        raise CredentialsException
    return UserId(user_id)


CurrentUser = Annotated[UserId, Depends(get_current_user)]
