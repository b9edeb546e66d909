import hmac
from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from caseview.core.config import settings

http_bearer = HTTPBearer(auto_error=False)

def _matches(candidate: str | None, expected: str) -> bool:
    if not candidate:
        return False
    return hmac.compare_digest(candidate.encode(), expected.encode())

async def require_api_key(
    creds: HTTPAuthorizationCredentials | None = Depends(http_bearer),
    x_api_key: str | None = Header(default=None),
) -> None:
    expected = settings.api_key
    # In local, allow requests when no key is configured
    if not expected:
        if settings.ENV == "local":
            return
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="API key not configured")

    token = creds.credentials if creds else None
    if _matches(token, expected) or _matches(x_api_key, expected):
        return
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")
