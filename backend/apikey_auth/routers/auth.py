from fastapi import APIRouter, Depends

from apikey_auth.dependencies import require_api_key
from apikey_auth.models.auth_models import AuthCheckResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get("/check", response_model=AuthCheckResponse)
async def check(api_key: str = Depends(require_api_key)) -> AuthCheckResponse:
    """Confirm that a well-formed ApiKey credential was presented."""
    return AuthCheckResponse(authenticated=True)
