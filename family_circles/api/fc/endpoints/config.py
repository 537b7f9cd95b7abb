"""Config API: capabilities advertised to the client. No inputs, no side effects."""

from fastapi import APIRouter

from family_circles.schemas.config import ConfigResponse

router = APIRouter()


@router.get("/config", response_model=ConfigResponse)
def get_config() -> ConfigResponse:
    """Return {"api": {"read": []}}."""
    return ConfigResponse()
