"""Dashboard configuration routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vipudev.core.security.encryption import KeyEncryptionService, get_encryption_service
from vipudev.core.storage import repository
from vipudev.core.storage.database import get_db
from vipudev.models.database import UserConfig
from vipudev.models.schemas import UserConfigEnvelope, UserConfigResponse, UserConfigUpdate

router = APIRouter(prefix="/config", tags=["config"])


def _to_response(config: UserConfig, encryption: KeyEncryptionService) -> UserConfigResponse:
    api_key = encryption.decrypt(config.encrypted_api_key) if config.encrypted_api_key else None
    return UserConfigResponse(
        id=config.id,
        backend_url=config.backend_url,
        api_key=api_key,
        updated_at=config.updated_at,
    )


@router.get("", response_model=UserConfigEnvelope)
async def get_config(
    db: AsyncSession = Depends(get_db),
    encryption: KeyEncryptionService = Depends(get_encryption_service),
):
    """Return the saved configuration, or an empty object."""
    config = await repository.get_config(db)
    if config is None:
        return UserConfigEnvelope(config={})
    return UserConfigEnvelope(config=_to_response(config, encryption))


@router.post("", response_model=UserConfigEnvelope)
async def save_config(
    config_data: UserConfigUpdate,
    db: AsyncSession = Depends(get_db),
    encryption: KeyEncryptionService = Depends(get_encryption_service),
):
    """
    Create or update the configuration.

    Only the fields present in the body change. The API key is encrypted
    before it is stored; an empty key clears it.
    """
    update_data = config_data.model_dump(exclude_unset=True)
    values = {}
    if "backend_url" in update_data:
        values["backend_url"] = update_data["backend_url"]
    if "api_key" in update_data:
        api_key = update_data["api_key"]
        values["encrypted_api_key"] = encryption.encrypt(api_key) if api_key else None

    config = await repository.upsert_config(db, values)
    return UserConfigEnvelope(config=_to_response(config, encryption))
