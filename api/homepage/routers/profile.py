"""Profile router: public read, admin-only update."""

from fastapi import APIRouter, Depends, status

from homepage.auth.dependencies import get_profile_service, require_admin
from homepage.schemas.account import Identity
from homepage.schemas.profile import ProfileDocument, ProfileUpdate, ProfileUpdateResponse
from homepage.services.profile import ProfileService

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get(
    "",
    response_model=ProfileDocument,
    status_code=status.HTTP_200_OK,
)
async def get_profile(
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileDocument:
    """Get the public profile. No authentication required."""
    return await profile_service.get_profile()


@router.put(
    "",
    response_model=ProfileUpdateResponse,
    status_code=status.HTTP_200_OK,
)
async def update_profile(
    data: ProfileUpdate,
    _: Identity = Depends(require_admin),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileUpdateResponse:
    """
    Update the profile.

    Only the top-level fields present in the body are replaced; nested
    objects such as ``contact`` must be sent whole. ``name`` is required.
    """
    profile = await profile_service.update_profile(data.to_partial())
    return ProfileUpdateResponse(message="Profile saved", profile=profile)
