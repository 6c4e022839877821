# kakao_auth/routes_profile.py
from fastapi import APIRouter, Depends

from . import profile
from .deps import Identity, get_current_identity, get_member_repository
from .repository import MemberRepository
from .schemas import ApiResponse, MemberUpdate

router = APIRouter(prefix="/auth", tags=["profile"])

@router.get("/user-info", response_model=ApiResponse)
async def get_user_name_and_birthday(
    current: Identity = Depends(get_current_identity),
    repo: MemberRepository = Depends(get_member_repository),
):
    info = await profile.get_name_and_birthday(repo, current.id)
    return ApiResponse(message="User information fetched successfully", data=info)

@router.get("/profile", response_model=ApiResponse)
async def get_user_profile(
    current: Identity = Depends(get_current_identity),
    repo: MemberRepository = Depends(get_member_repository),
):
    p = await profile.get_profile(repo, current.id)
    return ApiResponse(message="User profile fetched successfully", data=p)

@router.patch("/profile", response_model=ApiResponse)
@router.post("/profile", response_model=ApiResponse)
async def update_user_profile(
    data: MemberUpdate,
    current: Identity = Depends(get_current_identity),
    repo: MemberRepository = Depends(get_member_repository),
):
    await profile.update_profile(repo, current.id, data)
    return ApiResponse(message="User profile updated successfully")
