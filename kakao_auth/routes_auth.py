# kakao_auth/routes_auth.py
from fastapi import APIRouter, Depends

from . import auth_flow, profile
from .deps import get_member_repository
from .kakao_client import KakaoClient, get_kakao_client
from .repository import MemberRepository
from .schemas import ApiResponse, KakaoLoginIn

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/kakao", response_model=ApiResponse)
async def kakao_login(
    data: KakaoLoginIn,
    client: KakaoClient = Depends(get_kakao_client),
    repo: MemberRepository = Depends(get_member_repository),
):
    """
    카카오 로그인

    1. 인가 코드 -> 카카오 액세스 토큰
    2. 카카오 사용자 정보 조회
    3. 신규 회원이면 members 에 등록
    4. JWT 반환
    """
    result = await auth_flow.kakao_login(data.code, client, repo)
    return ApiResponse(message="Login successful", data=result)

@router.post("/logout", response_model=ApiResponse)
async def logout():
    # 클라이언트 측에서 JWT 토큰을 삭제하도록 안내
    profile.logout()
    return ApiResponse(message="Logout successful")
