"""
카카오 로그인 처리.

1. 인가 코드 -> 액세스 토큰
2. 액세스 토큰 -> 카카오 사용자 정보 (email, nickname)
3. members 에서 email 로 조회, 없으면 신규 등록
4. JWT 발급
"""
from fastapi.concurrency import run_in_threadpool

from .errors import ValidationError, UpstreamError
from .kakao_client import KakaoClient, extract_claims
from .logger import get_logger
from .repository import MemberRepository
from .schemas import LoginOut
from .security import create_access_token

logger = get_logger(__name__)


async def kakao_login(code: str | None, client: KakaoClient, repo: MemberRepository) -> LoginOut:
    if not code:
        raise ValidationError("Authorization code is required")

    try:
        access_token = await run_in_threadpool(client.exchange_code, code)
        kakao_user = await run_in_threadpool(client.fetch_profile, access_token)
        email, name = extract_claims(kakao_user)

        user = await repo.find_by_email(email)
        is_existing_user = user is not None
        if user is None:
            # 신규 회원 등록 (birth_date 는 비워둔다)
            user = await repo.create(email, name)
            logger.info("new member registered id=%s", user.id)
        # 기존 회원의 이름은 카카오 값으로 갱신하지 않는다

        token = create_access_token(member_id=user.id, email=user.email)
    except Exception as e:
        logger.exception("Error during Kakao login")
        raise UpstreamError("Failed to log in with Kakao") from e

    return LoginOut(
        token=token,
        email=user.email,
        name=user.name,
        isExistingUser=is_existing_user,
    )
