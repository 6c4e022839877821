from datetime import date

from .errors import NotFoundError, UpstreamError, ValidationError
from .logger import get_logger
from .repository import MemberRepository
from .schemas import MemberUpdate, ProfileOut, UserInfoOut

logger = get_logger(__name__)


def format_birthday(birth_date: date) -> str:
    # YYYY-MM-DD -> "M월 D일"
    return f"{birth_date.month}월 {birth_date.day}일"


def is_birthday(birth_date: date, today: date) -> bool:
    # 연도는 무시하고 월/일만 비교
    return (birth_date.month, birth_date.day) == (today.month, today.day)


async def get_name_and_birthday(repo: MemberRepository, member_id: int, today: date | None = None) -> UserInfoOut:
    try:
        row = await repo.get_name_and_birthday(member_id)
    except Exception as e:
        logger.exception("Error fetching user name and birthday (member_id=%s)", member_id)
        raise UpstreamError("Failed to fetch user information") from e

    if row is None:
        raise NotFoundError("User not found")

    if row.birth_date is None:
        return UserInfoOut(name=row.name, birthday=None, isBirthday=False)

    today = today or date.today()
    return UserInfoOut(
        name=row.name,
        birthday=format_birthday(row.birth_date),
        isBirthday=is_birthday(row.birth_date, today),
    )


async def get_profile(repo: MemberRepository, member_id: int) -> ProfileOut:
    try:
        row = await repo.get_profile(member_id)
    except Exception as e:
        logger.exception("Error fetching user profile (member_id=%s)", member_id)
        raise UpstreamError("Failed to fetch user profile") from e

    if row is None:
        raise NotFoundError("User not found")
    return ProfileOut(name=row.name, email=row.email)


async def update_profile(repo: MemberRepository, member_id: int, data: MemberUpdate) -> None:
    # 입력 검증: 최소 하나의 필드가 있어야 함
    if not data.changes():
        raise ValidationError("At least one field (name, email, birth_date) is required")

    try:
        await repo.update(member_id, data)
    except Exception as e:
        logger.exception("Error updating user profile (member_id=%s)", member_id)
        raise UpstreamError("Failed to update user profile") from e


def logout() -> None:
    """
    JWT 는 서버에 상태가 없으므로 무효화할 것이 없다.
    클라이언트가 토큰을 삭제하면 된다.
    """
    return None
