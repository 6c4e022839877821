from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from .db import get_db
from .errors import AuthenticationError
from .repository import MemberRepository
from .security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)

@dataclass(frozen=True)
class Identity:
    id: int
    email: str

async def get_current_identity(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Identity:
    # 토큰 검증만 한다. 회원 존재 여부는 각 핸들러가 확인(404)
    if creds is None:
        raise AuthenticationError("Invalid or expired token")
    try:
        payload = decode_access_token(creds.credentials)
        member_id = payload.get("sub")
        if not member_id:
            raise ValueError("Missing sub")
        return Identity(id=int(member_id), email=payload.get("email", ""))
    except ValueError:
        raise AuthenticationError("Invalid or expired token")

def get_member_repository(db: AsyncSession = Depends(get_db)) -> MemberRepository:
    return MemberRepository(db)
