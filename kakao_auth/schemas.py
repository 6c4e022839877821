from datetime import date
from typing import Any

from pydantic import BaseModel, EmailStr, field_validator

class KakaoLoginIn(BaseModel):
    # 클라이언트가 카카오 동의 화면에서 받은 인가 코드
    code: str | None = None

class LoginOut(BaseModel):
    token: str
    email: str
    name: str | None
    isExistingUser: bool

class UserInfoOut(BaseModel):
    name: str | None
    birthday: str | None = None
    isBirthday: bool = False

class ProfileOut(BaseModel):
    name: str | None
    email: str

class MemberUpdate(BaseModel):
    """
    프로필 부분 수정 요청.

    값이 없거나 빈 문자열인 필드는 수정 대상에서 빠진다.
    """
    name: str | None = None
    email: EmailStr | None = None
    birth_date: date | None = None

    @field_validator("name", "email", "birth_date", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if v == "":
            return None
        return v

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)

class ApiResponse(BaseModel):
    success: bool = True
    message: str
    data: Any = None

class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    status: int
