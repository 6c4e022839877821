# kakao_auth/models.py
from datetime import date

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, Date

from .db import Base


class Member(Base):
    """
    카카오 로그인으로 생성되는 회원.

    email 중복은 로그인 시 조회 후 삽입으로만 막는다 (DB unique 제약 없음).
    같은 이메일로 동시에 첫 로그인하면 두 행이 생길 수 있다.
    """
    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
