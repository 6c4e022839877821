from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import DeclarativeBase
from .config import settings

# members 테이블 하나만 쓴다. 풀은 shutdown 훅에서 dispose
engine = create_async_engine(settings.DATABASE_URL, echo=False, future=True)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

class Base(DeclarativeBase):
    pass

async def get_db():
    # 요청마다 세션 하나. 로그인 흐름의 조회/삽입도 같은 세션에서 처리된다
    async with SessionLocal() as session:
        yield session
