# kakao_auth/main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .db import engine, Base
from .errors import ServiceError
from .logger import get_logger
from .schemas import ErrorResponse

# ✅ routers
from .routes_auth import router as auth_router
from .routes_profile import router as profile_router

logger = get_logger(__name__)

app = FastAPI(title="Kakao Login + Member Profile")

# ✅ include routers
app.include_router(auth_router)
app.include_router(profile_router)

def _error(message: str, status_code: int) -> JSONResponse:
    body = ErrorResponse(message=message, status=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump())

@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return _error(exc.message, exc.status_code)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("invalid request body on %s %s: %s", request.method, request.url.path, exc.errors())
    return _error("Invalid request body", 400)

@app.on_event("startup")
async def startup():
    # (운영은 Alembic 권장)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

@app.on_event("shutdown")
async def shutdown():
    await engine.dispose()

@app.get("/health")
def health():
    return {"ok": True}

@app.middleware("http")
async def log_unhandled_errors(request: Request, call_next):
    try:
        response = await call_next(request)
        return response
    except Exception:
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        raise
