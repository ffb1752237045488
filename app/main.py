# /app/main.py
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

# --- Core / Config ---
from app.core.config import settings
from app.db.base import Base
from app.db.session import engine

# --- API Routers ---
from app.api.routes import dashboard as dashboard_router
from app.api.routes import students as students_router
from app.api.routes import tablets as tablets_router
from app.api.routes import activities as activities_router
from app.api.routes import alerts as alerts_router
from app.api.routes import blocked_sites as blocked_sites_router
from app.api.routes import reports as reports_router
from app.api.routes import emergency as emergency_router
from app.api.routes import security_policies as security_policies_router
from app.api.routes import users as users_router


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    force=True # 다른 라이브러리에 의해 이미 설정되었더라도 강제로 재설정
)


# --- Lifespan (애플리케이션 시작/종료 이벤트) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logging.info("Database tables ready")

    yield

    engine.dispose()

# --- FastAPI App Instance ---
app = FastAPI(
    title="Classroom Tablet Monitor API",
    lifespan=lifespan
)

@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    logging.info(
        f"Request processed: {request.method} {request.url.path} - {response.status_code} in {process_time:.4f} secs"
    )

    return response


# --- 예외 처리 ---
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # 요청 형식 오류는 422 대신 400 으로 응답
    logging.warning(f"Invalid request on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": "Invalid request data"})


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logging.exception(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# --- CORS 미들웨어 설정 ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- 라우트 등록 ---
app.include_router(
    dashboard_router.router,
    prefix="/api/dashboard",
    tags=["dashboard"]
)

app.include_router(
    students_router.router,
    prefix="/api/students",
    tags=["students"]
)

app.include_router(
    tablets_router.router,
    prefix="/api/tablets",
    tags=["tablets"]
)

app.include_router(
    activities_router.router,
    prefix="/api/activities",
    tags=["activities"]
)

app.include_router(
    alerts_router.router,
    prefix="/api/alerts",
    tags=["alerts"]
)

app.include_router(
    blocked_sites_router.router,
    prefix="/api/blocked-sites",
    tags=["blocked-sites"]
)

app.include_router(
    reports_router.router,
    prefix="/api/reports",
    tags=["reports"]
)

app.include_router(
    emergency_router.router,
    prefix="/api/emergency",
    tags=["emergency"]
)

app.include_router(
    security_policies_router.router,
    prefix="/api/security-policies",
    tags=["security-policies"]
)

app.include_router(
    users_router.router,
    prefix="/api/users",
    tags=["users"]
)
