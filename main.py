import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from starlette.middleware.cors import CORSMiddleware

from services.assistant.api.chat_router import router as chat_router
from services.questionnaire.api.question_router import router as question_router
from services.user_management.api.super_admin_router import router as superadmin_router
from services.user_management.api.user_router import router as user_router
from services.user_management.identity import LocalIdentityProvider
from shared.config import settings
from shared.db import SessionLocal, init_models
from shared.errors import register_exception_handlers

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("screening_api")


async def ensure_hidden_super_admin_account():
    email = settings.hidden_super_admin_email
    password = settings.hidden_super_admin_password
    if not email or not password:
        return
    async with SessionLocal() as db:
        await LocalIdentityProvider(db).ensure_user(email, password, "System Administrator")


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    await ensure_hidden_super_admin_account()
    yield


app = FastAPI(title="Neurodiversity Screening Backend", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    expose_headers=["Content-Length"],
    max_age=600,
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s %s %.1fms", request.method, request.url.path, status_code, elapsed_ms)


@app.get(f"{settings.api_prefix}/health")
def health_check():
    return {"status": "ok"}


app.include_router(superadmin_router, prefix=settings.api_prefix)
app.include_router(user_router, prefix=settings.api_prefix)
app.include_router(question_router, prefix=settings.api_prefix)
app.include_router(chat_router, prefix=settings.api_prefix)


def run():
    uvicorn.run("main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
