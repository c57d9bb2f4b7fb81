import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from comments import router as comments_router
from core import db, responses
from recommendations import router as recommendations_router
from stages import router as stages_router
from study_list import router as study_list_router
from tags import router as tags_router
from users import router as users_router


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_: Request, exc: RequestValidationError):
    return responses.invalid_input(exc)


app.include_router(recommendations_router.router, tags=["recommendations"])
app.include_router(users_router.router, tags=["users"])
app.include_router(comments_router.router, tags=["comments"])
app.include_router(tags_router.router, tags=["tags"])
app.include_router(stages_router.router, tags=["stages"])
app.include_router(study_list_router.router, tags=["study_list"])
app.include_router(comments_router.scoped_router, tags=["comments"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "study recommendations api"}


if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", "").strip() or 4000)
    log_level = os.environ.get("LOG_LEVEL", "info").strip().lower() or "info"
    uvicorn.run(app, host="0.0.0.0", port=port, log_level=log_level)
