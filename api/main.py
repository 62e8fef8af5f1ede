import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth import router as auth_router
from blogs import router as blogs_router
from core import db, errors, log
from users import router as users_router

log.configure_logging()

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip() or DEFAULT_CORS_ORIGINS
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One connection pool per process, handed to routes through get_db.
    app.state.db = await db.connect()
    try:
        await db.ensure_schema(app.state.db)
        yield
    finally:
        await app.state.db.close()
        app.state.db = None


app = FastAPI(lifespan=lifespan)

# Allow the local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log.log_requests)
errors.register_exception_handlers(app)

app.include_router(blogs_router.router, prefix="/api", tags=["blogs"])
app.include_router(users_router.router, prefix="/api", tags=["users"])
app.include_router(auth_router.router, prefix="/api", tags=["auth"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "bloglist api"}


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 3003))
    uvicorn.run(app, host="0.0.0.0", port=port)
