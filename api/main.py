from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from articles import router as articles_router
from core import config, db
from core.error_handlers import register_error_handlers
from core.observability import setup_logging
from topics import router as topics_router
from users import router as users_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging(config.log_level())
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="news-api", lifespan=lifespan)

# Allow the local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(topics_router.router, tags=["topics"])
app.include_router(users_router.router, tags=["users"])
app.include_router(articles_router.router, tags=["articles"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
