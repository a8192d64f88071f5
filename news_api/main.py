import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from news_api.cache import cache
from news_api.config import settings
from news_api.errors import install_error_handlers
from news_api.logging_config import configure_logging
from news_api.middleware import TimingMiddleware
from news_api.routers import articles, comments, index, topics, users
from news_api.routing import check_route_table

configure_logging()
logger = logging.getLogger("news_api")

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: the cache disables itself if Redis is unreachable.
    await cache.connect()
    logger.info("News API started (env=%s, prefix=%s)", settings.APP_ENV, settings.API_PREFIX)
    yield
    # Shutdown
    await cache.disconnect()
    logger.info("News API stopped")

app = FastAPI(
    title="NC News API",
    description="Topics, articles, comments and users with sortable listings and vote counters",
    version="1.0.0",
    lifespan=lifespan,
)

# Every failure is turned into {"msg": ...} here and nowhere else.
install_error_handlers(app)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(index.router)
app.include_router(topics.router)
app.include_router(articles.router)
app.include_router(comments.router)
app.include_router(users.router)

@app.get("/health")
async def health():
    return {"status": "healthy", "version": "1.0.0"}

check_route_table(app)
