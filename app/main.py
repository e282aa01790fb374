import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exception_handlers import http_exception_handler
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.http.health import router as health_router
from app.api.http.posts import router as posts_router
from app.api.http.contact import router as contact_router
from app.api.http.pages import router as pages_router, render_not_found
from app.core.config import BASE_DIR, settings
from app.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.site_title,
    description="Personal blog rendered from markdown posts",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

# Подключаем роутеры
app.include_router(health_router)
app.include_router(posts_router)
app.include_router(contact_router)
app.include_router(pages_router)


@app.exception_handler(StarletteHTTPException)
async def not_found_page(request: Request, exc: StarletteHTTPException):
    """HTML-страница 404 для браузера, JSON для API"""
    if exc.status_code == 404 and not request.url.path.startswith("/api"):
        return render_not_found(request)
    return await http_exception_handler(request, exc)


logger.info(f"{settings.site_title} started, serving posts from {settings.content_dir}")
