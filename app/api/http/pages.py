from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from app.api.deps import get_post_service
from app.core.config import BASE_DIR, settings
from app.domains.posts.markup import highlight_stylesheet
from app.domains.posts.services import PostService

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
templates.env.globals["site_title"] = settings.site_title
templates.env.globals["site_author"] = settings.site_author

LATEST_POSTS_ON_HOME = 3


def render_not_found(request: Request) -> HTMLResponse:
    """Страница 404"""
    return templates.TemplateResponse(
        request, "not_found.html", {}, status_code=status.HTTP_404_NOT_FOUND
    )


@router.get("/")
async def home(request: Request, post_service: PostService = Depends(get_post_service)):
    """Главная страница с последними постами"""
    posts = await post_service.list_posts()
    return templates.TemplateResponse(
        request, "home.html", {"posts": posts[:LATEST_POSTS_ON_HOME]}
    )


@router.get("/about")
async def about(request: Request):
    """Страница об авторе"""
    return templates.TemplateResponse(request, "about.html", {})


@router.get("/blog")
async def blog(request: Request, post_service: PostService = Depends(get_post_service)):
    """Список всех постов"""
    posts = await post_service.list_posts()
    return templates.TemplateResponse(request, "blog.html", {"posts": posts})


@router.get("/blogpost/{slug}")
async def blog_post(
    slug: str,
    request: Request,
    post_service: PostService = Depends(get_post_service)
):
    """Страница поста с оглавлением"""
    rendered = await post_service.render_post(slug)

    if not rendered:
        return render_not_found(request)

    return templates.TemplateResponse(request, "post.html", {
        "post": rendered.post,
        "content": rendered.html,
        "headings": rendered.headings,
    })


@router.get("/contact")
async def contact(request: Request):
    """Страница с формой обратной связи"""
    return templates.TemplateResponse(request, "contact.html", {})


@router.get("/assets/highlight.css", response_class=Response)
async def highlight_css():
    """Стили подсветки синтаксиса"""
    return Response(
        content=highlight_stylesheet(settings.pygments_style),
        media_type="text/css"
    )
