from app.core.config import settings
from app.domains.contact.services import ContactService
from app.domains.posts.services import PostService


def get_post_service() -> PostService:
    """Зависимость FastAPI: сервис постов"""
    return PostService(settings)


def get_contact_service() -> ContactService:
    """Зависимость FastAPI: сервис обратной связи"""
    return ContactService(settings)
