from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_contact_service, get_post_service
from app.core.config import Settings
from app.domains.contact.services import ContactService
from app.domains.posts.services import PostService
from app.infrastructure.mail.smtp import SMTPMailer
from app.main import app


@pytest.fixture
def mailer() -> MagicMock:
    return MagicMock(spec=SMTPMailer)


@pytest.fixture
def client(settings: Settings, mailer: MagicMock):
    app.dependency_overrides[get_post_service] = lambda: PostService(settings)
    app.dependency_overrides[get_contact_service] = lambda: ContactService(settings, mailer=mailer)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
