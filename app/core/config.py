from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    site_title: str = "IrbazBlog"
    site_author: str = "Irbaz"
    content_dir: Path = BASE_DIR / "content"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Подсветка кода
    pygments_style: str = "monokai"

    # Почта для формы обратной связи
    email_user: str = ""
    email_pass: str = ""
    email_to: Optional[str] = None
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_use_ssl: bool = False
    smtp_timeout: float = 10.0

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
