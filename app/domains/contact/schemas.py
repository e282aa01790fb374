from pydantic import BaseModel, EmailStr, Field, field_validator


class ContactMessage(BaseModel):
    """Схема сообщения из формы обратной связи"""
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    message: str = Field(..., min_length=1, max_length=10000)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty')
        if len(v.splitlines()) > 1:
            raise ValueError('Name must be a single line')
        return v.strip()

    @field_validator('message')
    @classmethod
    def validate_message(cls, v):
        if not v.strip():
            raise ValueError('Message cannot be empty')
        return v.strip()


class ContactResponse(BaseModel):
    """Схема ответа на отправку сообщения"""
    message: str
