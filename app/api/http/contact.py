from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.deps import get_contact_service
from app.domains.contact.schemas import ContactMessage, ContactResponse
from app.domains.contact.services import ContactService

router = APIRouter(prefix="/api/contact", tags=["contact"])

SUCCESS_MESSAGE = "Your message has been sent successfully!"
FAILURE_MESSAGE = "An error occurred. Please try again later."


@router.post("", response_model=ContactResponse)
async def send_contact_message(
    message: ContactMessage,
    contact_service: ContactService = Depends(get_contact_service)
):
    """Пересылка сообщения из формы обратной связи"""
    delivered = await contact_service.submit(message)

    if not delivered:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": FAILURE_MESSAGE}
        )

    return ContactResponse(message=SUCCESS_MESSAGE)
