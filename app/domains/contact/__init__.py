from app.domains.contact.schemas import ContactMessage, ContactResponse
from app.domains.contact.services import ContactService

__all__ = ["ContactMessage", "ContactResponse", "ContactService"]
