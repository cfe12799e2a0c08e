"""
Contact-us form
"""
import logging

from fastapi import APIRouter, Depends, status

from hanuram.dependencies import get_contact_store
from hanuram.schemas.contact import ContactRequest
from hanuram.schemas.common import MessageResponse
from hanuram.stores import ContactStore

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/contactus", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact(
    data: ContactRequest,
    contacts: ContactStore = Depends(get_contact_store),
):
    await contacts.add(
        name=data.name,
        email=str(data.email).lower(),
        phone=data.phone,
        address=data.address,
        contact_preference=data.contact_preference,
        requirement_type=data.requirement_type,
        details_checked=data.details_checked,
    )
    logger.info("Contact form entry saved")
    return MessageResponse(message="Your message has been sent successfully!")
