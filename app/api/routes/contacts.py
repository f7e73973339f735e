"""Contacts — contact-form submission and listing.

Invariants:
    - Submissions are validated by ContactCreate before any DB access
    - Contacts are insert-only; no update or delete routes exist

Design Decisions:
    - GET /contacts is unauthenticated, same as the site it replaces; put it
      behind the deployment's reverse proxy if the listing must stay private
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import insert, select

from app.infrastructure.database import DatabaseSessionManager, get_db_manager
from app.models.contact import Contact
from app.schemas.contact import ContactCreate, ContactReceipt, ContactResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["contacts"])


@router.post(
    "/contact", response_model=ContactReceipt,
    status_code=status.HTTP_201_CREATED,
)
async def submit_contact(
    body: ContactCreate,
    manager: DatabaseSessionManager = Depends(get_db_manager),
):
    async with manager.session() as db:
        result = await db.execute(
            insert(Contact).values(
                name=body.name, email=body.email, message=body.message,
            ).returning(Contact.id),
        )
        contact_id = result.scalar_one()
    logger.info("Contact form submitted", extra={"contact_id": contact_id})
    return ContactReceipt(id=contact_id)


@router.get("/contacts", response_model=list[ContactResponse])
async def list_contacts(
    manager: DatabaseSessionManager = Depends(get_db_manager),
):
    """All submissions, newest first."""
    async with manager.session() as db:
        result = await db.execute(
            select(Contact).order_by(
                Contact.created_at.desc(), Contact.id.desc(),
            ),
        )
        return [ContactResponse.model_validate(c) for c in result.scalars()]
