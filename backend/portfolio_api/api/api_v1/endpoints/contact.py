from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portfolio_api.crud.contact_submission import create_contact_submission
from portfolio_api.db.session import get_db
from portfolio_api.schemas.contact import ContactSubmissionCreate, ContactSubmissionOut

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("/", response_model=ContactSubmissionOut, status_code=status.HTTP_201_CREATED)
def submit_contact(
    submission_in: ContactSubmissionCreate,
    db: Session = Depends(get_db),
) -> ContactSubmissionOut:
    return create_contact_submission(
        db,
        name=submission_in.name,
        email=submission_in.email,
        message=submission_in.message,
    )
