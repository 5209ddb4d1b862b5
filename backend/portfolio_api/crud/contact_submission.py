from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio_api.models.contact_submission import ContactSubmission

logger = logging.getLogger(__name__)


def create_contact_submission(
    db: Session,
    *,
    name: str,
    email: str,
    message: str,
) -> ContactSubmission:
    submission = ContactSubmission(name=name, email=email, message=message)
    try:
        db.add(submission)
        db.commit()
    except SQLAlchemyError:
        logger.exception("Contact submission creation failed")
        db.rollback()
        raise
    db.refresh(submission)
    logger.info("Contact submission %s stored", submission.id)
    return submission
