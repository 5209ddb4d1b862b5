"""
Newsletter subscription upsert.

Each email has at most one row, in one of two states once it exists:

* absent   -> active: a row is inserted with ``subscribed_at = now``.
* active   -> active: nothing is written; the stored row comes back as is.
* inactive -> active: ``is_active`` is set and ``subscribed_at`` refreshed,
  keeping the row id.

On PostgreSQL and SQLite the three cases collapse into one
``INSERT ... ON CONFLICT (email) DO UPDATE ... WHERE is_active = false``
statement, so two concurrent first-time subscribers cannot race each other
into a unique-constraint failure.  Other dialects use lookup-then-write;
there the loser of such a race gets the ``IntegrityError``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio_api.models.newsletter_subscription import NewsletterSubscription

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def get_subscription_by_email(db: Session, email: str) -> Optional[NewsletterSubscription]:
    stmt = select(NewsletterSubscription).where(NewsletterSubscription.email == email)
    return db.execute(stmt).scalar_one_or_none()


def get_subscription_by_id(db: Session, subscription_id: int) -> Optional[NewsletterSubscription]:
    stmt = select(NewsletterSubscription).where(NewsletterSubscription.id == subscription_id)
    return db.execute(stmt).scalar_one_or_none()


def _atomic_subscribe(db: Session, insert, *, email: str, now: datetime) -> None:
    stmt = insert(NewsletterSubscription).values(email=email, is_active=True, subscribed_at=now)
    stmt = stmt.on_conflict_do_update(
        index_elements=["email"],
        set_={"is_active": True, "subscribed_at": now},
        # Leaves an already active row (and its timestamp) untouched.
        where=NewsletterSubscription.is_active.is_(False),
    )
    db.execute(stmt)


def _lookup_then_subscribe(db: Session, *, email: str, now: datetime) -> None:
    existing = get_subscription_by_email(db, email)
    if existing is None:
        db.add(NewsletterSubscription(email=email, is_active=True, subscribed_at=now))
    elif not existing.is_active:
        existing.is_active = True
        existing.subscribed_at = now


def subscribe(db: Session, *, email: str) -> NewsletterSubscription:
    now = datetime.now(timezone.utc)
    insert = _UPSERT_INSERTS.get(db.get_bind().dialect.name)
    try:
        if insert is not None:
            _atomic_subscribe(db, insert, email=email, now=now)
        else:
            _lookup_then_subscribe(db, email=email, now=now)
        db.commit()
    except SQLAlchemyError:
        logger.exception("Newsletter subscription failed")
        db.rollback()
        raise

    # NoResultFound here means the row was deleted out of band after the write
    stmt = select(NewsletterSubscription).where(NewsletterSubscription.email == email)
    subscription = db.execute(stmt).scalar_one()
    logger.info("Newsletter subscription %s is active", subscription.id)
    return subscription


def deactivate_subscription(db: Session, *, subscription_id: int) -> Optional[NewsletterSubscription]:
    """Mark a subscription inactive.

    Administrative operation; the public API never unsubscribes anyone.
    Returns ``None`` when no row has the given id.
    """
    subscription = get_subscription_by_id(db, subscription_id)
    if subscription is None:
        return None
    subscription.is_active = False
    db.commit()
    db.refresh(subscription)
    return subscription
