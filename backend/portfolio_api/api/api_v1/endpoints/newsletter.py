from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portfolio_api.crud.newsletter_subscription import subscribe
from portfolio_api.db.session import get_db
from portfolio_api.schemas.newsletter import NewsletterSubscriptionCreate, NewsletterSubscriptionOut

router = APIRouter(prefix="/newsletter", tags=["newsletter"])


@router.post("/", response_model=NewsletterSubscriptionOut)
def subscribe_newsletter(
    subscription_in: NewsletterSubscriptionCreate,
    db: Session = Depends(get_db),
) -> NewsletterSubscriptionOut:
    return subscribe(db, email=subscription_in.email)
