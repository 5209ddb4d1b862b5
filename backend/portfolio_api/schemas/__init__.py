from __future__ import annotations

from portfolio_api.schemas.contact import ContactSubmissionCreate, ContactSubmissionOut
from portfolio_api.schemas.health import HealthOut
from portfolio_api.schemas.newsletter import NewsletterSubscriptionCreate, NewsletterSubscriptionOut
from portfolio_api.schemas.project import PortfolioProjectOut

__all__ = [
    "HealthOut",
    "ContactSubmissionCreate",
    "ContactSubmissionOut",
    "NewsletterSubscriptionCreate",
    "NewsletterSubscriptionOut",
    "PortfolioProjectOut",
]
