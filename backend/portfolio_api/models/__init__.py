from __future__ import annotations

from portfolio_api.models.contact_submission import ContactSubmission
from portfolio_api.models.newsletter_subscription import NewsletterSubscription
from portfolio_api.models.portfolio_project import PortfolioProject

__all__ = ["ContactSubmission", "NewsletterSubscription", "PortfolioProject"]
