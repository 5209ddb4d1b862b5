"""Load the sample portfolio projects: ``python -m portfolio_api.db.seed``.

Projects have no write endpoint, so this is how a fresh database gets
content.  Nothing is inserted when the table already holds projects.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from portfolio_api.core.config import settings
from portfolio_api.core.logging_config import setup_logging
from portfolio_api.crud.portfolio_project import count_projects, create_project
from portfolio_api.db.base import Base
from portfolio_api.db.session import SessionLocal, engine

import portfolio_api.models  # noqa: F401

logger = logging.getLogger(__name__)


SAMPLE_PROJECTS = [
    {
        "title": "Nanny Black Book",
        "description": (
            "A comprehensive platform connecting families with trusted childcare providers. "
            "Features real-time scheduling, background checks, and community reviews."
        ),
        "project_url": "https://nannyblackbook.com",
        "technologies": ["React", "Node.js", "PostgreSQL", "Stripe"],
        "is_featured": True,
    },
    {
        "title": "Tech Founder Hub",
        "description": (
            "A SaaS platform for early-stage founders to track metrics, manage investor "
            "relations, and collaborate with their teams."
        ),
        "github_url": "https://github.com/jasmine/tech-founder-hub",
        "technologies": ["Next.js", "TypeScript", "Prisma", "Tailwind"],
        "is_featured": True,
    },
    {
        "title": "Digital Product Suite",
        "description": (
            "A collection of micro-tools and digital products designed to solve everyday "
            "problems for busy professionals."
        ),
        "technologies": ["React Native", "Firebase", "Figma", "Framer"],
        "is_featured": False,
    },
]


def seed_projects(db: Session) -> int:
    if count_projects(db) > 0:
        return 0

    for project in SAMPLE_PROJECTS:
        create_project(db, **project)

    return len(SAMPLE_PROJECTS)


def main() -> None:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        inserted = seed_projects(db)
    finally:
        db.close()
    logger.info("Seeded %d portfolio projects", inserted)


if __name__ == "__main__":
    main()
