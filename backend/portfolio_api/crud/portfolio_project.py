from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio_api.models.portfolio_project import PortfolioProject

logger = logging.getLogger(__name__)


def _newest_first(stmt: Select) -> Select:
    return stmt.order_by(PortfolioProject.created_at.desc())


def _fetch(db: Session, stmt: Select, *, what: str) -> list[PortfolioProject]:
    try:
        return list(db.execute(stmt).scalars().all())
    except SQLAlchemyError:
        logger.exception("Failed to fetch %s", what)
        db.rollback()
        raise


def list_projects(db: Session) -> list[PortfolioProject]:
    return _fetch(db, _newest_first(select(PortfolioProject)), what="portfolio projects")


def list_featured_projects(db: Session) -> list[PortfolioProject]:
    stmt = _newest_first(select(PortfolioProject).where(PortfolioProject.is_featured.is_(True)))
    return _fetch(db, stmt, what="featured projects")


def count_projects(db: Session) -> int:
    return db.execute(select(func.count()).select_from(PortfolioProject)).scalar_one()


def create_project(
    db: Session,
    *,
    title: str,
    description: str,
    image_url: Optional[str] = None,
    project_url: Optional[str] = None,
    github_url: Optional[str] = None,
    technologies: Sequence[str] = (),
    is_featured: bool = False,
    created_at: Optional[datetime] = None,
) -> PortfolioProject:
    """Insert a project row.

    Not reachable over HTTP; projects are loaded out of band (see
    ``portfolio_api.db.seed``).  ``created_at`` may be given to control
    listing order, otherwise the column default applies.
    """
    project = PortfolioProject(
        title=title,
        description=description,
        image_url=image_url,
        project_url=project_url,
        github_url=github_url,
        technologies=list(technologies),
        is_featured=is_featured,
    )
    if created_at is not None:
        project.created_at = created_at
        project.updated_at = created_at
    db.add(project)
    db.commit()
    db.refresh(project)
    return project
