from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portfolio_api.crud.portfolio_project import list_featured_projects, list_projects
from portfolio_api.db.session import get_db
from portfolio_api.schemas.project import PortfolioProjectOut

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("/", response_model=list[PortfolioProjectOut])
def read_projects(db: Session = Depends(get_db)) -> list[PortfolioProjectOut]:
    return list_projects(db)


@router.get("/featured", response_model=list[PortfolioProjectOut])
def read_featured_projects(db: Session = Depends(get_db)) -> list[PortfolioProjectOut]:
    return list_featured_projects(db)
