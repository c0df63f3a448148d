"""
Core Models Module

Database engine configuration. Domain models live in their own modules and are
imported here so they are registered with SQLModel metadata.
"""

from sqlalchemy import create_engine

from .category_models import *
from CategoryTree.utils.config import get_settings

settings = get_settings()
database_url = settings.database_url

connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}

engine = create_engine(
    database_url,
    echo=settings.sql_echo,
    pool_pre_ping=True,
    connect_args=connect_args,
)
