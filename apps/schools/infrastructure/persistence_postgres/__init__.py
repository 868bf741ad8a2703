"""PostgreSQL Infrastructure."""

from schools.infrastructure.persistence_postgres.adapters import (
    SqlaSchoolCommandGateway,
    SqlaSchoolReader,
    SqlaTransactionManager,
)
from schools.infrastructure.persistence_postgres.models import Base, SchoolModel

__all__ = [
    "Base",
    "SchoolModel",
    "SqlaSchoolCommandGateway",
    "SqlaSchoolReader",
    "SqlaTransactionManager",
]
