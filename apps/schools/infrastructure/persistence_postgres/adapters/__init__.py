"""SQLAlchemy adapters."""

from schools.infrastructure.persistence_postgres.adapters.school_gateway_sqla import (
    SqlaSchoolCommandGateway,
)
from schools.infrastructure.persistence_postgres.adapters.school_reader_sqla import (
    SqlaSchoolReader,
)
from schools.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = ["SqlaSchoolCommandGateway", "SqlaSchoolReader", "SqlaTransactionManager"]
