"""Common Ports."""

from schools.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
