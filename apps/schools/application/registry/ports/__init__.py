"""Registry Ports."""

from schools.application.registry.ports.school_gateway import SchoolCommandGateway

__all__ = ["SchoolCommandGateway"]
