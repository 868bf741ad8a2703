"""Registry Commands."""

from schools.application.registry.commands.add_school import AddSchoolCommand

__all__ = ["AddSchoolCommand"]
