"""
Projects Package

Project records, their YAML storage, and the get-or-create workflow.
"""

from .datastore import ProjectStore, create_project, get_or_create_project
from .models import Project

__all__ = ["Project", "ProjectStore", "create_project", "get_or_create_project"]
