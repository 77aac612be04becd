#!/usr/bin/env python3
"""
Project DataStore and Creation Workflow

YAML storage for projects under `<data_dir>/projects/<name>.yaml`, plus the
interactive get-or-create flow, which in turn gets or creates the client.
"""

import logging

import click

from ..clients.datastore import get_or_create_client
from ..core.config import DataPaths
from ..core.exceptions import IdError
from ..core.ids import Id
from ..core.prompts import print_header, prompt_name, prompt_required, review_until_valid
from ..core.storage import IdCodec, YamlRepository
from .models import Project

logger = logging.getLogger(__name__)


class ProjectStore(YamlRepository[Id, Project]):
    """DataStore for project records."""

    def __init__(self, paths: DataPaths):
        super().__init__(
            directory=lambda: paths.projects_dir,
            kind="project",
            codec=IdCodec(),
            to_dict=Project.to_dict,
            from_dict=Project.from_dict,
            key_of=lambda project: project.name,
        )


def create_project(paths: DataPaths, name: Id) -> Project:
    """Prompt for a new project's description and client, then review the YAML."""
    print_header(f"Create project {name}")

    description = prompt_required("Project description")
    client_ref = get_or_create_client(paths)

    project = Project(name=name, description=description, client_ref=client_ref)
    return review_until_valid(project, Project.from_dict)


def prompt_project_name(store: ProjectStore) -> Id:
    """Ask for a project name, completing from existing projects."""
    candidates = [str(name) for name in store.list()]
    while True:
        try:
            return Id(prompt_name("Project name", candidates))
        except IdError as e:
            click.echo(f"  ❌ {e}")


def get_or_create_project(paths: DataPaths, name: Id | None = None) -> Id:
    """
    Return an existing project's name, creating the project first if needed.

    Args:
        paths: Data directory layout
        name: Project name; prompted for (with autocompletion) when None

    Returns:
        Name of the existing or newly saved project
    """
    store = ProjectStore(paths)
    if name is None:
        name = prompt_project_name(store)

    if name in store.list():
        logger.debug(f"Using existing project {name}")
        return name

    project = create_project(paths, name)
    store.save(project)
    click.echo(f"Saved project {project.name}")
    return project.name
