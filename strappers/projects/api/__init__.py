from strappers.projects.api.projects import ProjectController

__all__ = [
    "ProjectController",
]
