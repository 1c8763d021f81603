"""layerforge scaffolder -- generates layered Go project structures.

This package renders Jinja2 templates into a Clean Architecture Go project
(entity / delivery / repository / usecase) with gorm persistence and
gorilla/mux routing.

Quick usage::

    from layerforge.scaffolder import ProjectGenerator

    generator = ProjectGenerator()
    result = await generator.generate("shop", "mysql", "/tmp/shop")
"""

from layerforge.scaffolder.component import ComponentGenerator
from layerforge.scaffolder.errors import (
    GenerationError,
    InvalidInputError,
    MaterializeError,
    ScaffoldError,
    TemplateError,
)
from layerforge.scaffolder.materializer import FileMaterializer
from layerforge.scaffolder.models import FileArtifact, ScaffoldResult
from layerforge.scaffolder.module import ModuleGenerator
from layerforge.scaffolder.naming import NameForm, derive_name
from layerforge.scaffolder.project import DatabaseKind, ProjectGenerator
from layerforge.scaffolder.registry import ComponentKind
from layerforge.scaffolder.request import GenerationRequest, RequestKind, execute
from layerforge.scaffolder.templates import TemplateRenderer

__all__ = [
    "ComponentGenerator",
    "ComponentKind",
    "DatabaseKind",
    "FileArtifact",
    "FileMaterializer",
    "GenerationError",
    "GenerationRequest",
    "InvalidInputError",
    "MaterializeError",
    "ModuleGenerator",
    "NameForm",
    "ProjectGenerator",
    "RequestKind",
    "ScaffoldError",
    "ScaffoldResult",
    "TemplateError",
    "TemplateRenderer",
    "derive_name",
    "execute",
]
