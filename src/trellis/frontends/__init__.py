"""Frontend generator registry -- maps framework names to generator classes."""

from __future__ import annotations

from trellis.errors import UnrecognizedEnumError
from trellis.frontends.angular import AngularGenerator
from trellis.frontends.base import BaseFrontendGenerator
from trellis.frontends.react import ReactGenerator
from trellis.frontends.vue import VueGenerator
from trellis.scaffold.rendering import TemplateRenderer

FRONTEND_REGISTRY: dict[str, type[BaseFrontendGenerator]] = {
    "react": ReactGenerator,
    "vue": VueGenerator,
    "angular": AngularGenerator,
}


def get_frontend_generator(
    framework: str,
    renderer: TemplateRenderer | None = None,
) -> BaseFrontendGenerator:
    """Look up and instantiate the generator for *framework*.

    Raises:
        UnrecognizedEnumError: If *framework* is not in the registry.
    """
    cls = FRONTEND_REGISTRY.get(framework.strip().lower())
    if cls is None:
        raise UnrecognizedEnumError("frontend framework", framework, FRONTEND_REGISTRY)
    return cls(renderer)
