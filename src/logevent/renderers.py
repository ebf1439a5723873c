"""
logevent.renderers

Object rendering for non-string log messages.

Responsibilities:
- Map payload types to renderer callables.
- Render any payload to text, falling back to a default renderer.
"""

from __future__ import annotations

import pprint
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

RenderFn = Callable[[Any], str]


@runtime_checkable
class Renderer(Protocol):
    def find_and_render(self, obj: Any) -> str: ...


def default_render(obj: Any) -> str:
    # Containers get a readable multi-line dump; everything else its str().
    if isinstance(obj, (dict, list, tuple, set, frozenset)):
        return pprint.pformat(obj)
    return str(obj)


class RendererMap:
    """
    Type -> renderer registry.

    Lookup walks the payload type's MRO, so a renderer registered for a base class
    also serves its subclasses. Renderer exceptions propagate to the caller.
    """

    def __init__(self, *, default: RenderFn = default_render) -> None:
        self._renderers: dict[type, RenderFn] = {}
        self._default = default

    def add_renderer(self, rendered_type: type, renderer: RenderFn) -> None:
        self._renderers[rendered_type] = renderer

    def get_by_class(self, cls: type) -> RenderFn | None:
        for klass in cls.__mro__:
            renderer = self._renderers.get(klass)
            if renderer is not None:
                return renderer
        return None

    def find_and_render(self, obj: Any) -> str:
        renderer = self.get_by_class(type(obj)) or self._default
        return renderer(obj)

    def clear(self) -> None:
        self._renderers.clear()


# --- Module Notes -----------------------------------------------------------
# Events call `find_and_render` at most once per payload and cache the result.
