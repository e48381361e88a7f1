"""Creating components by the name of the library that provides them."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import PureWindowsPath

from comlab.components import (
    Component,
    create_component1,
    create_component2,
    create_component3,
)

_FACTORIES: dict[str, Callable[[], Component]] = {
    "cmpnt1": create_component1,
    "cmpnt2": create_component2,
    "cmpnt3": create_component3,
}


class ComponentLoadError(Exception):
    """Raised when no component can be loaded under the given name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"cannot load component: {name!r}")
        self.name = name


def _library_key(name: str) -> str:
    key = PureWindowsPath(name.strip()).name.lower()
    if key.endswith(".dll"):
        key = key[: -len(".dll")]
    return key


def call_create_instance(name: str) -> Component:
    """Create the component provided by library ``name`` (e.g. ``Cmpnt1.dll``)."""
    factory = _FACTORIES.get(_library_key(name))
    if factory is None:
        print("CallCreateInstance:\tError: Cannot load component.")
        raise ComponentLoadError(name)
    return factory()