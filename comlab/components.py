"""Reference-counted components implementing IX, IY and IZ."""

from __future__ import annotations

import sys
import threading
import uuid
from typing import ClassVar, TextIO

from comlab.interfaces import IUnknown, IX, IY, IZ, NoInterfaceError


class Component(IUnknown):
    """A component that answers interface queries and counts its references."""

    label: ClassVar[str] = "Component"

    def __init__(self, stream: TextIO | None = None) -> None:
        self._ref_count = 0
        self._destroyed = False
        self._lock = threading.Lock()
        self._stream = stream

    @property
    def ref_count(self) -> int:
        """The current number of references."""
        return self._ref_count

    @property
    def destroyed(self) -> bool:
        """Whether the last reference has been released."""
        return self._destroyed

    def _emit(self, line: str) -> str:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{line}\n")
        stream.flush()
        return line

    def _trace(self, message: str) -> str:
        return self._emit(f"{self.label}:\t{message}")

    def _require_alive(self) -> None:
        if self._destroyed:
            raise RuntimeError(f"{self.label} has already been destroyed")

    def _call(self, text: str) -> str:
        self._require_alive()
        return self._emit(text)

    def _interface_for(self, iid: uuid.UUID) -> type[IUnknown] | None:
        for cls in type(self).__mro__:
            if issubclass(cls, IUnknown) and cls.__dict__.get("iid") == iid:
                return cls
        return None

    def query_interface(self, iid: uuid.UUID) -> Component:
        iface = self._interface_for(iid)
        if iface is None:
            self._trace("Interface not supported.")
            raise NoInterfaceError(iid)
        self._trace(f"Return pointer to {iface.__name__}.")
        self.add_ref()
        return self

    def add_ref(self) -> int:
        with self._lock:
            self._require_alive()
            self._ref_count += 1
            return self._ref_count

    def release(self) -> int:
        with self._lock:
            self._require_alive()
            if self._ref_count == 0:
                raise RuntimeError("release without a matching add_ref")
            self._ref_count -= 1
            remaining = self._ref_count
            if remaining == 0:
                self._destroyed = True
        if remaining == 0:
            self._trace("Destroy self.")
        return remaining


class Component1(Component, IX):
    """Component supporting IX."""

    label: ClassVar[str] = "Component 1"

    def fx(self) -> str:
        """Write and return the IX greeting."""
        return self._call("Fx")


class Component2(Component, IX, IY):
    """Component supporting IX and IY."""

    label: ClassVar[str] = "Component 2"

    def fx(self) -> str:
        """Write and return the IX greeting."""
        return self._call("Fx from Component 2")

    def fy(self) -> str:
        """Write and return the IY greeting."""
        return self._call("Fy from Component 2")


class Component3(Component, IX, IY, IZ):
    """Component supporting IX, IY and IZ."""

    label: ClassVar[str] = "Component 3"

    def fx(self) -> str:
        """Write and return the IX greeting."""
        return self._call("Fx from Component 3")

    def fy(self) -> str:
        """Write and return the IY greeting."""
        return self._call("Fy from Component 3")

    def fz(self) -> str:
        """Write and return the IZ greeting."""
        return self._call("Fz from Component 3")


def _create(cls: type[Component]) -> Component:
    component = cls()
    component.add_ref()
    return component


def create_component1() -> Component:
    """Create a Component1 holding one reference."""
    return _create(Component1)


def create_component2() -> Component:
    """Create a Component2 holding one reference."""
    return _create(Component2)


def create_component3() -> Component:
    """Create a Component3 holding one reference."""
    return _create(Component3)