"""Interface identifiers and the abstract interfaces that components expose."""

from __future__ import annotations

import abc
import uuid
from typing import ClassVar

IID_IUNKNOWN = uuid.UUID("00000000-0000-0000-c000-000000000046")
IID_IX = uuid.UUID("32bb8320-b41b-11cf-a6bb-0080c7b2d682")
IID_IY = uuid.UUID("32bb8321-b41b-11cf-a6bb-0080c7b2d682")
IID_IZ = uuid.UUID("32bb8322-b41b-11cf-a6bb-0080c7b2d682")


class NoInterfaceError(LookupError):
    """Raised when a component does not support the requested interface."""

    def __init__(self, iid: uuid.UUID) -> None:
        super().__init__(f"interface not supported: {iid}")
        self.iid = iid


class IUnknown(abc.ABC):
    """Base interface: interface discovery and reference counting."""

    iid: ClassVar[uuid.UUID] = IID_IUNKNOWN

    @abc.abstractmethod
    def query_interface(self, iid: uuid.UUID) -> IUnknown:
        """Return the object viewed through interface ``iid`` and add a reference."""

    @abc.abstractmethod
    def add_ref(self) -> int:
        """Add a reference and return the new count."""

    @abc.abstractmethod
    def release(self) -> int:
        """Drop a reference and return the remaining count."""


class IX(IUnknown):
    """Interface IX."""

    iid: ClassVar[uuid.UUID] = IID_IX

    @abc.abstractmethod
    def fx(self) -> None:
        """Perform the IX operation."""


class IY(IUnknown):
    """Interface IY."""

    iid: ClassVar[uuid.UUID] = IID_IY

    @abc.abstractmethod
    def fy(self) -> None:
        """Perform the IY operation."""


class IZ(IUnknown):
    """Interface IZ."""

    iid: ClassVar[uuid.UUID] = IID_IZ

    @abc.abstractmethod
    def fz(self) -> None:
        """Perform the IZ operation."""