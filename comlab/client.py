"""Clients that create a component and use the interfaces they know about."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from operator import methodcaller
from typing import Any

from comlab.create import ComponentLoadError, call_create_instance
from comlab.interfaces import IID_IX, IID_IY, IID_IZ, NoInterfaceError

_PROMPT = "Enter the filename of a component to use [Cmpnt?.dll]: "

_INTERFACES: tuple[tuple[Any, str, Callable[[Any], None]], ...] = (
    (IID_IX, "IX", methodcaller("fx")),
    (IID_IY, "IY", methodcaller("fy")),
    (IID_IZ, "IZ", methodcaller("fz")),
)


def run_client(client_number: int, name: str) -> int:
    """Run client 1, 2 or 3 against component ``name``; return the exit status.

    Client N uses the first N of the interfaces IX, IY and IZ.
    """
    if client_number not in (1, 2, 3):
        raise ValueError(f"client number must be 1, 2 or 3, not {client_number!r}")

    def trace(message: str) -> None:
        print(f"Client {client_number}:\t{message}")

    trace("Get an IUnknown pointer.")
    try:
        unknown = call_create_instance(name)
    except ComponentLoadError:
        trace("CallCreateInstance Failed.")
        return 1

    for iid, iface_name, use in _INTERFACES[:client_number]:
        trace(f"Get interface {iface_name}.")
        try:
            iface = unknown.query_interface(iid)
        except NoInterfaceError:
            trace(f"Could not get interface {iface_name}.")
            continue
        trace(f"Succeeded getting {iface_name}.")
        use(iface)
        iface.release()

    trace("Release IUnknown interface.")
    unknown.release()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="comlab", description="Create a component and use its interfaces."
    )
    parser.add_argument(
        "-c", "--client", type=int, choices=(1, 2, 3), default=1,
        help="which client to run (default: 1)",
    )
    parser.add_argument(
        "component", nargs="?",
        help="component library name, e.g. Cmpnt1.dll; asked for if omitted",
    )
    args = parser.parse_args(argv)

    name = args.component
    if name is None:
        try:
            tokens = input(_PROMPT).split()
        except EOFError:
            tokens = []
        name = tokens[0] if tokens else ""
        print()
    return run_client(args.client, name)