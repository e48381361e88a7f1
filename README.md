# comlab

A small component object model. Components expose interfaces that are
identified by interface IDs (`uuid.UUID` values), hand them out through
`query_interface`, and keep track of their own lifetime with `add_ref`
and `release`.

## Modules

- `comlab.interfaces`: the abstract interfaces `IUnknown`, `IX`, `IY`
  and `IZ`, their IDs `IID_IUNKNOWN`, `IID_IX`, `IID_IY` and `IID_IZ`,
  and `NoInterfaceError` (a `LookupError`), raised when a component does
  not support the requested interface.
- `comlab.components`: the base class `Component` and three components.
  `Component1` supports `IX`, `Component2` supports `IX` and `IY`, and
  `Component3` supports `IX`, `IY` and `IZ`. Every component also answers
  to `IID_IUNKNOWN`. The creation functions `create_component1`,
  `create_component2` and `create_component3` return a new component
  already holding one reference.
- `comlab.create`: `call_create_instance(name)`, which creates a
  component from the name of the library that provides it, and
  `ComponentLoadError`, raised when no component goes by that name.
- `comlab.client`: `run_client(client_number, name)`, the three clients,
  and `main`, the command-line entry point.

## Using the components

```python
from comlab.components import create_component2
from comlab.interfaces import IID_IX, IID_IZ, NoInterfaceError

component = create_component2()          # holds one reference
ix = component.query_interface(IID_IX)   # adds a reference
ix.fx()                                  # prints "Fx from Component 2"
ix.release()

try:
    component.query_interface(IID_IZ)
except NoInterfaceError:
    print("IZ is not supported")

component.release()   # last reference: prints "Component 2:\tDestroy self."
```

Each component traces what it does on standard output (or on the stream
passed to its constructor): `query_interface` reports which interface it
returns or that the interface is not supported, and the release of the
last reference reports `Destroy self.`. The interface functions `fx`,
`fy` and `fz` write their line and also return it.

A successful `query_interface` adds a reference and returns the
component itself, so each interface obtained must be released, just like
the reference returned by a creation function. `add_ref` and `release`
return the new reference count, and `ref_count` and `destroyed` show the
component's state. Using a component after its last reference has been
released, or releasing more often than references were added, raises
`RuntimeError`.

## Creating a component by name

`call_create_instance` accepts `Cmpnt1.dll`, `Cmpnt2.dll` and
`Cmpnt3.dll`. The name is matched without regard to case, the `.dll`
suffix is optional, and any leading directory is ignored. For any other
name it prints `CallCreateInstance:\tError: Cannot load component.` and
raises `ComponentLoadError`.

## The client command

```
comlab-client [-c {1,2,3}] [component]
```

`-c`/`--client` chooses the client (default 1): client 1 uses `IX`,
client 2 uses `IX` and `IY`, client 3 uses `IX`, `IY` and `IZ`. If no
component name is given, the command asks for one. The client creates
the component, queries each interface it knows, calls the function of
each one supported, reports those that are not, and releases everything
it obtained, tracing every step. If the component cannot be created, it
reports the failure and exits with status 1.

The same run is available from Python as
`comlab.client.run_client(client_number, name)`, which returns the exit
status and raises `ValueError` for a client number other than 1, 2 or 3.

## What it does not do

No shared libraries are loaded. The three components are part of the
package, and the library names above only select among them; new
components cannot be added by dropping a library file next to the
program.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```