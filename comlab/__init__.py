"""Reference-counted components, interface queries and the clients that use them."""

__version__ = "0.1.0"