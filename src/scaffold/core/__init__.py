"""Scaffold core library package.

- ``utils.keypath``: dot-notation get/set over nested mappings
- ``paths``: search root construction
- ``resources``: file lookup and multi-root listing
- ``config``: group-per-file configuration store
- ``views``: Jinja2 view rendering
- ``context``: the object owning all of the above
"""

from . import exceptions  # noqa: F401

__all__ = ["exceptions"]
