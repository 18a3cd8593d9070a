"""Catalog domain exceptions.

Raised by the Service Layer when a request cannot be fulfilled.
The API layer (Views) catches these and translates them into
envelope responses; the exception message is the client-facing text.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """No product matches the requested id or name."""


class ProductAlreadyExists(Exception):
    """A product with the same name is already in the catalog (RN-CAT-002)."""


class ProductNotPersisted(Exception):
    """The store did not apply a replace or delete."""
