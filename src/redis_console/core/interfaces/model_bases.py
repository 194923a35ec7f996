"""Nominal marker base class for pydantic models.

Use ``DomainModel`` for configuration, domain and API models so they share
one repr and one place to hang common behaviour.
"""

from __future__ import annotations

from pydantic import BaseModel


class DomainModel(BaseModel):
    """Nominal marker for Pydantic-based domain and API models."""

    def __repr__(self) -> str:
        """Provide a concise, one-line summary of the object."""
        class_name = self.__class__.__name__

        # Common identifiers are 'key', 'name' or 'host'
        repr_attrs = ("key", "name", "host")
        for attr in repr_attrs:
            if hasattr(self, attr):
                attr_value = getattr(self, attr)
                if attr_value is not None:
                    return f'<{class_name} {attr}="{attr_value}">'

        return f"<{class_name}>"
