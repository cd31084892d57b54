"""Base classes shared by all Aeroweb contracts.

Conventions:
- Every leaf that the provider may leave empty is ``str | None``; the
  sentinel spellings (``""``, ``NIL``, ``NODATA``) never reach a record.
- Link fields are absolute URLs on the provider host.
- Dates are kept as the provider's raw strings (``20240715124000``,
  ``15 07 2024 15:00``): their format differs per product.
- Repeated groups are lists, empty when the provider sent none.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class AerowebModel(BaseModel):
    """Immutable record, compared by value."""

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict (enums as wire strings)."""
        return self.model_dump(mode="json")
