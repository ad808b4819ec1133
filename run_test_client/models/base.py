"""Base model shared by service settings and server responses."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model that accepts both field names and wire aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)
