from typing import Optional

from pydantic import BaseModel, ConfigDict


class Collection(BaseModel):
    """A collection as returned by the server; unknown fields are dropped."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return self.id is not None and self.name is not None
