from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, model_validator


class CursorState(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int = Field(..., ge=0)
    position: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_position(self) -> "CursorState":
        if self.length == 0:
            if self.position is not None:
                raise ValueError("empty table cannot have a position")
        elif self.position is None:
            raise ValueError(f"position required for length {self.length}")
        elif self.position >= self.length:
            raise ValueError(f"position {self.position} out of range for length {self.length}")
        return self

    @property
    def is_empty(self) -> bool:
        return self.length == 0
