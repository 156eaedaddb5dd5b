from pydantic import ConfigDict, Field

from core.schema_base import CamelModel, PatchModel

class UserSchema(CamelModel):
    id: int
    username: str
    password: str
    model_config = ConfigDict(from_attributes=True)

class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)
    model_config = ConfigDict(extra="forbid")

class UserUpdate(PatchModel):
    non_nullable = frozenset({"username", "password"})

    username: str | None = Field(None, min_length=1, max_length=64)
    password: str | None = Field(None, min_length=1)
