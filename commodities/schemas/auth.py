"""Schemas for roles, credentials and the signed-in session."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["Manager", "Store Keeper"]

ROLE_VALUES: frozenset[str] = frozenset({"Manager", "Store Keeper"})

MANAGER: Role = "Manager"
STORE_KEEPER: Role = "Store Keeper"


class Session(BaseModel):
    """Public identity of the signed-in user. Never carries a secret.

    Persisted as {"username", "role", "name"}; `display_name` is read and written under "name".
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    username: str = Field(..., min_length=1, description="Login name")
    role: Role = Field(..., description="Manager or Store Keeper")
    display_name: str = Field(..., alias="name", description="Name shown in the header")

    def to_record(self) -> dict[str, str]:
        """Serialized form stored under the session key."""
        return self.model_dump(by_alias=True)


class Credential(BaseModel):
    """One entry of the fixed credential set. `secret` is plaintext or a bcrypt hash, per verifier."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    secret: str = Field(..., min_length=1, repr=False)
    role: Role
    display_name: str

    def to_session(self) -> Session:
        """Strip the secret and return the public identity."""
        return Session(username=self.username, role=self.role, display_name=self.display_name)
