"""
Pydantic models for user data.

Registration only takes a name and an email; the identifier and the
``secretCode`` credential are generated by the store.  Both fields are
optional at the schema level so that missing values reach the store's
presence check and are reported as a validation error (HTTP 400)
rather than as a schema error.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Schema for registering a user."""

    name: Optional[str] = Field(None, examples=["Ada Lovelace"])
    email: Optional[str] = Field(None, examples=["ada@example.com"])


class User(BaseModel):
    """A registered user as stored and returned by the API.

    ``secret_code`` is the user's bearer credential and the key under
    which the store indexes the user.
    """

    id: str
    secret_code: str = Field(alias="secretCode")
    name: str
    email: str

    model_config = ConfigDict(populate_by_name=True)
