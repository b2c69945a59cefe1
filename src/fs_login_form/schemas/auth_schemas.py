"""Pydantic schemas exchanged with the authentication gateway."""

from pydantic import BaseModel, ConfigDict, Field


class AuthenticationParams(BaseModel):
    """Credentials sent to the authentication gateway."""
    email: str
    password: str

    model_config = ConfigDict(frozen=True)


class Account(BaseModel):
    """Account issued on successful authentication."""
    access_token: str = Field(..., alias="accessToken", min_length=1)

    model_config = ConfigDict(frozen=True, populate_by_name=True)
