"""Pydantic DTOs for sign-in and the session user."""

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    email: str = Field(..., min_length=3, pattern=r".+@.+", examples=["owner@example.com"])
    password: str = Field(..., min_length=1)


class SessionUserResponse(BaseModel):
    email: str
    id: int | str
    role: str

    model_config = {"from_attributes": True}
