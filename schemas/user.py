"""User collection schema."""

from pydantic import BaseModel, Field


class UserRecord(BaseModel):
    """User collection model."""
    id: str = Field(..., description="Store-generated user identifier")
    username: str = Field(..., description="Unique username")


class UserResponse(BaseModel):
    """Public projection of a user."""
    username: str
    id: str

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserResponse":
        return cls(username=user.username, id=user.id)
