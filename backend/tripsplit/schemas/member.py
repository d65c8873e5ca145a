"""
Pydantic schemas for Member entity.
"""
from pydantic import BaseModel, field_validator
from typing import Optional


class MemberBase(BaseModel):
    """Base member schema."""
    name: str
    avatar: Optional[str] = None  # Emoji or image URL
    color: Optional[str] = None  # Display color, e.g. "#FF6B6B"


class MemberCreate(MemberBase):
    """Schema for member creation."""

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Member name must not be empty")
        return v


class Member(MemberBase):
    """Schema for a trip member."""
    id: str

    class Config:
        from_attributes = True
