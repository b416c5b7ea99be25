from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# --------------------------------------------------------------
# Shared value schemas
# --------------------------------------------------------------


class AddressSchema(BaseModel):
    city: Optional[str] = Field(None, examples=["Seoul"])
    street: Optional[str] = Field(None, examples=["1 Main St"])
    zipcode: Optional[str] = Field(None, examples=["11111"])

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_columns(cls, source: object) -> "AddressSchema":
        """Build from an entity or row carrying city/street/zipcode."""
        return cls(
            city=getattr(source, "city", None),
            street=getattr(source, "street", None),
            zipcode=getattr(source, "zipcode", None),
        )


# --------------------------------------------------------------
# Member Schemas
# --------------------------------------------------------------


class MemberEntity(BaseModel):
    """Member exposed with the same shape as the persisted entity."""

    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=100, examples=["userA"])
    address: Optional[AddressSchema] = None

    model_config = ConfigDict(from_attributes=True)


class CreateMemberRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["userA"])


class CreateMemberResponse(BaseModel):
    id: int


class UpdateMemberRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["userB"])


class UpdateMemberResponse(BaseModel):
    id: int
    name: str


class MemberDto(BaseModel):
    name: str

    model_config = ConfigDict(from_attributes=True)


class MemberListResponse(BaseModel):
    count: int
    data: List[MemberDto]
