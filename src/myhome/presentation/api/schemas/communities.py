"""Community schemas."""

from decimal import Decimal

from pydantic import BaseModel, Field

from myhome.domain.community import Amenity, Community
from myhome.domain.user import User


class CreateCommunityRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    district: str = Field(default="", max_length=255)


class CommunityResponse(BaseModel):
    community_id: str
    name: str
    district: str
    admin_ids: list[str]

    @classmethod
    def from_domain(cls, community: Community) -> "CommunityResponse":
        return cls(
            community_id=community.community_id,
            name=community.name,
            district=community.district,
            admin_ids=sorted(community.admin_ids),
        )


class AddAdminsRequest(BaseModel):
    user_ids: list[str] = Field(..., min_length=1)


class CommunityAdminResponse(BaseModel):
    user_id: str
    name: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "CommunityAdminResponse":
        return cls(user_id=user.user_id, name=user.name, email=user.email)


class AmenityRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    price: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)


class AddAmenitiesRequest(BaseModel):
    amenities: list[AmenityRequest] = Field(..., min_length=1)


class AmenityResponse(BaseModel):
    amenity_id: str
    community_id: str
    name: str
    description: str
    price: Decimal

    @classmethod
    def from_domain(cls, amenity: Amenity) -> "AmenityResponse":
        return cls(
            amenity_id=amenity.amenity_id,
            community_id=amenity.community_id,
            name=amenity.name,
            description=amenity.description,
            price=amenity.price,
        )
