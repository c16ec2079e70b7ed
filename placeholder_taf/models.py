from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any


class PlaceholderModel(BaseModel):
    """Base for DTOs mirroring JSONPlaceholder payloads (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


class GeoDto(PlaceholderModel):
    lat: Optional[str] = None
    lng: Optional[str] = None


class AddressDto(PlaceholderModel):
    street: Optional[str] = None
    suite: Optional[str] = None
    city: Optional[str] = None
    zipcode: Optional[str] = None
    geo: Optional[GeoDto] = None


class CompanyDto(PlaceholderModel):
    name: Optional[str] = None
    catch_phrase: Optional[str] = Field(None, alias="catchPhrase")
    bs: Optional[str] = None


class CommentDto(PlaceholderModel):
    id: Optional[int] = None
    post_id: Optional[int] = Field(None, alias="postId", description="Post the comment belongs to")
    name: Optional[str] = None
    email: Optional[str] = None
    body: Optional[str] = None


class UserDto(PlaceholderModel):
    id: Optional[int] = None
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    address: Optional[AddressDto] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    company: Optional[CompanyDto] = None
