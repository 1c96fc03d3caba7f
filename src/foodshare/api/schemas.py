"""Pydantic models for API request bodies."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from foodshare.domain.listings import ListingDraft, RequestDraft
from foodshare.domain.profiles import ProfileAttributes, ProfileUpdate


class SignUpBody(BaseModel):
    """Credentials plus the profile attributes collected at sign-up."""

    email: str
    password: str
    full_name: str | None = None
    username: str | None = None
    account_type: str | None = None
    organization: str | None = None
    address: str | None = None
    phone: str | None = None

    def to_attributes(self) -> ProfileAttributes:
        return ProfileAttributes(
            full_name=self.full_name,
            username=self.username,
            account_type=self.account_type,
            organization=self.organization,
            address=self.address,
            phone=self.phone,
        )


class ListingBody(BaseModel):
    """A new listing. Columns other than ``donor_id`` are passed through."""

    model_config = ConfigDict(extra="allow")

    donor_id: UUID

    def to_draft(self) -> ListingDraft:
        return ListingDraft(
            donor_id=self.donor_id, attributes=dict(self.model_extra or {})
        )


class FoodRequestBody(BaseModel):
    """A new food request. Extra columns are passed through."""

    model_config = ConfigDict(extra="allow")

    requester_id: UUID
    listing_id: str

    def to_draft(self) -> RequestDraft:
        return RequestDraft(
            requester_id=self.requester_id,
            listing_id=self.listing_id,
            attributes=dict(self.model_extra or {}),
        )


class ProfileUpdateBody(BaseModel):
    """Partial profile update."""

    full_name: str | None = None
    username: str | None = None
    account_type: str | None = None
    organization: str | None = None
    address: str | None = None
    phone: str | None = None
    avatar_url: str | None = None
    points: int | None = None
    badges: list[str] | None = None

    def to_update(self) -> ProfileUpdate:
        return ProfileUpdate(**self.model_dump())
