"""
Location Models
---------------
Coordinates received from the browser and the flat address record the
geocoding providers are reshaped into.
"""
from numbers import Number

from pydantic import BaseModel, ConfigDict, Field, field_validator

ADDRESS_NOT_FOUND = "Address not found"


class Coordinates(BaseModel):
    """Latitude/longitude pair posted by the capture page."""

    latitude: float = Field(allow_inf_nan=False)
    longitude: float = Field(allow_inf_nan=False)

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def must_be_numeric(cls, value):
        # bool is a Number subclass but never a coordinate
        if isinstance(value, bool) or not isinstance(value, (Number, str)):
            raise ValueError("must be a number or numeric string")
        return value


class Address(BaseModel):
    """Resolved address, independent of the provider that produced it."""

    model_config = ConfigDict(frozen=True)

    formatted_address: str = ADDRESS_NOT_FOUND
    street: str = ""
    city: str = ""
    state: str = ""
    postcode: str = ""
    country: str = ""


class GeocodeResponse(BaseModel):
    """Body of a successful POST /api/geocode/{link_id}."""

    model_config = ConfigDict(populate_by_name=True)

    latitude: float
    longitude: float
    formatted_address: str = Field(alias="formattedAddress")
    street: str
    city: str
    state: str
    postcode: str
    country: str

    @classmethod
    def build(cls, coordinates, address):
        return cls(
            latitude=coordinates.latitude,
            longitude=coordinates.longitude,
            **address.model_dump(),
        )
