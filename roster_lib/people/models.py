from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PersonModel(BaseModel):
    """One person record as stored, listed and submitted through the forms."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: Optional[int] = Field(default=None, ge=1)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    gender: Optional[str] = Field(default=None, max_length=32)
    date_of_birth: Optional[date] = None
    phone_number: Optional[str] = Field(default=None, pattern=r"^\+?\d{6,20}$")
    address: Optional[str] = Field(default=None, max_length=255)

    @field_validator("date_of_birth")
    @classmethod
    def _not_in_future(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value > date.today():
            raise ValueError("Date of birth cannot be in the future")
        return value
