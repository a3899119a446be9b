"""Reservation schemas"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field, StringConstraints

from frontdesk.schemas.common import CamelModel, RequiredStr

PHONE_PATTERN = r"^\+?[\d\s\-\(\)]+$"

Phone = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, pattern=PHONE_PATTERN)]


class ReservationCreate(CamelModel):
    """Create reservation request"""
    customer_name: RequiredStr
    phone: Phone
    date_time: datetime
    party_size: int = Field(ge=1, le=20)
    notes: Optional[str] = None


class ReservationUpdate(CamelModel):
    """Update reservation request"""
    customer_name: Optional[RequiredStr] = None
    phone: Optional[Phone] = None
    date_time: Optional[datetime] = None
    party_size: Optional[int] = Field(default=None, ge=1, le=20)
    notes: Optional[str] = None


class Reservation(CamelModel):
    """Reservation response"""
    id: int
    customer_name: str = ""
    phone: str = ""
    date_time: Optional[datetime] = None
    party_size: int = 1
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
