"""Reservation book"""

from typing import Any, Dict, List, Optional

from frontdesk.dates import BUCKETS, in_bucket, to_local_naive
from frontdesk.errors import FieldError, ValidationFailure
from frontdesk.normalizer import RESERVATION_FIELDS
from frontdesk.schemas.reservation import Reservation, ReservationCreate, ReservationUpdate
from frontdesk.services.base import RecordManager


class ReservationBook(RecordManager[Reservation]):
    """Bookings with date-bucketed queries (today, tomorrow, next 7 days)"""

    fields = RESERVATION_FIELDS
    model = Reservation

    async def create(self, data: Any) -> Reservation:
        payload = self._validate(ReservationCreate, data)
        if to_local_naive(payload.date_time) <= self.now():
            raise ValidationFailure(
                [FieldError(field="dateTime", message="Cannot book a reservation in the past")]
            )
        return await self._create(self._dump(payload))

    async def update(self, reservation_id: Any, patch: Any) -> Reservation:
        payload = self._validate(ReservationUpdate, patch)
        return await self._update(reservation_id, self._dump(payload, exclude_unset=True))

    async def _in_bucket(self, bucket: str, strict: bool = False) -> List[Reservation]:
        reservations = await self.list(strict=strict)
        now = self.now()
        return [r for r in reservations if in_bucket(bucket, r.date_time, now)]

    async def todays(self, strict: bool = False) -> List[Reservation]:
        return await self._in_bucket("today", strict=strict)

    async def tomorrows(self) -> List[Reservation]:
        return await self._in_bucket("tomorrow")

    async def this_week(self) -> List[Reservation]:
        """Reservations between now and seven days from now, inclusive"""
        return await self._in_bucket("week")

    async def by_bucket(self, bucket: str = "all", term: Optional[str] = None) -> List[Reservation]:
        """Bucket filter plus name/phone/notes search, earliest first"""
        if bucket not in BUCKETS:
            raise ValueError(f"Unknown date bucket: {bucket}")

        reservations = await self._in_bucket(bucket)
        reservations = [
            r for r in reservations
            if self._matches(term, r.customer_name, r.phone, r.notes)
        ]
        return sorted(reservations, key=lambda r: (r.date_time is None, r.date_time or self.now()))

    async def bucket_counts(self) -> Dict[str, int]:
        reservations = await self.list()
        now = self.now()
        return {
            bucket: sum(1 for r in reservations if in_bucket(bucket, r.date_time, now))
            for bucket in BUCKETS
        }
