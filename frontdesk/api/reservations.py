"""Reservation API endpoints"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from frontdesk.api.deps import get_frontdesk
from frontdesk.schemas.reservation import Reservation, ReservationCreate, ReservationUpdate
from frontdesk.services import Frontdesk

router = APIRouter()


@router.get("", response_model=List[Reservation])
async def list_reservations(
    bucket: str = Query("all", pattern="^(all|today|tomorrow|week)$"),
    q: Optional[str] = None,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """List reservations in a date bucket, earliest first"""
    return await frontdesk.reservations.by_bucket(bucket, q)


@router.post("", response_model=Reservation, status_code=201)
async def create_reservation(
    reservation_data: ReservationCreate,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Book a table"""
    return await frontdesk.reservations.create(reservation_data)


@router.get("/today", response_model=List[Reservation])
async def todays_reservations(frontdesk: Frontdesk = Depends(get_frontdesk)):
    return await frontdesk.reservations.todays()


@router.get("/counts", response_model=Dict[str, int])
async def reservation_counts(frontdesk: Frontdesk = Depends(get_frontdesk)):
    """Reservation count per date bucket"""
    return await frontdesk.reservations.bucket_counts()


@router.get("/{reservation_id}", response_model=Reservation)
async def get_reservation(
    reservation_id: int,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Get reservation details"""
    reservation = await frontdesk.reservations.get(reservation_id)

    if not reservation:
        raise HTTPException(status_code=404, detail="Reservation not found")

    return reservation


@router.put("/{reservation_id}", response_model=Reservation)
async def update_reservation(
    reservation_id: int,
    reservation_data: ReservationUpdate,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Update reservation"""
    return await frontdesk.reservations.update(reservation_id, reservation_data)


@router.delete("/{reservation_id}", status_code=204)
async def delete_reservation(
    reservation_id: int,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Remove a reservation"""
    await frontdesk.reservations.delete(reservation_id)
