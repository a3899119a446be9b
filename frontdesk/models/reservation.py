"""Reservation model"""

from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, Text

from frontdesk.database import Base


class Reservation(Base):
    """Table reservations"""
    __tablename__ = "reservation"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_name = Column(String(255), nullable=False)
    phone = Column(String(30), nullable=False)
    date_time = Column(DateTime, nullable=False, index=True)
    party_size = Column(Integer, nullable=False)
    notes = Column(Text)
    created_on = Column("CreatedOn", DateTime, default=datetime.now)
    modified_on = Column("ModifiedOn", DateTime, default=datetime.now, onupdate=datetime.now)
