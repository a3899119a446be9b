"""Inventory model"""

from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime

from frontdesk.database import Base


class InventoryItem(Base):
    """Stock items tracked by the kitchen"""
    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    unit = Column(String(50), nullable=False)  # kg, liters, pieces, etc.
    low_stock_threshold = Column(Integer, nullable=False, default=0)
    last_updated = Column(DateTime, default=datetime.now)
    created_on = Column("CreatedOn", DateTime, default=datetime.now)
