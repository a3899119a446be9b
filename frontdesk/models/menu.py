"""Menu model"""

from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, Numeric, Text, Integer

from frontdesk.database import Base


class MenuItem(Base):
    """Sellable menu items"""
    __tablename__ = "menu_item"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100))  # Appetizers, Pizza, Desserts, Drinks, etc.
    price = Column(Numeric(10, 2), nullable=False)
    available = Column(Boolean, default=True)
    created_on = Column("CreatedOn", DateTime, default=datetime.now)
    modified_on = Column("ModifiedOn", DateTime, default=datetime.now, onupdate=datetime.now)
