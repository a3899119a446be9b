"""Order model"""

from datetime import datetime
from sqlalchemy import Column, String, DateTime, Numeric, Text, Integer

from frontdesk.database import Base


class Order(Base):
    """Dine-in orders"""
    __tablename__ = "order"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_number = Column(String(20), nullable=False)
    table_number = Column(Integer, nullable=False)

    # Serialized JSON: [{"id": 1, "name": "...", "price": "9.50", "quantity": 2}, ...]
    items = Column(Text, nullable=False, default="[]")

    status = Column(String(20), default="pending", index=True)  # pending, preparing, completed, cancelled
    total_amount = Column(Numeric(10, 2), nullable=False, default=0)

    created_on = Column("CreatedOn", DateTime, default=datetime.now)
    completed_at = Column(DateTime)
    modified_on = Column("ModifiedOn", DateTime, default=datetime.now, onupdate=datetime.now)
