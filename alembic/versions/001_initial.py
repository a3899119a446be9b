"""Initial migration

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create menu_item table
    op.create_table(
        'menu_item',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category', sa.String(100)),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('available', sa.Boolean(), default=True),
        sa.Column('CreatedOn', sa.DateTime(), default=sa.func.now()),
        sa.Column('ModifiedOn', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )

    # Create inventory table
    op.create_table(
        'inventory',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False, default=0),
        sa.Column('unit', sa.String(50), nullable=False),
        sa.Column('low_stock_threshold', sa.Integer(), nullable=False, default=0),
        sa.Column('last_updated', sa.DateTime(), default=sa.func.now()),
        sa.Column('CreatedOn', sa.DateTime(), default=sa.func.now()),
    )

    # Create order table
    op.create_table(
        'order',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('order_number', sa.String(20), nullable=False),
        sa.Column('table_number', sa.Integer(), nullable=False),
        sa.Column('items', sa.Text(), nullable=False),
        sa.Column('status', sa.String(20), default='pending'),
        sa.Column('total_amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('CreatedOn', sa.DateTime(), default=sa.func.now()),
        sa.Column('completed_at', sa.DateTime()),
        sa.Column('ModifiedOn', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )
    op.create_index('ix_order_status', 'order', ['status'])

    # Create reservation table
    op.create_table(
        'reservation',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('customer_name', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(30), nullable=False),
        sa.Column('date_time', sa.DateTime(), nullable=False),
        sa.Column('party_size', sa.Integer(), nullable=False),
        sa.Column('notes', sa.Text()),
        sa.Column('CreatedOn', sa.DateTime(), default=sa.func.now()),
        sa.Column('ModifiedOn', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )
    op.create_index('ix_reservation_date_time', 'reservation', ['date_time'])


def downgrade() -> None:
    op.drop_index('ix_reservation_date_time', table_name='reservation')
    op.drop_table('reservation')
    op.drop_index('ix_order_status', table_name='order')
    op.drop_table('order')
    op.drop_table('inventory')
    op.drop_table('menu_item')
