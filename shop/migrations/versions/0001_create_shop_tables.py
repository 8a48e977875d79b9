"""create products, customers and orders

Revision ID: 0001
Revises:
Create Date: 2026-10-16 12:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'products',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_products')),
    )
    op.create_table(
        'customers',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('order_ids', sa.JSON(), nullable=True),
        sa.Column('password_hash', sa.String(), nullable=True),
        sa.Column(
            'role', sa.String(length=16), server_default='user', nullable=False
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_customers')),
        sa.UniqueConstraint('email', name=op.f('uq_customers_email')),
    )
    op.create_table(
        'orders',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('product_ids', sa.JSON(), nullable=False),
        sa.Column('total_price', sa.Float(), nullable=False),
        sa.Column('customer_id', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_orders')),
    )


def downgrade() -> None:
    op.drop_table('orders')
    op.drop_table('customers')
    op.drop_table('products')
