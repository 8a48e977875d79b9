# shop/tables.py
from sqlalchemy import JSON, Column, Float, MetaData, String, Table, Text

metadata = MetaData(
    naming_convention={
        'ix': 'ix_%(table_name)s_%(column_0_name)s',
        'uq': 'uq_%(table_name)s_%(column_0_name)s',
        'ck': 'ck_%(table_name)s_%(constraint_name)s',
        'fk': 'fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s',
        'pk': 'pk_%(table_name)s',
    }
)

products = Table(
    'products',
    metadata,
    Column('id', String(36), primary_key=True),
    Column('name', String, nullable=False),
    Column('description', Text, nullable=True),
    Column('price', Float, nullable=False),
    Column('image_url', String, nullable=True),
)

customers = Table(
    'customers',
    metadata,
    Column('id', String(36), primary_key=True),
    Column('name', String, nullable=False),
    Column('email', String, nullable=False, unique=True),
    Column('order_ids', JSON, nullable=True),
    Column('password_hash', String, nullable=True),
    Column('role', String(16), nullable=False, server_default='user'),
)

# customer_id and product_ids are free-form, no foreign keys
orders = Table(
    'orders',
    metadata,
    Column('id', String(36), primary_key=True),
    Column('product_ids', JSON, nullable=False),
    Column('total_price', Float, nullable=False),
    Column('customer_id', String, nullable=False),
)
