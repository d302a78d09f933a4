"""nearfood initial schema

Revision ID: a1f4c2d9e7b3
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'a1f4c2d9e7b3'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(254), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime()),
    )
    op.create_table(
        'restaurants',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(120), nullable=False, unique=True),
        sa.Column('address', sa.String(255), nullable=False),
        sa.Column('image_url', sa.String(500)),
        sa.Column('lat', sa.Float(), nullable=False),
        sa.Column('lng', sa.Float(), nullable=False),
        sa.Column('cuisine', sa.String(50)),
        sa.Column('rating', sa.Float()),
        sa.Column('delivery_time_min', sa.Integer()),
        sa.Column('price_range', sa.String(3)),
        sa.Column('is_open', sa.Boolean()),
        sa.Column('created_at', sa.DateTime()),
    )
    op.create_table(
        'menu_categories',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('restaurant_id', sa.String(36), sa.ForeignKey('restaurants.id'), nullable=False),
        sa.Column('name', sa.String(80), nullable=False),
        sa.Column('display_order', sa.Integer()),
        sa.Column('created_at', sa.DateTime()),
        sa.UniqueConstraint('restaurant_id', 'name', name='uq_menu_category_restaurant_name'),
    )
    op.create_table(
        'menu_items',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('restaurant_id', sa.String(36), sa.ForeignKey('restaurants.id'), nullable=False),
        sa.Column('category_id', sa.String(36), sa.ForeignKey('menu_categories.id')),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('image_url', sa.String(500)),
        sa.Column('is_veg', sa.Boolean()),
        sa.Column('is_available', sa.Boolean()),
        sa.Column('created_at', sa.DateTime()),
        sa.UniqueConstraint('restaurant_id', 'name', name='uq_menu_item_restaurant_name'),
        sa.CheckConstraint('price > 0', name='ck_menu_item_price_positive'),
    )
    op.create_index('ix_menu_items_restaurant_available', 'menu_items', ['restaurant_id', 'is_available'])
    op.create_table(
        'carts',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False, unique=True),
        sa.Column('restaurant_id', sa.String(36), sa.ForeignKey('restaurants.id')),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
    )
    op.create_table(
        'cart_items',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('cart_id', sa.String(36), sa.ForeignKey('carts.id'), nullable=False),
        sa.Column('menu_item_id', sa.String(36), sa.ForeignKey('menu_items.id', ondelete='SET NULL')),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime()),
        sa.UniqueConstraint('cart_id', 'menu_item_id', name='uq_cart_item_cart_menu_item'),
        sa.CheckConstraint('quantity >= 1 AND quantity <= 99', name='ck_cart_item_quantity'),
    )
    op.create_table(
        'orders',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('restaurant_id', sa.String(36), sa.ForeignKey('restaurants.id')),
        sa.Column('status', sa.String(30), nullable=False),
        sa.Column('total_amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('delivery_fee', sa.Numeric(10, 2)),
        sa.Column('tax_amount', sa.Numeric(10, 2)),
        sa.Column('delivery_address', sa.Text()),
        sa.Column('delivery_phone', sa.String(30)),
        sa.Column('delivery_name', sa.String(120)),
        sa.Column('payment_id', sa.String(255)),
        sa.Column('payment_status', sa.String(20)),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
    )
    op.create_index('ix_orders_user_created', 'orders', ['user_id', 'created_at'])
    op.create_table(
        'order_items',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('order_id', sa.String(36), sa.ForeignKey('orders.id'), nullable=False),
        sa.Column('menu_item_id', sa.String(36)),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime()),
    )
    op.create_table(
        'user_addresses',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('address_line1', sa.String(255), nullable=False),
        sa.Column('address_line2', sa.String(255)),
        sa.Column('city', sa.String(100), nullable=False),
        sa.Column('state', sa.String(100), nullable=False),
        sa.Column('postal_code', sa.String(20), nullable=False),
        sa.Column('country', sa.String(60), nullable=False),
        sa.Column('phone', sa.String(30), nullable=False),
        sa.Column('is_default', sa.Boolean()),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
    )


def downgrade():
    op.drop_table('user_addresses')
    op.drop_table('order_items')
    op.drop_index('ix_orders_user_created', table_name='orders')
    op.drop_table('orders')
    op.drop_table('cart_items')
    op.drop_table('carts')
    op.drop_index('ix_menu_items_restaurant_available', table_name='menu_items')
    op.drop_table('menu_items')
    op.drop_table('menu_categories')
    op.drop_table('restaurants')
    op.drop_table('users')
