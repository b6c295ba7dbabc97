'''
init migrations

Revision ID: 3b7e91c0d2a4
Revises:
Create Date: 2025-09-14 10:22:05.418913

'''
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3b7e91c0d2a4'
down_revision = None
branch_labels = None
depends_on = None

STATUSES = ('pending', 'ongoing', 'completed', 'cancelled')


def upgrade() -> None:
    bind = op.get_bind()
    meta = sa.MetaData()

    # users table
    users = sa.Table(
        'users', meta,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    users.create(bind, checkfirst=True)
    sa.Index(op.f('ix_users_id'), users.c.id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_users_email'), users.c.email, unique=True).create(bind, checkfirst=True)

    # admin table
    admin = sa.Table(
        'admin', meta,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('role', sa.String(50), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    admin.create(bind, checkfirst=True)
    sa.Index(op.f('ix_admin_id'), admin.c.id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_admin_email'), admin.c.email, unique=True).create(bind, checkfirst=True)

    # workshops table
    workshops = sa.Table(
        'workshops', meta,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('rating', sa.Numeric(3, 1), nullable=False),
        sa.Column('location', sa.String(255), nullable=False),
        sa.Column('icon', sa.String(100), nullable=False),
        sa.Column('image', sa.String(500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    workshops.create(bind, checkfirst=True)
    sa.Index(op.f('ix_workshops_id'), workshops.c.id).create(bind, checkfirst=True)

    # products table
    products = sa.Table(
        'products', meta,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('image', sa.String(500), nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('workshop_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['workshop_id'], ['workshops.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    products.create(bind, checkfirst=True)
    sa.Index(op.f('ix_products_id'), products.c.id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_products_category'), products.c.category).create(bind, checkfirst=True)
    sa.Index(op.f('ix_products_workshop_id'), products.c.workshop_id).create(bind, checkfirst=True)

    # vehicles table
    vehicles = sa.Table(
        'vehicles', meta,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('model', sa.String(255), nullable=False),
        sa.Column('year', sa.String(10), nullable=False),
        sa.Column('chassis', sa.String(255), nullable=False),
        sa.Column('engine', sa.String(255), nullable=False),
        sa.Column('plate_number', sa.String(50), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    vehicles.create(bind, checkfirst=True)
    sa.Index(op.f('ix_vehicles_id'), vehicles.c.id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_vehicles_user_id'), vehicles.c.user_id).create(bind, checkfirst=True)

    # cart_items table
    cart_items = sa.Table(
        'cart_items', meta,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['product_id'], ['products.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'product_id', name='unique_user_product'),
    )
    cart_items.create(bind, checkfirst=True)
    sa.Index(op.f('ix_cart_items_id'), cart_items.c.id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_cart_items_user_id'), cart_items.c.user_id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_cart_items_product_id'), cart_items.c.product_id).create(bind, checkfirst=True)

    # banner_sliders table
    banner_sliders = sa.Table(
        'banner_sliders', meta,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('subtitle', sa.String(255), nullable=False),
        sa.Column('image', sa.String(500), nullable=False),
        sa.Column('link_url', sa.String(500), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    banner_sliders.create(bind, checkfirst=True)
    sa.Index(op.f('ix_banner_sliders_id'), banner_sliders.c.id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_banner_sliders_display_order'), banner_sliders.c.display_order).create(bind, checkfirst=True)
    sa.Index(op.f('ix_banner_sliders_is_active'), banner_sliders.c.is_active).create(bind, checkfirst=True)

    # transactions ledger
    transactions = sa.Table(
        'transactions', meta,
        sa.Column('id', sa.String(50), nullable=False),
        sa.Column('type', sa.Enum('Shop', 'Towing', 'Quotation', name='transaction_type'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('status', sa.Enum(*STATUSES, name='transaction_status'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    transactions.create(bind, checkfirst=True)
    sa.Index(op.f('ix_transactions_type'), transactions.c.type).create(bind, checkfirst=True)
    sa.Index(op.f('ix_transactions_status'), transactions.c.status).create(bind, checkfirst=True)
    sa.Index(op.f('ix_transactions_user_id'), transactions.c.user_id).create(bind, checkfirst=True)
    sa.Index('ix_transactions_date_created', transactions.c.date, transactions.c.created_at).create(bind, checkfirst=True)

    # shop_orders table
    shop_orders = sa.Table(
        'shop_orders', meta,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('transaction_id', sa.String(50), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('workshop_id', sa.Integer(), nullable=False),
        sa.Column('total', sa.Numeric(10, 2), nullable=False),
        sa.Column('status', sa.Enum(*STATUSES, name='shop_order_status'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['transaction_id'], ['transactions.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['workshop_id'], ['workshops.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    shop_orders.create(bind, checkfirst=True)
    sa.Index(op.f('ix_shop_orders_id'), shop_orders.c.id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_shop_orders_transaction_id'), shop_orders.c.transaction_id, unique=True).create(bind, checkfirst=True)
    sa.Index(op.f('ix_shop_orders_user_id'), shop_orders.c.user_id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_shop_orders_workshop_id'), shop_orders.c.workshop_id).create(bind, checkfirst=True)

    # shop_order_items table
    shop_order_items = sa.Table(
        'shop_order_items', meta,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('order_id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('product_name', sa.String(255), nullable=False),
        sa.Column('product_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('subtotal', sa.Numeric(10, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['order_id'], ['shop_orders.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['product_id'], ['products.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    shop_order_items.create(bind, checkfirst=True)
    sa.Index(op.f('ix_shop_order_items_id'), shop_order_items.c.id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_shop_order_items_order_id'), shop_order_items.c.order_id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_shop_order_items_product_id'), shop_order_items.c.product_id).create(bind, checkfirst=True)

    # towing_requests table
    towing_requests = sa.Table(
        'towing_requests', meta,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('transaction_id', sa.String(50), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('workshop_id', sa.Integer(), nullable=False),
        sa.Column('pickup', sa.String(500), nullable=False),
        sa.Column('destination', sa.String(500), nullable=False),
        sa.Column('pickup_latitude', sa.Numeric(10, 8), nullable=True),
        sa.Column('pickup_longitude', sa.Numeric(11, 8), nullable=True),
        sa.Column('destination_latitude', sa.Numeric(10, 8), nullable=True),
        sa.Column('destination_longitude', sa.Numeric(11, 8), nullable=True),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('status', sa.Enum(*STATUSES, name='towing_status'), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['transaction_id'], ['transactions.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['workshop_id'], ['workshops.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    towing_requests.create(bind, checkfirst=True)
    sa.Index(op.f('ix_towing_requests_id'), towing_requests.c.id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_towing_requests_transaction_id'), towing_requests.c.transaction_id, unique=True).create(bind, checkfirst=True)
    sa.Index(op.f('ix_towing_requests_user_id'), towing_requests.c.user_id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_towing_requests_workshop_id'), towing_requests.c.workshop_id).create(bind, checkfirst=True)

    # quotations table
    quotations = sa.Table(
        'quotations', meta,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('transaction_id', sa.String(50), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('workshop_id', sa.Integer(), nullable=False),
        sa.Column('model', sa.String(255), nullable=False),
        sa.Column('year', sa.String(10), nullable=False),
        sa.Column('engine', sa.String(255), nullable=False),
        sa.Column('chassis', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('quote_type', sa.Enum('brief', 'detailed', name='quote_type'), nullable=False),
        sa.Column('images', sa.Text(), nullable=True),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('status', sa.Enum(*STATUSES, name='quotation_status'), nullable=False),
        sa.Column('admin_message', sa.Text(), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['transaction_id'], ['transactions.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['workshop_id'], ['workshops.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    quotations.create(bind, checkfirst=True)
    sa.Index(op.f('ix_quotations_id'), quotations.c.id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_quotations_transaction_id'), quotations.c.transaction_id, unique=True).create(bind, checkfirst=True)
    sa.Index(op.f('ix_quotations_user_id'), quotations.c.user_id).create(bind, checkfirst=True)
    sa.Index(op.f('ix_quotations_workshop_id'), quotations.c.workshop_id).create(bind, checkfirst=True)


def downgrade() -> None:
    # children before parents
    op.drop_table('quotations')
    op.drop_table('towing_requests')
    op.drop_table('shop_order_items')
    op.drop_table('shop_orders')
    op.drop_table('transactions')
    op.drop_table('banner_sliders')
    op.drop_table('cart_items')
    op.drop_table('vehicles')
    op.drop_table('products')
    op.drop_table('workshops')
    op.drop_table('admin')
    op.drop_table('users')
