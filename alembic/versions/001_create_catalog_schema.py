"""create catalog schema

Revision ID: 001_create_catalog_schema
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_create_catalog_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # status: 0 = INATIVO, 1 = ATIVO
    op.create_table(
        'product_groups',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('description', sa.String(120), nullable=False),
        sa.Column('status', sa.Integer(), nullable=False, server_default='1'),
        sa.CheckConstraint('status IN (0, 1)', name='ck_product_groups_status'),
    )
    op.create_index('ix_product_groups_id', 'product_groups', ['id'])

    # RESTRICT garante no banco que um grupo com produtos não seja removido
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('barcode', sa.String(50), nullable=False),
        sa.Column('description', sa.String(150), nullable=False),
        sa.Column('stock_balance', sa.Numeric(18, 3), nullable=False, server_default='0'),
        sa.Column('unit_value', sa.Numeric(18, 3), nullable=False, server_default='0'),
        sa.Column('stock_value', sa.Numeric(30, 2), nullable=False, server_default='0'),
        sa.Column('registration_date', sa.Date(), nullable=False, server_default=sa.func.current_date()),
        sa.Column('group_id', sa.Integer(), nullable=False),
        sa.Column('status', sa.Integer(), nullable=False, server_default='1'),
        sa.ForeignKeyConstraint(['group_id'], ['product_groups.id'], ondelete='RESTRICT'),
        sa.CheckConstraint('status IN (0, 1)', name='ck_products_status'),
        sa.CheckConstraint('stock_balance >= 0', name='ck_products_stock_balance'),
        sa.CheckConstraint('unit_value >= 0', name='ck_products_unit_value'),
    )
    op.create_index('ix_products_id', 'products', ['id'])
    op.create_index('ix_products_barcode', 'products', ['barcode'], unique=True)
    op.create_index('ix_products_group_id', 'products', ['group_id'])


def downgrade() -> None:
    op.drop_index('ix_products_group_id', table_name='products')
    op.drop_index('ix_products_barcode', table_name='products')
    op.drop_index('ix_products_id', table_name='products')
    op.drop_table('products')

    op.drop_index('ix_product_groups_id', table_name='product_groups')
    op.drop_table('product_groups')
