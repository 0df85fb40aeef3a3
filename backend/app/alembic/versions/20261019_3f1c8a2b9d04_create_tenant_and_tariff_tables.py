"""create_tenant_and_tariff_tables

Revision ID: 3f1c8a2b9d04
Revises:
Create Date: 2026-10-19 09:12:41.518203

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c8a2b9d04'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('tenants',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('timezone', sa.String(length=50), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('tariff_categories',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('tenant_id', sa.String(length=36), nullable=False),
        sa.Column('code', sa.String(length=20), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('tariff_type', sa.String(length=50), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_tariff_categories_tenant_id', 'tariff_categories', ['tenant_id'], unique=False)
    op.create_table('progressive_rates',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('tenant_id', sa.String(length=36), nullable=False),
        sa.Column('category_id', sa.String(length=36), nullable=False),
        sa.Column('min_volume', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('max_volume', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('price_per_unit', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['category_id'], ['tariff_categories.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_progressive_rates_category_id', 'progressive_rates', ['category_id'], unique=False)
    op.create_index('ix_progressive_rates_tenant_id', 'progressive_rates', ['tenant_id'], unique=False)
    op.create_table('subscription_types',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('tenant_id', sa.String(length=36), nullable=False),
        sa.Column('tariff_category_id', sa.String(length=36), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('registration_fee', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('monthly_fee', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('maintenance_fee', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('late_fee_per_day', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('max_late_fee', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['tariff_category_id'], ['tariff_categories.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_subscription_types_tenant_id', 'subscription_types', ['tenant_id'], unique=False)


def downgrade():
    op.drop_index('ix_subscription_types_tenant_id', table_name='subscription_types')
    op.drop_table('subscription_types')
    op.drop_index('ix_progressive_rates_tenant_id', table_name='progressive_rates')
    op.drop_index('ix_progressive_rates_category_id', table_name='progressive_rates')
    op.drop_table('progressive_rates')
    op.drop_index('ix_tariff_categories_tenant_id', table_name='tariff_categories')
    op.drop_table('tariff_categories')
    op.drop_table('tenants')
