"""create_billing_tables

Revision ID: 8e27d5c0a6f1
Revises: 3f1c8a2b9d04
Create Date: 2026-10-19 09:30:02.774610

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '8e27d5c0a6f1'
down_revision = '3f1c8a2b9d04'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('customers',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('tenant_id', sa.String(length=36), nullable=False),
        sa.Column('subscription_type_id', sa.String(length=36), nullable=False),
        sa.Column('meter_number', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('address', sa.String(length=500), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['subscription_type_id'], ['subscription_types.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('tenant_id', 'meter_number', name='uq_customers_tenant_meter_number')
    )
    op.create_index('ix_customers_tenant_id', 'customers', ['tenant_id'], unique=False)
    op.create_table('water_usages',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('tenant_id', sa.String(length=36), nullable=False),
        sa.Column('customer_id', sa.String(length=36), nullable=False),
        sa.Column('usage_month', sa.String(length=7), nullable=False),
        sa.Column('meter_start', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('meter_end', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('usage_m3', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('amount_calculated', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('customer_id', 'usage_month', name='uq_water_usages_customer_month')
    )
    op.create_index('ix_water_usages_customer_id', 'water_usages', ['customer_id'], unique=False)
    op.create_index('ix_water_usages_tenant_id', 'water_usages', ['tenant_id'], unique=False)
    op.create_index('ix_water_usages_usage_month', 'water_usages', ['usage_month'], unique=False)
    op.create_table('invoices',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('tenant_id', sa.String(length=36), nullable=False),
        sa.Column('customer_id', sa.String(length=36), nullable=False),
        sa.Column('invoice_type', sa.String(length=20), nullable=False),
        sa.Column('usage_month', sa.String(length=7), nullable=False),
        sa.Column('usage_m3', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('usage_amount', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('abonemen', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('maintenance_fee', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('late_fee', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('price_per_m3', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('total_amount', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('total_paid', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('is_paid', sa.Boolean(), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=True),
        sa.Column('paid_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('customer_id', 'usage_month', 'invoice_type', name='uq_invoices_customer_month_type')
    )
    op.create_index('ix_invoices_customer_id', 'invoices', ['customer_id'], unique=False)
    op.create_index('ix_invoices_tenant_id', 'invoices', ['tenant_id'], unique=False)
    op.create_index('ix_invoices_usage_month', 'invoices', ['usage_month'], unique=False)
    op.create_table('payments',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('tenant_id', sa.String(length=36), nullable=False),
        sa.Column('invoice_id', sa.String(length=36), nullable=False),
        sa.Column('amount', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('reference', sa.String(length=255), nullable=True),
        sa.Column('paid_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['invoice_id'], ['invoices.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_payments_invoice_id', 'payments', ['invoice_id'], unique=False)
    op.create_index('ix_payments_tenant_id', 'payments', ['tenant_id'], unique=False)


def downgrade():
    op.drop_index('ix_payments_tenant_id', table_name='payments')
    op.drop_index('ix_payments_invoice_id', table_name='payments')
    op.drop_table('payments')
    op.drop_index('ix_invoices_usage_month', table_name='invoices')
    op.drop_index('ix_invoices_tenant_id', table_name='invoices')
    op.drop_index('ix_invoices_customer_id', table_name='invoices')
    op.drop_table('invoices')
    op.drop_index('ix_water_usages_usage_month', table_name='water_usages')
    op.drop_index('ix_water_usages_tenant_id', table_name='water_usages')
    op.drop_index('ix_water_usages_customer_id', table_name='water_usages')
    op.drop_table('water_usages')
    op.drop_index('ix_customers_tenant_id', table_name='customers')
    op.drop_table('customers')
