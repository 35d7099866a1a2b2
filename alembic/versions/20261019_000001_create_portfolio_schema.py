"""Create portfolio schema

Revision ID: 20261019_000001
Revises: None
Create Date: 2026-10-19

Properties with their purchase, loan and ledger tables, plus contacts.
Child rows are removed with their property (ON DELETE CASCADE).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _money(name: str, nullable: bool = True, **kwargs) -> sa.Column:
    return sa.Column(name, sa.Numeric(precision=12, scale=2), nullable=nullable, **kwargs)


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def _property_fk(table: str) -> sa.ForeignKeyConstraint:
    return sa.ForeignKeyConstraint(
        ['property_id'],
        ['properties.property_id'],
        name=f'fk_{table}_property_id',
        ondelete='CASCADE',
    )


def upgrade() -> None:
    """Create all portfolio tables."""
    op.create_table(
        'properties',
        sa.Column('property_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_name', sa.String(length=255), nullable=False),
        sa.Column('owner', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=100), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('income_producing', sa.String(length=3), nullable=False, server_default='NO'),
        sa.Column('address', sa.String(length=255), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=True),
        sa.Column('state', sa.String(length=50), nullable=True),
        sa.Column('zipcode', sa.String(length=5), nullable=True),
        sa.Column('county', sa.String(length=100), nullable=True),
        sa.Column('year', sa.Integer(), nullable=True),
        _money('market_value'),
        sa.Column('lat', sa.Float(), nullable=True),
        sa.Column('lng', sa.Float(), nullable=True),
        sa.Column('geocoded_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('property_id'),
        sa.UniqueConstraint('address', 'city', 'state', 'zipcode', name='uniq_prop_address'),
    )
    op.create_index('properties_city_state_idx', 'properties', ['city', 'state'])
    op.create_index('idx_property_lat_lng', 'properties', ['lat', 'lng'])

    op.create_table(
        'purchase_details',
        sa.Column('purchase_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        _money('purchase_price', nullable=False, server_default='0'),
        _money('down_payment'),
        sa.Column('financing_type', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('acquisition_type', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('buyer', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('seller', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('closing_date', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        _money('closing_costs', nullable=False, server_default='0'),
        _money('earnest_money'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('purchase_id'),
        sa.UniqueConstraint('property_id', name='purchase_details_property_id_key'),
        _property_fk('purchase_details'),
    )

    op.create_table(
        'loan_details',
        sa.Column('loan_id', sa.String(length=100), nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('purchase_id', sa.Integer(), nullable=False),
        _money('loan_amount'),
        sa.Column('lender', sa.String(length=255), nullable=True),
        sa.Column('interest_rate', sa.Numeric(precision=6, scale=3), nullable=True),
        sa.Column('loan_term', sa.Integer(), nullable=True),
        sa.Column('loan_start', sa.DateTime(), nullable=True),
        sa.Column('loan_end', sa.DateTime(), nullable=True),
        sa.Column('amortization_period', sa.Integer(), nullable=True),
        _money('monthly_payment'),
        sa.Column('loan_type', sa.String(length=100), nullable=True),
        sa.Column('balloon_payment', sa.Boolean(), nullable=True),
        sa.Column('prepayment_penalty', sa.Boolean(), nullable=True),
        sa.Column('refinanced', sa.Boolean(), nullable=True),
        sa.Column('loan_status', sa.String(length=50), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('loan_id'),
        sa.UniqueConstraint('property_id', 'purchase_id', name='loan_details_property_id_purchase_id_key'),
        sa.UniqueConstraint('loan_id', 'property_id', name='loan_details_loan_id_property_id_key'),
        _property_fk('loan_details'),
        sa.ForeignKeyConstraint(
            ['purchase_id'],
            ['purchase_details.purchase_id'],
            name='fk_loan_details_purchase_id',
            ondelete='NO ACTION',
        ),
    )
    op.create_index('ix_loan_details_property_id', 'loan_details', ['property_id'])

    op.create_table(
        'loan_payments',
        sa.Column('loan_payment_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('loan_id', sa.String(length=100), nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('payment_code', sa.String(length=100), nullable=True),
        sa.Column('payment_due_date', sa.DateTime(), nullable=False),
        sa.Column('date_paid', sa.DateTime(), nullable=True),
        _money('payment_amount', nullable=False, server_default='0'),
        _money('principal_paid', nullable=False, server_default='0'),
        _money('interest_paid', nullable=False, server_default='0'),
        _money('late_fee'),
        _money('principal_balance', nullable=False, server_default='0'),
        _money('stored_monthly_payment'),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('loan_payment_id'),
        sa.UniqueConstraint('loan_id', 'property_id', 'payment_due_date', name='loan_payments_due_key'),
        sa.ForeignKeyConstraint(
            ['loan_id', 'property_id'],
            ['loan_details.loan_id', 'loan_details.property_id'],
            name='fk_loan_payments_loan',
            ondelete='CASCADE',
        ),
    )
    op.create_index('loan_payments_loan_id_property_id_idx', 'loan_payments', ['loan_id', 'property_id'])
    # filtered: rows without a code may repeat
    op.create_index(
        'loan_payments_payment_code_key',
        'loan_payments',
        ['payment_code'],
        unique=True,
        mssql_where=sa.text('payment_code IS NOT NULL'),
        postgresql_where=sa.text('payment_code IS NOT NULL'),
    )

    op.create_table(
        'rent_log',
        sa.Column('rent_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('month', sa.String(length=20), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        _money('rent_amount', nullable=False, server_default='0'),
        sa.Column('date_deposited', sa.DateTime(), nullable=False),
        sa.Column('check_number', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('rent_id'),
        sa.UniqueConstraint('property_id', 'month', 'year', name='rent_log_property_id_month_year_key'),
        _property_fk('rent_log'),
    )

    op.create_table(
        'payment_log',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('month', sa.String(length=20), nullable=False),
        _money('payment_amount'),
        sa.Column('check_number', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('date_paid', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('property_id', 'month', 'year', name='payment_log_property_id_month_year_key'),
        _property_fk('payment_log'),
    )

    op.create_table(
        'transactions',
        sa.Column('transaction_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('transaction_type', sa.String(length=100), nullable=True),
        sa.Column('notes', sa.String(length=255), nullable=True),
        _money('transaction_amount', nullable=False),
        sa.Column('transaction_date', sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint('transaction_id'),
        _property_fk('transactions'),
    )
    op.create_index('ix_transactions_property_id', 'transactions', ['property_id'])
    op.create_index('ix_transactions_transaction_date', 'transactions', ['transaction_date'])

    op.create_table(
        'contacts',
        sa.Column('contact_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('contact_name', sa.String(length=255), nullable=False),
        sa.Column('contact_phone', sa.String(length=20), nullable=False),
        sa.Column('contact_email', sa.String(length=255), nullable=True),
        sa.Column('contact_type', sa.String(length=100), nullable=True),
        sa.Column('contact_notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('contact_id'),
    )

    op.create_table(
        'tenants',
        sa.Column('tenant_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('tenant_name', sa.String(length=255), nullable=True),
        sa.Column('tenant_status', sa.String(length=50), nullable=True, server_default='Inactive'),
        sa.Column('lease_start', sa.DateTime(), nullable=True),
        sa.Column('lease_end', sa.DateTime(), nullable=True),
        _money('rent_amount'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('tenant_id'),
        sa.UniqueConstraint(
            'property_id', 'tenant_name', 'lease_start',
            name='tenant_property_id_tenant_name_lease_start_key',
        ),
        _property_fk('tenants'),
    )
    op.create_index('ix_tenants_tenant_status', 'tenants', ['tenant_status'])


def downgrade() -> None:
    """Drop all portfolio tables, children first."""
    op.drop_index('ix_tenants_tenant_status', table_name='tenants')
    op.drop_table('tenants')
    op.drop_table('contacts')
    op.drop_index('ix_transactions_transaction_date', table_name='transactions')
    op.drop_index('ix_transactions_property_id', table_name='transactions')
    op.drop_table('transactions')
    op.drop_table('payment_log')
    op.drop_table('rent_log')
    op.drop_index('loan_payments_payment_code_key', table_name='loan_payments')
    op.drop_index('loan_payments_loan_id_property_id_idx', table_name='loan_payments')
    op.drop_table('loan_payments')
    op.drop_index('ix_loan_details_property_id', table_name='loan_details')
    op.drop_table('loan_details')
    op.drop_table('purchase_details')
    op.drop_index('idx_property_lat_lng', table_name='properties')
    op.drop_index('properties_city_state_idx', table_name='properties')
    op.drop_table('properties')
