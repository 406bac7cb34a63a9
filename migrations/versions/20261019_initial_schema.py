"""
Initial schema: users, clients, email cases, vehicles, waitlist requests,
knowledge items and daily stats.

Enumerated columns are plain strings guarded by CHECK constraints; id
references between tables carry no foreign keys.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from showroom.db.types import StringArray, UTCDateTime


# revision identifiers, used by Alembic.
revision = 'initial_schema_20261019'
down_revision = None
branch_labels = None
depends_on = None

_TS = UTCDateTime()


def _in(column, values):
    return f"{column} in ({','.join(repr(v) for v in values)})"


USER_ROLES = ('admin', 'seller', 'readonly')
EMAIL_STATUSES = ('new', 'in_progress', 'replied', 'follow_up')
PRIORITIES = ('low', 'medium', 'high')
WAITLIST_STATUSES = ('waiting', 'contacted', 'converted', 'inactive')
VEHICLE_STATUSES = ('available', 'reserved', 'sold')
FUEL_TYPES = ('gasoline', 'diesel', 'hybrid', 'electric')
TRANSMISSIONS = ('manual', 'automatic')
STATS_COUNTERS = (
    'total_emails',
    'ai_responses',
    'human_escalations',
    'avg_response_time_minutes',
    'total_calls',
    'ai_handled_calls',
    'transferred_calls',
    'avg_call_duration_seconds',
    'waitlist_conversions',
)


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('username', sa.Text(), nullable=False),
        sa.Column('password', sa.Text(), nullable=False),
        sa.Column('display_name', sa.Text(), nullable=True),
        sa.Column('role', sa.String(20), nullable=False, server_default='seller'),
        sa.Column('created_at', _TS, nullable=True, server_default=sa.func.now()),
        sa.CheckConstraint(_in('role', USER_ROLES), name='ck_users_role'),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'clients',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=True),
        sa.Column('phone', sa.Text(), nullable=True),
        sa.Column('sms_consent', sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', _TS, nullable=True, server_default=sa.func.now()),
    )
    op.create_index('idx_clients_created_at', 'clients', ['created_at'])

    op.create_table(
        'email_cases',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('client_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('subject', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('sender_email', sa.Text(), nullable=False),
        sa.Column('sender_name', sa.Text(), nullable=True),
        sa.Column('attachments', StringArray(), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='new'),
        sa.Column('priority', sa.String(20), nullable=False, server_default='medium'),
        sa.Column('ai_reason', sa.Text(), nullable=True),
        sa.Column('needs_human', sa.Boolean(), nullable=True, server_default=sa.true()),
        sa.Column('assigned_to', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('vehicle_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('internal_notes', sa.Text(), nullable=True),
        sa.Column('draft_response', sa.Text(), nullable=True),
        sa.Column('received_at', _TS, nullable=True, server_default=sa.func.now()),
        sa.Column('replied_at', _TS, nullable=True),
        sa.CheckConstraint(_in('status', EMAIL_STATUSES), name='ck_email_cases_status'),
        sa.CheckConstraint(_in('priority', PRIORITIES), name='ck_email_cases_priority'),
    )
    op.create_index('idx_email_cases_received_at', 'email_cases', ['received_at'])
    op.create_index('idx_email_cases_status_priority', 'email_cases', ['status', 'priority'])
    op.create_index('idx_email_cases_client_id', 'email_cases', ['client_id'])
    op.create_index('idx_email_cases_assigned_to', 'email_cases', ['assigned_to'])
    op.create_index('idx_email_cases_vehicle_id', 'email_cases', ['vehicle_id'])

    op.create_table(
        'vehicles',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('reference', sa.Text(), nullable=False),
        sa.Column('brand', sa.Text(), nullable=False),
        sa.Column('model', sa.Text(), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('fuel', sa.String(20), nullable=False),
        sa.Column('transmission', sa.String(20), nullable=False),
        sa.Column('mileage', sa.Integer(), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('color', sa.Text(), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='available'),
        sa.Column('ai_usable', sa.Boolean(), nullable=True, server_default=sa.true()),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('photos', StringArray(), nullable=True),
        sa.Column('internal_notes', sa.Text(), nullable=True),
        sa.Column('created_at', _TS, nullable=True, server_default=sa.func.now()),
        sa.UniqueConstraint('reference', name='uq_vehicles_reference'),
        sa.CheckConstraint(_in('fuel', FUEL_TYPES), name='ck_vehicles_fuel'),
        sa.CheckConstraint(_in('transmission', TRANSMISSIONS), name='ck_vehicles_transmission'),
        sa.CheckConstraint(_in('status', VEHICLE_STATUSES), name='ck_vehicles_status'),
        sa.CheckConstraint('mileage >= 0', name='ck_vehicles_mileage_non_negative'),
        sa.CheckConstraint('price >= 0', name='ck_vehicles_price_non_negative'),
    )
    op.create_index('idx_vehicles_status', 'vehicles', ['status'])
    op.create_index('idx_vehicles_created_at', 'vehicles', ['created_at'])

    op.create_table(
        'waitlist_requests',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('client_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('client_name', sa.Text(), nullable=False),
        sa.Column('phone', sa.Text(), nullable=False),
        sa.Column('sms_consent', sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column('status', sa.String(20), nullable=False, server_default='waiting'),
        sa.Column('priority', sa.String(20), nullable=False, server_default='medium'),
        sa.Column('brand_preference', sa.Text(), nullable=True),
        sa.Column('model_preference', sa.Text(), nullable=True),
        sa.Column('year_min', sa.Integer(), nullable=True),
        sa.Column('year_max', sa.Integer(), nullable=True),
        sa.Column('fuel_preference', sa.String(20), nullable=True),
        sa.Column('transmission_preference', sa.String(20), nullable=True),
        sa.Column('max_mileage', sa.Integer(), nullable=True),
        sa.Column('max_budget', sa.Integer(), nullable=True),
        sa.Column('color_preference', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('contact_history', sa.Text(), nullable=True),
        sa.Column('created_at', _TS, nullable=True, server_default=sa.func.now()),
        sa.Column('last_contacted_at', _TS, nullable=True),
        sa.CheckConstraint(_in('status', WAITLIST_STATUSES), name='ck_waitlist_requests_status'),
        sa.CheckConstraint(_in('priority', PRIORITIES), name='ck_waitlist_requests_priority'),
        sa.CheckConstraint(
            f"fuel_preference IS NULL OR {_in('fuel_preference', FUEL_TYPES)}",
            name='ck_waitlist_requests_fuel_preference',
        ),
        sa.CheckConstraint(
            f"transmission_preference IS NULL OR {_in('transmission_preference', TRANSMISSIONS)}",
            name='ck_waitlist_requests_transmission_preference',
        ),
    )
    op.create_index('idx_waitlist_requests_status', 'waitlist_requests', ['status'])
    op.create_index('idx_waitlist_requests_created_at', 'waitlist_requests', ['created_at'])
    op.create_index('idx_waitlist_requests_client_id', 'waitlist_requests', ['client_id'])

    op.create_table(
        'knowledge_items',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('category', sa.Text(), nullable=False),
        sa.Column('key', sa.Text(), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.Column('updated_at', _TS, nullable=True, server_default=sa.func.now()),
        sa.Column('updated_by', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('created_at', _TS, nullable=True, server_default=sa.func.now()),
    )
    op.create_index('idx_knowledge_items_category', 'knowledge_items', ['category'])

    op.create_table(
        'daily_stats',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('date', _TS, nullable=False),
        sa.Column('total_emails', sa.Integer(), nullable=True, server_default='0'),
        sa.Column('ai_responses', sa.Integer(), nullable=True, server_default='0'),
        sa.Column('human_escalations', sa.Integer(), nullable=True, server_default='0'),
        sa.Column('avg_response_time_minutes', sa.Integer(), nullable=True),
        sa.Column('total_calls', sa.Integer(), nullable=True, server_default='0'),
        sa.Column('ai_handled_calls', sa.Integer(), nullable=True, server_default='0'),
        sa.Column('transferred_calls', sa.Integer(), nullable=True, server_default='0'),
        sa.Column('avg_call_duration_seconds', sa.Integer(), nullable=True),
        sa.Column('waitlist_conversions', sa.Integer(), nullable=True, server_default='0'),
        *(
            sa.CheckConstraint(f'{col} IS NULL OR {col} >= 0', name=f'ck_daily_stats_{col}_non_negative')
            for col in STATS_COUNTERS
        ),
    )
    op.create_index('idx_daily_stats_date', 'daily_stats', ['date'])


def downgrade() -> None:
    op.drop_index('idx_daily_stats_date', table_name='daily_stats')
    op.drop_table('daily_stats')
    op.drop_index('idx_knowledge_items_category', table_name='knowledge_items')
    op.drop_table('knowledge_items')
    for name in ('idx_waitlist_requests_client_id', 'idx_waitlist_requests_created_at', 'idx_waitlist_requests_status'):
        op.drop_index(name, table_name='waitlist_requests')
    op.drop_table('waitlist_requests')
    op.drop_index('idx_vehicles_created_at', table_name='vehicles')
    op.drop_index('idx_vehicles_status', table_name='vehicles')
    op.drop_table('vehicles')
    for name in (
        'idx_email_cases_vehicle_id',
        'idx_email_cases_assigned_to',
        'idx_email_cases_client_id',
        'idx_email_cases_status_priority',
        'idx_email_cases_received_at',
    ):
        op.drop_index(name, table_name='email_cases')
    op.drop_table('email_cases')
    op.drop_index('idx_clients_created_at', table_name='clients')
    op.drop_table('clients')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
