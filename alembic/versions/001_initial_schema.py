"""Initial schema: users, properties, jobs, leads, invoices and metrics

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None

user_role = sa.Enum('OWNER', 'ADMIN', 'DISPATCHER', 'TECHNICIAN', 'CUSTOMER', name='userrole')
membership_plan = sa.Enum('BRONZE', 'SILVER', 'GOLD', 'PLATINUM', name='membershipplan')
membership_status = sa.Enum('ACTIVE', 'EXPIRED', 'CANCELLED', 'PENDING', name='membershipstatus')
invoice_status = sa.Enum('DRAFT', 'SENT', 'PAID', 'OVERDUE', 'CANCELLED', name='invoicestatus')
job_type = sa.Enum(
    'REPAIR', 'MAINTENANCE', 'INSPECTION', 'EMERGENCY', 'INSTALLATION', 'WARRANTY', 'CALLBACK', 'ESTIMATE',
    name='jobtype',
)
job_priority = sa.Enum('LOW', 'NORMAL', 'HIGH', 'URGENT', 'EMERGENCY', name='jobpriority')
job_status = sa.Enum(
    'PENDING', 'SCHEDULED', 'EN_ROUTE', 'IN_PROGRESS', 'ON_HOLD', 'COMPLETED', 'CANCELLED',
    name='jobstatus',
)
lead_source = sa.Enum(
    'WEBSITE', 'PHONE', 'REFERRAL', 'GOOGLE_ADS', 'FACEBOOK', 'YELP', 'BBB', 'WALK_IN', 'REPEAT',
    name='leadsource',
)
lead_status = sa.Enum(
    'NEW', 'CONTACTED', 'QUALIFIED', 'ESTIMATE_SENT', 'FOLLOW_UP', 'WON', 'LOST',
    name='leadstatus',
)


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('avatar', sa.String(), nullable=True),
        sa.Column('hashed_password', sa.String(), nullable=True),
        sa.Column('role', user_role, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('last_login_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_name'), 'users', ['name'], unique=False)
    op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)

    op.create_table(
        'properties',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('customer_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=True),
        sa.Column('state', sa.String(length=50), nullable=True),
        sa.Column('zip', sa.String(length=20), nullable=True),
        sa.Column('lat', sa.Float(), nullable=True),
        sa.Column('lng', sa.Float(), nullable=True),
        sa.Column('property_type', sa.String(length=50), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['customer_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_properties_customer_id'), 'properties', ['customer_id'], unique=False)

    op.create_table(
        'units',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('property_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('unit_type', sa.String(length=50), nullable=False),
        sa.Column('brand', sa.String(length=100), nullable=True),
        sa.Column('model', sa.String(length=100), nullable=True),
        sa.Column('serial_number', sa.String(length=100), nullable=True),
        sa.Column('install_date', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_units_property_id'), 'units', ['property_id'], unique=False)

    op.create_table(
        'tech_profiles',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('skills', sa.JSON(), nullable=False),
        sa.Column('certifications', sa.JSON(), nullable=False),
        sa.Column('hire_date', sa.DateTime(), nullable=True),
        sa.Column('truck_number', sa.String(length=20), nullable=True),
        sa.Column('current_lat', sa.Float(), nullable=True),
        sa.Column('current_lng', sa.Float(), nullable=True),
        sa.Column('is_available', sa.Boolean(), nullable=False),
        sa.Column('avg_rating', sa.Float(), nullable=True),
        sa.Column('jobs_completed', sa.Integer(), nullable=False),
        sa.Column('revenue_generated', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id')
    )
    op.create_index(op.f('ix_tech_profiles_is_available'), 'tech_profiles', ['is_available'], unique=False)

    op.create_table(
        'memberships',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('customer_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('plan', membership_plan, nullable=False),
        sa.Column('status', membership_status, nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('renewal_date', sa.DateTime(), nullable=True),
        sa.Column('monthly_rate', sa.Float(), nullable=False),
        sa.Column('visits_per_year', sa.Integer(), nullable=False),
        sa.Column('visits_used', sa.Integer(), nullable=False),
        sa.Column('discount', sa.Float(), nullable=False),
        sa.Column('priority', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['customer_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_memberships_customer_id'), 'memberships', ['customer_id'], unique=False)
    op.create_index(op.f('ix_memberships_status'), 'memberships', ['status'], unique=False)

    op.create_table(
        'jobs',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('job_number', sa.String(length=32), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('job_type', job_type, nullable=False),
        sa.Column('priority', job_priority, nullable=False),
        sa.Column('status', job_status, nullable=False),
        sa.Column('customer_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('property_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('unit_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('technician_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('scheduled_date', sa.DateTime(), nullable=True),
        sa.Column('scheduled_start', sa.String(length=10), nullable=True),
        sa.Column('scheduled_end', sa.String(length=10), nullable=True),
        sa.Column('estimated_cost', sa.Float(), nullable=True),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['customer_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], ),
        sa.ForeignKeyConstraint(['unit_id'], ['units.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['technician_id'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_jobs_job_number'), 'jobs', ['job_number'], unique=True)
    op.create_index(op.f('ix_jobs_job_type'), 'jobs', ['job_type'], unique=False)
    op.create_index(op.f('ix_jobs_status'), 'jobs', ['status'], unique=False)
    op.create_index(op.f('ix_jobs_customer_id'), 'jobs', ['customer_id'], unique=False)
    op.create_index(op.f('ix_jobs_property_id'), 'jobs', ['property_id'], unique=False)
    op.create_index(op.f('ix_jobs_technician_id'), 'jobs', ['technician_id'], unique=False)
    op.create_index(op.f('ix_jobs_scheduled_date'), 'jobs', ['scheduled_date'], unique=False)
    op.create_index(op.f('ix_jobs_created_at'), 'jobs', ['created_at'], unique=False)

    op.create_table(
        'job_number_sequences',
        sa.Column('year', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('last_value', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('year')
    )

    op.create_table(
        'invoices',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('invoice_number', sa.String(length=50), nullable=True),
        sa.Column('customer_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('job_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('subtotal', sa.Float(), nullable=False),
        sa.Column('tax', sa.Float(), nullable=False),
        sa.Column('total', sa.Float(), nullable=False),
        sa.Column('status', invoice_status, nullable=False),
        sa.Column('due_date', sa.DateTime(), nullable=True),
        sa.Column('paid_at', sa.DateTime(), nullable=True),
        sa.Column('payment_method', sa.String(length=50), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['customer_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('invoice_number')
    )
    op.create_index(op.f('ix_invoices_customer_id'), 'invoices', ['customer_id'], unique=False)
    op.create_index(op.f('ix_invoices_job_id'), 'invoices', ['job_id'], unique=False)
    op.create_index(op.f('ix_invoices_status'), 'invoices', ['status'], unique=False)
    op.create_index(op.f('ix_invoices_paid_at'), 'invoices', ['paid_at'], unique=False)

    op.create_table(
        'leads',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('customer_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=True),
        sa.Column('service_needed', sa.String(length=500), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('source', lead_source, nullable=False),
        sa.Column('status', lead_status, nullable=False),
        sa.Column('urgency', sa.Integer(), nullable=True),
        sa.Column('estimated_value', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['customer_id'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_leads_customer_id'), 'leads', ['customer_id'], unique=False)
    op.create_index(op.f('ix_leads_status'), 'leads', ['status'], unique=False)
    op.create_index(op.f('ix_leads_created_at'), 'leads', ['created_at'], unique=False)

    op.create_table(
        'service_requests',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=True),
        sa.Column('service_type', sa.String(length=255), nullable=False),
        sa.Column('urgency', sa.String(length=20), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('preferred_date', sa.String(length=50), nullable=True),
        sa.Column('preferred_time', sa.String(length=50), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_service_requests_status'), 'service_requests', ['status'], unique=False)

    op.create_table(
        'daily_metrics',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('revenue', sa.Float(), nullable=False),
        sa.Column('jobs_completed', sa.Integer(), nullable=False),
        sa.Column('jobs_scheduled', sa.Integer(), nullable=False),
        sa.Column('leads_received', sa.Integer(), nullable=False),
        sa.Column('leads_converted', sa.Integer(), nullable=False),
        sa.Column('missed_calls', sa.Integer(), nullable=False),
        sa.Column('avg_ticket', sa.Float(), nullable=False),
        sa.Column('tech_utilization', sa.Float(), nullable=False),
        sa.Column('membership_sales', sa.Integer(), nullable=False),
        sa.Column('install_revenue', sa.Float(), nullable=False),
        sa.Column('service_revenue', sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_daily_metrics_date'), 'daily_metrics', ['date'], unique=True)


def downgrade():
    op.drop_index(op.f('ix_daily_metrics_date'), table_name='daily_metrics')
    op.drop_table('daily_metrics')
    op.drop_index(op.f('ix_service_requests_status'), table_name='service_requests')
    op.drop_table('service_requests')
    op.drop_table('leads')
    op.drop_table('invoices')
    op.drop_table('job_number_sequences')
    op.drop_table('jobs')
    op.drop_table('memberships')
    op.drop_table('tech_profiles')
    op.drop_table('units')
    op.drop_table('properties')
    op.drop_table('users')

    # Drop enums
    bind = op.get_bind()
    for enum_type in (lead_status, lead_source, job_status, job_priority, job_type,
                      invoice_status, membership_status, membership_plan, user_role):
        enum_type.drop(bind, checkfirst=True)
