"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-01-15

Creates the cost, revenue, employee and salary period tables.

salary_periods design:
  - one row per (employee, rate) over a date range
  - end_date = NULL means this is the current (open) period
  - a rate change closes the old row (end_date = new start - 1 day)
    and inserts a new open row, nothing is deleted
  - days_in_year (365 | 366) is fixed from the start year at insert time
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(100), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('ix_users_username', 'users', ['username'])

    op.create_table(
        'employees',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
    )

    op.create_table(
        'salary_periods',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('employee_name', sa.String(100), nullable=False),
        sa.Column('yearly_amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('days_in_year', sa.Integer(), nullable=False),
        sa.CheckConstraint('days_in_year IN (365, 366)', name='ck_salary_periods_days_in_year'),
        sa.CheckConstraint(
            'end_date IS NULL OR end_date >= start_date',
            name='ck_salary_periods_end_after_start',
        ),
    )
    op.create_index(
        'ix_salary_periods_employee_start', 'salary_periods', ['employee_name', 'start_date']
    )

    op.create_table(
        'task_costs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('vegetable', sa.String(100), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('sub_category', sa.String(100), nullable=True),
        sa.Column('total_hours', sa.Numeric(10, 2), nullable=False),
        sa.Column('supervisor', sa.String(100), nullable=True),
        sa.Column('total_cost', sa.Numeric(12, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_task_costs_vegetable', 'task_costs', ['vegetable'])
    op.create_index('ix_task_costs_created_at', 'task_costs', ['created_at'])

    op.create_table(
        'other_costs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('cost', sa.Numeric(12, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        'other_costs_new',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('total', sa.Numeric(12, 2), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
    )
    op.create_index('ix_other_costs_new_year', 'other_costs_new', ['year'])

    for table, group_column in (('seed_costs', 'seed'), ('packaging_costs', 'vegetable')):
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column(group_column, sa.String(100), nullable=False),
            sa.Column('cost', sa.Numeric(12, 2), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )

    op.create_table(
        'soil_products',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('vegetable', sa.String(100), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('cost', sa.Numeric(12, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        'revenues',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('vegetable', sa.String(100), nullable=False),
        sa.Column('total_revenue', sa.String(50), nullable=False),
        sa.Column('year_from', sa.Integer(), nullable=False),
    )
    op.create_index('ix_revenues_vegetable', 'revenues', ['vegetable'])


def downgrade():
    op.drop_table('revenues')
    op.drop_table('soil_products')
    op.drop_table('packaging_costs')
    op.drop_table('seed_costs')
    op.drop_table('other_costs_new')
    op.drop_table('other_costs')
    op.drop_table('task_costs')
    op.drop_index('ix_salary_periods_employee_start', table_name='salary_periods')
    op.drop_table('salary_periods')
    op.drop_table('employees')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
