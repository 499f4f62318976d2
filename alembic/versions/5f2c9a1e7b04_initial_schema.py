"""initial schema

Revision ID: 5f2c9a1e7b04
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '5f2c9a1e7b04'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(*, updated: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]
    if updated:
        columns.append(
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False)
        )
    return columns


def upgrade() -> None:
    op.create_table(
        'volunteers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=11), nullable=False),
        sa.Column('status', sa.String(length=8), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_volunteers'),
        sa.UniqueConstraint('email', name='ux_volunteers_email'),
    )
    op.create_index('ix_volunteers_email', 'volunteers', ['email'])

    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('unique_id', sa.String(length=32), nullable=False),
        sa.Column('volunteer_id', sa.Uuid(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('species', sa.String(length=100), nullable=False),
        sa.Column('breed', sa.String(length=255), nullable=False),
        sa.Column('age', sa.String(length=50), nullable=False),
        sa.Column('sex', sa.String(length=6), nullable=False),
        sa.Column('size', sa.String(length=6), nullable=False),
        sa.Column('color', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('personality', postgresql.ARRAY(sa.String()), nullable=False, server_default='{}'),
        sa.Column('vaccinated', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('neutered', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('good_with_children', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('good_with_dogs', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('good_with_cats', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('adoption_fee', sa.Float(), nullable=False),
        sa.Column('intake_date', sa.Date(), nullable=False),
        sa.Column('posted_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=18), nullable=False),
        sa.Column('microchip_number', sa.String(length=50), nullable=True),
        sa.Column('medical_history', sa.Text(), nullable=True),
        sa.Column('behavior_notes', sa.Text(), nullable=True),
        sa.Column('intake_source', sa.String(length=100), nullable=True),
        sa.Column('internal_notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['volunteer_id'], ['volunteers.id'],
            name='fk_animals_volunteer_id_volunteers', ondelete='SET NULL',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_animals'),
        sa.UniqueConstraint('unique_id', name='ux_animals_unique_id'),
    )
    op.create_index('ix_animals_unique_id', 'animals', ['unique_id'])
    op.create_index('ix_animals_status', 'animals', ['status'])

    op.create_table(
        'animal_photos',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('url', sa.String(length=1024), nullable=False),
        sa.Column('storage_key', sa.String(length=1024), nullable=False),
        sa.Column('mime_type', sa.String(length=128), nullable=False),
        sa.Column('size_bytes', sa.Integer(), nullable=True),
        sa.Column('is_primary', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['animal_id'], ['animals.id'],
            name='fk_animal_photos_animal_id_animals', ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_animal_photos'),
    )
    op.create_index('ix_animal_photos_animal_id', 'animal_photos', ['animal_id'])

    op.create_table(
        'applications',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('status', sa.String(length=9), nullable=False),
        sa.Column('full_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=False),
        sa.Column('address', sa.String(length=200), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('state', sa.String(length=100), nullable=False),
        sa.Column('zip_code', sa.String(length=20), nullable=False),
        sa.Column('household_type', sa.String(length=50), nullable=False),
        sa.Column('has_children', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('children_ages', sa.String(length=100), nullable=True),
        sa.Column('has_other_pets', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('other_pets_details', sa.Text(), nullable=True),
        sa.Column('experience_with_pets', sa.String(length=50), nullable=False),
        sa.Column('hours_away', sa.String(length=20), nullable=False),
        sa.Column('reason_for_adoption', sa.Text(), nullable=False),
        sa.Column('emergency_contact_name', sa.String(length=100), nullable=False),
        sa.Column('emergency_contact_phone', sa.String(length=20), nullable=False),
        sa.Column('agreed_to_terms', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(updated=False),
        sa.ForeignKeyConstraint(
            ['animal_id'], ['animals.id'], name='fk_applications_animal_id_animals'
        ),
        sa.PrimaryKeyConstraint('id', name='pk_applications'),
    )
    op.create_index('ix_applications_animal_id', 'applications', ['animal_id'])
    op.create_index('ix_applications_status', 'applications', ['status'])

    op.create_table(
        'interviews',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('application_id', sa.Uuid(), nullable=False),
        sa.Column('volunteer_id', sa.Uuid(), nullable=False),
        sa.Column('volunteer_name', sa.String(length=255), nullable=False),
        sa.Column('interview_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('interview_result', sa.Text(), nullable=True),
        sa.Column('final_decision', sa.String(length=8), nullable=False),
        sa.ForeignKeyConstraint(
            ['application_id'], ['applications.id'],
            name='fk_interviews_application_id_applications', ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['volunteer_id'], ['volunteers.id'], name='fk_interviews_volunteer_id_volunteers'
        ),
        sa.PrimaryKeyConstraint('id', name='pk_interviews'),
    )
    op.create_index('ix_interviews_application_id', 'interviews', ['application_id'])
    op.create_index('ix_interviews_volunteer_id', 'interviews', ['volunteer_id'])

    op.create_table(
        'contracts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('application_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('adoption_fee', sa.Numeric(10, 2), nullable=True),
        sa.Column('payment_proof', sa.Text(), nullable=True),
        sa.Column('signature', sa.Text(), nullable=True),
        sa.Column('contract_token', sa.String(length=64), nullable=True),
        sa.Column('token_expires_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('token_used', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('signed_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(updated=False),
        sa.ForeignKeyConstraint(
            ['application_id'], ['applications.id'], name='fk_contracts_application_id_applications'
        ),
        sa.ForeignKeyConstraint(
            ['animal_id'], ['animals.id'], name='fk_contracts_animal_id_animals'
        ),
        sa.PrimaryKeyConstraint('id', name='pk_contracts'),
        sa.UniqueConstraint('contract_token', name='ux_contracts_contract_token'),
    )
    op.create_index('ix_contracts_application_id', 'contracts', ['application_id'])
    op.create_index('ix_contracts_animal_id', 'contracts', ['animal_id'])

    op.create_table(
        'audit_logs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('entity_type', sa.String(length=11), nullable=False),
        sa.Column('entity_id', sa.String(length=64), nullable=False),
        sa.Column('actor_user_id', sa.Uuid(), nullable=True),
        sa.Column('action', sa.String(length=100), nullable=False),
        sa.Column('from_value', sa.JSON(), nullable=True),
        sa.Column('to_value', sa.JSON(), nullable=True),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint('id', name='pk_audit_logs'),
    )
    op.create_index('ix_audit_logs_entity', 'audit_logs', ['entity_type', 'entity_id'])

    op.create_table(
        'email_logs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('to', sa.String(length=255), nullable=False),
        sa.Column('subject', sa.String(length=255), nullable=False),
        sa.Column('template', sa.String(length=100), nullable=False),
        sa.Column('payload', sa.JSON(), nullable=True),
        sa.Column('status', sa.String(length=6), nullable=False),
        sa.Column('error_message', sa.Text(), nullable=True),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint('id', name='pk_email_logs'),
    )


def downgrade() -> None:
    op.drop_table('email_logs')
    op.drop_index('ix_audit_logs_entity', table_name='audit_logs')
    op.drop_table('audit_logs')
    op.drop_index('ix_contracts_animal_id', table_name='contracts')
    op.drop_index('ix_contracts_application_id', table_name='contracts')
    op.drop_table('contracts')
    op.drop_index('ix_interviews_volunteer_id', table_name='interviews')
    op.drop_index('ix_interviews_application_id', table_name='interviews')
    op.drop_table('interviews')
    op.drop_index('ix_applications_status', table_name='applications')
    op.drop_index('ix_applications_animal_id', table_name='applications')
    op.drop_table('applications')
    op.drop_index('ix_animal_photos_animal_id', table_name='animal_photos')
    op.drop_table('animal_photos')
    op.drop_index('ix_animals_status', table_name='animals')
    op.drop_index('ix_animals_unique_id', table_name='animals')
    op.drop_table('animals')
    op.drop_index('ix_volunteers_email', table_name='volunteers')
    op.drop_table('volunteers')
