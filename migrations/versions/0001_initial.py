"""initial schema: profiles with VARK vector, classes, materials and completions

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-18
"""
from __future__ import annotations
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'profiles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=True),
        sa.Column('role', sa.String(20), nullable=False, server_default='student'),
        sa.Column('vark_visual', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('vark_auditory', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('vark_reading_writing', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('vark_kinesthetic', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('assessment_completed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint(
            'vark_visual BETWEEN 0 AND 100 AND vark_auditory BETWEEN 0 AND 100 '
            'AND vark_reading_writing BETWEEN 0 AND 100 AND vark_kinesthetic BETWEEN 0 AND 100',
            name='ck_profiles_vark_range',
        ),
    )
    op.create_index('ix_profiles_id', 'profiles', ['id'])
    op.create_index('ix_profiles_email', 'profiles', ['email'], unique=True)

    op.create_table(
        'classes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('teacher_id', sa.Integer(), sa.ForeignKey('profiles.id'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.String(500), nullable=True),
        sa.Column('join_code', sa.String(6), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_classes_teacher_id', 'classes', ['teacher_id'])
    op.create_index('ix_classes_join_code', 'classes', ['join_code'], unique=True)

    op.create_table(
        'class_memberships',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('profiles.id'), nullable=False),
        sa.Column('joined_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('class_id', 'student_id', name='uq_class_student_unique'),
    )
    op.create_index('ix_class_memberships_class_id', 'class_memberships', ['class_id'])
    op.create_index('ix_class_memberships_student_id', 'class_memberships', ['student_id'])

    op.create_table(
        'materials',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('teacher_id', sa.Integer(), sa.ForeignKey('profiles.id'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('subject', sa.String(100), nullable=True),
        sa.Column('content_type', sa.String(50), nullable=False, server_default='text'),
        sa.Column('original_content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_materials_teacher_id', 'materials', ['teacher_id'])

    op.create_table(
        'material_transformations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('material_id', sa.Integer(), sa.ForeignKey('materials.id'), nullable=False),
        sa.Column('learning_style', sa.String(20), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('material_id', 'learning_style', name='uq_material_style_unique'),
    )
    op.create_index('ix_material_transformations_material_id', 'material_transformations', ['material_id'])

    op.create_table(
        'class_materials',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('material_id', sa.Integer(), sa.ForeignKey('materials.id'), nullable=False),
        sa.Column('assigned_at', sa.DateTime(), nullable=False),
        sa.Column('due_date', sa.DateTime(), nullable=True),
        sa.Column('is_visible', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.UniqueConstraint('class_id', 'material_id', name='uq_class_material_unique'),
    )
    op.create_index('ix_class_materials_class_id', 'class_materials', ['class_id'])
    op.create_index('ix_class_materials_material_id', 'class_materials', ['material_id'])

    op.create_table(
        'material_completions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('class_material_id', sa.Integer(), sa.ForeignKey('class_materials.id'), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('profiles.id'), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='not_started'),
        sa.Column('progress_percentage', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('preferred_style', sa.String(20), nullable=True),
        sa.Column('time_spent_seconds', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_accessed_at', sa.DateTime(), nullable=True),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('class_material_id', 'student_id', name='uq_completion_student_unique'),
    )
    op.create_index('ix_material_completions_class_material_id', 'material_completions', ['class_material_id'])
    op.create_index('ix_material_completions_student_id', 'material_completions', ['student_id'])


def downgrade() -> None:
    for table in (
        'material_completions',
        'class_materials',
        'material_transformations',
        'materials',
        'class_memberships',
        'classes',
        'profiles',
    ):
        op.drop_table(table)
