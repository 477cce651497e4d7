"""initial schema: courses, classes, enrollments, attendance, makeup requests

Revision ID: a1c9e4f2b7d0
Revises:
Create Date: 2025-01-05 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c9e4f2b7d0'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('role', sa.Enum('student', 'instructor', 'admin', name='user_role'), nullable=False),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'courses',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('level', sa.Enum('beginner', 'intermediate', 'advanced', name='course_level'), nullable=False),
        sa.Column('type', sa.Enum('pre-recorded', 'live-meet', name='course_type'), nullable=False),
        sa.Column('status', sa.Enum('active', 'inactive', 'draft', name='course_status'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_courses_id', 'courses', ['id'])

    op.create_table(
        'classes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('course_id', sa.Integer(), sa.ForeignKey('courses.id'), nullable=False),
        sa.Column('class_code', sa.String(), nullable=False),
        sa.Column('instructor_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('schedule_days', sa.JSON(), nullable=False),
        sa.Column('start_time', sa.String(), nullable=False),
        sa.Column('end_time', sa.String(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('duration_weeks', sa.Integer(), nullable=True),
        sa.Column('meet_link', sa.String(), nullable=True),
        sa.Column('max_students', sa.Integer(), nullable=False),
        sa.Column('current_students', sa.Integer(), nullable=False),
        sa.Column(
            'status',
            sa.Enum('scheduled', 'ongoing', 'completed', 'cancelled', name='class_status'),
            nullable=False,
        ),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_classes_id', 'classes', ['id'])
    op.create_index('ix_classes_class_code', 'classes', ['class_code'], unique=True)
    op.create_index('ix_classes_course_status', 'classes', ['course_id', 'status'])

    op.create_table(
        'enrollments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('course_id', sa.Integer(), sa.ForeignKey('courses.id'), nullable=False),
        sa.Column(
            'status',
            sa.Enum('enrolled', 'completed', 'dropped', 'pending', name='enrollment_status'),
            nullable=False,
        ),
        sa.Column('makeup_changes_count', sa.Integer(), nullable=False),
        sa.Column('sessions_attended', sa.Integer(), nullable=False),
        sa.Column('total_sessions', sa.Integer(), nullable=False),
        sa.Column('last_synced_at', sa.DateTime(), nullable=True),
        sa.Column('enrolled_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('student_id', 'class_id', name='uq_enrollment_student_class'),
    )
    op.create_index('ix_enrollments_id', 'enrollments', ['id'])

    op.create_table(
        'attendance_records',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('session_date', sa.Date(), nullable=False),
        sa.Column('session_number', sa.Integer(), nullable=True),
        sa.Column('instructor_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('status', sa.Enum('draft', 'finalized', name='attendance_status'), nullable=False),
        sa.Column('updated_at', sa.DateTime()),
        sa.UniqueConstraint('class_id', 'session_date', name='uq_attendance_class_date'),
    )
    op.create_index('ix_attendance_records_id', 'attendance_records', ['id'])
    op.create_index('ix_attendance_records_class_id', 'attendance_records', ['class_id'])

    op.create_table(
        'attendance_entries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('record_id', sa.Integer(), sa.ForeignKey('attendance_records.id'), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('is_present', sa.Boolean(), nullable=False),
        sa.Column('note', sa.String(200), nullable=True),
        sa.Column('marked_at', sa.DateTime()),
        sa.Column('marked_by', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
    )
    op.create_index('ix_attendance_entries_id', 'attendance_entries', ['id'])
    op.create_index('ix_attendance_entries_student_id', 'attendance_entries', ['student_id'])

    op.create_table(
        'makeup_requests',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('original_class_id', sa.Integer(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('original_session_number', sa.Integer(), nullable=False),
        sa.Column('original_date', sa.Date(), nullable=False),
        sa.Column('original_attendance_id', sa.Integer(), sa.ForeignKey('attendance_records.id'), nullable=True),
        sa.Column('makeup_class_id', sa.Integer(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('makeup_session_number', sa.Integer(), nullable=False),
        sa.Column('makeup_date', sa.Date(), nullable=False),
        sa.Column('makeup_time', sa.String(), nullable=False),
        sa.Column('status', sa.Enum('scheduled', 'completed', name='makeup_status'), nullable=False),
        sa.Column('registered_at', sa.DateTime()),
        sa.Column('confirmed_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_makeup_requests_id', 'makeup_requests', ['id'])
    op.create_index('ix_makeup_requests_student_id', 'makeup_requests', ['student_id'])
    op.create_index(
        'ix_makeup_original_session', 'makeup_requests', ['original_class_id', 'original_session_number']
    )


def downgrade() -> None:
    op.drop_table('makeup_requests')
    op.drop_table('attendance_entries')
    op.drop_table('attendance_records')
    op.drop_table('enrollments')
    op.drop_table('classes')
    op.drop_table('courses')
    op.drop_table('users')
