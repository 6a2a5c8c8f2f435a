"""room documents

Revision ID: 0001
Revises: 
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('room',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('number', sa.String(length=64), nullable=False, server_default=''),
        sa.Column('data', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_room_number', 'room', ['number'])

def downgrade():
    op.drop_index('ix_room_number', table_name='room')
    op.drop_table('room')
