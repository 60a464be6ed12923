"""create usuarios and transacoes

Revision ID: 001
Revises: 
Create Date: 2025-04-01 10:00:00
"""

from alembic import op
import sqlalchemy as sa

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'usuarios',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('senha', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_usuarios_email', 'usuarios', ['email'], unique=True)

    op.create_table(
        'transacoes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('descricao', sa.String(255), nullable=False),
        sa.Column('tipo', sa.Enum('receita', 'despesa', name='tipotransacao'), nullable=False),
        sa.Column('valor', sa.Numeric(12, 2), nullable=False),
        sa.Column('data', sa.Date(), nullable=False),
        sa.Column('categoria', sa.String(100), nullable=False),
        sa.Column('usuario_id', sa.Integer(), sa.ForeignKey('usuarios.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_transacoes_data', 'transacoes', ['data'])
    op.create_index('idx_transacao_usuario_data', 'transacoes', ['usuario_id', 'data'])


def downgrade() -> None:
    op.drop_index('idx_transacao_usuario_data', table_name='transacoes')
    op.drop_index('ix_transacoes_data', table_name='transacoes')
    op.drop_table('transacoes')
    op.drop_index('ix_usuarios_email', table_name='usuarios')
    op.drop_table('usuarios')
