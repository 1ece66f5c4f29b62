"""create usuarios, autores, avaliadores, premios and projetos

Revision ID: 5b1e0c7a9d24
Revises:
Create Date: 2026-10-18 10:02:41.118402

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1e0c7a9d24'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

AREAS = (
    "CIENCIAS_EXATAS", "CIENCIAS_BIOLOGICAS", "CIENCIAS_HUMANAS", "CIENCIAS_SOCIAIS",
    "ENGENHARIAS", "TECNOLOGIA", "SAUDE", "EDUCACAO", "MEIO_AMBIENTE", "ARTES", "OUTRA",
)
SITUACOES = (
    "Submetido", "Em Avaliação", "Avaliado - Aprovado", "Avaliado - Reprovado",
    "Pendente de Ajustes", "Finalizado", "Cancelado",
)


def upgrade() -> None:
    op.create_table(
        "usuarios",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nome", sa.String(length=120), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("senha", sa.String(length=255), nullable=False),
        sa.Column(
            "role",
            sa.Enum("USER", "ADMIN", name="role", native_enum=False, length=10),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_usuarios_email", "usuarios", ["email"], unique=True)

    for tabela in ("autores", "avaliadores"):
        op.create_table(
            tabela,
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("nome", sa.String(length=120), nullable=False),
            sa.Column("cpf", sa.String(length=14), nullable=False),
            sa.Column("email", sa.String(length=255), nullable=False),
            sa.Column("status", sa.Boolean(), nullable=False),
        )
        op.create_index(f"ix_{tabela}_cpf", tabela, ["cpf"], unique=True)
        op.create_index(f"ix_{tabela}_email", tabela, ["email"], unique=True)
        op.create_index(f"ix_{tabela}_status", tabela, ["status"])

    op.create_table(
        "premios",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nome", sa.String(length=200), nullable=False),
        sa.Column("ano_edicao", sa.Integer(), nullable=False),
        sa.Column("data_inicio", sa.Date(), nullable=False),
        sa.Column("data_fim", sa.Date(), nullable=False),
        sa.Column("status", sa.Boolean(), nullable=False),
        sa.UniqueConstraint("nome", "ano_edicao", name="uq_premios_nome_ano_edicao"),
    )
    op.create_index("ix_premios_ano_edicao", "premios", ["ano_edicao"])
    op.create_index("ix_premios_status", "premios", ["status"])

    op.create_table(
        "projetos",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("titulo", sa.String(length=255), nullable=False),
        sa.Column(
            "area_tematica",
            sa.Enum(*AREAS, name="areatematica", native_enum=False, length=40),
            nullable=False,
        ),
        sa.Column("resumo", sa.Text(), nullable=False),
        sa.Column(
            "situacao",
            sa.Enum(*SITUACOES, name="situacaoprojeto", native_enum=False, length=30),
            nullable=False,
        ),
        sa.Column("nota", sa.Float(), nullable=False),
        sa.Column("parecer_descritivo", sa.Text(), nullable=True),
        sa.Column("premio_id", sa.Integer(), sa.ForeignKey("premios.id"), nullable=False),
        sa.Column("avaliador_id", sa.Integer(), sa.ForeignKey("avaliadores.id"), nullable=True),
        sa.Column("status", sa.Boolean(), nullable=False),
        sa.Column("data_cadastro", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("titulo", "premio_id", name="uq_projetos_titulo_premio"),
    )
    op.create_index("ix_projetos_area_tematica", "projetos", ["area_tematica"])
    op.create_index("ix_projetos_situacao", "projetos", ["situacao"])
    op.create_index("ix_projetos_premio_id", "projetos", ["premio_id"])
    op.create_index("ix_projetos_avaliador_id", "projetos", ["avaliador_id"])
    op.create_index("ix_projetos_status", "projetos", ["status"])

    op.create_table(
        "projeto_autores",
        sa.Column("projeto_id", sa.Integer(), sa.ForeignKey("projetos.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("autor_id", sa.Integer(), sa.ForeignKey("autores.id", ondelete="CASCADE"), primary_key=True),
    )


def downgrade() -> None:
    op.drop_table("projeto_autores")

    for indice in ("status", "avaliador_id", "premio_id", "situacao", "area_tematica"):
        op.drop_index(f"ix_projetos_{indice}", table_name="projetos")
    op.drop_table("projetos")

    op.drop_index("ix_premios_status", table_name="premios")
    op.drop_index("ix_premios_ano_edicao", table_name="premios")
    op.drop_table("premios")

    for tabela in ("avaliadores", "autores"):
        op.drop_index(f"ix_{tabela}_status", table_name=tabela)
        op.drop_index(f"ix_{tabela}_email", table_name=tabela)
        op.drop_index(f"ix_{tabela}_cpf", table_name=tabela)
        op.drop_table(tabela)

    op.drop_index("ix_usuarios_email", table_name="usuarios")
    op.drop_table("usuarios")
