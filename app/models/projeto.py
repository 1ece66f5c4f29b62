from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.autor import Autor
from app.models.avaliador import Avaliador
from app.models.enums import AreaTematica, SituacaoProjeto
from app.models.premio import Premio

PARECER_PADRAO = "Pendente de avaliação."

projeto_autores = Table(
    "projeto_autores",
    Base.metadata,
    Column("projeto_id", ForeignKey("projetos.id", ondelete="CASCADE"), primary_key=True),
    Column("autor_id", ForeignKey("autores.id", ondelete="CASCADE"), primary_key=True),
)


def _agora() -> datetime:
    return datetime.now(timezone.utc)


def _enum_values(enum_cls):
    return [m.value for m in enum_cls]


class Projeto(Base):
    __tablename__ = "projetos"
    __table_args__ = (UniqueConstraint("titulo", "premio_id", name="uq_projetos_titulo_premio"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    titulo: Mapped[str] = mapped_column(String(255), nullable=False)
    area_tematica: Mapped[AreaTematica] = mapped_column(
        Enum(AreaTematica, native_enum=False, length=40, values_callable=_enum_values),
        nullable=False,
        index=True,
    )
    resumo: Mapped[str] = mapped_column(Text, nullable=False)

    # "Submetido", "Em Avaliação", ... (grava o valor, não o nome do enum)
    situacao: Mapped[SituacaoProjeto] = mapped_column(
        Enum(SituacaoProjeto, native_enum=False, length=30, values_callable=_enum_values),
        nullable=False,
        default=SituacaoProjeto.SUBMETIDO,
        index=True,
    )
    nota: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    parecer_descritivo: Mapped[Optional[str]] = mapped_column(
        Text, nullable=True, default=PARECER_PADRAO
    )

    premio_id: Mapped[int] = mapped_column(ForeignKey("premios.id"), nullable=False, index=True)
    avaliador_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("avaliadores.id"), nullable=True, index=True
    )

    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    data_cadastro: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_agora, server_default=func.now()
    )

    # sempre carregados: toda resposta de projeto leva autores, prémio e avaliador
    autores: Mapped[List[Autor]] = relationship(
        secondary=projeto_autores, back_populates="projetos", lazy="selectin", order_by=Autor.id
    )
    premio: Mapped[Premio] = relationship(back_populates="projetos", lazy="selectin")
    avaliador: Mapped[Optional[Avaliador]] = relationship(back_populates="projetos", lazy="selectin")
