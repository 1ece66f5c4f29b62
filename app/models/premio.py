from datetime import date
from typing import TYPE_CHECKING, List

from sqlalchemy import Boolean, Date, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.models.projeto import Projeto


class Premio(Base):
    __tablename__ = "premios"
    # vale também para prémios inativos
    __table_args__ = (UniqueConstraint("nome", "ano_edicao", name="uq_premios_nome_ano_edicao"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    ano_edicao: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    data_inicio: Mapped[date] = mapped_column(Date, nullable=False)
    data_fim: Mapped[date] = mapped_column(Date, nullable=False)

    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    projetos: Mapped[List["Projeto"]] = relationship(back_populates="premio")
