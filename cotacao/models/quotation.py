# cotacao/models/quotation.py

from sqlalchemy import Column, Integer, Text

from cotacao.core.database import Base


class QuotationRecord(Base):
    """
    Uma linha por cotação buscada. O campo `json` guarda o documento
    completo ({"USDBRL": {...}}) exatamente como foi serializado.
    Apenas inserção: nada é atualizado nem apagado.
    """
    __tablename__ = "quotation"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    json = Column(Text, nullable=False)
