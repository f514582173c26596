# cotacao/schemas/quotation.py

from pydantic import BaseModel, ConfigDict, Field


class Quotation(BaseModel):
    """
    Leitura do câmbio USD-BRL como vem da AwesomeAPI.
    Todos os campos são texto: nada de converter para Decimal/float aqui,
    o formato original é preservado. Campo ausente na resposta fica "".
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str = ""
    codein: str = ""
    name: str = ""
    high: str = ""
    low: str = ""
    var_bid: str = Field(default="", alias="varBid")
    pct_change: str = Field(default="", alias="pctChange")
    bid: str = ""
    ask: str = ""
    timestamp: str = ""
    create_date: str = ""


class QuotationEnvelope(BaseModel):
    # Formato do documento da API e também do JSON gravado no banco
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    usdbrl: Quotation = Field(default_factory=Quotation, alias="USDBRL")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
