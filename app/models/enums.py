import enum


class Role(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class AreaTematica(str, enum.Enum):
    CIENCIAS_EXATAS = "CIENCIAS_EXATAS"
    CIENCIAS_BIOLOGICAS = "CIENCIAS_BIOLOGICAS"
    CIENCIAS_HUMANAS = "CIENCIAS_HUMANAS"
    CIENCIAS_SOCIAIS = "CIENCIAS_SOCIAIS"
    ENGENHARIAS = "ENGENHARIAS"
    TECNOLOGIA = "TECNOLOGIA"
    SAUDE = "SAUDE"
    EDUCACAO = "EDUCACAO"
    MEIO_AMBIENTE = "MEIO_AMBIENTE"
    ARTES = "ARTES"
    OUTRA = "OUTRA"


class SituacaoProjeto(str, enum.Enum):
    SUBMETIDO = "Submetido"
    EM_AVALIACAO = "Em Avaliação"
    AVALIADO_APROVADO = "Avaliado - Aprovado"
    AVALIADO_REPROVADO = "Avaliado - Reprovado"
    PENDENTE_AJUSTES = "Pendente de Ajustes"
    FINALIZADO = "Finalizado"
    CANCELADO = "Cancelado"


# resultados que só a avaliação pode gravar
SITUACOES_AVALIACAO = (
    SituacaoProjeto.AVALIADO_APROVADO,
    SituacaoProjeto.AVALIADO_REPROVADO,
    SituacaoProjeto.PENDENTE_AJUSTES,
)

# situações em que a avaliação é o passo esperado
SITUACOES_PRE_AVALIACAO = (
    SituacaoProjeto.SUBMETIDO,
    SituacaoProjeto.EM_AVALIACAO,
    SituacaoProjeto.PENDENTE_AJUSTES,
)

SITUACOES_TERMINAIS = (
    SituacaoProjeto.FINALIZADO,
    SituacaoProjeto.CANCELADO,
)

# transições permitidas pelo update genérico (PUT /projetos/{id})
TRANSICOES_SITUACAO = {
    SituacaoProjeto.SUBMETIDO: {SituacaoProjeto.EM_AVALIACAO, SituacaoProjeto.CANCELADO},
    SituacaoProjeto.EM_AVALIACAO: {SituacaoProjeto.SUBMETIDO, SituacaoProjeto.CANCELADO},
    SituacaoProjeto.PENDENTE_AJUSTES: {
        SituacaoProjeto.SUBMETIDO,
        SituacaoProjeto.EM_AVALIACAO,
        SituacaoProjeto.CANCELADO,
    },
    SituacaoProjeto.AVALIADO_APROVADO: {SituacaoProjeto.FINALIZADO, SituacaoProjeto.CANCELADO},
    SituacaoProjeto.AVALIADO_REPROVADO: {SituacaoProjeto.FINALIZADO, SituacaoProjeto.CANCELADO},
    SituacaoProjeto.FINALIZADO: set(),
    SituacaoProjeto.CANCELADO: set(),
}
