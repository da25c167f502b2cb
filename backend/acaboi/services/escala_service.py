"""
Serviço da escala de abates (programação)
"""
from typing import Any, Dict, List

from sqlalchemy.orm import Session, joinedload

from acaboi.models import EscalaAbate, Protocolo, Tecnico
from acaboi.schemas.escala import CategoriaEscala, FormaPagamento, TipoNegociacao, TipoServico
from acaboi.services.cadastros_service import verificar_propriedade_do_produtor
from acaboi.services.gateway import CrudGateway

escala = CrudGateway(
    EscalaAbate,
    "escala",
    order_by=[EscalaAbate.data_abate, EscalaAbate.id],
    options=[
        joinedload(EscalaAbate.produtor),
        joinedload(EscalaAbate.propriedade),
        joinedload(EscalaAbate.frigorifico),
        joinedload(EscalaAbate.protocolo),
        joinedload(EscalaAbate.tecnico_negociador).joinedload(Tecnico.usuario),
        joinedload(EscalaAbate.tecnico_responsavel).joinedload(Tecnico.usuario),
    ],
)
protocolos = CrudGateway(Protocolo, "protocolo", order_by=[Protocolo.nome])
tecnicos = CrudGateway(
    Tecnico,
    "técnico",
    order_by=[Tecnico.id],
    options=[joinedload(Tecnico.usuario)],
)


def opcoes_escala() -> Dict[str, List[str]]:
    return {
        "tipos_servico": [item.value for item in TipoServico],
        "categorias": [item.value for item in CategoriaEscala],
        "tipos_negociacao": [item.value for item in TipoNegociacao],
        "formas_pagamento": [item.value for item in FormaPagamento],
    }


def _enum_values(dados: Dict[str, Any]) -> Dict[str, Any]:
    return {k: (v.value if hasattr(v, "value") else v) for k, v in dados.items()}


def criar_escala(db: Session, dados: Dict[str, Any]) -> EscalaAbate:
    verificar_propriedade_do_produtor(db, dados["id_produtor"], dados["id_propriedade"])
    return escala.criar(db, _enum_values(dados))


def atualizar_escala(db: Session, item: EscalaAbate, dados: Dict[str, Any]) -> EscalaAbate:
    if "id_produtor" in dados or "id_propriedade" in dados:
        verificar_propriedade_do_produtor(
            db,
            dados.get("id_produtor", item.id_produtor),
            dados.get("id_propriedade", item.id_propriedade),
        )
    return escala.atualizar(db, item, _enum_values(dados))
