"""
ACABOI API v1 - Router aggregation

Estrutura:
- auth: Login, logout, cadastro e perfil
- cadastros: Produtores, propriedades, frigoríficos e categorias
- abates: Abates e acerto financeiro
- escala: Programação de abates
- agenda: Agenda semanal (inclui a página pública)
- importacao: Importação de planilhas
- relatorios: Relatórios e exportação
- dashboard: Resumo geral
- usuarios: Gestão de usuários
"""
from fastapi import APIRouter

from . import abates, agenda, auth, cadastros, dashboard, escala, importacao, relatorios, usuarios

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(cadastros.router)
api_router.include_router(abates.router)
api_router.include_router(escala.router)
api_router.include_router(agenda.router)
api_router.include_router(importacao.router)
api_router.include_router(relatorios.router)
api_router.include_router(dashboard.router)
api_router.include_router(usuarios.router)
