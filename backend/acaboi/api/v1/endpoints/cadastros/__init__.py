"""
Cadastros Module - Router aggregation

Estrutura:
- produtores: Produtores rurais
- propriedades: Fazendas de cada produtor
- frigorificos: Frigoríficos
- categorias: Categorias de animais
"""
from fastapi import APIRouter

from .produtores import router as produtores_router
from .propriedades import router as propriedades_router
from .frigorificos import router as frigorificos_router
from .categorias import router as categorias_router

router = APIRouter(tags=["cadastros"])

router.include_router(produtores_router)
router.include_router(propriedades_router)
router.include_router(frigorificos_router)
router.include_router(categorias_router)
