#!/usr/bin/env python3
"""
Importa uma planilha de abates (xlsx, xls ou csv) direto no banco.

Usa o mesmo fluxo da API: mapeamento automático das colunas, conversão,
validação e gravação em lote.
"""

import os
import sys

# Adiciona o path do backend
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from acaboi.core.database import SessionLocal
from acaboi.services.importacao.importacao_service import (
    ImportacaoError,
    carregar_planilha,
    importar_arquivo,
    processar_planilha,
)
from acaboi.services.importacao.leitor import ParseError
from acaboi.services.importacao.mapeamento import CAMPOS_LABELS, auto_mapear


def imprimir_mapeamento(mapping):
    print("Mapeamento de colunas:")
    for item in mapping:
        print(f"  {item.coluna:<30} -> {CAMPOS_LABELS[item.campo]}")
    print()


def imprimir_erros(erros):
    for erro in erros:
        print(f"  Linha {erro['row']}: {erro['message']}")


def validar(filename, content):
    """Somente valida, sem gravar."""
    planilha = carregar_planilha(filename, content)
    mapping = auto_mapear(planilha.cabecalho)
    imprimir_mapeamento(mapping)
    processamento = processar_planilha(planilha, mapping)
    print(f"Registros lidos: {len(processamento.registros)}")
    if processamento.valido:
        print("✅ Nenhum erro encontrado")
        return True
    print(f"❌ {processamento.mensagem_bloqueio()}")
    imprimir_erros([erro.to_dict() for erro in processamento.erros])
    return False


def executar(filename, content):
    db = SessionLocal()
    try:
        resultado = importar_arquivo(db, filename, content)
    finally:
        db.close()

    if resultado["erros"]:
        print("❌ Importação bloqueada por erros de validação:")
        imprimir_erros(resultado["erros"])
        return False

    print(f"✅ Registros gravados: {resultado['success']}")
    if resultado["errors"]:
        print(f"❌ Registros não gravados: {resultado['errors']}")
        return False
    return True


def main():
    """Função principal"""
    import argparse

    parser = argparse.ArgumentParser(description='Importa uma planilha de abates')
    parser.add_argument('arquivo', help='Caminho da planilha (.xlsx, .xls ou .csv)')
    parser.add_argument('--dry-run', action='store_true', help='Somente valida, sem gravar no banco')
    args = parser.parse_args()

    with open(args.arquivo, 'rb') as handle:
        content = handle.read()
    filename = os.path.basename(args.arquivo)

    print("=" * 80)
    print(f"IMPORTAÇÃO DE ABATES: {filename}")
    print("=" * 80)
    print()

    try:
        ok = validar(filename, content) if args.dry_run else executar(filename, content)
    except (ParseError, ImportacaoError) as exc:
        print(f"❌ {exc}")
        ok = False

    sys.exit(0 if ok else 1)


if __name__ == '__main__':
    main()
