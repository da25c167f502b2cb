"""
Importação de abates a partir de planilhas
"""
