"""
Agenda de abates: semanas, grade e filtros
"""
