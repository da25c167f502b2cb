from datetime import date, timedelta

import pytest

from acaboi.services.agenda.calendario import (
    COR_TECNICO_PADRAO,
    agrupar_por_dia,
    cor_tecnico,
    intervalo_semana,
    nome_dia,
    semana_atual,
    semana_do_dia,
    semanas_no_ano,
    total_semana,
)


def test_week_one_starts_on_monday_of_previous_december():
    # 1º de janeiro de 2025 caiu numa quarta-feira
    assert date(2025, 1, 1).weekday() == 2
    intervalo = intervalo_semana(1, 2025)
    assert intervalo.inicio == date(2024, 12, 30)
    assert intervalo.fim == date(2025, 1, 4)
    assert intervalo.domingo == date(2025, 1, 5)


def test_week_one_when_year_starts_on_monday():
    intervalo = intervalo_semana(1, 2024)
    assert intervalo.inicio == date(2024, 1, 1)
    assert intervalo.fim == date(2024, 1, 6)


@pytest.mark.parametrize("ano", range(2000, 2041))
def test_every_week_runs_monday_to_saturday(ano):
    for semana in range(1, semanas_no_ano(ano) + 1):
        intervalo = intervalo_semana(semana, ano)
        assert intervalo.inicio.weekday() == 0
        assert intervalo.fim - intervalo.inicio == timedelta(days=5)
        assert intervalo.fim.weekday() == 5
        assert semana_do_dia(intervalo.inicio) == (semana, ano)


def test_weeks_are_contiguous_across_years():
    ultima = intervalo_semana(semanas_no_ano(2024), 2024)
    primeira = intervalo_semana(1, 2025)
    assert primeira.inicio - ultima.inicio == timedelta(weeks=1)


def test_day_in_first_week_of_next_year_belongs_to_it():
    assert semana_do_dia(date(2024, 12, 31)) == (1, 2025)
    assert semana_do_dia(date(2024, 12, 29)) == (52, 2024)


def test_week_zero_is_rejected():
    with pytest.raises(ValueError):
        intervalo_semana(0, 2024)


def test_semana_atual_uses_given_day():
    assert semana_atual(date(2024, 3, 5)) == semana_do_dia(date(2024, 3, 5))


def test_nome_dia_is_english_regardless_of_locale():
    assert nome_dia(date(2024, 3, 4)) == "Monday"
    assert nome_dia(date(2024, 3, 10)) == "Sunday"


def test_agrupar_por_dia_fills_six_days_and_skips_sunday():
    itens = [
        {"data_abate": "2024-03-04", "quantidade": 30},
        {"data_abate": "2024-03-04T10:00:00", "quantidade": 20},
        {"data_abate": "2024-03-09", "quantidade": 15},
        {"data_abate": "2024-03-10", "quantidade": 99},
        {"data_abate": "2024-03-20", "quantidade": 99},
    ]
    semana, ano = semana_do_dia(date(2024, 3, 4))
    dias = agrupar_por_dia(itens, semana, ano)

    assert [dia.dia_semana for dia in dias] == [
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
    ]
    assert dias[0].label == "Segunda-feira"
    assert dias[0].total == 50
    assert len(dias[0].itens) == 2
    assert dias[5].total == 15
    assert total_semana(dias) == 65


def test_cor_tecnico():
    assert cor_tecnico("caiki") == "#4a6da7"
    assert cor_tecnico("Fulano") == COR_TECNICO_PADRAO
    assert cor_tecnico(None) == COR_TECNICO_PADRAO
