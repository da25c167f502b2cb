"""initial_schema

Revision ID: 20261019_initial_schema
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20261019_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


# Semana 1 começa na segunda-feira da semana de 1º de janeiro; o ano da
# semana passa para o seguinte quando o dia cai na semana de 1º de janeiro.
AGENDA_VIEW = """
CREATE VIEW view_agenda_abates AS
WITH base AS (
    SELECT e.*, EXTRACT(YEAR FROM e.data_abate)::int AS ano_civil
    FROM escala_abates e
), semanas AS (
    SELECT b.*,
        CASE
            WHEN b.data_abate >= make_date(b.ano_civil + 1, 1, 1)
                - (EXTRACT(ISODOW FROM make_date(b.ano_civil + 1, 1, 1))::int - 1)
            THEN b.ano_civil + 1
            ELSE b.ano_civil
        END AS ano
    FROM base b
)
SELECT
    s.id,
    s.tipo_servico,
    s.data_embarque,
    s.data_abate,
    s.quantidade,
    s.categoria,
    s.municipio,
    s.tipo_negociacao,
    s.forma_pagamento,
    s.preco_arroba,
    s.preco_cabeca,
    s.observacoes,
    s.id_produtor,
    p.nome AS produtor_nome,
    s.id_propriedade,
    pr.nome AS propriedade_nome,
    s.id_frigorifico,
    f.nome AS frigorifico_nome,
    pt.nome AS protocolo_nome,
    s.id_tecnico_negociador,
    pn.name AS tecnico_negociador_nome,
    tn.empresa AS tecnico_negociador_empresa,
    s.id_tecnico_responsavel,
    prr.name AS tecnico_responsavel_nome,
    tr.empresa AS tecnico_responsavel_empresa,
    (s.data_abate - (make_date(s.ano, 1, 1)
        - (EXTRACT(ISODOW FROM make_date(s.ano, 1, 1))::int - 1))) / 7 + 1 AS semana,
    s.ano,
    trim(to_char(s.data_abate, 'Day')) AS dia_semana
FROM semanas s
LEFT JOIN produtores p ON p.id = s.id_produtor
LEFT JOIN propriedades pr ON pr.id = s.id_propriedade
LEFT JOIN frigorificos f ON f.id = s.id_frigorifico
LEFT JOIN protocolos pt ON pt.id = s.id_protocolo
LEFT JOIN tecnicos tn ON tn.id = s.id_tecnico_negociador
LEFT JOIN profiles pn ON pn.id = tn.id_usuario
LEFT JOIN tecnicos tr ON tr.id = s.id_tecnico_responsavel
LEFT JOIN profiles prr ON prr.id = tr.id_usuario
"""


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'profiles',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('email', sa.String(length=150), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False, server_default='tecnico'),
        sa.Column('active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('telefone', sa.String(length=30), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('last_sign_in_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )

    op.create_table(
        'produtores',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nome', sa.String(length=200), nullable=False),
        sa.Column('endereco', sa.String(length=300), nullable=False),
        sa.Column('cidade', sa.String(length=120), nullable=False),
        sa.Column('cnpj', sa.String(length=20), nullable=False),
        sa.Column('marca_produtor', sa.String(length=120), nullable=False),
        sa.Column('email', sa.String(length=150), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_produtores_id'), 'produtores', ['id'], unique=False)
    op.create_index(op.f('ix_produtores_nome'), 'produtores', ['nome'], unique=False)

    op.create_table(
        'propriedades',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('id_produtor', sa.Integer(), nullable=False),
        sa.Column('nome', sa.String(length=200), nullable=False),
        sa.Column('telefone', sa.String(length=30), nullable=True),
        sa.Column('celular', sa.String(length=30), nullable=True),
        sa.Column('endereco', sa.String(length=300), nullable=False),
        sa.Column('localizacao', sa.String(length=300), nullable=True),
        sa.Column('cidade', sa.String(length=120), nullable=False),
        sa.Column('inscricao_estadual', sa.String(length=40), nullable=True),
        sa.Column('classificacao', sa.String(length=1), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("classificacao IN ('A', 'B', 'C')", name='ck_propriedades_classificacao'),
        sa.ForeignKeyConstraint(['id_produtor'], ['produtores.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_propriedades_id'), 'propriedades', ['id'], unique=False)
    op.create_index(op.f('ix_propriedades_id_produtor'), 'propriedades', ['id_produtor'], unique=False)

    op.create_table(
        'frigorificos',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nome', sa.String(length=200), nullable=False),
        sa.Column('endereco', sa.String(length=300), nullable=False),
        sa.Column('cidade', sa.String(length=120), nullable=False),
        sa.Column('cnpj', sa.String(length=20), nullable=False),
        sa.Column('email', sa.String(length=150), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_frigorificos_id'), 'frigorificos', ['id'], unique=False)
    op.create_index(op.f('ix_frigorificos_nome'), 'frigorificos', ['nome'], unique=False)

    op.create_table(
        'categoria_animais',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nome', sa.String(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('nome'),
    )
    op.create_index(op.f('ix_categoria_animais_id'), 'categoria_animais', ['id'], unique=False)

    op.create_table(
        'abates',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('id_produtor', sa.Integer(), nullable=False),
        sa.Column('id_propriedade', sa.Integer(), nullable=True),
        sa.Column('id_frigorifico', sa.Integer(), nullable=False),
        sa.Column('id_categoria_animal', sa.Integer(), nullable=False),
        sa.Column('nome_lote', sa.String(length=120), nullable=True),
        sa.Column('data_abate', sa.Date(), nullable=False),
        sa.Column('quantidade', sa.Integer(), nullable=False),
        sa.Column('valor_arroba_negociada', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('valor_arroba_prazo_ou_vista', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('valor_total_acerto', sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column('trace', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('hilton', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('novilho_precoce', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('desconto', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('dias_cocho', sa.Integer(), nullable=True),
        sa.Column('reembolso', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('carcacas_avaliadas', sa.Integer(), nullable=True),
        sa.Column('observacao', sa.Text(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('quantidade > 0', name='ck_abates_quantidade'),
        sa.ForeignKeyConstraint(['id_produtor'], ['produtores.id']),
        sa.ForeignKeyConstraint(['id_propriedade'], ['propriedades.id']),
        sa.ForeignKeyConstraint(['id_frigorifico'], ['frigorificos.id']),
        sa.ForeignKeyConstraint(['id_categoria_animal'], ['categoria_animais.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_abates_id'), 'abates', ['id'], unique=False)
    op.create_index(op.f('ix_abates_id_produtor'), 'abates', ['id_produtor'], unique=False)
    op.create_index(op.f('ix_abates_id_frigorifico'), 'abates', ['id_frigorifico'], unique=False)
    op.create_index(op.f('ix_abates_data_abate'), 'abates', ['data_abate'], unique=False)

    op.create_table(
        'protocolos',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nome', sa.String(length=120), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_protocolos_id'), 'protocolos', ['id'], unique=False)

    op.create_table(
        'tecnicos',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('empresa', sa.String(length=120), nullable=True),
        sa.Column('id_usuario', sa.String(length=36), nullable=True),
        sa.ForeignKeyConstraint(['id_usuario'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_tecnicos_id'), 'tecnicos', ['id'], unique=False)

    op.create_table(
        'escala_abates',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tipo_servico', sa.String(length=40), nullable=False),
        sa.Column('data_embarque', sa.Date(), nullable=False),
        sa.Column('data_abate', sa.Date(), nullable=False),
        sa.Column('id_frigorifico', sa.Integer(), nullable=False),
        sa.Column('quantidade', sa.Integer(), nullable=False),
        sa.Column('categoria', sa.String(length=10), nullable=False),
        sa.Column('id_produtor', sa.Integer(), nullable=False),
        sa.Column('id_propriedade', sa.Integer(), nullable=False),
        sa.Column('municipio', sa.String(length=120), nullable=False),
        sa.Column('id_protocolo', sa.Integer(), nullable=True),
        sa.Column('preco_arroba', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('preco_cabeca', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('tipo_negociacao', sa.String(length=40), nullable=False),
        sa.Column('forma_pagamento', sa.String(length=40), nullable=False),
        sa.Column('id_tecnico_negociador', sa.Integer(), nullable=True),
        sa.Column('id_tecnico_responsavel', sa.Integer(), nullable=True),
        sa.Column('observacoes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['id_frigorifico'], ['frigorificos.id']),
        sa.ForeignKeyConstraint(['id_produtor'], ['produtores.id']),
        sa.ForeignKeyConstraint(['id_propriedade'], ['propriedades.id']),
        sa.ForeignKeyConstraint(['id_protocolo'], ['protocolos.id']),
        sa.ForeignKeyConstraint(['id_tecnico_negociador'], ['tecnicos.id']),
        sa.ForeignKeyConstraint(['id_tecnico_responsavel'], ['tecnicos.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_escala_abates_id'), 'escala_abates', ['id'], unique=False)
    op.create_index(op.f('ix_escala_abates_data_abate'), 'escala_abates', ['data_abate'], unique=False)

    op.execute(AGENDA_VIEW)


def downgrade() -> None:
    op.execute("DROP VIEW IF EXISTS view_agenda_abates")
    op.drop_table('escala_abates')
    op.drop_table('tecnicos')
    op.drop_table('protocolos')
    op.drop_table('abates')
    op.drop_table('categoria_animais')
    op.drop_table('frigorificos')
    op.drop_table('propriedades')
    op.drop_table('produtores')
    op.drop_table('profiles')
