"""
Profile model - Perfis ligados aos usuários do Supabase Auth
"""
from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.sql import func
from acaboi.core.database import Base


class Profile(Base):
    __tablename__ = "profiles"

    # UUID do usuário no Supabase Auth
    id = Column(String(36), primary_key=True)
    email = Column(String(150), nullable=False, unique=True)
    name = Column(String(150), nullable=False)
    type = Column(String(20), nullable=False, default="tecnico", server_default="tecnico")
    active = Column(Boolean, nullable=False, default=True, server_default="true")
    telefone = Column(String(30), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_sign_in_at = Column(DateTime(timezone=True), nullable=True)
