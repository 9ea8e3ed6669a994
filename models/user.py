from sqlalchemy import Column, Integer, String, DateTime, func
from core.database import Base


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    study_lang = Column(String(10), nullable=False, server_default="en")
    display_lang = Column(String(10), nullable=False, server_default="en")
    # sha256 of the one refresh token currently accepted for this user
    refresh_token_hash = Column(String(64), nullable=True)
