from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text, func
from core.database import Base


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False, index=True)
    author = Column(String(255), nullable=True)
    content = Column(Text, nullable=False)
    content_length = Column(Integer, nullable=False)
    words = Column(JSON, nullable=False, default=list)
    # [start, end) token ranges
    sentences = Column(JSON, nullable=False, default=list)
    unique_words = Column(JSON, nullable=False, default=dict)
    page_data = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)
    is_system = Column(Boolean, nullable=False, default=False, index=True)
    uploader_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    lang = Column(String(10), nullable=False, index=True)
    tags = Column(JSON, nullable=False, default=list)
