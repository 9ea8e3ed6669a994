from sqlalchemy import JSON, Column, ForeignKey, Integer, String, UniqueConstraint
from core.database import Base


class UserWordData(Base):
    __tablename__ = "user_word_data"
    __table_args__ = (
        UniqueConstraint("user_id", "lang", name="uq_user_word_data_user_lang"),
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    lang = Column(String(10), nullable=False, index=True)
    # normalized word -> WordStatus value
    word_status_data = Column(JSON, nullable=False, default=dict)
    # normalized word -> user definition
    word_definition_data = Column(JSON, nullable=False, default=dict)
