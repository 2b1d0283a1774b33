from sqlalchemy import Column, DateTime, Enum, Float, ForeignKey, Integer, UniqueConstraint, func
from sqlalchemy.orm import relationship

from core.database import Base
from models.enums import LanguageCode, LearningStatus


class UserDictionary(Base):
    __tablename__ = "user_dictionary"
    __table_args__ = (
        UniqueConstraint("user_id", "main_dictionary_id", name="uq_user_dictionary_user_entry"),
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    main_dictionary_id = Column(Integer, ForeignKey("main_dictionary.id"), nullable=False, index=True)
    base_language = Column(Enum(LanguageCode, name="language_code", native_enum=False), nullable=False)
    target_language = Column(Enum(LanguageCode, name="language_code", native_enum=False), nullable=False)
    learning_status = Column(
        Enum(LearningStatus, name="learning_status", native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=LearningStatus.not_started,
    )
    progress = Column(Float, nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)
    time_word_was_started_to_learn = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    entry = relationship("MainDictionary")
