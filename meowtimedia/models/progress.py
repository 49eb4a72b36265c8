"""Country progress: one row per (user, country). Tracks quiz scores and the country stamp."""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from meowtimedia.db.session import Base


class CountryProgress(Base):
    __tablename__ = "country_progress"
    __table_args__ = (UniqueConstraint("user_id", "country_slug", name="uq_country_progress_user_country"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    country_slug = Column(String(64), nullable=False)

    last_quiz_time = Column(DateTime(timezone=True), nullable=True)
    last_quiz_score = Column(Integer, nullable=False, default=0)
    highest_score = Column(Integer, nullable=False, default=0)
    total_attempts = Column(Integer, nullable=False, default=0)
    stamp_collected_at = Column(DateTime(timezone=True), nullable=True)  # null until earned; never cleared

    user = relationship("User", back_populates="progress_entries")
