"""Feedback model: the one-time survey answers of a user."""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey

from meowtimedia.db.session import Base, utcnow


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # unique: one submission per user, enforced by the database
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    first_impression = Column(String(16), nullable=False)
    first_impression_other = Column(String(200), nullable=True)
    ease_of_use = Column(Integer, nullable=False)  # 1-5
    issues_json = Column(Text, nullable=False, default='["none"]')  # JSON array of issue types
    issues_other = Column(String(200), nullable=True)
    recommendation = Column(Integer, nullable=False)  # 1-5
    referral = Column(String(200), nullable=False)
    additional_feedback = Column(String(1000), nullable=True)

    user_agent = Column(String(512), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
