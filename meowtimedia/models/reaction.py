"""Reaction model: one emoji reaction by one user on one fun fact."""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship

from meowtimedia.db.session import Base, utcnow

REACTION_TYPES = ("😍", "😮", "🤯", "😂", "❤️")


class Reaction(Base):
    __tablename__ = "reactions"
    __table_args__ = (
        # a user holds at most one reaction per fun fact
        UniqueConstraint("funfact_id", "user_id", name="uq_reactions_funfact_user"),
        Index("ix_reactions_country_funfact", "country_slug", "funfact_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    country_slug = Column(String(64), nullable=False, index=True)
    funfact_id = Column(String(128), nullable=False, index=True)  # e.g. "japan-funfact-0"
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    reaction_type = Column(String(16), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    user = relationship("User", back_populates="reactions")
