"""Candidate model: an admin's suggestion for a new admin/moderator."""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from meowtimedia.db.session import Base, utcnow


class Candidate(Base):
    __tablename__ = "candidates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    suggested_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    candidate_name = Column(String(255), nullable=False)
    candidate_email = Column(String(255), nullable=False)
    reason = Column(Text, nullable=False)
    suggested_role = Column(String(16), nullable=False, default="admin")
    status = Column(String(16), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    suggested_by = relationship("User")
