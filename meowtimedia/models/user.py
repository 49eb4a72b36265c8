"""User model: one per Google account."""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from meowtimedia.db.session import Base, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    google_id = Column(String(255), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    display_name = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    avatar = Column(String(1024), nullable=True)

    role = Column(String(16), nullable=False, default="user")  # user | admin | owner
    admin_expires_at = Column(DateTime(timezone=True), nullable=True)  # null = permanent

    username = Column(String(64), unique=True, nullable=True)
    bio = Column(String(500), nullable=True)

    feedback_stamp_collected_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=True)
    last_login_at = Column(DateTime(timezone=True), default=utcnow, nullable=True)

    progress_entries = relationship("CountryProgress", back_populates="user")
    reactions = relationship("Reaction", back_populates="user")
