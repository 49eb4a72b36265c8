"""Country content (festivals, food, fun facts) and loading-screen fun facts."""
from sqlalchemy import Column, Integer, String, Text, DateTime, Index

from meowtimedia.db.session import Base, utcnow

CONTENT_TYPES = ("festival", "food", "funfact")


class Content(Base):
    __tablename__ = "country_content"
    __table_args__ = (Index("ix_country_content_country_type", "country", "type"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    country = Column(String(64), nullable=False, index=True)  # e.g. "south_korea"
    type = Column(String(16), nullable=False)  # festival | food | funfact
    # contents: JSON array of {title, date?, content, picture_url?}
    contents_json = Column(Text, nullable=False, default="[]")
    date_updated = Column(DateTime(timezone=True), default=utcnow, nullable=True)


class SimpleFunFact(Base):
    __tablename__ = "simple_funfacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    country = Column(String(64), nullable=False, index=True)  # display name, e.g. "South Korea"
    funfacts_json = Column(Text, nullable=False, default="[]")  # JSON array of strings
