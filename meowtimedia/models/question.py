"""Quiz question: one multiple-choice question for a country, options A-D."""
from sqlalchemy import CheckConstraint, Column, Integer, String, Text

from meowtimedia.db.session import Base

OPTION_LABELS = ("A", "B", "C", "D")


class Question(Base):
    __tablename__ = "questions"
    __table_args__ = (CheckConstraint("answer IN ('A', 'B', 'C', 'D')", name="ck_questions_answer"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    country = Column(String(64), nullable=False, index=True)  # e.g. "japan", "south_korea"
    text = Column(Text, nullable=False)
    option_a = Column(Text, nullable=False)
    option_b = Column(Text, nullable=False)
    option_c = Column(Text, nullable=False)
    option_d = Column(Text, nullable=False)
    answer = Column(String(1), nullable=False)  # A | B | C | D

    @property
    def options(self) -> dict[str, str]:
        return {
            "A": self.option_a,
            "B": self.option_b,
            "C": self.option_c,
            "D": self.option_d,
        }
