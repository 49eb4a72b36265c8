"""SQLAlchemy declarative base and model imports for Alembic."""
from meowtimedia.db.session import Base

# Import all models so Alembic can see them
from meowtimedia.models.candidate import Candidate  # noqa: F401
from meowtimedia.models.content import Content, SimpleFunFact  # noqa: F401
from meowtimedia.models.feedback import Feedback  # noqa: F401
from meowtimedia.models.progress import CountryProgress  # noqa: F401
from meowtimedia.models.question import Question  # noqa: F401
from meowtimedia.models.reaction import Reaction  # noqa: F401
from meowtimedia.models.user import User  # noqa: F401

__all__ = [
    "Base",
    "User",
    "CountryProgress",
    "Question",
    "Reaction",
    "Feedback",
    "Content",
    "SimpleFunFact",
    "Candidate",
]
