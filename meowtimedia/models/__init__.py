from meowtimedia.models.user import User
from meowtimedia.models.progress import CountryProgress
from meowtimedia.models.question import Question
from meowtimedia.models.reaction import Reaction
from meowtimedia.models.feedback import Feedback
from meowtimedia.models.content import Content, SimpleFunFact
from meowtimedia.models.candidate import Candidate

__all__ = [
    "User",
    "CountryProgress",
    "Question",
    "Reaction",
    "Feedback",
    "Content",
    "SimpleFunFact",
    "Candidate",
]
