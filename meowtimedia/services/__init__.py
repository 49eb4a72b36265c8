from meowtimedia.services.progress import apply_quiz_result, record_quiz_result
from meowtimedia.services.quiz import build_quiz, fisher_yates
from meowtimedia.services.reactions import aggregate_reactions, group_reactions_by_funfact, toggle_reaction

__all__ = [
    "apply_quiz_result",
    "record_quiz_result",
    "build_quiz",
    "fisher_yates",
    "aggregate_reactions",
    "group_reactions_by_funfact",
    "toggle_reaction",
]
