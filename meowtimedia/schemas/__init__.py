from meowtimedia.schemas.admin import AdminUserSchema, CandidateCreateSchema, RoleUpdateSchema
from meowtimedia.schemas.feedback import FeedbackSubmitSchema
from meowtimedia.schemas.quiz import (
    CountryProgressSchema,
    QuizOutSchema,
    QuizQuestionSchema,
    QuizResultSchema,
    QuizResultSubmitSchema,
)
from meowtimedia.schemas.reaction import ReactionOutSchema, ReactionSubmitSchema
from meowtimedia.schemas.user import GoogleProfile, UserDetailSchema, UserOutSchema

__all__ = [
    "AdminUserSchema",
    "CandidateCreateSchema",
    "RoleUpdateSchema",
    "FeedbackSubmitSchema",
    "CountryProgressSchema",
    "QuizOutSchema",
    "QuizQuestionSchema",
    "QuizResultSchema",
    "QuizResultSubmitSchema",
    "ReactionOutSchema",
    "ReactionSubmitSchema",
    "GoogleProfile",
    "UserDetailSchema",
    "UserOutSchema",
]
