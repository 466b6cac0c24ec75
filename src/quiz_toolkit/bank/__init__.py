"""
Module: bank

Purpose:
    Question bank and on-disk loading of quiz configuration and question
    files.

Key Functions:
    - load_config(): Parse config.json
    - load_question_files(): Read question files
    - load_bank(): Config and bank in one call

Key Classes:
    - QuestionBank: Immutable topic-indexed question store
    - QuizConfig: Loaded configuration
    - LoaderError: Loading failure
"""

from quiz_toolkit.core.models import InvalidQuestionData

from .config import QuizConfig
from .question_bank import QuestionBank
from .loader import LoaderError, load_bank, load_config, load_question_file, load_question_files

__all__ = [
    "InvalidQuestionData",
    "QuizConfig",
    "QuestionBank",
    "LoaderError",
    "load_bank",
    "load_config",
    "load_question_file",
    "load_question_files",
]
