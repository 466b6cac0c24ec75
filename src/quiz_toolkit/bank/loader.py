"""
Module: bank.loader

Purpose:
    Load the quiz configuration and its question files from disk and build
    the QuestionBank. Question files are concatenated in configured order.

Key Functions:
    - load_config(): Parse and validate config.json
    - load_question_files(): Read question records from JSON files
    - load_bank(): Config + questions in one call

Key Classes:
    - LoaderError: Exception for loading failures

Dependencies:
    - json (std)
    - pathlib (std)
    - quiz_toolkit.core.schemas.validator: Payload validation
    - quiz_toolkit.core.utils.serialization: Record -> Question

Used By:
    - cli: quiz-toolkit commands
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Sequence, Tuple

from quiz_toolkit.core.models import Question
from quiz_toolkit.core.schemas.validator import ValidationError, validate_config
from quiz_toolkit.core.utils.serialization import deserialize_question

from .config import QuizConfig
from .question_bank import QuestionBank

logger = logging.getLogger(__name__)


class LoaderError(Exception):
    """Error loading quiz configuration or question files."""
    pass


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise LoaderError(f"File does not exist: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise LoaderError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise LoaderError(f"Could not read {path}: {e}") from e


def load_config(config_path: Path, *, strict: bool = True) -> QuizConfig:
    """
    Load and validate a quiz configuration file.

    Args:
        config_path: Path to config.json
        strict: Also validate against the JSON schema

    Returns:
        QuizConfig with base_dir set to the config file's directory

    Raises:
        LoaderError: If the file is missing, unreadable or invalid

    Example:
        >>> config = load_config(Path("quiz/config.json"))
        >>> config.topic_ids
        ('basics', 'functions')
    """
    config_path = Path(config_path)
    data = _read_json(config_path)

    try:
        validate_config(data, strict=strict)
        config = QuizConfig.from_dict(data, base_dir=config_path.parent)
    except ValidationError as e:
        where = f" at {e.path}" if e.path else ""
        raise LoaderError(f"Invalid configuration {config_path}{where}: {e}") from e
    except ValueError as e:
        raise LoaderError(f"Invalid configuration {config_path}: {e}") from e

    logger.info(f"Loaded configuration with {len(config.topics)} topics from {config_path}")
    return config


def load_question_file(path: Path, *, strict: bool = True) -> List[Question]:
    """
    Load questions from a single question file.

    Records without an id get "<file stem>-<position>".

    Args:
        path: Path to a {"questions": [...]} JSON file
        strict: Also validate each record against the JSON schema

    Returns:
        Questions in file order

    Raises:
        LoaderError: If the file is missing, unreadable or not a question file
        InvalidQuestionData: If a record is malformed
    """
    data = _read_json(path)
    if not isinstance(data, dict) or not isinstance(data.get("questions"), list):
        raise LoaderError(f"{path} has no 'questions' list")

    questions = []
    for position, record in enumerate(data["questions"], start=1):
        questions.append(
            deserialize_question(record, strict=strict, fallback_id=f"{path.stem}-{position}")
        )
    logger.debug(f"Read {len(questions)} questions from {path}")
    return questions


def load_question_files(paths: Sequence[Path], *, strict: bool = True) -> List[Question]:
    """
    Load and concatenate questions from several files.

    Files that cannot be read are skipped with a warning; malformed
    question records are not skipped.

    Args:
        paths: Question file paths, in load order
        strict: Also validate each record against the JSON schema

    Returns:
        All questions in file order

    Raises:
        InvalidQuestionData: If any record is malformed
    """
    questions: List[Question] = []
    for path in paths:
        try:
            questions.extend(load_question_file(Path(path), strict=strict))
        except LoaderError as e:
            logger.warning(f"Could not load {path}: {e}")
            continue
    return questions


def load_bank(config_path: Path, *, strict: bool = True) -> Tuple[QuizConfig, QuestionBank]:
    """
    Load a configuration and build its question bank.

    Args:
        config_path: Path to config.json
        strict: Also run JSON schema validation

    Returns:
        Tuple of (config, bank). The bank may be empty; planning a session
        from an empty bank raises InsufficientData.

    Raises:
        LoaderError: If the configuration cannot be loaded
        InvalidQuestionData: If any question record is malformed
    """
    config = load_config(config_path, strict=strict)
    questions = load_question_files(config.question_paths(), strict=strict)
    bank = QuestionBank.build(questions)

    if bank.is_empty:
        logger.warning(f"No questions loaded for {config_path}")
    else:
        unknown = sorted(set(bank.topic_ids) - set(config.topic_ids))
        if unknown:
            logger.warning(f"Questions reference unconfigured topics (ignored in tallies): {unknown}")
        logger.info(f"Loaded {len(bank)} questions from {len(config.question_files)} file(s)")
    return config, bank
