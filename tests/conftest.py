import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import quiz_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

SAMPLE_QUIZ = Path(__file__).resolve().parent.parent / "sample_quiz"


# Common test fixtures
@pytest.fixture
def sample_config_path() -> Path:
    """Path to the bundled sample quiz configuration."""
    return SAMPLE_QUIZ / "config.json"
