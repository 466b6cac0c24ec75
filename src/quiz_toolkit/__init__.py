"""Top-level package for the quiz toolkit.

Provides subpackages:
- quiz_toolkit.core – immutable models, payload validation, serialization
- quiz_toolkit.bank – question bank and JSON loading
- quiz_toolkit.selection – topic-balanced session planning
- quiz_toolkit.scoring – per-question scoring and per-topic aggregation
- quiz_toolkit.session – session lifecycle (start / submit / restart)
- quiz_toolkit.output – timeline, text and PDF result reports
- quiz_toolkit.cli – console quiz runner
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text(encoding="utf-8")
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.1"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("quiz_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
