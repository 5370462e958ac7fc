from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.core.config import APP_TITLE
from app.schemas.learner_summary import LearnerSummary

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def format_percent(fraction: float) -> str:
    return f"{fraction * 100:.2f}%"


_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)
_env.filters["percent"] = format_percent


def render_learner_report(summaries: Sequence[LearnerSummary]) -> str:
    template = _env.get_template("learner_report.html")
    return template.render(title=APP_TITLE, learners=list(summaries), error=None)


def render_error_report(message: str) -> str:
    template = _env.get_template("learner_report.html")
    return template.render(title=APP_TITLE, learners=[], error=message)
