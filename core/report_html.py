import datetime
from pathlib import Path
from typing import Optional

import pytz
from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from core.errors import ReportRenderError
from core.models import NotificationPayload

# Resolve template directory relative to this file
TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_NAME = "email.html"
EMAIL_SUBJECT = "SHOE ALERT"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(enabled_extensions=("html",)),
)


def _price_str(value: float) -> str:
    return f"${value:.2f}"


env.filters["price"] = _price_str


def build_html_report(
    results: NotificationPayload,
    generated_at: Optional[datetime.datetime] = None,
) -> str:
    if generated_at is None:
        generated_at = datetime.datetime.now(tz=pytz.UTC)

    ctx = {
        "subject": EMAIL_SUBJECT,
        "results": results,
        "total_matches": sum(len(r.shoes_at_or_below_threshold) for r in results),
        "generated_at": generated_at.strftime("%Y-%m-%d %H:%M %Z"),
    }

    try:
        template = env.get_template(TEMPLATE_NAME)
        return template.render(**ctx)
    except TemplateError as e:
        raise ReportRenderError(f"Failed to render {TEMPLATE_NAME}: {e}") from e
