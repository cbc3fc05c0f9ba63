import functools
from typing import Optional

from core.config import Settings, load_settings, ENV_FILE
from core.emailer import send_email
from core.errors import ConfigError, ShoeAlertError
from core.logger import get_logger
from core.models import NotificationPayload
from core.report import collect_results
from core.report_html import build_html_report
from fetchers import fetch_matches

logger = get_logger(__name__)


def notify(settings: Settings, payload: NotificationPayload) -> bool:
    """Render and send the alert. Returns False when there was nothing to send."""
    if not payload:
        logger.info("No shoes at or below %.2f; no email sent.", settings.threshold_price)
        return False

    html_body = build_html_report(payload)
    send_email(settings, html_body)
    return True


def run_once(settings: Settings) -> bool:
    fetch = functools.partial(fetch_matches, timeout=settings.request_timeout)
    payload = collect_results(settings.query_urls, settings.threshold_price, fetch)
    logger.info(
        "%d of %d quer%s had shoes at or below %.2f.",
        len(payload), len(settings.query_urls),
        "y" if len(settings.query_urls) == 1 else "ies",
        settings.threshold_price,
    )
    return notify(settings, payload)


def main(env_file: Optional[str] = None) -> int:
    try:
        settings = load_settings(env_file or ENV_FILE)
        run_once(settings)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except ShoeAlertError as e:
        logger.error("Run aborted: %s", e)
        return 1
    except Exception as e:
        logger.exception("Fatal shoe alert error: %s", e)
        return 2
    return 0


def cli() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    cli()
