from __future__ import annotations

import logging
import sys
from types import ModuleType

from dotenv import load_dotenv
from textual.logging import TextualHandler

from .config import get_settings_module, load_settings
from .container import build_container
from .ui.app import TimeclockApp, create_app

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: ModuleType) -> None:
    level = getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO)
    log_file = getattr(settings, "LOG_FILE", "")

    # Never log to the terminal the app is drawing on.
    handler: logging.Handler = logging.FileHandler(log_file) if log_file else TextualHandler()
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[handler], force=True)


def build_app() -> TimeclockApp:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = load_settings()
    configure_logging(settings)

    if bool(getattr(settings, "DEBUG", False)):
        logger.info("[timeclock] settings=%s log_level=%s", settings_module, getattr(settings, "LOG_LEVEL", "INFO"))

    return create_app(build_container())


def main() -> int:
    if not sys.stdin.isatty():
        print("not a terminal", file=sys.stderr)
        return 1

    try:
        app = build_app()
        app.run()
    except Exception as e:
        logger.exception("Startup or event loop failed")
        print(f"error running program: {e}", file=sys.stderr)
        return 1

    if app.return_code:
        print(f"error running program: exit code {app.return_code}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
