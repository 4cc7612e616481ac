"""Entry point — checks Config, sets up logging, then serves the Streamlit page."""
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler
from streamlit.web import cli as stcli

from xray_assist.config import Config
from xray_assist.constants import MSG_APP_STARTING

APP_PATH = Path(__file__).with_name("app.py")


def setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def main() -> None:
    # fails fast with MissingCredential before any server is started
    config = Config.from_env()
    setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(MSG_APP_STARTING, config.provider, config.model)

    sys.argv = ["streamlit", "run", str(APP_PATH)]
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
