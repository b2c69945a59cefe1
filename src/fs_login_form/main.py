import logging
import sys
from pathlib import Path

from streamlit.web import cli as stcli

from fs_login_form.config import settings

APP_SCRIPT = Path(__file__).parent / "frontend" / "app.py"


# Set up logging for the application
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def main():
    logger.info("Starting login page against %s", settings.login_url)
    sys.argv = ["streamlit", "run", str(APP_SCRIPT)]
    sys.exit(stcli.main())


if __name__ == "__main__":
    # Entry point for the application
    main()
