import logging
import sys

from settings import settings

# Conversation goes to stdout, diagnostics to stderr
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

# Keep network chatter out of the console
logging.getLogger("httpx").setLevel(logging.WARNING)
LEVEL = logging.getLevelName(settings.LOG_LEVEL)
logging.getLogger("telegram").setLevel(max(logging.INFO, LEVEL))

logger = logging.getLogger("chatbot")
