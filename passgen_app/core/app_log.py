# passgen_app/core/app_log.py
import logging
import os
from config import LOG_FILE

logger = logging.getLogger('PassgenLogger')
logger.setLevel(logging.INFO)

os.makedirs(os.path.dirname(LOG_FILE), exist_ok=True)

file_handler = logging.FileHandler(LOG_FILE)
file_handler.setLevel(logging.INFO)
formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
file_handler.setFormatter(formatter)
if not logger.handlers:
    logger.addHandler(file_handler)

# Ne jamais passer le mot de passe lui-même dans un message.
def log_event(event_type: str, message: str = ""): logger.info(f"{event_type} {message}".strip())
def log_warning(event_type: str, message: str = ""): logger.warning(f"{event_type} {message}".strip())
def log_error(event_type: str, message: str = ""): logger.error(f"{event_type} {message}".strip())
