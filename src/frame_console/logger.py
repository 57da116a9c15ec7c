import logging
from typing import Optional, Union

from frame_console.runtime_config import get_data_dir

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO) -> Optional[logging.Handler]:
    """Send frame_console logs to a file so they don't clobber the interactive prompt."""
    log_dir = get_data_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger("frame_console")
    root.setLevel(level)
    # Avoid stacking handlers when called more than once
    for existing in root.handlers:
        if isinstance(existing, logging.FileHandler):
            return None

    file_handler = logging.FileHandler(log_dir / "frame_console.log")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(file_handler)
    root.propagate = False
    return file_handler
