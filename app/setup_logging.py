import logging, sys

from app.settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"

# Third-party loggers that drown out per-file conversion logs
_NOISY = {
    "multipart": logging.WARNING,       # form parsing, one line per part at DEBUG
    "python_multipart": logging.WARNING,
    "watchdog": logging.WARNING,        # Streamlit/uvicorn reloaders
}

def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Send everything to stdout once per process. Conversion code logs
    through module loggers (`app.converter`, `app.session`), so the root
    handler is all that is needed. Safe to call again on reload.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name, lvl in _NOISY.items():
        logging.getLogger(name).setLevel(lvl)
    return root
