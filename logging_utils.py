from __future__ import annotations

import logging
from pathlib import Path

DEFAULT_LOG_PATH = Path.home() / ".local" / "share" / "BeamAnalyser" / "beam_analyser.log"


def configure_file_logger(name: str, log_path: Path = DEFAULT_LOG_PATH) -> logging.Logger:
    """Attach one file handler to logger ``name``; repeated calls reuse it."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    if not any(getattr(h, "baseFilename", None) == str(log_path) for h in logger.handlers):
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
        logger.addHandler(handler)
    return logger
