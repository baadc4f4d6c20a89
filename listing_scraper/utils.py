"""
Utility functions for text normalization and logging.
"""
import logging
import re
from typing import Optional


def init_logger(
    name: str = "listing_scraper",
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    log_file: Optional[str] = "listing_scraper.log"
) -> logging.Logger:
    """Initialize logger with console and optional file handlers."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    console_level_num = getattr(logging, console_level.upper(), logging.INFO)
    ch = logging.StreamHandler()
    ch.setLevel(console_level_num)

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        file_level_num = getattr(logging, file_level.upper(), logging.DEBUG)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level_num)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


def clean_text(s: Optional[str]) -> str:
    """Clean and normalize text by removing extra whitespace."""
    if not s:
        return ""
    s = s.replace("\xa0", " ")
    s = re.sub(r"\s+", " ", s)
    return s.strip()


def clean_block(s: Optional[str], sep: str = "; ") -> str:
    """
    Collapse a multi-line block into a single line.

    Each non-empty line is cleaned and the lines are joined with ``sep``,
    so list-like widgets (key facts, equipment) keep their item boundaries.
    """
    if not s:
        return ""
    lines = [clean_text(line) for line in re.split(r"[\r\n]+", s)]
    return sep.join(line for line in lines if line)


def truncate(s: str, limit: int) -> str:
    """Cut ``s`` to at most ``limit`` characters, marking the cut with an ellipsis."""
    if limit <= 0 or len(s) <= limit:
        return s
    return s[: limit - 1].rstrip() + "…"
