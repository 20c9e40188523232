"""Centralized logging with masking of bank account identifiers."""

from __future__ import annotations

import logging
import os
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# IBAN-like tokens (country, check digits, then at least 8 alphanumerics)
_IBAN_PATTERN = re.compile(r"\b([A-Za-z]{2}\d{2})[\dA-Za-z]{4,}([\dA-Za-z]{4})\b")
# card numbers
_PAN_PATTERN = re.compile(r"\b\d{13,19}\b")


class _MaskingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = _mask(str(record.msg))
        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: _mask_arg(v) for k, v in record.args.items()}
            else:
                record.args = tuple(_mask_arg(a) for a in record.args)
        return True


def _mask_arg(arg: object) -> object:
    # numbers stay numbers so %d and %.2f keep working
    if isinstance(arg, (int, float)):
        return arg
    return _mask(str(arg))


def mask(value: str) -> str:
    """Keep the first and last four characters of an identifier."""
    if len(value) < 8:
        return value
    return value[:4] + "*" * (len(value) - 8) + value[-4:]


def _mask(text: str) -> str:
    def _replace(m: re.Match) -> str:  # type: ignore[type-arg]
        return mask(m.group(0))
    return _PAN_PATTERN.sub(_replace, _IBAN_PATTERN.sub(_replace, text))


def setup_logger(
    name: str = "bankident",
    level: Optional[str] = None,
    log_dir: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the ``name`` logger once and return it.

    ``level`` and ``log_dir`` default to BANKIDENT_LOG_LEVEL and
    BANKIDENT_LOG_DIR. Without a log directory only the console handler
    is installed.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    console_level = (level or os.getenv("BANKIDENT_LOG_LEVEL", "INFO")).upper()
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(getattr(logging, console_level, logging.INFO))
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    console.addFilter(_MaskingFilter())
    logger.addHandler(console)

    log_dir = log_dir or os.getenv("BANKIDENT_LOG_DIR", "").strip()
    if log_dir:
        path = Path(log_dir).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            path / "bankident.log", maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d – %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        fh.addFilter(_MaskingFilter())
        logger.addHandler(fh)

    return logger


logger = setup_logger()
