# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Tabwise."""
import logging

logger: logging.Logger = logging.getLogger("tabwise")
