# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package logger for Optionkit."""
import logging

logger: logging.Logger = logging.getLogger("optionkit")
