# Switchyard CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Switchyard."""
import logging

logger: logging.Logger = logging.getLogger("switchyard")
