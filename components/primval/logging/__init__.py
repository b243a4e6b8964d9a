from primval.logging.core import LOGGER_NAMESPACE, get_logger

__all__ = ["LOGGER_NAMESPACE", "get_logger"]
