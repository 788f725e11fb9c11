import logging

from utils.get_env import get_log_level_env


class HealthCheckFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return "/healthz" not in record.getMessage()


def setup_logging():
    logging.basicConfig(
        level=get_log_level_env(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    access_logger = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, HealthCheckFilter) for f in access_logger.filters):
        access_logger.addFilter(HealthCheckFilter())
