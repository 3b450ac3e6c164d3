# simplesky/config/logging_config.py
import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

from simplesky.core.utils.error_handler import InvalidArgumentsError

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-18s | %(funcName)-20s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
FILE_HANDLER_NAME = "simplesky_file"
CONSOLE_HANDLER_NAME = "simplesky_console"


def setup_logging(log_level: str = "INFO", log_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Настраивает глобальное логирование с ротацией. Возвращает путь к файлу лога.

    Args:
        log_level (str): DEBUG, INFO, WARNING, ERROR или CRITICAL (обычно SkyConfig.log_level)
        log_dir: Папка для simplesky.log, по умолчанию ./logs
    """
    level = str(log_level).strip().upper()
    if level not in LOG_LEVELS:
        raise InvalidArgumentsError(f"unknown log level: {log_level!r}, expected one of {', '.join(LOG_LEVELS)}")

    log_dir = Path(log_dir) if log_dir is not None else Path.cwd() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "simplesky.log"

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level))

    installed = {handler.get_name() for handler in logger.handlers}
    if FILE_HANDLER_NAME not in installed:
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        # Файл: ротация 10 МБ, 5 файлов
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)

        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

    # httpx пишет полный URL запроса (с ключом API) на уровне INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.info("🔧 Логирование инициализировано")
    return log_file
