"""
Модуль для настройки и управления логированием приложения.

Информационные сообщения выводятся в stdout, предупреждения и ошибки в
stderr. Запись в файл с ротацией включается только если задан log_file.
"""

import copy
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime

try:
    from .config_loader import LoggingConfig
except ImportError:
    from config_loader import LoggingConfig


LOGGER_NAME = 'ext_organizer'
FILE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
CONSOLE_FORMAT = '[%(levelname)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Форматтер с цветным выводом для консоли."""

    # Цветовые коды ANSI
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        """Форматирует запись лога с цветом."""
        # Копия, чтобы цвет не попал в другие обработчики
        if record.levelname in self.COLORS:
            record = copy.copy(record)
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.COLORS['RESET']}"

        return super().format(record)


class _BelowWarningFilter(logging.Filter):
    """Пропускает только записи ниже WARNING."""

    def filter(self, record):
        return record.levelno < logging.WARNING


class OrganizerLogger:
    """Класс для управления логированием приложения."""

    def __init__(self, config: LoggingConfig):
        """
        Инициализация логгера.

        Args:
            config: Конфигурация логирования
        """
        self.config = config
        self.logger: Optional[logging.Logger] = None
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Настраивает логгер с консольным и, при необходимости, файловым выводом."""
        level = getattr(logging, self.config.level.upper())

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(level)

        # Очищаем существующие обработчики
        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)

        if self.config.colored:
            console_formatter = ColoredFormatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT)
        else:
            console_formatter = logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT)

        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(console_formatter)
        stdout_handler.setLevel(level)
        stdout_handler.addFilter(_BelowWarningFilter())

        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(console_formatter)
        stderr_handler.setLevel(max(level, logging.WARNING))

        self.logger.addHandler(stdout_handler)
        self.logger.addHandler(stderr_handler)

        if self.config.log_file:
            log_file_path = Path(self.config.log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file_path,
                maxBytes=self.config.max_log_size * 1024 * 1024,  # MB -> байты
                backupCount=self.config.backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
            file_handler.setLevel(level)
            self.logger.addHandler(file_handler)

        # Предотвращаем дублирование сообщений
        self.logger.propagate = False

    def get_logger(self) -> logging.Logger:
        """
        Возвращает настроенный логгер.

        Returns:
            logging.Logger: Настроенный логгер
        """
        if self.logger is None:
            raise RuntimeError("Logger is not initialized")
        return self.logger

    def log_organize_start(self, root: Path, total_files: int) -> None:
        """
        Логирует начало сортировки каталога.

        Args:
            root: Корневой каталог
            total_files: Количество файлов в снимке дерева
        """
        self.logger.info(f"🚀 Organizing {root}")
        self.logger.info(f"📊 Files found: {total_files}")

    def log_organize_end(self, moved: int, failed: int, skipped: int,
                         created_folders: int, duration: Optional[float] = None) -> None:
        """
        Логирует итоговую статистику сортировки.

        Args:
            moved: Перемещено файлов
            failed: Ошибок
            skipped: Пропущено (уже на месте)
            created_folders: Создано каталогов
            duration: Продолжительность в секундах
        """
        self.logger.info("📊 Summary:")
        self.logger.info(f"   • Moved: {moved}")
        self.logger.info(f"   • Failed: {failed}")
        self.logger.info(f"   • Skipped: {skipped}")
        self.logger.info(f"   • Folders created: {created_folders}")
        if duration is not None:
            self.logger.info(f"   • Duration: {duration:.2f} s")

    def log_folder_created(self, folder_path: Path) -> None:
        """Логирует создание каталога."""
        self.logger.info(f"📂 Created folder: {folder_path}")

    def log_file_moved(self, source_path: Path, target_path: Path) -> None:
        """
        Логирует успешное перемещение файла.

        Args:
            source_path: Исходный путь
            target_path: Целевой путь
        """
        self.logger.info(f"📁 Moved file: {source_path} -> {target_path}")

    def log_file_error(self, file_path: Path, error) -> None:
        """
        Логирует ошибку при обработке файла.

        Args:
            file_path: Путь к файлу
            error: Исключение или текст причины
        """
        self.logger.error(f"❌ Error moving file {file_path}: {error}")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Логирует пропуск файла."""
        self.logger.debug(f"⏭️ Skipped {file_path}: {reason}")

    def log_progress(self, current: int, total: int) -> None:
        """
        Логирует прогресс выполнения.

        Args:
            current: Обработано файлов
            total: Всего файлов
        """
        self.logger.info(f"📈 Progress: {current}/{total} files processed.")

    def log_completion(self) -> None:
        """Логирует завершение сортировки."""
        self.logger.info("✅ File organization completed successfully!")

    def log_error(self, message: str) -> None:
        """Логирует ошибку."""
        self.logger.error(f"❌ Error: {message}")

    def log_config_loaded(self, config_path: str) -> None:
        """Логирует успешную загрузку конфигурации."""
        self.logger.debug(f"⚙️ Configuration loaded from {config_path}")

    def log_warning(self, message: str) -> None:
        """Логирует предупреждение."""
        self.logger.warning(f"⚠️ {message}")

    def log_timestamp(self, label: str) -> None:
        """Логирует текущее время с подписью."""
        self.logger.debug(f"⏰ {label}: {datetime.now().strftime(DATE_FORMAT)}")


def setup_logger(config: LoggingConfig) -> logging.Logger:
    """
    Удобная функция для быстрой настройки логгера.

    Args:
        config: Конфигурация логирования

    Returns:
        logging.Logger: Настроенный логгер
    """
    organizer_logger = OrganizerLogger(config)
    return organizer_logger.get_logger()


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Получает логгер по имени.

    Args:
        name: Имя логгера

    Returns:
        logging.Logger: Логгер
    """
    return logging.getLogger(name)
