"""
Модуль для загрузки и валидации конфигурации приложения.

Обеспечивает загрузку параметров из config/settings.ini с валидацией.
Если файл не задан явно и отсутствует, используются значения по умолчанию.
"""

import configparser
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field


DEFAULT_CONFIG_PATH = "config/settings.ini"
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class OrganizerConfig:
    """Конфигурация правил сортировки."""
    no_extension_label: str = "no_extension"
    skip_organized: bool = True


@dataclass
class LoggingConfig:
    """Конфигурация логирования."""
    level: str = "INFO"
    log_file: Optional[Path] = None
    max_log_size: int = 10
    backup_count: int = 5
    colored: bool = True


@dataclass
class Config:
    """Основная конфигурация приложения."""
    organizer: OrganizerConfig = field(default_factory=OrganizerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """Класс для загрузки и валидации конфигурации."""

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        """
        Инициализация загрузчика конфигурации.

        Args:
            config_path: Путь к файлу конфигурации
        """
        self.config_path = Path(config_path)
        self._config: Optional[Config] = None

    def load_config(self) -> Config:
        """
        Загружает конфигурацию из файла.

        Returns:
            Config: Объект конфигурации

        Raises:
            FileNotFoundError: Если файл конфигурации не найден
            ValueError: Если конфигурация некорректна
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        config_parser = configparser.ConfigParser()
        config_parser.read(self.config_path, encoding='utf-8')

        try:
            organizer_config = self._load_organizer_config(config_parser)
            logging_config = self._load_logging_config(config_parser)

            self._config = Config(
                organizer=organizer_config,
                logging=logging_config
            )

            self._validate_config()

            return self._config

        except (configparser.Error, ValueError) as e:
            self._config = None
            raise ValueError(f"Configuration error: {e}")

    def _load_organizer_config(self, parser: configparser.ConfigParser) -> OrganizerConfig:
        """Загружает правила сортировки."""
        section = 'organizer'

        if not parser.has_section(section):
            raise ValueError(f"Section '{section}' not found in configuration")

        return OrganizerConfig(
            no_extension_label=parser.get(section, 'no_extension_label', fallback='no_extension').strip(),
            skip_organized=parser.getboolean(section, 'skip_organized', fallback=True)
        )

    def _load_logging_config(self, parser: configparser.ConfigParser) -> LoggingConfig:
        """Загружает конфигурацию логирования."""
        section = 'logging'

        if not parser.has_section(section):
            raise ValueError(f"Section '{section}' not found in configuration")

        # Пустое значение означает вывод только в консоль
        log_file_value = parser.get(section, 'log_file', fallback='').strip()
        log_file = Path(log_file_value) if log_file_value else None

        return LoggingConfig(
            level=parser.get(section, 'level', fallback='INFO').strip(),
            log_file=log_file,
            max_log_size=parser.getint(section, 'max_log_size', fallback=10),
            backup_count=parser.getint(section, 'backup_count', fallback=5),
            colored=parser.getboolean(section, 'colored', fallback=True)
        )

    def _validate_config(self) -> None:
        """Валидирует загруженную конфигурацию."""
        if not self._config:
            raise ValueError("Configuration is not loaded")

        validate_config(self._config)

    def get_config(self) -> Config:
        """
        Возвращает загруженную конфигурацию.

        Returns:
            Config: Объект конфигурации

        Raises:
            ValueError: Если конфигурация не загружена
        """
        if self._config is None:
            raise ValueError("Configuration is not loaded. Call load_config() first.")
        return self._config

    def reload_config(self) -> Config:
        """
        Перезагружает конфигурацию из файла.

        Returns:
            Config: Обновленный объект конфигурации
        """
        self._config = None
        return self.load_config()


def validate_config(config: Config) -> None:
    """
    Проверяет значения конфигурации.

    Raises:
        ValueError: Если найдено некорректное значение
    """
    label = config.organizer.no_extension_label
    if not label:
        raise ValueError("no_extension_label must not be empty")
    # Метка становится именем одного каталога
    if label in ('.', '..') or '/' in label or '\\' in label:
        raise ValueError(f"Invalid no_extension_label: {label}")

    if config.logging.level.upper() not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid logging level: {config.logging.level}")

    if config.logging.max_log_size <= 0:
        raise ValueError("max_log_size must be greater than 0")

    if config.logging.backup_count < 0:
        raise ValueError("backup_count must not be negative")


def default_config() -> Config:
    """Возвращает конфигурацию по умолчанию."""
    return Config()


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Config:
    """
    Удобная функция для быстрой загрузки конфигурации.

    Args:
        config_path: Путь к файлу конфигурации

    Returns:
        Config: Объект конфигурации
    """
    loader = ConfigLoader(config_path)
    return loader.load_config()
