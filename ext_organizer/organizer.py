"""
Модуль бизнес-логики сортировки файлов.

Обходит дерево каталогов и перемещает каждый файл в подкаталог
с именем его расширения внутри родительского каталога файла.
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Union

try:
    from .config_loader import Config, OrganizerConfig
    from .logger import OrganizerLogger
    from .classifier import FileClassifier
    from .file_ops import FileOps, FileOperationError
except ImportError:
    from config_loader import Config, OrganizerConfig
    from logger import OrganizerLogger
    from classifier import FileClassifier
    from file_ops import FileOps, FileOperationError


class OrganizeStats:
    """Класс для хранения статистики сортировки."""

    def __init__(self):
        self.total_files = 0
        self.processed_files = 0
        self.moved_files = 0
        self.failed_files = 0
        self.skipped_files = 0
        self.created_folders = 0
        self.start_time = None
        self.end_time = None
        self.errors = []

    def add_error(self, file_path: Path, error) -> None:
        """Добавляет ошибку в список."""
        self.errors.append({
            'file': str(file_path),
            'error': str(error),
            'timestamp': datetime.now()
        })

    def get_duration(self) -> Optional[float]:
        """Возвращает продолжительность сортировки в секундах."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def get_success_rate(self) -> float:
        """Возвращает процент файлов без ошибок."""
        if self.processed_files == 0:
            return 0.0
        return ((self.processed_files - self.failed_files) / self.processed_files) * 100

    def to_dict(self) -> Dict:
        """Преобразует статистику в словарь."""
        return {
            'total_files': self.total_files,
            'processed_files': self.processed_files,
            'moved_files': self.moved_files,
            'failed_files': self.failed_files,
            'skipped_files': self.skipped_files,
            'created_folders': self.created_folders,
            'start_time': self.start_time.isoformat() if self.start_time else None,
            'end_time': self.end_time.isoformat() if self.end_time else None,
            'duration_seconds': self.get_duration(),
            'success_rate': self.get_success_rate(),
            'error_count': len(self.errors)
        }


class FileOrganizer:
    """Основной класс для сортировки файлов по расширениям."""

    def __init__(self, config: OrganizerConfig, logger: OrganizerLogger,
                 file_ops: Optional[FileOps] = None):
        """
        Инициализация сортировщика.

        Args:
            config: Правила сортировки
            logger: Логгер для записи операций
            file_ops: Операции с файлами (по умолчанию создаются с тем же логгером)
        """
        self.config = config
        self.logger = logger
        self.classifier = FileClassifier(config.no_extension_label)
        self.file_ops = file_ops if file_ops is not None else FileOps(logger)

    def organize(self, root: Union[str, Path]) -> Optional[OrganizeStats]:
        """
        Сортирует все файлы дерева каталогов.

        Файлы берутся из снимка, сделанного до создания первого каталога,
        поэтому созданные каталоги и перемещенные файлы повторно не
        обрабатываются. Ошибка одного файла не прерывает обход.

        Args:
            root: Корневой каталог

        Returns:
            OrganizeStats: Статистика сортировки или None, если каталог
            не существует
        """
        root = Path(root)

        if not root.exists():
            self.logger.log_error(f"Folder does not exist: {root}")
            return None
        if not root.is_dir():
            self.logger.log_error(f"Not a directory: {root}")
            return None

        stats = OrganizeStats()
        stats.start_time = datetime.now()
        self.logger.log_timestamp("Started")

        files = self.file_ops.list_regular_files(root)
        stats.total_files = len(files)
        self.logger.log_organize_start(root, stats.total_files)

        for file_path in files:
            self._process_single_file(file_path, stats)
            stats.processed_files += 1
            self.logger.log_progress(stats.processed_files, stats.total_files)

        stats.end_time = datetime.now()

        self.logger.log_completion()
        self.logger.log_organize_end(
            moved=stats.moved_files,
            failed=stats.failed_files,
            skipped=stats.skipped_files,
            created_folders=stats.created_folders,
            duration=stats.get_duration()
        )

        return stats

    def _process_single_file(self, file_path: Path, stats: OrganizeStats) -> None:
        """
        Перемещает один файл в каталог его расширения.

        Args:
            file_path: Путь к файлу
            stats: Статистика текущего запуска
        """
        label = self.classifier.classify(file_path)
        destination = file_path.parent / label

        if self.config.skip_organized and file_path.parent.name == label:
            stats.skipped_files += 1
            self.logger.log_file_skipped(file_path, f"already in '{label}' folder")
            return

        try:
            if self.file_ops.ensure_folder(destination):
                stats.created_folders += 1
        except FileOperationError as e:
            # Без каталога перемещение не выполняется
            stats.failed_files += 1
            stats.add_error(file_path, e)
            self.logger.log_file_error(file_path, e)
            return

        result = self.file_ops.move_file(file_path, destination)
        if result.success:
            stats.moved_files += 1
        else:
            stats.failed_files += 1
            stats.add_error(file_path, result.error)


def create_organizer(config: Config, logger: OrganizerLogger) -> FileOrganizer:
    """
    Удобная функция для создания объекта сортировщика.

    Args:
        config: Конфигурация приложения
        logger: Логгер

    Returns:
        FileOrganizer: Объект сортировщика
    """
    return FileOrganizer(config.organizer, logger)
