"""
Модуль для операций с файловой системой.

Обеспечивает создание каталогов расширений, перемещение файлов
и получение снимка файлов дерева каталогов.
"""

import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

try:
    from .logger import OrganizerLogger
except ImportError:
    from logger import OrganizerLogger


class FileOperationError(Exception):
    """Исключение для ошибок операций с файлами."""
    pass


class FolderCreationError(FileOperationError):
    """Исключение для случая, когда каталог не удалось создать."""
    pass


@dataclass(frozen=True)
class MoveResult:
    """Результат перемещения одного файла."""
    source: Path
    target: Path
    success: bool
    error: Optional[str] = None

    @classmethod
    def moved(cls, source: Path, target: Path) -> "MoveResult":
        return cls(source=source, target=target, success=True)

    @classmethod
    def failed(cls, source: Path, target: Path, error: Union[str, Exception]) -> "MoveResult":
        return cls(source=source, target=target, success=False, error=str(error))


class FolderManager:
    """Создает каталоги расширений."""

    def __init__(self, logger: OrganizerLogger):
        self.logger = logger

    def ensure(self, folder_path: Union[str, Path]) -> bool:
        """
        Создает каталог, если он не существует.

        Каталог создается без родителей: он всегда лежит рядом с
        существующим файлом. Повторный вызов ничего не делает.

        Args:
            folder_path: Путь к каталогу

        Returns:
            bool: True если каталог был создан, False если уже существовал

        Raises:
            FolderCreationError: Если каталог не удалось создать
        """
        folder_path = Path(folder_path)

        if folder_path.is_dir():
            return False

        try:
            folder_path.mkdir()
        except FileExistsError as e:
            # Каталог мог появиться между проверкой и созданием
            if folder_path.is_dir():
                return False
            error_msg = f"Cannot create folder {folder_path}: a file with this name already exists"
            self.logger.log_error(error_msg)
            raise FolderCreationError(error_msg) from e
        except OSError as e:
            error_msg = f"Cannot create folder {folder_path}: {e}"
            self.logger.log_error(error_msg)
            raise FolderCreationError(error_msg) from e

        self.logger.log_folder_created(folder_path)
        return True


class FileOps:
    """Класс для операций с файловой системой."""

    def __init__(self, logger: OrganizerLogger):
        """
        Инициализация операций с файлами.

        Args:
            logger: Логгер для записи операций
        """
        self.logger = logger
        self.folder_manager = FolderManager(logger)

    def ensure_folder(self, folder_path: Union[str, Path]) -> bool:
        """Создает каталог расширения, см. FolderManager.ensure."""
        return self.folder_manager.ensure(folder_path)

    def list_regular_files(self, root: Union[str, Path]) -> List[Path]:
        """
        Получает снимок обычных файлов дерева каталогов.

        Ссылки на каталоги не обходятся. Порядок детерминирован:
        сначала файлы каталога, затем подкаталоги, всё по алфавиту.

        Args:
            root: Корневой каталог

        Returns:
            List[Path]: Список путей к файлам
        """
        files = []

        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_walk_error):
            dirnames.sort()
            for filename in sorted(filenames):
                file_path = Path(dirpath) / filename
                if file_path.is_file():
                    files.append(file_path)

        return files

    def _on_walk_error(self, error: OSError) -> None:
        self.logger.log_warning(f"Cannot read directory {error.filename}: {error.strerror}")

    def move_file(self, source_path: Union[str, Path], target_dir: Union[str, Path]) -> MoveResult:
        """
        Перемещает файл в каталог, сохраняя имя.

        Существующий файл в целевом каталоге никогда не перезаписывается:
        в этом случае перемещение завершается ошибкой.

        Args:
            source_path: Путь к файлу
            target_dir: Целевой каталог

        Returns:
            MoveResult: Результат перемещения
        """
        source_path = Path(source_path)
        target_path = Path(target_dir) / source_path.name

        if target_path.exists() or target_path.is_symlink():
            result = MoveResult.failed(
                source_path, target_path,
                FileExistsError(f"Target already exists: {target_path}")
            )
        elif not source_path.exists() and not source_path.is_symlink():
            result = MoveResult.failed(
                source_path, target_path,
                FileNotFoundError(f"Source file not found: {source_path}")
            )
        else:
            try:
                shutil.move(str(source_path), str(target_path))
                result = MoveResult.moved(source_path, target_path)
            except (OSError, shutil.Error) as e:
                result = MoveResult.failed(source_path, target_path, e)

        if result.success:
            self.logger.log_file_moved(result.source, result.target)
        else:
            self.logger.log_file_error(result.source, result.error)

        return result


def create_file_ops(logger: OrganizerLogger) -> FileOps:
    """
    Удобная функция для создания объекта операций с файлами.

    Args:
        logger: Логгер

    Returns:
        FileOps: Объект операций с файлами
    """
    return FileOps(logger)
