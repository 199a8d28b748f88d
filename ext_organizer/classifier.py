"""
Модуль определения метки файла по его расширению.

Метка используется как имя подкаталога, в который перемещается файл.
"""

import os
from pathlib import Path
from typing import Union


NO_EXTENSION_LABEL = "no_extension"


def classify(file_path: Union[str, Path], no_extension_label: str = NO_EXTENSION_LABEL) -> str:
    """
    Возвращает метку файла по последнему суффиксу имени.

    Учитывается только последний суффикс ("a.tar.gz" -> "gz"), регистр
    сохраняется. Точки в начале имени не считаются разделителем, поэтому
    ".bashrc" и "report." не имеют расширения.

    Args:
        file_path: Путь к файлу
        no_extension_label: Метка для файлов без расширения

    Returns:
        str: Расширение без точки или метка для файлов без расширения
    """
    name = Path(file_path).name
    extension = os.path.splitext(name)[1]

    if extension.startswith('.'):
        extension = extension[1:]

    if not extension:
        return no_extension_label
    return extension


class FileClassifier:
    """Классификатор с настраиваемой меткой для файлов без расширения."""

    def __init__(self, no_extension_label: str = NO_EXTENSION_LABEL):
        self.no_extension_label = no_extension_label

    def classify(self, file_path: Union[str, Path]) -> str:
        return classify(file_path, self.no_extension_label)
