"""
Тесты для модуля classifier.py
"""

import pytest
from pathlib import Path

from ext_organizer.classifier import classify, FileClassifier, NO_EXTENSION_LABEL


class TestClassify:
    """Тесты для функции classify."""

    @pytest.mark.parametrize("name, expected", [
        ("a.txt", "txt"),
        ("a", NO_EXTENSION_LABEL),
        ("a.tar.gz", "gz"),
        (".bashrc", NO_EXTENSION_LABEL),
        ("report.", NO_EXTENSION_LABEL),
        ("photo.JPG", "JPG"),
        ("..hidden", NO_EXTENSION_LABEL),
        (".config.json", "json"),
    ])
    def test_classify_names(self, name, expected):
        """Тест меток для разных имен файлов."""
        assert classify(name) == expected

    def test_classify_uses_only_file_name(self):
        """Тест того, что точки в каталогах не учитываются."""
        assert classify(Path("release.v2") / "README") == NO_EXTENSION_LABEL
        assert classify("backup.d/data.csv") == "csv"

    def test_classify_custom_label(self):
        """Тест пользовательской метки для файлов без расширения."""
        assert classify("Makefile", no_extension_label="misc") == "misc"
        assert classify("notes.md", no_extension_label="misc") == "md"


class TestFileClassifier:
    """Тесты для класса FileClassifier."""

    def test_default_label(self):
        """Тест метки по умолчанию."""
        classifier = FileClassifier()
        assert classifier.no_extension_label == "no_extension"
        assert classifier.classify("LICENSE") == "no_extension"

    def test_custom_label(self):
        """Тест пользовательской метки."""
        classifier = FileClassifier("other")
        assert classifier.classify(Path("dir/LICENSE")) == "other"
        assert classifier.classify(Path("dir/script.py")) == "py"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
