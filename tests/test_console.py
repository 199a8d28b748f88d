"""
Тесты для модуля console.py
"""

import io
import pytest

from ext_organizer.console import Console, StdConsole


class TestConsole:
    """Тесты для базового интерфейса Console."""

    def test_interface_methods_not_implemented(self):
        """Тест абстрактных методов интерфейса."""
        console = Console()

        with pytest.raises(NotImplementedError):
            console.read_line("prompt")
        with pytest.raises(NotImplementedError):
            console.write_line("text")
        with pytest.raises(NotImplementedError):
            console.write_error("text")


class TestStdConsole:
    """Тесты для StdConsole."""

    def make_console(self, input_text=""):
        stdin = io.StringIO(input_text)
        stdout = io.StringIO()
        stderr = io.StringIO()
        return StdConsole(stdin=stdin, stdout=stdout, stderr=stderr), stdout, stderr

    def test_read_line_writes_prompt(self):
        """Тест вывода приглашения и чтения строки."""
        console, stdout, _ = self.make_console("/data/folder\n")

        assert console.read_line("Enter the folder path: ") == "/data/folder"
        assert stdout.getvalue() == "Enter the folder path: "

    def test_read_line_keeps_inner_spaces(self):
        """Тест сохранения пробелов внутри строки."""
        console, _, _ = self.make_console("My Documents\r\n")

        assert console.read_line() == "My Documents"

    def test_read_line_eof(self):
        """Тест конца ввода."""
        console, _, _ = self.make_console("")

        assert console.read_line("> ") is None

    def test_read_line_sequence(self):
        """Тест последовательного чтения строк."""
        console, _, _ = self.make_console("1\n/tmp\n2\n")

        assert [console.read_line(), console.read_line(), console.read_line()] == ["1", "/tmp", "2"]
        assert console.read_line() is None

    def test_write_line(self):
        """Тест вывода строки в stdout."""
        console, stdout, stderr = self.make_console()

        console.write_line("Main Menu:")
        console.write_line()

        assert stdout.getvalue() == "Main Menu:\n\n"
        assert stderr.getvalue() == ""

    def test_write_error(self):
        """Тест вывода ошибки в stderr."""
        console, stdout, stderr = self.make_console()

        console.write_error("Invalid choice. Please try again.")

        assert stderr.getvalue() == "Invalid choice. Please try again.\n"
        assert stdout.getvalue() == ""

    def test_defaults_to_sys_streams(self, capsys):
        """Тест стандартных потоков по умолчанию."""
        console = StdConsole()

        console.write_line("hello")
        console.write_error("oops")

        captured = capsys.readouterr()
        assert captured.out == "hello\n"
        assert captured.err == "oops\n"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
