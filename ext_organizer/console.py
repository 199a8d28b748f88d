"""
Модуль консольного ввода-вывода.

Меню работает с консолью через этот интерфейс, поэтому в тестах
вместо терминала подставляется объект со сценарием ввода.
"""

import sys
from typing import Optional, TextIO


class Console:
    """Интерфейс консоли: чтение строки и вывод строки."""

    def read_line(self, prompt: str = "") -> Optional[str]:
        """
        Выводит приглашение и читает одну строку.

        Returns:
            str или None: Строка без перевода строки или None при конце ввода
        """
        raise NotImplementedError

    def write_line(self, text: str = "") -> None:
        raise NotImplementedError

    def write_error(self, text: str) -> None:
        raise NotImplementedError


class StdConsole(Console):
    """Консоль на стандартных потоках."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def read_line(self, prompt: str = "") -> Optional[str]:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip('\r\n')

    def write_line(self, text: str = "") -> None:
        print(text, file=self.stdout, flush=True)

    def write_error(self, text: str) -> None:
        print(text, file=self.stderr, flush=True)
