"""
Главный модуль CLI интерфейса для утилиты сортировки файлов.

По умолчанию запускает интерактивное меню. С аргументом --path
сортирует один каталог и завершает работу.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

try:
    from .config_loader import DEFAULT_CONFIG_PATH, default_config, load_config
    from .logger import OrganizerLogger
    from .organizer import FileOrganizer, create_organizer
    from .console import Console, StdConsole
except ImportError:
    from config_loader import DEFAULT_CONFIG_PATH, default_config, load_config
    from logger import OrganizerLogger
    from organizer import FileOrganizer, create_organizer
    from console import Console, StdConsole


SEPARATOR = "-------------------------------------------"
BANNER = "==========================================="


class MainMenu:
    """Интерактивное меню."""

    ORGANIZE = 1
    EXIT = 2

    def __init__(self, console: Console, organizer: FileOrganizer):
        self.console = console
        self.organizer = organizer

    def run(self) -> int:
        """
        Показывает меню, пока пользователь не выберет выход.

        Конец ввода считается выбором выхода.

        Returns:
            int: Код возврата
        """
        while True:
            self.display_menu()
            choice = self.get_choice()
            if not self.handle_menu_choice(choice):
                break

        self.console.write_line("\nThank you for using File Organizer. Goodbye!")
        return 0

    def display_menu(self) -> None:
        self.console.write_line(SEPARATOR)
        self.console.write_line("Main Menu:")
        self.console.write_line("1. Organize Files in a Folder")
        self.console.write_line("2. Exit")
        self.console.write_line(SEPARATOR)

    def get_choice(self) -> Optional[int]:
        """
        Читает номер пункта меню.

        Returns:
            int или None: Номер пункта, None если ввод не является числом
        """
        raw = self.console.read_line("Enter your choice (1-2): ")
        if raw is None:
            return self.EXIT
        try:
            return int(raw.strip())
        except ValueError:
            return None

    def handle_menu_choice(self, choice: Optional[int]) -> bool:
        """
        Выполняет выбранный пункт.

        Returns:
            bool: False если меню нужно закрыть
        """
        if choice == self.ORGANIZE:
            return self.handle_organize_files()
        if choice == self.EXIT:
            return False

        self.console.write_error("Invalid choice. Please try again.")
        return True

    def handle_organize_files(self) -> bool:
        raw = self.console.read_line("Enter the folder path: ")
        if raw is None:
            return False

        folder_path = raw.strip().strip('"\'')
        if not folder_path:
            self.console.write_error("No folder path entered.")
            return True

        display_welcome_message(self.console)
        self.organizer.organize(folder_path)
        return True


def display_welcome_message(console: Console) -> None:
    console.write_line(BANNER)
    console.write_line("        Welcome to File Organizer")
    console.write_line(BANNER)


class OrganizerCLI:
    """Класс для обработки команд CLI."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or StdConsole()
        self.config = None
        self.logger = None
        self.organizer = None

    def setup(self, config_path: str = DEFAULT_CONFIG_PATH, verbose: bool = False) -> bool:
        """
        Инициализирует CLI с конфигурацией.

        Если файл по пути по умолчанию отсутствует, используются
        встроенные значения. Явно указанный файл обязан существовать.

        Args:
            config_path: Путь к файлу конфигурации
            verbose: Включить отладочный вывод

        Returns:
            bool: True если инициализация успешна
        """
        try:
            if config_path == DEFAULT_CONFIG_PATH and not Path(config_path).exists():
                config = default_config()
                source = "built-in defaults"
            else:
                config = load_config(config_path)
                source = config_path

            if verbose:
                config.logging.level = 'DEBUG'

            self.config = config
            self.logger = OrganizerLogger(self.config.logging)
            self.organizer = create_organizer(self.config, self.logger)

            self.logger.log_config_loaded(source)
            return True

        except Exception as e:
            self.console.write_error(f"❌ Initialization error: {e}")
            return False

    def cmd_interactive(self) -> int:
        """Запускает интерактивное меню."""
        menu = MainMenu(self.console, self.organizer)
        return menu.run()

    def cmd_organize(self, folder_path: str) -> int:
        """
        Сортирует один каталог без меню.

        Returns:
            int: 0 если все файлы обработаны без ошибок, иначе 1
        """
        display_welcome_message(self.console)
        stats = self.organizer.organize(folder_path)

        if stats is None:
            return 1
        return 0 if stats.failed_files == 0 else 1


def create_parser() -> argparse.ArgumentParser:
    """
    Создает парсер аргументов командной строки.

    Returns:
        argparse.ArgumentParser: Настроенный парсер
    """
    parser = argparse.ArgumentParser(
        prog="ext-organizer",
        description="Sort files into subfolders named after their extensions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:

  # Interactive menu
  ext-organizer

  # Organize one folder and exit
  ext-organizer --path ~/Downloads

  # Custom configuration with debug output
  ext-organizer --config my_settings.ini --verbose
        """
    )

    parser.add_argument(
        '--config',
        default=DEFAULT_CONFIG_PATH,
        help=f'Configuration file (default: {DEFAULT_CONFIG_PATH})'
    )
    parser.add_argument(
        '--path',
        help='Organize this folder without the interactive menu'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Debug output'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Главная функция CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = OrganizerCLI()

    if not cli.setup(args.config, verbose=args.verbose):
        return 1

    try:
        if args.path:
            return cli.cmd_organize(args.path)
        return cli.cmd_interactive()

    except KeyboardInterrupt:
        cli.console.write_error("\n⚠️ Operation interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
