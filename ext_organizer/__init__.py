"""
Extension Organizer

Утилита для сортировки файлов по подкаталогам с именами их расширений.
"""

__version__ = "1.0.0"
__author__ = "File Organizer Team"
__description__ = "Utility for sorting files into per-extension subfolders"
