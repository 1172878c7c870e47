"""
cli_output.py - Terminal Status Lines

One colored line (two for renames) per completed operation
"""

import sys
from typing import Optional, TextIO

from colorama import Fore, Style
from colorama import init as colorama_init

from core import REMOVED, RENAMED, TRASHED


def init_colors(strip: Optional[bool] = None) -> None:
    """Initialize colorama (strips colors when stdout is not a terminal)"""
    colorama_init(strip=strip)


def print_rename_message(old_name: str, new_name: str, stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    print(f"{Style.BRIGHT}{Fore.GREEN}Renamed {Style.RESET_ALL}'{old_name}'", file=stream)
    print(f"{Fore.GREEN}     ->{Style.RESET_ALL} '{new_name}'", file=stream)


def print_delete_message(name: str, stream: Optional[TextIO] = None) -> None:
    print(f"{Style.BRIGHT}{Fore.RED}Removed {Style.RESET_ALL}'{name}'", file=stream or sys.stdout)


def print_trash_message(name: str, stream: Optional[TextIO] = None) -> None:
    print(f"{Style.BRIGHT}{Fore.YELLOW}Trashed {Style.RESET_ALL}'{name}'", file=stream or sys.stdout)


def report(event: str, src: str, dst: Optional[str] = None) -> None:
    """Reporter passed to core.execute_plan()"""
    if event == RENAMED:
        print_rename_message(src, dst or "")
    elif event == REMOVED:
        print_delete_message(src)
    elif event == TRASHED:
        print_trash_message(src)
    else:
        raise ValueError(f"Unknown event: {event}")
