"""
Command implementations exposed to the frontend.

Each command encapsulates one named operation and can be executed
independently of the HTTP layer.
"""

from .greet_command import GreetCommand
from .read_file_command import ReadFileCommand
from .system_info_command import SystemInfoCommand
from .write_file_command import WriteFileCommand

__all__ = ["GreetCommand", "SystemInfoCommand", "ReadFileCommand", "WriteFileCommand"]
