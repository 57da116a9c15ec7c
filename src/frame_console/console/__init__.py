"""
Console subpackage: terminal host that drives a ConsoleApp with prompt_toolkit and rich.
"""

from frame_console.console.repl_console import ReplConsole

__all__ = ["ReplConsole"]
