"""Console shell for the daily schedule."""

from astro_sched.shell.config import ShellConfig, load_shell_config
from astro_sched.shell.console import ScheduleConsole

__all__ = ["ScheduleConsole", "ShellConfig", "load_shell_config"]
