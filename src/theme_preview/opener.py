"""
File openers - launch the platform's default viewer for a file.

One opener per platform family, picked once at startup with
select_opener(). Launching is fire-and-forget: the child is detached,
never awaited, and a failure to start it is logged rather than raised.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar

from theme_preview.constants import ErrorMessages, Platform

logger = logging.getLogger(__name__)


class FileOpener(ABC):
    """Opens a path in the default viewer."""

    platform: ClassVar[Platform]

    @abstractmethod
    def command(self, path: Path) -> list[str]:
        """The argv that opens ``path``."""

    def _popen_kwargs(self) -> dict[str, Any]:
        return {"start_new_session": True}

    def launch(self, path: Path) -> bool:
        """
        Start the viewer without waiting for it.

        Returns:
            True if the process was started, False otherwise
        """
        command = self.command(path)
        try:
            subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                **self._popen_kwargs(),
            )
        except OSError as e:
            logger.warning(
                ErrorMessages.OPEN_FAILED.format(command=command[0], path=path, reason=e)
            )
            return False
        logger.debug(f"Launched {command}")
        return True


class MacOpener(FileOpener):
    platform = Platform.MACOS

    def command(self, path: Path) -> list[str]:
        return ["open", str(path)]


class WindowsOpener(FileOpener):
    platform = Platform.WINDOWS

    def command(self, path: Path) -> list[str]:
        # start is a cmd builtin; the empty string is the window title
        return ["cmd", "/c", "start", "", str(path)]

    def _popen_kwargs(self) -> dict[str, Any]:
        flags = getattr(subprocess, "DETACHED_PROCESS", 0) | getattr(
            subprocess, "CREATE_NEW_PROCESS_GROUP", 0
        )
        return {"creationflags": flags}


class XdgOpener(FileOpener):
    platform = Platform.POSIX

    def command(self, path: Path) -> list[str]:
        return ["xdg-open", str(path)]


_OPENERS: dict[str, type[FileOpener]] = {
    Platform.MACOS.value: MacOpener,
    Platform.WINDOWS.value: WindowsOpener,
}


def select_opener(platform: str | None = None) -> FileOpener:
    """Pick the opener for a ``sys.platform`` value; default is xdg-open."""
    platform = platform or sys.platform
    return _OPENERS.get(platform, XdgOpener)()
