# ghostpen/services/launch.py
import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import List

log = logging.getLogger("launch")


class LaunchError(RuntimeError):
    ...


class NotInstalledError(LaunchError):
    ...


def _local_app_data() -> Path:
    if sys.platform == "win32":
        return Path(os.getenv("LOCALAPPDATA", Path.home() / "AppData" / "Local"))
    return Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))


def candidate_paths() -> List[Path]:
    """CLI first (starts only the server), then the desktop app."""
    exe = ".exe" if sys.platform == "win32" else ""
    return [
        Path.home() / ".lmstudio" / "bin" / f"lms{exe}",
        _local_app_data() / "Programs" / "LM Studio" / "LM Studio.exe",
    ]


def _command(path: Path) -> List[str]:
    if path.stem == "lms":
        return [str(path), "server", "start"]
    return [str(path)]


def launch_lm_studio() -> str:
    """Best-effort: spawn LM Studio in the background and return at once."""
    for path in candidate_paths():
        if not path.exists():
            continue
        cmd = _command(path)
        log.info("Launching LM Studio: %s", " ".join(cmd))
        try:
            subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as e:
            raise LaunchError(f"Failed to launch: {e}") from e
        if len(cmd) > 1:
            return f"LM Studio server starting via {path}"
        return f"LM Studio launching from {path}"
    raise NotInstalledError("LM Studio not found. Install from https://lmstudio.ai")
