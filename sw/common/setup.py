import os
from pathlib import Path
from dataclasses import dataclass

# Lil helper function to create a directory (and its parents) if missing.
def ensure_directory(path: Path):
    path.mkdir(parents=True,exist_ok=True)
    return path

# Picks the folder that holds all user-specific SessionWindows files. An explicit SESSIONWINDOWS_HOME always wins,
# then %APPDATA% on Windows, then a dot folder in the home directory everywhere else.
def resolve_data_root() -> Path:
    explicit = os.getenv("SESSIONWINDOWS_HOME")
    if explicit:
        return Path(explicit)
    appdata = os.getenv("APPDATA")
    if appdata:
        return Path(appdata) / "SessionWindows"
    return Path.home() / ".sessionwindows"

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    data: Path
    logs: Path

    @staticmethod
    def build():
        # Folder for all user-specific stuff (settings and logs)
        data = ensure_directory(resolve_data_root())
        logs = ensure_directory(data / "logs")
        return ProjectPaths(data=data, logs=logs)
PATHS = ProjectPaths.build()
