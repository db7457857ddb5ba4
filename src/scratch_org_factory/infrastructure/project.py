"""Local project resolution."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from scratch_org_factory.domain.scratch_org.exceptions import ProjectNotFoundError, ProjectParseError
from scratch_org_factory.domain.scratch_org.ports import ProjectPort, ProjectResolverPort
from scratch_org_factory.infrastructure.logging.logger import get_logger
from scratch_org_factory.infrastructure.utilities.json_utils import read_json_file

logger = get_logger(__name__)

PROJECT_FILE_NAME = "sfdx-project.json"


def find_project_root(start: Optional[str] = None) -> Optional[Path]:
    """Walk up from start (default: cwd) to the first directory holding a project file."""
    current = Path(start or os.getcwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / PROJECT_FILE_NAME).is_file():
            return directory
    return None


class SfdxProject(ProjectPort):
    """A project rooted at a directory containing ``sfdx-project.json``."""

    def __init__(self, path: Path):
        self._path = Path(path)
        self._config: Optional[Dict[str, Any]] = None

    def get_path(self) -> str:
        return str(self._path)

    @property
    def project_file(self) -> Path:
        return self._path / PROJECT_FILE_NAME

    async def resolve_project_config(self) -> Dict[str, Any]:
        """Read and cache the project file contents."""
        if self._config is None:
            try:
                self._config = read_json_file(str(self.project_file))
            except (json.JSONDecodeError, ValueError, OSError) as e:
                raise ProjectParseError(str(self.project_file), str(e)) from e
        return self._config


class SfdxProjectResolver(ProjectResolverPort):
    """Resolves the project containing a directory, caching by root."""

    def __init__(self) -> None:
        self._cache: Dict[Path, SfdxProject] = {}

    async def resolve(self, path: Optional[str] = None) -> SfdxProject:
        start = path or os.getcwd()
        root = find_project_root(start)
        if root is None:
            raise ProjectNotFoundError(str(start))
        if root not in self._cache:
            logger.debug("Resolved project", path=str(root))
            self._cache[root] = SfdxProject(root)
        return self._cache[root]
