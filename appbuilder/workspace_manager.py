import os
import shutil
import logging
from typing import List
from .schemas import AppDocument

logger = logging.getLogger(__name__)

class WorkspaceManager:
    def __init__(self, root_dir: str):
        self.root_dir = str(root_dir)
        self.default_workspace = "default"
        self.current_workspace = self.default_workspace
        self._ensure_structure()

    def _ensure_structure(self):
        """Ensures the workspaces root and the default workspace exist."""
        os.makedirs(self.root_dir, exist_ok=True)
        self.create_workspace(self.default_workspace)

    @staticmethod
    def _check_name(name: str, kind: str):
        # Names map to a single path component under the root
        separators = [sep for sep in (os.sep, os.altsep) if sep]
        if not name or name.startswith(".") or any(sep in name for sep in separators):
            raise ValueError(f"Invalid {kind} name: {name!r}")

    def _workspace_dir(self, name: str) -> str:
        self._check_name(name, "workspace")
        return os.path.join(self.root_dir, name)

    def get_workspace_dir(self, workspace_name: str) -> str:
        return self._workspace_dir(workspace_name)

    def get_apps_dir(self, workspace_name: str) -> str:
        return os.path.join(self.get_workspace_dir(workspace_name), "apps")

    def create_workspace(self, name: str):
        path = self.get_workspace_dir(name)
        if not os.path.exists(path):
            os.makedirs(os.path.join(path, "apps"))
            logger.info(f"Created workspace: {name}")
        return path

    def list_workspaces(self):
        if not os.path.exists(self.root_dir):
            return []
        return sorted(d for d in os.listdir(self.root_dir)
                      if os.path.isdir(os.path.join(self.root_dir, d)))

    def set_current_workspace(self, name: str):
        if not os.path.exists(self.get_workspace_dir(name)):
            raise ValueError(f"Workspace {name} does not exist")
        self.current_workspace = name
        logger.info(f"Switched to workspace: {name}")

    def get_current_workspace(self):
        return self.current_workspace

    def delete_workspace(self, name: str):
        path = self._workspace_dir(name)

        if name == self.default_workspace:
            raise ValueError("Cannot delete default workspace")

        if name == self.current_workspace:
            raise ValueError("Cannot delete active workspace")

        if not os.path.exists(path):
            raise ValueError(f"Workspace {name} does not exist")

        shutil.rmtree(path)
        logger.info(f"Deleted workspace: {name}")

    # --- Saved apps (current workspace) ---

    def _app_path(self, name: str) -> str:
        self._check_name(name, "app")
        return os.path.join(self.get_apps_dir(self.current_workspace), f"{name}.json")

    def list_apps(self) -> List[str]:
        apps_dir = self.get_apps_dir(self.current_workspace)
        if not os.path.exists(apps_dir):
            return []
        return sorted(f[:-len(".json")] for f in os.listdir(apps_dir) if f.endswith(".json"))

    def save_app(self, name: str, document: AppDocument) -> str:
        path = self._app_path(name)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w") as f:
            f.write(document.model_dump_json())
        logger.info(f"Saved app '{name}' with {len(document.components)} components")
        return path

    def load_app(self, name: str) -> AppDocument:
        path = self._app_path(name)
        if not os.path.exists(path):
            raise FileNotFoundError(f"App {name} not found")
        with open(path, "r") as f:
            return AppDocument.model_validate_json(f.read())

    def delete_app(self, name: str):
        path = self._app_path(name)
        if not os.path.exists(path):
            raise FileNotFoundError(f"App {name} not found")
        os.remove(path)
        logger.info(f"Deleted app: {name}")
