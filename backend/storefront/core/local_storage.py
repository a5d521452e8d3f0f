"""
Local key-value store

A directory of JSON documents standing in for browser local storage: string
values under fixed keys, scoped by a client namespace. Writes overwrite the
previous value (last write wins).
"""
import hashlib
import logging
import re
from pathlib import Path
from typing import Optional, Union

from .config import settings


logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "default"

_SAFE_NAME = re.compile(r"[^A-Za-z0-9_.-]+")


def _namespace_dir(namespace: str) -> str:
    # Hashed so distinct client ids never share a directory
    return hashlib.sha256(namespace.encode()).hexdigest()


def _safe(name: str) -> str:
    cleaned = _SAFE_NAME.sub("_", name).strip("._")
    return cleaned or "_"


class LocalStorage:
    """String values keyed by (namespace, key), stored as files"""

    def __init__(self, root: Union[str, Path], namespace: str = DEFAULT_NAMESPACE):
        self.root = Path(root)
        self.namespace = namespace or DEFAULT_NAMESPACE

    def _path(self, key: str) -> Path:
        return self.root / _namespace_dir(self.namespace) / f"{_safe(key)}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(value, encoding="utf-8")
        logger.debug(f"Stored {len(value)} chars under {self.namespace}/{key}")

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()


def get_local_storage(namespace: str = DEFAULT_NAMESPACE) -> LocalStorage:
    """LocalStorage rooted at LOCAL_STORAGE_DIR for the given client namespace"""
    return LocalStorage(settings.LOCAL_STORAGE_DIR, namespace)
