"""Asset handles, typed asset stores, and the deferred-loading asset server.

``AssetServer.load`` never touches the disk: it hands out a handle and
queues the request. Queued requests are completed by ``process_pending``,
which the frame loop calls once at the start of every frame, so a handle
issued during frame N is resolvable from frame N+1 onwards. Consumers
must treat ``Assets.get`` returning ``None`` as "not loaded yet".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any, Generic, Protocol, TypeVar

from tankarena.core.enums import LoadState
from tankarena.core.errors import InternalStateViolation

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Handle:
    """Cheap, hashable reference to an asset in its store."""

    id: int
    asset_type: type
    path: str | None = None

    def __repr__(self) -> str:
        label = self.path if self.path is not None else f"#{self.id}"
        return f"Handle<{self.asset_type.__name__}>({label})"


class AssetLoader(Protocol):
    """Decodes one kind of asset from a file under the asset root."""

    asset_type: type

    def load(self, path: Path) -> Any: ...


class Assets(Generic[T]):
    """Store mapping handles of one asset type to their loaded values."""

    __slots__ = ("asset_type", "_values", "_server")

    def __init__(self, asset_type: type, server: AssetServer) -> None:
        self.asset_type = asset_type
        self._values: dict[int, T] = {}
        self._server = server

    def add(self, value: T) -> Handle:
        """Store a value created at runtime and return a fresh handle to it."""
        handle = Handle(self._server.allocate_id(), self.asset_type)
        self._values[handle.id] = value
        return handle

    def insert(self, handle: Handle, value: T) -> None:
        if handle.asset_type is not self.asset_type:
            raise InternalStateViolation(
                f"{handle!r} cannot be stored in Assets<{self.asset_type.__name__}>"
            )
        self._values[handle.id] = value

    def get(self, handle: Handle) -> T | None:
        return self._values.get(handle.id)

    def contains(self, handle: Handle) -> bool:
        return handle.id in self._values

    def __len__(self) -> int:
        return len(self._values)


class AssetServer:
    """Issues handles for on-disk assets and completes their loads lazily."""

    __slots__ = ("_root", "_loaders", "_stores", "_by_path", "_pending", "_next_id")

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)
        self._loaders: dict[type, AssetLoader] = {}
        self._stores: dict[type, Assets[Any]] = {}
        self._by_path: dict[tuple[type, str], Handle] = {}
        self._pending: list[Handle] = []
        self._next_id: int = 1

    @property
    def root(self) -> Path:
        return self._root

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def allocate_id(self) -> int:
        hid = self._next_id
        self._next_id += 1
        return hid

    # -- registration --

    def init_asset(self, asset_type: type) -> Assets[Any]:
        """Create the store for *asset_type* (idempotent) and return it."""
        store = self._stores.get(asset_type)
        if store is None:
            store = Assets(asset_type, self)
            self._stores[asset_type] = store
        return store

    def register_loader(self, loader: AssetLoader) -> None:
        self.init_asset(loader.asset_type)
        self._loaders[loader.asset_type] = loader

    def has_asset(self, asset_type: type) -> bool:
        return asset_type in self._stores

    def assets(self, asset_type: type) -> Assets[Any]:
        store = self._stores.get(asset_type)
        if store is None:
            raise InternalStateViolation(f"asset type {asset_type.__name__} was never initialized")
        return store

    # -- paths --

    def resolve_path(self, path: str) -> Path:
        """Map an asset path (forward slashes, relative to the root) to disk."""
        return self._root.joinpath(*PurePosixPath(path).parts)

    def exists(self, path: str) -> bool:
        return self.resolve_path(path).exists()

    # -- loading --

    def load(self, path: str, asset_type: type) -> Handle:
        """Return a handle for *path*, queueing the load if it is new.

        Loading the same path twice yields the same handle.
        """
        key = (asset_type, path)
        handle = self._by_path.get(key)
        if handle is not None:
            return handle
        if asset_type not in self._loaders:
            raise InternalStateViolation(f"no loader registered for {asset_type.__name__}")
        handle = Handle(self.allocate_id(), asset_type, path)
        self._by_path[key] = handle
        self._pending.append(handle)
        logger.debug("Queued %r", handle)
        return handle

    def load_state(self, handle: Handle) -> LoadState:
        store = self._stores.get(handle.asset_type)
        if store is not None and store.contains(handle):
            return LoadState.LOADED
        if handle in self._pending:
            return LoadState.LOADING
        return LoadState.NOT_LOADED

    def process_pending(self) -> int:
        """Complete every queued load. Returns the number of assets loaded.

        Loader errors propagate unchanged; requests queued behind a failing
        one are dropped with it.
        """
        if not self._pending:
            return 0
        pending, self._pending = self._pending, []
        for handle in pending:
            loader = self._loaders[handle.asset_type]
            value = loader.load(self.resolve_path(handle.path))
            self._stores[handle.asset_type].insert(handle, value)
            logger.debug("Loaded %r", handle)
        return len(pending)
