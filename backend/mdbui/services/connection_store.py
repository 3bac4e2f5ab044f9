"""
Connection profile store backed by a flat JSON file.
"""
import json
import logging
import time
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from mdbui.core.errors import NotFoundError, PersistenceError
from mdbui.core.locks import ReadWriteLock
from mdbui.models.connection import ConnectionProfile

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_ID = "default"


def default_profile() -> ConnectionProfile:
    """Profile synthesized when no connections file exists yet."""
    now = int(time.time())
    return ConnectionProfile(
        id=DEFAULT_PROFILE_ID,
        name="Local MongoDB",
        host="localhost",
        port=27017,
        database="",
        description="Default local MongoDB connection",
        created_at=now,
        updated_at=now,
    )


class ConnectionStore:
    """
    Named connection profiles plus a "current" selection.

    Every mutation rewrites the whole file while holding the write lock.
    The current profile is written first so that a reload selects it again.
    Callers always receive copies of the stored profiles.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._profiles: dict[str, ConnectionProfile] = {}
        self._current_id: Optional[str] = None
        self._lock = ReadWriteLock()

    # ==================== Persistence ====================

    def load(self) -> None:
        """
        Load profiles from disk, creating the file with a default profile if absent.

        Raises:
            PersistenceError: If the file exists but cannot be read or parsed
        """
        with self._lock.write_locked():
            if not self.path.exists():
                profile = default_profile()
                self._profiles = {profile.id: profile}
                self._current_id = profile.id
                logger.info("No connections file at %s, created default profile", self.path)
                self._save()
                return

            try:
                raw = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                raise PersistenceError(f"failed to read {self.path}: {exc}")

            if not isinstance(raw, list):
                raise PersistenceError(f"failed to read {self.path}: expected a JSON array")

            try:
                profiles = [ConnectionProfile.model_validate(item) for item in raw]
            except ValidationError as exc:
                raise PersistenceError(f"failed to read {self.path}: {exc}")

            self._profiles = {p.id: p for p in profiles}
            self._current_id = profiles[0].id if profiles else None
            logger.info("Loaded %d connection profile(s) from %s", len(profiles), self.path)

    def _save(self) -> None:
        """Rewrite the connections file. Caller must hold the write lock."""
        ordered = sorted(
            self._profiles.values(),
            key=lambda p: p.id != self._current_id,
        )
        data = json.dumps([p.to_record() for p in ordered], indent=2, ensure_ascii=False)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(data, encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"failed to write {self.path}: {exc}")

    # ==================== Queries ====================

    def list_profiles(self) -> list[ConnectionProfile]:
        with self._lock.read_locked():
            return [p.model_copy() for p in self._profiles.values()]

    def get(self, profile_id: str) -> ConnectionProfile:
        with self._lock.read_locked():
            profile = self._profiles.get(profile_id)
            if profile is None:
                raise NotFoundError("connection not found")
            return profile.model_copy()

    def get_current(self) -> Optional[ConnectionProfile]:
        with self._lock.read_locked():
            profile = self._profiles.get(self._current_id) if self._current_id else None
            return profile.model_copy() if profile else None

    def get_current_id(self) -> Optional[str]:
        with self._lock.read_locked():
            return self._current_id

    # ==================== Mutations ====================

    def add(self, profile: ConnectionProfile) -> ConnectionProfile:
        """Store a new profile, generating an identifier if it has none."""
        with self._lock.write_locked():
            now = int(time.time())
            profile_id = profile.id or self._generate_id(now)
            stored = profile.model_copy(
                update={"id": profile_id, "created_at": now, "updated_at": now}
            )
            self._profiles[profile_id] = stored
            if self._current_id is None:
                self._current_id = profile_id
            self._save()
            logger.info("Added connection profile %s", profile_id)
            return stored.model_copy()

    def update(self, profile_id: str, profile: ConnectionProfile) -> ConnectionProfile:
        """Overwrite a profile's fields, keeping its identifier and creation time."""
        with self._lock.write_locked():
            existing = self._profiles.get(profile_id)
            if existing is None:
                raise NotFoundError("connection not found")
            stored = profile.model_copy(
                update={
                    "id": profile_id,
                    "created_at": existing.created_at,
                    "updated_at": int(time.time()),
                }
            )
            self._profiles[profile_id] = stored
            self._save()
            logger.info("Updated connection profile %s", profile_id)
            return stored.model_copy()

    def delete(self, profile_id: str) -> None:
        """
        Remove a profile.

        If it was current, some remaining profile (unspecified which) becomes
        current, or none when the store is now empty.
        """
        with self._lock.write_locked():
            if profile_id not in self._profiles:
                raise NotFoundError("connection not found")
            del self._profiles[profile_id]
            if self._current_id == profile_id:
                self._current_id = next(iter(self._profiles), None)
            self._save()
            logger.info("Deleted connection profile %s", profile_id)

    def set_current(self, profile_id: str) -> None:
        with self._lock.write_locked():
            if profile_id not in self._profiles:
                raise NotFoundError("connection not found")
            self._current_id = profile_id
            self._save()
            logger.info("Current connection profile is now %s", profile_id)

    def _generate_id(self, now: int) -> str:
        """Time-based identifier, suffixed when the second is already taken."""
        candidate = f"conn_{now}"
        suffix = 1
        while candidate in self._profiles:
            candidate = f"conn_{now}_{suffix}"
            suffix += 1
        return candidate
