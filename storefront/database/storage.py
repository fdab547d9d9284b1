"""Durable slots backing the storefront stores"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

CART_SLOT = "ecommerce-cart"
COUPON_SLOT = "ecommerce-coupon"
WISHLIST_SLOT = "ecommerce-wishlist"
TRIAL_SLOT = "home-trial-items"


class SlotStorage:
    """Stores one serialized value per uniquely named slot"""

    def read(self, slot: str) -> Optional[str]:
        raise NotImplementedError

    def write(self, slot: str, data: str) -> None:
        raise NotImplementedError

    def delete(self, slot: str) -> None:
        raise NotImplementedError


class MemorySlotStorage(SlotStorage):
    """In-memory slot storage"""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.slots: dict[str, str] = dict(initial or {})

    def read(self, slot: str) -> Optional[str]:
        return self.slots.get(slot)

    def write(self, slot: str, data: str) -> None:
        self.slots[slot] = data

    def delete(self, slot: str) -> None:
        self.slots.pop(slot, None)


class FileSlotStorage(SlotStorage):
    """
    One JSON file per slot inside a directory.

    Writes go to a temporary file first and are then renamed over the
    slot file, so a crash mid-write leaves the previous value in place.
    """

    def __init__(self, directory: str):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, slot: str) -> Path:
        return self.directory / f"{slot}.json"

    def read(self, slot: str) -> Optional[str]:
        path = self._path(slot)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read slot {slot}: {e}")
            return None

    def write(self, slot: str, data: str) -> None:
        path = self._path(slot)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(data, encoding="utf-8")
        os.replace(tmp_path, path)

    def delete(self, slot: str) -> None:
        path = self._path(slot)
        if path.exists():
            path.unlink()


def create_storage(storage_dir: Optional[str]) -> SlotStorage:
    """File storage when a directory is configured, memory otherwise"""
    if storage_dir:
        logger.info(f"Persisting storefront state to {storage_dir}")
        return FileSlotStorage(storage_dir)
    logger.info("No storage directory configured - state kept in memory")
    return MemorySlotStorage()


def load_slot(storage: SlotStorage, slot: str, adapter: TypeAdapter, default):
    """
    Restore a slot through a pydantic adapter.

    Missing data yields the default. Corrupt data is logged and also
    yields the default, so a bad slot never blocks the storefront.
    """
    raw = storage.read(slot)
    if raw is None:
        return default
    try:
        return adapter.validate_json(raw)
    except ValidationError as e:
        logger.warning(f"Discarding corrupt slot {slot}: {e.error_count()} error(s)")
        return default


def save_slot(storage: SlotStorage, slot: str, adapter: TypeAdapter, value) -> bool:
    """Write a slot, returning False (and logging) when the write fails"""
    try:
        storage.write(slot, adapter.dump_json(value).decode("utf-8"))
    except OSError:
        logger.exception(f"Failed to persist slot {slot}")
        return False
    return True
