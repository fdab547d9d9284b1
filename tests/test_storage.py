"""Tests for slot storage, signals and the cart badge."""

from pydantic import TypeAdapter

from storefront.core.events import SignalBus
from storefront.database.storage import (
    FileSlotStorage,
    MemorySlotStorage,
    create_storage,
    load_slot,
    save_slot,
)
from storefront.models.cart import line_key
from storefront.services.badge import CartBadge

_ints = TypeAdapter(list[int])


class TestFileSlotStorage:
    def test_round_trip(self, tmp_path):
        storage = FileSlotStorage(str(tmp_path / "slots"))
        storage.write("ecommerce-cart", "[1, 2]")

        assert storage.read("ecommerce-cart") == "[1, 2]"
        assert (tmp_path / "slots" / "ecommerce-cart.json").exists()

    def test_missing_slot(self, tmp_path):
        assert FileSlotStorage(str(tmp_path)).read("nothing") is None

    def test_delete(self, tmp_path):
        storage = FileSlotStorage(str(tmp_path))
        storage.write("slot", "[]")
        storage.delete("slot")
        storage.delete("slot")

        assert storage.read("slot") is None

    def test_create_storage(self, tmp_path):
        assert isinstance(create_storage(str(tmp_path)), FileSlotStorage)
        assert isinstance(create_storage(None), MemorySlotStorage)


class TestLoadSlot:
    def test_missing_returns_default(self):
        assert load_slot(MemorySlotStorage(), "slot", _ints, []) == []

    def test_corrupt_returns_default_and_logs(self, caplog):
        storage = MemorySlotStorage({"slot": "not json"})

        assert load_slot(storage, "slot", _ints, []) == []
        assert "corrupt slot slot" in caplog.text

    def test_save_then_load(self):
        storage = MemorySlotStorage()
        assert save_slot(storage, "slot", _ints, [3, 4]) is True
        assert load_slot(storage, "slot", _ints, []) == [3, 4]


class TestSignalBus:
    def test_handlers_called_in_order(self):
        bus = SignalBus()
        calls = []
        bus.connect("x", lambda sender: calls.append(("a", sender)))
        bus.connect("x", lambda sender: calls.append(("b", sender)))

        assert bus.emit("x", 1) == 2
        assert calls == [("a", 1), ("b", 1)]

    def test_failing_handler_is_isolated(self):
        bus = SignalBus()
        calls = []

        def broken(sender):
            raise RuntimeError("boom")

        bus.connect("x", broken)
        bus.connect("x", calls.append)

        assert bus.emit("x", "sender") == 1
        assert calls == ["sender"]

    def test_disconnect(self):
        bus = SignalBus()
        calls = []
        bus.connect("x", calls.append)

        assert bus.disconnect("x", calls.append) is True
        assert bus.disconnect("x", calls.append) is False
        bus.emit("x", 1)
        assert calls == []


class TestCartBadge:
    def test_follows_cart_updates(self, cart, signals, product_a):
        badge = CartBadge(signals)

        cart.add_item(product_a, "M", 2)
        assert badge.count == 2

        cart.update_quantity(line_key(product_a.id, "M"), 5)
        assert badge.count == 5
        assert badge.refreshed == 2

        cart.clear()
        assert badge.count == 0

    def test_file_backed_cart_survives_restart(self, tmp_path, product_a):
        from storefront.database.carts import CartStore

        CartStore(FileSlotStorage(str(tmp_path))).add_item(product_a, "M", 2)
        restored = CartStore(FileSlotStorage(str(tmp_path)))

        assert restored.total_item_count == 2
        assert CartBadge(SignalBus(), restored.total_item_count).count == 2
