"""Tests for the home-trial store."""

import pytest

from storefront.core.events import TRIAL_UPDATED
from storefront.database.storage import TRIAL_SLOT
from storefront.database.trials import (
    HomeTrialStore,
    is_valid_trial,
    selection_message,
    trial_phase,
)
from storefront.models.trial import TrialPhase

from .conftest import make_product


def _fill(trial: HomeTrialStore, count: int, start: int = 1) -> None:
    for index in range(start, start + count):
        trial.add_to_trial(make_product(index), "M")


class TestAddToTrial:
    def test_adds_item(self, trial, product_a):
        assert trial.add_to_trial(product_a, "M") is True

        item = trial.items[0]
        assert (item.product_id, item.size, item.price) == ("prod-001", "M", 2500)
        assert trial.item_count == 1

    def test_duplicate_is_ignored(self, trial, product_a):
        trial.add_to_trial(product_a, "M")
        before = trial.items

        assert trial.add_to_trial(product_a, "M") is False
        assert trial.items == before

    def test_same_product_other_size_is_allowed(self, trial, product_a):
        trial.add_to_trial(product_a, "M")
        assert trial.add_to_trial(product_a, "L") is True
        assert trial.item_count == 2

    def test_never_exceeds_cap(self, trial):
        _fill(trial, 16)

        assert trial.item_count == 10
        assert trial.is_full

    def test_add_when_full_is_refused(self, trial):
        _fill(trial, 10)
        assert trial.add_to_trial(make_product(99), "M") is False


class TestRemoveAndClear:
    def test_remove(self, trial, product_a):
        trial.add_to_trial(product_a, "M")
        assert trial.remove_from_trial(product_a.id, "M") is True
        assert trial.items == []

    def test_remove_only_matching_size(self, trial, product_a):
        trial.add_to_trial(product_a, "M")
        trial.add_to_trial(product_a, "L")
        trial.remove_from_trial(product_a.id, "M")

        assert [item.size for item in trial.items] == ["L"]

    def test_remove_missing_is_noop(self, trial, product_a):
        trial.add_to_trial(product_a, "M")
        assert trial.remove_from_trial(product_a.id, "XL") is False
        assert trial.item_count == 1

    def test_clear(self, trial):
        _fill(trial, 6)
        trial.clear_trial()

        assert trial.item_count == 0
        assert trial.phase == TrialPhase.EMPTY


class TestValidityWindow:
    @pytest.mark.parametrize("count", [0, 1, 2, 3, 4, 11, 12, 50])
    def test_invalid_counts(self, count):
        assert is_valid_trial(count) is False

    @pytest.mark.parametrize("count", range(5, 11))
    def test_valid_counts(self, count):
        assert is_valid_trial(count) is True

    def test_phases(self):
        assert trial_phase(0) == TrialPhase.EMPTY
        assert trial_phase(3) == TrialPhase.SELECTING
        assert trial_phase(5) == TrialPhase.READY
        assert trial_phase(10) == TrialPhase.READY

    def test_messages(self):
        assert selection_message(4) == "Add 1 more item(s)"
        assert selection_message(0) == "Add 5 more item(s)"
        assert selection_message(7) is None
        assert selection_message(12) == "Remove 2 item(s)"

    def test_scenario_four_five_then_cap(self, trial):
        _fill(trial, 4)
        assert trial.is_valid_trial is False
        assert trial.phase == TrialPhase.SELECTING
        assert trial.selection_message == "Add 1 more item(s)"

        _fill(trial, 1, start=5)
        assert trial.is_valid_trial is True
        assert trial.phase == TrialPhase.READY

        _fill(trial, 5, start=6)
        assert trial.item_count == 10

        _fill(trial, 6, start=11)
        assert trial.item_count == 10
        assert trial.is_valid_trial is True

    def test_removing_regresses_to_selecting(self, trial):
        _fill(trial, 5)
        trial.remove_from_trial("prod-001", "M")

        assert trial.phase == TrialPhase.SELECTING
        assert trial.is_valid_trial is False

        trial.add_to_trial(make_product(1), "M")
        assert trial.phase == TrialPhase.READY


class TestPersistence:
    def test_restored_on_construction(self, storage, trial):
        _fill(trial, 3)

        restored = HomeTrialStore(storage)
        assert restored.items == trial.items

    def test_corrupt_slot_falls_back_to_empty(self, storage):
        storage.write(TRIAL_SLOT, '[{"product_id": "prod-001"}]')
        assert HomeTrialStore(storage).items == []

    def test_signals_after_change(self, trial, signals, product_a):
        counts = []
        signals.connect(TRIAL_UPDATED, lambda store: counts.append(store.item_count))

        trial.add_to_trial(product_a, "M")
        trial.add_to_trial(product_a, "M")
        trial.clear_trial()

        assert counts == [1, 0]
