"""Tests for loading offset windows and persisting habit edits."""

import logging

import pytest

from habit_vault import (
    ABSENT,
    InvalidRangeError,
    load_window,
    persist,
    read_front_matter,
    snapshot_payload,
)
from habit_vault.core.vault_operations import daily_file_path

from conftest import DAILY_NOTE, write_daily


class TestLoadWindow:
    """Test suite for load_window."""

    def test_missing_day_maps_to_empty_fields(self, habit_vault_dir, fixed_today):
        snapshot = load_window(habit_vault_dir, -2, 1, today=fixed_today)

        assert list(snapshot) == ["2025-01-26", "2025-01-27", "2025-01-28", "2025-01-29"]
        assert snapshot["2025-01-27"] == {}
        assert snapshot["2025-01-26"] == {
            "vitamins": False,
            "pimsleur": 0,
            "huel": True,
            "teeth": True,
        }
        assert snapshot["2025-01-28"] == {
            "vitamins": True,
            "pimsleur": 2,
            "huel": False,
            "teeth": None,
        }
        assert snapshot["2025-01-29"]["vitamins"] is ABSENT
        assert snapshot["2025-01-29"]["mood"] == "good"

    def test_malformed_day_maps_to_empty_fields(self, habit_vault_dir, fixed_today, caplog):
        with caplog.at_level(logging.WARNING, logger="habit_vault.core.snapshot_operations"):
            snapshot = load_window(habit_vault_dir, -3, -3, today=fixed_today)

        assert snapshot == {"2025-01-25": {}}
        assert "malformed" in caplog.text

    def test_window_with_no_files(self, tmp_path, fixed_today):
        snapshot = load_window(tmp_path, -1, 0, today=fixed_today)
        assert snapshot == {"2025-01-27": {}, "2025-01-28": {}}

    def test_inverted_window_propagates(self, habit_vault_dir, fixed_today):
        with pytest.raises(InvalidRangeError):
            load_window(habit_vault_dir, 0, -1, today=fixed_today)

    def test_each_call_reads_fresh_data(self, habit_vault_dir, fixed_today):
        first = load_window(habit_vault_dir, 0, 0, today=fixed_today)
        first["2025-01-28"]["vitamins"] = False

        second = load_window(habit_vault_dir, 0, 0, today=fixed_today)
        assert second["2025-01-28"]["vitamins"] is True


class TestPersist:
    """Test suite for persist."""

    def test_partial_update_survives_round_trip(self, habit_vault_dir, fixed_today):
        results = persist(habit_vault_dir, {"2025-01-28": {"vitamins": False}})

        assert results["2025-01-28"]["status"] == "updated"
        assert results["2025-01-28"]["fields_updated"] == ["vitamins"]

        snapshot = load_window(habit_vault_dir, 0, 0, today=fixed_today)
        assert snapshot == {
            "2025-01-28": {
                "vitamins": False,
                "pimsleur": 2,
                "huel": False,
                "teeth": None,
            }
        }

    def test_body_is_preserved(self, habit_vault_dir):
        persist(habit_vault_dir, {"2025-01-28": {"vitamins": False}})

        text = (habit_vault_dir / "2025-01-28.md").read_text(encoding="utf-8")
        assert text == DAILY_NOTE.replace("vitamins: true", "vitamins: false")

    def test_new_fields_are_appended(self, habit_vault_dir):
        persist(habit_vault_dir, {"2025-01-28": {"reading": 3}})

        front_matter = read_front_matter(habit_vault_dir / "2025-01-28.md")
        assert front_matter.yaml.splitlines()[-1] == "reading: 3"
        assert front_matter.yaml.splitlines()[0] == "vitamins: true"

    def test_unchanged_day_is_not_rewritten(self, habit_vault_dir):
        note_path = habit_vault_dir / "2025-01-26.md"
        original = "---\nvitamins:   false\n---\nSunday.\n"
        note_path.write_text(original, encoding="utf-8")

        results = persist(habit_vault_dir, {"2025-01-26": {"vitamins": False}})

        assert results["2025-01-26"]["status"] == "unchanged"
        assert note_path.read_text(encoding="utf-8") == original

    def test_boolean_and_integer_are_not_confused(self, habit_vault_dir):
        """Switching 1 → True is a change even though 1 == True in Python."""
        write_daily(habit_vault_dir, "2025-01-30", "---\nflag: 1\n---\n")

        results = persist(habit_vault_dir, {"2025-01-30": {"flag": True}})

        assert results["2025-01-30"]["status"] == "updated"
        assert read_front_matter(habit_vault_dir / "2025-01-30.md").yaml == "flag: true"

    def test_missing_day_is_skipped_not_raised(self, habit_vault_dir, fixed_today):
        results = persist(
            habit_vault_dir,
            {
                "2025-01-27": {"vitamins": True},
                "2025-01-28": {"pimsleur": 5},
            },
        )

        assert results["2025-01-27"]["status"] == "skipped"
        assert "error" in results["2025-01-27"]
        assert results["2025-01-28"]["status"] == "updated"
        assert not (habit_vault_dir / "2025-01-27.md").exists()
        assert load_window(habit_vault_dir, 0, 0, today=fixed_today)["2025-01-28"]["pimsleur"] == 5

    def test_malformed_day_is_skipped(self, habit_vault_dir):
        results = persist(habit_vault_dir, {"2025-01-25": {"vitamins": False}})
        assert results["2025-01-25"]["status"] == "skipped"
        assert (habit_vault_dir / "2025-01-25.md").read_text(encoding="utf-8") == (
            "vitamins: true\nno delimiters here\n"
        )

    def test_unserializable_value_is_skipped(self, habit_vault_dir):
        results = persist(habit_vault_dir, {"2025-01-28": {"tags": ["a"]}})

        assert results["2025-01-28"]["status"] == "skipped"
        assert (habit_vault_dir / "2025-01-28.md").read_text(encoding="utf-8") == DAILY_NOTE

    def test_invalid_date_key_is_skipped(self, habit_vault_dir):
        results = persist(habit_vault_dir, {"../escape": {"vitamins": True}})
        assert results["../escape"]["status"] == "skipped"

    def test_absent_values_survive_rewrite(self, habit_vault_dir, fixed_today):
        persist(habit_vault_dir, {"2025-01-29": {"pimsleur": 2}})

        snapshot = load_window(habit_vault_dir, 1, 1, today=fixed_today)
        assert snapshot["2025-01-29"]["vitamins"] is ABSENT
        assert snapshot["2025-01-29"]["pimsleur"] == 2

    def test_untouched_text_fields_are_stable_across_writes(self, habit_vault_dir, fixed_today):
        """Fields nobody edits keep their exact text however often the day is saved."""
        write_daily(
            habit_vault_dir,
            "2025-01-30",
            "---\ncreated: 2025-01-28\ntags: [daily]\nvitamins: false\n---\nBody\n",
        )

        for value in (True, False, True):
            result = persist(habit_vault_dir, {"2025-01-30": {"vitamins": value}})
            assert result["2025-01-30"]["status"] == "updated"

        assert (habit_vault_dir / "2025-01-30.md").read_text(encoding="utf-8") == (
            "---\ncreated: 2025-01-28\ntags: [daily]\nvitamins: true\n---\nBody\n"
        )
        fields = load_window(habit_vault_dir, 2, 2, today=fixed_today)["2025-01-30"]
        assert fields == {"created": "2025-01-28", "tags": "[daily]", "vitamins": True}

    def test_empty_front_matter_file_can_be_filled(self, habit_vault_dir, fixed_today):
        write_daily(habit_vault_dir, "2025-01-27", "---\n---\nPlaceholder\n")

        persist(habit_vault_dir, {"2025-01-27": {"vitamins": True}})

        assert (habit_vault_dir / "2025-01-27.md").read_text(encoding="utf-8") == (
            "---\nvitamins: true\n---\nPlaceholder\n"
        )

    @pytest.mark.parametrize("changes", [["2025-01-28"], "2025-01-28", {"2025-01-28": True}])
    def test_non_mapping_payload_raises(self, habit_vault_dir, changes):
        with pytest.raises(ValueError):
            persist(habit_vault_dir, changes)
        assert (habit_vault_dir / "2025-01-28.md").read_text(encoding="utf-8") == DAILY_NOTE


class TestSnapshotPayload:
    def test_sorts_dates_and_drops_absent(self):
        snapshot = {
            "2025-01-29": {"vitamins": ABSENT, "pimsleur": 1},
            "2025-01-28": {"vitamins": True, "teeth": None},
        }
        payload = snapshot_payload(snapshot)

        assert list(payload) == ["2025-01-28", "2025-01-29"]
        assert payload["2025-01-29"] == {"pimsleur": 1}
        assert payload["2025-01-28"] == {"vitamins": True, "teeth": None}


class TestDailyFilePath:
    def test_builds_path_inside_vault(self, tmp_path):
        assert daily_file_path(tmp_path, "2025-01-28") == tmp_path / "2025-01-28.md"

    @pytest.mark.parametrize("value", ["2025-1-28", "2025-02-30", "../2025-01-28", "today"])
    def test_rejects_invalid_dates(self, tmp_path, value):
        with pytest.raises(ValueError):
            daily_file_path(tmp_path, value)
