"""Unit tests for repositories.ledger_repo."""
import json
import logging

from repositories.ledger_repo import LedgerRepository


class TestLoad:
    def test_missing_file_is_empty(self, ledger_path) -> None:
        assert LedgerRepository(ledger_path).load() == {}
        assert not ledger_path.exists()

    def test_reads_balances(self, ledger_path) -> None:
        ledger_path.write_text(json.dumps({"1": 10, "2": 0}), encoding="utf-8")
        assert LedgerRepository(ledger_path).load() == {"1": 10, "2": 0}

    def test_corrupt_file_is_empty(self, ledger_path, caplog) -> None:
        ledger_path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.ERROR):
            assert LedgerRepository(ledger_path).load() == {}
        assert "Failed to load ledger" in caplog.text

    def test_non_object_is_empty(self, ledger_path) -> None:
        ledger_path.write_text("[1, 2, 3]", encoding="utf-8")
        assert LedgerRepository(ledger_path).load() == {}

    def test_invalid_entries_are_skipped(self, ledger_path) -> None:
        ledger_path.write_text(
            json.dumps({"ok": 5, "neg": -1, "str": "x", "bool": True, "float": 1.5}),
            encoding="utf-8",
        )
        assert LedgerRepository(ledger_path).load() == {"ok": 5}


class TestSave:
    def test_pretty_prints_with_two_spaces(self, ledger_path) -> None:
        LedgerRepository(ledger_path).save({"u1": 500})
        assert ledger_path.read_text(encoding="utf-8") == '{\n  "u1": 500\n}'

    def test_round_trip(self, ledger_path) -> None:
        repo = LedgerRepository(ledger_path)
        balances = {"1": 0, "2": 42, "3": 10**18}
        repo.save(balances)
        assert repo.load() == balances

    def test_no_temp_file_left_behind(self, ledger_path) -> None:
        LedgerRepository(ledger_path).save({"u1": 1})
        assert [p.name for p in ledger_path.parent.iterdir()] == [ledger_path.name]

    def test_write_failure_is_logged_not_raised(self, tmp_path, caplog) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        repo = LedgerRepository(blocker / "userdata.json")
        with caplog.at_level(logging.ERROR):
            repo.save({"u1": 1})
        assert "Failed to save ledger" in caplog.text

    def test_failed_dump_removes_temp_file(self, ledger_path) -> None:
        repo = LedgerRepository(ledger_path)
        repo.save({"u1": 1})
        repo.save({"u1": 2, "u2": object()})
        assert [p.name for p in ledger_path.parent.iterdir()] == [ledger_path.name]
        assert repo.load() == {"u1": 1}
