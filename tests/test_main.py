"""Tests for application wiring in main.py."""
import logging
from datetime import timedelta
from unittest.mock import MagicMock

import pytest

import main
from handlers.error_handler import error_handler
from handlers.interaction import LEDGER_KEY
from services.ledger_service import LedgerService


class TestMain:
    def test_missing_token_exits_before_loading_ledger(self, monkeypatch) -> None:
        monkeypatch.setattr(main, "TELEGRAM_BOT_TOKEN", "")
        ledger_cls = MagicMock()
        monkeypatch.setattr(main, "LedgerService", ledger_cls)
        with pytest.raises(SystemExit) as exc:
            main.main()
        assert exc.value.code == 1
        ledger_cls.assert_not_called()

    def test_build_application_wires_handlers(self) -> None:
        ledger = MagicMock(spec=LedgerService)
        app = main.build_application("123456:TEST-TOKEN", ledger)
        assert app.bot_data[LEDGER_KEY] is ledger
        commands = set()
        for handler in app.handlers[0]:
            commands |= handler.commands
        assert {
            "start", "help",
            "viewbalance", "userprofile",
            "creditmoney", "addmoney",
            "debitmoney", "removemoney",
        } <= commands
        assert error_handler in app.error_handlers

    def test_autosave_runs_every_five_minutes(self) -> None:
        ledger = MagicMock(spec=LedgerService)
        app = main.build_application("123456:TEST-TOKEN", ledger)
        jobs = app.job_queue.get_jobs_by_name("ledger_autosave")
        assert len(jobs) == 1
        job = jobs[0]
        assert job.callback is main.autosave_ledger
        assert job.data is ledger
        assert job.job.trigger.interval == timedelta(seconds=300)

    def test_clean_shutdown_writes_final_snapshot(self, monkeypatch) -> None:
        monkeypatch.setattr(main, "TELEGRAM_BOT_TOKEN", "123456:TEST-TOKEN")
        ledger = MagicMock(spec=LedgerService)
        monkeypatch.setattr(main, "LedgerService", MagicMock(return_value=ledger))
        app = MagicMock()
        monkeypatch.setattr(main, "build_application", MagicMock(return_value=app))

        main.main()

        ledger.load.assert_called_once_with()
        app.run_polling.assert_called_once()
        ledger.save.assert_called_once_with()


@pytest.mark.asyncio
class TestJobs:
    async def test_autosave_writes_snapshot(self) -> None:
        context = MagicMock()
        context.job.data = MagicMock(spec=LedgerService)
        await main.autosave_ledger(context)
        context.job.data.save.assert_called_once_with()

    async def test_error_handler_logs(self, caplog) -> None:
        context = MagicMock()
        context.error = RuntimeError("kaboom")
        with caplog.at_level(logging.ERROR):
            await error_handler(None, context)
        assert "Unhandled error" in caplog.text
        assert "kaboom" in caplog.text
