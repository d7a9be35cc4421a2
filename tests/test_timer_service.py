"""Tests for TimerService notifications and alarm emission."""

import logging
from unittest.mock import MagicMock

import pytest

from core.period_timer import PeriodTimer
from domain.models import Phase, TimerSnapshot
from services.timer_service import TimerService


@pytest.fixture
def service() -> TimerService:
    return TimerService(PeriodTimer(work_sec=3, break_sec=2))


@pytest.fixture
def listeners(service: TimerService) -> dict:
    fns = {
        "tick": MagicMock(),
        "phase": MagicMock(),
        "state": MagicMock(),
        "alarm": MagicMock(),
    }
    service.set_on_tick(fns["tick"])
    service.set_on_phase_change(fns["phase"])
    service.set_on_state_change(fns["state"])
    service.set_on_alarm(fns["alarm"])
    return fns


def _run_out(service: TimerService) -> None:
    service.start()
    for _ in range(service.engine.duration_of(service.engine.phase)):
        service.tick()


class TestTimerServiceDefaults:
    def test_default_engine_uses_standard_durations(self) -> None:
        snap = TimerService().get_snapshot()
        assert snap.phase is Phase.WORK
        assert snap.remaining_sec == 1800

    def test_works_without_listeners(self, service: TimerService) -> None:
        _run_out(service)
        service.alarm_tick()
        service.reset()
        assert service.get_snapshot().alarm_active is False


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class TestTimerServiceCommands:
    @pytest.mark.parametrize("command", ["start", "stop", "reset", "switch_phase"])
    def test_command_emits_state_change(
        self, service: TimerService, listeners: dict, command: str
    ) -> None:
        getattr(service, command)()
        listeners["state"].assert_called_once()
        snap = listeners["state"].call_args.args[0]
        assert isinstance(snap, TimerSnapshot)
        assert snap == service.get_snapshot()

    def test_switch_phase_snapshot(self, service: TimerService, listeners: dict) -> None:
        service.switch_phase()
        snap = listeners["state"].call_args.args[0]
        assert snap.phase is Phase.BREAK
        assert snap.remaining_sec == 2

    def test_start_logs_once_when_already_running(
        self, service: TimerService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="services.timer_service"):
            service.start()
            service.start()
        starts = [r for r in caplog.records if r.getMessage().startswith("Start")]
        assert len(starts) == 1
        assert service.get_snapshot().is_running is True


# ---------------------------------------------------------------------------
# tick()
# ---------------------------------------------------------------------------


class TestTimerServiceTick:
    def test_tick_while_stopped_emits_nothing(
        self, service: TimerService, listeners: dict
    ) -> None:
        service.tick()
        listeners["tick"].assert_not_called()
        assert service.get_snapshot().remaining_sec == 3

    def test_tick_emits_time_changed(self, service: TimerService, listeners: dict) -> None:
        service.start()
        service.tick()
        listeners["tick"].assert_called_once()
        assert listeners["tick"].call_args.args[0].remaining_sec == 2
        listeners["phase"].assert_not_called()

    def test_phase_end_emits_phase_change(
        self, service: TimerService, listeners: dict
    ) -> None:
        _run_out(service)
        listeners["phase"].assert_called_once()
        snap = listeners["phase"].call_args.args[0]
        assert snap == TimerSnapshot(
            phase=Phase.BREAK, remaining_sec=2, is_running=False, alarm_active=True
        )
        assert listeners["tick"].call_count == 3


# ---------------------------------------------------------------------------
# Alarm
# ---------------------------------------------------------------------------


class TestTimerServiceAlarm:
    def test_alarm_tick_is_silent_without_alarm(
        self, service: TimerService, listeners: dict
    ) -> None:
        service.alarm_tick()
        listeners["alarm"].assert_not_called()

    def test_alarm_tick_fires_each_time(self, service: TimerService, listeners: dict) -> None:
        _run_out(service)
        service.alarm_tick()
        service.alarm_tick()
        assert listeners["alarm"].call_count == 2

    def test_command_silences_alarm(self, service: TimerService, listeners: dict) -> None:
        _run_out(service)
        service.stop()
        service.alarm_tick()
        listeners["alarm"].assert_not_called()

    def test_alarm_failure_is_logged_and_ignored(
        self, service: TimerService, caplog: pytest.LogCaptureFixture
    ) -> None:
        service.set_on_alarm(MagicMock(side_effect=RuntimeError("no audio device")))
        _run_out(service)
        before = service.get_snapshot()

        with caplog.at_level(logging.ERROR, logger="services.timer_service"):
            service.alarm_tick()

        assert service.get_snapshot() == before
        assert any("Alarm signal failed" in r.getMessage() for r in caplog.records)
        assert caplog.records[-1].exc_info is not None
