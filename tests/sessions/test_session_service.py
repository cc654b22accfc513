from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from timeclock.core.exceptions import AlreadyClockedInError, NotClockedInError, ValidationError
from timeclock.employees.model import Employee
from timeclock.sessions.calculator.base import WageCalculator
from timeclock.sessions.service import SessionService


def _employee(rate: float = 20.0) -> Employee:
    return Employee(employee_id=1, first_name="Ana", last_name="Lee", hourly_rate=rate)


def test_full_day_scenario():
    svc = SessionService()
    e = _employee(20.0)

    svc.clock_in(e, now=datetime(2025, 1, 1, 9, 0))
    session = svc.clock_out(e, now=datetime(2025, 1, 1, 17, 0))

    assert session.wage == pytest.approx(160.0)
    assert e.total_wage == pytest.approx(160.0)
    assert e.active_clock_in is None
    assert e.sessions == [session]


def test_wage_uses_fractional_hours():
    svc = SessionService()
    e = _employee(10.0)
    start = datetime(2025, 1, 1, 9, 0)

    svc.clock_in(e, now=start)
    session = svc.clock_out(e, now=start + timedelta(minutes=90))

    assert session.hours == pytest.approx(1.5)
    assert session.wage == pytest.approx(15.0)


def test_clock_in_twice_keeps_first_timestamp():
    svc = SessionService()
    e = _employee()
    first = datetime(2025, 1, 1, 9, 0)
    svc.clock_in(e, now=first)

    with pytest.raises(AlreadyClockedInError):
        svc.clock_in(e, now=first + timedelta(hours=1))

    assert e.active_clock_in == first
    assert e.sessions == []


def test_clock_out_without_clock_in_changes_nothing():
    svc = SessionService()
    e = _employee()

    with pytest.raises(NotClockedInError) as exc:
        svc.clock_out(e, now=datetime(2025, 1, 1, 9, 0))

    assert str(exc.value) == "Employee is not clocked in yet."
    assert e.sessions == []
    assert e.active_clock_in is None


def test_clock_out_before_clock_in_is_rejected():
    svc = SessionService()
    e = _employee()
    start = datetime(2025, 1, 1, 9, 0)
    svc.clock_in(e, now=start)

    with pytest.raises(ValidationError):
        svc.clock_out(e, now=start - timedelta(minutes=1))

    assert e.active_clock_in == start
    assert e.sessions == []


def test_zero_length_session_has_zero_wage():
    svc = SessionService()
    e = _employee()
    t = datetime(2025, 1, 1, 9, 0)
    svc.clock_in(e, now=t)

    assert svc.clock_out(e, now=t).wage == 0


def test_rate_change_does_not_alter_past_sessions():
    svc = SessionService()
    e = _employee(20.0)
    svc.clock_in(e, now=datetime(2025, 1, 1, 9, 0))
    svc.clock_out(e, now=datetime(2025, 1, 1, 10, 0))

    e.hourly_rate = 50.0

    assert e.sessions[0].wage == pytest.approx(20.0)
    assert e.total_wage == pytest.approx(20.0)


@pytest.mark.parametrize("cycles", [0, 1, 5])
def test_total_wage_matches_sum_over_cycles(cycles):
    svc = SessionService()
    e = _employee(12.0)
    start = datetime(2025, 1, 1, 6, 0)
    expected = 0.0
    for n in range(cycles):
        t_in = start + timedelta(days=n)
        t_out = t_in + timedelta(minutes=45 * (n + 1))
        svc.clock_in(e, now=t_in)
        expected += svc.clock_out(e, now=t_out).wage

    assert len(e.sessions) == cycles
    assert e.total_wage == pytest.approx(expected)
    assert e.total_wage == pytest.approx(sum(0.75 * (n + 1) * 12.0 for n in range(cycles)))


def test_uses_injected_calculator():
    class FlatCalculator(WageCalculator):
        def wage(self, *, clock_in_at, clock_out_at, hourly_rate):
            return 99.0

    svc = SessionService(calculator=FlatCalculator())
    e = _employee()
    svc.clock_in(e, now=datetime(2025, 1, 1, 9, 0))

    assert svc.clock_out(e, now=datetime(2025, 1, 1, 9, 30)).wage == 99.0


def test_clock_in_defaults_to_local_clock(monkeypatch):
    fixed = datetime(2025, 3, 4, 8, 15)
    monkeypatch.setattr("timeclock.sessions.service.now_local", lambda: fixed)
    e = _employee()

    SessionService().clock_in(e)

    assert e.active_clock_in == fixed
