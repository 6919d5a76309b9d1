import pytest

from rftclient.timer import Timer


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now

    def advance_ms(self, ms):
        self.now += ms * 1_000_000


def test_not_started_never_times_out():
    clock = FakeClock()
    timer = Timer(15, clock=clock)
    clock.advance_ms(1000)
    assert timer.timeout() is False
    assert timer.running is False


def test_times_out_after_duration():
    clock = FakeClock()
    timer = Timer(15, clock=clock)
    timer.start()
    clock.advance_ms(14)
    assert timer.timeout() is False
    clock.advance_ms(1)
    assert timer.timeout() is True


def test_partial_milliseconds_are_truncated():
    clock = FakeClock()
    timer = Timer(1, clock=clock)
    timer.start()
    clock.now += 999_999
    assert timer.timeout() is False


def test_stop_clears_timeout():
    clock = FakeClock()
    timer = Timer(5, clock=clock)
    timer.start()
    clock.advance_ms(10)
    timer.stop()
    assert timer.timeout() is False


def test_restart_resets_start_time():
    clock = FakeClock()
    timer = Timer(10, clock=clock)
    timer.start()
    clock.advance_ms(10)
    timer.start()
    assert timer.timeout() is False
    clock.advance_ms(10)
    assert timer.timeout() is True


def test_set_duration_while_running_raises():
    timer = Timer(10)
    timer.start()
    with pytest.raises(RuntimeError):
        timer.set_duration(20)


def test_set_duration_when_stopped():
    clock = FakeClock()
    timer = Timer(100, clock=clock)
    timer.set_duration(3)
    timer.start()
    clock.advance_ms(3)
    assert timer.timeout() is True


def test_default_duration_expires_immediately():
    timer = Timer()
    timer.start()
    assert timer.timeout() is True