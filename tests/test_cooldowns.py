import datetime as dt

from brainrot.services.cooldowns import format_wait, remaining

from helpers import T0


def test_remaining_without_history_is_zero():
    assert remaining(None, 3600, T0) == 0


def test_remaining_counts_down_and_floors_at_zero():
    assert remaining(T0, 3600, T0 + dt.timedelta(minutes=15)) == 45 * 60
    assert remaining(T0, 3600, T0 + dt.timedelta(hours=2)) == 0


def test_format_wait():
    assert format_wait(1) == "1 segundo"
    assert format_wait(30) == "30 segundos"
    assert format_wait(60) == "1 minuto"
    assert format_wait(61) == "2 minutos"
    assert format_wait(600) == "10 minutos"
