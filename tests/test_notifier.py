from string_generator.notifier import ClipboardNotifier


def test_inactive_initially(timer):
    assert ClipboardNotifier(timer).active is False


def test_expires_after_exactly_the_window(timer):
    notifier = ClipboardNotifier(timer, duration_ms=2000)
    notifier.notify_success()
    assert notifier.active
    timer.advance(1999)
    assert notifier.active
    timer.advance(1)
    assert not notifier.active
    assert timer.pending == 0


def test_new_copy_restarts_window(timer):
    notifier = ClipboardNotifier(timer, duration_ms=2000)
    notifier.notify_success()
    timer.advance(1500)
    notifier.notify_success()
    assert timer.pending == 1
    timer.advance(1000)
    # 2500 ms after the first copy, only 1000 after the second
    assert notifier.active
    timer.advance(1000)
    assert not notifier.active


def test_cancel_drops_timer_without_touching_flag(timer):
    notifier = ClipboardNotifier(timer)
    notifier.notify_success()
    notifier.cancel()
    assert timer.pending == 0
    timer.advance(10_000)
    assert notifier.active


def test_cancel_without_pending_timer_is_noop(timer):
    notifier = ClipboardNotifier(timer)
    notifier.cancel()
    assert not notifier.active


def test_on_change_fires_on_set_and_expire(timer):
    calls = []
    notifier = ClipboardNotifier(timer, duration_ms=100, on_change=lambda: calls.append(notifier.active))
    notifier.notify_success()
    timer.advance(100)
    assert calls == [True, False]
