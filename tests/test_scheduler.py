import unittest
from unittest.mock import Mock

from scheduler import FrameScheduler
from tests import FakeClock


class FrameSchedulerTests(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock(0.0)
        self.scheduler = FrameScheduler(self.clock)

    def test_frame_runs_once(self):
        callback = Mock()
        self.scheduler.request_frame(callback)
        self.scheduler.run_frame(0.016)
        self.scheduler.run_frame(0.033)
        callback.assert_called_once_with(0.016)

    def test_frame_requested_inside_frame_runs_next_time(self):
        calls = []

        def tick(now):
            calls.append(now)
            self.scheduler.request_frame(tick)

        self.scheduler.request_frame(tick)
        self.scheduler.run_frame(1.0)
        self.assertEqual(calls, [1.0])
        self.scheduler.run_frame(2.0)
        self.assertEqual(calls, [1.0, 2.0])

    def test_cancel_frame(self):
        callback = Mock()
        handle = self.scheduler.request_frame(callback)
        self.scheduler.cancel_frame(handle)
        self.scheduler.cancel_frame(None)
        self.scheduler.run_frame()
        callback.assert_not_called()

    def test_timers_fire_in_due_order(self):
        order = []
        self.scheduler.call_later(2.0, lambda now: order.append("late"))
        self.scheduler.call_later(1.0, lambda now: order.append("early"))
        self.scheduler.run_frame(0.5)
        self.assertEqual(order, [])
        self.scheduler.run_frame(3.0)
        self.assertEqual(order, ["early", "late"])
        self.assertEqual(self.scheduler.pending_timers, 0)

    def test_cancel_timer(self):
        callback = Mock()
        handle = self.scheduler.call_later(1.0, callback)
        self.scheduler.cancel_timer(handle)
        self.scheduler.run_frame(5.0)
        callback.assert_not_called()

    def test_failing_callback_does_not_stop_others(self):
        good = Mock()
        self.scheduler.request_frame(Mock(side_effect=RuntimeError("boom")))
        self.scheduler.request_frame(good)
        self.scheduler.run_frame(1.0)
        good.assert_called_once_with(1.0)

    def test_run_frame_defaults_to_clock(self):
        callback = Mock()
        self.clock.advance(4.0)
        self.scheduler.request_frame(callback)
        self.scheduler.run_frame()
        callback.assert_called_once_with(4.0)


if __name__ == "__main__":
    unittest.main()
