from __future__ import annotations

import unittest
from collections.abc import Sequence


class FakeDiscovery:
    """Channel search returning a fixed number of channels and counting calls."""

    def __init__(self, count: int) -> None:
        self.count = count
        self.calls: list[int] = []

    def discover(self, capacity: int) -> Sequence[object]:
        from televisor.core.channel import Channel

        self.calls.append(capacity)
        return [Channel(f"Channel#{i + 1}", True) for i in range(self.count)]


class TvSetConstructionTests(unittest.TestCase):
    def test_model_is_trimmed(self) -> None:
        from televisor.core.tvset import TvSet

        tv = TvSet("  sony ", 5, discovery=FakeDiscovery(3))
        self.assertEqual(tv.model, "sony")
        self.assertEqual(tv.channel_capacity, 5)

    def test_blank_model_becomes_unknown(self) -> None:
        from televisor.core.tvset import TvSet

        self.assertEqual(TvSet("   ", 5).model, "Unknown model")
        self.assertEqual(TvSet("", 5).model, "Unknown model")

    def test_none_model_fails(self) -> None:
        from televisor.core.tvset import TvSet

        with self.assertRaises(ValueError):
            TvSet(None, 5)  # type: ignore[arg-type]

    def test_non_positive_capacity_fails(self) -> None:
        from televisor.core.tvset import TvSet

        for capacity in (0, -3):
            with self.assertRaises(ValueError):
                TvSet("sony", capacity)

    def test_initial_state(self) -> None:
        from televisor.core.channel import NO_CHANNEL
        from televisor.core.tvset import TvSet

        tv = TvSet("sony", 5, discovery=FakeDiscovery(3))
        self.assertFalse(tv.is_on)
        self.assertFalse(tv.has_signal)
        self.assertEqual(tv.channels, ())
        self.assertEqual(tv.channel_count, 0)
        self.assertIs(tv.current_channel, NO_CHANNEL)
        self.assertEqual(tv.current_channel_number, 0)
        self.assertEqual(tv.turn_on_count, 0)

    def test_seeded_random_discovery_is_reproducible(self) -> None:
        from televisor.core.discovery import RandomChannelDiscovery
        from televisor.core.tvset import TvSet

        a = TvSet("sony", 8, discovery=RandomChannelDiscovery(seed=11))
        b = TvSet("sony", 8, discovery=RandomChannelDiscovery(seed=11))
        a.turn_on()
        b.turn_on()

        self.assertEqual([ch.name for ch in a.channels], [ch.name for ch in b.channels])
        self.assertLess(a.channel_count, 8)

    def test_non_string_model_fails(self) -> None:
        from televisor.core.tvset import TvSet

        with self.assertRaises(ValueError):
            TvSet(123, 5)  # type: ignore[arg-type]


class TvSetScenarioTests(unittest.TestCase):
    def test_sony_scenario(self) -> None:
        from televisor.core.tvset import TvSet

        discovery = FakeDiscovery(3)
        tv = TvSet("  sony ", 5, discovery=discovery)
        self.assertEqual(tv.model, "sony")

        tv.turn_on()

        self.assertEqual(discovery.calls, [5])
        self.assertEqual(tv.channel_count, 3)
        self.assertIs(tv.current_channel, tv.channels[2])
        self.assertEqual(tv.current_channel.name, "Channel#3")
        self.assertEqual(tv.current_channel_number, 3)
        self.assertTrue(tv.has_signal)

        tv.switch_next_channel()
        self.assertIs(tv.current_channel, tv.channels[0])
        self.assertEqual(tv.current_channel_number, 1)

    def test_turn_on_detects_only_once(self) -> None:
        from televisor.core.tvset import TvSet

        discovery = FakeDiscovery(2)
        tv = TvSet("sony", 5, discovery=discovery)
        tv.turn_on()
        tv.turn_off()
        tv.turn_on()
        tv.turn_on()

        self.assertEqual(len(discovery.calls), 1)
        self.assertEqual(tv.turn_on_count, 3)

    def test_turn_on_retries_detection_while_nothing_found(self) -> None:
        from televisor.core.channel import NO_CHANNEL
        from televisor.core.tvset import TvSet

        discovery = FakeDiscovery(0)
        tv = TvSet("sony", 5, discovery=discovery)
        tv.turn_on()
        self.assertIs(tv.current_channel, NO_CHANNEL)
        self.assertFalse(tv.has_signal)

        discovery.count = 2
        tv.turn_on()
        self.assertEqual(len(discovery.calls), 2)
        self.assertEqual(tv.channel_count, 2)
        self.assertTrue(tv.has_signal)

    def test_turn_off_when_off_changes_nothing(self) -> None:
        from televisor.core.tvset import TvSet

        tv = TvSet("sony", 5, discovery=FakeDiscovery(3))
        tv.turn_on()
        tv.turn_off()
        before = tv.state

        tv.turn_off()
        self.assertIs(tv.state, before)

    def test_navigation_while_off_changes_nothing(self) -> None:
        from televisor.core.tvset import TvSet

        tv = TvSet("sony", 5, discovery=FakeDiscovery(3))
        tv.turn_on()
        tv.switch_to(2)
        tv.turn_off()
        current = tv.current_channel

        tv.switch_next_channel()
        tv.switch_previous_channel()
        tv.switch_to(1)

        self.assertIs(tv.current_channel, current)
        self.assertFalse(tv.has_signal)

    def test_navigation_with_no_channels_is_noop(self) -> None:
        from televisor.core.channel import NO_CHANNEL
        from televisor.core.tvset import TvSet

        tv = TvSet("sony", 5, discovery=FakeDiscovery(0))
        tv.turn_on()

        tv.switch_next_channel()
        tv.switch_previous_channel()
        tv.switch_to(3)

        self.assertTrue(tv.is_on)
        self.assertEqual(tv.channel_count, 0)
        self.assertIs(tv.current_channel, NO_CHANNEL)
        self.assertFalse(tv.has_signal)

    def test_switch_to_invalid_number_fails(self) -> None:
        from televisor.core.tvset import TvSet

        tv = TvSet("sony", 5, discovery=FakeDiscovery(3))
        tv.turn_on()
        with self.assertRaises(ValueError):
            tv.switch_to(0)
        with self.assertRaises(ValueError):
            tv.switch_to(-2)

    def test_switch_to_clamps(self) -> None:
        from televisor.core.tvset import TvSet

        tv = TvSet("sony", 5, discovery=FakeDiscovery(3))
        tv.turn_on()
        tv.switch_to(1)
        tv.switch_to(99)
        self.assertIs(tv.current_channel, tv.channels[-1])

    def test_previous_wraps(self) -> None:
        from televisor.core.tvset import TvSet

        tv = TvSet("sony", 5, discovery=FakeDiscovery(3))
        tv.turn_on()
        tv.switch_to(1)
        tv.switch_previous_channel()
        self.assertEqual(tv.current_channel.name, "Channel#3")

    def test_explicit_auto_detect_keeps_count_consistent(self) -> None:
        from televisor.core.tvset import TvSet

        discovery = FakeDiscovery(3)
        tv = TvSet("sony", 5, discovery=discovery)
        tv.turn_on()
        discovery.count = 1
        tv.auto_detect_channels()

        self.assertEqual(tv.channel_count, 1)
        self.assertEqual(len(tv.channels), 1)
        self.assertIs(tv.current_channel, tv.channels[0])

    def test_lost_signal_is_seen_on_next_tune(self) -> None:
        from televisor.core.tvset import TvSet

        tv = TvSet("sony", 5, discovery=FakeDiscovery(3))
        tv.turn_on()
        tv.channels[0].has_signal = False

        tv.switch_to(1)
        self.assertFalse(tv.has_signal)
        tv.switch_to(2)
        self.assertTrue(tv.has_signal)


class TvSetDebugOutputTests(unittest.TestCase):
    def test_debug_prints_transitions(self) -> None:
        import contextlib
        import io

        from televisor.core.tvset import TvSet

        buf = io.StringIO()
        tv = TvSet("sony", 5, discovery=FakeDiscovery(2), debug=True)
        with contextlib.redirect_stdout(buf):
            tv.turn_on()
            tv.turn_off()
            tv.switch_next_channel()

        out = buf.getvalue()
        self.assertIn("[debug] sony turn_on: no channels yet, searching", out)
        self.assertIn("[debug] sony turn_on: on=True channel=Channel#2 signal=True turn_on_count=1", out)
        self.assertIn("[debug] sony next: ignored (off)", out)

    def test_quiet_without_debug(self) -> None:
        import contextlib
        import io

        from televisor.core.tvset import TvSet

        buf = io.StringIO()
        tv = TvSet("sony", 5, discovery=FakeDiscovery(2))
        with contextlib.redirect_stdout(buf):
            tv.turn_on()
            tv.switch_next_channel()
        self.assertEqual(buf.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
