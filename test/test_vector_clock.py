import unittest

from server.time_sync.vector_clock import Timestamp, VectorClock


class VectorClockTest(unittest.TestCase):
    def test_new_clock_is_all_zero(self):
        clock = VectorClock(3, 1)
        self.assertEqual(clock.values, (0, 0, 0))
        self.assertEqual(len(clock), 3)
        self.assertEqual(str(clock), "<0 0 0>")

    def test_rejects_invalid_self_index(self):
        with self.assertRaises(ValueError):
            VectorClock(3, 3)
        with self.assertRaises(ValueError):
            VectorClock(3, -1)
        with self.assertRaises(ValueError):
            VectorClock(0, 0)

    def test_increment_returns_independent_snapshot(self):
        clock = VectorClock(3, 2)
        first = clock.increment()
        second = clock.increment()
        self.assertEqual(first, Timestamp((0, 0, 1), 2))
        self.assertEqual(second, Timestamp((0, 0, 2), 2))
        self.assertEqual(clock.values, (0, 0, 2))
        # later increments never leak into earlier snapshots
        self.assertEqual(first.values, (0, 0, 1))

    def test_merge_takes_slot_wise_maximum(self):
        clock = VectorClock(3, 0)
        clock.increment()
        clock.merge(Timestamp((0, 4, 2), 1))
        self.assertEqual(clock.values, (1, 4, 2))

    def test_merge_is_idempotent_on_dominated_timestamps(self):
        clock = VectorClock(3, 0)
        clock.merge(Timestamp((2, 3, 1), 1))
        before = clock.values
        clock.merge(Timestamp((1, 3, 0), 2))
        clock.merge(Timestamp((2, 3, 1), 1))
        self.assertEqual(clock.values, before)

    def test_merge_rejects_other_sizes(self):
        clock = VectorClock(3, 0)
        with self.assertRaises(ValueError):
            clock.merge(Timestamp((1, 1), 0))

    def test_can_deliver_next_message_from_sender(self):
        clock = VectorClock(3, 2)
        self.assertTrue(clock.can_deliver(Timestamp((1, 0, 0), 0), 0))

    def test_can_deliver_rejects_duplicate(self):
        clock = VectorClock(3, 2)
        clock.merge(Timestamp((1, 0, 0), 0))
        self.assertFalse(clock.can_deliver(Timestamp((1, 0, 0), 0), 0))

    def test_can_deliver_rejects_gap_from_sender(self):
        clock = VectorClock(3, 2)
        self.assertFalse(clock.can_deliver(Timestamp((2, 0, 0), 0), 0))
        self.assertFalse(clock.can_deliver(Timestamp((5, 0, 0), 0), 0))

    def test_can_deliver_rejects_unseen_dependency(self):
        clock = VectorClock(3, 2)
        # sender 1 had already seen a message from 0 that this process has not
        self.assertFalse(clock.can_deliver(Timestamp((1, 1, 0), 1), 1))
        clock.merge(Timestamp((1, 0, 0), 0))
        self.assertTrue(clock.can_deliver(Timestamp((1, 1, 0), 1), 1))

    def test_can_deliver_does_not_mutate(self):
        clock = VectorClock(2, 0)
        clock.can_deliver(Timestamp((0, 1), 1), 1)
        self.assertEqual(clock.values, (0, 0))

    def test_timestamp_form(self):
        ts = Timestamp([3, 0, 1], 2)
        self.assertEqual(ts.values, (3, 0, 1))
        self.assertEqual(len(ts), 3)
        self.assertEqual(str(ts), "<3 0 1>")

    def test_timestamp_refuses_non_int_values(self):
        for values, self_index in (((0, 1.9), 1), ((True, 0), 0), ((0, 1), 1.0), ((0, 1), True)):
            with self.assertRaises(TypeError, msg=repr((values, self_index))):
                Timestamp(values, self_index)

    def test_timestamp_refuses_out_of_range(self):
        with self.assertRaises(ValueError):
            Timestamp((0, -1), 0)
        with self.assertRaises(ValueError):
            Timestamp((0, 1), 2)
        with self.assertRaises(ValueError):
            Timestamp((), 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
