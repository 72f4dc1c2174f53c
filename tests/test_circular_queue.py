import unittest

from avltree.circular_queue import CircularQueue


class TestCircularQueue(unittest.TestCase):
    def test_new_queue_is_empty(self):
        q: CircularQueue[int] = CircularQueue()
        self.assertEqual(q.size(), 0)
        self.assertTrue(q.is_empty())
        self.assertFalse(q)

    def test_non_positive_capacity_rejected(self):
        with self.assertRaises(ValueError):
            CircularQueue(0)

    def test_reads_on_empty_raise(self):
        q: CircularQueue[int] = CircularQueue()
        with self.assertRaises(IndexError):
            q.front()
        with self.assertRaises(IndexError):
            q.back()
        with self.assertRaises(IndexError):
            q.dequeue()

    def test_fifo_order(self):
        q: CircularQueue[int] = CircularQueue()
        q.enqueue(1)
        q.enqueue(2)
        q.enqueue(3)
        self.assertEqual(q.front(), 1)
        self.assertEqual(q.back(), 3)
        self.assertEqual(q.dequeue(), 1)
        self.assertEqual(q.dequeue(), 2)
        self.assertEqual(q.dequeue(), 3)
        self.assertTrue(q.is_empty())

    def test_circular_buffer_wrap_around(self):
        q: CircularQueue[int] = CircularQueue()
        for i in range(1, 5):
            q.enqueue(i)
        q.dequeue()
        q.dequeue()
        q.enqueue(5)
        q.enqueue(6)
        self.assertEqual(q.front(), 3)
        self.assertEqual(q.back(), 6)
        self.assertEqual(q.size(), 4)

    def test_growth_after_wrap_preserves_order(self):
        q: CircularQueue[int] = CircularQueue(capacity=2)
        q.enqueue(0)
        q.enqueue(1)
        q.dequeue()
        q.enqueue(2)
        for i in range(3, 10):
            q.enqueue(i)
        self.assertEqual([q.dequeue() for _ in range(len(q))], list(range(1, 10)))

    def test_clear_then_reuse(self):
        q: CircularQueue[int] = CircularQueue()
        q.enqueue(1)
        q.enqueue(2)
        q.clear()
        self.assertTrue(q.is_empty())
        q.enqueue(3)
        self.assertEqual(q.front(), 3)
        self.assertEqual(q.size(), 1)

    def test_many_wrap_around_cycles(self):
        q: CircularQueue[int] = CircularQueue()
        for cycle in range(100):
            for i in range(10):
                q.enqueue(cycle * 10 + i)
            for i in range(10):
                self.assertEqual(q.dequeue(), cycle * 10 + i)
        self.assertTrue(q.is_empty())

    def test_len_and_bool(self):
        q: CircularQueue[str] = CircularQueue()
        q.enqueue("a")
        q.enqueue("b")
        self.assertEqual(len(q), 2)
        self.assertTrue(q)


if __name__ == "__main__":
    unittest.main()
