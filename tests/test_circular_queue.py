import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from avltree.circular_queue import Queue


class TestQueue(unittest.TestCase):
    def test_new_queue_is_empty(self):
        q = Queue()
        self.assertEqual(len(q), 0)
        self.assertFalse(q)

    def test_dequeue_on_empty_raises(self):
        q = Queue()
        with self.assertRaises(IndexError):
            q.dequeue()

    def test_fifo_order(self):
        q = Queue()
        for i in range(3):
            q.enqueue(i)
        self.assertTrue(q)
        self.assertEqual([q.dequeue() for _ in range(3)], [0, 1, 2])
        self.assertFalse(q)

    def test_dequeue_after_draining_raises(self):
        q = Queue()
        q.enqueue(1)
        q.dequeue()
        with self.assertRaises(IndexError):
            q.dequeue()

    def test_grows_past_initial_capacity(self):
        q = Queue()
        for i in range(20):
            q.enqueue(i)
        self.assertEqual(len(q), 20)
        self.assertEqual([q.dequeue() for _ in range(20)], list(range(20)))

    def test_grow_after_wraparound_keeps_order(self):
        q = Queue()
        for i in range(4):
            q.enqueue(i)
        q.dequeue()
        q.dequeue()
        for i in range(4, 9):
            q.enqueue(i)
        self.assertEqual([q.dequeue() for _ in range(len(q))], list(range(2, 9)))

    def test_enqueue_tuples(self):
        q = Queue()
        q.enqueue((1, "root"))
        q.enqueue((2, "left"))
        self.assertEqual(q.dequeue(), (1, "root"))


if __name__ == '__main__':
    unittest.main()
