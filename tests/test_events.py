import unittest

from tigerstring import TigerString


class EventTests(unittest.TestCase):

    def test_append_event(self):
        s = TigerString()
        counts = []
        s.add_listener(TigerString.APPEND_EVENT, counts.append)
        s.append(b"abc")
        s.append(b"")
        s.append(b"de")
        self.assertEqual(counts, [3, 2])

    def test_grow_event(self):
        s = TigerString()
        grown = []
        s.add_listener(TigerString.GROW_EVENT, lambda old, new: grown.append((old, new)))
        s.append(b"x" * 20)
        s.append(b"x" * 20)
        self.assertEqual(grown, [(32, 60)])

    def test_catch_all_sees_event_order(self):
        s = TigerString()
        events = []
        s.add_catch_all_listener(lambda e, *args: events.append(e))
        s.append(b"x" * 40)
        s.close()
        self.assertEqual(events, ["grow", "append", "close"])

    def test_close_fires_once(self):
        s = TigerString()
        closes = []
        s.add_listener(TigerString.CLOSE_EVENT, lambda: closes.append(1))
        s.close()
        s.close()
        self.assertEqual(closes, [1])

    def test_remove_listener(self):
        s = TigerString()
        counts = []
        s.add_listener(TigerString.APPEND_EVENT, counts.append)
        s.add_listener(TigerString.APPEND_EVENT, counts.append)
        s.append(b"a")
        s.remove_listener(counts.append)
        s.append(b"b")
        self.assertEqual(counts, [1])

    def test_unknown_event_rejected(self):
        s = TigerString()
        with self.assertRaises(ValueError):
            s.add_listener("apend", print)
        with self.assertRaises(ValueError):
            s.fire("flush")

    def test_remove_catch_all_listener(self):
        s = TigerString()
        events = []
        s.add_catch_all_listener(events.append)
        s.remove_listener(events.append)
        s.close()
        self.assertEqual(events, [])

    def test_auto_listen(self):
        class Observer:
            def __init__(self):
                self.grown = 0
                self.appended = 0

            def _on_grow(self, old, new):
                self.grown += 1

            def _on_append(self, count):
                self.appended += count

        observer = Observer()
        s = TigerString(initial_capacity=1)
        s.auto_listen(observer)
        s.append(b"abc")
        s.append(b"d")
        self.assertEqual(observer.grown, 1)
        self.assertEqual(observer.appended, 4)


if __name__ == "__main__":
    unittest.main(verbosity=2)
