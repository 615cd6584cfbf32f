import threading
import unittest

from fakes import FakeController

from gdrivefs.errors import NotFoundError
from gdrivefs.fs.cache import LookupCache
from gdrivefs.fs.resolver import PathResolver


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestLookupCache(unittest.TestCase):
    def setUp(self) -> None:
        self.controller = FakeController()
        self.controller.add("D", "docs", folder=True)
        self.clock = FakeClock()
        self.cache = LookupCache(
            PathResolver(self.controller),
            ttl_seconds=60,
            clock=self.clock,
        )

    def test_root_resolves_regardless_of_cache_state(self) -> None:
        self.assertEqual(self.cache.get("").path, "/")
        self.cache.invalidate("")
        self.assertEqual(self.cache.get("/").file.file_id, "root")

    def test_not_found_is_cached_within_ttl(self) -> None:
        with self.assertRaises(NotFoundError):
            self.cache.get("/nope")
        calls_after_first = len(self.controller.calls)

        self.clock.now += 59
        with self.assertRaises(NotFoundError):
            self.cache.get("/nope", True)
        self.assertEqual(len(self.controller.calls), calls_after_first)

    def test_cache_hits_raise_fresh_errors(self) -> None:
        with self.assertRaises(NotFoundError) as first:
            self.cache.get("/nope")
        with self.assertRaises(NotFoundError) as second:
            self.cache.get("/nope")
        with self.assertRaises(NotFoundError) as third:
            self.cache.get("/nope")

        self.assertIsNot(second.exception, first.exception)
        self.assertIsNot(third.exception, second.exception)
        self.assertEqual(str(second.exception), str(first.exception))
        self.assertEqual(second.exception.details, first.exception.details)

        second.exception.details["extra"] = 1
        self.assertNotIn("extra", third.exception.details)

    def test_not_found_expires_after_ttl(self) -> None:
        with self.assertRaises(NotFoundError):
            self.cache.get("/nope")
        calls_after_first = len(self.controller.calls)

        self.clock.now += 61
        self.controller.add("N", "nope")
        self.assertEqual(self.cache.get("/nope").file.file_id, "N")
        self.assertGreater(len(self.controller.calls), calls_after_first)

    def test_found_is_not_cached(self) -> None:
        self.cache.get("/docs")
        self.cache.get("/docs")
        self.assertEqual(self.controller.count("list_children"), 2)
        self.assertEqual(len(self.cache), 0)

    def test_invalidate_evicts_exact_path_only(self) -> None:
        for p in ("/x", "/x/y"):
            with self.assertRaises(NotFoundError):
                self.cache.get(p)
        self.assertEqual(len(self.cache), 2)

        self.controller.add("X", "x", folder=True)
        self.controller.add("Y", "y", parent="X")
        self.cache.invalidate("/x/")

        self.assertEqual(self.cache.get("/x").file.file_id, "X")
        with self.assertRaises(NotFoundError):
            self.cache.get("/x/y")

    def test_missing_parent_is_served_from_cache(self) -> None:
        with self.assertRaises(NotFoundError):
            self.cache.get("/missing")
        before = len(self.controller.calls)

        with self.assertRaises(NotFoundError):
            self.cache.get("/missing/child")
        self.assertEqual(len(self.controller.calls), before)

    def test_clear(self) -> None:
        with self.assertRaises(NotFoundError):
            self.cache.get("/nope")
        self.cache.clear()
        self.assertEqual(len(self.cache), 0)

    def test_concurrent_gets(self) -> None:
        errors = []

        def worker(i: int) -> None:
            try:
                if i % 2:
                    self.cache.get("/docs")
                else:
                    with self.assertRaises(NotFoundError):
                        self.cache.get(f"/nope{i % 4}")
                    self.cache.invalidate(f"/nope{i % 4}")
            except Exception as exc:  # pragma: no cover
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(32)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(errors, [])


if __name__ == "__main__":
    unittest.main()
