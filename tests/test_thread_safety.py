"""Thread safety tests for the shared mapping table.

Any number of encoders may scan concurrently against the one immutable
table. These tests use real threads to catch interference.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from macroman_encode import encode, encode_bytes
from macroman_encode.table import KNOWN_SEQUENCES

SOURCES = [
    "J'peux manger d'la vitre, \xe7a m'fa pas mal.",
    "cafe\N{COMBINING ACUTE ACCENT} cr\xe8me \N{EURO SIGN}5",
    "\N{SNOWMAN} \U0001f600 \N{LATIN SMALL LETTER THORN}",
    "".join(source for source, _ in KNOWN_SEQUENCES),
]


class TestConcurrentEncoders:
    def test_parallel_results_match_serial(self) -> None:
        expected = [list(encode(source)) for source in SOURCES]

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [
                pool.submit(lambda s: list(encode(s)), SOURCES[i % len(SOURCES)])
                for i in range(64)
            ]
            results = [f.result() for f in futures]

        for i, result in enumerate(results):
            assert result == expected[i % len(SOURCES)]

    def test_interleaved_encoders_in_threads(self) -> None:
        errors: list[str] = []
        barrier = threading.Barrier(4)

        def worker(thread_id: int) -> None:
            try:
                barrier.wait(timeout=5.0)
                for _ in range(50):
                    data = encode_bytes(SOURCES[0])
                    if data != b"J'peux manger d'la vitre, \x8da m'fa pas mal.":
                        errors.append(f"Thread {thread_id}: {data!r}")
            except Exception as e:
                errors.append(f"Thread {thread_id}: {e}")

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10.0)

        assert not errors, f"Thread errors: {errors}"

    def test_whole_table_scans_one_step_per_entry(self) -> None:
        """Concatenated sources rescan into exactly the table's codes."""
        steps = list(encode(SOURCES[3]))
        assert [s.outcome.code for s in steps] == [code for _, code in KNOWN_SEQUENCES]
