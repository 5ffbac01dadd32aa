"""Performance benchmarks for the LMDB storage adapter."""

import shutil
import tempfile
import time

import pytest

from msg_store_lmdb import MessageId, StorageAdapter, StoreConfig


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield tmpdir
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def benchmark_store(temp_dir):
    """Create store optimized for benchmarks."""
    config = StoreConfig(
        data_dir=temp_dir,
        map_size=256 * 1024 * 1024,
        durable=False,  # Faster writes
    )
    store = StorageAdapter.open(config)
    yield store
    store.close()


def test_sequential_write_performance(benchmark_store):
    """Benchmark writing 10,000 small messages at one priority."""
    num_records = 10000
    payload = b"hello, world!"
    ids = [MessageId.from_string(f"1-1-{i}") for i in range(num_records)]

    start_time = time.time()

    for msg_id in ids:
        benchmark_store.add(msg_id, payload, len(payload))

    benchmark_store.payload_table.sync()
    benchmark_store.metadata_table.sync()

    end_time = time.time()
    duration = end_time - start_time

    writes_per_second = num_records / duration if duration > 0 else float("inf")

    print(f"\nSequential writes: {writes_per_second:.0f} ops/sec")
    print(f"Total time: {duration:.3f}s for {num_records} records")

    assert benchmark_store.count() == num_records
    assert writes_per_second > 500


def test_fetch_metadata_performance(benchmark_store):
    """Benchmark metadata scans, which must not depend on payload size."""
    num_records = 2000
    payload = b"x" * 16 * 1024

    for i in range(num_records):
        benchmark_store.add(MessageId(i % 4, i, 0), payload, len(payload))

    start_time = time.time()
    metadata = benchmark_store.fetch_all_metadata()
    duration = time.time() - start_time

    print(f"\nMetadata scan: {num_records} records in {duration:.3f}s")

    assert len(metadata) == num_records
    assert metadata == sorted(metadata)
    assert all(size == len(payload) for _, size in metadata)
