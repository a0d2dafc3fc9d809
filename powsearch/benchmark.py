import time
import psutil
import logging
import tabulate
from typing import List, Optional
from dataclasses import dataclass
from .search import SearchEngine, encode_text
from .digest import HashlibDigest
from .counter import increment


@dataclass
class BenchRecord:
    threshold: int
    found: int
    tried: int
    wall_time: float
    cpu_time: float

    @property
    def average(self) -> Optional[float]:
        if self.found == 0 or self.wall_time <= 0:
            return None
        return self.wall_time / self.found


def cpu_seconds(proc: psutil.Process) -> float:
    times = proc.cpu_times()
    return times.user + times.system


def measure_level(initial: bytes, threshold: int, target: int, digest: HashlibDigest) -> BenchRecord:
    proc = psutil.Process()
    buffer = bytearray(initial)
    found = 0
    tried = 0
    cpu_start = cpu_seconds(proc)
    start = time.perf_counter()
    while found < target:
        result = SearchEngine(buffer, threshold, digest).run()
        found += 1
        tried += result.steps + 1
        buffer = bytearray(result.data)
        increment(buffer)
    wall_time = time.perf_counter() - start
    cpu_time = cpu_seconds(proc) - cpu_start
    return BenchRecord(threshold, found, tried, wall_time, cpu_time)


def measure_search_time(
    text: str = 'All you need is love',
    algorithm: str = 'sha256',
    start: int = 0,
    stop: int = 16,
    target: int = 1024,
    min_target: int = 5,
    encoding: str = 'utf-8',
) -> List[BenchRecord]:
    digest = HashlibDigest(algorithm)
    initial = encode_text(text, encoding)
    records = []
    for threshold in range(start, stop + 1):
        record = measure_level(initial, threshold, target, digest)
        logging.info(
            "Zeroes: %d found: %d tried: %d time: %.3fs",
            threshold, record.found, record.tried, record.wall_time
        )
        records.append(record)
        target = max(target >> 1, min_target)
    return records


def format_report(records: List[BenchRecord]) -> str:
    header = ['Zeroes', 'Found', 'Tried', 'Time (s)', 'CPU (s)', 'Average (s)']
    table = []
    for r in records:
        table.append([r.threshold, r.found, r.tried, r.wall_time, r.cpu_time, r.average])
    return tabulate.tabulate(table, headers=header, floatfmt='.6f', missingval='-')
