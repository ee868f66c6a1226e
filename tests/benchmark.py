# bench_pipeline.py
import sys
import time

import numpy as np

from regbench.dataset import read_columns
from regbench.pipeline import perform_regression


class _Discard:
    def write(self, _):
        pass


def bench_pipeline(crim, rooms, mv, n, workers, trials=5):
    # Warmup
    perform_regression(n, crim, rooms, mv, out=_Discard(), workers=workers)
    
    times = []
    for _ in range(trials):
        start = time.perf_counter()
        perform_regression(n, crim, rooms, mv, out=_Discard(), workers=workers)
        times.append(time.perf_counter() - start)
    
    return np.median(times)


if __name__ == '__main__':
    if len(sys.argv) > 1:
        crim, rooms, mv = read_columns(sys.argv[1])
    else:
        rng = np.random.default_rng(0)
        crim = rng.exponential(3.6, 506)
        rooms = rng.normal(6.3, 0.7, 506)
        mv = 9.1 * rooms - 34.7 + rng.normal(0, 6.6, 506)

    print("regbench pipeline benchmark (100 iterations per run)")
    print("=" * 60)
    for workers in (1, 2, 4):
        t = bench_pipeline(crim, rooms, mv, 100, workers)
        print(f"workers={workers}: {t * 1000:>8.2f} ms")
