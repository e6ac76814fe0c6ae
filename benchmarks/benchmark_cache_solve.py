import time
import numpy as np
import cachematrix


def benchmark_cache_solve(n, iterations=5):
    print(f"\n--- Benchmarking cache_solve (N={n}) ---")

    a_np = np.random.rand(n, n)
    # Diagonally dominant so it is invertible
    a_np += np.eye(n) * n
    cm = cachematrix.make_cache_matrix(a_np)

    start = time.perf_counter()
    cachematrix.cache_solve(cm)
    end = time.perf_counter()
    miss_time = end - start
    print(f"First call (miss): {miss_time:.4f} s")

    start = time.perf_counter()
    for _ in range(iterations):
        cachematrix.cache_solve(cm)
    end = time.perf_counter()
    hit_time = (end - start) / iterations
    print(f"Cached call (hit): {hit_time:.6f} s")

    start = time.perf_counter()
    for _ in range(iterations):
        np.linalg.inv(a_np)
    end = time.perf_counter()
    np_time = (end - start) / iterations
    print(f"NumPy inv:         {np_time:.4f} s")

    print(f"Stats:             {cm.stats}")


if __name__ == "__main__":
    cachematrix.set_memory_warning_threshold(None)
    for n in [100, 500, 1000]:
        benchmark_cache_solve(n)
