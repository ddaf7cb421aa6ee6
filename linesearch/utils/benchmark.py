import time
import logging
import json
from typing import List, Dict, Any, Iterable, Optional
from pathlib import Path
import numpy as np
from datetime import datetime

from linesearch.core import LineIndex
from linesearch.index_base import SearchStrategy

logger = logging.getLogger(__name__)


def _latency_summary(latencies: np.ndarray) -> Dict[str, float]:
    return {
        "mean": float(np.mean(latencies)),
        "median": float(np.median(latencies)),
        "p95": float(np.percentile(latencies, 95)),
        "max": float(np.max(latencies))
    }


class BenchmarkResults:
    """Timed searches of one benchmark run, one entry per (query, strategy)."""

    def __init__(self, experiment_name: str):
        self.experiment_name = experiment_name
        self.timestamp = datetime.now().isoformat()
        self.queries = []
        self.strategies = []
        self.latencies = []
        self.results_count = []

    def add_query_result(self, query: str, strategy: SearchStrategy, latency: float,
                         num_results: int):
        self.queries.append(query)
        self.strategies.append(strategy.name)
        self.latencies.append(latency)
        self.results_count.append(num_results)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Summarize latencies overall and per strategy.

        Hits are searches that matched at least one line.
        """
        stats = {
            "experiment_name": self.experiment_name,
            "timestamp": self.timestamp,
            "total_queries": len(self.queries),
        }

        if not self.latencies:
            return stats

        latencies = np.array(self.latencies)
        hits = np.array(self.results_count) > 0
        strategies = np.array(self.strategies)
        total_ms = float(np.sum(latencies))

        by_strategy = {}
        for name in dict.fromkeys(self.strategies):
            mask = strategies == name
            by_strategy[name] = {
                "latency_ms": _latency_summary(latencies[mask]),
                "hits": int(np.sum(hits[mask]))
            }

        stats.update({
            "latency_ms": _latency_summary(latencies),
            "throughput_qps": len(self.queries) / total_ms * 1000 if total_ms > 0 else 0,
            "hit_rate": float(np.mean(hits)),
            "by_strategy": by_strategy
        })

        return stats

    def save(self, output_dir: Path) -> Path:
        """Write the statistics to <output_dir>/<experiment_name>.json."""
        output_dir.mkdir(parents=True, exist_ok=True)

        path = output_dir / f"{self.experiment_name}.json"
        with open(path, 'w') as f:
            json.dump(self.get_statistics(), f, indent=2)

        logger.info(f"Saved benchmark results to {path}")
        return path


class Benchmarker:
    """Measures search latency over a populated index."""

    def __init__(self, config):
        """
        Initialize benchmarker.

        Args:
            config: Hydra configuration object
        """
        self.config = config

    def benchmark_queries(
        self,
        index: LineIndex,
        queries: List[str],
        strategies: Optional[Iterable[SearchStrategy]] = None,
        experiment_name: str = "benchmark"
    ) -> BenchmarkResults:
        """
        Benchmark every query under every strategy.

        Args:
            index: Populated index
            queries: List of query strings
            strategies: Strategies to run (default: all three)
            experiment_name: Name for this experiment

        Returns:
            BenchmarkResults object
        """
        strategies = list(strategies) if strategies else list(SearchStrategy)
        results = BenchmarkResults(experiment_name)

        logger.info(f"Starting benchmark: {experiment_name}")
        logger.info(f"Total queries: {len(queries)} x {len(strategies)} strategies")

        # Warmup queries
        warmup_count = min(self.config.benchmark.warmup_queries, len(queries))
        for i in range(warmup_count):
            for strategy in strategies:
                index.search(queries[i], strategy)

        for i, query in enumerate(queries):
            for strategy in strategies:
                start_time = time.perf_counter()
                result = index.search(query, strategy)
                latency_ms = (time.perf_counter() - start_time) * 1000

                num_results = len(result) if result.is_found() else 0
                results.add_query_result(query, strategy, latency_ms, num_results)

            if (i + 1) % 100 == 0:
                logger.info(f"Processed {i + 1}/{len(queries)} queries")

        stats = results.get_statistics()
        if 'latency_ms' in stats:
            logger.info(f"Experiment: {experiment_name}, {stats['total_queries']} searches, "
                        f"{stats['throughput_qps']:.2f} queries/sec")
            for name, row in stats['by_strategy'].items():
                logger.info(f"  {name:4s} mean {row['latency_ms']['mean']:.3f} ms, "
                            f"p95 {row['latency_ms']['p95']:.3f} ms, {row['hits']} hits")

        return results
