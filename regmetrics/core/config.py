import os


def _cpu_workers() -> int:
    return os.cpu_count() or 1


class Settings:
    # Metric Settings
    LCP_EPSILON: float = float(os.getenv("LCP_EPSILON", 0.01))

    # Parallel Reduction Settings
    LCP_PARALLEL_REDUCE: bool = os.getenv("LCP_PARALLEL_REDUCE", "true").lower() == "true"
    LCP_MAX_WORKERS: int = int(os.getenv("LCP_MAX_WORKERS", _cpu_workers()))
    LCP_CHUNK_SIZE: int = int(os.getenv("LCP_CHUNK_SIZE", 2048))

    # Logging Settings
    LCP_LOG_LEVEL: str = os.getenv("LCP_LOG_LEVEL", "INFO").upper()
    LCP_LOG_FILE: str = os.getenv("LCP_LOG_FILE", "")

    @property
    def parallel_reduce_available(self) -> bool:
        """True when the parallel map/reduce scorer can actually fan out."""
        return self.LCP_PARALLEL_REDUCE and self.LCP_MAX_WORKERS > 1


settings = Settings()
