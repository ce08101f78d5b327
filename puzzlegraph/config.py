"""Configuration classes for puzzlegraph traversals."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Configuration for traversal progress reporting."""

    # Number of frontier pops between DEBUG progress records; 0 disables them
    progress_interval: int = 100_000

    def should_report(self, pops: int) -> bool:
        """Return True if a progress record is due after ``pops`` frontier pops."""
        if self.progress_interval <= 0 or pops <= 0:
            return False
        return pops % self.progress_interval == 0


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
