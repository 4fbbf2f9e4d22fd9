"""Queens solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Queens solver."""

    max_bits: int = 64
    """Supported bit width for the row, column and region trackers. Default: 64."""

    use_nogoods: bool = True
    """Whether to record and consult dead partial assignments. Default: True."""

    forward_check: bool = True
    """Whether to reject a node when some unused row/column/region has no spots left.

    Default: True.
    """

    mrv_ordering: bool = True
    """Whether to try the most constrained candidates first. Default: True."""

    report_interval: int = 100_000
    """Interval (in number of search nodes) at which to report progress. Default: 100,000."""

    log_dir: str = "logs"

    model_config = SettingsConfigDict(
        env_prefix="QUEENS_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
