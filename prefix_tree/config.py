"""Configuration parser for the prefix tree benchmarks."""

from pathlib import Path
from typing import Optional, cast


class ConfigBoolParsingError(Exception):
    """Raised when the parsing of bool strings in
    the config file was not successful.
    """


class ConfigNotFoundError(Exception):
    """Raised when any of the configuration settings is not provided."""


class BenchmarkConfig:
    """A class to save benchmark configuration settings."""

    def __init__(
        self,
        data_path: Path,
        query_count: int,
        repeat: int,
        save_plot: bool,
        log_level: str = "INFO",
    ) -> None:
        """Initialize the benchmark configuration.

        Args:
            data_path (Path): The data file whose lines are loaded
            into every benchmarked structure.
            query_count (int): How many prefix lookups to time.
            repeat (int): How many times each timing is repeated.
            save_plot (bool): Whether to save a comparison chart.
            log_level (str): The logging level name.

        """
        self.data_path = data_path
        self.query_count = query_count
        self.repeat = repeat
        self.save_plot = save_plot
        self.log_level = log_level

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        return f"""
                Benchmark configuration settings:
                Data path: {self.data_path}
                Query count: {self.query_count}
                Repeat: {self.repeat}
                Save plot: {"YES" if self.save_plot else "NO"}
                Log level: {self.log_level}
            """


def parse_bool(key: str, val: str) -> bool:
    """Parse given values into boolean ones (True or False).

    Args:
        key (str): The key to parse the boolean for.
        val (str): The value to be parsed to boolean.

    Raises:
        ConfigBoolParsingError: If an error occured
        while parsing the value to boolean.

    Returns:
        bool: True or False depending on the output of the parser.

    """
    if val.strip().lower() in {"true", "1", "yes"}:
        return True
    if val.strip().lower() in {"false", "0", "no"}:
        return False

    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}' in the configuration file. "
        "Expected 'true', 'false', '1', '0', 'yes', or 'no' "
        "(case-insensitive).",
    )


def parse_positive_int(key: str, val: str) -> int:
    """Parse a strictly positive integer setting.

    Args:
        key (str): The key to parse the integer for.
        val (str): The value to be parsed.

    Raises:
        ValueError: If the value is not an integer greater than zero.

    Returns:
        int: The parsed integer.

    """
    try:
        number = int(val)
    except ValueError as e:
        raise ValueError(
            f"Invalid integer value for key '{key}': '{val}'.",
        ) from e

    if number <= 0:
        raise ValueError(
            f"The value of '{key}' must be greater than zero, got {number}.",
        )
    return number


def load_config_file(config_file_path: Path) -> BenchmarkConfig:
    """Load and parse the configuration file.

    Args:
        config_file_path (Path): Path to the config file.

    Raises:
        ConfigNotFoundError: If required settings are missing.
        ConfigBoolParsingError: If a boolean setting is invalid.
        ValueError: If a numeric setting is invalid.
        FileNotFoundError: If a file does not exist.

    Returns:
        BenchmarkConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    data_path: Optional[Path] = None
    query_count: Optional[int] = None
    repeat: Optional[int] = None
    save_plot: Optional[bool] = None
    log_level = "INFO"

    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            if key == "datapath":
                data_path = Path(value)
            elif key == "query_count":
                query_count = parse_positive_int("query_count", value)
            elif key == "repeat":
                repeat = parse_positive_int("repeat", value)
            elif key == "save_plot":
                save_plot = parse_bool("save_plot", value)
            elif key == "log_level":
                log_level = value.upper()

    required = {
        "data_path": data_path,
        "query_count": query_count,
        "repeat": repeat,
        "save_plot": save_plot,
    }

    for key, val in required.items():
        if val is None:
            raise ConfigNotFoundError(
                f"Missing required configuration: '{key}'. "
                "Please ensure the config file includes a valid line for "
                f"'{'datapath' if key == 'data_path' else key}'.",
            )

    if data_path is not None and not data_path.exists():
        raise FileNotFoundError(
            f"The required file {data_path} doesn't exist.",
        )

    return BenchmarkConfig(
        cast("Path", data_path),
        cast("int", query_count),
        cast("int", repeat),
        cast("bool", save_plot),
        log_level,
    )
