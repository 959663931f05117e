"""Configuration loading, validation, and defaults."""

from stockfolio.config.loader import data_file_path, load_config
from stockfolio.config.schema import StockfolioConfig

__all__ = ["data_file_path", "load_config", "StockfolioConfig"]
