"""
Data Loader Module
==================

Loads customer tables for batch scoring.
"""

from pathlib import Path
from typing import Optional, Union

import pandas as pd
from loguru import logger

from config import RAW_DATA_DIR, get_config


class DataLoader:
    """Load customer datasets for churn scoring."""

    SUPPORTED_EXTENSIONS = [".csv", ".xlsx", ".xls", ".parquet"]

    def __init__(self, config: Optional[dict] = None, data_dir: Optional[Path] = None):
        """
        Initialize DataLoader.

        Args:
            config: Configuration dictionary. If None, loads from config.yaml
            data_dir: Directory searched for bare filenames
        """
        self.config = config or get_config()
        self.raw_data_path = Path(data_dir) if data_dir else RAW_DATA_DIR

    def resolve_path(self, filename: Union[str, Path]) -> Path:
        """
        Find a data file, trying the raw data directory and other extensions.

        Args:
            filename: Path or name of the data file

        Returns:
            Path to an existing file

        Raises:
            FileNotFoundError: If no matching file exists
        """
        file_path = Path(filename)
        if not file_path.exists():
            file_path = self.raw_data_path / filename

        # Try different file extensions
        if not file_path.exists():
            for ext in self.SUPPORTED_EXTENSIONS:
                alt_path = file_path.with_suffix(ext)
                if alt_path.exists():
                    file_path = alt_path
                    break

        if not file_path.exists():
            logger.error(f"Data file not found: {filename}")
            raise FileNotFoundError(f"Data file not found: {filename}")

        return file_path

    def load_customers(self, filename: Union[str, Path], **kwargs) -> pd.DataFrame:
        """
        Load a customer table from CSV, Excel or Parquet.

        Args:
            filename: Path or name of the data file
            **kwargs: Additional arguments to pass to the pandas reader

        Returns:
            DataFrame containing one row per customer
        """
        file_path = self.resolve_path(filename)
        logger.info(f"Loading customers from {file_path}")

        # Load based on file extension
        ext = file_path.suffix.lower()
        if ext == ".csv":
            df = pd.read_csv(file_path, **kwargs)
        elif ext in [".xlsx", ".xls"]:
            df = pd.read_excel(file_path, **kwargs)
        elif ext == ".parquet":
            df = pd.read_parquet(file_path, **kwargs)
        else:
            raise ValueError(f"Unsupported file format: {ext}")

        logger.info(f"Loaded {len(df)} rows and {len(df.columns)} columns")
        return df

    def validate_data(self, df: pd.DataFrame) -> dict:
        """
        Summarise data quality.

        Args:
            df: DataFrame to validate

        Returns:
            Dictionary with validation results
        """
        return {
            "total_rows": len(df),
            "total_columns": len(df.columns),
            "missing_values": df.isnull().sum().to_dict(),
            "duplicates": int(df.duplicated().sum()),
        }
