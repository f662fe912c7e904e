"""
Data Preprocessor Module
========================

Maps raw customer tables onto scoring inputs.
"""

from typing import Dict, List, Optional

import pandas as pd
from loguru import logger

from config import get_config
from ..exceptions import InvalidInput
from ..schemas import ChurnInput, parse_input

INTEGER_FIELDS = ["tenure", "complaints", "satisfaction_score", "city_tier"]
NUMERIC_FIELDS = INTEGER_FIELDS + ["cashback_amount"]
FLAG_FIELDS = [
    "purchased_laptop_accessory",
    "purchased_grocery",
    "purchased_other_products",
    "purchased_mobile",
]


class CustomerPreprocessor:
    """Prepare customer tables for the scoring engine."""

    def __init__(self, config: Optional[dict] = None):
        """
        Initialize CustomerPreprocessor.

        Args:
            config: Configuration dictionary
        """
        self.config = config or get_config()
        self.data_config = self.config.get("data", {})
        self.column_map: Dict[str, str] = self.data_config.get("columns", {})
        self.category_column: Optional[str] = self.data_config.get("order_category_column")
        self.category_flags: Dict[str, str] = self.data_config.get("order_categories", {})

    def clean_data(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Clean raw data.

        Args:
            df: Raw DataFrame

        Returns:
            Cleaned DataFrame
        """
        df = df.copy()

        initial_rows = len(df)
        df = df.drop_duplicates()
        dropped_rows = initial_rows - len(df)
        if dropped_rows > 0:
            logger.info(f"Removed {dropped_rows} duplicate rows")

        return df

    def map_columns(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Rename raw dataset columns to engine fields and derive purchase flags.

        Columns already named after engine fields (snake_case or camelCase)
        are kept. Purchase flags missing from the table are derived from the
        preferred order category column when present.

        Args:
            df: Input DataFrame

        Returns:
            DataFrame with engine field columns
        """
        df = df.copy()

        aliases = {info.alias: name for name, info in ChurnInput.model_fields.items()}
        rename = {col: field for col, field in self.column_map.items() if col in df.columns}
        rename.update({col: aliases[col] for col in df.columns if col in aliases})
        df = df.rename(columns=rename)

        if self.category_column and self.category_column in df.columns:
            for flag in FLAG_FIELDS:
                if flag in df.columns:
                    continue
                categories = [cat for cat, target in self.category_flags.items() if target == flag]
                df[flag] = df[self.category_column].isin(categories)
            logger.debug(f"Derived purchase flags from {self.category_column}")

        return df

    def handle_missing_values(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Impute missing values: medians for numbers, False for purchase flags.

        Args:
            df: DataFrame with engine field columns

        Returns:
            DataFrame with imputed values
        """
        df = df.copy()

        for col in [c for c in NUMERIC_FIELDS if c in df.columns]:
            if df[col].isnull().any() and df[col].notnull().any():
                fill = df[col].median()
                if col in INTEGER_FIELDS:
                    fill = round(fill)
                df[col] = df[col].fillna(fill)
                logger.debug(f"Imputed {col} with median {fill}")

        for col in [c for c in FLAG_FIELDS if c in df.columns]:
            df[col] = df[col].where(df[col].notnull(), False)

        return df

    def to_inputs(self, df: pd.DataFrame, skip_invalid: bool = False) -> List[ChurnInput]:
        """
        Convert a customer table to validated scoring inputs.

        Args:
            df: Raw customer DataFrame
            skip_invalid: Log and skip invalid rows instead of raising

        Returns:
            List of ChurnInput records

        Raises:
            InvalidInput: If a row is invalid and skip_invalid is False
        """
        df = self.handle_missing_values(self.map_columns(self.clean_data(df)))
        fields = [c for c in NUMERIC_FIELDS + FLAG_FIELDS if c in df.columns]

        inputs = []
        for index, record in zip(df.index, df[fields].to_dict(orient="records")):
            try:
                inputs.append(parse_input(record))
            except InvalidInput as e:
                if not skip_invalid:
                    raise InvalidInput(e.field, f"{e.constraint} (row {index})") from e
                logger.warning(f"Skipping row {index}: {e}")

        logger.info(f"Prepared {len(inputs)} of {len(df)} rows for scoring")
        return inputs
