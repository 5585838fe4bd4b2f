import logging
from typing import Sequence, Union

import numpy as np
import pandas as pd

from ..exceptions import CorrelationImportError

logger = logging.getLogger(__name__)


class CorrelationLoader:
    """
    Load a symbol-labelled correlation matrix and align it to an asset order

    The source is a CSV file (first column holds row labels) or a DataFrame with
    matching row and column labels. Instances are callable with a list of symbols,
    so they can serve directly as a correlation import source.
    """

    def __init__(self, source: Union[str, pd.DataFrame], sep: str = ','):
        self.source = source
        self.sep = sep
        self._raw_data = None

    def load_data(self) -> pd.DataFrame:
        """Load raw correlation data with normalized symbol labels"""
        if isinstance(self.source, pd.DataFrame):
            raw = self.source.copy()
        else:
            try:
                raw = pd.read_csv(self.source, sep=self.sep, index_col=0)
            except FileNotFoundError:
                raise CorrelationImportError(f"Correlation file not found: {self.source}")
            except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
                raise CorrelationImportError(f"Error loading correlations: {e}") from e

        # Clean up labels (remove extra spaces, normalize case)
        raw.index = raw.index.astype(str).str.strip().str.upper()
        raw.columns = raw.columns.astype(str).str.strip().str.upper()

        # Convert European decimal notation (comma) to standard (dot)
        for col in raw.columns:
            if raw[col].dtype == 'object':
                raw[col] = pd.to_numeric(raw[col].astype(str).str.replace(',', '.'), errors='coerce')

        self._raw_data = raw
        return raw

    def load_matrix(self, symbols: Sequence[str]) -> np.ndarray:
        """Correlation entries ordered by the given symbols"""
        raw = self._raw_data if self._raw_data is not None else self.load_data()
        wanted = [s.strip().upper() for s in symbols]

        missing = [s for s in wanted if s not in raw.index or s not in raw.columns]
        if missing:
            raise CorrelationImportError(f"Symbols missing from correlation data: {missing}")

        aligned = raw.loc[wanted, wanted]
        if aligned.isna().any().any():
            raise CorrelationImportError("Correlation data contains missing or non-numeric values")

        logger.debug("Loaded correlations for %d symbols", len(wanted))
        return aligned.to_numpy(dtype=float)

    def __call__(self, symbols: Sequence[str]) -> np.ndarray:
        return self.load_matrix(symbols)
