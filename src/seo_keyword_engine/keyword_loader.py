"""
Keyword list loading for bulk insertion.

This module reads keyword lists from:
- CSV files
- Excel files (.xlsx, .xls)
- Plain text files (one keyword per line)
"""

from pathlib import Path
from typing import Optional, Union

import pandas as pd


class KeywordLoadError(Exception):
    """Raised when keyword loading fails."""
    pass


# Common column name variations for keyword data
KEYWORD_COLUMN_VARIANTS = ["keyword", "keywords", "term", "terms", "query", "queries", "phrase"]


def _normalize_column_name(name: str) -> str:
    """Normalize column name for matching."""
    return str(name).lower().strip().replace(" ", "_").replace("-", "_")


def _find_column(df: pd.DataFrame, variants: list[str]) -> Optional[str]:
    """
    Find a column in the DataFrame matching one of the variant names.

    Args:
        df: The DataFrame to search.
        variants: List of possible column name variants.

    Returns:
        The actual column name if found, None otherwise.
    """
    normalized_columns = {_normalize_column_name(col): col for col in df.columns}

    for variant in variants:
        normalized = _normalize_column_name(variant)
        if normalized in normalized_columns:
            return normalized_columns[normalized]

    return None


def _parse_keyword_dataframe(df: pd.DataFrame) -> list[str]:
    """
    Pull keyword phrases out of a DataFrame, in row order.

    Raises:
        KeywordLoadError: If the keyword column is missing or yields nothing.
    """
    if df.empty:
        raise KeywordLoadError("Keyword file is empty")

    keyword_col = _find_column(df, KEYWORD_COLUMN_VARIANTS)
    if keyword_col is None:
        raise KeywordLoadError(
            f"No keyword column found. Expected one of: {', '.join(KEYWORD_COLUMN_VARIANTS)}. "
            f"Found columns: {', '.join(str(c) for c in df.columns)}"
        )

    keywords = [
        str(value).strip()
        for value in df[keyword_col]
        if not pd.isna(value) and str(value).strip()
    ]

    if not keywords:
        raise KeywordLoadError("No valid keywords found in file")

    return keywords


def load_keywords_from_csv(file_path: Union[str, Path]) -> list[str]:
    """
    Load keywords from a CSV file.

    Raises:
        KeywordLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    try:
        df = pd.read_csv(path, encoding="utf-8")
    except UnicodeDecodeError:
        try:
            df = pd.read_csv(path, encoding="latin-1")
        except Exception as e:
            raise KeywordLoadError(f"Failed to read CSV file: {e}")
    except Exception as e:
        raise KeywordLoadError(f"Failed to read CSV file: {e}")

    return _parse_keyword_dataframe(df)


def load_keywords_from_excel(file_path: Union[str, Path], sheet_name: Optional[str] = None) -> list[str]:
    """
    Load keywords from an Excel file.

    Raises:
        KeywordLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    try:
        if sheet_name:
            df = pd.read_excel(path, sheet_name=sheet_name)
        else:
            df = pd.read_excel(path)
    except Exception as e:
        raise KeywordLoadError(f"Failed to read Excel file: {e}")

    return _parse_keyword_dataframe(df)


def load_keywords_from_text(file_path: Union[str, Path]) -> list[str]:
    """Load one keyword per line, ignoring blanks and ``#`` comments."""
    path = Path(file_path)
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise KeywordLoadError(f"Failed to read keyword file: {e}")

    keywords = [
        line.strip() for line in lines
        if line.strip() and not line.strip().startswith("#")
    ]
    if not keywords:
        raise KeywordLoadError("No valid keywords found in file")
    return keywords


def deduplicate_keywords(keywords: list[str]) -> list[str]:
    """
    Remove duplicate keywords (case-insensitive), keeping first occurrences.
    """
    seen: set[str] = set()
    unique: list[str] = []

    for kw in keywords:
        key = kw.lower()
        if key not in seen:
            seen.add(key)
            unique.append(kw)

    return unique


def load_keywords(file_path: Union[str, Path], sheet_name: Optional[str] = None) -> list[str]:
    """
    Load a keyword list, detecting the format from the file extension.

    Args:
        file_path: Path to the keyword file.
        sheet_name: Optional sheet name for Excel files.

    Returns:
        Keywords in file order, duplicates removed.

    Raises:
        KeywordLoadError: If the file is missing, unsupported or invalid.
    """
    path = Path(file_path)

    if not path.exists():
        raise KeywordLoadError(f"File not found: {file_path}")

    suffix = path.suffix.lower()

    if suffix == ".csv":
        keywords = load_keywords_from_csv(path)
    elif suffix in (".xlsx", ".xls"):
        keywords = load_keywords_from_excel(path, sheet_name)
    elif suffix in (".txt", ""):
        keywords = load_keywords_from_text(path)
    else:
        raise KeywordLoadError(
            f"Unsupported file format: {suffix}. Supported formats: .csv, .xlsx, .xls, .txt"
        )

    return deduplicate_keywords(keywords)
