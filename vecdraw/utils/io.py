"""
Input/output utilities for loading and saving data.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import pandas as pd

logger = logging.getLogger(__name__)


def load_csv(file_path: Union[str, Path]) -> pd.DataFrame:
    """
    Load a CSV file into a pandas DataFrame.

    Args:
        file_path: Path to the CSV file

    Returns:
        DataFrame containing the CSV data
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        df = pd.read_csv(file_path, skipinitialspace=True)
        df.columns = [str(column).strip().lower() for column in df.columns]
        logger.info(f"Loaded {len(df)} rows from {file_path}")
        return df
    except Exception as e:
        logger.error(f"Error loading CSV file {file_path}: {e}")
        raise


def find_column(df: pd.DataFrame, *candidates: str) -> str:
    """
    Return the first of `candidates` present as a column of `df`.

    Raises:
        KeyError: If none of the candidate columns exist
    """
    for name in candidates:
        if name in df.columns:
            return name
    raise KeyError(f"None of the columns {', '.join(candidates)} found in {list(df.columns)}")


def load_svg(file_path: Union[str, Path]) -> str:
    """
    Load SVG code from a file.

    Args:
        file_path: Path to the SVG file

    Returns:
        SVG code as a string
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"SVG file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()


def save_svg(
    svg_code: str,
    output_path: Union[str, Path],
    create_dirs: bool = True
) -> Path:
    """
    Save SVG code to a file.

    Args:
        svg_code: SVG code as a string
        output_path: Path to save the SVG
        create_dirs: Whether to create parent directories if they don't exist

    Returns:
        Path the SVG was written to
    """
    output_path = Path(output_path)

    if create_dirs:
        output_path.parent.mkdir(exist_ok=True, parents=True)

    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(svg_code)
        logger.info(f"SVG saved to: {output_path}")
        return output_path
    except Exception as e:
        logger.error(f"Error saving SVG to {output_path}: {e}")
        raise


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        Dictionary containing configuration
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config = json.load(f)

    if not isinstance(config, dict):
        raise ValueError(f"Configuration in {config_path} must be a JSON object")
    return config


def save_config(
    config: Dict[str, Any],
    output_path: Union[str, Path],
    create_dirs: bool = True
) -> None:
    """
    Save configuration to a JSON file.

    Args:
        config: Dictionary containing configuration
        output_path: Path to save the configuration
        create_dirs: Whether to create parent directories if they don't exist
    """
    output_path = Path(output_path)

    if create_dirs:
        output_path.parent.mkdir(exist_ok=True, parents=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=2)
    logger.info(f"Configuration saved to: {output_path}")
