"""Pandas-based data tables for soilcalc."""

from typing import Sequence

import pandas as pd

from soilcalc.schemas import BoreLogRow, DesignBundle

BORE_LOG_COLUMNS = [
    "depth_from",
    "depth_to",
    "soil_type",
    "gamma",
    "cohesion",
    "phi",
    "moisture",
    "spt_n",
    "plasticity_index",
    "remarks",
]


def create_bore_log_dataframe(rows: Sequence[BoreLogRow]) -> pd.DataFrame:
    """
    Create a pandas DataFrame from normalised bore-log rows.

    Args:
        rows: Bore-log rows, top down

    Returns:
        DataFrame with one row per layer and a thickness column
    """
    if not rows:
        return pd.DataFrame(columns=BORE_LOG_COLUMNS + ["thickness"])

    df = pd.DataFrame([row.model_dump() for row in rows], columns=BORE_LOG_COLUMNS)
    df["thickness"] = (df["depth_to"] - df["depth_from"]).clip(lower=0)
    return df


def create_summary_table(bundle: DesignBundle) -> pd.DataFrame:
    """
    Create a metric/value summary table from a design bundle.

    Args:
        bundle: Evaluated design bundle

    Returns:
        Two-column DataFrame suitable for display or export
    """
    rows = [
        ("qsafe_kpa", bundle.qsafe),
        ("governing_depth_m", bundle.governing_depth),
        ("void_ratio", bundle.void_ratio),
        ("cbr_pct", bundle.cbr),
        ("foundation_type", bundle.foundation_type),
        ("max_floors", bundle.max_floors),
        ("exposure", bundle.exposure),
        ("concrete_grade", bundle.concrete.grade),
        ("cement_type", bundle.concrete.cement_type),
        ("structural_system", bundle.steel.system),
        ("slab_system", bundle.superstructure.slab_system),
        (
            "remediation_gain_kpa",
            bundle.remediation.estimated_gain if bundle.remediation else 0.0,
        ),
    ]
    return pd.DataFrame(rows, columns=["metric", "value"])


def export_to_csv(df: pd.DataFrame, filepath: str) -> None:
    """
    Export DataFrame to CSV file.

    Args:
        df: DataFrame to export
        filepath: Path to save CSV file
    """
    df.to_csv(filepath, index=False)


def export_to_excel(df: pd.DataFrame, filepath: str) -> None:
    """
    Export DataFrame to Excel file.

    Args:
        df: DataFrame to export
        filepath: Path to save Excel file
    """
    df.to_excel(filepath, index=False, engine="openpyxl")
