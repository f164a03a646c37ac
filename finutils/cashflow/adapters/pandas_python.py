# finutils/cashflow/adapters/pandas_python.py
from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Sequence, Tuple
import numpy as np
import pandas as pd
from concurrent.futures import ProcessPoolExecutor
from finutils import config
from finutils.cashflow.irr import irr
from finutils.cashflow.rate import irr2apr

logger = logging.getLogger(__name__)

def _row_flows(df: pd.DataFrame, cashflow_cols: Optional[Sequence[str]], cashflow_col: Optional[str]) -> List[np.ndarray]:
    if cashflow_cols is not None:
        matrix = df[list(cashflow_cols)].to_numpy(dtype=float)
        return list(matrix)
    return [np.asarray(v, dtype=float).ravel() for v in df[cashflow_col]]

# top-level worker so it’s picklable for ProcessPool
def _solve_one_irr(args: Tuple[Tuple[float, ...], float]) -> Tuple[float, str]:
    flows, guess = args
    res = irr(flows, guess)
    if res.ok:
        return float(res.value), "ok"
    return float("nan"), res.kind.value

def compute_irr_on_dataframe(
    df: pd.DataFrame,
    *,
    cashflow_cols: Optional[Sequence[str]] = None,   # wide layout: one column per period
    cashflow_col: Optional[str] = None,              # one column holding a sequence per row
    guess: float = config.DEFAULT_IRR_GUESS,
    periods_per_year: Optional[float] = None,
    out_irr_col: str = "irr",
    out_apr_col: str = "apr",
    out_reason_col: str = "irr_reason",
    n_jobs: Optional[int] = None,
) -> pd.DataFrame:
    """
    Internal rate of return for every row of a DataFrame, with optional parallel solves.

    Parameters
    ----------
    df : pandas.DataFrame
        Input data, one cash flow per row.
    cashflow_cols : sequence of str, optional
        Columns holding c0, c1, ..., cn in order.
    cashflow_col : str, optional
        Column holding a list/array of amounts per row. Give exactly one of
        ``cashflow_cols`` and ``cashflow_col``.
    guess : float, default 0.1
        Initial guess for each row's solve.
    periods_per_year : float, optional
        If given (e.g. finutils.cashflow.period.MONTHLY), an APR column is added.
    out_irr_col : str, default 'irr'
        Name of output IRR column.
    out_apr_col : str, default 'apr'
        Name of output APR column (only written with ``periods_per_year``).
    out_reason_col : str, default 'irr_reason'
        Name of output reason column.
    n_jobs : int, optional
        Number of processes (>=2 enables ProcessPoolExecutor). Defaults to
        the FINUTILS_N_JOBS environment setting.

    Returns
    -------
    pandas.DataFrame
        A copy of `df` with added columns:
        - out_irr_col (float): IRR per period (NaN if not computed).
        - out_reason_col (str): 'ok', 'bad_inputs', 'no_sign_change' or the
          solver's failure kind ('bracket_not_found', 'step_outside_bounds').
        - out_apr_col (float): APR in percent, when ``periods_per_year`` is set.

    Notes
    -----
    - Rows with non-finite amounts, fewer than two amounts, or no sign change
      across the flow are flagged without calling the solver.
    - On Windows or some IDEs, wrap calls with n_jobs>1 under
      `if __name__ == "__main__":` to enable multiprocessing safely.
    """
    # --- validate layout ---
    if (cashflow_cols is None) == (cashflow_col is None):
        raise ValueError("Provide exactly one of 'cashflow_cols' or 'cashflow_col'.")
    if cashflow_cols is not None:
        missing = set(cashflow_cols) - set(df.columns)
        if missing:
            raise ValueError(f"cashflow_cols not found in DataFrame: {missing}")
    elif cashflow_col not in df.columns:
        raise ValueError(f"cashflow_col not found in DataFrame: {cashflow_col!r}")
    if n_jobs is None:
        n_jobs = config.N_JOBS

    out = df.copy()
    flows = _row_flows(out, cashflow_cols, cashflow_col)
    n = len(out)

    # --- per-row input checks ---
    ok_inputs = np.array([f.size >= 2 and bool(np.all(np.isfinite(f))) for f in flows], dtype=bool)
    has_sign_change = np.array([bool(np.any(f > 0.0) and np.any(f < 0.0)) for f in flows], dtype=bool)

    # --- preallocate outputs ---
    irr_values = np.full(n, np.nan, dtype=float)
    reason = np.empty(n, dtype=object)
    reason[~ok_inputs] = "bad_inputs"
    reason[ok_inputs & ~has_sign_change] = "no_sign_change"

    # rows to actually solve
    idxs = np.nonzero(ok_inputs & has_sign_change)[0]
    tasks = [(tuple(float(c) for c in flows[i]), float(guess)) for i in idxs]

    if len(idxs) > 0:
        if n_jobs > 1:
            workers = min(n_jobs, len(idxs))
            with ProcessPoolExecutor(max_workers=workers) as ex:
                results: Iterable[Tuple[float, str]] = ex.map(
                    _solve_one_irr, tasks, chunksize=max(1, len(tasks) // (workers * 4))
                )
                results = list(results)
        else:
            results = [_solve_one_irr(t) for t in tasks]

        for i, (value, rea) in zip(idxs, results):
            irr_values[i] = value
            reason[i] = rea

    solved = int(np.count_nonzero(reason == "ok"))
    logger.info("IRR solved for %d of %d rows", solved, n)

    out[out_irr_col] = irr_values
    out[out_reason_col] = reason
    if periods_per_year is not None:
        out[out_apr_col] = [irr2apr(v, periods_per_year) if np.isfinite(v) else np.nan for v in irr_values]
    return out
