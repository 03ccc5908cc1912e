"""批量表达式的加载与求值"""
import logging

import numpy as np
import pandas as pd

from config.config import BATCH_CONFIG
from core import AngleMode, ExpressionEvaluator

logger = logging.getLogger(__name__)


def load_expressions(file_path, column=None):
    """
    加载表达式文件。

    Parameters:
    - file_path: CSV 文件（需要包含表达式列）或纯文本文件（每行一个表达式）
    - column: 表达式列名, 默认取 BATCH_CONFIG['expression_column']

    Returns:
    - DataFrame，至少包含表达式列
    """
    column = column or BATCH_CONFIG["expression_column"]
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        # keep_default_na=False：避免 "nan"、"NA" 之类的表达式被读成缺失值
        frame = pd.read_csv(file_path, dtype={column: str}, keep_default_na=False)
        if column not in frame.columns:
            raise ValueError(f"Expression column '{column}' not found in {file_path}.")
    else:
        with open(file_path, encoding='utf-8') as f:
            lines = [line.rstrip('\n') for line in f]
        frame = pd.DataFrame({column: [line for line in lines if line.strip()]})

    logger.info(f"Loaded {len(frame)} expressions")
    return frame


def evaluate_frame(frame, column=None, angle_mode=AngleMode.DEGREES, result_column=None,
                   evaluator=None):
    """
    对表达式列逐行求值，返回带结果列的新DataFrame（不修改原始数据）

    Parameters:
    - frame: 包含表达式列的DataFrame
    - column: 表达式列名
    - angle_mode: 三角函数角度制
    - result_column: 结果列名
    - evaluator: 可复用的 ExpressionEvaluator，重复表达式只编译一次
    """
    column = column or BATCH_CONFIG["expression_column"]
    result_column = result_column or BATCH_CONFIG["result_column"]
    evaluator = evaluator or ExpressionEvaluator()
    angle_mode = AngleMode.parse(angle_mode)

    results = frame.copy()
    results[result_column] = [
        evaluator.evaluate('' if pd.isna(expr) else str(expr), angle_mode=angle_mode)
        for expr in frame[column]
    ]
    results[result_column] = results[result_column].astype(float)

    failed = int(results[result_column].isna().sum())
    if failed:
        logger.warning(f"{failed} of {len(results)} expressions could not be evaluated")
    return results


def summarize_results(frame, result_column=None):
    """统计结果列：总数、失败(NaN)、无穷、有限"""
    result_column = result_column or BATCH_CONFIG["result_column"]
    values = frame[result_column].to_numpy(dtype=float)
    return {
        "total": int(len(values)),
        "failed": int(np.isnan(values).sum()),
        "infinite": int(np.isinf(values).sum()),
        "finite": int(np.isfinite(values).sum()),
    }
