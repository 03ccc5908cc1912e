"""graph/sampler.py - 把作图定义中的显式函数 y = f(x) 采样为数据表"""
import re
import logging

import numpy as np
import pandas as pd

from config.config import GRAPH_CONFIG
from core import AngleMode, EvalError, ExpressionEvaluator

logger = logging.getLogger(__name__)

IMPLICIT_PATTERN = re.compile(r"[=<>]")

# LaTeX命令 -> 计算器函数名
_LATEX_COMMANDS = (
    (r"\sin", "sin"), (r"\cos", "cos"), (r"\tan", "tan"),
    (r"\ln", "ln"), (r"\log", "log"), (r"\exp", "exp"),
    (r"\sqrt", "sqrt"), (r"\pi", "pi"),
    (r"\left", ""), (r"\right", ""), (r"\cdot", "*"),
)


def clean_equation(eq):
    """去掉LaTeX格式，转换为计算器可以解析的写法"""
    if not eq:
        return ''
    cleaned = eq
    for command, replacement in _LATEX_COMMANDS:
        cleaned = cleaned.replace(command, replacement)
    cleaned = cleaned.replace('\\', '')
    cleaned = re.sub(r"\^\{([0-9.]+)\}", r"^\1", cleaned)   # x^{2} -> x^2
    cleaned = re.sub(r"\^\{([^}]+)\}", r"^(\1)", cleaned)   # x^{2y} -> x^(2y)
    cleaned = cleaned.replace('{', '(').replace('}', ')')
    return re.sub(r"\s", '', cleaned)


def is_implicit(eq):
    """含 = < > 的是隐函数或不等式，不能按 y = f(x) 采样"""
    return bool(IMPLICIT_PATTERN.search(eq))


def sample_function(expression, xs, angle_mode=AngleMode.RADIANS, evaluator=None):
    """
    按给定的 x 序列逐点求值；表达式只编译一次
    Returns:
        np.ndarray，无法求值或非有限的点为 NaN
    """
    evaluator = evaluator or ExpressionEvaluator()
    ys = np.full(len(xs), np.nan)
    for i, x in enumerate(xs):
        try:
            y = evaluator.compute(expression, angle_mode=angle_mode, constants={'x': float(x)})
        except EvalError:
            continue
        if np.isfinite(y):
            ys[i] = y
    return ys


def sample_functions(graph_data, num_points=None, angle_mode=None, evaluator=None):
    """
    对作图定义中的每个显式函数在 x 定义域上等距采样
    Args:
        graph_data: GraphData
        num_points: 采样点数，默认取配置
        angle_mode: 三角函数的角度制，作图默认弧度
    Returns:
        DataFrame：第一列 x，其余每列是一个函数（列名为清理后的表达式）
    """
    num_points = num_points or GRAPH_CONFIG["num_points"]
    angle_mode = AngleMode.parse(angle_mode or GRAPH_CONFIG["angle_mode"])
    lo, hi = graph_data.x_domain or GRAPH_CONFIG["default_x_domain"]
    evaluator = evaluator or ExpressionEvaluator()

    xs = np.linspace(lo, hi, num_points)
    frame = pd.DataFrame({'x': xs})
    for fn in graph_data.functions:
        cleaned = clean_equation(fn)
        if not cleaned:
            continue
        if is_implicit(cleaned):
            logger.warning(f"Skipping implicit equation {cleaned!r}, only y = f(x) can be sampled")
            continue
        frame[cleaned] = sample_function(cleaned, xs, angle_mode=angle_mode, evaluator=evaluator)
        failed = int(frame[cleaned].isna().sum())
        if failed:
            logger.debug(f"{cleaned!r}: {failed}/{num_points} samples undefined")
    return frame


def points_frame(graph_data):
    """标注点（交点等）转换为 DataFrame"""
    points = graph_data.points or []
    return pd.DataFrame(
        {'x': [p.x for p in points], 'y': [p.y for p in points], 'label': [p.label for p in points]},
        columns=['x', 'y', 'label'],
    )
