"""utils/formatting.py"""
import math

import numpy as np

# 超过这个量级后整数也改用科学计数法显示
MAX_PLAIN_INTEGER = 1e21


def is_integral(value):
    """有限且没有小数部分"""
    return math.isfinite(value) and value == math.floor(value)


def format_number(value):
    """
    把结果格式化为计算器显示用的最短字符串：
    整数不带小数点，NaN/无穷显示为 NaN/Infinity，其余取最短的往返表示
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if is_integral(value) and abs(value) < MAX_PLAIN_INTEGER:
        return str(int(value))
    if 1e-6 <= abs(value) < MAX_PLAIN_INTEGER:
        return np.format_float_positional(value, trim='-')
    return repr(value)


def format_results(values):
    """批量格式化，供命令行输出使用"""
    return [format_number(v) for v in values]


def format_operand(value):
    """
    格式化为可以再次输入表达式的文本：始终使用定点写法，不用科学计数法
    （词法分析器会把 1e-07 读成 1*e-7）
    """
    value = float(value)
    if not math.isfinite(value):
        return format_number(value)
    if is_integral(value):
        return str(int(value))
    return np.format_float_positional(value, trim='-')
