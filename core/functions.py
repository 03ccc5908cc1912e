"""core/functions.py"""
import math
import logging
from enum import Enum

import numpy as np

from core.errors import DomainError

logger = logging.getLogger(__name__)

# 超过170的阶乘在双精度下必然溢出为inf，不必再逐项相乘
MAX_FACTORIAL_OPERAND = 170


class AngleMode(Enum):
    DEGREES = "degrees"
    RADIANS = "radians"

    @classmethod
    def parse(cls, value):
        """接受枚举本身、'deg'/'rad' 等字符串或布尔值（True 表示角度制）"""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.DEGREES if value else cls.RADIANS
        name = str(value).strip().lower()
        if name in ('deg', 'degree', 'degrees', 'd'):
            return cls.DEGREES
        if name in ('rad', 'radian', 'radians', 'r'):
            return cls.RADIANS
        raise ValueError(f"Unknown angle mode: {value!r}")


CONSTANTS = {
    'pi': math.pi,
    'e': math.e,
}


def _as_float(value):
    return float(value)


class Functions:
    """所有操作符和函数的静态方法集合（IEEE-754 双精度语义）"""

    # 二元操作符========================================

    @staticmethod
    def add(a, b):
        return _as_float(np.add(np.float64(a), np.float64(b)))

    @staticmethod
    def sub(a, b):
        return _as_float(np.subtract(np.float64(a), np.float64(b)))

    @staticmethod
    def mul(a, b):
        with np.errstate(over='ignore', invalid='ignore'):
            return _as_float(np.multiply(np.float64(a), np.float64(b)))

    @staticmethod
    def div(a, b):
        """不做除零保护：1/0 -> inf，0/0 -> nan"""
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return _as_float(np.divide(np.float64(a), np.float64(b)))

    @staticmethod
    def mod(a, b):
        """取模，余数符号跟随被除数（C fmod），x % 0 -> nan"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return _as_float(np.fmod(np.float64(a), np.float64(b)))

    @staticmethod
    def power(a, b):
        """负数的非整数次幂 -> nan，0 的负数次幂 -> inf"""
        with np.errstate(all='ignore'):
            return _as_float(np.power(np.float64(a), np.float64(b)))

    # 一元操作符====================

    @staticmethod
    def negate(a):
        return -_as_float(a)

    @staticmethod
    def factorial(n):
        """非负整数的精确阶乘（逐项相乘），其余输入属于定义域错误"""
        n = _as_float(n)
        if not math.isfinite(n) or n < 0 or n != math.floor(n):
            raise DomainError(f"Factorial is only defined for non-negative integers, got {n}")
        if n > MAX_FACTORIAL_OPERAND:
            return math.inf
        result = 1.0
        for i in range(2, int(n) + 1):
            result *= i
        return result

    # 三角函数=====================

    @staticmethod
    def _to_radians(x, angle_mode):
        if angle_mode == AngleMode.DEGREES:
            return np.float64(x) * (math.pi / 180)
        return np.float64(x)

    @staticmethod
    def _from_radians(x, angle_mode):
        if angle_mode == AngleMode.DEGREES:
            return x * (180 / math.pi)
        return x

    @staticmethod
    def sin(x, angle_mode=AngleMode.DEGREES):
        return _as_float(np.sin(Functions._to_radians(x, angle_mode)))

    @staticmethod
    def cos(x, angle_mode=AngleMode.DEGREES):
        return _as_float(np.cos(Functions._to_radians(x, angle_mode)))

    @staticmethod
    def tan(x, angle_mode=AngleMode.DEGREES):
        return _as_float(np.tan(Functions._to_radians(x, angle_mode)))

    @staticmethod
    def asin(x, angle_mode=AngleMode.DEGREES):
        with np.errstate(invalid='ignore'):
            return Functions._from_radians(_as_float(np.arcsin(np.float64(x))), angle_mode)

    @staticmethod
    def acos(x, angle_mode=AngleMode.DEGREES):
        with np.errstate(invalid='ignore'):
            return Functions._from_radians(_as_float(np.arccos(np.float64(x))), angle_mode)

    @staticmethod
    def atan(x, angle_mode=AngleMode.DEGREES):
        return Functions._from_radians(_as_float(np.arctan(np.float64(x))), angle_mode)

    # 与角度制无关的函数=====================

    @staticmethod
    def sinh(x):
        with np.errstate(over='ignore'):
            return _as_float(np.sinh(np.float64(x)))

    @staticmethod
    def cosh(x):
        with np.errstate(over='ignore'):
            return _as_float(np.cosh(np.float64(x)))

    @staticmethod
    def tanh(x):
        return _as_float(np.tanh(np.float64(x)))

    @staticmethod
    def sqrt(x):
        with np.errstate(invalid='ignore'):
            return _as_float(np.sqrt(np.float64(x)))

    @staticmethod
    def cbrt(x):
        return _as_float(np.cbrt(np.float64(x)))

    @staticmethod
    def abs(x):
        return _as_float(np.abs(np.float64(x)))

    @staticmethod
    def log(x):
        """常用对数（以10为底）"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return _as_float(np.log10(np.float64(x)))

    @staticmethod
    def ln(x):
        with np.errstate(divide='ignore', invalid='ignore'):
            return _as_float(np.log(np.float64(x)))

    @staticmethod
    def exp(x):
        with np.errstate(over='ignore'):
            return _as_float(np.exp(np.float64(x)))

    @staticmethod
    def round(x):
        """四舍五入，.5 向正无穷方向进位（-2.5 -> -2）"""
        x = np.float64(x)
        r = np.floor(x)
        # 不用 floor(x + 0.5)：0.49999999999999994 + 0.5 会进位成 1
        if x - r >= 0.5:
            return _as_float(r + 1.0)
        return _as_float(r)

    @staticmethod
    def floor(x):
        return _as_float(np.floor(np.float64(x)))

    @staticmethod
    def ceil(x):
        return _as_float(np.ceil(np.float64(x)))

    @staticmethod
    def root(x, n):
        """root(x, n) = x 的 n 次方根"""
        with np.errstate(divide='ignore'):
            exponent = np.divide(np.float64(1.0), np.float64(n))
        return Functions.power(x, exponent)


class FunctionSpec:
    def __init__(self, name, arity, impl, uses_angle_mode=False):
        self.name = name
        self.arity = arity
        self.impl = impl
        self.uses_angle_mode = uses_angle_mode

    def __call__(self, args, angle_mode):
        if len(args) != self.arity:
            raise ValueError(f"{self.name} expects {self.arity} arguments, got {len(args)}")
        if self.uses_angle_mode:
            return self.impl(*args, angle_mode)
        return self.impl(*args)


def _build_registry(specs):
    """构建函数注册表，并校验元数与实现签名一致"""
    registry = {}
    for spec in specs:
        if spec.name in registry:
            raise ValueError(f"Duplicate function definition: {spec.name}")
        if spec.name in CONSTANTS:
            raise ValueError(f"Function name clashes with constant: {spec.name}")
        expected = spec.impl.__code__.co_argcount - (1 if spec.uses_angle_mode else 0)
        if expected != spec.arity:
            raise ValueError(f"Arity mismatch for {spec.name}: declared {spec.arity}, implementation takes {expected}")
        registry[spec.name] = spec
    return registry


# 函数注册表
FUNCTION_DEFINITIONS = _build_registry([
    # 三角函数（受角度制影响）
    FunctionSpec('sin', 1, Functions.sin, uses_angle_mode=True),
    FunctionSpec('cos', 1, Functions.cos, uses_angle_mode=True),
    FunctionSpec('tan', 1, Functions.tan, uses_angle_mode=True),
    FunctionSpec('asin', 1, Functions.asin, uses_angle_mode=True),
    FunctionSpec('acos', 1, Functions.acos, uses_angle_mode=True),
    FunctionSpec('atan', 1, Functions.atan, uses_angle_mode=True),

    # 双曲函数
    FunctionSpec('sinh', 1, Functions.sinh),
    FunctionSpec('cosh', 1, Functions.cosh),
    FunctionSpec('tanh', 1, Functions.tanh),

    # 根、对数、指数
    FunctionSpec('sqrt', 1, Functions.sqrt),
    FunctionSpec('cbrt', 1, Functions.cbrt),
    FunctionSpec('root', 2, Functions.root),
    FunctionSpec('log', 1, Functions.log),
    FunctionSpec('ln', 1, Functions.ln),
    FunctionSpec('exp', 1, Functions.exp),

    # 取整与其他
    FunctionSpec('abs', 1, Functions.abs),
    FunctionSpec('fact', 1, Functions.factorial),
    FunctionSpec('round', 1, Functions.round),
    FunctionSpec('floor', 1, Functions.floor),
    FunctionSpec('ceil', 1, Functions.ceil),
])

# 二元操作符 -> 实现
BINARY_OPERATIONS = {
    '+': Functions.add,
    '-': Functions.sub,
    '*': Functions.mul,
    '/': Functions.div,
    '%': Functions.mod,
    '^': Functions.power,
}

# 一元操作符 -> 实现
UNARY_OPERATIONS = {
    'u-': Functions.negate,
    '!': Functions.factorial,
}
