"""core/engine.py - 表达式求值的公开入口

    normalize -> tokenize -> insert_implicit_multiplication -> to_postfix -> RPNEvaluator

compute() 以异常的形式返回错误；evaluate() 在边界处把所有失败折叠为 NaN。
"""
import math
import logging
from collections import OrderedDict
from typing import Dict, List, Optional

from config.config import EVALUATOR_CONFIG
from core.errors import EvalError, ExpressionTooLongError
from core.functions import AngleMode
from core.lexer import tokenize, insert_implicit_multiplication
from core.normalizer import normalize
from core.parser import to_postfix
from core.rpn_evaluator import RPNEvaluator
from core.token_system import Token

logger = logging.getLogger(__name__)


def _is_blank(expression: Optional[str]) -> bool:
    return not expression or not expression.strip()


def _prepare_constants(constants: Optional[Dict[str, float]]) -> Optional[Dict[str, float]]:
    if not constants:
        return None
    return {name.lower(): float(value) for name, value in constants.items()}


def _resolve_angle_mode(angle_mode):
    """未指定时取配置中的默认角度制"""
    if angle_mode is None:
        angle_mode = EVALUATOR_CONFIG["angle_mode"]
    return AngleMode.parse(angle_mode)


def _check_length(expression: str, limit: Optional[int] = None):
    limit = EVALUATOR_CONFIG["max_expression_length"] if limit is None else limit
    if limit and len(expression) > limit:
        raise ExpressionTooLongError(len(expression), limit)


def compile_expression(expression: str, strict: Optional[bool] = None,
                       constants: Optional[Dict[str, float]] = None,
                       strict_parens: Optional[bool] = None) -> List[Token]:
    """
    把表达式编译为后缀Token序列（与角度制无关，可以重复使用）
    Args:
        expression: 原始输入
        strict: 严格词法模式，遇到未知字符抛出 LexicalError，默认取配置
        constants: 额外常数，只用到名称
        strict_parens: 括号不匹配时是否报错，默认取配置
    """
    if strict is None:
        strict = EVALUATOR_CONFIG["strict_lexing"]
    if strict_parens is None:
        strict_parens = EVALUATOR_CONFIG["strict_parens"]
    tokens = tokenize(normalize(expression), constants=constants, strict=strict)
    tokens = insert_implicit_multiplication(tokens)
    return to_postfix(tokens, strict_parens=strict_parens)


def compute(expression: str, angle_mode=None, strict: Optional[bool] = None,
            constants: Optional[Dict[str, float]] = None,
            strict_parens: Optional[bool] = None) -> float:
    """求值并以 EvalError 子类报告失败；空白输入返回 0"""
    if _is_blank(expression):
        return 0.0
    _check_length(expression)
    constants = _prepare_constants(constants)
    postfix = compile_expression(expression, strict=strict, constants=constants,
                                 strict_parens=strict_parens)
    return RPNEvaluator.evaluate(postfix, _resolve_angle_mode(angle_mode), constants)


def evaluate(expression: str, angle_mode=None, strict: Optional[bool] = None,
             constants: Optional[Dict[str, float]] = None,
             strict_parens: Optional[bool] = None) -> float:
    """
    计算表达式的值
    Returns:
        float 结果；任何失败都返回 NaN，不会抛出异常
    """
    try:
        return compute(expression, angle_mode=angle_mode, strict=strict,
                       constants=constants, strict_parens=strict_parens)
    except EvalError as e:
        logger.debug(f"Evaluation failed for {expression!r}: {e}")
        return math.nan
    except Exception as e:
        logger.warning(f"Evaluator error for {expression!r}: {type(e).__name__}: {e}")
        return math.nan


class ExpressionEvaluator:
    """带编译缓存的求值器；同一表达式只做一次词法和语法分析"""

    def __init__(self, cache_size=None, strict=None, strict_parens=None,
                 max_expression_length=None):
        self.cache_size = EVALUATOR_CONFIG["cache_size"] if cache_size is None else cache_size
        self.strict = EVALUATOR_CONFIG["strict_lexing"] if strict is None else strict
        self.strict_parens = EVALUATOR_CONFIG["strict_parens"] if strict_parens is None else strict_parens
        self.max_expression_length = (EVALUATOR_CONFIG["max_expression_length"]
                                      if max_expression_length is None else max_expression_length)
        # 使用有限大小的OrderedDict实现LRU缓存
        self._compiled = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        while len(self._compiled) > self.cache_size:
            self._compiled.popitem(last=False)

    def clear_cache(self):
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._compiled.clear()
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self):
        return {
            "hits": self._cache_hits,
            "misses": self._cache_misses,
            "size": len(self._compiled),
            "max_size": self.cache_size,
        }

    def compile(self, expression: str, constant_names=()) -> List[Token]:
        cache_key = (expression, tuple(sorted(name.lower() for name in constant_names)))
        if cache_key in self._compiled:
            self._compiled.move_to_end(cache_key)
            self._cache_hits += 1
            return self._compiled[cache_key]

        self._cache_misses += 1
        _check_length(expression, self.max_expression_length)
        postfix = compile_expression(expression, strict=self.strict,
                                     constants=dict.fromkeys(constant_names, 0.0),
                                     strict_parens=self.strict_parens)
        if self.cache_size > 0:
            self._compiled[cache_key] = postfix
            self._manage_cache()
        return postfix

    def compute(self, expression: str, angle_mode=None,
                constants: Optional[Dict[str, float]] = None) -> float:
        if _is_blank(expression):
            return 0.0
        constants = _prepare_constants(constants)
        postfix = self.compile(expression, constants.keys() if constants else ())
        return RPNEvaluator.evaluate(postfix, _resolve_angle_mode(angle_mode), constants)

    def evaluate(self, expression: str, angle_mode=None,
                 constants: Optional[Dict[str, float]] = None) -> float:
        try:
            return self.compute(expression, angle_mode=angle_mode, constants=constants)
        except EvalError as e:
            logger.debug(f"Evaluation failed for {expression!r}: {e}")
            return math.nan
        except Exception as e:
            logger.warning(f"Evaluator error for {expression!r}: {type(e).__name__}: {e}")
            return math.nan
