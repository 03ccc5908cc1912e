"""核心模块 - Token系统、词法/语法分析、RPN评估器和函数注册表"""
from .token_system import (
    TokenType, Token, Associativity, OperatorSpec, OPERATOR_DEFINITIONS, UNARY_MINUS
)
from .errors import (
    EvalError, LexicalError, StackUnderflowError, UnknownSymbolError,
    MalformedResultError, DomainError, MismatchedParensError, ExpressionTooLongError
)
from .functions import AngleMode, Functions, FunctionSpec, FUNCTION_DEFINITIONS, CONSTANTS
from .normalizer import normalize
from .lexer import tokenize, insert_implicit_multiplication
from .parser import mark_unary_minus, to_postfix
from .rpn_evaluator import RPNEvaluator
from .engine import evaluate, compute, compile_expression, ExpressionEvaluator

__all__ = [
    'TokenType', 'Token', 'Associativity', 'OperatorSpec', 'OPERATOR_DEFINITIONS', 'UNARY_MINUS',
    'EvalError', 'LexicalError', 'StackUnderflowError', 'UnknownSymbolError',
    'MalformedResultError', 'DomainError', 'MismatchedParensError', 'ExpressionTooLongError',
    'AngleMode', 'Functions', 'FunctionSpec', 'FUNCTION_DEFINITIONS', 'CONSTANTS',
    'normalize', 'tokenize', 'insert_implicit_multiplication',
    'mark_unary_minus', 'to_postfix', 'RPNEvaluator',
    'evaluate', 'compute', 'compile_expression', 'ExpressionEvaluator'
]
