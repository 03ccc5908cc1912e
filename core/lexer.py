"""core/lexer.py - 词法分析与隐式乘法插入"""
import re
import logging

from core.errors import LexicalError
from core.functions import CONSTANTS
from core.token_system import Token, TokenType, MULTIPLY

logger = logging.getLogger(__name__)

# 每个位置只尝试一次匹配，不回溯
TOKEN_PATTERN = re.compile(
    r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)"   # 数字
    r"|([a-zA-Z_][a-zA-Z0-9_]*)"         # 标识符
    r"|([-+*/^!%])"                      # 操作符
    r"|([()])"                           # 括号
    r"|(,)"                              # 参数分隔符
)
WHITESPACE = re.compile(r"\s+")

# 隐式乘法：左侧是"值的结尾"，右侧是"值的开头"
_VALUE_END = frozenset({TokenType.NUMBER, TokenType.CONSTANT, TokenType.RPAREN})
_VALUE_START = frozenset({TokenType.NUMBER, TokenType.CONSTANT, TokenType.FUNCTION, TokenType.LPAREN})


def tokenize(text, constants=None, strict=False):
    """
    把规范化后的字符串切分为Token序列
    Args:
        text: 规范化后的表达式
        constants: 额外的常数名（除 pi / e 之外），例如会话中的 ans
        strict: True 时遇到无法识别的字符抛出 LexicalError，否则跳过
    Returns:
        Token列表
    """
    known_constants = set(CONSTANTS)
    if constants:
        known_constants.update(name.lower() for name in constants)

    source = WHITESPACE.sub('', text or '')
    tokens = []
    pos = 0
    while pos < len(source):
        match = TOKEN_PATTERN.match(source, pos)
        if match is None:
            if strict:
                raise LexicalError(source[pos], pos, text)
            logger.debug(f"Skipping unrecognized character {source[pos]!r} at position {pos}")
            pos += 1
            continue

        number, ident, op, paren, sep = match.groups()
        if number:
            tokens.append(Token(TokenType.NUMBER, number))
        elif ident:
            name = ident.lower()
            if name in known_constants:
                tokens.append(Token(TokenType.CONSTANT, name))
            else:
                tokens.append(Token(TokenType.FUNCTION, name))
        elif op:
            tokens.append(Token(TokenType.OPERATOR, op))
        elif paren:
            tokens.append(Token(TokenType.LPAREN if paren == '(' else TokenType.RPAREN, paren))
        elif sep:
            tokens.append(Token(TokenType.SEPARATOR, sep))
        pos = match.end()

    return tokens


def insert_implicit_multiplication(tokens):
    """
    在 2x、2(、)(、2pi 这类相邻位置插入显式乘号。
    只会新增Token，不修改已有Token；FUNCTION 后接 ( 是正常的函数调用，不插入。
    """
    result = []
    prev = None
    for token in tokens:
        if prev is not None and prev.type in _VALUE_END and token.type in _VALUE_START:
            result.append(Token(TokenType.OPERATOR, MULTIPLY))
        result.append(token)
        prev = token
    return result
