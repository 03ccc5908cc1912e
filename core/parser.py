"""core/parser.py - 调度场算法：中缀Token序列 -> 后缀(RPN)序列"""
import logging

from core.errors import MismatchedParensError
from core.token_system import Token, TokenType, UNARY_MINUS, operator_spec, describe

logger = logging.getLogger(__name__)

# 这些Token之后出现的 '-' 是一元负号
_UNARY_CONTEXT = frozenset({TokenType.OPERATOR, TokenType.LPAREN, TokenType.SEPARATOR})


def mark_unary_minus(tokens):
    """
    返回新的Token序列，其中一元位置上的 '-' 被替换为 'u-'。
    一元位置：序列开头，或紧跟在任意操作符（包括 '!'）/ 左括号 / 逗号之后。
    """
    result = []
    prev = None
    for token in tokens:
        if token.type == TokenType.OPERATOR and token.text == '-':
            if prev is None or prev.type in _UNARY_CONTEXT:
                token = Token(TokenType.OPERATOR, UNARY_MINUS)
        result.append(token)
        prev = token
    return result


def _should_pop(top, incoming):
    """栈顶操作符是否应先于即将入栈的操作符输出"""
    if top.type != TokenType.OPERATOR:
        # 左括号和函数都不会被操作符弹出
        return False
    top_spec = operator_spec(top.text)
    in_spec = operator_spec(incoming.text)
    if top_spec.precedence > in_spec.precedence:
        return True
    return top_spec.precedence == in_spec.precedence and in_spec.is_left_associative


def to_postfix(tokens, strict_parens=False):
    """
    转换为后缀表达式
    Args:
        tokens: 已插入隐式乘号的Token序列
        strict_parens: True 时括号不匹配抛出 MismatchedParensError，否则静默丢弃
    Returns:
        后缀Token列表
    """
    output = []
    stack = []

    for token in mark_unary_minus(tokens):
        if token.type in (TokenType.NUMBER, TokenType.CONSTANT):
            output.append(token)

        elif token.type == TokenType.FUNCTION:
            stack.append(token)

        elif token.type == TokenType.SEPARATOR:
            while stack and stack[-1].type != TokenType.LPAREN:
                output.append(stack.pop())

        elif token.type == TokenType.OPERATOR:
            if operator_spec(token.text).is_postfix:
                # 后缀操作符直接作用于紧邻的前一个值
                output.append(token)
                continue
            while stack and _should_pop(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)

        elif token.type == TokenType.LPAREN:
            stack.append(token)

        elif token.type == TokenType.RPAREN:
            while stack and stack[-1].type != TokenType.LPAREN:
                output.append(stack.pop())
            if stack:
                stack.pop()  # 丢弃左括号
                if stack and stack[-1].type == TokenType.FUNCTION:
                    output.append(stack.pop())
            elif strict_parens:
                raise MismatchedParensError("Unmatched ')'")
            else:
                logger.debug("Dropping unmatched ')'")

    while stack:
        token = stack.pop()
        if token.type in (TokenType.LPAREN, TokenType.RPAREN):
            if strict_parens:
                raise MismatchedParensError("Unmatched '('")
            logger.debug("Dropping unmatched '(' at end of input")
            continue
        output.append(token)

    logger.debug(f"Postfix: {describe(output)}")
    return output
