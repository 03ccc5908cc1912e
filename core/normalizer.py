"""core/normalizer.py - 把键盘上的数学符号改写成标准ASCII词汇"""

# 顺序很重要：多字符符号要先于其单字符前缀替换（³√ 在 √ 之前）
GLYPH_REPLACEMENTS = (
    ('sin⁻¹', 'asin'),
    ('cos⁻¹', 'acos'),
    ('tan⁻¹', 'atan'),
    ('³√', 'cbrt'),
    ('√', 'sqrt'),
    ('×', '*'),
    ('÷', '/'),
    ('−', '-'),
    ('π', 'pi'),
)


def normalize(text):
    """
    替换所有可识别的非ASCII数学符号，其余字符原样保留交给词法分析器处理。
    输出只包含替换后的ASCII词汇，所以重复调用是幂等的。
    """
    if not text:
        return ''
    for glyph, canonical in GLYPH_REPLACEMENTS:
        if glyph in text:
            text = text.replace(glyph, canonical)
    return text
