"""core/lexer.py - 词法分析：原始输入 -> Token序列 / 规范化字符串"""
import logging

from config.config import LEXER_CONFIG
from core.errors import CalcSyntaxError
from core.token_system import (
    TokenType, Token, DIGITS, DECIMAL_POINT, WHITESPACE,
    LEFT_BRACKET, RIGHT_BRACKET, UNARY_MINUS, END, classify_word
)
from utils.formatting import format_tokens

logger = logging.getLogger(__name__)


class TokenStream:
    """
    输入字符串上的游标，按需逐个产出Token。

    - 读取数字和单词时需要向前看一个字符，多读的字符通过单字符回退槽退回；
    - unget() 可以把最近产出的一个Token退回，下一次 next_token() 会再次返回它。
    换行符或字符串末尾产生 END。
    """

    def __init__(self, text, max_token_size=None):
        self.text = text
        self.pos = 0
        self.max_token_size = max_token_size or LEXER_CONFIG['max_token_size']
        self._peeked = None
        self._last = None
        self._last_type = TokenType.END

    def __iter__(self):
        while True:
            token = self.next_token()
            if token.type == TokenType.END:
                return
            yield token

    def next_token(self):
        if self._peeked is not None:
            token, self._peeked = self._peeked, None
            return token

        token = self._scan()
        self._last = token
        if token.type != TokenType.END:
            self._last_type = token.type
        return token

    def unget(self):
        """退回最近产出的Token（只能退回一个）"""
        if self._peeked is not None:
            raise RuntimeError("only one token can be pushed back")
        if self._last is None:
            raise RuntimeError("no token to push back")
        self._peeked = self._last

    def _getch(self):
        if self.pos >= len(self.text) or self.text[self.pos] == '\n':
            return ''
        ch = self.text[self.pos]
        self.pos += 1
        return ch

    def _ungetch(self, ch):
        # 到达结尾时没有前进，无需回退
        if ch:
            self.pos -= 1

    def _read_while(self, chars, predicate):
        ch = self._getch()
        while ch and predicate(ch):
            chars.append(ch)
            ch = self._getch()
        return ch

    def _make(self, token_type, text):
        if len(text) > self.max_token_size:
            raise CalcSyntaxError(f"token too long: {text[:self.max_token_size]}...")
        return Token(token_type, text)

    def _scan(self):
        ch = self._getch()
        while ch and ch in WHITESPACE:
            ch = self._getch()

        if not ch:
            return END

        # 数字：整数部分 [ 小数点 小数部分 ]，第二个小数点留给下一次扫描
        if ch in DIGITS:
            chars = [ch]
            ch = self._read_while(chars, lambda c: c in DIGITS)
            if ch == DECIMAL_POINT:
                chars.append(ch)
                ch = self._read_while(chars, lambda c: c in DIGITS)
            self._ungetch(ch)
            return self._make(TokenType.NUMBER, ''.join(chars))

        if ch == '(':
            return LEFT_BRACKET
        if ch == ')':
            return RIGHT_BRACKET

        # 负号：紧跟在数字或右括号之后才是减号
        if ch == '-':
            if self._last_type in (TokenType.NUMBER, TokenType.RBRACKET):
                return Token(TokenType.OPERATOR, '-')
            return UNARY_MINUS

        if ch.isalpha():
            chars = [ch]
            ch = self._read_while(chars, str.isalpha)
            self._ungetch(ch)
            word = ''.join(chars)
            token = classify_word(word)
            return self._make(token.type, word)

        return Token(TokenType.OPERATOR, ch)


def tokenize(line, max_length=None):
    """
    把一行输入切分为Token列表。
    Args:
        line: 原始输入（遇到换行符或字符串结尾即停止）
        max_length: 规范化字符串允许的最大长度，默认为缓冲区大小减去结束符
    Returns:
        Token列表（不含 END）
    """
    if max_length is None:
        max_length = LEXER_CONFIG['max_buffer_size'] - 1

    tokens = []
    length = 0
    for token in TokenStream(line):
        length += len(token.text) + (1 if tokens else 0)
        if length > max_length:
            raise CalcSyntaxError(f"normalized expression exceeds {max_length} characters")
        tokens.append(token)

    logger.debug(f"Tokenized {line!r} into {len(tokens)} tokens")
    return tokens


def normalize(line, max_length=None):
    """返回以单个空格分隔的规范化表达式，一元负号写作 'u'"""
    return format_tokens(tokenize(line, max_length))
