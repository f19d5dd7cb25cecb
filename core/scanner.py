"""core/scanner.py - 把字符序列切分为 Token 流"""
import logging

from core.errors import UnexpectedCharacter, MalformedNumber
from core.token_system import Token, TOKEN_DEFINITIONS, INT_MIN, INT_MAX

logger = logging.getLogger(__name__)


class TokenStream:
    """
    惰性的 Token 迭代器，每行输入新建一个实例，只能向前消费一次。

    Args:
        text: 一行输入（不含换行符）
    """

    def __init__(self, text):
        self.text = text
        self.pos = 0

    def __iter__(self):
        return self

    def __next__(self):
        token = self.read()
        if token is None:
            raise StopIteration
        return token

    def peek(self):
        """向前看一个字符，到达末尾返回 None"""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def read(self):
        """读取下一个 Token，输入结束返回 None"""
        self.read_while(lambda c: c == ' ')
        current = self.peek()
        if current is None:
            return None

        if current in TOKEN_DEFINITIONS:
            self.pos += 1
            return TOKEN_DEFINITIONS[current]

        if '0' <= current <= '9':
            return self.read_number()

        raise UnexpectedCharacter(current, self.pos)

    def get_digits(self):
        # str.isdigit 会接受 '²' 之类的字符，这里只认 ASCII 数字
        return self.read_while(lambda c: '0' <= c <= '9')

    def read_number(self):
        start = self.pos
        integer_part = self.get_digits()

        if self.peek() == '.':
            self.pos += 1
            number = integer_part + '.' + self.get_digits()
            try:
                return Token.float_(float(number))
            except ValueError:
                raise MalformedNumber(number, start)

        try:
            value = int(integer_part)
        except ValueError:
            # 超长数字串会触发 int() 的位数上限
            raise MalformedNumber(integer_part, start)
        if not INT_MIN <= value <= INT_MAX:
            raise MalformedNumber(integer_part, start)
        return Token.int_(value)

    def read_while(self, condition):
        """消费满足 condition 的最长字符串并返回"""
        start = self.pos
        while self.pos < len(self.text) and condition(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]


def tokenize(text):
    """一次性扫描整行，返回 Token 列表"""
    tokens = list(TokenStream(text))
    logger.debug(f"Tokens: {' '.join(str(t) for t in tokens)}")
    return tokens
