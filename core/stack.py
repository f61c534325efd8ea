"""core/stack.py - 单个表达式处理期间使用的LIFO栈"""
from core.errors import CalcSyntaxError


class OperatorStack:
    """
    基于list的栈。用作上下文管理器时，无论阶段成功还是失败，
    退出时都会清空，保证没有状态跨表达式残留。
    """

    def __init__(self):
        self._items = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.clear()
        return False

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def push(self, item):
        self._items.append(item)

    def pop(self):
        if not self._items:
            raise CalcSyntaxError("stack underflow")
        return self._items.pop()

    def peek(self):
        if not self._items:
            raise CalcSyntaxError("stack underflow")
        return self._items[-1]

    def is_empty(self):
        return not self._items

    def clear(self):
        self._items.clear()
