"""工具模块"""
from .formatting import format_number, format_tokens, is_finite_number

__all__ = ['format_number', 'format_tokens', 'is_finite_number']
