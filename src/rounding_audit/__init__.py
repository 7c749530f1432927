"""
rounding-audit: детектор расхождений округления при форматировании float.

Сравнивает format(value, ".{depth}f") с наивным строковым округлением
точного десятичного разложения значения.
"""

__version__ = "0.3.0"
