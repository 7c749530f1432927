"""
Core: десятичное разложение, округлители, генератор кандидатов, модели отчёта.

Модули не зависят от CLI и не имеют глобального изменяемого состояния.
"""
