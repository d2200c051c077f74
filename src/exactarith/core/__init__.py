"""
Core numeric engines, value objects, settings and contracts.

Модуль не зависит от внешних систем: только арифметика над limbs.
"""
