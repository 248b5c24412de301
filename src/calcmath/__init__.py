"""
calcmath — скалярные и 2D-векторные математические утилиты.

Чистые функции без состояния: длина и поворот вектора, скалярное
произведение, экспонента, биномиальный коэффициент.
"""
