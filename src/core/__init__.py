"""
Core numeric kernel.

Pure numeric algorithms over int, float and Decimal, independent of locale
data and format assembly.
"""
