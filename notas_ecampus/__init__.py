"""
notas-ecampus - eCampus UFAM grades in the terminal
"""

__version__ = '1.0.0'
