"""Règles et constantes du Marble Solitaire.

Ce module expose le contrat minimal attendu par le moteur et les tests:
- taille de bras standard et minimale
- distance d'un saut
- symboles du rendu texte
"""

# Plateau anglais classique (7x7, 33 trous)
STANDARD_ARM_SIZE: int = 3
MIN_ARM_SIZE: int = 3

# Un saut déplace la bille de deux cases en passant au-dessus d'une bille
JUMP_DISTANCE: int = 2

# Rendu texte (une case = un caractère)
SYMBOL_OCCUPIED: str = "O"
SYMBOL_EMPTY: str = "_"
SYMBOL_FORBIDDEN: str = " "
CELL_SEPARATOR: str = " "

__all__ = [
    "STANDARD_ARM_SIZE",
    "MIN_ARM_SIZE",
    "JUMP_DISTANCE",
    "SYMBOL_OCCUPIED",
    "SYMBOL_EMPTY",
    "SYMBOL_FORBIDDEN",
    "CELL_SEPARATOR",
]
