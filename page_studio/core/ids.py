"""
Génération d'identifiants d'instance.

Compteur monotone rendu en base 36, préfixé par un jeton aléatoire tiré une fois
par générateur : l'unicité est garantie pour toute la durée de la session.
"""
import itertools
import uuid

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(n: int) -> str:
    """Entier positif → base 36 (minuscules)."""
    if n < 0:
        raise ValueError("n doit être positif")
    if n == 0:
        return "0"
    digits = []
    while n:
        n, r = divmod(n, 36)
        digits.append(_ALPHABET[r])
    return "".join(reversed(digits))


class IdFactory:
    """
    Générateur d'instance_id sans collision.

    Usage:
        >>> ids = IdFactory(prefix="blk")
        >>> ids(), ids()
        ('blk-0001', 'blk-0002')
    """

    def __init__(self, prefix: str | None = None, width: int = 4):
        self.prefix = prefix or uuid.uuid4().hex[:6]
        self.width = width
        self._counter = itertools.count(1)

    def __call__(self) -> str:
        return f"{self.prefix}-{to_base36(next(self._counter)).rjust(self.width, '0')}"


# Générateur par défaut du processus
default_id_factory = IdFactory()
