"""Exceptions du Page Studio."""


class PageStudioError(Exception):
    """Erreur de base du studio."""


class UnknownBlockKind(PageStudioError, KeyError):
    """Type de bloc hors du catalogue (erreur de programmation)."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Bloc inconnu : {kind!r}")

    def __str__(self) -> str:
        return self.args[0]


class BlockIdMismatch(PageStudioError, ValueError):
    """Le bloc fourni ne porte pas l'instance_id ciblé."""

    def __init__(self, expected: str, received: str):
        self.expected = expected
        self.received = received
        super().__init__(f"instance_id {received!r} ne correspond pas à {expected!r}")
