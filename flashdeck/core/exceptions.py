class FlashdeckError(Exception):
    """Erreur de base du coeur flashcards et de ses services."""


class CardImportError(FlashdeckError):
    """
    Import refusé (texte vide ou aucune ligne exploitable).
    Le deck courant n'est pas modifié.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamServiceError(FlashdeckError):
    """
    Échec du backend de chat / génération de définitions (ou backend non configuré).
    Porte le payload d'erreur renvoyé au client : {error, details}.
    """

    def __init__(self, error: str, details: str = "", *, configured: bool = True):
        super().__init__(error)
        self.error = error
        self.details = details
        self.configured = configured

    def to_payload(self) -> dict:
        return {"error": self.error, "details": self.details}
