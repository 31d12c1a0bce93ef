"""
Taxonomie des erreurs du catalogue.

Les repositories levent ces exceptions ; la couche appelante (CLI, HTTP)
les traduit en reponse. Aucune erreur n'est relancee automatiquement.

- NotFoundError : entite absente lors d'une lecture ponctuelle
- ValidationError : donnee fournie ne respectant pas une precondition
- StorageError : la base a rejete l'operation
- TransactionAbortError : echec d'une etape d'une transaction multi-requetes
"""

from typing import Any, Optional


class CatalogError(Exception):
    """Erreur de base du catalogue."""


class NotFoundError(CatalogError):
    """
    Exception levee quand une entite est absente.

    Attributes:
        entity: Type d'entite ("movie", "actor")
        entity_id: ID recherche
    """

    def __init__(self, entity: str, entity_id: Any) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class ValidationError(CatalogError):
    """
    Exception levee quand une donnee fournie viole une precondition.

    Attributes:
        column: Colonne en cause (optionnel)
    """

    def __init__(self, message: str, column: Optional[str] = None) -> None:
        self.column = column
        super().__init__(message)


class ActorNotFoundError(ValidationError):
    """Un acteur reference par une distribution n'existe pas."""

    def __init__(self, actor_id: int) -> None:
        self.actor_id = actor_id
        super().__init__(f"referenced actor with ID {actor_id} not found")


class UnknownColumnError(ValidationError):
    """Colonne absente de la liste des colonnes interrogeables."""

    def __init__(self, column: str, allowed: Optional[list[str]] = None) -> None:
        message = f"unknown column '{column}'"
        if allowed:
            message += f" (allowed: {', '.join(sorted(allowed))})"
        super().__init__(message, column=column)


class StorageError(CatalogError):
    """
    Exception levee quand la base rejette une operation.

    Attributes:
        operation: Nom de l'operation en echec
        cause: Exception d'origine (SQLAlchemyError)
    """

    def __init__(self, operation: str, cause: BaseException) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


class TransactionAbortError(StorageError):
    """Une etape d'une transaction a echoue, la transaction a ete annulee."""

    def __init__(self, operation: str, cause: BaseException) -> None:
        super().__init__(operation, cause)
        self.args = (f"{operation} aborted and rolled back: {cause}",)
