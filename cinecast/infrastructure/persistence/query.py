"""
Traduction des descripteurs de requete en requetes SQLAlchemy.

- QueryTranslator : applique filtres et tris sur un select, pour n'importe
  quelle entite, a partir d'une liste blanche de colonnes interrogeables
- apply_page : applique la pagination (offset/limit bornes)
- count_rows : compte les lignes d'un select filtre, avant pagination

Les valeurs sont toujours passees en parametres lies, jamais interpolees
dans le texte SQL.
"""

from datetime import datetime
from typing import Any, Iterable, Mapping, Optional, Sequence

from loguru import logger
from sqlalchemy import Column, ColumnElement, Select, func, select
from sqlmodel import Session

from cinecast.core.errors import UnknownColumnError, ValidationError
from cinecast.core.value_objects.query import (
    DEFAULT_PAGE_SIZE,
    FilterDescriptor,
    FilterOperator,
    OrderDescriptor,
    SortDirection,
)

_LIKE_ESCAPE = "\\"


def _escape_like(value: str) -> str:
    """Echappe les jokers LIKE pour une recherche litterale."""
    return (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def _python_type(column: Column) -> Optional[type]:
    """Type Python d'une colonne (celui du type sous-jacent pour un TypeDecorator)."""
    for column_type in (column.type, getattr(column.type, "impl", None)):
        if column_type is None:
            continue
        try:
            return column_type.python_type
        except NotImplementedError:
            continue
    return None


class QueryTranslator:
    """
    Traducteur generique filtres/tris -> clauses SQL.

    Construit avec la liste blanche des colonnes d'une entite : une cle de
    filtre ou de tri absente de la liste est rejetee (UnknownColumnError).
    """

    def __init__(self, columns: Mapping[str, Column], tiebreaker: Optional[Column] = None) -> None:
        """
        Initialise le traducteur.

        Args :
            columns : Correspondance cle externe -> colonne de la table
            tiebreaker : Colonne ajoutee en dernier tri pour une pagination stable
        """
        self._columns = dict(columns)
        self._tiebreaker = tiebreaker

    @classmethod
    def for_table(cls, table, exclude: Iterable[str] = ()) -> "QueryTranslator":
        """Construit un traducteur exposant toutes les colonnes d'une table."""
        excluded = set(exclude)
        columns = {c.name: c for c in table.columns if c.name not in excluded}
        primary_key = list(table.primary_key.columns)
        return cls(columns, tiebreaker=primary_key[0] if len(primary_key) == 1 else None)

    @property
    def column_names(self) -> list[str]:
        """Cles de colonnes interrogeables."""
        return list(self._columns)

    def column(self, name: str) -> Column:
        """Retourne la colonne correspondant a une cle externe."""
        try:
            return self._columns[name]
        except KeyError:
            raise UnknownColumnError(name, self.column_names) from None

    def coerce(self, name: str, value: Any) -> Any:
        """
        Convertit une valeur vers le type Python de la colonne.

        Leve ValidationError si la conversion est impossible.
        """
        python_type = _python_type(self.column(name))
        if python_type is None or value is None or isinstance(value, python_type):
            return value
        try:
            if python_type is datetime:
                return datetime.fromisoformat(str(value))
            if python_type is bool:
                return str(value).strip().lower() in ("1", "true", "yes", "on")
            if python_type is int and not isinstance(value, str):
                # 2021.5 n'est pas tronque en 2021
                if not float(value).is_integer():
                    raise ValueError(f"non-integral value {value!r}")
            return python_type(value)
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValidationError(
                f"invalid value {value!r} for column '{name}'", column=name
            ) from exc

    def predicate(self, descriptor: FilterDescriptor) -> Optional[ColumnElement[bool]]:
        """
        Construit la restriction d'un descripteur.

        Retourne None pour un operateur inconnu (aucune restriction).
        """
        operator = FilterOperator.parse(descriptor.operator)
        column = self.column(descriptor.column)
        if operator is None:
            logger.debug(
                f"Operateur de filtre ignore: {descriptor.operator!r} sur {descriptor.column}"
            )
            return None

        if operator is FilterOperator.SEARCH:
            pattern = f"%{_escape_like(str(descriptor.value))}%"
            return column.ilike(pattern, escape=_LIKE_ESCAPE)

        value = self.coerce(descriptor.column, descriptor.value)
        if operator is FilterOperator.EQ:
            return column == value
        if operator is FilterOperator.NE:
            return column != value
        if operator is FilterOperator.GT:
            return column > value
        if operator is FilterOperator.GTE:
            return column >= value
        if operator is FilterOperator.LT:
            return column < value
        return column <= value

    def apply_filters(self, statement: Select, filters: Sequence[FilterDescriptor]) -> Select:
        """Ajoute les restrictions (combinees en ET) au select."""
        for descriptor in filters:
            clause = self.predicate(descriptor)
            if clause is not None:
                statement = statement.where(clause)
        return statement

    def apply_ordering(self, statement: Select, order_by: Sequence[OrderDescriptor]) -> Select:
        """
        Ajoute les tris dans l'ordre fourni.

        La cle primaire est ajoutee en dernier critere pour que deux pages
        distinctes ne partagent aucune ligne.
        """
        for descriptor in order_by:
            column = self.column(descriptor.column)
            if SortDirection.parse(descriptor.direction) is SortDirection.DESC:
                statement = statement.order_by(column.desc())
            else:
                statement = statement.order_by(column.asc())
        if self._tiebreaker is not None:
            statement = statement.order_by(self._tiebreaker.asc())
        return statement


def apply_page(
    statement: Select,
    page: int,
    limit: int,
    max_limit: Optional[int] = None,
    default_limit: int = DEFAULT_PAGE_SIZE,
) -> tuple[Select, int]:
    """
    Applique la pagination.

    Args :
        statement : Select a paginer
        page : Numero de page (1-based) ; <= 0 equivaut a l'offset 0
        limit : Taille de page ; <= 0 donne la taille par defaut
        max_limit : Taille maximale ; une taille superieure est ramenee a cette valeur
        default_limit : Taille par defaut (10)

    Retourne :
        Le select pagine et la taille de page effective
    """
    effective_limit = limit if limit > 0 else default_limit
    if max_limit is not None and effective_limit > max_limit:
        effective_limit = max_limit
    offset = max(0, (page - 1) * effective_limit)
    return statement.offset(offset).limit(effective_limit), effective_limit


def count_rows(session: Session, statement: Select) -> int:
    """Compte les lignes d'un select (filtre, sans tri ni pagination)."""
    count_statement = select(func.count()).select_from(statement.order_by(None).subquery())
    return session.exec(count_statement).scalar_one()
