"""
Construction validée des entités par options.

Chaque entité se construit à partir d'une configuration mutable sur
laquelle on applique des options composables. Une option renseigne un seul
champ, ou ajoute une FieldError si la valeur fournie est invalide.
build_config() applique toutes les options puis lève une ValidationError
regroupant TOUTES les violations : seule une configuration entièrement
valide peut construire une entité.

Exemple :
    config = new_movie_config(
        with_title("John Wick"),
        with_uri("uri-example"),
        with_tenancy("tenancy/test"),
    )
    movie = Movie(config)
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, ClassVar, Iterable, Optional, TypeVar

from topics.core.errors import FieldError, ValidationError
from topics.core.metadata import utcnow

ConfigT = TypeVar("ConfigT", bound="EntityConfig")

Option = Callable[[ConfigT], None]


def new_id() -> str:
    """Génère un identifiant unique (uuid4 hexadécimal)."""
    return uuid.uuid4().hex


@dataclass
class EntityConfig:
    """
    Champs communs à toutes les configurations d'entité.

    L'identifiant et la date de création sont générés à la création de la
    configuration. Les repositories construisent directement cette dataclass
    avec les valeurs stockées pour réhydrater une entité.

    required_fields liste les champs obligatoires propres à l'entité ;
    tenancy est toujours obligatoire.
    """

    id: str = field(default_factory=new_id)
    tenancy: str = ""
    created_at: datetime = field(default_factory=utcnow)
    deleted_at: Optional[datetime] = None
    errors: list[FieldError] = field(default_factory=list, repr=False, compare=False)

    required_fields: ClassVar[tuple[str, ...]] = ()

    def set_required(self, name: str, value: Optional[str]) -> None:
        """Renseigne un champ obligatoire, ou enregistre une violation si vide."""
        if value is None or not str(value).strip():
            self.errors.append(FieldError(name, "ne doit pas etre vide"))
            return
        setattr(self, name, value)

    def set_optional(self, name: str, value: Optional[str]) -> None:
        setattr(self, name, value or "")

    def validate(self) -> None:
        """
        Vérifie la configuration complète.

        Chaque champ obligatoire vide donne une violation, sauf s'il a déjà
        été signalé par une option.

        Lève :
            ValidationError : avec toutes les violations accumulées
        """
        reported = {error.field for error in self.errors}
        for name in ("tenancy", *self.required_fields):
            value = getattr(self, name)
            if name not in reported and (not value or not str(value).strip()):
                self.errors.append(FieldError(name, "champ obligatoire"))
                reported.add(name)

        if self.errors:
            raise ValidationError(self.errors)


def required(name: str, value: Optional[str]) -> Option:
    """Option renseignant un champ obligatoire."""

    def apply(config: EntityConfig) -> None:
        config.set_required(name, value)

    return apply


def optional(name: str, value: Optional[str]) -> Option:
    """Option renseignant un champ facultatif (vide accepté)."""

    def apply(config: EntityConfig) -> None:
        config.set_optional(name, value)

    return apply


def with_tenancy(tenancy: str) -> Option:
    """Rattache l'entité à un tenant (obligatoire pour toutes les entités)."""
    return required("tenancy", tenancy)


def build_config(config: ConfigT, options: Iterable[Option]) -> ConfigT:
    """
    Applique les options puis valide la configuration.

    Args :
        config : Configuration vierge de l'entité
        options : Options à appliquer, dans l'ordre

    Retourne :
        La configuration validée

    Lève :
        ValidationError : avec une violation par champ invalide ou manquant
    """
    for option in options:
        option(config)

    config.validate()
    return config
