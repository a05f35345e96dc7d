from dataclasses import dataclass, fields, replace
from typing import Optional

from .util import log
from . import _settings


# which fields get cleared when a given field changes, since their legality depends on it:
dependent_fields = {
    'type': ('interval_type', 'triad', 'extension_category', 'specific_extension', 'extension_variant'),
    'triad': ('extension_category', 'specific_extension', 'extension_variant'),
    'extension_category': ('specific_extension', 'extension_variant'),
    'specific_extension': ('extension_variant',),
    }


@dataclass(frozen=True)
class TaxonomySelection:
    """a sparse, progressively-filled record of choices made in the chord finder:
    root -> type (chord or interval) -> triad -> extension category -> specific extension
    -> variant, plus any alterations and an inversion.

    every field is optional, but 'root' and 'type' are needed for a symbol to mean anything.
    selections are immutable: use .update() to make a changed copy, which also clears
    any downstream choices that the change has invalidated."""
    root: Optional[str] = None
    type: Optional[str] = None
    interval_type: Optional[str] = None
    triad: Optional[str] = None
    extension_category: Optional[str] = None
    specific_extension: Optional[str] = None
    extension_variant: Optional[str] = None
    alterations: tuple = ()
    inversion: Optional[str] = None
    bass: Optional[str] = None

    def __post_init__(self):
        alterations = self.alterations
        if alterations is None:
            alterations = ()
        elif isinstance(alterations, str):
            alterations = (alterations,)
        else:
            # keep the caller's order, but drop repeats:
            alterations = tuple(dict.fromkeys(alterations))
        object.__setattr__(self, 'alterations', alterations)

    def update(self, field_name, value):
        """returns a copy of this selection with field_name set to value,
        clearing whichever downstream fields depended on the old value"""
        if field_name not in self.field_names():
            raise AttributeError(f'TaxonomySelection has no field: {field_name}')
        changes = {field_name: value}
        if getattr(self, field_name) != value:
            for dependent in dependent_fields.get(field_name, ()):
                changes[dependent] = None
                log(f'{field_name} changed to {value}, clearing {dependent}')
        return replace(self, **changes)

    def toggle_alteration(self, alteration):
        """returns a copy with the given alteration added (at the end), or removed if already present"""
        if alteration in self.alterations:
            alterations = tuple(a for a in self.alterations if a != alteration)
        else:
            alterations = self.alterations + (alteration,)
        return replace(self, alterations=alterations)

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    @property
    def is_interval(self):
        return self.type == 'interval'

    @property
    def is_chord(self):
        return self.type == 'chord'

    @property
    def is_altered(self):
        return len(self.alterations) > 0

    def __str__(self):
        lb, rb = _settings.BRACKETS['TaxonomySelection']
        marker = _settings.MARKERS['TaxonomySelection']
        filled = [f'{name}={getattr(self, name)}' for name in self.field_names()
                  if getattr(self, name) not in (None, ())]
        return f'{marker}{lb}{", ".join(filled)}{rb}'

    def __repr__(self):
        return str(self)
