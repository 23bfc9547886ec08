"""
Short unique codes derived from human names.

    normalize_code('Planta Añaño / Turno 1')  -> 'PLANTA-ANANO-TURNO-1'
    generate_unique_code(Site, 'Alpha')       -> 'ALPHA', then 'ALPHA-2', 'ALPHA-3', ...

The existence lookup is a best-effort pre-check. Two concurrent requests can still pick
the same code; the unique constraint on the code column rejects the loser.
"""
import re
import unicodedata

from core.base.exceptions import ValidationError

CODE_MAX_LENGTH = 30
SEPARATOR = '-'


def normalize_code(text, max_length=CODE_MAX_LENGTH):
    """Strip diacritics, upper-case, collapse non-alphanumeric runs, trim and truncate."""
    decomposed = unicodedata.normalize('NFKD', text or '')
    plain = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    code = re.sub(r'[^A-Z0-9]+', SEPARATOR, plain.upper()).strip(SEPARATOR)
    return code[:max_length].rstrip(SEPARATOR)


def generate_unique_code(model, name, field='code', max_length=None, exclude_pk=None):
    """
    Derive a code from name that is not yet used in model.<field>.

    Args:
        model: Model class to check for existing codes
        name: Human readable name
        field: Column holding the code
        max_length: Cap on the code length (default: the field's max_length)
        exclude_pk: Ignore this row when checking for clashes (updates)

    Raises:
        ValidationError: name has no letters or digits to build a code from
    """
    if max_length is None:
        max_length = model._meta.get_field(field).max_length or CODE_MAX_LENGTH

    base = normalize_code(name, max_length)
    if not base:
        raise ValidationError(
            f"Cannot derive a code from '{name}'",
            fields={'name': ['Must contain letters or digits']}
        )

    queryset = model.objects.all()
    if exclude_pk is not None:
        queryset = queryset.exclude(pk=exclude_pk)

    code = base
    suffix = 2
    while queryset.filter(**{field: code}).exists():
        tail = f"{SEPARATOR}{suffix}"
        code = base[:max_length - len(tail)].rstrip(SEPARATOR) + tail
        suffix += 1
    return code
