"""Composite validator aggregating ordered per-field rule lists."""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from fs_login_form.validation.protocols import FieldValidation


class ValidationComposite:
    """Reports the first failing rule registered for a field.

    Rules are evaluated in registration order, which is also the tie-break
    when several rules would fail. The rule table is frozen at construction.
    """

    def __init__(self, rules: Mapping[str, Sequence[FieldValidation]]):
        frozen: Dict[str, Tuple[FieldValidation, ...]] = {
            field_name: tuple(field_rules) for field_name, field_rules in rules.items()
        }
        self._rules = MappingProxyType(frozen)

    @classmethod
    def build(cls, validations: Iterable[FieldValidation]) -> "ValidationComposite":
        """Group rules by their ``field`` attribute, keeping their order."""
        grouped: Dict[str, List[FieldValidation]] = {}
        for validation in validations:
            grouped.setdefault(validation.field, []).append(validation)
        return cls(grouped)

    def validate(self, field_name: str, value: Optional[str]) -> Optional[str]:
        """Return the message of the first failing rule, or None if the value is valid.

        Fields without registered rules are always valid.
        """
        for validation in self._rules.get(field_name, ()):
            error = validation.validate(value)
            if error is not None:
                return str(error)
        return None
