"""Central registry of all flag definitions."""

from typing import Dict

from .definitions import FlagDefinition


class FlagRegistry:
    """Central registry of all flag definitions."""

    TRAINING_MONTHS = FlagDefinition(
        'training_months',
        'Training Months',
        'Months in which a training needs to be finished.',
        labels=[
            'January',
            'February',
            'March',
            'April',
            'May',
            'June',
            'July',
            'August',
            'September',
            'October',
            'November',
            'December',
        ],
    )

    @classmethod
    def get_all_definitions(cls) -> Dict[str, FlagDefinition]:
        """Get all flag definitions as a dictionary."""
        definitions = {}
        for attr_name in dir(cls):
            attr = getattr(cls, attr_name)
            if isinstance(attr, FlagDefinition):
                definitions[attr.key] = attr
        return definitions

    @classmethod
    def get_definition(cls, key: str) -> FlagDefinition:
        definitions = cls.get_all_definitions()
        if key not in definitions:
            raise KeyError(f"Flag '{key}' not found.")
        return definitions[key]
