import pytest
import sys
from pathlib import Path

# Add parent directory to path to import flagset modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from flagset import FlagDefinition, FlagRegistry, MAX_WIDTH


def test_training_months_table():
    months = FlagRegistry.TRAINING_MONTHS
    assert len(months) == 12
    assert months.width == 32
    assert months.position('January') == 0
    assert months.mask('March') == 4
    assert months.mask('April') == 8
    assert months.mask('May') == 16
    assert months.mask('December') == 2048
    assert [label.position for label in months] == list(range(12))


def test_registry_lookup():
    definitions = FlagRegistry.get_all_definitions()
    assert definitions == {'training_months': FlagRegistry.TRAINING_MONTHS}
    assert FlagRegistry.get_definition('training_months') is FlagRegistry.TRAINING_MONTHS
    with pytest.raises(KeyError):
        FlagRegistry.get_definition('no_such_flag')


def test_find_label_ignores_case():
    months = FlagRegistry.TRAINING_MONTHS
    assert months.find_label(' march ').name == 'March'
    with pytest.raises(KeyError):
        months.find_label('Marchember')
    with pytest.raises(KeyError):
        months.get_label('march')


def test_thirty_two_labels_allowed():
    names = [f"flag{i}" for i in range(MAX_WIDTH)]
    definition = FlagDefinition('wide', 'Wide', '', labels=names)
    assert definition.mask('flag31') == 1 << 31
    assert definition.all_mask == 0xFFFFFFFF


def test_too_many_labels_rejected():
    with pytest.raises(ValueError):
        FlagDefinition('too_wide', 'Too Wide', '', labels=[f"f{i}" for i in range(33)])
    with pytest.raises(ValueError):
        FlagDefinition('byte', 'Byte', '', labels=[f"f{i}" for i in range(9)], width=8)


def test_bad_width_rejected():
    with pytest.raises(ValueError):
        FlagDefinition('huge', 'Huge', '', labels=['a'], width=64)


def test_duplicate_labels_rejected():
    with pytest.raises(ValueError, match="duplicate labels: May"):
        FlagDefinition('dupes', 'Dupes', '', labels=['May', 'June', 'May'])


def test_display_names():
    definition = FlagDefinition(
        'short_months', 'Short Months', '',
        labels=['Jan', 'Feb'],
        display_names={'Jan': 'January'})
    assert definition.get_label('Jan').title == 'January'
    assert definition.get_label('Feb').title == 'Feb'
