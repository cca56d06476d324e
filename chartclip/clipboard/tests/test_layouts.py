import pytest

from chartclip.errors import UnsupportedVersion
from chartclip.notes import MAX_COLUMN, NoteKind

from ..layouts import CURRENT_VERSION, LAYOUTS, LEGACY_VERSIONS, rules_for


def test_current_version_has_every_note_kind() -> None:
    assert set(rules_for(CURRENT_VERSION).kinds.values()) == set(NoteKind)


def test_that_tags_are_the_inverse_of_kinds() -> None:
    for rules in LAYOUTS.values():
        for tag, kind in rules.kinds.items():
            assert rules.tags[kind] == tag


def test_that_legacy_tags_keep_their_meaning() -> None:
    current = rules_for(CURRENT_VERSION)
    for version in LEGACY_VERSIONS:
        for tag, kind in rules_for(version).kinds.items():
            assert current.kinds[tag] == kind


@pytest.mark.parametrize("version", [0, CURRENT_VERSION + 1, 2 ** 70])
def test_that_unknown_versions_are_refused(version: int) -> None:
    with pytest.raises(UnsupportedVersion) as excinfo:
        rules_for(version)
    assert excinfo.value.version == version


def test_that_every_valid_column_fits_the_current_layout() -> None:
    assert rules_for(CURRENT_VERSION).lane_count == MAX_COLUMN + 1
