from universal.universal import find_section, find_record_children, entry_name
from fgpf1.constants import SPELL_SECTIONS


def process_spells(record):
    """
    Spell names from the spell section.

    Spellsets nest their lists as spellset/id-*/levels/level*/spells/id-*,
    so every <spells> list below the section is read, along with plain
    <spell> leaves.
    """
    container = find_section(record, SPELL_SECTIONS)
    if container is None:
        return []
    lists = []
    if container.name == 'spells':
        lists.append(container)
    lists.extend(container.find_all('spells'))
    names = []
    for spells in lists:
        for entry in find_record_children(spells):
            names.append(entry_name(entry))
    for entry in container.find_all('spell'):
        names.append(entry_name(entry))
    return names
