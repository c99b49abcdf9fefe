from universal.universal import child, read_string, read_formatted
from universal.universal import section_entries, entry_name
from universal.utils import summarize
from fgpf1.constants import SPECIAL_ABILITY_SECTIONS, TRAIT_SECTIONS
from fgpf1.constants import TRAIT_SOURCE_PREFIX
from fgpf1.models import SpecialAbility, Trait


def is_trait_type(ability_type):
    return "trait" in ability_type.lower()


def trait_source(ability_type):
    if ability_type.startswith(TRAIT_SOURCE_PREFIX):
        return ability_type[len(TRAIT_SOURCE_PREFIX):]
    return ability_type


def parse_special_ability(entry):
    """
    Special ability list entries are either abilities or traits.

    The exporter files traits under the special ability list with a type
    such as "Trait - Regional"; those become Traits sourced "Regional".
    """
    ability_type = read_string(child(entry, 'type')) or ""
    text = read_formatted(child(entry, 'text'))
    if is_trait_type(ability_type):
        return Trait(
            name=entry_name(entry),
            source=trait_source(ability_type),
            text=text,
            summary=summarize(text))
    return SpecialAbility(
        name=entry_name(entry),
        source=read_string(child(entry, 'source')) or "",
        text=text,
        summary=summarize(text))


def parse_trait(entry):
    source = read_string(child(entry, 'source'))
    if source is None:
        source = trait_source(read_string(child(entry, 'type')) or "")
    text = read_formatted(child(entry, 'text'))
    return Trait(
        name=entry_name(entry),
        source=source,
        text=text,
        summary=summarize(text))


def process_special_abilities(record):
    abilities = []
    traits = []
    entries = section_entries(
        record, SPECIAL_ABILITY_SECTIONS, 'specialability')
    for entry in entries:
        ability = parse_special_ability(entry)
        if isinstance(ability, Trait):
            traits.append(ability)
        else:
            abilities.append(ability)
    for entry in section_entries(record, TRAIT_SECTIONS, 'trait'):
        traits.append(parse_trait(entry))
    return abilities, traits
