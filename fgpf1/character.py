import os
import sys
import json
from universal.universal import child, read_int, read_string
from universal.universal import find_record_children, section_entries
from universal.universal import entry_name, legacy_names
from universal.files import makedirs, unique_filename
from universal.markdown import markdown_pass
from fgpf1.constants import CHARACTER_CONTAINER, CMD_FIELD_MAPPINGS
from fgpf1.constants import DEFAULT_CMD_MAPPING
from fgpf1.constants import PROFICIENCY_SECTIONS, LANGUAGE_SECTIONS
from fgpf1.db import DocumentCache, stderr_log
from fgpf1.models import Character, CharacterClass
from fgpf1.stats import process_abilities, process_armor_class
from fgpf1.stats import process_attack_bonus, process_cmd, process_saves
from fgpf1.stats import process_initiative, process_speed
from fgpf1.stats import process_hp, process_defenses
from fgpf1.skill import process_skills
from fgpf1.feat import process_feats
from fgpf1.ability import process_special_abilities
from fgpf1.equipment import process_inventory
from fgpf1.spell import process_spells
from fgpf1.schema import validate_against_schema

IDENTITY_FIELDS = [
    'name', 'race', 'alignment', 'deity', 'gender', 'age', 'height',
    'weight', 'size']

# Failures a malformed subtree can raise while a field is being read
FIELD_ERRORS = (AttributeError, TypeError, ValueError, KeyError, IndexError)


def extract(fxn, *args, default=None):
    try:
        return fxn(*args)
    except FIELD_ERRORS:
        return default


def find_character_records(document):
    """
    Every character record in the document, in document order.

    A <charsheet> holds one character per id-* child. A charsheet without
    any id-* children is itself the record.
    """
    records = []
    for sheet in document.find_all(CHARACTER_CONTAINER):
        children = find_record_children(sheet)
        if children:
            records.extend(children)
        else:
            records.append(sheet)
    return records


def process_classes(record):
    classes = []
    for entry in find_record_children(child(record, 'classes')):
        classes.append(CharacterClass(
            name=read_string(child(entry, 'name')),
            level=read_int(child(entry, 'level')),
            favored=read_int(child(entry, 'favored')) == 1,
            skill_ranks=read_int(child(entry, 'skillranks')),
            skill_ranks_used=read_int(child(entry, 'skillranksused'))))
    return classes


def process_names(record, sections, leaf):
    return [entry_name(e) for e in section_entries(record, sections, leaf)]


def _names(details):
    return [d.name for d in details]


def parse_character(record, ordinal, cmd_mapping=DEFAULT_CMD_MAPPING):
    if cmd_mapping not in CMD_FIELD_MAPPINGS:
        raise KeyError(
            "Unknown combat maneuver defense mapping: %s" % cmd_mapping)
    c = Character(id=ordinal)

    def _field(name, fxn, *args):
        setattr(c, name, extract(fxn, *args, default=getattr(c, name)))

    def _fields(names, fxn, *args):
        defaults = tuple([getattr(c, n) for n in names])
        for name, value in zip(names, extract(fxn, *args, default=defaults)):
            setattr(c, name, value)

    def _legacy(name, leaf, structured):
        _field(name, legacy_names, record, leaf, structured)
        if not getattr(c, name):
            setattr(c, name, [n for n in structured if n])

    for name in IDENTITY_FIELDS:
        _field(name, lambda n: read_string(child(record, n)), name)
    _field('level', lambda: read_int(child(record, 'level')))
    _field('experience', lambda: read_int(child(record, 'exp')))
    _field('experience_needed', lambda: read_int(child(record, 'expneeded')))
    _field('classes', process_classes, record)
    if c.classes:
        c.class_name = c.classes[0].name
    _field('abilities', process_abilities, record)

    _fields(
        ['armor_class', 'touch_armor_class', 'flat_footed_armor_class'],
        process_armor_class, record)
    _fields(
        ['base_attack_bonus', 'melee_attack_bonus', 'ranged_attack_bonus',
         'combat_maneuver_bonus'],
        process_attack_bonus, record)
    _field('combat_maneuver_defense', process_cmd, record, cmd_mapping)
    _fields(
        ['fortitude_save', 'reflex_save', 'will_save'], process_saves, record)
    _field('initiative', process_initiative, record)
    _field('speed', process_speed, record)
    for name, value in extract(process_hp, record, default={}).items():
        setattr(c, name, value)
    for name, value in extract(process_defenses, record, default={}).items():
        setattr(c, name, value)

    _field('skill_details', process_skills, record, c.abilities)
    _field('feat_details', process_feats, record)
    _fields(['special_abilities', 'traits'], process_special_abilities, record)
    _field('inventory', process_inventory, record)
    proficiencies = extract(
        process_names, record, PROFICIENCY_SECTIONS, 'proficiency',
        default=[])
    languages = extract(
        process_names, record, LANGUAGE_SECTIONS, 'language', default=[])
    spells = extract(process_spells, record, default=[])

    _legacy('skills', 'skill', _names(c.skill_details))
    _legacy('feats', 'feat', _names(c.feat_details))
    _legacy('equipment', 'item', _names(c.inventory))
    _legacy('spells', 'spell', spells)
    _legacy('proficiencies', 'proficiency', proficiencies)
    _legacy('languages', 'language', languages)
    return c


def enumerate_characters(cache, cmd_mapping=DEFAULT_CMD_MAPPING):
    document = cache.load()
    records = find_character_records(document)
    return [parse_character(r, i, cmd_mapping) for i, r in enumerate(records)]


def get_character_by_id(cache, ordinal, cmd_mapping=DEFAULT_CMD_MAPPING):
    characters = enumerate_characters(cache, cmd_mapping)
    if ordinal >= 0 and ordinal < len(characters):
        return characters[ordinal]
    return None


def parse_characters(filename, options):
    log = None if options.stdout else stderr_log
    if os.path.isdir(filename):
        cache = DocumentCache(base_dir=filename, log=log)
    else:
        cache = DocumentCache(
            base_dir=os.path.dirname(os.path.abspath(filename)),
            filename=os.path.basename(filename), log=log)
    characters = enumerate_characters(cache, options.cmd_mapping)
    if not options.stdout:
        sys.stderr.write("%s: %s characters\n" % (
            cache.filename, len(characters)))
    used = set()
    for character in characters:
        struct = character.to_dict()
        markdown_pass(struct)
        if not options.skip_schema:
            struct['schema_version'] = 1.0
            validate_against_schema(struct, "character.schema.json")
        if not options.dryrun:
            jsondir = makedirs(options.output, 'characters')
            write_character(jsondir, struct, used)
        elif options.stdout:
            print(json.dumps(struct, indent=2))


def write_character(jsondir, struct, used):
    name = struct['name'] or "character_%s" % struct['id']
    print("characters: %s" % name)
    filename = unique_filename(jsondir, name, used)
    with open(filename, 'w') as fp:
        json.dump(struct, fp, indent=4)
