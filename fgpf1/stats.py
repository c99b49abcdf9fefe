from universal.universal import child, read_int, read_string
from universal.universal import find_record_children
from fgpf1.constants import ABILITIES, CMD_FIELD_MAPPINGS
from fgpf1.models import AbilityScore, AbilityPerm
from fgpf1.models import ArmorClassDetail, AttackBonusDetail, CmdDetail
from fgpf1.models import SavingThrowDetail, InitiativeDetail, SpeedDetail


def ability_modifier(score):
    return (score - 10) // 2


def process_ability(node):
    if node is None:
        return AbilityScore()
    score = read_int(child(node, 'score'))
    bonus = read_int(child(node, 'bonus'), None)
    if bonus is None:
        bonus = ability_modifier(score)
    perms = []
    for perm in find_record_children(child(node, 'permlist')):
        perms.append(AbilityPerm(
            name=read_string(child(perm, 'name')),
            bonus_type=read_string(child(perm, 'bonustype')),
            perm_num=read_int(child(perm, 'permnum'))))
    return AbilityScore(
        score=score,
        bonus=bonus,
        base=read_int(child(node, 'base')),
        damage=read_int(child(node, 'damage')),
        perm=read_int(child(node, 'perm')),
        perms=perms)


def process_abilities(record):
    abilities = child(record, 'abilities')
    return dict([
        (name, process_ability(child(abilities, name))) for name in ABILITIES])


def process_armor_class(record):
    """
    Normal, touch and flat-footed armor class breakdowns.

    The shown misc folds in the secondary ability modifier (abilitymod2)
    plus the variant's own misc delta. Totals are the exporter's values.
    """
    sources = child(record, 'ac', 'sources')
    totals = child(record, 'ac', 'totals')

    def _source(name):
        return read_int(child(sources, name))

    misc = _source('misc') + _source('abilitymod2')
    ac = ArmorClassDetail(
        dex_modifier=_source('abilitymod'),
        size_modifier=_source('size'),
        armor_bonus=_source('armor'),
        shield_bonus=_source('shield'),
        natural_armor=_source('naturalarmor'),
        dodge=_source('dodge'),
        misc=misc,
        deflection=_source('deflection'),
        temp=_source('temporary'),
        total=read_int(child(totals, 'general')))
    touch = ArmorClassDetail(
        dex_modifier=ac.dex_modifier,
        size_modifier=ac.size_modifier,
        misc=misc + _source('touchmisc'),
        deflection=ac.deflection,
        temp=ac.temp,
        total=read_int(child(totals, 'touch')))
    flat_footed = ArmorClassDetail(
        size_modifier=ac.size_modifier,
        armor_bonus=ac.armor_bonus,
        shield_bonus=ac.shield_bonus,
        natural_armor=ac.natural_armor,
        misc=misc + _source('ffmisc'),
        deflection=ac.deflection,
        temp=ac.temp,
        total=read_int(child(totals, 'flatfooted')))
    return ac, touch, flat_footed


def process_attack_bonus(record):
    attackbonus = child(record, 'attackbonus')
    base = read_int(child(attackbonus, 'base'))

    def _attack(name):
        node = child(attackbonus, name)
        return AttackBonusDetail(
            base_attack_bonus=base,
            ability_mod=read_int(child(node, 'abilitymod')),
            size_bonus=read_int(child(node, 'size')),
            misc=read_int(child(node, 'misc')),
            temp=read_int(child(node, 'temporary')),
            total=read_int(child(node, 'total')))

    return base, _attack('melee'), _attack('ranged'), _attack('grapple')


def process_cmd(record, mapping):
    fields = CMD_FIELD_MAPPINGS[mapping]
    sources = child(record, 'ac', 'sources')
    values = dict([
        (k, read_int(child(sources, v))) for k, v in fields.items()])
    values['total'] = read_int(child(record, 'ac', 'totals', 'cmd'))
    return CmdDetail(**values)


def process_save(node):
    return SavingThrowDetail(
        base=read_int(child(node, 'base')),
        ability_mod=read_int(child(node, 'abilitymod')),
        misc=read_int(child(node, 'misc')),
        temp=read_int(child(node, 'temporary')),
        total=read_int(child(node, 'total')))


def process_saves(record):
    saves = child(record, 'saves')
    return (
        process_save(child(saves, 'fortitude')),
        process_save(child(saves, 'reflex')),
        process_save(child(saves, 'will')))


def process_initiative(record):
    node = child(record, 'initiative')
    return InitiativeDetail(
        ability_mod=read_int(child(node, 'abilitymod')),
        misc=read_int(child(node, 'misc')),
        temp=read_int(child(node, 'temporary')),
        total=read_int(child(node, 'total')))


def process_speed(record):
    node = child(record, 'speed')
    return SpeedDetail(
        base=read_int(child(node, 'base')),
        armor=read_int(child(node, 'armor')),
        misc=read_int(child(node, 'misc')),
        temp=read_int(child(node, 'temporary')),
        total=read_int(child(node, 'total')))


def process_hp(record):
    hp = child(record, 'hp')
    return {
        'hit_points': read_int(child(hp, 'total')),
        'current_hit_points': read_int(child(hp, 'current')),
        'temp_hit_points': read_int(child(hp, 'temporary')),
        'wounds': read_int(child(hp, 'wounds')),
        'nonlethal_damage': read_int(child(hp, 'nonlethal'))}


def process_defenses(record):
    defenses = child(record, 'defenses')
    return {
        'damage_reduction': read_string(child(defenses, 'damagereduction')),
        'spell_resistance': read_int(child(defenses, 'sr', 'total')),
        'resistances': read_string(child(defenses, 'resistances')),
        'immunities': read_string(child(defenses, 'immunities')),
        'special_qualities': read_string(child(defenses, 'specialqualities'))}
