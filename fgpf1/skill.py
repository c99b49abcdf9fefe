from universal.universal import child, read_int, read_string
from universal.universal import section_entries, entry_name
from fgpf1.constants import ABILITY_ABBREVIATIONS, SKILL_SECTIONS
from fgpf1.models import SkillDetail
from fgpf1.stats import ability_modifier


def skill_name(entry):
    label = read_string(child(entry, 'label'))
    if label is None:
        label = entry_name(entry)
    sublabel = read_string(child(entry, 'sublabel'))
    if sublabel:
        return "%s (%s)" % (label, sublabel)
    return label


def skill_ability_bonus(ability, abilities, record):
    if ability in abilities:
        return abilities[ability].bonus
    score = child(record, 'abilities', ability, 'score') if ability else None
    if score is not None:
        return ability_modifier(read_int(score))
    return 0


def parse_skill(entry, abilities, record):
    ability = (read_string(child(entry, 'statname')) or "").strip().lower()
    ability_bonus = skill_ability_bonus(ability, abilities, record)
    ranks = read_int(child(entry, 'ranks'))
    misc = read_int(child(entry, 'misc'))
    return SkillDetail(
        name=skill_name(entry),
        ability=ABILITY_ABBREVIATIONS.get(ability, ""),
        ability_bonus=ability_bonus,
        ranks=ranks,
        misc=misc,
        total=ranks + ability_bonus + misc)


def process_skills(record, abilities):
    return [parse_skill(e, abilities, record)
            for e in section_entries(record, SKILL_SECTIONS, 'skill')]
