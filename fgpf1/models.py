from dataclasses import dataclass, field, asdict
from typing import Optional

from fgpf1.constants import ABILITIES


@dataclass
class AbilityPerm:
    name: Optional[str] = None
    bonus_type: Optional[str] = None
    perm_num: int = 0


@dataclass
class AbilityScore:
    score: int = 0
    bonus: int = 0
    base: int = 0
    damage: int = 0
    perm: int = 0
    perms: list[AbilityPerm] = field(default_factory=list)


@dataclass
class CharacterClass:
    name: Optional[str] = None
    level: int = 0
    favored: bool = False
    skill_ranks: int = 0
    skill_ranks_used: int = 0


@dataclass
class ArmorClassDetail:
    dex_modifier: int = 0
    size_modifier: int = 0
    armor_bonus: int = 0
    shield_bonus: int = 0
    natural_armor: int = 0
    dodge: int = 0
    misc: int = 0
    deflection: int = 0
    temp: int = 0
    total: int = 0


@dataclass
class AttackBonusDetail:
    base_attack_bonus: int = 0
    ability_mod: int = 0
    size_bonus: int = 0
    misc: int = 0
    temp: int = 0
    total: int = 0


@dataclass
class CmdDetail:
    base_attack_bonus: int = 0
    str_bonus: int = 0
    dex_bonus: int = 0
    size_bonus: int = 0
    misc: int = 0
    total: int = 0


@dataclass
class SavingThrowDetail:
    base: int = 0
    ability_mod: int = 0
    misc: int = 0
    temp: int = 0
    total: int = 0


@dataclass
class InitiativeDetail:
    ability_mod: int = 0
    misc: int = 0
    temp: int = 0
    total: int = 0


@dataclass
class SpeedDetail:
    base: int = 0
    armor: int = 0
    misc: int = 0
    temp: int = 0
    total: int = 0


@dataclass
class SkillDetail:
    name: str = ""
    ability: str = ""  # three-letter abbreviation or ""
    ability_bonus: int = 0
    ranks: int = 0
    misc: int = 0
    total: int = 0


@dataclass
class FeatDetail:
    name: str = ""
    summary: str = ""
    type: str = ""
    prerequisites: str = ""
    benefit: str = ""
    normal: str = ""
    special: str = ""


@dataclass
class EquipmentItem:
    name: str = ""
    type: str = ""
    subtype: str = ""
    cost: str = ""
    weight: str = ""
    count: int = 1
    carried: int = 0
    description: str = ""
    summary: str = ""
    # Known item fields only, in ITEM_DETAIL_FIELDS order
    details: dict[str, str] = field(default_factory=dict)


@dataclass
class SpecialAbility:
    name: str = ""
    source: str = ""
    text: str = ""
    summary: str = ""


@dataclass
class Trait:
    name: str = ""
    source: str = ""
    text: str = ""
    summary: str = ""


def _abilities():
    return dict([(a, AbilityScore()) for a in ABILITIES])


@dataclass
class Character:
    """
    One player character read from a charsheet record.

    `id` is the ordinal assigned during a single enumeration pass. It is
    not a persistent identity and may change when the source file does.
    """
    id: int = 0

    name: Optional[str] = None
    race: Optional[str] = None
    alignment: Optional[str] = None
    deity: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[str] = None
    height: Optional[str] = None
    weight: Optional[str] = None
    size: Optional[str] = None

    level: int = 0
    experience: int = 0
    experience_needed: int = 0
    classes: list[CharacterClass] = field(default_factory=list)
    class_name: Optional[str] = None
    abilities: dict[str, AbilityScore] = field(default_factory=_abilities)

    armor_class: ArmorClassDetail = field(default_factory=ArmorClassDetail)
    touch_armor_class: ArmorClassDetail = field(
        default_factory=ArmorClassDetail)
    flat_footed_armor_class: ArmorClassDetail = field(
        default_factory=ArmorClassDetail)
    base_attack_bonus: int = 0
    melee_attack_bonus: AttackBonusDetail = field(
        default_factory=AttackBonusDetail)
    ranged_attack_bonus: AttackBonusDetail = field(
        default_factory=AttackBonusDetail)
    combat_maneuver_bonus: AttackBonusDetail = field(
        default_factory=AttackBonusDetail)
    combat_maneuver_defense: CmdDetail = field(default_factory=CmdDetail)
    fortitude_save: SavingThrowDetail = field(
        default_factory=SavingThrowDetail)
    reflex_save: SavingThrowDetail = field(default_factory=SavingThrowDetail)
    will_save: SavingThrowDetail = field(default_factory=SavingThrowDetail)
    initiative: InitiativeDetail = field(default_factory=InitiativeDetail)
    speed: SpeedDetail = field(default_factory=SpeedDetail)

    hit_points: int = 0
    current_hit_points: int = 0
    temp_hit_points: int = 0
    wounds: int = 0
    nonlethal_damage: int = 0
    damage_reduction: Optional[str] = None
    spell_resistance: int = 0
    resistances: Optional[str] = None
    immunities: Optional[str] = None
    special_qualities: Optional[str] = None

    # Flat name lists
    skills: list[str] = field(default_factory=list)
    feats: list[str] = field(default_factory=list)
    equipment: list[str] = field(default_factory=list)
    proficiencies: list[str] = field(default_factory=list)
    spells: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)

    skill_details: list[SkillDetail] = field(default_factory=list)
    feat_details: list[FeatDetail] = field(default_factory=list)
    inventory: list[EquipmentItem] = field(default_factory=list)
    special_abilities: list[SpecialAbility] = field(default_factory=list)
    traits: list[Trait] = field(default_factory=list)

    def to_dict(self):
        struct = {'type': 'character'}
        struct.update(asdict(self))
        return struct
