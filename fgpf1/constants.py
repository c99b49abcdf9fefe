DB_FILENAME = "db.xml"
FALLBACK_DIR = "~/.fgpf1"

CHARACTER_CONTAINER = "charsheet"

ABILITIES = [
    "strength", "dexterity", "constitution",
    "intelligence", "wisdom", "charisma"]

ABILITY_ABBREVIATIONS = {
    "strength": "STR",
    "dexterity": "DEX",
    "constitution": "CON",
    "intelligence": "INT",
    "wisdom": "WIS",
    "charisma": "CHA",
}

# Which <ac><sources> field feeds each combat maneuver defense contributor.
# Exporter revisions disagree on the base modifier, so both readings are kept.
CMD_FIELD_MAPPINGS = {
    "dexterity_base": {
        "base_attack_bonus": "cmdbasemod",
        "str_bonus": "cmdabilitymod",
        "dex_bonus": "cmdbasemod",
        "size_bonus": "size",
        "misc": "cmdmisc",
    },
    "strength_base": {
        "base_attack_bonus": "cmdbasemod",
        "str_bonus": "cmdbasemod",
        "dex_bonus": "cmdabilitymod",
        "size_bonus": "size",
        "misc": "cmdmisc",
    },
}
DEFAULT_CMD_MAPPING = "dexterity_base"

TRAIT_SOURCE_PREFIX = "Trait - "

# Closed set of inventory fields passed through for display
ITEM_DETAIL_FIELDS = [
    "ac", "maxstatbonus", "checkpenalty", "spellfailure", "speed20",
    "speed30", "damage", "critical", "range", "properties", "aura", "cl",
    "prerequisites", "bonus"]

SKILL_SECTIONS = ["skilllist", "skills"]
FEAT_SECTIONS = ["featlist", "feats"]
SPECIAL_ABILITY_SECTIONS = ["specialabilitylist", "specialabilities"]
TRAIT_SECTIONS = ["traitlist", "traits"]
PROFICIENCY_SECTIONS = ["proficiencylist", "proficiencies"]
LANGUAGE_SECTIONS = ["languagelist", "languages"]
INVENTORY_SECTIONS = ["inventorylist", "inventory"]
SPELL_SECTIONS = ["spellset", "spells"]
