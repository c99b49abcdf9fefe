from universal.universal import child, read_int, read_string, read_formatted
from universal.universal import section_entries, entry_name
from universal.utils import summarize
from fgpf1.constants import INVENTORY_SECTIONS, ITEM_DETAIL_FIELDS
from fgpf1.models import EquipmentItem


def item_details(entry):
    details = {}
    for field in ITEM_DETAIL_FIELDS:
        value = read_string(child(entry, field))
        if value is not None:
            details[field] = value
    return details


def parse_item(entry):
    def _string(name):
        return read_string(child(entry, name)) or ""

    description = read_formatted(child(entry, 'description'))
    return EquipmentItem(
        name=entry_name(entry),
        type=_string('type'),
        subtype=_string('subtype'),
        cost=_string('cost'),
        weight=_string('weight'),
        count=read_int(child(entry, 'count'), 1),
        carried=read_int(child(entry, 'carried')),
        description=description,
        summary=summarize(description),
        details=item_details(entry))


def process_inventory(record):
    return [parse_item(e)
            for e in section_entries(record, INVENTORY_SECTIONS, 'item')]
