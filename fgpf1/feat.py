from universal.universal import child, read_string, read_formatted
from universal.universal import section_entries, entry_name
from fgpf1.constants import FEAT_SECTIONS
from fgpf1.models import FeatDetail


def parse_feat(entry):
    def _string(name):
        return read_string(child(entry, name)) or ""

    return FeatDetail(
        name=entry_name(entry),
        summary=_string('summary'),
        type=_string('type'),
        prerequisites=_string('prerequisites'),
        benefit=read_formatted(child(entry, 'benefit')),
        normal=read_formatted(child(entry, 'normal')),
        special=read_formatted(child(entry, 'special')))


def process_feats(record):
    return [parse_feat(e)
            for e in section_entries(record, FEAT_SECTIONS, 'feat')]
