import re
from bs4 import Tag
from universal.utils import element_children, get_text

RECORD_PREFIX = "id-"
DIGITS = re.compile(r"[0-9]+")


def child(node, *path):
    for name in path:
        if node is None:
            return None
        found = None
        for c in element_children(node):
            if c.name == name:
                found = c
                break
        node = found
    return node


def parse_number(text):
    text = text.strip()
    negative = False
    if text.startswith('+'):
        text = text[1:]
    elif text.startswith('–') or text.startswith('-'):
        negative = True
        text = text[1:]
    if not DIGITS.fullmatch(text):
        raise ValueError("Not an integer: %r" % text)
    value = int(text)
    if negative:
        value = value * -1
    return value


def read_int(node, default=0):
    if node is None:
        return default
    try:
        return parse_number(get_text(node))
    except ValueError:
        return default


def read_string(node):
    if node is None:
        return None
    return get_text(node)


def read_formatted(node):
    if node is None:
        return ""
    return ''.join([str(c) for c in node.contents])


def is_record_key(node):
    return type(node) == Tag and node.name.startswith(RECORD_PREFIX)


def find_record_children(container):
    return [c for c in element_children(container) if is_record_key(c)]


def find_section(record, names):
    for c in element_children(record):
        if c.name in names:
            return c
    return None


def section_entries(record, names, leaf):
    """
    Entries of the first section of record named in names.

    Dynamic-key children win. Otherwise each direct child is an entry,
    except wrappers that only group leaf elements (<known><spell/></known>),
    which contribute those leaves instead.
    """
    container = find_section(record, names)
    if container is None:
        return []
    records = find_record_children(container)
    if records:
        return records
    entries = []
    for c in element_children(container):
        if c.name != leaf and c.find(leaf) is not None:
            entries.extend(c.find_all(leaf))
        else:
            entries.append(c)
    return entries


def attribute_or_text(node):
    name = node.get('name')
    if name is not None:
        return name
    return get_text(node)


def entry_name(entry):
    name = child(entry, 'name')
    if name is not None:
        return get_text(name)
    if entry.get('name') is None and element_children(entry):
        return ""
    return attribute_or_text(entry)


def legacy_names(record, leaf, structured=None):
    names = []
    candidates = [entry_name(e) for e in record.find_all(leaf)]
    for name in candidates + list(structured or []):
        if name and name not in names:
            names.append(name)
    return names
